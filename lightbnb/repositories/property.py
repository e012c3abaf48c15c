"""
Property repository for listing search and creation.
Search filters are collected into a list of predicates and bound parameters
before the statement is assembled.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import Float, Select, and_, func, select
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.property import Property
from lightbnb.models.review import PropertyReview
from lightbnb.schemas.property import PropertySearchOptions
from lightbnb.utils.exceptions import UnknownColumnError
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
import logging

logger = logging.getLogger(__name__)

SearchOptions = Union[PropertySearchOptions, Mapping[str, Any], None]

# Mean rating over the joined reviews
average_rating = func.avg(PropertyReview.rating, type_=Float)


def coerce_search_options(options: SearchOptions) -> PropertySearchOptions:
    """Accept a PropertySearchOptions, a plain mapping or None."""
    if options is None:
        return PropertySearchOptions()
    if isinstance(options, PropertySearchOptions):
        return options
    return PropertySearchOptions.model_validate(dict(options))


def build_filter_conditions(options: PropertySearchOptions) -> List:
    """
    Build the WHERE predicates for a property search.

    Predicates are appended in a fixed order: city, owner, minimum price,
    maximum price. Values are bound parameters.

    Args:
        options: Validated search options

    Returns:
        List of SQLAlchemy conditions, empty when no filter applies
    """
    conditions = []

    # City filter (partial match)
    if options.city:
        conditions.append(Property.city.like(f"%{options.city}%"))

    # Owner filter
    if options.owner_id is not None:
        conditions.append(Property.owner_id == options.owner_id)

    # Price range filters
    if options.minimum_price_per_night is not None:
        conditions.append(Property.cost_per_night >= options.minimum_price_per_night)
    if options.maximum_price_per_night is not None:
        conditions.append(Property.cost_per_night <= options.maximum_price_per_night)

    return conditions


def build_property_search_query(options: SearchOptions = None, limit: int = 10) -> Select:
    """
    Assemble the property search statement.

    Args:
        options: Search criteria; None or an empty mapping means no filters
        limit: Maximum number of rows

    Returns:
        Select yielding (Property, average_rating) rows, cheapest first
    """
    options = coerce_search_options(options)

    query = (
        select(Property, average_rating.label("average_rating"))
        .join(PropertyReview, Property.id == PropertyReview.property_id)
    )

    # A single WHERE, only when at least one predicate was collected
    conditions = build_filter_conditions(options)
    if conditions:
        query = query.where(and_(*conditions))

    query = query.group_by(Property.id)

    if options.minimum_rating is not None:
        query = query.having(average_rating >= options.minimum_rating)

    return query.order_by(Property.cost_per_night).limit(limit)


class PropertyRepository(BaseRepository[Property]):
    """Repository for property listings."""

    def __init__(self, db: AsyncSession):
        super().__init__(Property, db)

    async def search_properties(
        self,
        options: SearchOptions = None,
        limit: int = 10
    ) -> List[Tuple[Property, Optional[float]]]:
        """
        Search properties with optional filtering.

        Args:
            options: PropertySearchOptions or mapping of search criteria
            limit: Maximum number of records to return

        Returns:
            List of (property, average rating) pairs ordered by cost_per_night
        """
        try:
            query = build_property_search_query(options, limit)
            result = await self.db.execute(query)
            rows = [(row[0], row[1]) for row in result.all()]

            logger.debug(f"Property search returned {len(rows)} results")
            return rows
        except Exception as e:
            logger.error(f"Failed to search properties: {e}")
            raise

    async def create_property(self, property_data: Mapping[str, Any]) -> Property:
        """
        Create a new property from a mapping of column names to values.

        Args:
            property_data: Column values; every key must be a writable column

        Returns:
            Created property instance

        Raises:
            UnknownColumnError: If a key is not a writable property column
            Exception: If database operation fails
        """
        values: Dict[str, Any] = dict(property_data)

        unknown = set(values) - Property.writable_columns()
        if unknown:
            logger.error(f"Rejected property with unknown columns: {sorted(unknown)}")
            raise UnknownColumnError(Property.__tablename__, unknown)

        created_property = await self.create(values)
        logger.info(f"Created property in {created_property.city} (ID: {created_property.id})")
        return created_property
