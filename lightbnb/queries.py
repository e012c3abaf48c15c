"""
Data-access functions for LightBnB.

Each function takes an open Database handle, runs its statement on a session
of its own and returns plain records (dicts). Database errors propagate to
the caller unchanged.
"""

from lightbnb.database import Database
from lightbnb.repositories.property import PropertyRepository, SearchOptions
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository
from lightbnb.schemas.user import UserCreate
from lightbnb.utils.validators import validate_limit
from typing import Any, Dict, List, Mapping, Optional, Union
import logging

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def _rating(value: Optional[Any]) -> Optional[float]:
    return float(value) if value is not None else None


# Users

async def get_user_with_email(db: Database, email: str) -> Optional[Record]:
    """
    Get a single user given their email, ignoring case.

    Returns:
        The user record, or None
    """
    async with db.session() as session:
        user = await UserRepository(session).get_by_email(email)
        return user.to_dict() if user else None


async def get_user_with_id(db: Database, user_id: int) -> Optional[Record]:
    """
    Get a single user given their id.

    Returns:
        The user record, or None
    """
    async with db.session() as session:
        user = await UserRepository(session).get_by_id(user_id)
        return user.to_dict() if user else None


async def add_user(db: Database, user: Union[UserCreate, Mapping[str, Any]]) -> Record:
    """
    Add a new user.

    Args:
        db: Open database handle
        user: name, email and password

    Returns:
        The stored user record including its new id
    """
    async with db.session() as session:
        created = await UserRepository(session).create_user(user)
        return created.to_dict()


# Reservations

async def get_all_reservations(
    db: Database,
    guest_id: int,
    limit: Optional[int] = None
) -> List[Record]:
    """
    Get a guest's past reservations with property details.

    Each record holds the property columns, then the reservation columns
    (so "id" is the reservation id), then "average_rating". limit defaults
    to Settings.default_limit.
    """
    limit = validate_limit(limit)

    async with db.session() as session:
        rows = await ReservationRepository(session).get_past_reservations(guest_id, limit)

    return [
        {
            **property_obj.to_dict(),
            **reservation.to_dict(),
            "average_rating": _rating(rating),
        }
        for reservation, property_obj, rating in rows
    ]


# Properties

async def get_all_properties(
    db: Database,
    options: SearchOptions = None,
    limit: Optional[int] = None
) -> List[Record]:
    """
    Search properties.

    Args:
        db: Open database handle
        options: Optional criteria: city, owner_id, minimum_price_per_night,
                 maximum_price_per_night, minimum_rating
        limit: Maximum number of results, Settings.default_limit when None

    Returns:
        Property records with "average_rating", cheapest first
    """
    limit = validate_limit(limit)

    async with db.session() as session:
        rows = await PropertyRepository(session).search_properties(options, limit)

    return [
        {**property_obj.to_dict(), "average_rating": _rating(rating)}
        for property_obj, rating in rows
    ]


async def add_property(db: Database, property: Mapping[str, Any]) -> Record:
    """
    Add a property.

    Args:
        db: Open database handle
        property: Column names mapped to values

    Returns:
        The stored property record including its new id

    Raises:
        UnknownColumnError: If a key is not a property column
    """
    async with db.session() as session:
        created = await PropertyRepository(session).create_property(property)
        return created.to_dict()
