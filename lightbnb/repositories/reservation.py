"""
Reservation repository for a guest's past stays.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import Float, func, select
from lightbnb.repositories.base import BaseRepository
from lightbnb.models.reservation import Reservation
from lightbnb.models.property import Property
from lightbnb.models.review import PropertyReview
from typing import List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)


class ReservationRepository(BaseRepository[Reservation]):
    """Repository for reservations."""

    def __init__(self, db: AsyncSession):
        super().__init__(Reservation, db)

    async def get_past_reservations(
        self,
        guest_id: int,
        limit: int = 10
    ) -> List[Tuple[Reservation, Property, Optional[float]]]:
        """
        Get a guest's reservations that ended before today.

        Args:
            guest_id: ID of the guest
            limit: Maximum number of reservations to return

        Returns:
            List of (reservation, property, average rating) ordered by start date
        """
        try:
            query = (
                select(
                    Reservation,
                    Property,
                    func.avg(PropertyReview.rating, type_=Float).label("average_rating"),
                )
                .join(Property, Reservation.property_id == Property.id)
                .join(PropertyReview, Property.id == PropertyReview.property_id)
                .where(
                    Reservation.guest_id == guest_id,
                    Reservation.end_date < func.current_date(),
                )
                .group_by(Reservation.id, Property.id)
                .order_by(Reservation.start_date)
                .limit(limit)
            )

            result = await self.db.execute(query)
            rows = [(row[0], row[1], row[2]) for row in result.all()]

            logger.debug(f"Retrieved {len(rows)} past reservations for guest {guest_id}")
            return rows
        except Exception as e:
            logger.error(f"Failed to get reservations for guest {guest_id}: {e}")
            raise
