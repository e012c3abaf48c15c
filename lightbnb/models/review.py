"""
Property review model. Ratings feed the average_rating of listings.
"""

from sqlalchemy import ForeignKey, Integer, SmallInteger, Text
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base
from typing import Optional


class PropertyReview(Base):
    """Guest review of a property after a stay."""

    __tablename__ = "property_reviews"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    guest_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=True
    )

    property_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("properties.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    reservation_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("reservations.id", ondelete="CASCADE"),
        nullable=True
    )

    rating: Mapped[int] = mapped_column(
        SmallInteger,
        nullable=False,
        default=0,
        comment="Rating from 0 to 5"
    )

    message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<PropertyReview(id={self.id}, property_id={self.property_id}, rating={self.rating})>"
