"""
Property model for rental listings.
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from lightbnb.database import Base
from typing import FrozenSet, Optional


class Property(Base):
    """
    Rental listing owned by a user.
    Every descriptive column is optional so partial listings can be stored.
    """

    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    owner_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
        comment="ID of the user who owns this property"
    )

    # Listing details
    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    thumbnail_photo_url: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    cover_photo_url: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    cost_per_night: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        index=True,
        comment="Nightly price in the smallest currency unit"
    )

    parking_spaces: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_bathrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    number_of_bedrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Address
    country: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    street: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, index=True)
    province: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    post_code: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    @classmethod
    def writable_columns(cls) -> FrozenSet[str]:
        """Column names a caller may set when creating a listing."""
        return frozenset(
            column.key for column in cls.__table__.columns if not column.primary_key
        )

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, city={self.city}, cost_per_night={self.cost_per_night})>"
