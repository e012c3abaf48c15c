"""
Repository layer for data access operations.
"""

from lightbnb.repositories.base import BaseRepository
from lightbnb.repositories.property import (
    PropertyRepository,
    build_filter_conditions,
    build_property_search_query,
)
from lightbnb.repositories.reservation import ReservationRepository
from lightbnb.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "PropertyRepository",
    "ReservationRepository",
    "UserRepository",
    "build_filter_conditions",
    "build_property_search_query",
]
