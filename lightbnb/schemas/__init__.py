"""
Pydantic schemas for data-access input validation.
"""

from lightbnb.schemas.user import UserCreate
from lightbnb.schemas.property import PropertySearchOptions

__all__ = [
    "UserCreate",
    "PropertySearchOptions",
]
