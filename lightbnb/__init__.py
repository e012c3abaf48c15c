"""
LightBnB data-access layer.
Async query functions for users, reservations and properties.
"""

from lightbnb.database import Database
from lightbnb.queries import (
    add_property,
    add_user,
    get_all_properties,
    get_all_reservations,
    get_user_with_email,
    get_user_with_id,
)

__version__ = "1.0.0"

__all__ = [
    "Database",
    "add_property",
    "add_user",
    "get_all_properties",
    "get_all_reservations",
    "get_user_with_email",
    "get_user_with_id",
]
