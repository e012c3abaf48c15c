"""
Utility helpers for the data-access layer.
"""

from lightbnb.utils.exceptions import LightBnBError, UnknownColumnError, InvalidLimitError

__all__ = [
    "LightBnBError",
    "UnknownColumnError",
    "InvalidLimitError",
]
