"""
Custom exception classes for the LightBnB data-access layer.
Driver and database errors are not wrapped; these cover input the layer
rejects before any SQL is sent.
"""

from typing import Iterable, Optional


class LightBnBError(Exception):
    """Base exception class."""

    def __init__(self, detail: str, error_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code


class UnknownColumnError(LightBnBError, ValueError):
    """A record contained keys that are not writable columns."""

    def __init__(self, table: str, columns: Iterable[str]):
        self.table = table
        self.columns = sorted(columns)
        super().__init__(
            detail=f"Unknown column(s) for {table}: {', '.join(self.columns)}",
            error_code="UNKNOWN_COLUMN"
        )


class InvalidLimitError(LightBnBError, ValueError):
    """Row limit outside the accepted range."""

    def __init__(self, limit, max_limit: Optional[int] = None):
        self.limit = limit
        self.max_limit = max_limit
        if max_limit is None:
            detail = f"Limit must be a non-negative integer, got {limit!r}"
        else:
            detail = f"Limit must be between 0 and {max_limit}, got {limit!r}"
        super().__init__(
            detail=detail,
            error_code="INVALID_LIMIT"
        )
