"""
Validation helpers shared by the data-access functions.
"""

from lightbnb.config import Settings, get_settings
from lightbnb.utils.exceptions import InvalidLimitError
from typing import Optional


def validate_limit(limit: Optional[int], settings: Optional[Settings] = None) -> int:
    """
    Resolve and check a row limit.

    Args:
        limit: Requested number of rows; None means Settings.default_limit
        settings: Settings to read defaults from, get_settings() if omitted

    Returns:
        The limit as an int. 0 is allowed and yields no rows.

    Raises:
        InvalidLimitError: If limit is not a non-negative int, or exceeds
                           Settings.max_limit when one is configured
    """
    settings = settings or get_settings()

    if limit is None:
        return settings.default_limit

    # bool is an int subclass but never a meaningful row count
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise InvalidLimitError(limit, settings.max_limit)
    if limit < 0:
        raise InvalidLimitError(limit, settings.max_limit)
    if settings.max_limit is not None and limit > settings.max_limit:
        raise InvalidLimitError(limit, settings.max_limit)
    return limit
