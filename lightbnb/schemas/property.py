"""
Pydantic schemas for property search criteria.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional


class PropertySearchOptions(BaseModel):
    """
    Optional filters for property search.
    Values arriving as strings (e.g. from a query string) are coerced to
    numbers, and blank strings count as not supplied.
    """

    model_config = {"extra": "ignore"}

    city: Optional[str] = Field(
        None,
        max_length=255,
        description="Partial, wildcarded match on the city name"
    )

    owner_id: Optional[int] = Field(
        None,
        description="Only properties owned by this user"
    )

    minimum_price_per_night: Optional[int] = Field(
        None,
        description="Inclusive lower bound on cost_per_night"
    )

    maximum_price_per_night: Optional[int] = Field(
        None,
        description="Inclusive upper bound on cost_per_night"
    )

    minimum_rating: Optional[float] = Field(
        None,
        description="Minimum average review rating"
    )

    @field_validator(
        "city",
        "owner_id",
        "minimum_price_per_night",
        "maximum_price_per_night",
        "minimum_rating",
        mode="before"
    )
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("city")
    @classmethod
    def strip_city(cls, v):
        return v.strip() if v is not None else v
