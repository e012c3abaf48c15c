"""
Pydantic schemas for user input.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator


class UserCreate(BaseModel):
    """Fields required to register a user."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="User's display name",
        examples=["Devin Sanders"]
    )

    email: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["tristanjacobs@gmail.com"]
    )

    password: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Password, stored as supplied"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        """Validate and clean name."""
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        """Emails are stored lowercased."""
        return v.lower()
