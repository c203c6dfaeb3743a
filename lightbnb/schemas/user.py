"""
Pydantic schemas for user records.
"""

from pydantic import BaseModel, Field, field_validator


class UserCreate(BaseModel):
    """Schema for creating a new user. The password is expected to be hashed already."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="User's display name",
        examples=["Devin Sanders"]
    )

    email: str = Field(
        ...,
        max_length=255,
        description="User's email address",
        examples=["tristanjacobs@gmail.com"]
    )

    password: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Password hash",
    )

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        """Normalize email to lowercase so lookups by email match."""
        v = v.strip().lower()
        if "@" not in v:
            raise ValueError("Email address must contain '@'")
        return v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()
