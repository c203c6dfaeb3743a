"""
Pydantic schemas for property records and search options.
Handles the 14-field property payload and the optional listing filters.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional
from decimal import Decimal

# Column order of the properties insert
PROPERTY_FIELDS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)


class PropertyCreate(BaseModel):
    """Schema for creating a new property listing."""

    owner_id: int = Field(..., description="ID of the owning user", examples=[3])

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Property listing title",
        examples=["Speed lamp"]
    )

    description: str = Field(
        "",
        description="Detailed property description",
    )

    thumbnail_photo_url: str = Field(..., max_length=255)
    cover_photo_url: str = Field(..., max_length=255)

    cost_per_night: int = Field(
        ...,
        ge=0,
        description="Nightly price in cents",
        examples=[93061]
    )

    # Address
    street: str = Field(..., max_length=255)
    city: str = Field(..., max_length=255, examples=["Vancouver"])
    province: str = Field(..., max_length=255)
    post_code: str = Field(..., max_length=255)
    country: str = Field(..., max_length=255, examples=["Canada"])

    # Property specifications
    parking_spaces: int = Field(0, ge=0)
    number_of_bathrooms: int = Field(0, ge=0)
    number_of_bedrooms: int = Field(0, ge=0)

    def ordered_values(self) -> list:
        """Field values in insert column order."""
        return [getattr(self, field) for field in PROPERTY_FIELDS]


class PropertySearchOptions(BaseModel):
    """
    Optional filters for listing properties.

    Prices are in major currency units; the query builder converts them to cents.
    Empty strings, as sent by blank form fields, count as absent.
    """

    city: Optional[str] = Field(
        None,
        max_length=255,
        description="Substring of the city name, matched case-insensitively",
        examples=["van"]
    )

    owner_id: Optional[int] = Field(
        None,
        description="Only properties owned by this user",
    )

    minimum_price_per_night: Optional[Decimal] = Field(
        None,
        ge=0,
        description="Minimum nightly price in major units",
        examples=[50]
    )

    maximum_price_per_night: Optional[Decimal] = Field(
        None,
        ge=0,
        description="Maximum nightly price in major units",
        examples=[200]
    )

    minimum_rating: Optional[float] = Field(
        None,
        ge=0,
        le=5,
        description="Minimum average review rating",
        examples=[4]
    )

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Treat blank form values as missing."""
        if isinstance(v, str) and not v.strip():
            return None
        return v
