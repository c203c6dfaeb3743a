"""
Pydantic schemas for validating data layer inputs.
"""

# User schemas
from .user import UserCreate

# Property schemas
from .property import (
    PROPERTY_FIELDS,
    PropertyCreate,
    PropertySearchOptions
)

__all__ = [
    "UserCreate",
    "PROPERTY_FIELDS",
    "PropertyCreate",
    "PropertySearchOptions",
]
