"""
Database models for the LightBnB data layer.
Includes User, Property, Reservation and PropertyReview tables.
"""

from lightbnb.models.user import User
from lightbnb.models.property import Property
from lightbnb.models.reservation import Reservation, PropertyReview

__all__ = [
    "User",
    "Property",
    "Reservation",
    "PropertyReview",
]
