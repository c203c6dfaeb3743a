"""
LightBnB data access layer.
"""

from lightbnb.config import Settings, get_settings
from lightbnb.database import Database
from lightbnb.main import LightBnBData, open_data_layer
from lightbnb.utils.exceptions import DataAccessError, QueryFailed

__version__ = "1.0.0"

__all__ = [
    "Settings",
    "get_settings",
    "Database",
    "LightBnBData",
    "open_data_layer",
    "DataAccessError",
    "QueryFailed",
]
