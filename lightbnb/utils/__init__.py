"""
Utility modules for the LightBnB data layer.
"""

from .exceptions import (
    DataAccessError,
    QueryFailed
)

from .query_builder import (
    BuiltQuery,
    FilteredQueryBuilder,
    Predicate
)

__all__ = [
    "DataAccessError",
    "QueryFailed",
    "BuiltQuery",
    "FilteredQueryBuilder",
    "Predicate",
]
