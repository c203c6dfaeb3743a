"""
Custom exception classes for the LightBnB data layer.
Every statement failure reaches the caller as a QueryFailed carrying the driver error as its cause.
"""

from typing import Optional


class DataAccessError(Exception):
    """Base data layer exception class."""

    def __init__(self, detail: str, error_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code


class QueryFailed(DataAccessError):
    """A statement issued by a data layer operation could not be executed."""

    def __init__(self, operation: str, detail: str):
        super().__init__(
            detail=f"{operation} failed: {detail}",
            error_code="QUERY_FAILED"
        )
        self.operation = operation
