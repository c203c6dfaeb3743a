"""
Base repository class with the statement execution path shared by all repositories.
Every operation issues exactly one statement through the injected query executor.
"""

from lightbnb.database import QueryExecutor
from lightbnb.utils.exceptions import QueryFailed
from typing import Any, Dict, List, Optional, Sequence
import logging

logger = logging.getLogger(__name__)


class BaseRepository:
    """
    Base repository holding the query executor.
    Converts any execution failure into QueryFailed, keeping the original error as the cause.
    """

    def __init__(self, db: QueryExecutor):
        """
        Initialize repository with a query executor.

        Args:
            db: Object exposing `await execute(sql, params) -> rows`, usually a Database
        """
        self.db = db

    async def fetch_all(self, operation: str, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """
        Execute a statement and return every row.

        Args:
            operation: Name of the calling operation, used in logs and errors
            sql: Statement text with :p1 ... :pN placeholders
            params: Values bound to the placeholders by position

        Returns:
            List of rows as dictionaries

        Raises:
            QueryFailed: If the statement could not be executed
        """
        try:
            rows = await self.db.execute(sql, list(params))
        except QueryFailed:
            raise
        except Exception as e:
            logger.error(f"{operation} failed: {e}")
            raise QueryFailed(operation, str(e)) from e

        logger.debug(f"{operation} returned {len(rows)} rows")
        return rows

    async def fetch_one(self, operation: str, sql: str, params: Sequence[Any] = ()) -> Optional[Dict[str, Any]]:
        """
        Execute a statement and return its first row, or None when there is none.

        Raises:
            QueryFailed: If the statement could not be executed
        """
        rows = await self.fetch_all(operation, sql, params)
        return rows[0] if rows else None


def as_id(value: Any, name: str = "id") -> int:
    """
    Coerce a record id to int; web forms and URLs hand ids over as strings.

    Raises:
        ValueError: If the value is not an integer id
    """
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def check_limit(limit: Any) -> int:
    """
    Validate a result limit.

    Raises:
        ValueError: If limit is not a positive integer
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
    return limit


def with_float_rating(row: Dict[str, Any]) -> Dict[str, Any]:
    """Convert the AVG() result (Decimal on PostgreSQL) to float, leaving None for unreviewed properties."""
    rating = row.get("average_rating")
    if rating is not None:
        row["average_rating"] = float(rating)
    return row
