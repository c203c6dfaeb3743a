"""
Database connection handling for PostgreSQL.
Wraps an async SQLAlchemy engine in an explicitly constructed query-execution handle.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import Integer, bindparam, text
from lightbnb.config import Settings, get_settings
import logging
from typing import Any, Dict, List, Optional, Protocol, Sequence

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all database models.
    Tables use serial integer primary keys.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def __repr__(self) -> str:
        """String representation of the model."""
        return f"<{self.__class__.__name__}(id={self.id})>"


class QueryExecutor(Protocol):
    """Anything able to run one statement with positional parameters."""

    async def execute(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        ...


def bind_positional(params: Sequence[Any]) -> Dict[str, Any]:
    """Map an ordered parameter list onto the :p1 ... :pN placeholders."""
    return {f"p{position}": value for position, value in enumerate(params, start=1)}


class Database:
    """
    Query-execution handle over a pooled async engine.

    The owner creates it, passes it to the repositories and closes it;
    nothing here is process-global.
    """

    def __init__(self, settings: Optional[Settings] = None, url: Optional[str] = None, engine: Optional[AsyncEngine] = None):
        self.settings = settings or get_settings()
        if engine is not None:
            self.engine = engine
        else:
            self.engine = self._create_engine(url or self.settings.sqlalchemy_url)

    def _create_engine(self, url: str) -> AsyncEngine:
        if url.startswith("sqlite"):
            # SQLite has no server-side pool to tune
            return create_async_engine(url, echo=self.settings.debug)

        return create_async_engine(
            url,
            echo=self.settings.debug,
            pool_size=self.settings.db_pool_size,
            max_overflow=self.settings.db_max_overflow,
            pool_pre_ping=True,
            pool_recycle=self.settings.db_pool_recycle,
            connect_args={
                "server_settings": {
                    "application_name": "lightbnb",
                }
            }
        )

    async def execute(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """
        Run one statement in its own transaction.

        Args:
            sql: Statement text using :p1 ... :pN placeholders
            params: Values bound to the placeholders by position

        Returns:
            Result rows as dictionaries, empty when the statement returns no rows
        """
        # Typed binds let each dialect adapt dates and decimals (SQLite stores them as text/float)
        statement = text(sql).bindparams(
            *[bindparam(key, value) for key, value in bind_positional(params).items()]
        )
        async with self.engine.begin() as conn:
            result = await conn.execute(statement)
            if not result.returns_rows:
                return []
            # Later columns win on duplicate names, e.g. reservations.* joined with properties.*
            keys = list(result.keys())
            return [dict(zip(keys, row)) for row in result.all()]

    async def ping(self) -> bool:
        """
        Test database connectivity.
        Returns True if connection is successful, False otherwise.
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            logger.info("Database connection successful")
            return True
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            return False

    async def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        await self.engine.dispose()
        logger.info("Database connections closed")

    async def __aenter__(self) -> "Database":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all tables defined on Base.
    Used by test fixtures to prepare a scratch database.
    """
    # Register the models on Base.metadata
    import lightbnb.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created successfully")


async def drop_tables(engine: AsyncEngine) -> None:
    """Drop all tables defined on Base."""
    import lightbnb.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        logger.info("Database tables dropped successfully")
