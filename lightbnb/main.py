"""
Data layer entry point.
Wires a Database to the repositories and exposes the operations used by the web front end.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Mapping, Optional, Union
import logging

from lightbnb.config import Settings, get_settings
from lightbnb.database import Database, QueryExecutor
from lightbnb.repositories import PropertyRepository, ReservationRepository, UserRepository
from lightbnb.repositories.property import SearchOptions
from lightbnb.schemas import PropertyCreate, UserCreate

logger = logging.getLogger(__name__)


class LightBnBData:
    """
    Users, reservations and properties over one query executor.

    The executor is owned by the caller; this object never opens or closes it.
    """

    def __init__(self, db: QueryExecutor):
        self.db = db
        self.users = UserRepository(db)
        self.reservations = ReservationRepository(db)
        self.properties = PropertyRepository(db)

    # Users

    async def get_user_with_email(self, email: Optional[str]) -> Optional[Dict[str, Any]]:
        return await self.users.get_user_with_email(email)

    async def get_user_with_id(self, user_id: int) -> Optional[Dict[str, Any]]:
        return await self.users.get_user_with_id(user_id)

    async def add_user(self, user: Union[UserCreate, Mapping[str, Any]]) -> Dict[str, Any]:
        return await self.users.add_user(user)

    # Reservations

    async def get_all_reservations(self, guest_id: int, limit: int = 10) -> List[Dict[str, Any]]:
        return await self.reservations.get_all_reservations(guest_id, limit)

    # Properties

    async def get_all_properties(self, options: SearchOptions = None, limit: int = 10) -> List[Dict[str, Any]]:
        return await self.properties.get_all_properties(options, limit)

    async def add_property(self, property_data: Union[PropertyCreate, Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
        return await self.properties.add_property(property_data)


@asynccontextmanager
async def open_data_layer(settings: Optional[Settings] = None) -> AsyncIterator[LightBnBData]:
    """
    Open a Database for the duration of the block.
    Handles startup and shutdown logging the way an application lifespan would.
    """
    settings = settings or get_settings()
    logger.info(f"Opening LightBnB data layer ({settings.environment})")

    db = Database(settings)
    if not await db.ping():
        logger.error("Failed to connect to database on startup")

    try:
        yield LightBnBData(db)
    finally:
        logger.info("Closing LightBnB data layer")
        await db.close()
