"""
Document store connection management for MongoDB.
Wraps a single async pymongo client whose pool is shared by every request.
"""

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError
from gohome.config import Settings
import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
HOUSES_COLLECTION = "houses"
BOOKED_COLLECTION = "booked"
BOOKING_COUNTERS_COLLECTION = "booking_counters"


class Database:
    """
    Handle to the go-home database.
    Created once at startup and handed to handlers through `get_database`.
    """

    def __init__(self, client: Any, name: str):
        self.client = client
        self.db = client[name]
        self.name = name

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """Build a handle from application settings. The client connects lazily."""
        client = AsyncMongoClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.server_selection_timeout_ms,
            appname=settings.app_name,
            tz_aware=True,
        )
        return cls(client, settings.database_name)

    @property
    def users(self):
        return self.db[USERS_COLLECTION]

    @property
    def houses(self):
        return self.db[HOUSES_COLLECTION]

    @property
    def booked(self):
        return self.db[BOOKED_COLLECTION]

    @property
    def booking_counters(self):
        return self.db[BOOKING_COUNTERS_COLLECTION]

    async def ping(self) -> bool:
        """
        Test document store connectivity.
        Returns True if the server answers a ping, False otherwise.
        """
        try:
            await self.client.admin.command("ping")
            logger.info("Pinged your deployment. You successfully connected to MongoDB!")
            return True
        except PyMongoError as e:
            logger.error(f"Database ping failed: {e}")
            return False

    async def close(self) -> None:
        """Close the client and its connection pool."""
        await self.client.close()
        logger.info("Database connections closed")


def get_database(request: Request) -> Database:
    """
    Dependency returning the database handle attached at startup.

    Raises:
        RuntimeError: If the application lifespan has not created a handle
    """
    database: Optional[Database] = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database handle is not initialised")
    return database
