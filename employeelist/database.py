"""
MongoDB connection handle.

The Motor client is opened once at startup by the application lifespan,
kept on ``app.state.database`` and closed at shutdown. Request handlers
reach it through the dependencies in ``employeelist.utils.dependencies``.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class Collections:
    """Collection names, single source of truth."""

    EMPLOYEES = "employees"


class Database:
    """Explicitly constructed MongoDB client handle."""

    def __init__(self, uri: str, db_name: str, timeout_ms: int = 5000):
        self.uri = uri
        self.db_name = db_name
        self.timeout_ms = timeout_ms
        self.client: Optional[AsyncIOMotorClient] = None

    async def connect(self) -> None:
        """
        Create the client and check the server is reachable.

        An unreachable server is logged, not raised: the process keeps
        serving and store calls fail per request until MongoDB is back.
        """
        self.client = AsyncIOMotorClient(
            self.uri,
            tz_aware=True,
            serverSelectionTimeoutMS=self.timeout_ms
        )
        try:
            await self.client.admin.command("ping")
            logger.info(f"✅ MongoDB connected: database={self.db_name}")
        except PyMongoError as e:
            logger.error(f"❌ MongoDB connection error: {e}")

    async def close(self) -> None:
        if self.client is not None:
            self.client.close()
            self.client = None
            logger.info("MongoDB connection closed")

    def get_db(self) -> AsyncIOMotorDatabase:
        if self.client is None:
            raise RuntimeError("Database not connected; call connect() first")
        return self.client[self.db_name]

    def collection(self, name: str) -> AsyncIOMotorCollection:
        return self.get_db()[name]

    async def ping(self) -> bool:
        """Return True when the server answers a ping."""
        if self.client is None:
            return False
        try:
            await self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False
