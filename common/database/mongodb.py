"""
Async MongoDB connection held for the lifetime of the application.

Services receive the Motor database from `MongoDB.db` and work on raw
collections; Beanie is initialised with whatever document models the
caller registers (none for CookBook).
"""

import logging
from typing import List, Type, Optional

from beanie import init_beanie, Document
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

logger = logging.getLogger(__name__)


class MongoDB:
    """Owns the Motor client for one database."""

    def __init__(self):
        self._client: Optional[AsyncIOMotorClient] = None
        self._database_name: Optional[str] = None
        self._initialized: bool = False

    async def connect(
        self,
        uri: str,
        database_name: str,
        document_models: Optional[List[Type[Document]]] = None,
    ) -> None:
        """
        Open the client and initialise Beanie.

        Args:
            uri: MongoDB connection string
            database_name: Database to bind
            document_models: Beanie Document classes to register (may be empty)
        """
        document_models = document_models or []

        # Credentials stay out of the logs
        masked_uri = uri.split("@")[-1] if "@" in uri else uri
        logger.info(f"Connecting to MongoDB: {masked_uri}")

        try:
            self._client = AsyncIOMotorClient(uri)
            self._database_name = database_name
            await init_beanie(
                database=self._client[database_name],
                document_models=document_models,
            )
            self._initialized = True
            logger.info(f"Connected to MongoDB database: {database_name}")
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise

    async def disconnect(self) -> None:
        """Close the client if one is open."""
        if self._client:
            logger.info(f"Disconnecting from MongoDB database: {self._database_name}")
            self._client.close()
            self._client = None
            self._database_name = None
            self._initialized = False

    async def ping(self) -> bool:
        """Run the server ping command; False when unreachable or not connected."""
        if not self._client:
            return False
        try:
            await self._client.admin.command("ping")
            return True
        except Exception as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    @property
    def is_connected(self) -> bool:
        return self._initialized

    @property
    def db(self) -> AsyncIOMotorDatabase:
        """The bound Motor database; raises RuntimeError before connect()."""
        if not self._client or not self._database_name:
            raise RuntimeError("Database not connected")
        return self._client[self._database_name]
