"""
MongoDB integration.

``MongoManager`` owns the ``AsyncIOMotorClient`` for the lifetime of the
application: ``initialize`` is called from the startup hook and
``close`` from the shutdown hook.  The client connects lazily, so
creating it does not require a reachable server; the first query does.
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from .config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class MongoManager:
    """Holds the MongoDB client and hands out the people collection."""

    def __init__(self, config: Optional[Settings] = None) -> None:
        self.config = config or default_settings
        self.client: Optional[AsyncIOMotorClient] = None

    async def initialize(self) -> None:
        """Open the client.  Calling it twice keeps the first client."""
        if self.client is not None:
            return
        logger.info(
            "Connecting to MongoDB database '%s'", self.config.mongodb_database
        )
        self.client = AsyncIOMotorClient(self.config.mongodb_uri)

    def get_collection(self) -> AsyncIOMotorCollection:
        """Return the configured people collection.

        Raises ``RuntimeError`` if ``initialize`` has not been awaited.
        """
        if self.client is None:
            raise RuntimeError("MongoManager.initialize() must be awaited first")
        return self.client[self.config.mongodb_database][self.config.mongodb_collection]

    async def close(self) -> None:
        if self.client is not None:
            logger.info("Closing MongoDB connection")
            self.client.close()
            self.client = None
