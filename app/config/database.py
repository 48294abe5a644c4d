"""
Database configuration and connection management for MongoDB
"""
import asyncio
import logging
import os
from typing import Optional

from dotenv import load_dotenv
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from app.utils.errors import StoreConnectionError

load_dotenv()

logger = logging.getLogger(__name__)


class DatabaseConfig:
    """MongoDB database configuration

    The client and the ideas collection are created on first use and cached
    for the lifetime of the process.
    """

    def __init__(self):
        self.DATABASE_URL = os.getenv("DATABASE_URL", "mongodb://localhost:27017")
        self.DATABASE_NAME = os.getenv("DATABASE_NAME", "verified-ideas")
        self.IDEAS_COLLECTION = os.getenv("IDEAS_COLLECTION", Collections.IDEAS)
        self.reset()

    def reset(self):
        """Forget the cached client and collection"""
        self.client: Optional[AsyncIOMotorClient] = None
        self.collection: Optional[AsyncIOMotorCollection] = None
        self._lock = asyncio.Lock()

    async def connect_db(self) -> AsyncIOMotorCollection:
        """Connect to MongoDB and resolve the ideas collection"""
        client = AsyncIOMotorClient(self.DATABASE_URL)
        try:
            # Test connection
            await client.admin.command("ping")
        except Exception as e:
            client.close()
            logger.error("❌ Error connecting to MongoDB: %s", e)
            raise StoreConnectionError(str(e)) from e

        self.client = client
        self.collection = client[self.DATABASE_NAME][self.IDEAS_COLLECTION]
        logger.info(
            "✅ Connected to MongoDB: %s.%s", self.DATABASE_NAME, self.IDEAS_COLLECTION
        )
        return self.collection

    async def get_collection(self) -> AsyncIOMotorCollection:
        """Get the ideas collection, connecting on first use"""
        if self.collection is not None:
            return self.collection
        async with self._lock:
            # Another request may have connected while we waited
            if self.collection is None:
                await self.connect_db()
        return self.collection

    async def close_db(self):
        """Close MongoDB connection"""
        if self.client:
            self.client.close()
            logger.info("✅ MongoDB connection closed")
        self.reset()


# Collection names
class Collections:
    IDEAS = "messages"


# Global database instance
db_config = DatabaseConfig()
