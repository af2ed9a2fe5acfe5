"""
Database connection management for MongoDB.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from app.config import get_settings
from app.core.errors import StartupFailure

logger = logging.getLogger(__name__)

# Global connection instance
_mongo_client: Optional[AsyncIOMotorClient] = None


async def get_mongo_client() -> AsyncIOMotorClient:
    """Get or create MongoDB client."""
    global _mongo_client
    if _mongo_client is None:
        settings = get_settings()
        _mongo_client = AsyncIOMotorClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
        )
    return _mongo_client


async def connect_mongo() -> AsyncIOMotorClient:
    """
    Create the client and verify the server answers a ping.

    Raises:
        StartupFailure: If MongoDB cannot be reached
    """
    client = await get_mongo_client()
    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        await close_connections()
        raise StartupFailure(f"Error connecting to the database: {e}") from e
    logger.info("Connected to MongoDB")
    return client


async def close_connections():
    """Close the database connection."""
    global _mongo_client

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
