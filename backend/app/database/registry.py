"""
Collection registry.
Maps logical resource names to their MongoDB collection handles. Built once
on startup and handed to request handlers through a dependency.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection

from app.config import Settings
from app.database.databases import institute_db

logger = logging.getLogger(__name__)


class UnknownResourceError(LookupError):
    """Raised when resolving a resource name that was never registered."""


class CollectionRegistry:
    """Read-only (after startup) mapping of resource name to collection."""

    def __init__(self):
        self._collections: dict[str, AsyncIOMotorCollection] = {}

    def register(self, name: str, collection: AsyncIOMotorCollection) -> None:
        if name in self._collections:
            raise ValueError(f"Resource '{name}' is already registered")
        self._collections[name] = collection

    def resolve(self, name: str) -> AsyncIOMotorCollection:
        try:
            return self._collections[name]
        except KeyError:
            raise UnknownResourceError(f"Resource '{name}' is not registered") from None

    def names(self) -> list[str]:
        return list(self._collections)

    def __contains__(self, name: str) -> bool:
        return name in self._collections


def build_registry(
    client: AsyncIOMotorClient, settings: Optional[Settings] = None
) -> CollectionRegistry:
    """
    Register every resource of the institute database manifest.

    Args:
        client: Connected MongoDB client
        settings: Optional settings overriding the database name
    """
    db_name = settings.mongo_db_name if settings else institute_db.DB_MANIFEST["db_name"]
    db = client[db_name]

    registry = CollectionRegistry()
    for resource, collection_name in institute_db.DB_MANIFEST["resources"].items():
        registry.register(resource, db[collection_name])

    logger.info(f"Registered {len(registry.names())} collections from {db_name}")
    return registry
