"""
Database module - MongoDB connection, collection registry and database definitions.
"""
from app.database.connections import (
    get_mongo_client,
    connect_mongo,
    close_connections,
)
from app.database.registry import CollectionRegistry, UnknownResourceError, build_registry
from app.database.databases import institute_db

__all__ = [
    "get_mongo_client",
    "connect_mongo",
    "close_connections",
    "CollectionRegistry",
    "UnknownResourceError",
    "build_registry",
    "institute_db",
]
