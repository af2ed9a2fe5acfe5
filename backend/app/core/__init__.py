"""
Core module - Error taxonomy, identifier parsing and logging setup.
"""
from app.core.errors import (
    ApiError,
    MalformedIdentifier,
    NotFound,
    StartupFailure,
    StorageFailure,
    ValidationFailure,
    register_exception_handlers,
)
from app.core.identifiers import parse_object_id, serialize_document
from app.core.logging import configure_logging

__all__ = [
    "ApiError",
    "MalformedIdentifier",
    "NotFound",
    "StartupFailure",
    "StorageFailure",
    "ValidationFailure",
    "register_exception_handlers",
    "parse_object_id",
    "serialize_document",
    "configure_logging",
]
