"""
ObjectId parsing and JSON-safe document rendering.
"""
from datetime import datetime
from typing import Any

from bson import ObjectId

from app.core.errors import MalformedIdentifier


def parse_object_id(raw: str, label: str = "id") -> ObjectId:
    """
    Parse a path segment into an ObjectId.

    Only the syntax is checked; the document may not exist.

    Args:
        raw: String taken from the request path
        label: Name used in the error message

    Raises:
        MalformedIdentifier: If ``raw`` is not a 24-character hex ObjectId
    """
    if not isinstance(raw, str) or not ObjectId.is_valid(raw):
        raise MalformedIdentifier(f"Invalid {label}: {raw!r}")
    return ObjectId(raw)


def serialize_document(value: Any) -> Any:
    """Recursively convert ObjectIds and datetimes into JSON-friendly strings."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: serialize_document(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_document(item) for item in value]
    return value
