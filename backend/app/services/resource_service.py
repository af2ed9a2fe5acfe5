"""
Generic CRUD service over a single MongoDB collection.
"""
import logging
from contextlib import contextmanager
from typing import Any, Optional, Type

from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import BaseModel, ValidationError
from pymongo.errors import PyMongoError

from app.core.errors import NotFound, StorageFailure, ValidationFailure
from app.core.identifiers import parse_object_id
from app.models.resource import ResourceDefinition

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(action: str):
    """Translate driver errors raised inside the block into StorageFailure."""
    try:
        yield
    except PyMongoError as e:
        logger.error(f"MongoDB error while trying to {action}: {e}")
        raise StorageFailure(f"Error occurred while trying to {action}: {e}") from e


def validate_payload(schema: Optional[Type[BaseModel]], payload: dict[str, Any]) -> None:
    """
    Check a payload against an optional schema.

    Raises:
        ValidationFailure: With the first schema error as the message
    """
    if schema is None:
        return
    try:
        schema.model_validate(payload)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "payload"
        raise ValidationFailure(f"Invalid {field}: {first.get('msg', 'invalid value')}") from e


def check_field_names(payload: dict[str, Any]) -> None:
    """Reject top-level keys MongoDB would read as operators or paths."""
    for key in payload:
        if not key or key.startswith("$") or "." in key:
            raise ValidationFailure(f"Invalid field name: {key!r}")


class ResourceService:
    """List/get/create/update/delete for one resource collection."""

    def __init__(
        self,
        collection: AsyncIOMotorCollection,
        definition: Optional[ResourceDefinition] = None,
    ):
        self.collection = collection
        self.definition = definition
        self.label = definition.label if definition else "Document"

    async def list_documents(self) -> list[dict[str, Any]]:
        """Return every document in the collection."""
        with storage_errors(f"list {self.label.lower()}s"):
            cursor = self.collection.find({})
            return await cursor.to_list(length=None)

    async def get_document(self, document_id: str) -> dict[str, Any]:
        """Get a document by ID."""
        oid = parse_object_id(document_id)
        with storage_errors(f"fetch {self.label.lower()}"):
            doc = await self.collection.find_one({"_id": oid})
        if doc is None:
            raise NotFound(f"{self.label} not found")
        return doc

    async def create_document(self, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a new document. The store assigns ``_id``; any ``_id`` sent by
        the client is discarded.

        Returns:
            The stored document including its ``_id``
        """
        doc = {k: v for k, v in payload.items() if k != "_id"}
        check_field_names(doc)
        if self.definition is not None:
            validate_payload(self.definition.create_schema, doc)

        with storage_errors(f"add {self.label.lower()}"):
            result = await self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return doc

    async def update_document(self, document_id: str, patch: dict[str, Any]) -> dict[str, int]:
        """
        Merge ``patch`` into a document field by field (``$set``).

        Fields missing from the patch are left as they are; ``_id`` is never
        rewritten.

        Returns:
            Matched and modified counts
        """
        oid = parse_object_id(document_id)
        fields = {k: v for k, v in patch.items() if k != "_id"}
        check_field_names(fields)
        if self.definition is not None:
            validate_payload(self.definition.update_schema, fields)

        if not fields:
            with storage_errors(f"update {self.label.lower()}"):
                existing = await self.collection.find_one({"_id": oid}, {"_id": 1})
            if existing is None:
                raise NotFound(f"{self.label} not found")
            return {"matched": 1, "modified": 0}

        with storage_errors(f"update {self.label.lower()}"):
            result = await self.collection.update_one({"_id": oid}, {"$set": fields})
        if result.matched_count == 0:
            raise NotFound(f"{self.label} not found")
        return {"matched": result.matched_count, "modified": result.modified_count}

    async def delete_document(self, document_id: str) -> None:
        """Hard-delete a document."""
        oid = parse_object_id(document_id)
        with storage_errors(f"delete {self.label.lower()}"):
            result = await self.collection.delete_one({"_id": oid})
        if result.deleted_count == 0:
            raise NotFound(f"{self.label} not found")
