"""
Nested array service for institute sub-documents.

Institute documents carry arrays of sub-documents (courses, batches,
teachers, ...). Each element has its own ``_id`` so it can be addressed
individually. Every mutation here is a single ``update_one`` whose filter
matches the parent and, where relevant, the element, so the match and the
write happen in one atomic step on the document.
"""
import logging
import re
from typing import Any, Iterable, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection

from app.core.errors import NotFound, ValidationFailure
from app.core.identifiers import parse_object_id
from app.services.resource_service import check_field_names, storage_errors

logger = logging.getLogger(__name__)

FIELD_NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9_]*")
RESERVED_FIELDS = frozenset({"_id"})


class NestedArrayService:
    """Append, replace, remove and read elements of a parent's array field."""

    def __init__(
        self,
        collection: AsyncIOMotorCollection,
        allowed_fields: Optional[Iterable[str]] = None,
        parent_label: str = "Institute",
    ):
        self.collection = collection
        self.allowed_fields = frozenset(allowed_fields or ())
        self.parent_label = parent_label

    def check_array_name(self, array_name: str) -> str:
        """
        Validate a caller-supplied array field name.

        The name must be a plain identifier (no operators, no dotted paths),
        must not be a reserved field and, when an allow-list is configured,
        must be on it.

        Raises:
            ValidationFailure: If the name is not acceptable
        """
        if not FIELD_NAME_PATTERN.fullmatch(array_name) or array_name in RESERVED_FIELDS:
            raise ValidationFailure(f"Invalid array name: {array_name!r}")
        if self.allowed_fields and array_name not in self.allowed_fields:
            raise ValidationFailure(f"Array '{array_name}' is not editable")
        return array_name

    @staticmethod
    def _element_body(element: dict[str, Any]) -> dict[str, Any]:
        check_field_names(element)
        return {k: v for k, v in element.items() if k != "_id"}

    async def get_elements(self, parent_id: str, array_name: str) -> list[dict[str, Any]]:
        """
        Return the array stored under ``array_name``.

        Returns an empty list when the parent has no such field.
        """
        oid = parse_object_id(parent_id)
        field = self.check_array_name(array_name)

        with storage_errors(f"fetch {field}"):
            doc = await self.collection.find_one({"_id": oid}, {field: 1})
        if doc is None:
            raise NotFound(f"{self.parent_label} not found")

        elements = doc.get(field, [])
        if not isinstance(elements, list):
            raise ValidationFailure(f"Field '{field}' is not an array")
        return elements

    async def append_element(
        self, parent_id: str, array_name: str, element: dict[str, Any]
    ) -> dict[str, Any]:
        """
        Push ``element`` onto the end of the array, creating the array if
        needed. A fresh ``_id`` is assigned unless the element brings a
        valid one.

        Returns:
            The element as stored
        """
        oid = parse_object_id(parent_id)
        field = self.check_array_name(array_name)

        element_id = element.get("_id")
        if isinstance(element_id, str) and ObjectId.is_valid(element_id):
            element_id = ObjectId(element_id)
        elif not isinstance(element_id, ObjectId):
            element_id = ObjectId()
        stored = {"_id": element_id, **self._element_body(element)}

        with storage_errors(f"add to {field}"):
            result = await self.collection.update_one(
                {"_id": oid},
                {"$push": {field: stored}},
            )
        if result.matched_count == 0:
            raise NotFound(f"{self.parent_label} not found")

        logger.debug(f"Appended {element_id} to {field} of {oid}")
        return stored

    async def replace_element(
        self,
        parent_id: str,
        array_name: str,
        element_id: str,
        new_element: dict[str, Any],
    ) -> dict[str, Any]:
        """
        Replace the first element whose ``_id`` equals ``element_id``.

        The replacement keeps ``element_id`` as its ``_id``.

        Returns:
            The element as stored
        """
        oid = parse_object_id(parent_id)
        eid = parse_object_id(element_id, label="data id")
        field = self.check_array_name(array_name)
        stored = {"_id": eid, **self._element_body(new_element)}

        with storage_errors(f"update {field}"):
            result = await self.collection.update_one(
                {"_id": oid, f"{field}._id": eid},
                {"$set": {f"{field}.$": stored}},
            )
        if result.matched_count == 0:
            raise NotFound(f"{self.parent_label} or {field} entry not found")
        return stored

    async def remove_element(self, parent_id: str, array_name: str, element_id: str) -> None:
        """Remove every element whose ``_id`` equals ``element_id``."""
        oid = parse_object_id(parent_id)
        eid = parse_object_id(element_id, label="data id")
        field = self.check_array_name(array_name)

        with storage_errors(f"delete from {field}"):
            result = await self.collection.update_one(
                {"_id": oid, f"{field}._id": eid},
                {"$pull": {field: {"_id": eid}}},
            )
        if result.matched_count == 0:
            raise NotFound(f"{self.parent_label} or {field} entry not found")
