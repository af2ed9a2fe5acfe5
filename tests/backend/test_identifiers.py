"""
Tests for identifier parsing and document serialization.
"""

from datetime import datetime, timezone

import pytest
from bson import ObjectId

from app.core.errors import MalformedIdentifier
from app.core.identifiers import parse_object_id, serialize_document


class TestParseObjectId:
    """Tests for parse_object_id."""

    def test_valid_hex_string_parses(self):
        oid = ObjectId()
        assert parse_object_id(str(oid)) == oid

    @pytest.mark.parametrize(
        "raw",
        ["not-an-id", "", "123", "507f1f77bcf86cd79943901z", "507f1f77bcf86cd7994390111"],
    )
    def test_invalid_strings_raise(self, raw):
        with pytest.raises(MalformedIdentifier):
            parse_object_id(raw)

    def test_error_message_uses_label(self):
        with pytest.raises(MalformedIdentifier) as exc_info:
            parse_object_id("nope", label="data id")
        assert "data id" in exc_info.value.message
        assert exc_info.value.status_code == 400


class TestSerializeDocument:
    """Tests for serialize_document."""

    def test_object_ids_become_strings_at_every_level(self):
        parent, child = ObjectId(), ObjectId()
        doc = {"_id": parent, "courses": [{"_id": child, "title": "Math"}]}

        result = serialize_document(doc)

        assert result == {"_id": str(parent), "courses": [{"_id": str(child), "title": "Math"}]}

    def test_datetimes_become_iso_strings(self):
        when = datetime(2024, 10, 15, 12, 0, tzinfo=timezone.utc)
        assert serialize_document({"at": when}) == {"at": "2024-10-15T12:00:00+00:00"}

    def test_plain_values_pass_through(self):
        doc = {"name": "Acme", "rank": 3, "ratio": 0.5, "open": True, "notes": None}
        assert serialize_document(doc) == doc
