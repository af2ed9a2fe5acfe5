"""
Global test fixtures for the Institute API.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- Collection registry bound to the mock database
- Sample documents for each resource
"""

import sys
from pathlib import Path

import pytest
from bson import ObjectId

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


TEST_DB_NAME = "Institutelist_test"


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    Operations are awaited like motor's, but run in memory, so the same
    client can be used from async tests and from the TestClient's loop.
    """
    from mongomock_motor import AsyncMongoMockClient

    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest.fixture
def test_settings():
    """Settings pointing at the test database."""
    from app.config import Settings

    return Settings(
        mongo_uri="mongodb://localhost:27017",
        mongo_db_name=TEST_DB_NAME,
        s3_bucket_name="test-bucket",
        aws_region="us-east-1",
    )


@pytest.fixture
def mock_db(mock_async_mongo_client):
    """Provide the mock institute database."""
    return mock_async_mongo_client[TEST_DB_NAME]


@pytest.fixture
def mock_registry(mock_async_mongo_client, test_settings):
    """Collection registry bound to the mock database."""
    from app.database.registry import build_registry

    return build_registry(mock_async_mongo_client, test_settings)


@pytest.fixture
def institutes_collection(mock_registry):
    """Mock institutes collection."""
    return mock_registry.resolve("institutes")


# =============================================================================
# Document Fixtures
# =============================================================================

@pytest.fixture
def institute_payload() -> dict:
    """Institute body as a client would send it."""
    return {
        "name": "Acme Academy",
        "city": "Pune",
        "established": 1998,
        "contact": {"email": "office@acme.example", "phone": "+91-20-5550100"},
    }


@pytest.fixture
def group_payload() -> dict:
    """Valid group body."""
    return {
        "name": "Morning Batch",
        "category": "JEE",
        "students": ["507f1f77bcf86cd799439011"],
    }


@pytest.fixture
def unknown_id() -> str:
    """A well-formed identifier that matches nothing."""
    return str(ObjectId())


@pytest.fixture
def malformed_id() -> str:
    """An identifier that is not an ObjectId."""
    return "not-an-id"
