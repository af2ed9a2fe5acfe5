"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with helpers for testing FastAPI
routes against the mock database.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app(mock_registry, test_settings):
    """
    Create the FastAPI app with the registry and settings overridden.

    The lifespan (which connects to a real MongoDB) is not run; handlers get
    the mock registry through the dependency override instead.
    """
    from app.config import get_settings
    from app.dependencies.collections import get_registry
    from app.main import create_app

    application = create_app()
    application.dependency_overrides[get_registry] = lambda: mock_registry
    application.dependency_overrides[get_settings] = lambda: test_settings
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """TestClient without lifespan, so no real database is contacted."""
    return TestClient(app, raise_server_exceptions=False)


# =============================================================================
# Upload Fixtures
# =============================================================================

@pytest.fixture
def mock_s3_client():
    """A boto3-like S3 client whose put_object succeeds."""
    s3 = MagicMock()
    s3.put_object.return_value = {"ETag": '"d41d8cd98f00b204e9800998ecf8427e"'}
    return s3


@pytest.fixture
def upload_service(mock_s3_client, test_settings):
    """UploadService bound to the mock S3 client."""
    from app.services.upload_service import UploadService

    return UploadService(mock_s3_client, test_settings.s3_bucket_name, test_settings.aws_region)


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_failure_response():
    """Helper to assert failure response structure."""
    def _assert(response, status_code: int, failure_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "failure" in data
        assert "success" not in data
        if failure_contains:
            assert failure_contains.lower() in data["failure"].lower()
    return _assert
