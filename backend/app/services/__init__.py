"""
Service layer for business logic.
"""
from app.services.resource_service import ResourceService
from app.services.nested_array_service import NestedArrayService
from app.services.upload_service import UploadService

__all__ = [
    "ResourceService",
    "NestedArrayService",
    "UploadService",
]
