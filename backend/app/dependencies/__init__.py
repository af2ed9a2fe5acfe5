"""
Dependencies for dependency injection in routes.
"""
from app.dependencies.collections import (
    get_registry,
    resource_service_for,
    get_institute_array_service,
    get_upload_service,
)

__all__ = [
    "get_registry",
    "resource_service_for",
    "get_institute_array_service",
    "get_upload_service",
]
