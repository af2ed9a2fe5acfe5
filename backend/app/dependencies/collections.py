"""
Service dependencies built from the startup collection registry and settings.
"""
from typing import Annotated, Callable

from fastapi import Depends, Request

from app.config import Settings, get_settings
from app.core.errors import StorageFailure
from app.database.databases.institute_db import Resources
from app.database.registry import CollectionRegistry
from app.models.resource import ResourceDefinition
from app.services.nested_array_service import NestedArrayService
from app.services.resource_service import ResourceService
from app.services.upload_service import UploadService, get_s3_client


def get_registry(request: Request) -> CollectionRegistry:
    """Registry stored on the application during lifespan startup."""
    return request.app.state.registry


def resource_service_for(
    definition: ResourceDefinition,
) -> Callable[[CollectionRegistry], ResourceService]:
    """Build a dependency returning a ResourceService bound to one resource."""

    def _get_service(
        registry: Annotated[CollectionRegistry, Depends(get_registry)],
    ) -> ResourceService:
        return ResourceService(registry.resolve(definition.name), definition)

    _get_service.__name__ = f"get_{definition.name}_service"
    return _get_service


def get_institute_array_service(
    registry: Annotated[CollectionRegistry, Depends(get_registry)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> NestedArrayService:
    """Dependency to get a NestedArrayService over the institutes collection."""
    return NestedArrayService(
        registry.resolve(Resources.INSTITUTES),
        allowed_fields=settings.nested_array_fields,
    )


def get_upload_service(
    settings: Annotated[Settings, Depends(get_settings)],
) -> UploadService:
    """
    Dependency returning an UploadService for the configured bucket.

    Raises:
        StorageFailure: If no bucket is configured
    """
    if not settings.s3_bucket_name:
        raise StorageFailure("Object storage not configured")
    return UploadService(
        get_s3_client(settings.aws_region),
        settings.s3_bucket_name,
        settings.aws_region,
    )
