"""
Resource definitions for the exposed collections.
"""
from app.models.resource import ResourceDefinition, ALL_RESOURCES

__all__ = [
    "ResourceDefinition",
    "ALL_RESOURCES",
]
