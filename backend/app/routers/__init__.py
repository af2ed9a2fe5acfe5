"""
API Routers module.
"""
from app.routers import health, institutes, resources, upload

__all__ = ["health", "institutes", "resources", "upload"]
