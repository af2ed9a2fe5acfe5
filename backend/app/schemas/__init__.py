"""
Request and response schemas for API endpoints.
"""
from app.schemas.group import GroupCreate, GroupUpdate
from app.schemas.responses import FailureResponse, SuccessResponse, UploadResult

__all__ = [
    # Group
    "GroupCreate",
    "GroupUpdate",
    # Envelopes
    "SuccessResponse",
    "FailureResponse",
    "UploadResult",
]
