"""
Response envelopes shared by every route.
"""
from typing import Any

from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    """Successful operation."""
    success: str = Field(..., description="Human-readable outcome")
    result: Any = Field(None, description="Operation result")


class FailureResponse(BaseModel):
    """Failed operation."""
    failure: str = Field(..., description="Human-readable error")


class UploadResult(BaseModel):
    """Where an uploaded file was stored."""
    key: str = Field(..., description="Generated object key")
    bucket: str = Field(..., description="Target bucket")
    location: str = Field(..., description="Object URL")
    etag: str | None = Field(None, description="ETag reported by storage")
    content_type: str | None = Field(None, description="Content type sent to storage")
    size: int = Field(..., description="Payload size in bytes")
