"""
Group request schemas.

Groups are the only resource with required fields; any other keys in the
payload are stored as given.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GroupCreate(BaseModel):
    """Create group request."""
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1, description="Group name")
    category: str = Field(..., min_length=1, description="Group category")


class GroupUpdate(BaseModel):
    """Update group request. Omitted fields are left untouched."""
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = Field(None, min_length=1, description="Group name")
    category: Optional[str] = Field(None, min_length=1, description="Group category")

    @field_validator("name", "category")
    @classmethod
    def not_null(cls, value: Optional[str]) -> str:
        # Only runs for fields present in the payload; omitted ones keep None.
        if value is None:
            raise ValueError("may be omitted but not null")
        return value
