"""
Resource definitions: which collections are exposed and how they validate.
"""
from dataclasses import dataclass
from typing import Optional, Type

from pydantic import BaseModel

from app.database.databases.institute_db import Resources
from app.schemas.group import GroupCreate, GroupUpdate


@dataclass(frozen=True)
class ResourceDefinition:
    """
    A CRUD resource exposed under ``/{name}``.

    ``create_schema`` / ``update_schema`` are optional pydantic models used
    only to check the payload; the payload itself is stored as sent.
    """
    name: str
    label: str
    create_schema: Optional[Type[BaseModel]] = None
    update_schema: Optional[Type[BaseModel]] = None

    @property
    def plural(self) -> str:
        return f"{self.label}s"


INSTITUTES = ResourceDefinition(Resources.INSTITUTES, "Institute")
AUDIO_CLIPS = ResourceDefinition(Resources.AUDIO_CLIPS, "Audio clip")
FORM_SUBMISSIONS = ResourceDefinition(Resources.FORM_SUBMISSIONS, "Form submission")
MARKETING_CAMPAIGNS = ResourceDefinition(Resources.MARKETING_CAMPAIGNS, "Marketing campaign")
MARKETING_DATA = ResourceDefinition(Resources.MARKETING_DATA, "Marketing data point")
GROUPS = ResourceDefinition(
    Resources.GROUPS,
    "Group",
    create_schema=GroupCreate,
    update_schema=GroupUpdate,
)
STUDENT_GROUPS = ResourceDefinition(Resources.STUDENT_GROUPS, "Student group")

ALL_RESOURCES = [
    INSTITUTES,
    AUDIO_CLIPS,
    FORM_SUBMISSIONS,
    MARKETING_CAMPAIGNS,
    MARKETING_DATA,
    GROUPS,
    STUDENT_GROUPS,
]
