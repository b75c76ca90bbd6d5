# /app/models/group_model.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict

from .common_model import SubjectRef


class GroupCreate(BaseModel):
    """The payload for creating or replacing a group. `subject` is a Subject id."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    teacherName: Optional[str] = None
    subject: str = Field(..., min_length=1)
    description: Optional[str] = None


class Group(BaseModel):
    """
    A group as returned by the API, with its subject populated. `subject` is
    `None` when the referenced subject no longer exists.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    teacherName: Optional[str] = None
    subject: Optional[SubjectRef] = None
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
