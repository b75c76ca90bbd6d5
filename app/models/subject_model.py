# /app/models/subject_model.py

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


class SubjectCreate(BaseModel):
    """The payload for creating or replacing a subject."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, description="Unique subject name.")
    teacherName: str = Field(..., min_length=1)
    description: Optional[str] = None


class Subject(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    teacherName: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
