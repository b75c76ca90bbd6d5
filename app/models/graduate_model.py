# /app/models/graduate_model.py

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict, field_validator

from .common_model import PaginationInfo
from .group_model import Group


class AdmissionType(str, Enum):
    GRANT = "grant"
    CONTRACT = "contract"


def _current_year() -> int:
    return datetime.now(timezone.utc).year


class GraduateCreate(BaseModel):
    """
    The payload for creating or replacing a graduate, built from multipart
    form fields. Year bounds move with the calendar, so they are checked in
    validators rather than as static `Field` limits.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    firstName: str = Field(..., min_length=1)
    lastName: str = Field(..., min_length=1)
    admissionType: AdmissionType
    field: str = Field(..., min_length=1, description='e.g. "Computer Science", "Medicine".')
    university: str = Field(..., min_length=1)
    admissionYear: int
    previousGroup: Optional[str] = Field(default=None, description="Optional ID of the group they studied in.")
    graduationYear: Optional[int] = Field(default=None, description="Year they graduated from the center.")
    finalScore: Optional[float] = Field(default=None, ge=0, le=100)
    notes: Optional[str] = None
    isPublished: bool = Field(default=True)

    @field_validator("previousGroup", "graduationYear", "finalScore", "notes", mode="before")
    @classmethod
    def _blank_as_none(cls, v):
        return None if v == "" else v

    @field_validator("admissionYear")
    @classmethod
    def _admission_year_in_range(cls, v: int) -> int:
        upper = _current_year() + 5
        if not 2000 <= v <= upper:
            raise ValueError(f"admissionYear must be between 2000 and {upper}")
        return v

    @field_validator("graduationYear")
    @classmethod
    def _graduation_year_in_range(cls, v: Optional[int]) -> Optional[int]:
        if v is None:
            return v
        upper = _current_year()
        if not 2015 <= v <= upper:
            raise ValueError(f"graduationYear must be between 2015 and {upper}")
        return v


class Graduate(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    firstName: str
    lastName: str
    fullName: str
    imageUrl: Optional[str] = None
    admissionType: AdmissionType
    field: str
    university: str
    admissionYear: int
    previousGroup: Optional[Group] = None
    graduationYear: Optional[int] = None
    finalScore: Optional[float] = None
    notes: Optional[str] = None
    isPublished: bool
    created_at: datetime
    updated_at: datetime


class GraduatePage(BaseModel):
    data: List[Graduate]
    pagination: PaginationInfo
