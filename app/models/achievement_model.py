# /app/models/achievement_model.py

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict, field_validator

from .common_model import PaginationInfo


class AchievementType(str, Enum):
    CERTIFICATE = "certificate"
    AWARD = "award"
    MEDAL = "medal"
    DIPLOMA = "diploma"
    OTHER = "other"


class AchievementCreate(BaseModel):
    """
    The payload for a new achievement, built from multipart form fields.
    New achievements are always published.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    studentName: str = Field(..., min_length=1)
    age: int = Field(..., ge=5, le=30)
    school: str = Field(default="")
    group: Optional[str] = Field(default=None, description="Optional ID of the student's group.")
    achievementType: AchievementType = Field(default=AchievementType.CERTIFICATE)
    title: str = Field(..., min_length=1, description='Achievement name, e.g. "IELTS".')
    level: str = Field(..., min_length=1, description='Achievement level, e.g. "7.5".')
    description: str = Field(default="")
    organization: str = Field(default="")
    achievementDate: Optional[datetime] = None

    @field_validator("group", "achievementDate", mode="before")
    @classmethod
    def _blank_as_none(cls, v):
        # Empty multipart fields arrive as "".
        return None if v == "" else v

    @field_validator("school", "description", "organization", mode="before")
    @classmethod
    def _none_as_blank(cls, v):
        return "" if v is None else v


class AchievementUpdate(AchievementCreate):
    isPublished: bool = Field(default=True)


class Achievement(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    studentName: str
    age: int
    school: Optional[str] = ""
    group: Optional[str] = None
    achievementType: AchievementType
    title: str
    level: str
    description: Optional[str] = ""
    imageUrl: Optional[str] = None
    achievementDate: datetime
    organization: Optional[str] = ""
    isPublished: bool
    created_at: datetime
    updated_at: datetime


class AchievementPage(BaseModel):
    data: List[Achievement]
    pagination: PaginationInfo
