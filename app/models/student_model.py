# /app/models/student_model.py

# --- Core Imports ---
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional

from .common_model import PaginationInfo
from .group_model import Group

# --- Model Definitions ---

class StudentCreate(BaseModel):
    """
    The model used for creating a new student. Built by the router from
    multipart form fields, since a profile image may accompany the request.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    firstName: str = Field(..., min_length=1)
    lastName: str = Field(..., min_length=1)
    school: str = Field(..., min_length=1)
    grade: str = Field(..., min_length=1)
    group: str = Field(..., min_length=1, description="The ID of the group this student belongs to.")
    parentContact: Optional[str] = None
    notes: Optional[str] = None

class StudentUpdate(StudentCreate):
    """
    The model for replacing a student. Omitting `isActive` reactivates the
    student, matching the behaviour of the admin UI.
    """
    isActive: bool = Field(default=True)

class Student(BaseModel):
    """
    The full representation of a Student resource, as returned by the API,
    with the group (and its subject) populated.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="The unique, server-generated identifier for the student.")
    firstName: str
    lastName: str
    fullName: str
    school: str
    grade: str
    group: Optional[Group] = Field(default=None, description="None when the referenced group was deleted.")
    parentContact: Optional[str] = None
    notes: Optional[str] = None
    imageUrl: Optional[str] = None
    isActive: bool = True
    created_at: datetime
    updated_at: datetime

class StudentPage(BaseModel):
    data: List[Student]
    pagination: PaginationInfo
