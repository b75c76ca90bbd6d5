# /app/models/common_model.py

"""
Shared response contracts: the pagination envelope used by every paginated
list endpoint, the plain confirmation message, and the projected "reference"
shapes embedded when a reference field is populated.
"""

from pydantic import BaseModel, Field, ConfigDict


class PaginationInfo(BaseModel):
    """Page metadata returned alongside every paginated `data` list."""
    currentPage: int = Field(..., ge=1)
    totalPages: int = Field(..., ge=0)
    totalItems: int = Field(..., ge=0)
    itemsPerPage: int = Field(..., ge=1)
    hasNextPage: bool
    hasPrevPage: bool


class MessageResponse(BaseModel):
    message: str


class SubjectRef(BaseModel):
    """The subset of a Subject embedded into populated groups."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    teacherName: str


class StudentRef(BaseModel):
    """The subset of a Student embedded into populated test results."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    firstName: str
    lastName: str
    school: str
    grade: str
