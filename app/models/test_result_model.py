# /app/models/test_result_model.py

from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional

from .common_model import PaginationInfo, StudentRef
from .group_model import Group

# --- API Contract Models (incoming) ---

class ResultEntryCreate(BaseModel):
    """One student's score within a test. `percentage` is derived when omitted."""
    model_config = ConfigDict(str_strip_whitespace=True)

    student: str = Field(..., min_length=1, description="The ID of the student who sat the test.")
    score: float = Field(..., ge=0)
    maxScore: float = Field(default=100, ge=1)
    percentage: Optional[float] = Field(default=None, ge=0, le=100)
    notes: Optional[str] = None

class TestResultCreate(BaseModel):
    """
    The payload for both creating and replacing a test result. Client-supplied
    `averageScore` / `totalStudents` are not part of the contract: they are
    always recomputed from `results`.
    """
    __test__ = False
    model_config = ConfigDict(str_strip_whitespace=True)

    group: str = Field(..., min_length=1, description="The ID of the group that sat the test.")
    testName: str = Field(..., min_length=1)
    testDate: datetime
    results: List[ResultEntryCreate]
    description: Optional[str] = None
    isPublished: bool = Field(default=False)

# --- API Contract Models (outgoing) ---

class ResultEntry(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    student: Optional[StudentRef] = Field(default=None, description="None when the referenced student was deleted.")
    score: float
    maxScore: float
    percentage: float
    notes: Optional[str] = None

class TestResult(BaseModel):
    __test__ = False
    model_config = ConfigDict(from_attributes=True)

    id: str
    group: Optional[Group] = None
    testName: str
    testDate: datetime
    results: List[ResultEntry]
    averageScore: float
    totalStudents: int
    description: Optional[str] = None
    isPublished: bool
    created_at: datetime
    updated_at: datetime

class TestResultPage(BaseModel):
    __test__ = False

    data: List[TestResult]
    pagination: PaginationInfo
