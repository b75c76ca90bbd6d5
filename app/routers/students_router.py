# /app/routers/students_router.py

from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File, Form, Query
from typing import Optional

from ..config import Settings, get_settings
from ..models import student_model
from ..models.common_model import MessageResponse
from ..services import student_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.pagination import resolve_page_params

router = APIRouter()

# --- STUDENT COLLECTION ENDPOINTS (/api/students) ---

@router.get("", response_model=student_model.StudentPage, summary="Get Active Students, Optionally by Group")
def get_students(
    groupId: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    db: DatabaseService = Depends(get_db_service),
    settings: Settings = Depends(get_settings),
):
    page, limit = resolve_page_params(page, limit, settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)
    return student_service.get_students(db=db, page=page, limit=limit, group_id=groupId)


@router.post("", response_model=student_model.Student, status_code=status.HTTP_201_CREATED, summary="Create a Student (multipart, optional image)")
def create_student(
    firstName: Optional[str] = Form(None),
    lastName: Optional[str] = Form(None),
    school: Optional[str] = Form(None),
    grade: Optional[str] = Form(None),
    group: Optional[str] = Form(None),
    parentContact: Optional[str] = Form(None),
    notes: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: DatabaseService = Depends(get_db_service),
    settings: Settings = Depends(get_settings),
):
    student_create = student_model.StudentCreate(
        firstName=firstName, lastName=lastName, school=school, grade=grade,
        group=group, parentContact=parentContact, notes=notes,
    )
    return student_service.create_student(student_create, image=image, db=db, settings=settings)

# --- INDIVIDUAL STUDENT ENDPOINTS (/api/students/{student_id}) ---

@router.get("/{student_id}", response_model=student_model.Student, summary="Get a Single Student")
def get_student(student_id: str, db: DatabaseService = Depends(get_db_service)):
    student = student_service.get_student(student_id, db=db)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return student


@router.put("/{student_id}", response_model=student_model.Student, summary="Update a Student (multipart, optional image)")
def update_student(
    student_id: str,
    firstName: Optional[str] = Form(None),
    lastName: Optional[str] = Form(None),
    school: Optional[str] = Form(None),
    grade: Optional[str] = Form(None),
    group: Optional[str] = Form(None),
    parentContact: Optional[str] = Form(None),
    notes: Optional[str] = Form(None),
    isActive: Optional[bool] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: DatabaseService = Depends(get_db_service),
    settings: Settings = Depends(get_settings),
):
    student_update = student_model.StudentUpdate(
        firstName=firstName, lastName=lastName, school=school, grade=grade,
        group=group, parentContact=parentContact, notes=notes,
        isActive=True if isActive is None else isActive,
    )
    student = student_service.update_student(student_id, student_update, image=image, db=db, settings=settings)
    if student is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return student


@router.delete("/{student_id}", response_model=MessageResponse, summary="Deactivate a Student")
def deactivate_student(student_id: str, db: DatabaseService = Depends(get_db_service)):
    if not student_service.deactivate_student(student_id, db=db):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return {"message": "Student deactivated successfully"}


@router.delete("/{student_id}/permanent", response_model=MessageResponse, summary="Permanently Delete a Student")
def delete_student_permanently(
    student_id: str,
    db: DatabaseService = Depends(get_db_service),
    settings: Settings = Depends(get_settings),
):
    if not student_service.delete_student_permanently(student_id, db=db, settings=settings):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Student not found")
    return {"message": "Student permanently deleted"}
