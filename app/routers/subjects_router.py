# /app/routers/subjects_router.py

from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from ..models import subject_model
from ..models.common_model import MessageResponse
from ..services import catalog_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[subject_model.Subject], summary="Get All Subjects")
def get_all_subjects(db: DatabaseService = Depends(get_db_service)):
    return catalog_service.get_all_subjects(db=db)


@router.post("", response_model=subject_model.Subject, status_code=status.HTTP_201_CREATED, summary="Create a Subject")
def create_subject(subject_create: subject_model.SubjectCreate, db: DatabaseService = Depends(get_db_service)):
    return catalog_service.create_subject(subject_data=subject_create, db=db)


@router.get("/{subject_id}", response_model=subject_model.Subject, summary="Get a Single Subject")
def get_subject(subject_id: str, db: DatabaseService = Depends(get_db_service)):
    subject = catalog_service.get_subject(subject_id, db=db)
    if subject is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subject not found")
    return subject


@router.put("/{subject_id}", response_model=subject_model.Subject, summary="Update a Subject")
def update_subject(subject_id: str, subject_update: subject_model.SubjectCreate, db: DatabaseService = Depends(get_db_service)):
    subject = catalog_service.update_subject(subject_id, subject_data=subject_update, db=db)
    if subject is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subject not found")
    return subject


@router.delete("/{subject_id}", response_model=MessageResponse, summary="Delete a Subject")
def delete_subject(subject_id: str, db: DatabaseService = Depends(get_db_service)):
    if not catalog_service.delete_subject(subject_id, db=db):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subject not found")
    return {"message": "Subject deleted successfully"}
