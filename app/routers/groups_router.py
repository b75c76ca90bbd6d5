# /app/routers/groups_router.py

from fastapi import APIRouter, Depends, HTTPException, status
from typing import List, Optional

from ..models import group_model
from ..models.common_model import MessageResponse
from ..services import catalog_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[group_model.Group], summary="Get All Groups, Optionally by Subject")
def get_all_groups(subjectId: Optional[str] = None, db: DatabaseService = Depends(get_db_service)):
    return catalog_service.get_all_groups(db=db, subject_id=subjectId)


@router.post("", response_model=group_model.Group, status_code=status.HTTP_201_CREATED, summary="Create a Group")
def create_group(group_create: group_model.GroupCreate, db: DatabaseService = Depends(get_db_service)):
    return catalog_service.create_group(group_data=group_create, db=db)


@router.get("/{group_id}", response_model=group_model.Group, summary="Get a Single Group")
def get_group(group_id: str, db: DatabaseService = Depends(get_db_service)):
    group = catalog_service.get_group(group_id, db=db)
    if group is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Group not found")
    return group


@router.put("/{group_id}", response_model=group_model.Group, summary="Update a Group")
def update_group(group_id: str, group_update: group_model.GroupCreate, db: DatabaseService = Depends(get_db_service)):
    group = catalog_service.update_group(group_id, group_data=group_update, db=db)
    if group is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Group not found")
    return group


@router.delete("/{group_id}", response_model=MessageResponse, summary="Delete a Group")
def delete_group(group_id: str, db: DatabaseService = Depends(get_db_service)):
    if not catalog_service.delete_group(group_id, db=db):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Group not found")
    return {"message": "Group deleted successfully"}
