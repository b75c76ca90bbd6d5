# /app/routers/achievements_router.py

from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File, Form, Query
from typing import Optional

from ..config import Settings, get_settings
from ..models import achievement_model
from ..models.common_model import MessageResponse
from ..services import showcase_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.pagination import resolve_page_params

router = APIRouter()


@router.get("", response_model=achievement_model.AchievementPage, summary="Get Achievements with Filtering and Pagination")
def get_achievements(
    published: Optional[bool] = None,
    groupId: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    db: DatabaseService = Depends(get_db_service),
    settings: Settings = Depends(get_settings),
):
    page, limit = resolve_page_params(page, limit, settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)
    return showcase_service.get_achievements(db=db, page=page, limit=limit, published=published, group_id=groupId)


@router.post("", response_model=achievement_model.Achievement, status_code=status.HTTP_201_CREATED, summary="Create an Achievement (multipart, optional image)")
def create_achievement(
    studentName: Optional[str] = Form(None),
    age: Optional[str] = Form(None),
    school: Optional[str] = Form(None),
    group: Optional[str] = Form(None),
    achievementType: Optional[str] = Form(None),
    title: Optional[str] = Form(None),
    level: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    organization: Optional[str] = Form(None),
    achievementDate: Optional[str] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: DatabaseService = Depends(get_db_service),
    settings: Settings = Depends(get_settings),
):
    fields = dict(
        studentName=studentName, age=age, school=school, group=group,
        achievementType=achievementType, title=title, level=level,
        description=description, organization=organization, achievementDate=achievementDate,
    )
    if not achievementType:
        fields.pop("achievementType")
    payload = achievement_model.AchievementCreate(**fields)
    return showcase_service.create_achievement(payload, image=image, db=db, settings=settings)


@router.get("/{achievement_id}", response_model=achievement_model.Achievement, summary="Get a Single Achievement")
def get_achievement(achievement_id: str, db: DatabaseService = Depends(get_db_service)):
    achievement = showcase_service.get_achievement(achievement_id, db=db)
    if achievement is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Achievement not found")
    return achievement


@router.put("/{achievement_id}", response_model=achievement_model.Achievement, summary="Update an Achievement (multipart, optional image)")
def update_achievement(
    achievement_id: str,
    studentName: Optional[str] = Form(None),
    age: Optional[str] = Form(None),
    school: Optional[str] = Form(None),
    group: Optional[str] = Form(None),
    achievementType: Optional[str] = Form(None),
    title: Optional[str] = Form(None),
    level: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    organization: Optional[str] = Form(None),
    achievementDate: Optional[str] = Form(None),
    isPublished: Optional[bool] = Form(None),
    image: Optional[UploadFile] = File(None),
    db: DatabaseService = Depends(get_db_service),
    settings: Settings = Depends(get_settings),
):
    fields = dict(
        studentName=studentName, age=age, school=school, group=group,
        achievementType=achievementType, title=title, level=level,
        description=description, organization=organization, achievementDate=achievementDate,
        isPublished=isPublished,
    )
    if not achievementType:
        fields.pop("achievementType")
    if isPublished is None:
        fields.pop("isPublished")
    payload = achievement_model.AchievementUpdate(**fields)
    achievement = showcase_service.update_achievement(achievement_id, payload, image=image, db=db, settings=settings)
    if achievement is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Achievement not found")
    return achievement


@router.patch("/{achievement_id}/publish", response_model=achievement_model.Achievement, summary="Toggle Publish Status")
def toggle_publish(achievement_id: str, db: DatabaseService = Depends(get_db_service)):
    achievement = showcase_service.toggle_achievement_publication(achievement_id, db=db)
    if achievement is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Achievement not found")
    return achievement


@router.delete("/{achievement_id}", response_model=MessageResponse, summary="Delete an Achievement")
def delete_achievement(
    achievement_id: str,
    db: DatabaseService = Depends(get_db_service),
    settings: Settings = Depends(get_settings),
):
    if not showcase_service.delete_achievement(achievement_id, db=db, settings=settings):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Achievement not found")
    return {"message": "Achievement deleted successfully"}
