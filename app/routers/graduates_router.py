# /app/routers/graduates_router.py

from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File, Form, Query
from typing import Dict, Optional

from ..config import Settings, get_settings
from ..models import graduate_model
from ..models.common_model import MessageResponse
from ..services import showcase_service
from ..services.database_service import DatabaseService, get_db_service
from ..services.pagination import resolve_page_params

router = APIRouter()


def _graduate_form(
    firstName: Optional[str] = Form(None),
    lastName: Optional[str] = Form(None),
    admissionType: Optional[str] = Form(None),
    field: Optional[str] = Form(None),
    university: Optional[str] = Form(None),
    admissionYear: Optional[str] = Form(None),
    previousGroup: Optional[str] = Form(None),
    graduationYear: Optional[str] = Form(None),
    finalScore: Optional[str] = Form(None),
    notes: Optional[str] = Form(None),
    isPublished: Optional[bool] = Form(None),
) -> Dict:
    """Collects the multipart graduate fields; validation happens in `GraduateCreate`."""
    fields = dict(
        firstName=firstName, lastName=lastName, admissionType=admissionType, field=field,
        university=university, admissionYear=admissionYear, previousGroup=previousGroup,
        graduationYear=graduationYear, finalScore=finalScore, notes=notes,
    )
    if isPublished is not None:
        fields["isPublished"] = isPublished
    return fields


@router.get("", response_model=graduate_model.GraduatePage, summary="Get Graduates with Filtering and Pagination")
def get_graduates(
    published: Optional[bool] = None,
    admissionType: Optional[str] = None,
    field: Optional[str] = None,
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    db: DatabaseService = Depends(get_db_service),
    settings: Settings = Depends(get_settings),
):
    page, limit = resolve_page_params(page, limit, settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE)
    return showcase_service.get_graduates(
        db=db, page=page, limit=limit, published=published, admission_type=admissionType, field=field
    )


@router.post("", response_model=graduate_model.Graduate, status_code=status.HTTP_201_CREATED, summary="Create a Graduate (multipart, optional image)")
def create_graduate(
    fields: Dict = Depends(_graduate_form),
    image: Optional[UploadFile] = File(None),
    db: DatabaseService = Depends(get_db_service),
    settings: Settings = Depends(get_settings),
):
    payload = graduate_model.GraduateCreate(**fields)
    return showcase_service.create_graduate(payload, image=image, db=db, settings=settings)


@router.get("/{graduate_id}", response_model=graduate_model.Graduate, summary="Get a Single Graduate")
def get_graduate(graduate_id: str, db: DatabaseService = Depends(get_db_service)):
    graduate = showcase_service.get_graduate(graduate_id, db=db)
    if graduate is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Graduate not found")
    return graduate


@router.put("/{graduate_id}", response_model=graduate_model.Graduate, summary="Update a Graduate (multipart, optional image)")
def update_graduate(
    graduate_id: str,
    fields: Dict = Depends(_graduate_form),
    image: Optional[UploadFile] = File(None),
    db: DatabaseService = Depends(get_db_service),
    settings: Settings = Depends(get_settings),
):
    payload = graduate_model.GraduateCreate(**fields)
    graduate = showcase_service.update_graduate(graduate_id, payload, image=image, db=db, settings=settings)
    if graduate is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Graduate not found")
    return graduate


@router.patch("/{graduate_id}/publish", response_model=graduate_model.Graduate, summary="Toggle Publish Status")
def toggle_publish(graduate_id: str, db: DatabaseService = Depends(get_db_service)):
    graduate = showcase_service.toggle_graduate_publication(graduate_id, db=db)
    if graduate is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Graduate not found")
    return graduate


@router.delete("/{graduate_id}", response_model=MessageResponse, summary="Delete a Graduate")
def delete_graduate(
    graduate_id: str,
    db: DatabaseService = Depends(get_db_service),
    settings: Settings = Depends(get_settings),
):
    if not showcase_service.delete_graduate(graduate_id, db=db, settings=settings):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Graduate not found")
    return {"message": "Graduate deleted successfully"}
