# /app/services/showcase_service.py

"""
Business logic for the public showcase: student achievements and graduates
of the center. Both carry an optional image and a publish flag that defaults
to published.
"""

import logging
from typing import Dict, Optional

from fastapi import UploadFile

from ..config import Settings
from ..db.base_class import new_id, utcnow
from ..exceptions import MissingReferenceError
from ..models import achievement_model, graduate_model
from . import data_assembly, upload_service
from .database_service import DatabaseService
from .pagination import build_pagination
from .publication import toggle_changes

logger = logging.getLogger(__name__)


def _check_group_reference(group_id: Optional[str], db: DatabaseService) -> None:
    if group_id and db.get_group_by_id(group_id) is None:
        raise MissingReferenceError("Group")


# --- Achievements ---

def _achievement_record(payload: achievement_model.AchievementCreate) -> Dict:
    data = payload.model_dump()
    data["group_id"] = data.pop("group")
    data["achievementType"] = payload.achievementType.value
    if data.get("achievementDate") is None:
        data["achievementDate"] = utcnow()
    return data


def get_achievements(
    db: DatabaseService, page: int, limit: int, published: Optional[bool] = None, group_id: Optional[str] = None
) -> Dict:
    achievements, total = db.get_achievements_page(page, limit, published=published, group_id=group_id)
    return {
        "data": [data_assembly.assemble_achievement(a) for a in achievements],
        "pagination": build_pagination(total, page, limit),
    }


def get_achievement(achievement_id: str, db: DatabaseService) -> Optional[Dict]:
    achievement = db.get_achievement_by_id(achievement_id)
    return data_assembly.assemble_achievement(achievement) if achievement else None


def create_achievement(
    payload: achievement_model.AchievementCreate,
    image: Optional[UploadFile],
    db: DatabaseService,
    settings: Settings,
) -> Dict:
    _check_group_reference(payload.group, db)
    image_url = upload_service.save_image(image, "achievement", settings)
    record = {
        "id": new_id("ach"),
        **_achievement_record(payload),
        "imageUrl": image_url,
        # New achievements go straight to the public page.
        "isPublished": True,
    }
    achievement = db.add_achievement(record)
    logger.info("Created achievement %s (%s) for %s", achievement.id, achievement.title, achievement.studentName)
    return data_assembly.assemble_achievement(achievement)


def update_achievement(
    achievement_id: str,
    payload: achievement_model.AchievementUpdate,
    image: Optional[UploadFile],
    db: DatabaseService,
    settings: Settings,
) -> Optional[Dict]:
    existing = db.get_achievement_by_id(achievement_id)
    if existing is None:
        return None
    _check_group_reference(payload.group, db)

    data = {**_achievement_record(payload), "updated_at": utcnow()}
    if payload.achievementDate is None:
        # Keep the original date unless a new one is given.
        data.pop("achievementDate")
    image_url = upload_service.save_image(image, "achievement", settings)
    if image_url:
        data["imageUrl"] = image_url

    achievement = db.update_achievement(achievement_id, data)
    return data_assembly.assemble_achievement(achievement) if achievement else None


def toggle_achievement_publication(achievement_id: str, db: DatabaseService) -> Optional[Dict]:
    achievement = db.get_achievement_by_id(achievement_id)
    if achievement is None:
        return None
    achievement = db.update_achievement(achievement_id, toggle_changes(achievement))
    return data_assembly.assemble_achievement(achievement)


def delete_achievement(achievement_id: str, db: DatabaseService, settings: Settings) -> bool:
    achievement = db.delete_achievement(achievement_id)
    if achievement is None:
        return False
    upload_service.delete_image(achievement.imageUrl, settings)
    return True


# --- Graduates ---

def _graduate_record(payload: graduate_model.GraduateCreate) -> Dict:
    data = payload.model_dump()
    data["previousGroup_id"] = data.pop("previousGroup")
    data["admissionType"] = payload.admissionType.value
    return data


def get_graduates(
    db: DatabaseService,
    page: int,
    limit: int,
    published: Optional[bool] = None,
    admission_type: Optional[str] = None,
    field: Optional[str] = None,
) -> Dict:
    # Unknown admission types are ignored rather than rejected.
    valid_types = {t.value for t in graduate_model.AdmissionType}
    if admission_type not in valid_types:
        admission_type = None

    graduates, total = db.get_graduates_page(
        page, limit, published=published, admission_type=admission_type, field=field
    )
    return {
        "data": data_assembly.assemble_graduates(graduates, db),
        "pagination": build_pagination(total, page, limit),
    }


def get_graduate(graduate_id: str, db: DatabaseService) -> Optional[Dict]:
    graduate = db.get_graduate_by_id(graduate_id)
    return data_assembly.assemble_graduate(graduate, db) if graduate else None


def create_graduate(
    payload: graduate_model.GraduateCreate,
    image: Optional[UploadFile],
    db: DatabaseService,
    settings: Settings,
) -> Dict:
    _check_group_reference(payload.previousGroup, db)
    image_url = upload_service.save_image(image, "graduate", settings)
    graduate = db.add_graduate({"id": new_id("grd"), **_graduate_record(payload), "imageUrl": image_url})
    logger.info("Created graduate %s (%s)", graduate.id, graduate.fullName)
    return data_assembly.assemble_graduate(graduate, db)


def update_graduate(
    graduate_id: str,
    payload: graduate_model.GraduateCreate,
    image: Optional[UploadFile],
    db: DatabaseService,
    settings: Settings,
) -> Optional[Dict]:
    if db.get_graduate_by_id(graduate_id) is None:
        return None
    _check_group_reference(payload.previousGroup, db)

    data = {**_graduate_record(payload), "updated_at": utcnow()}
    image_url = upload_service.save_image(image, "graduate", settings)
    if image_url:
        data["imageUrl"] = image_url

    graduate = db.update_graduate(graduate_id, data)
    return data_assembly.assemble_graduate(graduate, db) if graduate else None


def toggle_graduate_publication(graduate_id: str, db: DatabaseService) -> Optional[Dict]:
    graduate = db.get_graduate_by_id(graduate_id)
    if graduate is None:
        return None
    graduate = db.update_graduate(graduate_id, toggle_changes(graduate))
    return data_assembly.assemble_graduate(graduate, db)


def delete_graduate(graduate_id: str, db: DatabaseService, settings: Settings) -> bool:
    graduate = db.delete_graduate(graduate_id)
    if graduate is None:
        return False
    upload_service.delete_image(graduate.imageUrl, settings)
    return True
