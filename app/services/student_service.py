# /app/services/student_service.py

import logging
from typing import Dict, Optional

from fastapi import UploadFile

from ..config import Settings
from ..db.base_class import new_id, utcnow
from ..exceptions import MissingReferenceError
from ..models import student_model
from . import data_assembly, upload_service
from .database_service import DatabaseService
from .pagination import build_pagination

logger = logging.getLogger(__name__)


def _student_record(student_data: student_model.StudentCreate) -> Dict:
    data = student_data.model_dump()
    data["group_id"] = data.pop("group")
    return data


def get_students(db: DatabaseService, page: int, limit: int, group_id: Optional[str] = None) -> Dict:
    """A page of active students, newest first."""
    students, total = db.get_students_page(page, limit, group_id=group_id)
    return {
        "data": data_assembly.assemble_students(students, db),
        "pagination": build_pagination(total, page, limit),
    }


def get_student(student_id: str, db: DatabaseService) -> Optional[Dict]:
    student = db.get_student_by_id(student_id)
    return data_assembly.assemble_student(student, db) if student else None


def create_student(
    student_data: student_model.StudentCreate,
    image: Optional[UploadFile],
    db: DatabaseService,
    settings: Settings,
) -> Dict:
    if db.get_group_by_id(student_data.group) is None:
        raise MissingReferenceError("Group")

    image_url = upload_service.save_image(image, "student", settings)
    record = {"id": new_id("stu"), **_student_record(student_data), "imageUrl": image_url}
    student = db.add_student(record)
    logger.info("Created student %s in group %s", student.id, student.group_id)
    return data_assembly.assemble_student(student, db)


def update_student(
    student_id: str,
    student_data: student_model.StudentUpdate,
    image: Optional[UploadFile],
    db: DatabaseService,
    settings: Settings,
) -> Optional[Dict]:
    """Replaces a student. A new image replaces the stored URL; no image keeps it."""
    if db.get_student_by_id(student_id) is None:
        return None
    if db.get_group_by_id(student_data.group) is None:
        raise MissingReferenceError("Group")

    data = {**_student_record(student_data), "updated_at": utcnow()}
    image_url = upload_service.save_image(image, "student", settings)
    if image_url:
        data["imageUrl"] = image_url

    student = db.update_student(student_id, data)
    return data_assembly.assemble_student(student, db) if student else None


def deactivate_student(student_id: str, db: DatabaseService) -> bool:
    """Soft delete: the student disappears from listings but keeps their data."""
    student = db.update_student(student_id, {"isActive": False, "updated_at": utcnow()})
    return student is not None


def delete_student_permanently(student_id: str, db: DatabaseService, settings: Settings) -> bool:
    student = db.delete_student(student_id)
    if student is None:
        return False
    upload_service.delete_image(student.imageUrl, settings)
    logger.info("Permanently deleted student %s", student_id)
    return True
