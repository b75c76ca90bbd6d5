# /app/services/catalog_service.py

"""
Business logic for the course catalogue: subjects and the groups taught
within them.

Subject names are unique across the center and group names are unique per
subject. Both rules are checked here so the client gets a readable 400, and
are backed by database constraints.
"""

import logging
from typing import Dict, List, Optional

from ..db.base_class import new_id, utcnow
from ..exceptions import MissingReferenceError, ValidationError
from ..models import subject_model, group_model
from . import data_assembly
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


# --- Subjects ---

def get_all_subjects(db: DatabaseService) -> List:
    return db.get_all_subjects()


def get_subject(subject_id: str, db: DatabaseService):
    return db.get_subject_by_id(subject_id)


def create_subject(subject_data: subject_model.SubjectCreate, db: DatabaseService):
    if db.find_subject_by_name(subject_data.name):
        raise ValidationError("A subject with this name already exists")

    record = {"id": new_id("sub"), **subject_data.model_dump()}
    subject = db.add_subject(record)
    logger.info("Created subject %s (%s)", subject.id, subject.name)
    return subject


def update_subject(subject_id: str, subject_data: subject_model.SubjectCreate, db: DatabaseService):
    """Returns None when the subject does not exist."""
    if db.find_subject_by_name(subject_data.name, exclude_id=subject_id):
        raise ValidationError("A subject with this name already exists")
    return db.update_subject(subject_id, {**subject_data.model_dump(), "updated_at": utcnow()})


def delete_subject(subject_id: str, db: DatabaseService) -> bool:
    deleted = db.delete_subject(subject_id)
    if deleted:
        logger.info("Deleted subject %s", subject_id)
    return deleted is not None


# --- Groups ---

def _group_record(group_data: group_model.GroupCreate) -> Dict:
    data = group_data.model_dump()
    data["subject_id"] = data.pop("subject")
    return data


def _check_group(group_data: group_model.GroupCreate, db: DatabaseService, exclude_id: Optional[str] = None):
    if db.get_subject_by_id(group_data.subject) is None:
        raise MissingReferenceError("Subject")
    if db.find_group(group_data.name, group_data.subject, exclude_id=exclude_id):
        raise ValidationError("Group with this name already exists for this subject")


def get_all_groups(db: DatabaseService, subject_id: Optional[str] = None) -> List[Dict]:
    return data_assembly.assemble_groups(db.get_all_groups(subject_id=subject_id), db)


def get_group(group_id: str, db: DatabaseService) -> Optional[Dict]:
    group = db.get_group_by_id(group_id)
    return data_assembly.assemble_group(group, db) if group else None


def create_group(group_data: group_model.GroupCreate, db: DatabaseService) -> Dict:
    _check_group(group_data, db)
    group = db.add_group({"id": new_id("grp"), **_group_record(group_data)})
    logger.info("Created group %s (%s) for subject %s", group.id, group.name, group.subject_id)
    return data_assembly.assemble_group(group, db)


def update_group(group_id: str, group_data: group_model.GroupCreate, db: DatabaseService) -> Optional[Dict]:
    _check_group(group_data, db, exclude_id=group_id)
    group = db.update_group(group_id, {**_group_record(group_data), "updated_at": utcnow()})
    return data_assembly.assemble_group(group, db) if group else None


def delete_group(group_id: str, db: DatabaseService) -> bool:
    # Students and test results keep pointing at the deleted id.
    deleted = db.delete_group(group_id)
    if deleted:
        logger.info("Deleted group %s", group_id)
    return deleted is not None
