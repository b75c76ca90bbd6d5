# /app/services/database_helpers/catalog_repository_sql.py

"""
This module contains all the raw SQLAlchemy queries for the Subject and Group
tables. It is the direct interface to the database for the course catalogue.

References are plain identifiers, so the batch lookups (`get_*_by_ids`) are
how the service layer "populates" them: missing ids are simply absent from
the returned mapping.
"""

from typing import Dict, Iterable, List, Optional
from sqlalchemy.orm import Session

from app.db.models.catalog_models import Subject, Group


class CatalogRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Subject Methods ---

    def get_all_subjects(self) -> List[Subject]:
        return self.db.query(Subject).order_by(Subject.created_at.desc()).all()

    def get_subject_by_id(self, subject_id: str) -> Optional[Subject]:
        return self.db.query(Subject).filter(Subject.id == subject_id).first()

    def get_subjects_by_ids(self, subject_ids: Iterable[str]) -> Dict[str, Subject]:
        ids = {i for i in subject_ids if i}
        if not ids:
            return {}
        return {s.id: s for s in self.db.query(Subject).filter(Subject.id.in_(ids)).all()}

    def find_subject_by_name(self, name: str, exclude_id: Optional[str] = None) -> Optional[Subject]:
        """Finds a subject with this exact name, optionally ignoring one id (for updates)."""
        query = self.db.query(Subject).filter(Subject.name == name)
        if exclude_id:
            query = query.filter(Subject.id != exclude_id)
        return query.first()

    def add_subject(self, record: Dict) -> Subject:
        new_subject = Subject(**record)
        self.db.add(new_subject)
        self.db.commit()
        self.db.refresh(new_subject)
        return new_subject

    def update_subject(self, subject_id: str, data: Dict) -> Optional[Subject]:
        db_subject = self.get_subject_by_id(subject_id)
        if db_subject:
            for key, value in data.items():
                setattr(db_subject, key, value)
            self.db.commit()
            self.db.refresh(db_subject)
        return db_subject

    def delete_subject(self, subject_id: str) -> Optional[Subject]:
        # Groups that reference this subject are left as they are.
        db_subject = self.get_subject_by_id(subject_id)
        if db_subject:
            self.db.delete(db_subject)
            self.db.commit()
        return db_subject

    # --- Group Methods ---

    def get_all_groups(self, subject_id: Optional[str] = None) -> List[Group]:
        query = self.db.query(Group)
        if subject_id:
            query = query.filter(Group.subject_id == subject_id)
        return query.order_by(Group.created_at.desc()).all()

    def get_group_by_id(self, group_id: str) -> Optional[Group]:
        return self.db.query(Group).filter(Group.id == group_id).first()

    def get_groups_by_ids(self, group_ids: Iterable[str]) -> Dict[str, Group]:
        ids = {i for i in group_ids if i}
        if not ids:
            return {}
        return {g.id: g for g in self.db.query(Group).filter(Group.id.in_(ids)).all()}

    def find_group(self, name: str, subject_id: str, exclude_id: Optional[str] = None) -> Optional[Group]:
        """Finds a group by its (name, subject) pair, optionally ignoring one id."""
        query = self.db.query(Group).filter(Group.name == name, Group.subject_id == subject_id)
        if exclude_id:
            query = query.filter(Group.id != exclude_id)
        return query.first()

    def add_group(self, record: Dict) -> Group:
        new_group = Group(**record)
        self.db.add(new_group)
        self.db.commit()
        self.db.refresh(new_group)
        return new_group

    def update_group(self, group_id: str, data: Dict) -> Optional[Group]:
        db_group = self.get_group_by_id(group_id)
        if db_group:
            for key, value in data.items():
                setattr(db_group, key, value)
            self.db.commit()
            self.db.refresh(db_group)
        return db_group

    def delete_group(self, group_id: str) -> Optional[Group]:
        db_group = self.get_group_by_id(group_id)
        if db_group:
            self.db.delete(db_group)
            self.db.commit()
        return db_group
