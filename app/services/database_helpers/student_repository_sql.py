# /app/services/database_helpers/student_repository_sql.py

"""
Raw SQLAlchemy queries for the Student table.
"""

from typing import Dict, Iterable, List, Optional, Set, Tuple
from sqlalchemy.orm import Session

from app.db.models.student_models import Student
from ..pagination import paginate


class StudentRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def get_students_page(self, page: int, limit: int, group_id: Optional[str] = None) -> Tuple[List[Student], int]:
        """Active students only, newest first."""
        query = self.db.query(Student).filter(Student.isActive.is_(True))
        if group_id:
            query = query.filter(Student.group_id == group_id)
        return paginate(query, Student.created_at.desc(), page, limit)

    def get_student_by_id(self, student_id: str) -> Optional[Student]:
        return self.db.query(Student).filter(Student.id == student_id).first()

    def get_students_by_ids(self, student_ids: Iterable[str]) -> Dict[str, Student]:
        ids = {i for i in student_ids if i}
        if not ids:
            return {}
        return {s.id: s for s in self.db.query(Student).filter(Student.id.in_(ids)).all()}

    def get_existing_student_ids(self, student_ids: Iterable[str]) -> Set[str]:
        """
        Returns the subset of `student_ids` that exist, in a single query.
        Inactive (soft-deleted) students still count as existing.
        """
        ids = {i for i in student_ids if i}
        if not ids:
            return set()
        rows = self.db.query(Student.id).filter(Student.id.in_(ids)).all()
        return {row[0] for row in rows}

    def add_student(self, record: Dict) -> Student:
        new_student = Student(**record)
        self.db.add(new_student)
        self.db.commit()
        self.db.refresh(new_student)
        return new_student

    def update_student(self, student_id: str, data: Dict) -> Optional[Student]:
        db_student = self.get_student_by_id(student_id)
        if db_student:
            for key, value in data.items():
                setattr(db_student, key, value)
            self.db.commit()
            self.db.refresh(db_student)
        return db_student

    def delete_student(self, student_id: str) -> Optional[Student]:
        """Permanent delete. Test results that reference the student keep the id."""
        db_student = self.get_student_by_id(student_id)
        if db_student:
            self.db.delete(db_student)
            self.db.commit()
        return db_student
