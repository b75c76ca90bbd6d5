# /app/services/database_service.py

from typing import Dict, Iterable, List, Optional, Generator, Set, Tuple
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from app.db.database import get_db

# --- Repository Imports ---
from .database_helpers.catalog_repository_sql import CatalogRepositorySQL
from .database_helpers.student_repository_sql import StudentRepositorySQL
from .database_helpers.test_result_repository_sql import TestResultRepositorySQL
from .database_helpers.showcase_repository_sql import ShowcaseRepositorySQL

from app.db.models.catalog_models import Subject, Group
from app.db.models.student_models import Student
from app.db.models.test_result_models import TestResult
from app.db.models.showcase_models import Achievement, Graduate


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Facade over the SQL repositories. The service layer talks only to this
        class, never to a Session directly.
        """
        self.db_session = db_session
        self.catalog_repo = CatalogRepositorySQL(db_session)
        self.student_repo = StudentRepositorySQL(db_session)
        self.test_result_repo = TestResultRepositorySQL(db_session)
        self.showcase_repo = ShowcaseRepositorySQL(db_session)

    # --- SUBJECT METHODS (DELEGATED) ---
    def get_all_subjects(self) -> List[Subject]: return self.catalog_repo.get_all_subjects()
    def get_subject_by_id(self, subject_id: str) -> Optional[Subject]: return self.catalog_repo.get_subject_by_id(subject_id)
    def get_subjects_by_ids(self, subject_ids: Iterable[str]) -> Dict[str, Subject]: return self.catalog_repo.get_subjects_by_ids(subject_ids)
    def find_subject_by_name(self, name: str, exclude_id: Optional[str] = None) -> Optional[Subject]: return self.catalog_repo.find_subject_by_name(name, exclude_id=exclude_id)
    def add_subject(self, record: Dict) -> Subject: return self.catalog_repo.add_subject(record)
    def update_subject(self, subject_id: str, data: Dict) -> Optional[Subject]: return self.catalog_repo.update_subject(subject_id, data)
    def delete_subject(self, subject_id: str) -> Optional[Subject]: return self.catalog_repo.delete_subject(subject_id)

    # --- GROUP METHODS (DELEGATED) ---
    def get_all_groups(self, subject_id: Optional[str] = None) -> List[Group]: return self.catalog_repo.get_all_groups(subject_id=subject_id)
    def get_group_by_id(self, group_id: str) -> Optional[Group]: return self.catalog_repo.get_group_by_id(group_id)
    def get_groups_by_ids(self, group_ids: Iterable[str]) -> Dict[str, Group]: return self.catalog_repo.get_groups_by_ids(group_ids)
    def find_group(self, name: str, subject_id: str, exclude_id: Optional[str] = None) -> Optional[Group]: return self.catalog_repo.find_group(name, subject_id, exclude_id=exclude_id)
    def add_group(self, record: Dict) -> Group: return self.catalog_repo.add_group(record)
    def update_group(self, group_id: str, data: Dict) -> Optional[Group]: return self.catalog_repo.update_group(group_id, data)
    def delete_group(self, group_id: str) -> Optional[Group]: return self.catalog_repo.delete_group(group_id)

    # --- STUDENT METHODS (DELEGATED) ---
    def get_students_page(self, page: int, limit: int, group_id: Optional[str] = None) -> Tuple[List[Student], int]:
        return self.student_repo.get_students_page(page, limit, group_id=group_id)
    def get_student_by_id(self, student_id: str) -> Optional[Student]: return self.student_repo.get_student_by_id(student_id)
    def get_students_by_ids(self, student_ids: Iterable[str]) -> Dict[str, Student]: return self.student_repo.get_students_by_ids(student_ids)
    def get_existing_student_ids(self, student_ids: Iterable[str]) -> Set[str]: return self.student_repo.get_existing_student_ids(student_ids)
    def add_student(self, record: Dict) -> Student: return self.student_repo.add_student(record)
    def update_student(self, student_id: str, data: Dict) -> Optional[Student]: return self.student_repo.update_student(student_id, data)
    def delete_student(self, student_id: str) -> Optional[Student]: return self.student_repo.delete_student(student_id)

    # --- TEST RESULT METHODS (DELEGATED) ---
    def get_test_results_page(self, page: int, limit: int, group_id: Optional[str] = None, subject_id: Optional[str] = None, published: Optional[bool] = None) -> Tuple[List[TestResult], int]:
        return self.test_result_repo.get_test_results_page(page, limit, group_id=group_id, subject_id=subject_id, published=published)
    def get_test_result_by_id(self, test_result_id: str) -> Optional[TestResult]: return self.test_result_repo.get_test_result_by_id(test_result_id)
    def count_test_results(self) -> int: return self.test_result_repo.count_test_results()
    def add_test_result(self, record: Dict) -> TestResult: return self.test_result_repo.add_test_result(record)
    def update_test_result(self, test_result_id: str, data: Dict) -> Optional[TestResult]: return self.test_result_repo.update_test_result(test_result_id, data)
    def delete_test_result(self, test_result_id: str) -> Optional[TestResult]: return self.test_result_repo.delete_test_result(test_result_id)

    # --- ACHIEVEMENT METHODS (DELEGATED) ---
    def get_achievements_page(self, page: int, limit: int, published: Optional[bool] = None, group_id: Optional[str] = None) -> Tuple[List[Achievement], int]:
        return self.showcase_repo.get_achievements_page(page, limit, published=published, group_id=group_id)
    def get_achievement_by_id(self, achievement_id: str) -> Optional[Achievement]: return self.showcase_repo.get_achievement_by_id(achievement_id)
    def add_achievement(self, record: Dict) -> Achievement: return self.showcase_repo.add_achievement(record)
    def update_achievement(self, achievement_id: str, data: Dict) -> Optional[Achievement]: return self.showcase_repo.update_achievement(achievement_id, data)
    def delete_achievement(self, achievement_id: str) -> Optional[Achievement]: return self.showcase_repo.delete_achievement(achievement_id)

    # --- GRADUATE METHODS (DELEGATED) ---
    def get_graduates_page(self, page: int, limit: int, published: Optional[bool] = None, admission_type: Optional[str] = None, field: Optional[str] = None) -> Tuple[List[Graduate], int]:
        return self.showcase_repo.get_graduates_page(page, limit, published=published, admission_type=admission_type, field=field)
    def get_graduate_by_id(self, graduate_id: str) -> Optional[Graduate]: return self.showcase_repo.get_graduate_by_id(graduate_id)
    def add_graduate(self, record: Dict) -> Graduate: return self.showcase_repo.add_graduate(record)
    def update_graduate(self, graduate_id: str, data: Dict) -> Optional[Graduate]: return self.showcase_repo.update_graduate(graduate_id, data)
    def delete_graduate(self, graduate_id: str) -> Optional[Graduate]: return self.showcase_repo.delete_graduate(graduate_id)


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a DatabaseService bound to the request's session."""
    yield DatabaseService(db_session=db)
