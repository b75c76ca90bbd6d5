# /app/services/database_helpers/test_result_repository_sql.py

"""
Raw SQLAlchemy queries for the TestResult table.

The subject filter is the one place where a list query goes through another
entity: test results only know their group, so filtering by subject joins
Group inside the query. Both the page and the total are therefore computed
against the post-join set.
"""

from typing import Dict, List, Optional, Tuple
from sqlalchemy.orm import Session

from app.db.models.test_result_models import TestResult
from app.db.models.catalog_models import Group
from ..pagination import paginate


class TestResultRepositorySQL:
    __test__ = False

    def __init__(self, db_session: Session):
        self.db = db_session

    def get_test_results_page(
        self,
        page: int,
        limit: int,
        group_id: Optional[str] = None,
        subject_id: Optional[str] = None,
        published: Optional[bool] = None,
    ) -> Tuple[List[TestResult], int]:
        query = self.db.query(TestResult)
        if group_id:
            query = query.filter(TestResult.group_id == group_id)
        if published is not None:
            query = query.filter(TestResult.isPublished.is_(published))
        if subject_id:
            query = (
                query.join(Group, TestResult.group_id == Group.id)
                .filter(Group.subject_id == subject_id)
            )
        return paginate(query, TestResult.created_at.desc(), page, limit)

    def get_test_result_by_id(self, test_result_id: str) -> Optional[TestResult]:
        return self.db.query(TestResult).filter(TestResult.id == test_result_id).first()

    def count_test_results(self) -> int:
        return self.db.query(TestResult).count()

    def add_test_result(self, record: Dict) -> TestResult:
        new_result = TestResult(**record)
        self.db.add(new_result)
        self.db.commit()
        self.db.refresh(new_result)
        return new_result

    def update_test_result(self, test_result_id: str, data: Dict) -> Optional[TestResult]:
        db_result = self.get_test_result_by_id(test_result_id)
        if db_result:
            for key, value in data.items():
                setattr(db_result, key, value)
            self.db.commit()
            self.db.refresh(db_result)
        return db_result

    def delete_test_result(self, test_result_id: str) -> Optional[TestResult]:
        db_result = self.get_test_result_by_id(test_result_id)
        if db_result:
            self.db.delete(db_result)
            self.db.commit()
        return db_result
