# /app/services/database_helpers/showcase_repository_sql.py

"""
Raw SQLAlchemy queries for the Achievement and Graduate tables.
"""

from typing import Dict, List, Optional, Tuple
from sqlalchemy.orm import Session

from app.db.models.showcase_models import Achievement, Graduate
from ..pagination import paginate


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ShowcaseRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Achievement Methods ---

    def get_achievements_page(
        self,
        page: int,
        limit: int,
        published: Optional[bool] = None,
        group_id: Optional[str] = None,
    ) -> Tuple[List[Achievement], int]:
        query = self.db.query(Achievement)
        if published is not None:
            query = query.filter(Achievement.isPublished.is_(published))
        if group_id:
            query = query.filter(Achievement.group_id == group_id)
        return paginate(query, Achievement.created_at.desc(), page, limit)

    def get_achievement_by_id(self, achievement_id: str) -> Optional[Achievement]:
        return self.db.query(Achievement).filter(Achievement.id == achievement_id).first()

    def add_achievement(self, record: Dict) -> Achievement:
        new_achievement = Achievement(**record)
        self.db.add(new_achievement)
        self.db.commit()
        self.db.refresh(new_achievement)
        return new_achievement

    def update_achievement(self, achievement_id: str, data: Dict) -> Optional[Achievement]:
        db_achievement = self.get_achievement_by_id(achievement_id)
        if db_achievement:
            for key, value in data.items():
                setattr(db_achievement, key, value)
            self.db.commit()
            self.db.refresh(db_achievement)
        return db_achievement

    def delete_achievement(self, achievement_id: str) -> Optional[Achievement]:
        db_achievement = self.get_achievement_by_id(achievement_id)
        if db_achievement:
            self.db.delete(db_achievement)
            self.db.commit()
        return db_achievement

    # --- Graduate Methods ---

    def get_graduates_page(
        self,
        page: int,
        limit: int,
        published: Optional[bool] = None,
        admission_type: Optional[str] = None,
        field: Optional[str] = None,
    ) -> Tuple[List[Graduate], int]:
        query = self.db.query(Graduate)
        if published is not None:
            query = query.filter(Graduate.isPublished.is_(published))
        if admission_type:
            query = query.filter(Graduate.admissionType == admission_type)
        if field:
            # Case-insensitive substring match on the study field.
            query = query.filter(Graduate.field.ilike(f"%{_escape_like(field)}%", escape="\\"))
        return paginate(query, Graduate.created_at.desc(), page, limit)

    def get_graduate_by_id(self, graduate_id: str) -> Optional[Graduate]:
        return self.db.query(Graduate).filter(Graduate.id == graduate_id).first()

    def add_graduate(self, record: Dict) -> Graduate:
        new_graduate = Graduate(**record)
        self.db.add(new_graduate)
        self.db.commit()
        self.db.refresh(new_graduate)
        return new_graduate

    def update_graduate(self, graduate_id: str, data: Dict) -> Optional[Graduate]:
        db_graduate = self.get_graduate_by_id(graduate_id)
        if db_graduate:
            for key, value in data.items():
                setattr(db_graduate, key, value)
            self.db.commit()
            self.db.refresh(db_graduate)
        return db_graduate

    def delete_graduate(self, graduate_id: str) -> Optional[Graduate]:
        db_graduate = self.get_graduate_by_id(graduate_id)
        if db_graduate:
            self.db.delete(db_graduate)
            self.db.commit()
        return db_graduate
