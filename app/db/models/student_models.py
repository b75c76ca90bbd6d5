# /app/db/models/student_models.py

from sqlalchemy import Column, String, Boolean

from ..base_class import Base


class Student(Base):
    """
    SQLAlchemy model representing a single student enrolled in a Group.
    Students are soft-deleted by clearing `isActive`.
    """
    id = Column(String, primary_key=True, index=True)
    firstName = Column(String, nullable=False)
    lastName = Column(String, index=True, nullable=False)
    school = Column(String, nullable=False)
    grade = Column(String, nullable=False)
    group_id = Column(String, index=True, nullable=False)
    parentContact = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    imageUrl = Column(String, nullable=True)
    isActive = Column(Boolean, nullable=False, default=True, index=True)

    @property
    def fullName(self) -> str:
        return f"{self.firstName} {self.lastName}"
