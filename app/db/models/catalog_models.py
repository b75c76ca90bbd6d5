# /app/db/models/catalog_models.py

"""
SQLAlchemy ORM models for the `Subject` and `Group` entities: the course
catalogue that students and test results hang off.
"""

from sqlalchemy import Column, String, UniqueConstraint

from ..base_class import Base


class Subject(Base):
    """A taught subject. Subject names are unique across the center."""
    id = Column(String, primary_key=True, index=True)
    name = Column(String, unique=True, index=True, nullable=False)
    teacherName = Column(String, index=True, nullable=False)
    description = Column(String, nullable=True)


class Group(Base):
    """
    A teacher-led group within a subject.

    `subject_id` is a plain identifier rather than a foreign key: references
    are resolved on read and may dangle after the subject is deleted.
    """
    __table_args__ = (UniqueConstraint("name", "subject_id", name="uq_group_name_subject"),)

    id = Column(String, primary_key=True, index=True)
    name = Column(String, index=True, nullable=False)
    teacherName = Column(String, nullable=True)
    subject_id = Column(String, index=True, nullable=False)
    description = Column(String, nullable=True)
