# /app/db/models/showcase_models.py

"""
SQLAlchemy ORM models for the public-facing showcase records: student
`Achievement`s (certificates, awards, ...) and `Graduate`s of the center.
Both are published by default.
"""

from sqlalchemy import Column, String, Integer, Float, Boolean, DateTime

from ..base_class import Base, utcnow


class Achievement(Base):
    id = Column(String, primary_key=True, index=True)
    studentName = Column(String, nullable=False)
    age = Column(Integer, nullable=False)
    school = Column(String, nullable=True, default="")
    group_id = Column(String, index=True, nullable=True)
    achievementType = Column(String, nullable=False, default="certificate")
    title = Column(String, nullable=False)
    level = Column(String, nullable=False)
    description = Column(String, nullable=True, default="")
    imageUrl = Column(String, nullable=True)
    achievementDate = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    organization = Column(String, nullable=True, default="")
    isPublished = Column(Boolean, nullable=False, default=True, index=True)


class Graduate(Base):
    id = Column(String, primary_key=True, index=True)
    firstName = Column(String, nullable=False)
    lastName = Column(String, nullable=False)
    imageUrl = Column(String, nullable=True)
    admissionType = Column(String, index=True, nullable=False)
    field = Column(String, nullable=False)
    university = Column(String, nullable=False)
    admissionYear = Column(Integer, nullable=False)
    previousGroup_id = Column(String, index=True, nullable=True)
    graduationYear = Column(Integer, nullable=True)
    finalScore = Column(Float, nullable=True)
    notes = Column(String, nullable=True)
    isPublished = Column(Boolean, nullable=False, default=True, index=True)

    @property
    def fullName(self) -> str:
        return f"{self.firstName} {self.lastName}"
