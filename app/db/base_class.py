# /app/db/base_class.py

import re
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime
from sqlalchemy.orm import declarative_base, declared_attr


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id(prefix: str) -> str:
    """Server-generated identifier, e.g. `stu_1a2b3c4d5e6f`."""
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


class CustomBase:
    """
    Shared columns for every entity table. Table names are derived from the
    class name (`TestResult` -> `test_results`).
    """

    @declared_attr
    def __tablename__(cls) -> str:
        return re.sub(r"(?<!^)(?=[A-Z])", "_", cls.__name__).lower() + "s"

    # Python-side defaults keep microsecond resolution for newest-first ordering.
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)


Base = declarative_base(cls=CustomBase)
