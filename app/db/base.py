# /app/db/base.py

# Central registry for all our SQLAlchemy models. Importing them here makes
# sure `Base.metadata` knows every table before `create_all` runs at startup.

from .base_class import Base

from .models.catalog_models import Subject, Group
from .models.student_models import Student
from .models.test_result_models import TestResult
from .models.showcase_models import Achievement, Graduate
