# /app/services/test_result_service.py

"""
This service module is the business logic layer for test results.

Every write follows the same pipeline:
1. Validate references (group and every student) and entry shape. Nothing
   is written if any check fails.
2. Normalize the scores: fill in missing percentages and recompute
   `averageScore` and `totalStudents` from the entries.
3. Persist, then return the record with its group and students populated.
"""

import logging
from typing import Dict, Optional

import pandas as pd

from ..db.base_class import new_id, utcnow
from ..models import test_result_model
from . import data_assembly
from .database_service import DatabaseService
from .pagination import build_pagination
from .publication import toggle_changes
from .test_result_helpers.reference_validation import validate_test_result_references
from .test_result_helpers.score_normalizer import normalize_results, check_percentage_bounds

logger = logging.getLogger(__name__)


def _prepare_record(payload: test_result_model.TestResultCreate, db: DatabaseService) -> Dict:
    """Runs validation and normalization; returns the column values to store."""
    data = payload.model_dump()
    validate_test_result_references(data["group"], data["results"], db)

    normalized = normalize_results(data["results"])
    check_percentage_bounds(normalized["results"])

    return {
        "group_id": data["group"],
        "testName": data["testName"],
        "testDate": data["testDate"],
        "results": normalized["results"],
        "averageScore": normalized["averageScore"],
        "totalStudents": normalized["totalStudents"],
        "description": data["description"],
        "isPublished": data["isPublished"],
    }


def get_test_results(
    db: DatabaseService,
    page: int,
    limit: int,
    group_id: Optional[str] = None,
    subject_id: Optional[str] = None,
    published: Optional[bool] = None,
) -> Dict:
    test_results, total = db.get_test_results_page(
        page, limit, group_id=group_id, subject_id=subject_id, published=published
    )
    return {
        "data": data_assembly.assemble_test_results(test_results, db),
        "pagination": build_pagination(total, page, limit),
    }


def get_test_result(test_result_id: str, db: DatabaseService) -> Optional[Dict]:
    test_result = db.get_test_result_by_id(test_result_id)
    return data_assembly.assemble_test_result(test_result, db) if test_result else None


def create_test_result(payload: test_result_model.TestResultCreate, db: DatabaseService) -> Dict:
    record = _prepare_record(payload, db)
    test_result = db.add_test_result({"id": new_id("tr"), **record})
    logger.info(
        "Created test result %s for group %s: %d students, average %.2f",
        test_result.id, test_result.group_id, test_result.totalStudents, test_result.averageScore,
    )
    return data_assembly.assemble_test_result(test_result, db)


def update_test_result(test_result_id: str, payload: test_result_model.TestResultCreate, db: DatabaseService) -> Optional[Dict]:
    """Replaces a test result. Returns None when it does not exist."""
    if db.get_test_result_by_id(test_result_id) is None:
        return None
    record = _prepare_record(payload, db)
    test_result = db.update_test_result(test_result_id, {**record, "updated_at": utcnow()})
    return data_assembly.assemble_test_result(test_result, db) if test_result else None


def toggle_publication(test_result_id: str, db: DatabaseService) -> Optional[Dict]:
    test_result = db.get_test_result_by_id(test_result_id)
    if test_result is None:
        return None
    test_result = db.update_test_result(test_result_id, toggle_changes(test_result))
    logger.info("Test result %s isPublished=%s", test_result_id, test_result.isPublished)
    return data_assembly.assemble_test_result(test_result, db)


def delete_test_result(test_result_id: str, db: DatabaseService) -> bool:
    return db.delete_test_result(test_result_id) is not None


# --- Data Export Logic ---

EXPORT_COLUMNS = ['Student Name', 'School', 'Grade', 'Score', 'Max Score', 'Percentage', 'Notes']


def export_scores_as_csv(test_result_id: str, db: DatabaseService) -> Optional[str]:
    """
    Generates a CSV of one test's scores, one row per entry in submission
    order. Students that no longer exist are exported as "Unknown student".
    """
    test_result = get_test_result(test_result_id, db)
    if test_result is None:
        return None

    export_data = []
    for entry in test_result["results"]:
        student = entry.get("student") or {}
        export_data.append({
            'Student Name': f"{student['firstName']} {student['lastName']}" if student else "Unknown student",
            'School': student.get('school', ''),
            'Grade': student.get('grade', ''),
            'Score': entry['score'],
            'Max Score': entry['maxScore'],
            'Percentage': entry['percentage'],
            'Notes': entry.get('notes') or '',
        })

    df = pd.DataFrame(export_data) if export_data else pd.DataFrame(columns=EXPORT_COLUMNS)
    return df.to_csv(index=False)


def export_filename(test_result: Dict) -> str:
    name = test_result.get("testName") or "test_result"
    return f"scores_{name.replace(' ', '_').lower()}.csv"
