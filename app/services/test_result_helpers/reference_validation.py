# /app/services/test_result_helpers/reference_validation.py

"""
Checks that everything a test result points at actually exists before it is
written. All checks run first; nothing is persisted unless every one passes.
"""

from typing import Any, Dict, List

from ...exceptions import MissingReferenceError, ValidationError
from ..database_service import DatabaseService


def validate_result_entries(results: List[Dict[str, Any]]) -> None:
    """Every entry needs a student and a defined, non-negative score."""
    for entry in results:
        score = entry.get("score")
        if not entry.get("student") or score is None or score < 0:
            raise ValidationError("Each result must have a valid student and score (0 or higher)")


def validate_test_result_references(group_id: str, results: List[Dict[str, Any]], db: DatabaseService) -> None:
    """
    Raises `MissingReferenceError` for an unknown group or student, or
    `ValidationError` for a malformed entry.

    Student existence is resolved with one batched lookup; the error names the
    first missing student in the order the entries were submitted.
    """
    if not group_id or db.get_group_by_id(group_id) is None:
        raise MissingReferenceError("Group")

    validate_result_entries(results)

    existing_ids = db.get_existing_student_ids(entry["student"] for entry in results)
    for entry in results:
        if entry["student"] not in existing_ids:
            raise MissingReferenceError(
                f"Student {entry['student']}",
                message=f"Student with ID {entry['student']} not found",
            )
