# /tests/test_reference_validation.py

import pytest
from unittest.mock import MagicMock

from app.exceptions import MissingReferenceError, ValidationError
from app.services.test_result_helpers.reference_validation import (
    validate_result_entries,
    validate_test_result_references,
)


@pytest.fixture
def mock_db_service():
    db = MagicMock()
    db.get_group_by_id.return_value = MagicMock(id="grp_1")
    db.get_existing_student_ids.return_value = {"stu_1", "stu_2"}
    return db


def test_valid_references_pass(mock_db_service):
    results = [{"student": "stu_1", "score": 10}, {"student": "stu_2", "score": 0}]
    validate_test_result_references("grp_1", results, mock_db_service)
    mock_db_service.get_existing_student_ids.assert_called_once()


def test_missing_group_is_reported_first(mock_db_service):
    """
    GIVEN: an unknown group and an unknown student
    WHEN:  references are validated
    THEN:  the group error wins and students are never looked up.
    """
    mock_db_service.get_group_by_id.return_value = None
    results = [{"student": "stu_missing", "score": 10}]

    with pytest.raises(MissingReferenceError) as exc_info:
        validate_test_result_references("grp_missing", results, mock_db_service)

    assert exc_info.value.message == "Group not found"
    assert exc_info.value.status_code == 400
    mock_db_service.get_existing_student_ids.assert_not_called()


def test_first_missing_student_in_request_order_is_named(mock_db_service):
    results = [
        {"student": "stu_1", "score": 10},
        {"student": "stu_x", "score": 10},
        {"student": "stu_y", "score": 10},
    ]

    with pytest.raises(MissingReferenceError) as exc_info:
        validate_test_result_references("grp_1", results, mock_db_service)

    assert exc_info.value.message == "Student with ID stu_x not found"


@pytest.mark.parametrize("entry", [
    {"student": "", "score": 10},
    {"student": "stu_1", "score": None},
    {"student": "stu_1", "score": -1},
    {"score": 5},
])
def test_malformed_entries_are_rejected(entry):
    with pytest.raises(ValidationError):
        validate_result_entries([entry])


def test_zero_score_is_valid():
    validate_result_entries([{"student": "stu_1", "score": 0}])


def test_inactive_students_still_count_as_existing(db_service):
    db_service.add_subject({"id": "sub_1", "name": "Physics", "teacherName": "B"})
    db_service.add_group({"id": "grp_1", "name": "P-1", "subject_id": "sub_1"})
    db_service.add_student({
        "id": "stu_1", "firstName": "A", "lastName": "B", "school": "S", "grade": "9",
        "group_id": "grp_1", "isActive": False,
    })

    validate_test_result_references("grp_1", [{"student": "stu_1", "score": 5}], db_service)
