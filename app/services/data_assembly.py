# /app/services/data_assembly.py

"""
Builds API-shaped dictionaries from ORM records, resolving ("populating")
reference fields along the way.

References are looked up in batches per response, never one query per row.
A reference whose target no longer exists populates as `None`; a dangling
id never fails the response.
"""

from typing import Dict, List, Optional

from .database_service import DatabaseService


def _columns(record) -> Dict:
    return {c.name: getattr(record, c.name) for c in record.__table__.columns}


# --- Projections ---

def subject_ref(subject) -> Optional[Dict]:
    if subject is None:
        return None
    return {"id": subject.id, "name": subject.name, "teacherName": subject.teacherName}


def student_ref(student) -> Optional[Dict]:
    if student is None:
        return None
    return {
        "id": student.id, "firstName": student.firstName, "lastName": student.lastName,
        "school": student.school, "grade": student.grade,
    }


def _group_dict(group, subjects_by_id: Dict) -> Optional[Dict]:
    if group is None:
        return None
    data = _columns(group)
    data["subject"] = subject_ref(subjects_by_id.get(data.pop("subject_id")))
    return data


def _populated_groups(group_ids, db: DatabaseService) -> Dict[str, Dict]:
    """Maps group id -> group dict with its subject populated."""
    groups_by_id = db.get_groups_by_ids(group_ids)
    subjects_by_id = db.get_subjects_by_ids(g.subject_id for g in groups_by_id.values())
    return {gid: _group_dict(g, subjects_by_id) for gid, g in groups_by_id.items()}


# --- Groups ---

def assemble_groups(groups: List, db: DatabaseService) -> List[Dict]:
    subjects_by_id = db.get_subjects_by_ids(g.subject_id for g in groups)
    return [_group_dict(g, subjects_by_id) for g in groups]


def assemble_group(group, db: DatabaseService) -> Dict:
    return assemble_groups([group], db)[0]


# --- Students ---

def assemble_students(students: List, db: DatabaseService) -> List[Dict]:
    groups = _populated_groups((s.group_id for s in students), db)
    assembled = []
    for student in students:
        data = _columns(student)
        data["group"] = groups.get(data.pop("group_id"))
        data["fullName"] = student.fullName
        assembled.append(data)
    return assembled


def assemble_student(student, db: DatabaseService) -> Dict:
    return assemble_students([student], db)[0]


# --- Test Results ---

def assemble_test_results(test_results: List, db: DatabaseService) -> List[Dict]:
    groups = _populated_groups((tr.group_id for tr in test_results), db)
    students_by_id = db.get_students_by_ids(
        entry.get("student") for tr in test_results for entry in (tr.results or [])
    )

    assembled = []
    for test_result in test_results:
        data = _columns(test_result)
        data["group"] = groups.get(data.pop("group_id"))
        data["results"] = [
            {**entry, "student": student_ref(students_by_id.get(entry.get("student")))}
            for entry in (test_result.results or [])
        ]
        assembled.append(data)
    return assembled


def assemble_test_result(test_result, db: DatabaseService) -> Dict:
    return assemble_test_results([test_result], db)[0]


# --- Achievements & Graduates ---

def assemble_achievement(achievement) -> Dict:
    # Achievements expose their optional group as a bare id.
    data = _columns(achievement)
    data["group"] = data.pop("group_id")
    return data


def assemble_graduates(graduates: List, db: DatabaseService) -> List[Dict]:
    groups = _populated_groups((g.previousGroup_id for g in graduates), db)
    assembled = []
    for graduate in graduates:
        data = _columns(graduate)
        data["previousGroup"] = groups.get(data.pop("previousGroup_id"))
        data["fullName"] = graduate.fullName
        assembled.append(data)
    return assembled


def assemble_graduate(graduate, db: DatabaseService) -> Dict:
    return assemble_graduates([graduate], db)[0]
