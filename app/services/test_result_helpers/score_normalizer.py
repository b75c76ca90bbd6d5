# /app/services/test_result_helpers/score_normalizer.py

"""
Derives the computed fields of a test result from its raw scores.

`normalize_results` is a pure function: the service calls it explicitly right
before every create and update, and whatever `averageScore` /
`totalStudents` the client sent is discarded in favour of its output.

The average is taken over per-entry percentages, so every entry weighs the
same regardless of its point scale.
"""

import math
from typing import Any, Dict, List, Optional

from ...exceptions import ValidationError

DEFAULT_MAX_SCORE = 100


def round_half_up(value: float) -> int:
    """Rounds .5 upwards (12.5 -> 13), unlike Python's banker's `round`."""
    return int(math.floor(value + 0.5))


def compute_percentage(score: float, max_score: Optional[float]) -> int:
    # A missing, zero or negative maxScore falls back to the default scale.
    scale = max_score if max_score and max_score > 0 else DEFAULT_MAX_SCORE
    return round_half_up(score / scale * 100)


def normalize_results(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Returns `{"results", "averageScore", "totalStudents"}` for a list of
    result entries.

    Entries without a percentage get one computed from score and maxScore; a
    supplied percentage is kept as is. The input list and its dicts are not
    modified.
    """
    normalized = []
    for entry in results:
        item = dict(entry)
        if item.get("maxScore") is None:
            item["maxScore"] = DEFAULT_MAX_SCORE
        if item.get("percentage") is None:
            item["percentage"] = compute_percentage(item["score"], item["maxScore"])
        normalized.append(item)

    if not normalized:
        return {"results": [], "averageScore": 0, "totalStudents": 0}

    total_percentage = sum(item["percentage"] for item in normalized)
    return {
        "results": normalized,
        "averageScore": total_percentage / len(normalized),
        "totalStudents": len(normalized),
    }


def check_percentage_bounds(results: List[Dict[str, Any]]) -> None:
    """Rejects entries whose resolved percentage falls outside 0..100 (e.g. score > maxScore)."""
    for entry in results:
        if not 0 <= entry["percentage"] <= 100:
            raise ValidationError(
                f"Score {entry['score']} out of {entry['maxScore']} for student {entry.get('student')} "
                f"gives a percentage outside 0-100"
            )
