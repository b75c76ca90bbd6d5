# /app/services/publication.py

"""
Publish/unpublish state machine shared by test results, achievements and
graduates.

There are exactly two states and one transition: every toggle flips the
record and refreshes its modification timestamp. Nothing here touches the
database; services pass the returned change set to the repositories.
"""

from enum import Enum
from typing import Dict

from ..db.base_class import utcnow


class PublicationState(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


def state_of(is_published: bool) -> PublicationState:
    return PublicationState.PUBLISHED if is_published else PublicationState.DRAFT


def next_state(state: PublicationState) -> PublicationState:
    if state is PublicationState.PUBLISHED:
        return PublicationState.DRAFT
    return PublicationState.PUBLISHED


def toggle_changes(record) -> Dict:
    """The update that moves `record` into the other publication state."""
    target = next_state(state_of(bool(record.isPublished)))
    return {
        "isPublished": target is PublicationState.PUBLISHED,
        "updated_at": utcnow(),
    }
