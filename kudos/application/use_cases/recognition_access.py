"""
Name: Recognition Access Helpers

Responsibilities:
  - Apply the recognition policy with directory lookups (recipient team)
  - Build viewer-specific RecognitionView objects (sender redaction)
  - Implement the listing contract: visible, filtered, newest first
  - Provide standard FeedError builders for the feed use cases

Collaborators:
  - domain.recognition_policy: pure visibility / disclosure rules
  - domain.repositories.DirectoryRepository: recipient team + user lookup
  - feed_results: FeedError, FeedErrorCode, RecognitionView

Notes:
  - Team filter and team-based rules use the recipient's current team
  - Sorting is stable, so equal timestamps keep insertion order
"""

from __future__ import annotations

from typing import Final, Iterable, List, Optional

from ...domain.entities import Recognition, RecognitionFilter
from ...domain.recognition_policy import (
    FeedActor,
    can_reveal_sender,
    can_view_recognition,
)
from ...domain.repositories import DirectoryRepository
from ...users import User
from .feed_results import FeedError, FeedErrorCode, RecognitionView

MSG_AUTH_REQUIRED: Final[str] = "Authentication required"
MSG_SENDER_FILTER_FORBIDDEN: Final[str] = (
    "Access denied. Employees can only filter by their own sent recognitions"
)


def is_visible(
    record: Recognition, viewer: User | None, directory: DirectoryRepository
) -> bool:
    if viewer is None:
        return False
    return can_view_recognition(
        record,
        FeedActor.from_user(viewer),
        recipient_team_id=directory.team_of(record.recipient_id),
    )


def redacted_sender(
    record: Recognition, viewer: User | None, directory: DirectoryRepository
) -> Optional[User]:
    """
    R: Sender as this viewer may see it.

    Only meaningful for records the viewer can already see; returns None
    (never raises) when the sender must stay hidden.
    """
    if viewer is None:
        return None
    if not can_reveal_sender(
        record,
        FeedActor.from_user(viewer),
        recipient_team_id=directory.team_of(record.recipient_id),
    ):
        return None
    return directory.get_user(record.sender_id)


def view_for(
    record: Recognition, viewer: User, directory: DirectoryRepository
) -> RecognitionView:
    return RecognitionView(
        recognition=record,
        sender=redacted_sender(record, viewer, directory),
        recipient=directory.get_user(record.recipient_id),
    )


def _matches(
    record: Recognition,
    criteria: RecognitionFilter,
    directory: DirectoryRepository,
) -> bool:
    if criteria.visibility is not None and record.visibility != criteria.visibility:
        return False
    if criteria.recipient_id is not None and record.recipient_id != criteria.recipient_id:
        return False
    if criteria.sender_id is not None and record.sender_id != criteria.sender_id:
        return False
    if criteria.team_id is not None:
        return directory.team_of(record.recipient_id) == criteria.team_id
    return True


def list_visible(
    records: Iterable[Recognition],
    viewer: User,
    directory: DirectoryRepository,
    criteria: RecognitionFilter | None = None,
) -> List[RecognitionView]:
    """
    R: Visible subsequence, narrowed by criteria, newest first.

    Callers are responsible for gating the sender filter beforehand.
    """
    criteria = criteria or RecognitionFilter()
    selected = [
        record
        for record in records
        if is_visible(record, viewer, directory)
        and _matches(record, criteria, directory)
    ]
    selected.sort(key=lambda record: record.created_at, reverse=True)
    return [view_for(record, viewer, directory) for record in selected]


def unauthenticated_error() -> FeedError:
    return FeedError(code=FeedErrorCode.UNAUTHENTICATED, message=MSG_AUTH_REQUIRED)


def forbidden_error(message: str) -> FeedError:
    return FeedError(code=FeedErrorCode.FORBIDDEN, message=message)


def validation_error(message: str) -> FeedError:
    return FeedError(code=FeedErrorCode.VALIDATION_ERROR, message=message)


def not_found_error(resource: str, identifier: str) -> FeedError:
    return FeedError(
        code=FeedErrorCode.NOT_FOUND,
        message=f"{resource} '{identifier}' not found",
        resource=resource,
    )
