"""
Name: Recognition Access Policy

Responsibilities:
  - Decide whether a viewer may see a recognition
  - Decide whether the sender of a visible recognition may be revealed
  - Decide analytics access per role and team
"""

from __future__ import annotations

from dataclasses import dataclass

from ..users import User, UserRole
from .entities import Recognition, Visibility


@dataclass(frozen=True)
class FeedActor:
    """R: Actor context for feed access decisions."""

    user_id: str | None
    role: UserRole | None
    team_id: str | None = None

    @classmethod
    def from_user(cls, user: User) -> "FeedActor":
        return cls(user_id=user.id, role=user.role, team_id=user.team_id)


def _is_recipient(record: Recognition, actor: FeedActor) -> bool:
    return actor.user_id is not None and actor.user_id == record.recipient_id


def _is_party(record: Recognition, actor: FeedActor) -> bool:
    return actor.user_id is not None and record.involves(actor.user_id)


def _is_same_team_manager(actor: FeedActor, recipient_team_id: str | None) -> bool:
    return (
        actor.role == UserRole.MANAGER
        and actor.team_id is not None
        and recipient_team_id is not None
        and actor.team_id == recipient_team_id
    )


def _has_anonymous_clearance(
    record: Recognition, actor: FeedActor, recipient_team_id: str | None
) -> bool:
    if _is_recipient(record, actor):
        return True
    if actor.role == UserRole.ADMIN:
        return True
    return _is_same_team_manager(actor, recipient_team_id)


def can_view_recognition(
    record: Recognition,
    actor: FeedActor | None,
    *,
    recipient_team_id: str | None = None,
) -> bool:
    """R: Read access policy for recognitions."""
    if actor is None or actor.user_id is None or actor.role is None:
        return False

    if record.visibility == Visibility.PUBLIC:
        return True

    if record.visibility == Visibility.PRIVATE:
        return _is_party(record, actor)

    if record.visibility == Visibility.ANONYMOUS:
        return _has_anonymous_clearance(record, actor, recipient_team_id)

    return False


def can_reveal_sender(
    record: Recognition,
    actor: FeedActor | None,
    *,
    recipient_team_id: str | None = None,
) -> bool:
    """R: Sender disclosure policy for records the actor may already see."""
    if actor is None or actor.role is None:
        return False

    if record.visibility != Visibility.ANONYMOUS:
        return True

    return _has_anonymous_clearance(record, actor, recipient_team_id)


def can_filter_by_sender(actor: FeedActor | None, sender_id: str) -> bool:
    """R: Employees may only narrow listings to their own sent recognitions."""
    if actor is None or actor.role is None:
        return False

    if actor.role in (UserRole.ADMIN, UserRole.MANAGER):
        return True

    return actor.user_id == sender_id


def can_view_team_analytics(actor: FeedActor | None, team_id: str) -> bool:
    """R: Own team needs MANAGER or ADMIN; any other team needs ADMIN."""
    if actor is None or actor.role is None:
        return False

    if actor.role == UserRole.ADMIN:
        return True

    if actor.role != UserRole.MANAGER:
        return False

    return actor.team_id is not None and actor.team_id == team_id


def can_view_organization_analytics(actor: FeedActor | None) -> bool:
    return actor is not None and actor.role == UserRole.ADMIN
