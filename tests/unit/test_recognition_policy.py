"""
Name: Recognition Access Policy Tests

Responsibilities:
  - Validate recognition read / sender disclosure rules
  - Cover role + visibility + relationship matrix
  - Validate sender filter and analytics gating
"""

from datetime import datetime, timezone

import pytest

from kudos.domain.entities import Recognition, Visibility
from kudos.domain.recognition_policy import (
    FeedActor,
    can_filter_by_sender,
    can_reveal_sender,
    can_view_organization_analytics,
    can_view_recognition,
    can_view_team_analytics,
)
from kudos.users import User, UserRole


pytestmark = pytest.mark.unit

TEAM_A = "teamA"
TEAM_B = "teamB"


def _recognition(visibility: Visibility) -> Recognition:
    return Recognition(
        id="r1",
        message="Thanks for the help",
        visibility=visibility,
        sender_id="sender",
        recipient_id="recipient",
        created_at=datetime(2026, 10, 1, tzinfo=timezone.utc),
    )


def test_recognition_access_policy_matrix():
    actors = {
        "recipient": FeedActor("recipient", UserRole.EMPLOYEE, TEAM_A),
        "sender": FeedActor("sender", UserRole.EMPLOYEE, TEAM_A),
        "teammate": FeedActor("teammate", UserRole.EMPLOYEE, TEAM_A),
        "manager_same_team": FeedActor("mgr_a", UserRole.MANAGER, TEAM_A),
        "manager_other_team": FeedActor("mgr_b", UserRole.MANAGER, TEAM_B),
        "admin": FeedActor("admin", UserRole.ADMIN, None),
    }
    parties = {"recipient", "sender"}
    anonymous_cleared = {"recipient", "manager_same_team", "admin"}

    for actor_name, actor in actors.items():
        for visibility in Visibility:
            record = _recognition(visibility)

            if visibility == Visibility.PUBLIC:
                expected_view = True
                expected_reveal = True
            elif visibility == Visibility.PRIVATE:
                expected_view = actor_name in parties
                expected_reveal = True
            else:
                expected_view = actor_name in anonymous_cleared
                expected_reveal = actor_name in anonymous_cleared

            label = f"{actor_name}_{visibility.value}"
            view = can_view_recognition(record, actor, recipient_team_id=TEAM_A)
            reveal = can_reveal_sender(record, actor, recipient_team_id=TEAM_A)
            assert view is expected_view, f"view mismatch for {label}"
            assert reveal is expected_reveal, f"reveal mismatch for {label}"


def test_unauthenticated_actor_sees_nothing():
    for visibility in Visibility:
        record = _recognition(visibility)
        assert can_view_recognition(record, None) is False
        assert can_view_recognition(record, FeedActor(None, None)) is False
        assert can_reveal_sender(record, None) is False


def test_manager_clearance_requires_both_teams():
    record = _recognition(Visibility.ANONYMOUS)
    teamless_manager = FeedActor("mgr", UserRole.MANAGER, None)
    manager = FeedActor("mgr", UserRole.MANAGER, TEAM_A)

    assert can_view_recognition(record, teamless_manager, recipient_team_id=None) is False
    assert can_view_recognition(record, manager, recipient_team_id=None) is False
    assert can_view_recognition(record, teamless_manager, recipient_team_id=TEAM_A) is False


def test_admin_sees_anonymous_for_teamless_recipient():
    record = _recognition(Visibility.ANONYMOUS)
    admin = FeedActor("admin", UserRole.ADMIN, None)

    assert can_view_recognition(record, admin, recipient_team_id=None) is True
    assert can_reveal_sender(record, admin, recipient_team_id=None) is True


def test_actor_from_user_copies_identity():
    user = User("u1", "u1@company.com", "U One", UserRole.MANAGER, "team1")
    actor = FeedActor.from_user(user)

    assert actor == FeedActor("u1", UserRole.MANAGER, "team1")


def test_sender_filter_gating():
    employee = FeedActor("emp", UserRole.EMPLOYEE, TEAM_A)
    manager = FeedActor("mgr", UserRole.MANAGER, TEAM_A)
    admin = FeedActor("admin", UserRole.ADMIN, None)

    assert can_filter_by_sender(employee, "emp") is True
    assert can_filter_by_sender(employee, "someone_else") is False
    assert can_filter_by_sender(manager, "someone_else") is True
    assert can_filter_by_sender(admin, "someone_else") is True
    assert can_filter_by_sender(None, "emp") is False


def test_team_analytics_matrix():
    actors = {
        "employee": (FeedActor("emp", UserRole.EMPLOYEE, TEAM_A), False, False),
        "manager": (FeedActor("mgr", UserRole.MANAGER, TEAM_A), True, False),
        "teamless_manager": (FeedActor("mgr", UserRole.MANAGER, None), False, False),
        "admin": (FeedActor("admin", UserRole.ADMIN, None), True, True),
    }

    for name, (actor, own_team, other_team) in actors.items():
        assert can_view_team_analytics(actor, TEAM_A) is own_team, name
        assert can_view_team_analytics(actor, TEAM_B) is other_team, name

    assert can_view_team_analytics(None, TEAM_A) is False


def test_organization_analytics_admin_only():
    assert can_view_organization_analytics(FeedActor("a", UserRole.ADMIN)) is True
    assert can_view_organization_analytics(FeedActor("m", UserRole.MANAGER, TEAM_A)) is False
    assert can_view_organization_analytics(FeedActor("e", UserRole.EMPLOYEE)) is False
    assert can_view_organization_analytics(None) is False
