"""
Name: List Recognitions Use Case Tests

Responsibilities:
  - Validate per-viewer visibility over the demo feed
  - Validate newest-first ordering (ties keep insertion order)
  - Validate filters, the sender filter gate and sender redaction
  - Validate that repeated reads return identical results
"""

import pytest

from kudos.application.use_cases import FeedErrorCode, ListRecognitionsUseCase
from kudos.application.use_cases.recognition_access import (
    MSG_SENDER_FILTER_FORBIDDEN,
)
from kudos.domain.entities import RecognitionFilter, Visibility


pytestmark = pytest.mark.unit


@pytest.fixture
def use_case(feed_context) -> ListRecognitionsUseCase:
    return ListRecognitionsUseCase(
        recognition_repository=feed_context.recognitions,
        directory=feed_context.directory,
    )


def _user(feed_context, user_id):
    return feed_context.directory.get_user(user_id)


def _ids(result):
    return [view.recognition.id for view in result.recognitions]


def test_visible_feed_per_viewer(use_case, feed_context):
    expected = {
        "user1": ["rec6", "rec2", "rec5", "rec1", "rec3", "rec4"],
        "user2": ["rec6", "rec2", "rec5", "rec1", "rec3"],
        "user3": ["rec6", "rec2", "rec5", "rec1", "rec4"],
        "user4": ["rec6", "rec2", "rec5", "rec1"],
        "user5": ["rec6", "rec2", "rec5", "rec1"],
        "user6": ["rec6", "rec2", "rec5", "rec1", "rec3"],
    }

    for user_id, expected_ids in expected.items():
        result = use_case.execute(_user(feed_context, user_id))
        assert result.error is None, user_id
        assert _ids(result) == expected_ids, user_id


def test_unauthenticated_viewer_is_rejected(use_case):
    result = use_case.execute(None)

    assert result.error is not None
    assert result.error.code == FeedErrorCode.UNAUTHENTICATED
    assert result.recognitions == []


def test_reads_are_idempotent(use_case, feed_context):
    viewer = _user(feed_context, "user2")

    first = use_case.execute(viewer)
    second = use_case.execute(viewer)

    assert _ids(first) == _ids(second)
    assert feed_context.recognitions.count() == 6


def test_anonymous_sender_redaction(use_case, feed_context):
    recipient_view = {
        v.recognition.id: v for v in use_case.execute(_user(feed_context, "user1")).recognitions
    }["rec3"]
    admin_view = {
        v.recognition.id: v for v in use_case.execute(_user(feed_context, "user6")).recognitions
    }["rec3"]

    assert recipient_view.sender_revealed is True
    assert recipient_view.sender.id == "user2"
    assert admin_view.sender.id == "user2"
    assert admin_view.recipient.id == "user1"


def test_public_records_always_show_sender(use_case, feed_context):
    result = use_case.execute(_user(feed_context, "user5"))

    assert all(view.sender is not None for view in result.recognitions)


@pytest.mark.parametrize(
    "criteria, expected_ids",
    [
        (RecognitionFilter(team_id="team2"), ["rec5"]),
        (RecognitionFilter(team_id="team3"), ["rec6"]),
        (RecognitionFilter(visibility=Visibility.ANONYMOUS), ["rec3"]),
        (RecognitionFilter(recipient_id="user1"), ["rec1", "rec3", "rec4"]),
        (
            RecognitionFilter(team_id="team1", visibility=Visibility.PUBLIC),
            ["rec2", "rec1"],
        ),
        (RecognitionFilter(recipient_id="nobody"), []),
    ],
)
def test_filters_narrow_the_visible_feed(use_case, feed_context, criteria, expected_ids):
    result = use_case.execute(_user(feed_context, "user1"), criteria)

    assert result.error is None
    assert _ids(result) == expected_ids


def test_filters_never_widen_visibility(use_case, feed_context):
    result = use_case.execute(
        _user(feed_context, "user4"), RecognitionFilter(visibility=Visibility.PRIVATE)
    )

    assert _ids(result) == []


def test_team_filter_follows_recipient_current_team(use_case, feed_context):
    feed_context.directory.update_user("user4", team_id="team3")

    result = use_case.execute(
        _user(feed_context, "user1"), RecognitionFilter(team_id="team3")
    )

    assert _ids(result) == ["rec6", "rec5"]


def test_employee_sender_filter_is_limited_to_self(use_case, feed_context):
    employee = _user(feed_context, "user1")

    own = use_case.execute(employee, RecognitionFilter(sender_id="user1"))
    other = use_case.execute(employee, RecognitionFilter(sender_id="user2"))

    assert _ids(own) == ["rec2"]
    assert other.error is not None
    assert other.error.code == FeedErrorCode.FORBIDDEN
    assert other.error.message == MSG_SENDER_FILTER_FORBIDDEN


def test_manager_sender_filter_still_respects_visibility(use_case, feed_context):
    manager = _user(feed_context, "user5")

    result = use_case.execute(manager, RecognitionFilter(sender_id="user2"))

    assert result.error is None
    assert _ids(result) == ["rec1"]


def test_execute_mine_lists_sent_and_received(use_case, feed_context):
    result = use_case.execute_mine(_user(feed_context, "user3"))

    assert _ids(result) == ["rec2", "rec4"]


def test_execute_mine_requires_viewer(use_case):
    assert use_case.execute_mine(None).error.code == FeedErrorCode.UNAUTHENTICATED
