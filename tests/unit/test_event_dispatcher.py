"""
Name: Recognition Dispatcher Tests

Responsibilities:
  - Validate recipient / team topic routing per visibility
  - Validate immediate vs queued notification paths
  - Validate that notifier failures are absorbed
"""

from datetime import datetime, timezone

import pytest

from kudos.domain.entities import Recognition, Visibility
from kudos.infrastructure.events import (
    NotificationQueue,
    PubSub,
    QueueState,
    RecognitionDispatcher,
    Topic,
)


pytestmark = pytest.mark.unit


def _rec(visibility: Visibility = Visibility.PUBLIC, rec_id: str = "r1") -> Recognition:
    return Recognition(
        id=rec_id,
        message="Nice work",
        visibility=visibility,
        sender_id="user2",
        recipient_id="user1",
        created_at=datetime(2026, 10, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def pubsub() -> PubSub[Recognition]:
    return PubSub()


@pytest.fixture
def queue() -> NotificationQueue:
    return NotificationQueue()


@pytest.mark.asyncio
async def test_team_topic_only_receives_public_records(pubsub, queue, notifier):
    dispatcher = RecognitionDispatcher(pubsub, notifier, queue)
    recipient_sub = pubsub.subscribe(Topic.recipient("user1"))
    team_sub = pubsub.subscribe(Topic.team("team1"))

    for visibility in Visibility:
        outcome = await dispatcher.dispatch(
            _rec(visibility, rec_id=visibility.value), recipient_team_id="team1"
        )
        is_public = visibility == Visibility.PUBLIC
        assert outcome.recipient_listeners == 1, visibility
        assert outcome.team_published is is_public, visibility
        assert outcome.team_listeners == (1 if is_public else 0), visibility

    assert recipient_sub.pending == 3
    assert team_sub.pending == 1
    assert (await team_sub.get(timeout=1)).id == "PUBLIC"
    pubsub.close_all()


@pytest.mark.asyncio
async def test_teamless_recipient_skips_team_topic(pubsub, queue, notifier):
    dispatcher = RecognitionDispatcher(pubsub, notifier, queue)

    outcome = await dispatcher.dispatch(_rec(), recipient_team_id=None)

    assert outcome.team_published is False
    assert outcome.notification == "sent"


@pytest.mark.asyncio
async def test_immediate_mode_calls_notifier_once(pubsub, queue, notifier):
    dispatcher = RecognitionDispatcher(pubsub, notifier, queue, batch_mode=False)

    outcome = await dispatcher.dispatch(_rec(), recipient_team_id="team1")

    assert outcome.notification == "sent"
    assert [r.id for r in notifier.sent] == ["r1"]
    assert len(queue) == 0


@pytest.mark.asyncio
async def test_immediate_mode_absorbs_notifier_failure(pubsub, queue, notifier):
    notifier.fail_on.add("r1")
    dispatcher = RecognitionDispatcher(pubsub, notifier, queue)
    subscription = pubsub.subscribe(Topic.recipient("user1"))

    outcome = await dispatcher.dispatch(_rec(), recipient_team_id="team1")

    assert outcome.notification == "failed"
    assert subscription.pending == 1
    subscription.close()


@pytest.mark.asyncio
async def test_batch_mode_enqueues_instead_of_sending(pubsub, queue, notifier):
    dispatcher = RecognitionDispatcher(pubsub, notifier, queue, batch_mode=True)

    outcome = await dispatcher.dispatch(_rec(), recipient_team_id="team1")

    assert dispatcher.batch_mode is True
    assert outcome.notification == "queued"
    assert notifier.sent == []
    assert [r.id for r in queue.pending()] == ["r1"]
    assert queue.state == QueueState.PENDING


def test_publish_is_synchronous(pubsub, queue, notifier):
    dispatcher = RecognitionDispatcher(pubsub, notifier, queue)

    recipient_listeners, team_listeners, team_published = dispatcher.publish(
        _rec(Visibility.PRIVATE), recipient_team_id="team1"
    )

    assert (recipient_listeners, team_listeners, team_published) == (0, 0, False)
