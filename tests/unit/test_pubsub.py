"""
Name: Pub/Sub Registry Tests

Responsibilities:
  - Validate topic routing and listener counts
  - Validate no replay for late subscribers
  - Validate per-subscription FIFO delivery and close() semantics
"""

import asyncio

import pytest

from kudos.infrastructure.events import PubSub, Topic, TopicKind


pytestmark = pytest.mark.unit


def test_topic_factories():
    assert Topic.recipient("user1") == Topic(TopicKind.RECOGNITION_RECEIVED, "user1")
    assert Topic.team("team1") == Topic(TopicKind.TEAM_FEED, "team1")
    assert Topic.recipient("x") != Topic.team("x")


@pytest.mark.asyncio
async def test_publish_reaches_only_matching_topic():
    pubsub: PubSub[str] = PubSub()
    user1 = pubsub.subscribe(Topic.recipient("user1"))
    user2 = pubsub.subscribe(Topic.recipient("user2"))
    team1 = pubsub.subscribe(Topic.team("user1"))

    delivered = pubsub.publish(Topic.recipient("user1"), "hello")

    assert delivered == 1
    assert await user1.get(timeout=1) == "hello"
    assert user2.pending == 0
    assert team1.pending == 0
    pubsub.close_all()


@pytest.mark.asyncio
async def test_publish_without_listeners_is_a_no_op():
    pubsub: PubSub[str] = PubSub()

    assert pubsub.publish(Topic.team("team1"), "lost") == 0
    assert pubsub.listener_count() == 0


@pytest.mark.asyncio
async def test_late_subscriber_gets_no_replay():
    pubsub: PubSub[str] = PubSub()
    topic = Topic.team("team1")
    pubsub.publish(topic, "before")

    late = pubsub.subscribe(topic)
    pubsub.publish(topic, "after")

    assert await late.get(timeout=1) == "after"
    assert late.pending == 0
    late.close()


@pytest.mark.asyncio
async def test_each_subscriber_receives_in_publish_order():
    pubsub: PubSub[int] = PubSub()
    topic = Topic.team("team1")
    first = pubsub.subscribe(topic)
    second = pubsub.subscribe(topic)

    for n in range(5):
        assert pubsub.publish(topic, n) == 2

    assert [await first.get(timeout=1) for _ in range(5)] == [0, 1, 2, 3, 4]
    assert [await second.get(timeout=1) for _ in range(5)] == [0, 1, 2, 3, 4]
    pubsub.close_all()


@pytest.mark.asyncio
async def test_close_unsubscribes_and_ends_iteration():
    pubsub: PubSub[str] = PubSub()
    topic = Topic.recipient("user1")
    subscription = pubsub.subscribe(topic)
    pubsub.publish(topic, "one")

    subscription.close()
    received = [item async for item in subscription]

    assert received == ["one"]
    assert subscription.closed is True
    assert pubsub.listener_count(topic) == 0
    assert pubsub.publish(topic, "two") == 0


@pytest.mark.asyncio
async def test_context_manager_always_unsubscribes():
    pubsub: PubSub[str] = PubSub()
    topic = Topic.recipient("user1")

    async with pubsub.subscribe(topic) as subscription:
        assert pubsub.listener_count(topic) == 1

    assert subscription.closed is True
    assert pubsub.listener_count() == 0


@pytest.mark.asyncio
async def test_get_times_out_when_nothing_is_published():
    pubsub: PubSub[str] = PubSub()
    subscription = pubsub.subscribe(Topic.recipient("user1"))

    with pytest.raises(asyncio.TimeoutError):
        await subscription.get(timeout=0.01)

    subscription.close()


@pytest.mark.asyncio
async def test_waiting_consumer_wakes_on_publish():
    pubsub: PubSub[str] = PubSub()
    topic = Topic.team("team2")
    subscription = pubsub.subscribe(topic)

    waiter = asyncio.create_task(subscription.get(timeout=1))
    await asyncio.sleep(0)
    pubsub.publish(topic, "live")

    assert await waiter == "live"
    subscription.close()


@pytest.mark.asyncio
async def test_close_all_closes_every_subscription():
    pubsub: PubSub[str] = PubSub()
    subs = [
        pubsub.subscribe(Topic.recipient("user1")),
        pubsub.subscribe(Topic.team("team1")),
        pubsub.subscribe(Topic.team("team1")),
    ]
    assert pubsub.listener_count() == 3
    assert pubsub.listener_count(Topic.team("team1")) == 2

    pubsub.close_all()

    assert all(sub.closed for sub in subs)
    assert pubsub.listener_count() == 0
    with pytest.raises(StopAsyncIteration):
        await subs[0].get(timeout=1)
