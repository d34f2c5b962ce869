"""
Name: In-Process Pub/Sub Registry

Responsibilities:
  - Map a topic (kind + key) to the set of live subscriptions
  - Deliver published payloads to every current subscriber of a topic
  - Provide explicit subscribe / unsubscribe as the only way to join or leave

Collaborators:
  - infrastructure.events.dispatcher: publishes accepted recognitions
  - application.use_cases.subscriptions: opens subscriptions
  - streaming.py: drains subscriptions as Server-Sent Events

Constraints:
  - publish() is synchronous and never blocks (unbounded per-subscriber queue)
  - No replay: a subscription only sees payloads published after it joined
  - Per-topic FIFO: each subscription receives payloads in publish order

Notes:
  - Must be used from a single event loop
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from threading import Lock
from typing import Any, Dict, Generic, Optional, Set, TypeVar

from ...logger import logger

T = TypeVar("T")


class TopicKind(str, Enum):
    """R: Logical channels of the recognition feed."""

    RECOGNITION_RECEIVED = "recognition_received"
    TEAM_FEED = "team_feed"


@dataclass(frozen=True)
class Topic:
    kind: TopicKind
    key: str

    @classmethod
    def recipient(cls, user_id: str) -> "Topic":
        return cls(TopicKind.RECOGNITION_RECEIVED, user_id)

    @classmethod
    def team(cls, team_id: str) -> "Topic":
        return cls(TopicKind.TEAM_FEED, team_id)


class _Closed:
    """Sentinel placed on the queue to end iteration."""


_CLOSED = _Closed()


class Subscription(Generic[T]):
    """
    R: One live listener on a topic.

    Async iterator over published payloads; ends after close().
    Usable as an async context manager that always unsubscribes.
    """

    def __init__(self, broker: "PubSub[T]", topic: Topic) -> None:
        self.topic = topic
        self._broker = broker
        self._queue: asyncio.Queue[Any] = asyncio.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        """R: Payloads delivered but not consumed yet."""
        return self._queue.qsize()

    def deliver(self, payload: T) -> None:
        if not self._closed:
            self._queue.put_nowait(payload)

    async def get(self, timeout: Optional[float] = None) -> T:
        """
        R: Wait for the next payload.

        Raises:
            asyncio.TimeoutError: no payload within timeout
            StopAsyncIteration: subscription was closed
        """
        if timeout is None:
            item = await self._queue.get()
        else:
            item = await asyncio.wait_for(self._queue.get(), timeout=timeout)
        if item is _CLOSED:
            raise StopAsyncIteration
        return item

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._broker.unsubscribe(self)
        self._queue.put_nowait(_CLOSED)

    def __aiter__(self) -> "Subscription[T]":
        return self

    async def __anext__(self) -> T:
        return await self.get()

    async def __aenter__(self) -> "Subscription[T]":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()


class PubSub(Generic[T]):
    """
    R: Topic registry with synchronous fan-out.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._listeners: Dict[Topic, Set[Subscription[T]]] = {}

    def subscribe(self, topic: Topic) -> Subscription[T]:
        subscription: Subscription[T] = Subscription(self, topic)
        with self._lock:
            self._listeners.setdefault(topic, set()).add(subscription)
        logger.debug(
            "Subscription opened",
            extra={"topic": topic.kind.value, "listeners": self.listener_count(topic)},
        )
        return subscription

    def unsubscribe(self, subscription: Subscription[T]) -> None:
        with self._lock:
            listeners = self._listeners.get(subscription.topic)
            if not listeners:
                return
            listeners.discard(subscription)
            if not listeners:
                del self._listeners[subscription.topic]

    def publish(self, topic: Topic, payload: T) -> int:
        """
        R: Hand payload to every current subscriber of topic.

        Returns:
            Number of subscriptions reached
        """
        with self._lock:
            listeners = list(self._listeners.get(topic, ()))
        for subscription in listeners:
            subscription.deliver(payload)
        return len(listeners)

    def listener_count(self, topic: Optional[Topic] = None) -> int:
        with self._lock:
            if topic is not None:
                return len(self._listeners.get(topic, ()))
            return sum(len(listeners) for listeners in self._listeners.values())

    def close_all(self) -> None:
        """R: Close every live subscription (shutdown / context reset)."""
        with self._lock:
            subscriptions = [
                sub for listeners in self._listeners.values() for sub in listeners
            ]
        for subscription in subscriptions:
            subscription.close()
