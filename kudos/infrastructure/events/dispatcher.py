"""
Name: Recognition Event Dispatcher

Responsibilities:
  - Fan a newly accepted recognition out to live subscriptions
  - Hand it to the external notifier exactly once: immediately, or via the
    batch queue when batch mode is on

Collaborators:
  - infrastructure.events.pubsub: PubSub, Topic
  - infrastructure.events.notification_queue: NotificationQueue
  - domain.services.RecognitionNotifier
  - domain.repositories.DirectoryRepository: recipient team lookup

Constraints:
  - Recipient topic always receives the event
  - Team topic receives it only when PUBLIC and the recipient has a team
  - Notification failures are logged and counted, never raised
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...domain.entities import Recognition, Visibility
from ...domain.services import RecognitionNotifier
from ...logger import logger
from ...metrics import record_event_published, record_notification
from .notification_queue import NotificationQueue
from .pubsub import PubSub, Topic


@dataclass(frozen=True)
class DispatchOutcome:
    """
    R: What happened to one recognition on the distribution path.

    Attributes:
        recipient_listeners: Subscriptions reached on the recipient topic
        team_listeners: Subscriptions reached on the team topic
        team_published: Whether the team topic was published at all
        notification: "sent", "failed" or "queued"
    """

    recipient_listeners: int
    team_listeners: int
    team_published: bool
    notification: str


class RecognitionDispatcher:
    """
    R: Single entry point of the event distribution layer.
    """

    def __init__(
        self,
        pubsub: PubSub[Recognition],
        notifier: RecognitionNotifier,
        queue: NotificationQueue,
        *,
        batch_mode: bool = False,
    ) -> None:
        self._pubsub = pubsub
        self._notifier = notifier
        self._queue = queue
        self._batch_mode = batch_mode

    @property
    def batch_mode(self) -> bool:
        return self._batch_mode

    def publish(
        self, recognition: Recognition, *, recipient_team_id: Optional[str]
    ) -> tuple[int, int, bool]:
        """R: Synchronous subscription fan-out (no suspension)."""
        recipient_topic = Topic.recipient(recognition.recipient_id)
        recipient_listeners = self._pubsub.publish(recipient_topic, recognition)
        record_event_published(recipient_topic.kind.value, recipient_listeners)

        team_listeners = 0
        team_published = (
            recognition.visibility == Visibility.PUBLIC
            and recipient_team_id is not None
        )
        if team_published:
            team_topic = Topic.team(recipient_team_id)
            team_listeners = self._pubsub.publish(team_topic, recognition)
            record_event_published(team_topic.kind.value, team_listeners)

        return recipient_listeners, team_listeners, team_published

    async def dispatch(
        self, recognition: Recognition, *, recipient_team_id: Optional[str]
    ) -> DispatchOutcome:
        recipient_listeners, team_listeners, team_published = self.publish(
            recognition, recipient_team_id=recipient_team_id
        )

        if self._batch_mode:
            self._queue.enqueue(recognition)
            record_notification("batch", "queued")
            notification = "queued"
        else:
            notification = await self._notify_now(recognition)

        return DispatchOutcome(
            recipient_listeners=recipient_listeners,
            team_listeners=team_listeners,
            team_published=team_published,
            notification=notification,
        )

    async def _notify_now(self, recognition: Recognition) -> str:
        try:
            await self._notifier.send(recognition)
        except Exception as exc:
            record_notification("immediate", "failed")
            logger.error(
                "Error sending notification",
                extra={"recognition_id": recognition.id, "error": str(exc)},
            )
            return "failed"
        record_notification("immediate", "sent")
        return "sent"
