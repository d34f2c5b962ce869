"""Event distribution (pub/sub fan-out, dispatcher, batched notifications)"""

from .dispatcher import DispatchOutcome, RecognitionDispatcher
from .notification_queue import (
    BatchFlusher,
    FlushReport,
    NotificationQueue,
    QueueState,
)
from .pubsub import PubSub, Subscription, Topic, TopicKind

__all__ = [
    "BatchFlusher",
    "DispatchOutcome",
    "FlushReport",
    "NotificationQueue",
    "PubSub",
    "QueueState",
    "RecognitionDispatcher",
    "Subscription",
    "Topic",
    "TopicKind",
]
