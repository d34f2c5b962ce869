"""
Name: Batched Notification Queue and Flusher

Responsibilities:
  - Hold recognitions awaiting external notification in FIFO order
  - Drain the whole queue through a notifier, one item at a time
  - Run the drain on a fixed interval with explicit start/stop control

Collaborators:
  - domain.services.RecognitionNotifier: external channel
  - infrastructure.events.dispatcher: enqueues in batch mode
  - main.py: starts/stops the BatchFlusher in the app lifespan
  - metrics.py: queue depth, flush size, per-item outcome

Constraints:
  - enqueue() never blocks and always succeeds
  - Drain is triggered only by the timer (or an explicit flush_once())
  - A failed item is logged and dropped; draining continues (no retry)
  - stop() never interrupts a drain in progress

Notes:
  - State machine: EMPTY -> PENDING -> DRAINING -> EMPTY
"""

from __future__ import annotations

import asyncio
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Deque, Optional

from ...domain.entities import Recognition
from ...domain.services import RecognitionNotifier
from ...logger import logger
from ...metrics import record_batch_flush, record_notification, set_queue_depth


class QueueState(str, Enum):
    EMPTY = "EMPTY"
    PENDING = "PENDING"
    DRAINING = "DRAINING"


@dataclass(frozen=True)
class QueuedNotification:
    """R: Queue entry: the recognition plus the time it was enqueued."""

    recognition: Recognition
    enqueued_at: datetime


@dataclass(frozen=True)
class FlushReport:
    sent: int = 0
    failed: int = 0

    @property
    def drained(self) -> int:
        return self.sent + self.failed


class NotificationQueue:
    """
    R: In-memory FIFO of pending notifications.
    """

    def __init__(self) -> None:
        self._items: Deque[QueuedNotification] = deque()
        self._draining = False

    @property
    def state(self) -> QueueState:
        if self._draining:
            return QueueState.DRAINING
        return QueueState.PENDING if self._items else QueueState.EMPTY

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, recognition: Recognition) -> None:
        self._items.append(
            QueuedNotification(
                recognition=recognition, enqueued_at=datetime.now(timezone.utc)
            )
        )
        set_queue_depth(len(self._items))

    def pending(self) -> list[Recognition]:
        """R: Snapshot of queued recognitions, oldest first."""
        return [item.recognition for item in self._items]

    async def flush(self, notifier: RecognitionNotifier) -> FlushReport:
        """
        R: Drain every queued item through notifier in FIFO order.

        Items enqueued while draining are drained in the same cycle.
        A concurrent flush() call while draining is a no-op.
        """
        if self._draining:
            return FlushReport()

        sent = 0
        failed = 0
        self._draining = True
        try:
            while self._items:
                item = self._items.popleft()
                set_queue_depth(len(self._items))
                try:
                    await notifier.send(item.recognition)
                except Exception as exc:
                    failed += 1
                    record_notification("batch", "failed")
                    logger.error(
                        "Error sending batched notification",
                        extra={
                            "recognition_id": item.recognition.id,
                            "error": str(exc),
                        },
                    )
                else:
                    sent += 1
                    record_notification("batch", "sent")
        finally:
            self._draining = False

        report = FlushReport(sent=sent, failed=failed)
        if report.drained:
            record_batch_flush(report.drained)
            logger.info(
                "Notification batch flushed",
                extra={"sent": report.sent, "failed": report.failed},
            )
        return report

    def clear(self) -> None:
        self._items.clear()
        set_queue_depth(0)


class BatchFlusher:
    """
    R: Recurring task that flushes the queue every interval_seconds.
    """

    def __init__(
        self,
        queue: NotificationQueue,
        notifier: RecognitionNotifier,
        *,
        interval_seconds: float,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be greater than 0")
        self._queue = queue
        self._notifier = notifier
        self._interval = interval_seconds
        self._task: Optional[asyncio.Task] = None
        self._stop_event: Optional[asyncio.Event] = None

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def flush_once(self) -> FlushReport:
        return await self._queue.flush(self._notifier)

    def start(self) -> None:
        """R: Schedule the recurring flush on the running loop (idempotent)."""
        if self.running:
            return
        self._stop_event = asyncio.Event()
        self._task = asyncio.create_task(self._run(self._stop_event))
        logger.info(
            "Notification batch flusher started",
            extra={"interval_seconds": self._interval},
        )

    async def stop(self) -> None:
        """R: Stop the timer; waits for an in-progress drain to finish."""
        if self._task is None or self._stop_event is None:
            return
        self._stop_event.set()
        task = self._task
        self._task = None
        self._stop_event = None
        await task
        logger.info(
            "Notification batch flusher stopped",
            extra={"pending": len(self._queue)},
        )

    async def _run(self, stop_event: asyncio.Event) -> None:
        while not stop_event.is_set():
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=self._interval)
            except asyncio.TimeoutError:
                await self.flush_once()
