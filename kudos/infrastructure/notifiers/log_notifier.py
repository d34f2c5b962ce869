"""
Name: Logging Notifier

Responsibilities:
  - Default RecognitionNotifier when no external channel is configured
  - Emit one structured log line per notification
"""

from __future__ import annotations

from ...domain.entities import Recognition
from ...logger import logger


class LoggingNotifier:
    """R: Writes notifications to the application log instead of a channel."""

    async def send(self, recognition: Recognition) -> None:
        logger.info(
            "Recognition notification",
            extra={
                "recognition_id": recognition.id,
                "recipient_id": recognition.recipient_id,
                "visibility": recognition.visibility.value,
            },
        )

    async def aclose(self) -> None:
        return None
