"""
Name: Slack Webhook Notifier

Responsibilities:
  - Format a recognition as a Slack incoming-webhook message
  - POST it to the configured webhook URL
  - Own one pooled HTTP client for its lifetime unless one is injected

Collaborators:
  - httpx.AsyncClient: HTTP transport
  - domain.services.RecognitionNotifier (contract)
  - exceptions.NotificationDeliveryError

Constraints:
  - No-op when the webhook URL is empty
  - Non-2xx responses and transport errors raise NotificationDeliveryError
  - No retries; the HTTP timeout is the only time bound
  - aclose() closes only a client the notifier built itself

Notes:
  - Never log the webhook URL (it is a credential)
"""

from __future__ import annotations

from typing import Optional

import httpx

from ...domain.entities import Recognition
from ...exceptions import NotificationDeliveryError
from ...logger import logger


def format_slack_message(recognition: Recognition) -> str:
    """R: Slack mrkdwn body; the sender is never included."""
    emoji = recognition.emoji or ""
    return (
        f"🎉 *New recognition* for <@{recognition.recipient_id}>:\n"
        f"> {recognition.message} {emoji}\n"
        f"_Visibility: {recognition.visibility.value}_"
    )


class SlackWebhookNotifier:
    """R: RecognitionNotifier backed by a Slack incoming webhook."""

    def __init__(
        self,
        webhook_url: str,
        *,
        timeout_seconds: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._webhook_url = (webhook_url or "").strip()
        self._timeout = timeout_seconds
        self._client = client
        self._owns_client = client is None

    @property
    def enabled(self) -> bool:
        return bool(self._webhook_url)

    async def send(self, recognition: Recognition) -> None:
        if not self.enabled:
            return

        payload = {"text": format_slack_message(recognition)}
        try:
            response = await self._get_client().post(self._webhook_url, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise NotificationDeliveryError(
                f"Slack webhook returned {exc.response.status_code}",
                original_error=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise NotificationDeliveryError(
                f"Slack webhook request failed: {exc.__class__.__name__}",
                original_error=exc,
            ) from exc

        logger.info(
            "Slack notification sent",
            extra={"recognition_id": recognition.id},
        )

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)
        return self._client

    async def aclose(self) -> None:
        """R: Release the pooled connections of an owned client."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
