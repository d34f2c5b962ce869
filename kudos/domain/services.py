"""
Name: Domain Service Interfaces

Responsibilities:
  - Define the contract of the external notification channel
  - Define its shutdown hook

Collaborators:
  - Implementations in infrastructure.notifiers
  - infrastructure.events: dispatcher and notification queue call send()

Constraints:
  - Pure interfaces (Protocol), no implementation
  - send() is the only suspension point of the write path

Notes:
  - Failures surface as NotificationDeliveryError and are recovered by the
    caller (logged, never retried, never propagated to the request)
"""

from typing import Protocol

from .entities import Recognition


class RecognitionNotifier(Protocol):
    """
    R: Interface for delivering a recognition to an external channel.
    """

    async def send(self, recognition: Recognition) -> None:
        """
        R: Deliver one recognition notification.

        Raises:
            NotificationDeliveryError: delivery failed
        """
        ...

    async def aclose(self) -> None:
        """R: Release channel resources on application shutdown."""
        ...