"""
Name: Typed Backend Exceptions

Responsibilities:
  - Provide a stable error_code per failure category
  - Attach an error_id for correlation with logs
  - Keep messages human-readable without leaking secrets

Collaborators:
  - auth.py: raises AuthenticationError when no caller can be resolved
  - infrastructure.notifiers: raise NotificationDeliveryError
  - infrastructure.repositories: raise InvalidRecognitionError subclasses
  - exception_handlers.py: maps KudosError subclasses to HTTP

Notes:
  - Business failures inside use cases are returned as FeedError results,
    not raised (see application.use_cases.feed_results)
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class ErrorResponse:
    """Minimal error shape for consistent responses."""

    error_code: str
    message: str
    error_id: str

    def to_dict(self) -> dict:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "error_id": self.error_id,
        }


class KudosError(Exception):
    """R: Base for internal errors (error_code + error_id + message)."""

    error_code: str = "KUDOS_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            error_code=self.error_code, message=self.message, error_id=self.error_id
        )


class AuthenticationError(KudosError):
    """No resolvable caller identity. Fatal to the request."""

    error_code: str = "AUTHENTICATION_REQUIRED"


class NotificationDeliveryError(KudosError):
    """External notification sink failed. Always recovered locally."""

    error_code: str = "NOTIFICATION_DELIVERY_ERROR"


class InvalidRecognitionError(KudosError, ValueError):
    """Recognition draft rejected by the store before any mutation."""

    error_code: str = "INVALID_RECOGNITION"


class UnknownRecipientError(InvalidRecognitionError):
    error_code: str = "UNKNOWN_RECIPIENT"


class SelfRecognitionError(InvalidRecognitionError):
    error_code: str = "SELF_RECOGNITION"
