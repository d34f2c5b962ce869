"""
Name: Create Recognition Use Case

Responsibilities:
  - Validate a new recognition (message, recipient, no self-recognition)
  - Append it to the recognition log
  - Fold it into the recipient team's analytics
  - Hand it to the event distribution layer

Collaborators:
  - domain.repositories.RecognitionRepository, DirectoryRepository,
    AnalyticsIndex
  - infrastructure.events.RecognitionDispatcher (via the Dispatcher protocol)
  - metrics.record_recognition_created

Constraints:
  - Every validation happens before the first mutation
  - The sender is always the authenticated viewer
  - Notification failures never fail the creation
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from ...domain.entities import Recognition, RecognitionDraft, Visibility
from ...domain.repositories import (
    AnalyticsIndex,
    DirectoryRepository,
    RecognitionRepository,
)
from ...exceptions import InvalidRecognitionError
from ...logger import logger
from ...metrics import record_recognition_created
from ...users import User
from .feed_results import CreateRecognitionResult
from .recognition_access import unauthenticated_error, validation_error, view_for

MSG_MESSAGE_REQUIRED = "Message is required"
MSG_RECIPIENT_NOT_FOUND = "Recipient not found"
MSG_SELF_RECOGNITION = "Cannot recognize yourself"


class Dispatcher(Protocol):
    async def dispatch(
        self, recognition: Recognition, *, recipient_team_id: Optional[str]
    ):
        ...


@dataclass
class CreateRecognitionInput:
    recipient_id: str
    message: str
    visibility: Visibility = Visibility.PUBLIC
    emoji: Optional[str] = None


class CreateRecognitionUseCase:
    """R: Create a recognition and distribute it."""

    def __init__(
        self,
        recognition_repository: RecognitionRepository,
        directory: DirectoryRepository,
        analytics_index: AnalyticsIndex,
        dispatcher: Dispatcher,
    ):
        self.recognition_repository = recognition_repository
        self.directory = directory
        self.analytics_index = analytics_index
        self.dispatcher = dispatcher

    async def execute(
        self, viewer: User | None, input_data: CreateRecognitionInput
    ) -> CreateRecognitionResult:
        if viewer is None:
            return CreateRecognitionResult(error=unauthenticated_error())

        message = (input_data.message or "").strip()
        if not message:
            return CreateRecognitionResult(
                error=validation_error(MSG_MESSAGE_REQUIRED)
            )

        recipient = self.directory.get_user(input_data.recipient_id)
        if recipient is None:
            return CreateRecognitionResult(
                error=validation_error(MSG_RECIPIENT_NOT_FOUND)
            )

        if recipient.id == viewer.id:
            return CreateRecognitionResult(
                error=validation_error(MSG_SELF_RECOGNITION)
            )

        draft = RecognitionDraft(
            sender_id=viewer.id,
            recipient_id=recipient.id,
            message=message,
            visibility=input_data.visibility,
            emoji=(input_data.emoji or "").strip() or None,
        )
        try:
            recognition = self.recognition_repository.create(draft)
        except InvalidRecognitionError as exc:
            return CreateRecognitionResult(error=validation_error(exc.message))

        recipient_team_id = recipient.team_id
        if recipient_team_id is not None:
            self.analytics_index.record(recognition, recipient_team_id)
        record_recognition_created(recognition.visibility.value)

        logger.info(
            "Recognition created",
            extra={
                "recognition_id": recognition.id,
                "visibility": recognition.visibility.value,
                "has_team": recipient_team_id is not None,
            },
        )

        outcome = await self.dispatcher.dispatch(
            recognition, recipient_team_id=recipient_team_id
        )

        return CreateRecognitionResult(
            recognition=view_for(recognition, viewer, self.directory),
            notification=outcome.notification,
        )
