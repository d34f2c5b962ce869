"""
Name: List Recognitions Use Case

Responsibilities:
  - List recognitions visible to a viewer, optionally filtered
  - List the viewer's own recognitions (sent or received)
  - Gate the sender filter for employees

Collaborators:
  - domain.repositories.RecognitionRepository
  - domain.repositories.DirectoryRepository
  - recognition_access: listing contract + error builders
"""

from ...domain.entities import RecognitionFilter
from ...domain.recognition_policy import FeedActor, can_filter_by_sender
from ...domain.repositories import DirectoryRepository, RecognitionRepository
from ...users import User
from .feed_results import RecognitionListResult
from .recognition_access import (
    MSG_SENDER_FILTER_FORBIDDEN,
    forbidden_error,
    list_visible,
    unauthenticated_error,
)


class ListRecognitionsUseCase:
    """R: Access-filtered recognition listings, newest first."""

    def __init__(
        self,
        recognition_repository: RecognitionRepository,
        directory: DirectoryRepository,
    ):
        self.recognition_repository = recognition_repository
        self.directory = directory

    def execute(
        self, viewer: User | None, criteria: RecognitionFilter | None = None
    ) -> RecognitionListResult:
        if viewer is None:
            return RecognitionListResult(error=unauthenticated_error())

        criteria = criteria or RecognitionFilter()
        if criteria.sender_id is not None and not can_filter_by_sender(
            FeedActor.from_user(viewer), criteria.sender_id
        ):
            return RecognitionListResult(
                error=forbidden_error(MSG_SENDER_FILTER_FORBIDDEN)
            )

        return RecognitionListResult(
            recognitions=list_visible(
                self.recognition_repository.all(),
                viewer,
                self.directory,
                criteria,
            )
        )

    def execute_mine(self, viewer: User | None) -> RecognitionListResult:
        """R: Recognitions where the viewer is sender or recipient."""
        if viewer is None:
            return RecognitionListResult(error=unauthenticated_error())

        mine = [
            record
            for record in self.recognition_repository.all()
            if record.involves(viewer.id)
        ]
        return RecognitionListResult(
            recognitions=list_visible(mine, viewer, self.directory)
        )
