"""
Name: Subscribe Recognitions Use Case

Responsibilities:
  - Resolve the recipient topic or the team feed topic for a viewer
  - Open live subscriptions on a resolved topic
  - Turn each delivered recognition into the subscribing viewer's view
    (drop invisible events, redact anonymous senders)

Collaborators:
  - infrastructure.events.pubsub: PubSub, Topic, Subscription
  - domain.repositories.DirectoryRepository
  - recognition_access: is_visible / view_for

Notes:
  - for_recipient / for_team only validate and resolve the topic; nothing is
    registered until open() is called
  - No replay: only recognitions created after open() are delivered
  - The caller owns the opened subscription and must close it
"""

from typing import Optional

from ...domain.entities import Recognition
from ...domain.repositories import DirectoryRepository
from ...infrastructure.events.pubsub import PubSub, Subscription, Topic
from ...users import User
from .feed_results import RecognitionView, SubscriptionResult
from .recognition_access import (
    is_visible,
    not_found_error,
    unauthenticated_error,
    view_for,
)


class SubscribeRecognitionsUseCase:
    """R: Live recognition streams filtered per viewer."""

    def __init__(self, pubsub: PubSub[Recognition], directory: DirectoryRepository):
        self.pubsub = pubsub
        self.directory = directory

    def for_recipient(self, viewer: User | None, user_id: str) -> SubscriptionResult:
        if viewer is None:
            return SubscriptionResult(error=unauthenticated_error())
        if self.directory.get_user(user_id) is None:
            return SubscriptionResult(error=not_found_error("User", user_id))
        return SubscriptionResult(topic=Topic.recipient(user_id))

    def for_team(self, viewer: User | None, team_id: str) -> SubscriptionResult:
        if viewer is None:
            return SubscriptionResult(error=unauthenticated_error())
        if self.directory.get_team(team_id) is None:
            return SubscriptionResult(error=not_found_error("Team", team_id))
        return SubscriptionResult(topic=Topic.team(team_id))

    def open(self, topic: Topic) -> Subscription[Recognition]:
        """R: Register a listener on the topic."""
        return self.pubsub.subscribe(topic)

    def view_event(
        self, recognition: Recognition, viewer: User
    ) -> Optional[RecognitionView]:
        """R: Viewer's view of a delivered event, or None if not visible."""
        if not is_visible(recognition, viewer, self.directory):
            return None
        return view_for(recognition, viewer, self.directory)
