"""
Name: Feed Use Case Results

Responsibilities:
  - Provide consistent error/result types for the feed use cases
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ...domain.entities import Recognition, Team, TeamAnalytics
from ...infrastructure.events.pubsub import Topic
from ...users import User


class FeedErrorCode(str, Enum):
    """R: Error codes for feed use cases."""

    UNAUTHENTICATED = "UNAUTHENTICATED"
    FORBIDDEN = "FORBIDDEN"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"


@dataclass
class FeedError:
    code: FeedErrorCode
    message: str
    resource: str | None = None


@dataclass(frozen=True)
class RecognitionView:
    """
    R: A recognition as one viewer is allowed to see it.

    sender is None when the sender identity is redacted for this viewer
    (or the sender no longer resolves in the directory).
    """

    recognition: Recognition
    sender: User | None
    recipient: User | None

    @property
    def sender_revealed(self) -> bool:
        return self.sender is not None


@dataclass
class UserResult:
    user: User | None = None
    error: FeedError | None = None


@dataclass
class UserListResult:
    users: List[User] = field(default_factory=list)
    error: FeedError | None = None


@dataclass
class TeamListResult:
    teams: List[Team] = field(default_factory=list)
    error: FeedError | None = None


@dataclass
class RecognitionListResult:
    recognitions: List[RecognitionView] = field(default_factory=list)
    error: FeedError | None = None


@dataclass
class CreateRecognitionResult:
    recognition: RecognitionView | None = None
    notification: str | None = None
    error: FeedError | None = None


@dataclass
class TeamAnalyticsResult:
    analytics: TeamAnalytics | None = None
    error: FeedError | None = None


@dataclass
class OrganizationAnalyticsResult:
    analytics: List[TeamAnalytics] = field(default_factory=list)
    error: FeedError | None = None


@dataclass
class SubscriptionResult:
    topic: Topic | None = None
    error: FeedError | None = None
