"""
Name: Domain Entities

Responsibilities:
  - Define core entities of the recognition feed (Team, Recognition)
  - Define the closed filter structure used by listings
  - Define the derived analytics snapshot shapes

Collaborators:
  - users.py: User / UserRole (identity data)

Constraints:
  - No dependencies on infrastructure or frameworks
  - Recognition is immutable after creation (frozen dataclass)

Notes:
  - Team membership is derived from User.team_id, never stored here
  - created_at is always timezone-aware UTC
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional

from ..users import User


class Visibility(str, Enum):
    """R: Declared audience scope of a recognition."""

    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"
    ANONYMOUS = "ANONYMOUS"


@dataclass
class Team:
    """R: Team record (id + display name)."""

    id: str
    name: str


@dataclass(frozen=True)
class RecognitionDraft:
    """
    R: Validated input for a new recognition (no id/timestamp yet).

    Attributes:
        sender_id: Authenticated caller (never client-supplied)
        recipient_id: Target user id
        message: Free-text appreciation
        visibility: PUBLIC / PRIVATE / ANONYMOUS
        emoji: Optional single reaction tag
    """

    sender_id: str
    recipient_id: str
    message: str
    visibility: Visibility = Visibility.PUBLIC
    emoji: Optional[str] = None


@dataclass(frozen=True)
class Recognition:
    """
    R: Immutable recognition event owned by the recognition store.

    Attributes:
        id: Unique identifier assigned at creation
        message: Free-text appreciation
        visibility: PUBLIC / PRIVATE / ANONYMOUS
        sender_id: Author user id
        recipient_id: Recognized user id
        created_at: Creation timestamp (UTC)
        emoji: Optional single reaction tag
    """

    id: str
    message: str
    visibility: Visibility
    sender_id: str
    recipient_id: str
    created_at: datetime
    emoji: Optional[str] = None

    @property
    def is_anonymous(self) -> bool:
        return self.visibility == Visibility.ANONYMOUS

    def involves(self, user_id: str) -> bool:
        """R: True when the user is the sender or the recipient."""
        return user_id in (self.sender_id, self.recipient_id)


@dataclass(frozen=True)
class RecognitionFilter:
    """
    R: Closed equality filter for recognition listings.

    Every field is optional; unset fields do not narrow the result.
    team_id matches the recipient's current team.
    """

    team_id: Optional[str] = None
    visibility: Optional[Visibility] = None
    recipient_id: Optional[str] = None
    sender_id: Optional[str] = None


@dataclass(frozen=True)
class KeywordCount:
    keyword: str
    count: int


@dataclass(frozen=True)
class MonthlyCount:
    """R: Recognition volume for one calendar month ("YYYY-MM")."""

    month: str
    label: str
    count: int


@dataclass
class TeamAnalytics:
    """
    R: Derived analytics snapshot for a team at query time.

    Attributes:
        team_id: Team identifier
        team_name: Display name ("Unknown Team" when the team is missing)
        total_recognitions: Recognitions credited to the team
        top_keywords: Most frequent message keywords
        recognitions_by_month: Monthly volume, oldest first
        most_recognized_user: Member with the highest tally (None if empty)
    """

    team_id: str
    team_name: str
    total_recognitions: int = 0
    top_keywords: List[KeywordCount] = field(default_factory=list)
    recognitions_by_month: List[MonthlyCount] = field(default_factory=list)
    most_recognized_user: Optional[User] = None
