"""
Name: Domain Repository Interfaces

Responsibilities:
  - Define contracts for the directory, the recognition log and the
    analytics index
  - Enable dependency inversion (use cases never import in-memory stores)

Collaborators:
  - domain.entities: Team, Recognition, RecognitionDraft, TeamAnalytics
  - Implementations in infrastructure.repositories

Constraints:
  - Pure interfaces (Protocol), no implementation
  - All methods are synchronous; only notifiers may suspend

Notes:
  - Using typing.Protocol for structural subtyping
  - Enables testing with fake repositories
"""

from typing import Iterable, List, Optional, Protocol

from ..users import User
from .entities import Recognition, RecognitionDraft, Team, TeamAnalytics


class DirectoryRepository(Protocol):
    """
    R: Interface for user and team lookups.

    Pure lookup, no business rules. Team membership is derived from
    User.team_id.
    """

    def get_user(self, user_id: str) -> Optional[User]:
        ...

    def list_users(self, *, team_id: Optional[str] = None) -> List[User]:
        """
        R: List users in directory order, optionally narrowed to one team.
        """
        ...

    def get_team(self, team_id: str) -> Optional[Team]:
        ...

    def list_teams(self) -> List[Team]:
        ...

    def team_of(self, user_id: str) -> Optional[str]:
        """R: Current team id of a user (None when unknown or team-less)."""
        ...

    def update_user(
        self,
        user_id: str,
        *,
        name: Optional[str] = None,
        team_id: Optional[str] = None,
    ) -> Optional[User]:
        """
        R: Apply a profile change; None fields are left untouched.

        Returns:
            Updated user, or None if the user does not exist
        """
        ...


class RecognitionRepository(Protocol):
    """
    R: Interface for the append-only recognition log.

    Implementations must provide:
      - Identifier and timestamp assignment on create
      - Insertion-ordered reads
      - No access filtering (policy is layered on by use cases)
    """

    def create(self, draft: RecognitionDraft) -> Recognition:
        """
        R: Append a recognition.

        Raises:
            UnknownRecipientError: recipient does not resolve to a user
            SelfRecognitionError: recipient equals sender
        """
        ...

    def all(self) -> List[Recognition]:
        """R: Every recognition in insertion order."""
        ...

    def get(self, recognition_id: str) -> Optional[Recognition]:
        ...

    def count(self) -> int:
        ...


class AnalyticsIndex(Protocol):
    """
    R: Interface for incrementally maintained per-team aggregates.
    """

    def record(self, recognition: Recognition, team_id: str) -> None:
        """
        R: Fold one accepted recognition into the team's aggregates.

        Called exactly once per creation, only when the recipient has a team.
        """
        ...

    def snapshot(self, team_id: str) -> TeamAnalytics:
        """R: Current aggregates for a team (empty snapshot if none)."""
        ...

    def rebuild(self, recognitions: Iterable[Recognition]) -> None:
        """R: Bootstrap-only full fold of an existing log."""
        ...

    def reset(self) -> None:
        ...
