"""
Name: In-Memory Directory Repository

Responsibilities:
  - Store users and teams in process memory
  - Answer user/team lookups and derived team membership
  - Apply profile updates (name, team)

Collaborators:
  - users.User
  - domain.entities.Team
  - domain.repositories.DirectoryRepository (contract)

Constraints / Notes:
  - Thread-safe: access guarded by Lock
  - Pure lookup, no authorization decisions
  - Listing order is insertion order (fixtures load deterministically)
"""

from __future__ import annotations

from threading import Lock
from typing import Dict, Iterable, List, Optional

from ...domain.entities import Team
from ...users import User


class InMemoryDirectoryRepository:
    """
    R: Thread-safe in-memory directory of users and teams.
    """

    def __init__(
        self,
        *,
        teams: Iterable[Team] = (),
        users: Iterable[User] = (),
    ) -> None:
        self._lock = Lock()
        self._teams: Dict[str, Team] = {}
        self._users: Dict[str, User] = {}
        for team in teams:
            self.add_team(team)
        for user in users:
            self.add_user(user)

    def add_team(self, team: Team) -> None:
        with self._lock:
            self._teams[team.id] = team

    def add_user(self, user: User) -> None:
        with self._lock:
            self._users[user.id] = user

    def get_user(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def list_users(self, *, team_id: Optional[str] = None) -> List[User]:
        with self._lock:
            values = list(self._users.values())
        if team_id is None:
            return values
        return [user for user in values if user.team_id == team_id]

    def get_team(self, team_id: str) -> Optional[Team]:
        with self._lock:
            return self._teams.get(team_id)

    def list_teams(self) -> List[Team]:
        with self._lock:
            return list(self._teams.values())

    def team_of(self, user_id: str) -> Optional[str]:
        user = self.get_user(user_id)
        return user.team_id if user is not None else None

    def update_user(
        self,
        user_id: str,
        *,
        name: Optional[str] = None,
        team_id: Optional[str] = None,
    ) -> Optional[User]:
        """R: Mutate name/team in place; the User object is shared by reference."""
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            if name is not None:
                user.name = name
            if team_id is not None:
                user.team_id = team_id
            return user

    def clear(self) -> None:
        with self._lock:
            self._teams.clear()
            self._users.clear()
