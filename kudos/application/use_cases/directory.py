"""
Name: Directory Use Cases

Responsibilities:
  - Resolve the calling user from an identity string
  - List users (optionally by team) and teams
  - Update the caller's own profile (name, team)

Collaborators:
  - domain.repositories.DirectoryRepository
"""

from dataclasses import dataclass
from typing import Optional

from ...domain.repositories import DirectoryRepository
from ...users import User
from .feed_results import TeamListResult, UserListResult, UserResult
from .recognition_access import unauthenticated_error, validation_error

MSG_NAME_BLANK = "Name must not be blank"
MSG_TEAM_NOT_FOUND = "Team not found"


class ResolveCallerUseCase:
    """R: Map an identity string to a directory user."""

    def __init__(self, directory: DirectoryRepository):
        self.directory = directory

    def execute(self, caller_id: Optional[str]) -> UserResult:
        normalized = (caller_id or "").strip()
        if not normalized:
            return UserResult(error=unauthenticated_error())

        user = self.directory.get_user(normalized)
        if user is None:
            return UserResult(error=unauthenticated_error())

        return UserResult(user=user)


class ListUsersUseCase:
    def __init__(self, directory: DirectoryRepository):
        self.directory = directory

    def execute(
        self, viewer: User | None, *, team_id: Optional[str] = None
    ) -> UserListResult:
        if viewer is None:
            return UserListResult(error=unauthenticated_error())
        return UserListResult(users=self.directory.list_users(team_id=team_id))


class ListTeamsUseCase:
    def __init__(self, directory: DirectoryRepository):
        self.directory = directory

    def execute(self, viewer: User | None) -> TeamListResult:
        if viewer is None:
            return TeamListResult(error=unauthenticated_error())
        return TeamListResult(teams=self.directory.list_teams())


@dataclass
class UpdateProfileInput:
    name: Optional[str] = None
    team_id: Optional[str] = None


class UpdateProfileUseCase:
    """
    R: Update the caller's own profile.

    Only the authenticated caller's record is ever modified. Fields left as
    None are unchanged.
    """

    def __init__(self, directory: DirectoryRepository):
        self.directory = directory

    def execute(
        self, viewer: User | None, input_data: UpdateProfileInput
    ) -> UserResult:
        if viewer is None:
            return UserResult(error=unauthenticated_error())

        name = None
        if input_data.name is not None:
            name = input_data.name.strip()
            if not name:
                return UserResult(error=validation_error(MSG_NAME_BLANK))

        team_id = None
        if input_data.team_id is not None:
            team_id = input_data.team_id.strip()
            if not team_id or self.directory.get_team(team_id) is None:
                return UserResult(error=validation_error(MSG_TEAM_NOT_FOUND))

        updated = self.directory.update_user(viewer.id, name=name, team_id=team_id)
        if updated is None:
            return UserResult(error=unauthenticated_error())

        return UserResult(user=updated)
