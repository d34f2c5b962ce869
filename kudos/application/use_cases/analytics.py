"""
Name: Analytics Use Cases

Responsibilities:
  - Return a team analytics snapshot to managers (own team) and admins
  - Return snapshots for every team to admins

Collaborators:
  - domain.repositories.AnalyticsIndex
  - domain.repositories.DirectoryRepository
  - domain.recognition_policy: analytics access rules

Notes:
  - Authorization is decided before existence, so a manager never learns
    whether another team exists
"""

from ...domain.recognition_policy import (
    FeedActor,
    can_view_organization_analytics,
    can_view_team_analytics,
)
from ...domain.repositories import AnalyticsIndex, DirectoryRepository
from ...users import User, UserRole
from .feed_results import OrganizationAnalyticsResult, TeamAnalyticsResult
from .recognition_access import (
    forbidden_error,
    not_found_error,
    unauthenticated_error,
)

MSG_ANALYTICS_ROLE = "Access denied. Analytics require manager or admin role"
MSG_MANAGER_OWN_TEAM = (
    "Access denied. Managers can only view their own team analytics"
)
MSG_ADMIN_ONLY = "Access denied. Required role: ADMIN"


class GetTeamAnalyticsUseCase:
    """R: Team analytics snapshot with role gating."""

    def __init__(self, analytics_index: AnalyticsIndex, directory: DirectoryRepository):
        self.analytics_index = analytics_index
        self.directory = directory

    def execute(self, viewer: User | None, team_id: str) -> TeamAnalyticsResult:
        if viewer is None:
            return TeamAnalyticsResult(error=unauthenticated_error())

        actor = FeedActor.from_user(viewer)
        if not can_view_team_analytics(actor, team_id):
            message = (
                MSG_MANAGER_OWN_TEAM
                if viewer.role == UserRole.MANAGER
                else MSG_ANALYTICS_ROLE
            )
            return TeamAnalyticsResult(error=forbidden_error(message))

        if self.directory.get_team(team_id) is None:
            return TeamAnalyticsResult(error=not_found_error("Team", team_id))

        return TeamAnalyticsResult(analytics=self.analytics_index.snapshot(team_id))


class GetOrganizationAnalyticsUseCase:
    """R: Snapshots for every team, admins only."""

    def __init__(self, analytics_index: AnalyticsIndex, directory: DirectoryRepository):
        self.analytics_index = analytics_index
        self.directory = directory

    def execute(self, viewer: User | None) -> OrganizationAnalyticsResult:
        if viewer is None:
            return OrganizationAnalyticsResult(error=unauthenticated_error())

        if not can_view_organization_analytics(FeedActor.from_user(viewer)):
            return OrganizationAnalyticsResult(error=forbidden_error(MSG_ADMIN_ONLY))

        return OrganizationAnalyticsResult(
            analytics=[
                self.analytics_index.snapshot(team.id)
                for team in self.directory.list_teams()
            ]
        )
