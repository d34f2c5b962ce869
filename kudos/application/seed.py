"""
Name: Demo Fixture Seed
Description: Loads the demo directory and recognition history on startup.

Notes:
  - Recognition timestamps are relative to "now" so the feed always looks
    recent
  - Analytics for seeded records are folded with a one-off rebuild; steady
    state updates stay incremental
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import List, Optional

from ..domain.entities import Recognition, Team, Visibility
from ..logger import logger
from ..users import User, UserRole


def fixture_teams() -> List[Team]:
    return [
        Team(id="team1", name="Engineering"),
        Team(id="team2", name="Product"),
        Team(id="team3", name="Marketing"),
    ]


def fixture_users() -> List[User]:
    return [
        User("user1", "john@company.com", "John Doe", UserRole.EMPLOYEE, "team1"),
        User("user2", "jane@company.com", "Jane Smith", UserRole.MANAGER, "team1"),
        User("user3", "bob@company.com", "Bob Wilson", UserRole.EMPLOYEE, "team1"),
        User("user4", "alice@company.com", "Alice Johnson", UserRole.EMPLOYEE, "team2"),
        User("user5", "charlie@company.com", "Charlie Brown", UserRole.MANAGER, "team2"),
        User("user6", "diana@company.com", "Diana Prince", UserRole.ADMIN, None),
        User("user7", "eve@company.com", "Eve Adams", UserRole.EMPLOYEE, "team3"),
        User("user8", "frank@company.com", "Frank Castle", UserRole.EMPLOYEE, "team3"),
        User("user9", "grace@company.com", "Grace Hopper", UserRole.MANAGER, "team3"),
        User("user10", "henry@company.com", "Henry Ford", UserRole.EMPLOYEE, "team1"),
    ]


def fixture_recognitions(now: Optional[datetime] = None) -> List[Recognition]:
    now = now or datetime.now(timezone.utc)
    day = timedelta(days=1)
    return [
        Recognition(
            id="rec1",
            message="Great job on the quarterly presentation! 🎯",
            emoji="🎯",
            visibility=Visibility.PUBLIC,
            sender_id="user2",
            recipient_id="user1",
            created_at=now - 2 * day,
        ),
        Recognition(
            id="rec2",
            message="Thank you for staying late to help with the deployment",
            emoji="🚀",
            visibility=Visibility.PUBLIC,
            sender_id="user1",
            recipient_id="user3",
            created_at=now - 1 * day,
        ),
        Recognition(
            id="rec3",
            message="Excellent problem-solving skills during the incident",
            emoji="🔧",
            visibility=Visibility.ANONYMOUS,
            sender_id="user2",
            recipient_id="user1",
            created_at=now - 3 * day,
        ),
        Recognition(
            id="rec4",
            message="Thanks for the code review feedback",
            emoji="👍",
            visibility=Visibility.PRIVATE,
            sender_id="user3",
            recipient_id="user1",
            created_at=now - 5 * day,
        ),
        Recognition(
            id="rec5",
            message="Amazing work on the new feature launch!",
            emoji="🌟",
            visibility=Visibility.PUBLIC,
            sender_id="user5",
            recipient_id="user4",
            created_at=now - 1 * day,
        ),
        Recognition(
            id="rec6",
            message="Your presentation was inspiring",
            emoji="💡",
            visibility=Visibility.PUBLIC,
            sender_id="user7",
            recipient_id="user9",
            created_at=now - timedelta(hours=6),
        ),
    ]


def seed_demo_data(context, *, now: Optional[datetime] = None) -> None:
    """
    R: Load demo teams, users and recognitions into a FeedContext.

    Expects an empty context (call reset() first when re-seeding).
    """
    for team in fixture_teams():
        context.directory.add_team(team)
    for user in fixture_users():
        context.directory.add_user(user)

    context.recognitions.seed(fixture_recognitions(now))
    context.analytics.rebuild(context.recognitions.all())

    logger.info(
        "Demo fixtures loaded",
        extra={
            "teams": len(context.directory.list_teams()),
            "users": len(context.directory.list_users()),
            "recognitions": context.recognitions.count(),
        },
    )
