"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Configure the test environment (no .env file, APP_ENV=test)
  - Provide reusable directory/feed fixtures built from the demo data
  - Provide a recording notifier double

Collaborators:
  - pytest / pytest-asyncio
  - kudos.application.seed: demo teams, users, recognitions
  - kudos.container: isolated FeedContext builds

Notes:
  - Fixtures are function scoped; every test gets fresh in-memory state
"""

import os
from datetime import datetime, timezone

import pytest

os.environ.setdefault("APP_ENV", "test")

from kudos import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None

from kudos.application.seed import (  # noqa: E402
    fixture_teams,
    fixture_users,
    seed_demo_data,
)
from kudos.config import Settings  # noqa: E402
from kudos.container import build_feed_context  # noqa: E402
from kudos.infrastructure.repositories import (  # noqa: E402
    InMemoryDirectoryRepository,
)

FIXED_NOW = datetime(2026, 10, 15, 12, 0, tzinfo=timezone.utc)


def pytest_configure(config) -> None:
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )


class RecordingNotifier:
    """R: Notifier double that remembers every recognition it was given."""

    def __init__(self, fail_on: set[str] | None = None) -> None:
        self.sent = []
        self.fail_on = fail_on or set()
        self.closed = False

    async def send(self, recognition) -> None:
        if recognition.id in self.fail_on or recognition.message in self.fail_on:
            raise RuntimeError("channel down")
        self.sent.append(recognition)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def directory() -> InMemoryDirectoryRepository:
    """R: Demo directory (3 teams, 10 users)."""
    return InMemoryDirectoryRepository(teams=fixture_teams(), users=fixture_users())


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def feed_context(notifier):
    """R: Seeded FeedContext with immediate notifications."""
    context = build_feed_context(
        Settings(seed_fixtures=False), notifier=notifier, batch_mode=False
    )
    seed_demo_data(context, now=FIXED_NOW)
    return context


@pytest.fixture
def batch_feed_context(notifier):
    """R: Seeded FeedContext with batched notifications."""
    context = build_feed_context(
        Settings(seed_fixtures=False), notifier=notifier, batch_mode=True
    )
    seed_demo_data(context, now=FIXED_NOW)
    return context
