"""
Name: Dependency Injection Container

Responsibilities:
  - Hold all process-wide feed state in one explicit FeedContext
  - Wire stores, analytics index, pub/sub, notifier, queue and flusher
  - Provide factory functions for use cases (FastAPI Depends)

Collaborators:
  - config.Settings: batch mode, analytics and Slack settings
  - infrastructure.repositories / events / notifiers
  - application.use_cases
  - application.seed: demo fixtures

Constraints:
  - Manual DI (no container library)
  - Singleton via functools.lru_cache; reset_feed_context() drops it

Notes:
  - This is the composition root
  - Tests build isolated contexts with build_feed_context()
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from .application.seed import seed_demo_data
from .application.use_cases import (
    CreateRecognitionUseCase,
    GetOrganizationAnalyticsUseCase,
    GetTeamAnalyticsUseCase,
    ListRecognitionsUseCase,
    ListTeamsUseCase,
    ListUsersUseCase,
    ResolveCallerUseCase,
    SubscribeRecognitionsUseCase,
    UpdateProfileUseCase,
)
from .config import Settings, get_settings
from .domain.entities import Recognition
from .domain.services import RecognitionNotifier
from .infrastructure.events import (
    BatchFlusher,
    NotificationQueue,
    PubSub,
    RecognitionDispatcher,
)
from .infrastructure.notifiers import LoggingNotifier, SlackWebhookNotifier
from .infrastructure.repositories import (
    InMemoryAnalyticsIndex,
    InMemoryDirectoryRepository,
    InMemoryRecognitionRepository,
)
from .logger import logger


@dataclass
class FeedContext:
    """
    R: Every piece of process-wide feed state, created once at startup.
    """

    settings: Settings
    directory: InMemoryDirectoryRepository
    recognitions: InMemoryRecognitionRepository
    analytics: InMemoryAnalyticsIndex
    pubsub: PubSub[Recognition]
    notifier: RecognitionNotifier
    queue: NotificationQueue
    dispatcher: RecognitionDispatcher
    flusher: BatchFlusher

    def reset(self) -> None:
        """R: Drop all feed state (directory, log, index, queue, listeners)."""
        self.pubsub.close_all()
        self.queue.clear()
        self.analytics.reset()
        self.recognitions.clear()
        self.directory.clear()

    def initialize(self, *, seed: Optional[bool] = None) -> None:
        """R: Reset, then load demo fixtures when seeding is enabled."""
        self.reset()
        should_seed = self.settings.seed_fixtures if seed is None else seed
        if should_seed:
            seed_demo_data(self)


def build_notifier(settings: Settings) -> RecognitionNotifier:
    if settings.slack_webhook_url.strip():
        return SlackWebhookNotifier(
            settings.slack_webhook_url,
            timeout_seconds=settings.slack_timeout_seconds,
        )
    return LoggingNotifier()


def build_feed_context(
    settings: Optional[Settings] = None,
    *,
    notifier: Optional[RecognitionNotifier] = None,
    batch_mode: Optional[bool] = None,
) -> FeedContext:
    """
    R: Wire a fresh, empty FeedContext.

    Args:
        settings: Settings to use (default: get_settings())
        notifier: Override the external notifier (tests)
        batch_mode: Override settings.notify_batch_mode
    """
    settings = settings or get_settings()
    notifier = notifier or build_notifier(settings)
    batch_mode = settings.notify_batch_mode if batch_mode is None else batch_mode

    directory = InMemoryDirectoryRepository()
    pubsub: PubSub[Recognition] = PubSub()
    queue = NotificationQueue()

    context = FeedContext(
        settings=settings,
        directory=directory,
        recognitions=InMemoryRecognitionRepository(directory),
        analytics=InMemoryAnalyticsIndex(
            directory,
            top_keywords=settings.analytics_top_keywords,
            min_keyword_length=settings.analytics_min_keyword_length,
        ),
        pubsub=pubsub,
        notifier=notifier,
        queue=queue,
        dispatcher=RecognitionDispatcher(
            pubsub, notifier, queue, batch_mode=batch_mode
        ),
        flusher=BatchFlusher(
            queue,
            notifier,
            interval_seconds=settings.notify_batch_interval_seconds,
        ),
    )
    logger.info(
        "Feed context built",
        extra={
            "batch_mode": batch_mode,
            "notifier": type(notifier).__name__,
        },
    )
    return context


@lru_cache
def get_feed_context() -> FeedContext:
    """R: Process-wide FeedContext singleton."""
    return build_feed_context()


def reset_feed_context() -> None:
    """R: Forget the singleton; the next get_feed_context() builds a new one."""
    get_feed_context.cache_clear()


# R: Use case factories (one instance per request)
def get_resolve_caller_use_case() -> ResolveCallerUseCase:
    return ResolveCallerUseCase(get_feed_context().directory)


def get_list_users_use_case() -> ListUsersUseCase:
    return ListUsersUseCase(get_feed_context().directory)


def get_list_teams_use_case() -> ListTeamsUseCase:
    return ListTeamsUseCase(get_feed_context().directory)


def get_update_profile_use_case() -> UpdateProfileUseCase:
    return UpdateProfileUseCase(get_feed_context().directory)


def get_list_recognitions_use_case() -> ListRecognitionsUseCase:
    context = get_feed_context()
    return ListRecognitionsUseCase(
        recognition_repository=context.recognitions,
        directory=context.directory,
    )


def get_create_recognition_use_case() -> CreateRecognitionUseCase:
    """
    R: Create CreateRecognitionUseCase with injected dependencies.
    """
    context = get_feed_context()
    return CreateRecognitionUseCase(
        recognition_repository=context.recognitions,
        directory=context.directory,
        analytics_index=context.analytics,
        dispatcher=context.dispatcher,
    )


def get_team_analytics_use_case() -> GetTeamAnalyticsUseCase:
    context = get_feed_context()
    return GetTeamAnalyticsUseCase(context.analytics, context.directory)


def get_organization_analytics_use_case() -> GetOrganizationAnalyticsUseCase:
    context = get_feed_context()
    return GetOrganizationAnalyticsUseCase(context.analytics, context.directory)


def get_subscribe_recognitions_use_case() -> SubscribeRecognitionsUseCase:
    context = get_feed_context()
    return SubscribeRecognitionsUseCase(context.pubsub, context.directory)
