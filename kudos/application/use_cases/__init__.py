"""Application use cases"""

from .analytics import GetOrganizationAnalyticsUseCase, GetTeamAnalyticsUseCase
from .create_recognition import CreateRecognitionInput, CreateRecognitionUseCase
from .directory import (
    ListTeamsUseCase,
    ListUsersUseCase,
    ResolveCallerUseCase,
    UpdateProfileInput,
    UpdateProfileUseCase,
)
from .feed_results import (
    CreateRecognitionResult,
    FeedError,
    FeedErrorCode,
    OrganizationAnalyticsResult,
    RecognitionListResult,
    RecognitionView,
    SubscriptionResult,
    TeamAnalyticsResult,
    TeamListResult,
    UserListResult,
    UserResult,
)
from .list_recognitions import ListRecognitionsUseCase
from .subscriptions import SubscribeRecognitionsUseCase

__all__ = [
    "CreateRecognitionInput",
    "CreateRecognitionResult",
    "CreateRecognitionUseCase",
    "FeedError",
    "FeedErrorCode",
    "GetOrganizationAnalyticsUseCase",
    "GetTeamAnalyticsUseCase",
    "ListRecognitionsUseCase",
    "ListTeamsUseCase",
    "ListUsersUseCase",
    "OrganizationAnalyticsResult",
    "RecognitionListResult",
    "RecognitionView",
    "ResolveCallerUseCase",
    "SubscribeRecognitionsUseCase",
    "SubscriptionResult",
    "TeamAnalyticsResult",
    "TeamListResult",
    "UpdateProfileInput",
    "UpdateProfileUseCase",
    "UserListResult",
    "UserResult",
]
