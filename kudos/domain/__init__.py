"""Domain layer exports"""

from .entities import (
    KeywordCount,
    MonthlyCount,
    Recognition,
    RecognitionDraft,
    RecognitionFilter,
    Team,
    TeamAnalytics,
    Visibility,
)
from .repositories import AnalyticsIndex, DirectoryRepository, RecognitionRepository
from .services import RecognitionNotifier

__all__ = [
    "KeywordCount",
    "MonthlyCount",
    "Recognition",
    "RecognitionDraft",
    "RecognitionFilter",
    "Team",
    "TeamAnalytics",
    "Visibility",
    "AnalyticsIndex",
    "DirectoryRepository",
    "RecognitionRepository",
    "RecognitionNotifier",
]
