"""Infrastructure repositories"""

from .in_memory_analytics_index import InMemoryAnalyticsIndex, UNKNOWN_TEAM_NAME
from .in_memory_directory import InMemoryDirectoryRepository
from .in_memory_recognition_repo import InMemoryRecognitionRepository

__all__ = [
    "InMemoryAnalyticsIndex",
    "InMemoryDirectoryRepository",
    "InMemoryRecognitionRepository",
    "UNKNOWN_TEAM_NAME",
]
