"""
Name: In-Memory Analytics Index

Responsibilities:
  - Maintain per-team aggregates incrementally on every accepted recognition:
      - keyword frequency
      - monthly volume
      - per-member tally with a running leader
  - Produce TeamAnalytics snapshots on demand

Collaborators:
  - domain.keywords: tokenizer and month keys
  - domain.repositories.DirectoryRepository: team names and user lookup
  - domain.entities: Recognition, TeamAnalytics, KeywordCount, MonthlyCount

Constraints / Notes:
  - record() is O(tokens) and never rescans the log
  - Keyword ties resolve by first-seen order (dict insertion order + stable sort)
  - Leader changes only when a tally becomes strictly greater, so the first
    member to reach the top count keeps it on ties
  - rebuild() exists for bootstrap seeding only
"""

from __future__ import annotations

from dataclasses import dataclass, field
from threading import Lock
from typing import Dict, Iterable, Optional

from ...domain.entities import (
    KeywordCount,
    MonthlyCount,
    Recognition,
    TeamAnalytics,
)
from ...domain.keywords import (
    DEFAULT_MIN_KEYWORD_LENGTH,
    extract_keywords,
    month_key,
    month_label,
)
from ...domain.repositories import DirectoryRepository

UNKNOWN_TEAM_NAME = "Unknown Team"


@dataclass
class _TeamAggregate:
    total: int = 0
    keywords: Dict[str, int] = field(default_factory=dict)
    months: Dict[str, int] = field(default_factory=dict)
    tallies: Dict[str, int] = field(default_factory=dict)
    leader_id: Optional[str] = None
    leader_count: int = 0

    def fold(self, recognition: Recognition, keywords: list[str]) -> None:
        self.total += 1

        for keyword in keywords:
            self.keywords[keyword] = self.keywords.get(keyword, 0) + 1

        key = month_key(recognition.created_at)
        self.months[key] = self.months.get(key, 0) + 1

        recipient_id = recognition.recipient_id
        tally = self.tallies.get(recipient_id, 0) + 1
        self.tallies[recipient_id] = tally
        if tally > self.leader_count:
            self.leader_id = recipient_id
            self.leader_count = tally


class InMemoryAnalyticsIndex:
    """
    R: Per-team incremental aggregates keyed by team id.
    """

    def __init__(
        self,
        directory: DirectoryRepository,
        *,
        top_keywords: int = 5,
        min_keyword_length: int = DEFAULT_MIN_KEYWORD_LENGTH,
    ) -> None:
        self._directory = directory
        self._top_keywords = top_keywords
        self._min_keyword_length = min_keyword_length
        self._lock = Lock()
        self._teams: Dict[str, _TeamAggregate] = {}

    def record(self, recognition: Recognition, team_id: str) -> None:
        keywords = extract_keywords(
            recognition.message, min_length=self._min_keyword_length
        )
        with self._lock:
            aggregate = self._teams.setdefault(team_id, _TeamAggregate())
            aggregate.fold(recognition, keywords)

    def snapshot(self, team_id: str) -> TeamAnalytics:
        team = self._directory.get_team(team_id)
        team_name = team.name if team is not None else UNKNOWN_TEAM_NAME

        with self._lock:
            aggregate = self._teams.get(team_id)
            if aggregate is None:
                return TeamAnalytics(team_id=team_id, team_name=team_name)
            total = aggregate.total
            keyword_items = list(aggregate.keywords.items())
            month_items = sorted(aggregate.months.items())
            leader_id = aggregate.leader_id

        ranked = sorted(keyword_items, key=lambda item: -item[1])
        return TeamAnalytics(
            team_id=team_id,
            team_name=team_name,
            total_recognitions=total,
            top_keywords=[
                KeywordCount(keyword=keyword, count=count)
                for keyword, count in ranked[: self._top_keywords]
            ],
            recognitions_by_month=[
                MonthlyCount(month=key, label=month_label(key), count=count)
                for key, count in month_items
            ],
            most_recognized_user=(
                self._directory.get_user(leader_id) if leader_id else None
            ),
        )

    def team_ids(self) -> list[str]:
        """R: Teams that have at least one recognition folded in."""
        with self._lock:
            return list(self._teams.keys())

    def rebuild(self, recognitions: Iterable[Recognition]) -> None:
        """
        R: Reset and fold an existing log in order, crediting each
        recipient's current team. Bootstrap only.
        """
        self.reset()
        for recognition in recognitions:
            team_id = self._directory.team_of(recognition.recipient_id)
            if team_id is not None:
                self.record(recognition, team_id)

    def reset(self) -> None:
        with self._lock:
            self._teams.clear()
