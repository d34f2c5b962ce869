"""
Name: In-Memory Recognition Repository

Responsibilities:
  - Own the append-only recognition log for the process lifetime
  - Assign identifiers (uuid4) and creation timestamps
  - Reject drafts with an unknown recipient or a self-recognition

Collaborators:
  - domain.repositories.DirectoryRepository (recipient existence)
  - domain.entities.Recognition, RecognitionDraft
  - exceptions.UnknownRecipientError, SelfRecognitionError

Constraints / Notes:
  - No access filtering: policy is layered on by the use cases
  - created_at never decreases in insertion order; a clock step backwards
    is clamped to the previous timestamp
  - Data is lost on restart
"""

from __future__ import annotations

from datetime import datetime, timezone
from threading import Lock
from typing import Callable, Dict, Iterable, List, Optional
from uuid import uuid4

from ...domain.entities import Recognition, RecognitionDraft
from ...domain.repositories import DirectoryRepository
from ...exceptions import SelfRecognitionError, UnknownRecipientError


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryRecognitionRepository:
    """
    R: Thread-safe, append-only in-memory recognition log.

    _log keeps insertion order; _by_id gives O(1) lookups. _latest is the
    newest created_at held, the floor for timestamps assigned by create().
    """

    def __init__(
        self,
        directory: DirectoryRepository,
        *,
        clock: Callable[[], datetime] = _utc_now,
        id_factory: Callable[[], str] = lambda: str(uuid4()),
    ) -> None:
        self._directory = directory
        self._clock = clock
        self._id_factory = id_factory
        self._lock = Lock()
        self._log: List[Recognition] = []
        self._by_id: Dict[str, Recognition] = {}
        self._latest: Optional[datetime] = None

    def _next_timestamp(self) -> datetime:
        now = self._clock()
        if self._latest is not None and now < self._latest:
            return self._latest
        return now

    def _append(self, recognition: Recognition) -> None:
        self._log.append(recognition)
        self._by_id[recognition.id] = recognition
        if self._latest is None or recognition.created_at > self._latest:
            self._latest = recognition.created_at

    def create(self, draft: RecognitionDraft) -> Recognition:
        if draft.recipient_id == draft.sender_id:
            raise SelfRecognitionError("Cannot recognize yourself")
        if self._directory.get_user(draft.recipient_id) is None:
            raise UnknownRecipientError("Recipient not found")

        with self._lock:
            recognition_id = self._id_factory()
            while recognition_id in self._by_id:
                recognition_id = self._id_factory()
            recognition = Recognition(
                id=recognition_id,
                message=draft.message,
                visibility=draft.visibility,
                sender_id=draft.sender_id,
                recipient_id=draft.recipient_id,
                created_at=self._next_timestamp(),
                emoji=draft.emoji,
            )
            self._append(recognition)
        return recognition

    def seed(self, records: Iterable[Recognition]) -> None:
        """
        R: Load pre-built records (bootstrap fixtures) as-is.

        Fixture timestamps may be in any order; only records created through
        create() are clamped, never below the newest seeded timestamp.
        """
        with self._lock:
            for record in records:
                if record.id in self._by_id:
                    raise ValueError(f"Duplicate recognition id: {record.id}")
                self._append(record)

    def all(self) -> List[Recognition]:
        with self._lock:
            return list(self._log)

    def get(self, recognition_id: str) -> Optional[Recognition]:
        with self._lock:
            return self._by_id.get(recognition_id)

    def count(self) -> int:
        with self._lock:
            return len(self._log)

    def clear(self) -> None:
        with self._lock:
            self._log.clear()
            self._by_id.clear()
            self._latest = None
