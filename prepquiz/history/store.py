"""Local quiz history: a JSON file of completed sessions plus statistics."""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from prepquiz.errors import HistoryStoreError
from prepquiz.models.quiz import QuizCategory, QuizSession, SessionStatus
from prepquiz.models.score import CategoryStatistics, QuizStatistics

logger = logging.getLogger(__name__)

TREND_LENGTH = 10

_sessions_adapter = TypeAdapter(list[QuizSession])


def deduplicate_sessions(sessions: list[QuizSession]) -> list[QuizSession]:
    """
    Keep one session per id, preferring the later start time.

    First-seen order is preserved.
    """
    unique: dict[str, QuizSession] = {}
    for session in sessions:
        existing = unique.get(session.id)
        if existing is None or session.start_time > existing.start_time:
            unique[session.id] = session
    return list(unique.values())


class HistoryStore:
    """
    Persists quiz sessions keyed by id.

    With a ``path`` every operation re-reads the file, applies its change
    and writes the whole file back. Without one the store lives in memory.
    Timestamps are written as ISO-8601 strings and parsed back to datetimes.
    """

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path).expanduser() if path else None
        self._sessions: list[QuizSession] = []
        self._reload()

    # Persistence

    def _read_file(self) -> list[QuizSession] | None:
        """Sessions exactly as stored on disk, or None without a file."""
        if self.path is None or not self.path.exists():
            return None
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8") or "{}")
            sessions = _sessions_adapter.validate_python(payload.get("sessions", []))
        except (json.JSONDecodeError, ValidationError, AttributeError) as e:
            raise HistoryStoreError(f"Could not read history file {self.path}: {e}") from e
        return sessions

    def _reload(self) -> None:
        sessions = self._read_file()
        if sessions is None:
            return

        unique = deduplicate_sessions(sessions)
        removed = len(sessions) - len(unique)
        if removed:
            logger.info("Removed %d duplicate sessions while loading history", removed)
        self._sessions = unique

    def _save(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"sessions": _sessions_adapter.dump_python(self._sessions, mode="json")}
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    # Mutations

    def add_session(self, session: QuizSession) -> bool:
        """
        Store a session unless its id is already present.

        Args:
            session: Session to persist (copied)

        Returns:
            True if stored, False for a duplicate id
        """
        self._reload()
        if any(existing.id == session.id for existing in self._sessions):
            logger.warning("Session %s already exists, skipping duplicate", session.id)
            return False
        self._sessions.append(session.model_copy(deep=True))
        self._save()
        return True

    def remove_session(self, session_id: str) -> bool:
        """Delete a session. Returns False if it was not stored."""
        self._reload()
        remaining = [s for s in self._sessions if s.id != session_id]
        removed = len(remaining) != len(self._sessions)
        self._sessions = remaining
        if removed:
            self._save()
        return removed

    def clear_all_sessions(self) -> None:
        self._sessions = []
        self._save()

    def update_session(self, session_id: str, **updates) -> QuizSession | None:
        """
        Replace fields of a stored session.

        Args:
            session_id: Session to change
            **updates: Field values to set; the id itself cannot change

        Returns:
            The updated session, or None if no session has that id

        Raises:
            ValueError: If ``updates`` tries to change the session id
        """
        if updates.get("id", session_id) != session_id:
            raise ValueError(f"Cannot change the id of session {session_id}")
        self._reload()
        for index, session in enumerate(self._sessions):
            if session.id == session_id:
                data = session.model_dump()
                data.update(updates)
                updated = QuizSession.model_validate(data)
                self._sessions[index] = updated
                self._save()
                return updated.model_copy(deep=True)
        return None

    def remove_duplicate_sessions(self) -> int:
        """
        Collapse duplicate ids in the file, keeping the later start time.

        Loading already hides duplicates; this also rewrites the file so
        they are gone from disk.

        Returns:
            Number of sessions removed
        """
        stored = self._read_file()
        if stored is None:
            stored = self._sessions
        unique = deduplicate_sessions(stored)
        removed = len(stored) - len(unique)
        self._sessions = unique
        if removed:
            logger.info("Removed %d duplicate sessions", removed)
            self._save()
        return removed

    # Queries

    @property
    def sessions(self) -> list[QuizSession]:
        """Copies of every stored session in insertion order."""
        self._reload()
        return [session.model_copy(deep=True) for session in self._sessions]

    def get_session_by_id(self, session_id: str) -> QuizSession | None:
        return next((s for s in self.sessions if s.id == session_id), None)

    def get_recent_sessions(self, limit: int) -> list[QuizSession]:
        """Most recent sessions first."""
        ordered = sorted(self.sessions, key=lambda s: s.start_time, reverse=True)
        return ordered[: max(0, limit)]

    def get_latest_completed(self, exclude_id: str | None = None) -> QuizSession | None:
        """The most recently started completed session, optionally skipping one id."""
        completed = [
            s for s in self._completed_sessions() if s.id != exclude_id
        ]
        return completed[-1] if completed else None

    def _completed_sessions(self) -> list[QuizSession]:
        completed = [s for s in self.sessions if s.status == SessionStatus.COMPLETED]
        return sorted(completed, key=lambda s: s.start_time)

    def get_statistics(self) -> QuizStatistics:
        """
        Aggregate statistics over completed sessions.

        Category averages are the mean correct count over sessions that
        scored at least one point in that category.
        """
        sessions = self._completed_sessions()
        if not sessions:
            return QuizStatistics()

        scores = [s.score for s in sessions]
        category_averages = {}
        for category in QuizCategory:
            counts = [s.category_scores[category] for s in sessions if s.category_scores[category] > 0]
            category_averages[category] = round(sum(counts) / len(counts), 2) if counts else 0.0

        return QuizStatistics(
            total_quizzes=len(sessions),
            average_score=round(sum(scores) / len(scores), 2),
            best_score=max(scores),
            category_averages=category_averages,
            improvement_trend=[s.score for s in sessions[-TREND_LENGTH:]],
            total_time_spent=sum(s.time_spent for s in sessions),
        )

    def get_category_statistics(self, category: QuizCategory) -> CategoryStatistics:
        """Statistics for one category over completed sessions that scored in it."""
        category = QuizCategory(category)
        sessions = [s for s in self._completed_sessions() if s.category_scores[category] > 0]
        if not sessions:
            return CategoryStatistics()

        scores = [s.category_scores[category] for s in sessions]
        return CategoryStatistics(
            total_attempts=len(sessions),
            average_score=round(sum(scores) / len(scores), 2),
            best_score=max(scores),
            improvement_trend=scores[-TREND_LENGTH:],
        )
