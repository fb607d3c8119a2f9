"""Quiz history persistence and statistics."""

from .store import HistoryStore, deduplicate_sessions

__all__ = ["HistoryStore", "deduplicate_sessions"]
