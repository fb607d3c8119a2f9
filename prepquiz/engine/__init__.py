"""Quiz session engine and scoring."""

from .quiz_engine import QuizEngine, generate_session_id
from .scoring import ScoringEngine

__all__ = ["QuizEngine", "ScoringEngine", "generate_session_id"]
