"""Data models for quiz generation, sessions and scoring."""

from .quiz import (
    AIQuestionPayload,
    QuizAnswer,
    QuizCategory,
    QuizMode,
    QuizQuestion,
    QuizSession,
    SessionStatus,
    VerbalQuestionType,
    VocabularyWord,
    empty_category_scores,
)
from .score import (
    CategoryPerformance,
    CategoryProgress,
    CategoryScore,
    CategoryStatistics,
    PerformanceLevel,
    QuizProgress,
    QuizScore,
    QuizStatistics,
    ScoreComparison,
)

__all__ = [
    "QuizCategory",
    "QuizMode",
    "SessionStatus",
    "VerbalQuestionType",
    "QuizQuestion",
    "QuizAnswer",
    "QuizSession",
    "VocabularyWord",
    "AIQuestionPayload",
    "empty_category_scores",
    "CategoryScore",
    "QuizScore",
    "QuizProgress",
    "CategoryProgress",
    "PerformanceLevel",
    "CategoryPerformance",
    "ScoreComparison",
    "QuizStatistics",
    "CategoryStatistics",
]
