"""Pydantic models for scores, progress and history statistics."""

from typing import Literal

from pydantic import BaseModel, Field

from .quiz import QuizCategory


class CategoryScore(BaseModel):
    """Correct/total tally for one category."""

    correct: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)
    percentage: float = Field(default=0.0, ge=0.0, le=100.0)


class QuizScore(BaseModel):
    """Score breakdown derived from a session. Never persisted."""

    total_score: int = Field(..., ge=0, description="Correct answers")
    total_questions: int = Field(..., ge=0)
    percentage: float = Field(..., ge=0.0, le=100.0, description="Correct / total")
    category_scores: dict[QuizCategory, CategoryScore]
    time_spent: int = Field(..., ge=0, description="Seconds")
    average_time_per_question: float = Field(..., ge=0.0)
    accuracy: float = Field(..., ge=0.0, le=100.0, description="Correct / answered")


class QuizProgress(BaseModel):
    """Answered-so-far snapshot."""

    current: int
    total: int
    percentage: float


class CategoryProgress(BaseModel):
    """Per-category answered/correct snapshot."""

    answered: int = 0
    total: int = 0
    correct: int = 0


class PerformanceLevel(BaseModel):
    """Overall performance band."""

    level: str
    color: str
    description: str


class CategoryPerformance(BaseModel):
    """Category performance band."""

    level: str
    color: str


class ScoreComparison(BaseModel):
    """Trend between two consecutive scores."""

    improvement: float
    trend: Literal["improving", "declining", "stable"]
    message: str


class QuizStatistics(BaseModel):
    """Aggregate over completed sessions."""

    total_quizzes: int = 0
    average_score: float = 0.0
    best_score: int = 0
    category_averages: dict[QuizCategory, float] = Field(
        default_factory=lambda: {category: 0.0 for category in QuizCategory}
    )
    improvement_trend: list[int] = Field(default_factory=list)
    total_time_spent: int = 0


class CategoryStatistics(BaseModel):
    """Aggregate over completed sessions for one category."""

    total_attempts: int = 0
    average_score: float = 0.0
    best_score: int = 0
    improvement_trend: list[int] = Field(default_factory=list)
