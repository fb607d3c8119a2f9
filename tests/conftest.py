"""Shared test fixtures and configuration for pytest."""

import json
import random
from datetime import datetime, timedelta

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from prepquiz.config.settings import Settings
from prepquiz.models.quiz import (
    QuizAnswer,
    QuizCategory,
    QuizMode,
    QuizQuestion,
    QuizSession,
    SessionStatus,
)

START_TIME = datetime(2024, 3, 1, 9, 0, 0)


class FixedClock:
    """Manually advanced clock for engine timing."""

    def __init__(self, start: datetime = START_TIME):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def clock() -> FixedClock:
    """Clock starting at a fixed instant."""
    return FixedClock()


@pytest.fixture
def sample_question() -> QuizQuestion:
    """Create a sample QuizQuestion for testing."""
    return QuizQuestion(
        id="math_1",
        category=QuizCategory.MATH,
        question="If 3x + 4 = 19, what is x?",
        options=["4", "5", "6", "7"],
        correct_answer=1,
        explanation="3x = 15, so x = 5",
    )


@pytest.fixture
def sample_questions() -> list[QuizQuestion]:
    """Four math questions whose correct answers are known."""
    return [
        QuizQuestion(
            id=f"math_{i}",
            category=QuizCategory.MATH,
            question=f"What is {i} + {i}?",
            options=[str(2 * i - 1), str(2 * i), str(2 * i + 1), str(2 * i + 2)],
            correct_answer=1,
            explanation=f"{i} + {i} = {2 * i}",
        )
        for i in range(1, 5)
    ]


@pytest.fixture
def mixed_questions() -> list[QuizQuestion]:
    """One question from each implemented category."""
    return [
        QuizQuestion(
            id="math_q",
            category=QuizCategory.MATH,
            question="What is 20% of 50?",
            options=["5", "10", "15", "20"],
            correct_answer=1,
        ),
        QuizQuestion(
            id="verbal_q",
            category=QuizCategory.VERBAL_REASONING,
            question="Choose the word that is most nearly OPPOSITE to UBIQUITOUS",
            options=["rare", "candid", "brief", "meek", "lucid"],
            correct_answer=0,
            vocabulary_word="ubiquitous",
        ),
        QuizQuestion(
            id="logical_q",
            category=QuizCategory.LOGICAL_REASONING,
            question="What would be the next number in the following series? 2 … 4 … 8 … 16",
            options=["24", "32", "20", "28"],
            correct_answer=1,
        ),
    ]


@pytest.fixture
def make_session():
    """Factory for finished sessions with a given score."""

    def _make(
        session_id: str,
        score: int,
        start_offset_minutes: int = 0,
        status: SessionStatus = SessionStatus.COMPLETED,
        category_scores: dict[QuizCategory, int] | None = None,
        time_spent: int = 300,
        total_questions: int = 10,
    ) -> QuizSession:
        start = START_TIME + timedelta(minutes=start_offset_minutes)
        return QuizSession(
            id=session_id,
            start_time=start,
            end_time=start + timedelta(seconds=time_spent),
            score=score,
            total_questions=total_questions,
            time_spent=time_spent,
            status=status,
            category_scores=category_scores or {QuizCategory.MATH: score},
            mode=QuizMode.PRACTICE,
        )

    return _make


@pytest.fixture
def answered_session(sample_questions: list[QuizQuestion]) -> QuizSession:
    """A completed session: 3 of 4 math questions correct in 120 seconds."""
    answers = [
        QuizAnswer(question_id=q.id, selected_answer=1 if i < 3 else 0, is_correct=i < 3, time_spent=30)
        for i, q in enumerate(sample_questions)
    ]
    return QuizSession(
        id="quiz_answered",
        start_time=START_TIME,
        end_time=START_TIME + timedelta(seconds=120),
        questions=sample_questions,
        answers=answers,
        score=3,
        total_questions=4,
        time_spent=120,
        status=SessionStatus.COMPLETED,
        category_scores={QuizCategory.MATH: 3},
    )


def ai_question_payload(count: int, with_vocabulary: bool = False) -> str:
    """JSON array in the AI wire format."""
    items = []
    for i in range(count):
        item = {
            "question": f"Generated question {i}?",
            "options": [f"opt {i}a", f"opt {i}b", f"opt {i}c", f"opt {i}d"],
            "correctAnswer": i % 4,
        }
        if with_vocabulary:
            item["vocabularyWord"] = "ubiquitous"
            item["context"] = "Smartphones are ubiquitous in modern society."
        items.append(item)
    return json.dumps(items)


@pytest.fixture
def ai_settings() -> Settings:
    """Settings with AI enabled and an Anthropic key present."""
    return Settings(
        AI_ENABLED=True,
        LLM_PROVIDER="anthropic",
        ANTHROPIC_API_KEY="test-key",
        AI_TIMEOUT_SECONDS=5,
        AI_VERBAL_TIMEOUT_SECONDS=5,
    )


@pytest.fixture
def offline_settings() -> Settings:
    """Settings with AI disabled."""
    return Settings(AI_ENABLED=False, ANTHROPIC_API_KEY=None)


@pytest.fixture
def fake_llm_factory():
    """Build a fake chat model that replies with the given strings in order."""

    def _make(*responses: str) -> FakeListChatModel:
        return FakeListChatModel(responses=list(responses))

    return _make


@pytest.fixture
def ai_payload():
    """Builder for AI wire-format responses."""
    return ai_question_payload
