"""Pydantic models for quiz data structures."""

import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator


class QuizCategory(str, Enum):
    """Question categories."""

    MATH = "math"
    SPATIAL_REASONING = "spatial_reasoning"
    VERBAL_REASONING = "verbal_reasoning"
    LOGICAL_REASONING = "logical_reasoning"

    @property
    def display_name(self) -> str:
        """Human readable category name."""
        return {
            QuizCategory.MATH: "Math",
            QuizCategory.SPATIAL_REASONING: "Spatial Reasoning",
            QuizCategory.VERBAL_REASONING: "Verbal Reasoning",
            QuizCategory.LOGICAL_REASONING: "Logical Reasoning",
        }[self]


class QuizMode(str, Enum):
    """Practice shows feedback as you go, exam runs against the clock."""

    PRACTICE = "practice"
    EXAM = "exam"


class SessionStatus(str, Enum):
    """Quiz session lifecycle. Both non-initial states are terminal."""

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ABANDONED = "abandoned"


class VerbalQuestionType(str, Enum):
    """Verbal question shapes."""

    FILL_IN_THE_BLANK = "fill_in_the_blank"
    ANTONYM = "antonym"


def empty_category_scores() -> dict[QuizCategory, int]:
    """A zeroed tally for every category."""
    return {category: 0 for category in QuizCategory}


class QuizQuestion(BaseModel):
    """A single multiple choice question. Immutable once created."""

    id: str = Field(
        default_factory=lambda: str(uuid.uuid4()),
        min_length=1,
        description="Unique identifier for the question",
    )
    category: QuizCategory = Field(..., description="Question category")
    question: str = Field(..., min_length=1, description="The question text")
    options: list[str] = Field(
        ...,
        min_length=2,
        description="Answer options in display order",
    )
    correct_answer: int = Field(
        ...,
        ge=0,
        description="Index of the correct option",
    )
    explanation: str | None = Field(
        None,
        description="Explanation of the correct answer",
    )
    vocabulary_word: str | None = Field(
        None,
        description="Source vocabulary word (verbal questions)",
    )
    context: str | None = Field(
        None,
        description="Example sentence or hint the question was built from",
    )

    @field_validator("options")
    @classmethod
    def validate_options(cls, v: list[str]) -> list[str]:
        """Ensure every option has visible text."""
        for index, value in enumerate(v):
            if not value or not value.strip():
                raise ValueError(f"Option {index} cannot be empty")
        return v

    @model_validator(mode="after")
    def validate_correct_answer(self) -> "QuizQuestion":
        """Ensure the correct answer indexes into the options."""
        if self.correct_answer >= len(self.options):
            raise ValueError(
                f"correct_answer {self.correct_answer} is out of range "
                f"for {len(self.options)} options"
            )
        return self

    @property
    def correct_option(self) -> str:
        """Text of the correct option."""
        return self.options[self.correct_answer]

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "id": "math_3f2a9c",
                "category": "math",
                "question": "If 3x + 4 = 19, what is x?",
                "options": ["4", "5", "6", "7"],
                "correct_answer": 1,
                "explanation": "3x = 19 - 4 = 15, so x = 5.",
            }
        },
    }


class QuizAnswer(BaseModel):
    """One submitted answer."""

    question_id: str = Field(..., min_length=1)
    selected_answer: int = Field(..., ge=0, description="Index of the selected option")
    is_correct: bool
    time_spent: int = Field(default=0, ge=0, description="Seconds spent on the question")


class QuizSession(BaseModel):
    """One quiz attempt."""

    id: str = Field(..., min_length=1)
    start_time: datetime = Field(default_factory=datetime.now)
    end_time: datetime | None = None
    questions: list[QuizQuestion] = Field(default_factory=list)
    answers: list[QuizAnswer] = Field(default_factory=list)
    score: int = Field(default=0, ge=0)
    total_questions: int = Field(default=0, ge=0)
    time_spent: int = Field(default=0, ge=0, description="Total seconds")
    status: SessionStatus = SessionStatus.IN_PROGRESS
    category_scores: dict[QuizCategory, int] = Field(
        default_factory=empty_category_scores
    )
    mode: QuizMode = QuizMode.PRACTICE

    @field_validator("category_scores")
    @classmethod
    def fill_category_scores(
        cls, v: dict[QuizCategory, int]
    ) -> dict[QuizCategory, int]:
        """Ensure every category has a tally."""
        scores = empty_category_scores()
        scores.update(v)
        return scores

    @property
    def is_terminal(self) -> bool:
        """True once the session is completed or abandoned."""
        return self.status != SessionStatus.IN_PROGRESS

    @property
    def correct_count(self) -> int:
        """Number of correct answers submitted so far."""
        return sum(1 for answer in self.answers if answer.is_correct)

    def question_map(self) -> dict[str, QuizQuestion]:
        """Questions keyed by id."""
        return {question.id: question for question in self.questions}


class VocabularyWord(BaseModel):
    """A vocabulary table entry."""

    word: str = Field(..., min_length=1)
    meaning: str = Field(..., min_length=1)
    example: str = Field(..., min_length=1)
    antonym: str | None = None

    model_config = {"frozen": True}


# Structured models for AI provider responses


class AIQuestionPayload(BaseModel):
    """One question object as returned by the AI provider."""

    question: str = Field(..., min_length=1)
    options: list[str] = Field(..., min_length=4, max_length=4)
    correct_answer: int = Field(
        ...,
        ge=0,
        le=3,
        strict=True,
        validation_alias="correctAnswer",
    )
    vocabulary_word: str | None = Field(None, validation_alias="vocabularyWord")
    context: str | None = None

    @field_validator("question")
    @classmethod
    def strip_question(cls, v: str) -> str:
        """Trim surrounding whitespace and reject blank text."""
        v = v.strip()
        if not v:
            raise ValueError("Question text cannot be blank")
        return v

    @field_validator("options")
    @classmethod
    def strip_options(cls, v: list[str]) -> list[str]:
        """Trim options and reject blanks or duplicates."""
        cleaned = [option.strip() for option in v]
        if any(not option for option in cleaned):
            raise ValueError("Options cannot be blank")
        if len(set(cleaned)) != len(cleaned):
            raise ValueError("Options must be distinct")
        return cleaned

    def to_question(self, category: QuizCategory, question_id: str) -> QuizQuestion:
        """Convert to a QuizQuestion in the given category."""
        verbal = category == QuizCategory.VERBAL_REASONING
        return QuizQuestion(
            id=question_id,
            category=category,
            question=self.question,
            options=self.options,
            correct_answer=self.correct_answer,
            vocabulary_word=self.vocabulary_word if verbal else None,
            context=self.context if verbal else None,
        )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "question": "What is the meaning of 'ubiquitous'?",
                "options": ["Rare", "Present everywhere", "Expensive", "Difficult"],
                "correctAnswer": 1,
                "vocabularyWord": "ubiquitous",
                "context": "Smartphones are ubiquitous in modern society.",
            }
        },
    }
