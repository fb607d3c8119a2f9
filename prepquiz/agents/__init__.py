"""AI agents for question sourcing and vocabulary help."""

from .ai_provider import (
    AIQuestionResponse,
    QuizAIProvider,
    parse_ai_questions,
    strip_code_fences,
    validate_questions,
)
from .explainer import explain_word

__all__ = [
    "AIQuestionResponse",
    "QuizAIProvider",
    "parse_ai_questions",
    "strip_code_fences",
    "validate_questions",
    "explain_word",
]
