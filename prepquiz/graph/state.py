"""State carried through the question sourcing graph."""

from typing import Literal, TypedDict

from prepquiz.models.quiz import QuizCategory, QuizQuestion

QuestionSource = Literal["ai", "local"]


class SourcingState(TypedDict):
    """Values shared between the sourcing nodes."""

    categories: list[QuizCategory]
    total_count: int
    use_ai: bool

    questions: list[QuizQuestion]
    source: QuestionSource | None
    errors: list[str]


def create_initial_state(
    categories: list[QuizCategory], total_count: int, use_ai: bool = False
) -> SourcingState:
    """
    Create the starting state for one sourcing run.

    Args:
        categories: Requested categories
        total_count: Total number of questions
        use_ai: Whether the AI node should call the provider

    Returns:
        SourcingState with no questions yet
    """
    return SourcingState(
        categories=[QuizCategory(category) for category in categories],
        total_count=total_count,
        use_ai=use_ai,
        questions=[],
        source=None,
        errors=[],
    )
