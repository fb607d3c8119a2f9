"""Builds a full quiz question list from per-category generators."""

import logging
import random
from collections.abc import Iterable

from prepquiz.models.quiz import QuizCategory, QuizQuestion

from .base import CategoryGenerator
from .logical_generator import LogicalQuestionGenerator
from .math_generator import MathQuestionGenerator
from .options import resolve_rng, shuffle
from .spatial_generator import SpatialQuestionGenerator
from .verbal_generator import VerbalQuestionGenerator

logger = logging.getLogger(__name__)

DEFAULT_TOTAL_QUESTIONS = 50

GENERATORS: dict[QuizCategory, type[CategoryGenerator]] = {
    QuizCategory.MATH: MathQuestionGenerator,
    QuizCategory.VERBAL_REASONING: VerbalQuestionGenerator,
    QuizCategory.LOGICAL_REASONING: LogicalQuestionGenerator,
    QuizCategory.SPATIAL_REASONING: SpatialQuestionGenerator,
}

# categories that actually produce questions
IMPLEMENTED_CATEGORIES = frozenset(
    {QuizCategory.MATH, QuizCategory.VERBAL_REASONING, QuizCategory.LOGICAL_REASONING}
)


def enabled_categories(categories: Iterable[QuizCategory]) -> list[QuizCategory]:
    """Requested categories with an implementation, de-duplicated, in input order."""
    enabled: list[QuizCategory] = []
    for category in categories:
        category = QuizCategory(category)
        if category in IMPLEMENTED_CATEGORIES and category not in enabled:
            enabled.append(category)
    return enabled


def allocate_question_counts(
    categories: Iterable[QuizCategory], total_count: int = DEFAULT_TOTAL_QUESTIONS
) -> dict[QuizCategory, int]:
    """
    Split ``total_count`` across the enabled categories.

    Each category gets the floor share; the remainder goes one question each
    to the first categories in input order (50 over three -> 17, 17, 16).

    Args:
        categories: Requested categories
        total_count: Total number of questions

    Returns:
        Ordered mapping of category to question count
    """
    enabled = enabled_categories(categories)
    if not enabled or total_count <= 0:
        return {category: 0 for category in enabled}

    per_category, remainder = divmod(total_count, len(enabled))
    return {
        category: per_category + (1 if index < remainder else 0)
        for index, category in enumerate(enabled)
    }


def generate_category_questions(
    category: QuizCategory, count: int, rng: random.Random | None = None
) -> list[QuizQuestion]:
    """Run the generator for one category."""
    generator = GENERATORS[QuizCategory(category)](rng=rng)
    return generator.generate(count)


def generate_quiz_questions(
    categories: Iterable[QuizCategory],
    total_count: int = DEFAULT_TOTAL_QUESTIONS,
    rng: random.Random | None = None,
) -> list[QuizQuestion]:
    """
    Generate a shuffled question list for a quiz session.

    Categories without an implementation (spatial) are skipped, so asking
    only for those yields an empty list.

    Args:
        categories: Requested categories
        total_count: Total number of questions
        rng: Random source shared by every generator

    Returns:
        Questions from all categories in random order
    """
    rng = resolve_rng(rng)
    allocation = allocate_question_counts(categories, total_count)

    questions: list[QuizQuestion] = []
    for category, count in allocation.items():
        generated = generate_category_questions(category, count, rng)
        if len(generated) < count:
            logger.warning(
                "Generator for %s produced %d of %d questions",
                category.value,
                len(generated),
                count,
            )
        questions.extend(generated)

    return shuffle(questions, rng)
