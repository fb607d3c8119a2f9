"""Procedural question generators."""

from .logical_generator import LogicalQuestionGenerator
from .math_generator import MathQuestionGenerator
from .options import (
    OptionSet,
    generate_decimal_comparison_options,
    generate_dollar_options,
    generate_monetary_options,
    generate_numeric_options,
    generate_range_options,
    shuffle,
)
from .question_generator import (
    allocate_question_counts,
    enabled_categories,
    generate_quiz_questions,
)
from .spatial_generator import SpatialQuestionGenerator
from .verbal_generator import VerbalQuestionGenerator
from .vocabulary import VOCABULARY

__all__ = [
    "OptionSet",
    "shuffle",
    "generate_numeric_options",
    "generate_monetary_options",
    "generate_dollar_options",
    "generate_range_options",
    "generate_decimal_comparison_options",
    "MathQuestionGenerator",
    "VerbalQuestionGenerator",
    "LogicalQuestionGenerator",
    "SpatialQuestionGenerator",
    "VOCABULARY",
    "allocate_question_counts",
    "enabled_categories",
    "generate_quiz_questions",
]
