"""Spatial reasoning generator (not implemented)."""

from prepquiz.models.quiz import QuizCategory, QuizQuestion

from .base import CategoryGenerator


class SpatialQuestionGenerator(CategoryGenerator):
    """Placeholder: spatial questions need rendered figures, so none are produced."""

    category = QuizCategory.SPATIAL_REASONING
    id_prefix = "spatial"

    def generate(self, count: int) -> list[QuizQuestion]:
        return []
