"""Shared plumbing for the per-category question generators."""

import random
import uuid
from abc import ABC, abstractmethod
from collections.abc import Callable

from prepquiz.models.quiz import QuizCategory, QuizQuestion

from .options import OptionSet, resolve_rng


class CategoryGenerator(ABC):
    """Produces self-contained questions for one category."""

    category: QuizCategory
    id_prefix: str

    def __init__(
        self,
        rng: random.Random | None = None,
        id_factory: Callable[[str], str] | None = None,
    ):
        self.rng = resolve_rng(rng)
        self.id_factory = id_factory

    @abstractmethod
    def generate(self, count: int) -> list[QuizQuestion]:
        """
        Generate up to ``count`` questions.

        Args:
            count: Number of questions requested

        Returns:
            List of questions, empty when ``count`` <= 0
        """

    def new_id(self, kind: str) -> str:
        """
        Unique question id, reproducible under a seeded rng.

        An ``id_factory`` receives ``{prefix}_{kind}`` and returns the id instead.
        """
        if self.id_factory is not None:
            return self.id_factory(f"{self.id_prefix}_{kind}")
        token = uuid.UUID(int=self.rng.getrandbits(128), version=4).hex[:12]
        return f"{self.id_prefix}_{kind}_{token}"

    def build_question(
        self,
        kind: str,
        text: str,
        option_set: OptionSet,
        explanation: str | None = None,
        **extra,
    ) -> QuizQuestion:
        """Wrap generated text and options in a QuizQuestion."""
        return QuizQuestion(
            id=self.new_id(kind),
            category=self.category,
            question=text,
            options=option_set.options,
            correct_answer=option_set.correct_index,
            explanation=explanation,
            **extra,
        )
