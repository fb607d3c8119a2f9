"""Verbal reasoning generator built on the vocabulary table."""

import logging
import random
import re
from collections.abc import Callable, Sequence

from prepquiz.models.quiz import (
    QuizCategory,
    QuizQuestion,
    VerbalQuestionType,
    VocabularyWord,
)

from .base import CategoryGenerator
from .options import OptionSet, shuffle
from .vocabulary import VOCABULARY

logger = logging.getLogger(__name__)

BLANK = "____________"
OPTION_COUNT = 5
MAX_SEMANTIC_DISTRACTORS = 2

# Correct option used when an antonym question is built for a word with no
# recorded antonym. generate() never does this; it falls back to a
# fill-in-the-blank question instead.
ANTONYM_FALLBACK = "opposite"

ANTONYM_PROMPT = (
    "Choose the word that is most nearly OPPOSITE to the word in capital letters."
)

STOPWORDS = frozenset(
    {"the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by"}
)


def meaning_tokens(meaning: str) -> set[str]:
    """Lowercase content words of a definition."""
    return {token for token in re.findall(r"[a-z']+", meaning.lower()) if token not in STOPWORDS}


def has_similar_meaning(first: str, second: str) -> bool:
    """True when two definitions share any non-stopword token."""
    return bool(meaning_tokens(first) & meaning_tokens(second))


def blank_out(sentence: str, word: str) -> str:
    """Replace whole-word, case-insensitive occurrences of ``word`` with a blank."""
    return re.sub(rf"\b{re.escape(word)}\b", BLANK, sentence, flags=re.IGNORECASE)


class VerbalQuestionGenerator(CategoryGenerator):
    """
    Fill-in-the-blank and antonym questions.

    Each vocabulary entry is used at most once per call, so requests larger
    than the table are truncated. The table itself is never modified.
    """

    category = QuizCategory.VERBAL_REASONING
    id_prefix = "verbal"

    def __init__(
        self,
        vocabulary: Sequence[VocabularyWord] = VOCABULARY,
        rng: random.Random | None = None,
        id_factory: Callable[[str], str] | None = None,
    ):
        super().__init__(rng, id_factory)
        self.vocabulary = tuple(vocabulary)

    def generate(self, count: int) -> list[QuizQuestion]:
        if count <= 0:
            return []

        words = shuffle(self.vocabulary, self.rng)
        if count > len(words):
            logger.warning(
                "Requested %d verbal questions but only %d vocabulary words exist; truncating",
                count,
                len(words),
            )

        questions = []
        for word in words[:count]:
            question_type = (
                VerbalQuestionType.FILL_IN_THE_BLANK
                if self.rng.random() < 0.5
                else VerbalQuestionType.ANTONYM
            )
            if question_type == VerbalQuestionType.ANTONYM and word.antonym:
                questions.append(self.build_antonym_question(word))
            else:
                questions.append(self.build_fill_in_the_blank_question(word))
        return questions

    def build_fill_in_the_blank_question(self, word: VocabularyWord) -> QuizQuestion:
        """Blank the word out of its own example sentence."""
        target = word.word.lower()
        options = self.build_distractor_options(word)
        return QuizQuestion(
            id=self.new_id("blank"),
            category=self.category,
            question=blank_out(word.example, word.word),
            options=options,
            correct_answer=options.index(target),
            explanation=f"'{word.word}' means {word.meaning}.",
            vocabulary_word=word.word,
            context=word.example,
        )

    def build_antonym_question(self, word: VocabularyWord) -> QuizQuestion:
        """Ask for the opposite of the word."""
        option_set = self.build_antonym_options(word)
        answer = option_set.options[option_set.correct_index]
        return self.build_question(
            "antonym",
            f"{ANTONYM_PROMPT}\n\n{word.word.upper()}",
            option_set,
            f"{word.word.upper()} means {word.meaning}; the opposite is '{answer}'.",
            vocabulary_word=word.word,
            context=f"Antonym for {word.word}",
        )

    def build_distractor_options(self, target: VocabularyWord) -> list[str]:
        """
        Five shuffled options: the target word, related words, then random words.

        Args:
            target: Vocabulary entry being asked about

        Returns:
            Lowercase option words, target included exactly once
        """
        target_word = target.word.lower()
        options = [target_word]
        others = [entry for entry in self.vocabulary if entry.word.lower() != target_word]

        for word in self.select_semantic_distractors(target, others):
            if word not in options:
                options.append(word)

        pool = [entry.word.lower() for entry in others]
        self._fill_from_pool(options, pool)
        return shuffle(options, self.rng)

    def select_semantic_distractors(
        self, target: VocabularyWord, candidates: Sequence[VocabularyWord]
    ) -> list[str]:
        """Words whose definitions overlap the target's, at most two."""
        distractors = []
        for entry in shuffle(candidates, self.rng):
            if has_similar_meaning(target.meaning, entry.meaning):
                distractors.append(entry.word.lower())
                if len(distractors) >= MAX_SEMANTIC_DISTRACTORS:
                    break
        return distractors

    def build_antonym_options(self, target: VocabularyWord) -> OptionSet:
        """The recorded antonym (or the fallback literal) plus random words."""
        antonym = target.antonym.lower() if target.antonym else ANTONYM_FALLBACK
        options = [antonym]
        pool = [
            entry.word.lower()
            for entry in self.vocabulary
            if entry.word.lower() not in (target.word.lower(), antonym)
        ]
        self._fill_from_pool(options, pool)
        shuffled = shuffle(options, self.rng)
        return OptionSet(shuffled, shuffled.index(antonym))

    def _fill_from_pool(self, options: list[str], pool: list[str]) -> None:
        pool = list(pool)
        while len(options) < OPTION_COUNT and pool:
            word = pool.pop(self.rng.randrange(len(pool)))
            if word not in options:
                options.append(word)
