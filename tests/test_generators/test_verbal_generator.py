"""Tests for the verbal reasoning generator."""

import logging
import random

import pytest

from prepquiz.generators.verbal_generator import (
    ANTONYM_FALLBACK,
    BLANK,
    OPTION_COUNT,
    VerbalQuestionGenerator,
    blank_out,
    has_similar_meaning,
)
from prepquiz.generators.vocabulary import VOCABULARY
from prepquiz.models.quiz import QuizCategory, VocabularyWord


@pytest.fixture
def generator(rng: random.Random) -> VerbalQuestionGenerator:
    return VerbalQuestionGenerator(rng=rng)


def vocabulary_entry(word: str) -> VocabularyWord:
    return next(entry for entry in VOCABULARY if entry.word == word)


class TestVocabularyTable:
    """Test the bundled vocabulary."""

    def test_words_unique(self):
        """Test that no word appears twice."""
        words = [entry.word.lower() for entry in VOCABULARY]

        assert len(set(words)) == len(words)

    def test_examples_contain_their_word(self):
        """Test that every example sentence can be blanked."""
        for entry in VOCABULARY:
            assert BLANK in blank_out(entry.example, entry.word), entry.word


class TestHelpers:
    """Test text helpers."""

    def test_blank_out_is_case_insensitive(self):
        """Test blanking a capitalised occurrence."""
        assert blank_out("Candid answers help.", "candid") == f"{BLANK} answers help."

    def test_blank_out_matches_whole_words(self):
        """Test that substrings are left alone."""
        assert blank_out("The candidate was candid.", "candid") == f"The candidate was {BLANK}."

    def test_similar_meaning_ignores_stopwords(self):
        """Test that shared stopwords do not count as overlap."""
        assert has_similar_meaning("the state of being calm", "a calm manner")
        assert not has_similar_meaning("to the end", "of the start")


class TestGenerate:
    """Test verbal question generation."""

    def test_returns_requested_count(self, generator: VerbalQuestionGenerator):
        """Test the count and category."""
        questions = generator.generate(17)

        assert len(questions) == 17
        assert all(q.category == QuizCategory.VERBAL_REASONING for q in questions)

    def test_words_not_repeated(self, generator: VerbalQuestionGenerator):
        """Test that each vocabulary word is used once per call."""
        questions = generator.generate(40)
        words = [q.vocabulary_word for q in questions]

        assert len(set(words)) == len(words)

    def test_truncates_when_vocabulary_exhausted(
        self, generator: VerbalQuestionGenerator, caplog: pytest.LogCaptureFixture
    ):
        """Test that asking for more than the table holds truncates with a warning."""
        with caplog.at_level(logging.WARNING):
            questions = generator.generate(len(VOCABULARY) + 10)

        assert len(questions) == len(VOCABULARY)
        assert "truncating" in caplog.text

    def test_vocabulary_not_mutated(self, generator: VerbalQuestionGenerator):
        """Test that generation leaves the table in order."""
        before = list(VOCABULARY)
        generator.generate(20)

        assert list(VOCABULARY) == before

    def test_both_question_types_appear(self, generator: VerbalQuestionGenerator):
        """Test the coin flip produces blanks and antonyms."""
        ids = [q.id for q in generator.generate(40)]

        assert any("_blank_" in question_id for question_id in ids)
        assert any("_antonym_" in question_id for question_id in ids)

    def test_antonymless_words_get_blank_questions(self):
        """Test that a word with no antonym never becomes an antonym question."""
        vocabulary = [vocabulary_entry("emulate"), vocabulary_entry("inevitable")] + [
            entry for entry in VOCABULARY if entry.antonym
        ][:10]
        for seed in range(10):
            generator = VerbalQuestionGenerator(vocabulary, rng=random.Random(seed))
            for question in generator.generate(len(vocabulary)):
                if question.vocabulary_word in ("emulate", "inevitable"):
                    assert "_blank_" in question.id


class TestFillInTheBlank:
    """Test fill-in-the-blank questions."""

    def test_structure(self, generator: VerbalQuestionGenerator):
        """Test blank text, five distinct options and the correct index."""
        entry = vocabulary_entry("ubiquitous")
        question = generator.build_fill_in_the_blank_question(entry)

        assert BLANK in question.question
        assert "ubiquitous" not in question.question.lower()
        assert len(question.options) == OPTION_COUNT
        assert len(set(question.options)) == OPTION_COUNT
        assert question.correct_option == "ubiquitous"
        assert question.context == entry.example


class TestAntonym:
    """Test antonym questions."""

    def test_structure(self, generator: VerbalQuestionGenerator):
        """Test the prompt, options and the correct antonym."""
        entry = vocabulary_entry("ubiquitous")
        question = generator.build_antonym_question(entry)

        assert "UBIQUITOUS" in question.question
        assert question.correct_option == "rare"
        assert len(set(question.options)) == OPTION_COUNT
        assert "ubiquitous" not in question.options
        assert question.context == "Antonym for ubiquitous"

    def test_fallback_literal_for_missing_antonym(self, generator: VerbalQuestionGenerator):
        """Test that building antonym options without an antonym uses the fallback word."""
        option_set = generator.build_antonym_options(vocabulary_entry("emulate"))

        assert option_set.options[option_set.correct_index] == ANTONYM_FALLBACK
