"""Tests for the math question generator."""

import random
import re
from decimal import Decimal

import pytest

from prepquiz.generators.math_generator import MathQuestionGenerator
from prepquiz.models.quiz import QuizCategory


@pytest.fixture
def generator(rng: random.Random) -> MathQuestionGenerator:
    return MathQuestionGenerator(rng=rng)


def kind_of(question_id: str) -> str:
    return question_id.split("_")[1]


class TestGenerate:
    """Test the category split."""

    @pytest.mark.parametrize("count", [1, 5, 10, 17, 50])
    def test_returns_requested_count(self, generator: MathQuestionGenerator, count: int):
        """Test that exactly ``count`` questions are produced."""
        questions = generator.generate(count)

        assert len(questions) == count
        assert all(q.category == QuizCategory.MATH for q in questions)

    def test_zero_count(self, generator: MathQuestionGenerator):
        """Test that zero or negative counts yield nothing."""
        assert generator.generate(0) == []
        assert generator.generate(-3) == []

    def test_split_for_ten(self, generator: MathQuestionGenerator):
        """Test 7 word problems, 2 percentage and 1 algebra question for 10."""
        kinds = [kind_of(q.id) for q in generator.generate(10)]

        assert kinds.count("word") == 7
        assert kinds.count("percentage") == 2
        assert kinds.count("algebra") == 1

    def test_every_question_has_explanation(self, generator: MathQuestionGenerator):
        """Test that explanations are always attached."""
        assert all(q.explanation for q in generator.generate(30))

    def test_ids_unique(self, generator: MathQuestionGenerator):
        """Test that ids do not repeat."""
        ids = [q.id for q in generator.generate(50)]

        assert len(set(ids)) == len(ids)

    def test_seeded_generation_is_repeatable(self):
        """Test that the same seed gives the same questions."""
        first = MathQuestionGenerator(rng=random.Random(99)).generate(12)
        second = MathQuestionGenerator(rng=random.Random(99)).generate(12)

        assert [q.model_dump() for q in first] == [q.model_dump() for q in second]


class TestWordProblems:
    """Test the word problem families."""

    def test_families_rotate(self, generator: MathQuestionGenerator):
        """Test that nine problems use nine different families."""
        questions = generator.generate_word_problems(9)
        openings = {" ".join(q.question.split()[:3]) for q in questions}

        assert len(questions) == 9
        assert len(openings) == 9

    def test_speed_answer(self, generator: MathQuestionGenerator):
        """Test that the speed problem's answer is distance / hours."""
        for _ in range(20):
            text, options, _ = generator.create_speed_question()
            distance, hours = map(int, re.findall(r"\d+", text)[:2])
            assert int(options.options[options.correct_index]) == distance // hours

    def test_average_fourth_value(self, generator: MathQuestionGenerator):
        """Test that the missing number restores the stated mean."""
        for _ in range(20):
            text, options, _ = generator.create_average_question()
            average, first, second, third = map(int, re.findall(r"\d+", text)[:4])
            fourth = int(options.options[options.correct_index])
            assert first + second + third + fourth == 4 * average
            assert fourth >= 1

    def test_mixed_sales_answer(self, generator: MathQuestionGenerator):
        """Test the two-price sales problem is solved exactly."""
        for _ in range(20):
            text, options, _ = generator.create_mixed_sales_question()
            total_drinks, cheap, expensive, total_sales = map(int, re.findall(r"\d+", text)[:4])
            cheap_count = int(options.options[options.correct_index])
            expensive_count = total_drinks - cheap_count
            assert cheap * cheap_count + expensive * expensive_count == total_sales

    def test_discount_answer(self, generator: MathQuestionGenerator):
        """Test the discounted price."""
        for _ in range(20):
            text, options, _ = generator.create_discount_question()
            original, discount = map(int, re.findall(r"\d+", text)[:2])
            answer = Decimal(options.options[options.correct_index].lstrip("$"))
            assert answer == Decimal(original) * (100 - discount) / 100

    def test_unit_price_answer(self, generator: MathQuestionGenerator):
        """Test price times quantity in cents."""
        for _ in range(20):
            text, options, _ = generator.create_unit_price_question()
            price, quantity = map(int, re.findall(r"\d+", text)[:2])
            answer = Decimal(options.options[options.correct_index].lstrip("$"))
            assert answer * 100 == price * quantity

    def test_perimeter_answer(self, generator: MathQuestionGenerator):
        """Test side = perimeter / 4."""
        text, options, _ = generator.create_perimeter_question()
        perimeter = int(re.findall(r"\d+", text)[0])

        assert int(options.options[options.correct_index]) * 4 == perimeter

    def test_percent_increase_is_exact(self, generator: MathQuestionGenerator):
        """Test the projected amount is a whole number matching the percentage."""
        for _ in range(20):
            text, options, _ = generator.create_percent_increase_question()
            first_month, increase = map(int, re.findall(r"\d+", text)[:2])
            answer = int(options.options[options.correct_index])
            assert answer * 100 == first_month * (100 + increase)


class TestPercentageAndAlgebra:
    """Test percentage and algebra questions."""

    def test_percent_of(self, generator: MathQuestionGenerator):
        """Test 'What is P% of N?' answers."""
        checked = 0
        for question in generator.generate_percentage_questions(60):
            if question.question.startswith("What is"):
                percentage, number = map(int, re.findall(r"\d+", question.question)[:2])
                assert int(question.correct_option) * 100 == percentage * number
                checked += 1
        assert checked > 0

    def test_algebra_single_variable(self, generator: MathQuestionGenerator):
        """Test that x satisfies the printed equation."""
        for question in generator.generate_algebra_questions(40):
            if "y" in question.question:
                continue
            a, b, c = map(int, re.findall(r"\d+", question.question)[:3])
            x = int(question.correct_option)
            assert a * x + b == c
