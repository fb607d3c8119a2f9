"""Tests for multiple choice option synthesis."""

import random
from decimal import Decimal

import pytest

from prepquiz.generators.options import (
    format_cents,
    format_decimal_units,
    generate_decimal_comparison_options,
    generate_dollar_options,
    generate_monetary_options,
    generate_numeric_options,
    generate_range_options,
    round_to_places,
    shuffle,
    trim_decimal,
)


class TestShuffle:
    """Test the Fisher-Yates shuffle."""

    def test_returns_permutation(self, rng: random.Random):
        """Test that shuffling keeps every element."""
        items = list(range(20))
        shuffled = shuffle(items, rng)

        assert sorted(shuffled) == items

    def test_input_untouched(self, rng: random.Random):
        """Test that the input list is not reordered."""
        items = [1, 2, 3, 4, 5]
        shuffle(items, rng)

        assert items == [1, 2, 3, 4, 5]

    def test_seeded_shuffle_is_repeatable(self):
        """Test determinism under the same seed."""
        items = list(range(10))

        assert shuffle(items, random.Random(7)) == shuffle(items, random.Random(7))


class TestFormatting:
    """Test number formatting helpers."""

    def test_format_cents(self):
        """Test cents to dollar strings."""
        assert format_cents(1234) == "$12.34"
        assert format_cents(5) == "$0.05"

    def test_trim_decimal(self):
        """Test trailing zero removal."""
        assert trim_decimal("1.500") == "1.5"
        assert trim_decimal("2.000") == "2"
        assert trim_decimal("0.000") == "0"
        assert trim_decimal("42") == "42"

    def test_format_decimal_units(self):
        """Test rendering integer thousandths."""
        assert format_decimal_units(1250, 3) == "1.25"
        assert format_decimal_units(7, 3) == "0.007"

    def test_round_half_up(self):
        """Test rounding half away from zero."""
        assert round_to_places(2.675, 2) == 2.68
        assert round_to_places(0.125, 2) == 0.13


class TestNumericOptions:
    """Test integer option sets."""

    @pytest.mark.parametrize("correct", [0, 1, 7, 42, 150, 2500])
    def test_options_distinct_and_contain_answer(self, correct: int, rng: random.Random):
        """Test that options are distinct and the index points at the answer."""
        options, index = generate_numeric_options(correct, rng=rng)

        assert len(options) == 4
        assert len(set(options)) == 4
        assert options[index] == str(correct)

    def test_distractors_are_positive(self, rng: random.Random):
        """Test that distractors are never zero or negative."""
        for _ in range(50):
            options, _ = generate_numeric_options(2, rng=rng)
            assert all(int(option) > 0 for option in options)

    def test_small_values_stay_close(self, rng: random.Random):
        """Test the +/-3 spread for single digit answers."""
        options, _ = generate_numeric_options(5, rng=rng)

        assert all(abs(int(option) - 5) <= 3 for option in options)

    def test_custom_count(self, rng: random.Random):
        """Test requesting five options."""
        options, index = generate_numeric_options(30, count=5, rng=rng)

        assert len(set(options)) == 5
        assert options[index] == "30"

    def test_count_below_two_rejected(self, rng: random.Random):
        """Test that a single option is refused."""
        with pytest.raises(ValueError):
            generate_numeric_options(3, count=1, rng=rng)


class TestMoneyOptions:
    """Test monetary option sets."""

    def test_monetary_options_formatted(self, rng: random.Random):
        """Test cents answers render as dollars."""
        options, index = generate_monetary_options(1234, rng=rng)

        assert options[index] == "$12.34"
        assert len(set(options)) == 4
        assert all(option.startswith("$") for option in options)

    def test_dollar_options_keep_cents(self, rng: random.Random):
        """Test whole-dollar perturbations keep the same cents."""
        options, index = generate_dollar_options(84.5, rng=rng)

        assert options[index] == "$84.50"
        assert all(option.endswith(".50") for option in options)
        assert len(set(options)) == 4


class TestRangeOptions:
    """Test sequence answer options."""

    def test_large_values_spread_wider(self, rng: random.Random):
        """Test the 30% spread for large answers."""
        options, index = generate_range_options(1000, rng=rng)

        assert options[index] == "1000"
        assert all(abs(int(option) - 1000) <= 300 for option in options)


class TestDecimalComparisonOptions:
    """Test smallest/largest decimal options."""

    @pytest.mark.parametrize("is_smallest", [True, False])
    def test_target_is_extreme(self, is_smallest: bool, rng: random.Random):
        """Test that the correct index points at the true min or max."""
        for _ in range(25):
            options, index = generate_decimal_comparison_options(is_smallest, rng=rng)
            values = [Decimal(option) for option in options]
            expected = min(values) if is_smallest else max(values)

            assert len(options) == 5
            assert len(set(values)) == 5
            assert values[index] == expected

    def test_no_trailing_zeros(self, rng: random.Random):
        """Test that labels have trailing zeros trimmed."""
        options, _ = generate_decimal_comparison_options(True, rng=rng)

        for option in options:
            if "." in option:
                assert not option.endswith("0")
