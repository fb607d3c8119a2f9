"""Multiple choice option synthesis and shared random helpers.

Every function takes an optional ``rng`` (a ``random.Random``) so callers can
seed generation. The synthesizers all return an :class:`OptionSet`: the
shuffled option labels plus the index of the correct one, found by exact
string match on the correct value's label.
"""

import random
from collections.abc import Callable, Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import NamedTuple, TypeVar

T = TypeVar("T")

MAX_ATTEMPTS = 100


class OptionSet(NamedTuple):
    """Shuffled option labels and the index of the correct one."""

    options: list[str]
    correct_index: int


def resolve_rng(rng: random.Random | None) -> random.Random:
    """Return ``rng`` or a fresh unseeded generator."""
    return rng if rng is not None else random.Random()


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """
    Fisher-Yates shuffle of a copy of ``items``.

    Args:
        items: Items to shuffle (left untouched)
        rng: Random source

    Returns:
        New list in random order
    """
    rng = resolve_rng(rng)
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def random_int(low: int, high: int, rng: random.Random | None = None) -> int:
    """Random integer in ``[low, high]``."""
    return resolve_rng(rng).randint(low, high)


def random_float(low: float, high: float, rng: random.Random | None = None) -> float:
    """Random float in ``[low, high)``."""
    return resolve_rng(rng).random() * (high - low) + low


def round_to_places(num: float, places: int) -> float:
    """Round half up to ``places`` decimals."""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(num)).quantize(quantum, rounding=ROUND_HALF_UP))


def format_cents(cents: int) -> str:
    """``1234`` -> ``$12.34``."""
    sign = "-" if cents < 0 else ""
    dollars, remainder = divmod(abs(cents), 100)
    return f"{sign}${dollars}.{remainder:02d}"


def format_dollars(dollars: float) -> str:
    """``12.5`` -> ``$12.50``."""
    return f"${dollars:.2f}"


def trim_decimal(text: str) -> str:
    """Drop trailing zeros (and a bare point) from a decimal string."""
    if "." not in text:
        return text
    return text.rstrip("0").rstrip(".") or "0"


def format_decimal_units(units: int, places: int) -> str:
    """Render an integer count of ``10**-places`` units, trailing zeros trimmed."""
    whole, fraction = divmod(units, 10**places)
    return trim_decimal(f"{whole}.{fraction:0{places}d}")


def _numeric_spread(value: float) -> int:
    if value < 10:
        return 3
    if value < 100:
        return 10
    return 20


def _cents_spread(cents: float) -> int:
    if cents < 100:
        return 10
    if cents < 500:
        return 25
    return 50


def _dollar_spread(dollars: float) -> int:
    if dollars < 10:
        return 2
    if dollars < 50:
        return 5
    return 10


def _synthesize(
    correct: float,
    count: int,
    rng: random.Random,
    spread: int,
    step: float,
    formatter: Callable[[float], str],
) -> OptionSet:
    if count < 2:
        raise ValueError(f"Need at least 2 options, got {count}")

    target = formatter(correct)
    options = [target]

    attempts = 0
    while len(options) < count and attempts < MAX_ATTEMPTS:
        attempts += 1
        candidate = correct + rng.randint(-spread, spread)
        label = formatter(candidate)
        if candidate > 0 and label != target and label not in options:
            options.append(label)

    # deterministic filler above the correct value, always distinct
    offset = step
    while len(options) < count:
        label = formatter(correct + offset)
        if label not in options:
            options.append(label)
        offset += step

    shuffled = shuffle(options, rng)
    return OptionSet(shuffled, shuffled.index(target))


def generate_numeric_options(
    correct_answer: int, count: int = 4, rng: random.Random | None = None
) -> OptionSet:
    """
    Integer options around ``correct_answer``.

    Perturbation is +/-3 below 10, +/-10 below 100 and +/-20 otherwise.

    Args:
        correct_answer: The correct integer
        count: Number of options to return
        rng: Random source

    Returns:
        OptionSet with ``count`` distinct labels
    """
    return _synthesize(
        correct_answer,
        count,
        resolve_rng(rng),
        _numeric_spread(correct_answer),
        1,
        lambda value: str(int(value)),
    )


def generate_monetary_options(
    correct_cents: int, count: int = 4, rng: random.Random | None = None
) -> OptionSet:
    """
    ``$X.XX`` options for an amount given in cents.

    Args:
        correct_cents: The correct amount in cents
        count: Number of options to return
        rng: Random source

    Returns:
        OptionSet with ``count`` distinct labels
    """
    return _synthesize(
        correct_cents,
        count,
        resolve_rng(rng),
        _cents_spread(correct_cents),
        10,
        lambda value: format_cents(int(value)),
    )


def generate_dollar_options(
    correct_dollars: float, count: int = 4, rng: random.Random | None = None
) -> OptionSet:
    """
    ``$X.XX`` options for an amount given in dollars.

    Perturbations are whole dollars so the cents of every distractor match
    the correct answer.
    """
    return _synthesize(
        correct_dollars,
        count,
        resolve_rng(rng),
        _dollar_spread(correct_dollars),
        2,
        format_dollars,
    )


def generate_range_options(
    correct_answer: int, count: int = 4, rng: random.Random | None = None
) -> OptionSet:
    """Integer options spread over 30% of the answer's magnitude (at least 5)."""
    spread = max(5, int(abs(correct_answer) * 0.3))
    return _synthesize(
        correct_answer,
        count,
        resolve_rng(rng),
        spread,
        1,
        lambda value: str(int(value)),
    )


def generate_decimal_comparison_options(
    is_smallest: bool,
    count: int = 5,
    max_value: int = 3,
    decimal_places: int = 3,
    rng: random.Random | None = None,
) -> OptionSet:
    """
    Options for "which is the smallest/largest value" questions.

    Draws ``count`` distinct decimals with ``decimal_places`` digits between
    0 and ``max_value``, trims trailing zeros and points at the true minimum
    (or maximum).

    Args:
        is_smallest: Target the minimum when True, the maximum otherwise
        count: Number of options
        max_value: Largest whole part
        decimal_places: Fixed precision before trimming
        rng: Random source

    Returns:
        OptionSet whose correct index is the extreme value
    """
    if count < 2:
        raise ValueError(f"Need at least 2 options, got {count}")
    rng = resolve_rng(rng)
    scale = 10**decimal_places
    upper = (max_value + 1) * scale - 1

    values: list[int] = []
    attempts = 0
    while len(values) < count and attempts < MAX_ATTEMPTS:
        attempts += 1
        value = rng.randint(0, upper)
        if value not in values:
            values.append(value)

    filler = 0
    while len(values) < count:
        if filler not in values:
            values.append(filler)
        filler += scale // 4 or 1

    target = min(values) if is_smallest else max(values)
    labels = [format_decimal_units(value, decimal_places) for value in values]
    shuffled = shuffle(labels, rng)
    return OptionSet(shuffled, shuffled.index(format_decimal_units(target, decimal_places)))
