"""Logical reasoning generator: sequences, syllogisms and text comparison."""

import string
from collections.abc import Callable

from prepquiz.models.quiz import QuizCategory, QuizQuestion

from .base import CategoryGenerator
from .options import OptionSet, generate_range_options, shuffle

STATEMENT_OPTIONS = ["True", "False", "Uncertain"]

STATEMENT_PROMPT = (
    "Assume the first two statements are true. Is the final statement: "
    "1) True, 2) False, or 3) Uncertain based on the information provided?"
)
LETTER_PROMPT = "What would be the next group of letters in the following series?"
NUMBER_PROMPT = "What would be the next number in the following series?"
COMPARISON_PROMPT = (
    "How many of the five items in the left hand column are exactly the same "
    "as the corresponding entry in the right hand column?"
)
SEPARATOR = " … "

NAMES = [
    "Susan", "Lisa", "Jean", "John", "Mary", "Tom",
    "Priya", "Omar", "Elena", "Kenji", "Grace", "Diego",
]

# (comparative, inverse comparative)
COMPARATIVES = [
    ("taller", "shorter"),
    ("older", "younger"),
    ("faster", "slower"),
    ("heavier", "lighter"),
    ("richer", "poorer"),
]

# (antecedent, consequent, negated antecedent, negated consequent)
CONDITIONALS = [
    ("it rains", "the ground gets wet", "it does not rain", "the ground does not get wet"),
    ("the alarm rings", "the guard wakes up",
     "the alarm does not ring", "the guard does not wake up"),
    ("the store is open", "the lights are on",
     "the store is not open", "the lights are not on"),
    ("the train is late", "the meeting starts late",
     "the train is not late", "the meeting does not start late"),
    ("the oven is hot", "the bread bakes", "the oven is not hot", "the bread does not bake"),
]

# (plural group, singular member phrase, plural property, singular property, negated singular)
UNIVERSALS = [
    ("managers", "a manager", "have a parking permit",
     "has a parking permit", "does not have a parking permit"),
    ("pilots", "a pilot", "wear a uniform", "wears a uniform", "does not wear a uniform"),
    ("members", "a member", "receive a newsletter",
     "receives a newsletter", "does not receive a newsletter"),
    ("nurses", "a nurse", "work night shifts", "works night shifts", "does not work night shifts"),
]

COMPANIES = [
    "Acme Cement Co.", "Evans Industrial, Inc.", "Williams & Petersen",
    "Deloitte, Stephens and Sons", "Carter Plastics Co", "Smith & Associates",
    "Johnson Manufacturing Co.", "Brown Industries, Inc.", "Davis Construction Ltd.",
    "Wilson Technology Group", "Harper Logistics Corp.", "Nguyen & Partners",
    "Redwood Financial Services", "Baxter Steel Works", "Marlowe Textiles Ltd.",
    "Franklin Paper Supply", "Oakridge Dental Group", "Summit Roofing, Inc.",
]

# single-edit substitutions that keep a name plausible
ABBREVIATIONS = [
    ("Co.", "Comp."), ("Inc.", "Inc"), ("Ltd.", "Limited"), ("Corp.", "Co."),
    (" & ", " and "), (" and ", " & "), ("Associates", "Associate"),
    ("Industries", "Industrial"), ("Industrial", "Industries"),
    ("Group", "Grp."), ("Technology", "Technologies"), ("Services", "Service"),
]
VOWEL_SWAPS = {"a": "e", "e": "a", "i": "y", "o": "a", "u": "o"}


def shift_letter(letter: str, offset: int) -> str:
    """Shift a lowercase letter, wrapping z -> a."""
    return string.ascii_lowercase[(string.ascii_lowercase.index(letter) + offset) % 26]


def letter_block(start: int, length: int = 4) -> str:
    """Consecutive letters beginning at alphabet index ``start``."""
    return "".join(shift_letter("a", start + i) for i in range(length))


class LogicalQuestionGenerator(CategoryGenerator):
    """
    Generates logical reasoning questions.

    The count is split evenly across letter sequences, number sequences,
    logical statements and text comparisons; any remainder goes to the
    families in that order.
    """

    category = QuizCategory.LOGICAL_REASONING
    id_prefix = "logical"

    def generate(self, count: int) -> list[QuizQuestion]:
        if count <= 0:
            return []

        families: list[tuple[str, Callable[[], tuple[str, OptionSet, str]]]] = [
            ("letter", self.create_letter_sequence),
            ("number", self.create_number_sequence),
            ("statement", self.create_logical_statement),
            ("text", self.create_text_comparison),
        ]
        base, remainder = divmod(count, len(families))

        questions = []
        for index, (kind, create) in enumerate(families):
            family_count = base + (1 if index < remainder else 0)
            for _ in range(family_count):
                text, options, explanation = create()
                questions.append(self.build_question(kind, text, options, explanation))

        return shuffle(questions, self.rng)

    # Letter sequences

    def create_letter_sequence(self) -> tuple[str, OptionSet, str]:
        """Either a sliding block or a per-position progression."""
        if self.rng.random() < 0.5:
            return self._sliding_block_sequence()
        return self._positional_sequence()

    def _sliding_block_sequence(self) -> tuple[str, OptionSet, str]:
        start = self.rng.randint(0, 25)
        step = self.rng.randint(1, 3)
        shown = [letter_block(start + i * step) for i in range(4)]
        next_start = start + 4 * step
        answer = letter_block(next_start)
        options = [letter_block(next_start + offset) for offset in (0, -1, 1, 2)]
        shuffled = shuffle(options, self.rng)
        text = f"{LETTER_PROMPT}\n\n{SEPARATOR.join(shown)}"
        explanation = f"Each group starts {step} letter(s) after the previous one, so the next is {answer}."
        return text, OptionSet(shuffled, shuffled.index(answer)), explanation

    def _positional_sequence(self) -> tuple[str, OptionSet, str]:
        starts = [self.rng.randint(0, 25) for _ in range(4)]
        steps = [self.rng.choice([-1, 0, 1, 2]) for _ in range(4)]

        def group(n: int) -> str:
            return "".join(shift_letter("a", s + n * d) for s, d in zip(starts, steps))

        shown = [group(n) for n in range(4)]
        answer = group(4)

        options = [answer]
        position = 0
        while len(options) < 4:
            for offset in (1, -1):
                letters = list(answer)
                letters[position % 4] = shift_letter(letters[position % 4], offset)
                candidate = "".join(letters)
                if candidate not in options and len(options) < 4:
                    options.append(candidate)
            position += 1

        shuffled = shuffle(options, self.rng)
        text = f"{LETTER_PROMPT}\n\n{SEPARATOR.join(shown)}"
        explanation = (
            "Each letter position moves by its own fixed step "
            f"({', '.join(f'{d:+d}' for d in steps)}), giving {answer}."
        )
        return text, OptionSet(shuffled, shuffled.index(answer)), explanation

    # Number sequences

    def create_number_sequence(self) -> tuple[str, OptionSet, str]:
        """One of five sequence families, chosen at random."""
        family = self.rng.choice(
            [
                self._arithmetic_sequence,
                self._geometric_sequence,
                self._quadratic_sequence,
                self._fibonacci_sequence,
                self._power_sequence,
            ]
        )
        shown, answer, rule = family()
        text = f"{NUMBER_PROMPT}\n\n{SEPARATOR.join(str(n) for n in shown)}{SEPARATOR.rstrip()}"
        return text, generate_range_options(answer, rng=self.rng), rule

    def _arithmetic_sequence(self) -> tuple[list[int], int, str]:
        start = self.rng.randint(1, 20)
        difference = self.rng.randint(1, 10)
        shown = [start + i * difference for i in range(5)]
        return shown, start + 5 * difference, f"Add {difference} each time."

    def _geometric_sequence(self) -> tuple[list[int], int, str]:
        start = self.rng.randint(2, 6)
        ratio = self.rng.randint(2, 4)
        shown = [start * ratio**i for i in range(5)]
        return shown, start * ratio**5, f"Multiply by {ratio} each time."

    def _quadratic_sequence(self) -> tuple[list[int], int, str]:
        a = self.rng.randint(1, 2)
        b = self.rng.randint(-5, 4)
        c = self.rng.randint(1, 10)

        def term(n: int) -> int:
            return a * n * n + b * n + c

        shown = [term(n) for n in range(1, 6)]
        return shown, term(6), "The differences between terms grow by a constant amount."

    def _fibonacci_sequence(self) -> tuple[list[int], int, str]:
        shown = [self.rng.randint(1, 5), self.rng.randint(1, 5)]
        while len(shown) < 5:
            shown.append(shown[-1] + shown[-2])
        return shown, shown[-1] + shown[-2], "Each term is the sum of the two before it."

    def _power_sequence(self) -> tuple[list[int], int, str]:
        base = self.rng.randint(2, 4)
        shown = [base**n for n in range(1, 6)]
        return shown, base**6, f"Successive powers of {base}."

    # Logical statements

    def create_logical_statement(self) -> tuple[str, OptionSet, str]:
        """A three-line syllogism whose label follows from its premises."""
        shape = self.rng.choice(
            [
                self._chain_true,
                self._chain_false,
                self._chain_uncertain,
                self._modus_ponens,
                self._affirming_consequent,
                self._modus_tollens,
                self._denying_antecedent,
                self._universal_true,
                self._universal_false,
            ]
        )
        lines, label, explanation = shape()
        text = f"{STATEMENT_PROMPT}\n\n" + "\n".join(lines)
        return text, OptionSet(list(STATEMENT_OPTIONS), STATEMENT_OPTIONS.index(label)), explanation

    def _three_names(self) -> list[str]:
        return self.rng.sample(NAMES, 3)

    def _chain_true(self) -> tuple[list[str], str, str]:
        a, b, c = self._three_names()
        more, less = self.rng.choice(COMPARATIVES)
        if self.rng.random() < 0.5:
            conclusion = f"{a} is {more} than {c}."
        else:
            conclusion = f"{c} is {less} than {a}."
        lines = [f"{a} is {more} than {b}.", f"{b} is {more} than {c}.", conclusion]
        return lines, "True", f"{a} > {b} > {c}, so {a} is {more} than {c}."

    def _chain_false(self) -> tuple[list[str], str, str]:
        a, b, c = self._three_names()
        more, less = self.rng.choice(COMPARATIVES)
        lines = [
            f"{a} is {more} than {b}.",
            f"{c} is {less} than {b}.",
            f"{c} is {more} than {a}.",
        ]
        return lines, "False", f"{a} > {b} > {c}, so {c} cannot be {more} than {a}."

    def _chain_uncertain(self) -> tuple[list[str], str, str]:
        a, b, c = self._three_names()
        more, less = self.rng.choice(COMPARATIVES)
        lines = [
            f"{a} is {more} than {b}.",
            f"{b} is {less} than {c}.",
            f"{c} is {more} than {a}.",
        ]
        return lines, "Uncertain", f"Both {a} and {c} are {more} than {b}; their order is unknown."

    def _conditional(self) -> tuple[str, str, str, str]:
        return self.rng.choice(CONDITIONALS)

    def _modus_ponens(self) -> tuple[list[str], str, str]:
        p, q, _, _ = self._conditional()
        lines = [f"If {p}, {q}.", f"{p.capitalize()}.", f"{q.capitalize()}."]
        return lines, "True", "The condition holds, so its consequence follows."

    def _affirming_consequent(self) -> tuple[list[str], str, str]:
        p, q, _, _ = self._conditional()
        lines = [f"If {p}, {q}.", f"{q.capitalize()}.", f"{p.capitalize()}."]
        return lines, "Uncertain", "The consequence could have another cause."

    def _modus_tollens(self) -> tuple[list[str], str, str]:
        p, q, not_p, not_q = self._conditional()
        if self.rng.random() < 0.5:
            lines = [f"If {p}, {q}.", f"{not_q.capitalize()}.", f"{not_p.capitalize()}."]
            label = "True"
        else:
            lines = [f"If {p}, {q}.", f"{not_q.capitalize()}.", f"{p.capitalize()}."]
            label = "False"
        return lines, label, "If the consequence fails, the condition cannot have held."

    def _denying_antecedent(self) -> tuple[list[str], str, str]:
        p, q, not_p, not_q = self._conditional()
        lines = [f"If {p}, {q}.", f"{not_p.capitalize()}.", f"{not_q.capitalize()}."]
        return lines, "Uncertain", "The consequence could still happen for another reason."

    def _universal_true(self) -> tuple[list[str], str, str]:
        group, member, plural, singular, _ = self.rng.choice(UNIVERSALS)
        name = self.rng.choice(NAMES)
        lines = [f"All {group} {plural}.", f"{name} is {member}.", f"{name} {singular}."]
        return lines, "True", f"{name} belongs to a group where everyone {singular}."

    def _universal_false(self) -> tuple[list[str], str, str]:
        group, member, plural, _, negated = self.rng.choice(UNIVERSALS)
        name = self.rng.choice(NAMES)
        lines = [f"All {group} {plural}.", f"{name} is {member}.", f"{name} {negated}."]
        return lines, "False", f"Every one of the {group} {plural}, {name} included."

    # Text comparison

    def create_text_comparison(self) -> tuple[str, OptionSet, str]:
        """Five name pairs; the answer is the computed number of exact matches."""
        names = self.rng.sample(COMPANIES, 5)
        same_count = self.rng.randint(0, 5)
        identical = set(self.rng.sample(range(5), same_count))

        pairs = [
            (name, name if index in identical else self.alter_name(name))
            for index, name in enumerate(names)
        ]
        rows = [f"{left.ljust(34)}{right}" for left, right in pairs]
        answer = sum(1 for left, right in pairs if left == right)

        first = self.rng.randint(max(0, answer - 3), min(answer, 2))
        options = [str(n) for n in range(first, first + 4)]
        text = f"{COMPARISON_PROMPT}\n\n" + "\n".join(rows)
        explanation = f"{answer} of the five pairs match character for character."
        return text, OptionSet(options, options.index(str(answer))), explanation

    def alter_name(self, name: str) -> str:
        """Apply one small edit that always changes the name."""
        edits = [self._abbreviation_edit, self._vowel_edit, self._transpose_edit]
        for edit in shuffle(edits, self.rng):
            altered = edit(name)
            if altered != name:
                return altered
        return name + "s"

    def _abbreviation_edit(self, name: str) -> str:
        for old, new in shuffle(ABBREVIATIONS, self.rng):
            if old in name:
                return name.replace(old, new, 1)
        return name

    def _vowel_edit(self, name: str) -> str:
        positions = [i for i, ch in enumerate(name) if i > 0 and ch in VOWEL_SWAPS]
        if not positions:
            return name
        i = self.rng.choice(positions)
        return name[:i] + VOWEL_SWAPS[name[i]] + name[i + 1:]

    def _transpose_edit(self, name: str) -> str:
        positions = [
            i for i in range(1, len(name) - 1)
            if name[i].isalpha() and name[i + 1].isalpha() and name[i] != name[i + 1]
        ]
        if not positions:
            return name
        i = self.rng.choice(positions)
        return name[:i] + name[i + 1] + name[i] + name[i + 2:]
