"""Math question generator: word problems, percentages and algebra."""

from collections.abc import Callable

from prepquiz.models.quiz import QuizCategory, QuizQuestion

from .base import CategoryGenerator
from .options import (
    OptionSet,
    format_cents,
    format_dollars,
    generate_decimal_comparison_options,
    generate_dollar_options,
    generate_monetary_options,
    generate_numeric_options,
    shuffle,
)

# (question text, options, explanation)
Problem = tuple[str, OptionSet, str]


class MathQuestionGenerator(CategoryGenerator):
    """
    Generates math questions.

    The requested count is split 70/20/10 between word problems, percentage
    problems and algebra; word problems absorb the rounding remainder. Every
    template picks its numbers so the stated unknown is an exact value.
    """

    category = QuizCategory.MATH
    id_prefix = "math"

    def generate(self, count: int) -> list[QuizQuestion]:
        if count <= 0:
            return []

        percentages = count * 20 // 100
        algebra = count * 10 // 100
        word_problems = count - percentages - algebra

        questions: list[QuizQuestion] = []
        questions.extend(self.generate_word_problems(word_problems))
        questions.extend(self.generate_percentage_questions(percentages))
        questions.extend(self.generate_algebra_questions(algebra))

        return shuffle(questions, self.rng)[:count]

    @property
    def word_problem_templates(self) -> list[Callable[[], Problem]]:
        """Word problem families, used in rotation."""
        return [
            self.create_unit_price_question,
            self.create_discount_question,
            self.create_average_question,
            self.create_mixed_sales_question,
            self.create_percent_increase_question,
            self.create_speed_question,
            self.create_decimal_comparison_question,
            self.create_perimeter_question,
            self.create_unit_rate_question,
        ]

    def generate_word_problems(self, count: int) -> list[QuizQuestion]:
        """Cycle through the word problem families so each gets even coverage."""
        templates = self.word_problem_templates
        questions = []
        for i in range(count):
            text, options, explanation = templates[i % len(templates)]()
            questions.append(self.build_question("word", text, options, explanation))
        return questions

    def generate_percentage_questions(self, count: int) -> list[QuizQuestion]:
        """Percent-of, reverse percent and percent change questions."""
        rng = self.rng
        questions = []
        for _ in range(count):
            roll = rng.random()
            if roll < 0.4:
                # "X is Y% of what number?"; whole multiple of 20 keeps X exact
                percentage = rng.randint(1, 5) * 5
                whole = rng.randint(5, 60) * 20
                part = whole * percentage // 100
                text = f"{part} is {percentage}% of what number?"
                options = generate_numeric_options(whole, rng=rng)
                explanation = f"{part} ÷ {percentage}% = {part} × 100 ÷ {percentage} = {whole}"
            elif roll < 0.7:
                percentage = rng.randint(2, 8) * 5
                number = rng.randint(3, 12) * 20
                result = number * percentage // 100
                text = f"What is {percentage}% of {number}?"
                options = generate_numeric_options(result, rng=rng)
                explanation = f"{number} × {percentage} ÷ 100 = {result}"
            else:
                is_increase = rng.random() < 0.5
                percentage = rng.randint(2, 7) * 5
                start = rng.randint(5, 55) * 20
                change = start * percentage // 100
                result = start + change if is_increase else start - change
                direction = "increases" if is_increase else "decreases"
                text = (
                    f"A number starts at {start}. It {direction} by {percentage}%. "
                    "What is the new value?"
                )
                options = generate_numeric_options(result, rng=rng)
                sign = "+" if is_increase else "-"
                explanation = f"{percentage}% of {start} is {change}; {start} {sign} {change} = {result}"

            questions.append(self.build_question("percentage", text, options, explanation))
        return questions

    def generate_algebra_questions(self, count: int) -> list[QuizQuestion]:
        """Linear equations in one and two variables."""
        rng = self.rng
        questions = []
        for _ in range(count):
            if rng.random() < 0.5:
                x = rng.randint(1, 20)
                a = rng.randint(2, 6)
                b = rng.randint(1, 20)
                c = a * x + b
                text = f"If {a}x + {b} = {c}, what is x?"
                options = generate_numeric_options(x, rng=rng)
                explanation = f"{a}x = {c} - {b} = {c - b}, so x = {x}"
            else:
                x = rng.randint(1, 10)
                y = rng.randint(1, 10)
                a = rng.randint(2, 4)
                b = rng.randint(2, 4)
                c = a * x + b * y
                text = f"If {a}x + {b}y = {c}, and x = {x}, what is y?"
                options = generate_numeric_options(y, rng=rng)
                explanation = f"{b}y = {c} - {a * x} = {b * y}, so y = {y}"

            questions.append(self.build_question("algebra", text, options, explanation))
        return questions

    # Word problem families

    def create_unit_price_question(self) -> Problem:
        """Cost of several items priced in cents."""
        price = self.rng.randint(25, 74)
        quantity = self.rng.randint(3, 10)
        total = price * quantity
        text = (
            f"A magazine sells for {price} cents. "
            f"How much will it cost to buy {quantity} magazines?"
        )
        explanation = f"{quantity} × {price}¢ = {total}¢ = {format_cents(total)}"
        return text, generate_monetary_options(total, rng=self.rng), explanation

    def create_discount_question(self) -> Problem:
        """Sale price after a percentage discount."""
        original = self.rng.randint(0, 39) * 10 + 100
        discount = self.rng.randint(4, 10) * 5
        discounted_cents = original * (100 - discount)
        discounted = discounted_cents / 100
        text = (
            f"If a couch regularly sells for ${original} and is being sold at a "
            f"{discount}% discount, what is the discounted price?"
        )
        explanation = (
            f"${original} × (100% - {discount}%) = {format_dollars(discounted)}"
        )
        return text, generate_dollar_options(discounted, rng=self.rng), explanation

    def create_average_question(self) -> Problem:
        """Back-solve the missing value from a stated mean."""
        first = self.rng.randint(1, 20)
        second = self.rng.randint(1, 30)
        third = self.rng.randint(1, 25)
        known = first + second + third
        lowest_mean = max(10, known // 4 + 1)
        average = self.rng.randint(lowest_mean, lowest_mean + 19)
        fourth = 4 * average - known
        text = (
            f"A group of four numbers has an average (arithmetic mean) of {average}. "
            f"The first three numbers are {first}, {second} and {third}. "
            "What is the other number?"
        )
        explanation = f"4 × {average} - {first} - {second} - {third} = {fourth}"
        return text, generate_numeric_options(fourth, rng=self.rng), explanation

    def create_mixed_sales_question(self) -> Problem:
        """Two-price sales total; solve for the count of cheap items."""
        cheap_price, expensive_price = 2, 5
        total_drinks = self.rng.randint(200, 399)
        cheap_drinks = self.rng.randint(total_drinks // 4, 3 * total_drinks // 4)
        expensive_drinks = total_drinks - cheap_drinks
        total_sales = cheap_price * cheap_drinks + expensive_price * expensive_drinks
        text = (
            f"A restaurant sold {total_drinks} drinks in a night. Some of the drinks "
            f"were sold for ${cheap_price} each and the rest for ${expensive_price} each. "
            f"If the total sales of drinks for the night was ${total_sales}, "
            f"how many ${cheap_price} drinks were sold?"
        )
        explanation = (
            f"${expensive_price} drinks = ({total_sales} - {cheap_price} × {total_drinks}) ÷ "
            f"{expensive_price - cheap_price} = {expensive_drinks}; "
            f"{total_drinks} - {expensive_drinks} = {cheap_drinks}"
        )
        return text, generate_numeric_options(cheap_drinks, rng=self.rng), explanation

    def create_percent_increase_question(self) -> Problem:
        """Projection after a percentage increase."""
        # multiples of 20 times multiples of 5 divide evenly by 100
        first_month = self.rng.randint(0, 24) * 20 + 1000
        increase = self.rng.randint(0, 4) * 5 + 10
        increase_amount = first_month * increase // 100
        second_month = first_month + increase_amount
        text = (
            f"In one month, a farmer produces {first_month} pounds of corn. In the "
            f"following month, the amount of corn he produces increases by {increase}% "
            "over the previous month. How much corn does he produce in the second month?"
        )
        explanation = f"{first_month} + {increase}% × {first_month} = {first_month} + {increase_amount} = {second_month}"
        return text, generate_numeric_options(second_month, rng=self.rng), explanation

    def create_speed_question(self) -> Problem:
        """Rate = distance / time."""
        hours = self.rng.randint(2, 6)
        speed = self.rng.randint(20, 75)
        distance = speed * hours
        text = (
            f"If a train travels {distance} miles in {hours} hours, "
            "what is its average speed in miles per hour?"
        )
        explanation = f"{distance} ÷ {hours} = {speed}"
        return text, generate_numeric_options(speed, rng=self.rng), explanation

    def create_decimal_comparison_question(self) -> Problem:
        """Pick the smallest or largest of five decimals."""
        is_smallest = self.rng.random() < 0.5
        options = generate_decimal_comparison_options(is_smallest, rng=self.rng)
        word = "smallest" if is_smallest else "largest"
        text = f"Which of the following is the {word} value?"
        explanation = f"{options.options[options.correct_index]} is the {word}"
        return text, options, explanation

    def create_perimeter_question(self) -> Problem:
        """Side of a square from its perimeter."""
        side = self.rng.randint(5, 15)
        perimeter = side * 4
        text = f"If the perimeter of a square is {perimeter} cm, what is the length of one side?"
        explanation = f"{perimeter} ÷ 4 = {side}"
        return text, generate_numeric_options(side, rng=self.rng), explanation

    def create_unit_rate_question(self) -> Problem:
        """Scale a price from one quantity to another."""
        unit_cents = self.rng.randint(50, 250)
        first_quantity = self.rng.randint(3, 6)
        second_quantity = self.rng.randint(7, 10)
        first_total = unit_cents * first_quantity
        second_total = unit_cents * second_quantity
        text = (
            f"If {first_quantity} apples cost {format_cents(first_total)}, "
            f"how much do {second_quantity} apples cost?"
        )
        explanation = (
            f"One apple costs {format_cents(first_total)} ÷ {first_quantity} = "
            f"{format_cents(unit_cents)}; × {second_quantity} = {format_cents(second_total)}"
        )
        return text, generate_monetary_options(second_total, rng=self.rng), explanation
