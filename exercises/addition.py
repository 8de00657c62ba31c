"""Addition exercises from picture counting up to decimals and like fractions."""

from decimal import Decimal
from fractions import Fraction
from typing import Callable

from models import DifficultyTier
from .generators import Builder, ExerciseGenerator, numeric_distractors, round_to
from .generic_models import Blank, BlankFillPayload, FreeTextPayload
from .seeded_random import SeededRandom

PICTURE = "🍎"

WORD_PROBLEMS = [
    ("{name} has {a} {unit}. A friend gives {name} {b} more. "
     "How many {unit} does {name} have now?", ["marbles", "stickers", "apples"]),
    ("There are {a} {unit} in one basket and {b} {unit} in another. "
     "How many {unit} are there in all?", ["oranges", "eggs", "shells"]),
    ("{name} read {a} {unit} on Monday and {b} {unit} on Tuesday. "
     "How many {unit} did {name} read altogether?", ["pages", "stories", "poems"]),
]
NAMES = ["Mia", "Leo", "Ava", "Sam", "Zoe", "Noah"]


def _carry_columns(a: int, b: int) -> int:
    """Number of columns that regroup when adding a and b."""
    carries = carry = 0
    while a or b:
        column = a % 10 + b % 10 + carry
        carry = 1 if column >= 10 else 0
        carries += carry
        a //= 10
        b //= 10
    return carries


def _ones_carry(a: int, b: int) -> bool:
    return a % 10 + b % 10 >= 10


def _addends(
    rng: SeededRandom,
    first: tuple[int, int],
    second: tuple[int, int],
    accept: Callable[[int, int], bool] = lambda a, b: True,
) -> tuple[int, int]:
    """Draw a pair of addends until ``accept`` holds for them."""
    while True:
        a = rng.int(*first)
        b = rng.int(*second)
        if accept(a, b):
            return a, b


def _carry_rule(difficulty: DifficultyTier) -> Callable[[int, int], bool]:
    # No regrouping at easy, anything at medium, regroup the ones at hard.
    if difficulty == DifficultyTier.EASY:
        return lambda a, b: _carry_columns(a, b) == 0
    if difficulty == DifficultyTier.HARD:
        return _ones_carry
    return lambda a, b: True


def _decimal_forms(value: Decimal) -> list[str]:
    """The value as written plus the same value without trailing zeros."""
    forms = [str(value)]
    stripped = format(value.normalize(), "f")
    if stripped not in forms:
        forms.append(stripped)
    return forms


def _fraction_forms(numerator: int, denominator: int) -> list[str]:
    """Equivalent ways to write numerator/denominator: simplest, mixed, whole."""
    value = Fraction(numerator, denominator)
    forms = []
    if value.denominator == 1:
        forms.append(str(value.numerator))
    else:
        forms.append(f"{value.numerator}/{value.denominator}")
        whole, rest = divmod(value.numerator, value.denominator)
        if whole:
            forms.append(f"{whole} {rest}/{value.denominator}")
    return [f for f in forms if f != f"{numerator}/{denominator}"]


class AdditionGenerator(ExerciseGenerator):
    prefix = "ADD"

    def builders(self) -> dict[str, Builder]:
        return {
            "g1-add-pictures": self._pictures,
            "g1-add-single-digit": self._single_digit,
            "g1-add-making-10": self._making_10,
            "g1-add-word": self._word_problem,
            "g2-add-single-digit": self._single_digit,
            "g2-add-2digit-1digit": self._two_digit_one_digit,
            "g2-add-two-2digit": self._two_two_digit,
            "g2-add-making-100": self._making_100,
            "g2-add-word": self._word_problem,
            "g3-add-3digit-3digit": self._three_digit,
            "g3-add-with-regrouping": self._with_regrouping,
            "g3-add-estimate": self._estimate,
            "g4-add-multi-digit": self._multi_digit,
            "g4-add-round-and-add": self._round_and_add,
            "g5-add-decimal": self._decimal,
            "g5-add-fractions-like": self._like_fractions,
        }

    def _sum_exercise(self, topic_id, difficulty, rng, addends, acceptable=None):
        total = sum(addends)
        expression = " + ".join(str(n) for n in addends)
        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=f"What is {expression}?",
            payload=FreeTextPayload(
                answer=str(total),
                acceptable_answers=acceptable or [],
                placeholder="Type the sum",
            ),
            explanation=f"{expression} = {total}",
        )

    def _pictures(self, topic_id, difficulty, rng):
        high = 5 if difficulty == DifficultyTier.EASY else 9
        a = rng.int(1, high)
        b = rng.int(1, high)
        total = a + b
        distractors = [str(n) for n in numeric_distractors(rng, total, 5, minimum=1)]

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=f"Count the apples. {PICTURE * a} + {PICTURE * b} = ?",
            payload=self.choice_payload(rng, str(total), distractors),
            explanation=f"There are {a} apples and {b} apples. {a} + {b} = {total}.",
        )

    def _single_digit(self, topic_id, difficulty, rng):
        if difficulty == DifficultyTier.HARD:
            addends = [rng.int(1, 9) for _ in range(3)]
        else:
            high = 5 if difficulty == DifficultyTier.EASY else 9
            addends = [rng.int(0, high), rng.int(0, high)]
        return self._sum_exercise(topic_id, difficulty, rng, addends)

    def _making_10(self, topic_id, difficulty, rng):
        a = rng.int(1, 9)
        blanks = [Blank(id="blank1", answer=str(10 - a))]
        if difficulty == DifficultyTier.EASY:
            template = f"{a} + [blank1] = 10"
        elif difficulty == DifficultyTier.MEDIUM:
            template = f"[blank1] + {a} = 10"
        else:
            b = rng.int(1, 9)
            template = f"{a} + [blank1] = 10 and [blank2] + {b} = 10"
            blanks.append(Blank(id="blank2", answer=str(10 - b)))

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt="Fill in the missing number to make 10.",
            payload=BlankFillPayload(
                template=template,
                blanks=blanks,
                instructions="Each pair of numbers should add up to 10.",
            ),
            explanation="Count up from the number you have until you reach 10.",
        )

    def _making_100(self, topic_id, difficulty, rng):
        step = {DifficultyTier.EASY: 10, DifficultyTier.MEDIUM: 5}.get(difficulty, 1)
        a = rng.int(1, 99 // step) * step
        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt="Fill in the missing number to make 100.",
            payload=BlankFillPayload(
                template=f"{a} + [blank1] = 100",
                blanks=[Blank(id="blank1", answer=str(100 - a))],
            ),
            explanation=f"100 - {a} = {100 - a}, so {a} + {100 - a} = 100.",
        )

    def _word_problem(self, topic_id, difficulty, rng):
        grade_two = topic_id.startswith("g2")
        high = {DifficultyTier.EASY: 5, DifficultyTier.MEDIUM: 9}.get(difficulty, 20)
        if grade_two:
            high *= 5
        a = rng.int(1, high)
        b = rng.int(1, high)
        template, units = rng.choice(WORD_PROBLEMS)
        unit = rng.choice(units)
        name = rng.choice(NAMES)
        total = a + b
        distractors = [
            f"{n} {unit}" for n in [abs(a - b)] + numeric_distractors(rng, total, 4, minimum=1)
        ]

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=template.format(name=name, a=a, b=b, unit=unit),
            payload=self.choice_payload(rng, f"{total} {unit}", distractors),
            explanation=f"Put the two groups together: {a} + {b} = {total}.",
        )

    def _two_digit_one_digit(self, topic_id, difficulty, rng):
        a, b = _addends(rng, (10, 99), (1, 9), _carry_rule(difficulty))
        return self._sum_exercise(topic_id, difficulty, rng, [a, b])

    def _two_two_digit(self, topic_id, difficulty, rng):
        a, b = _addends(rng, (10, 99), (10, 99), _carry_rule(difficulty))
        return self._sum_exercise(topic_id, difficulty, rng, [a, b])

    def _three_digit(self, topic_id, difficulty, rng):
        if difficulty == DifficultyTier.EASY:
            a, b = _addends(rng, (100, 499), (100, 499), _carry_rule(difficulty))
        elif difficulty == DifficultyTier.MEDIUM:
            a, b = _addends(rng, (100, 999), (100, 999), lambda a, b: a + b < 1000)
        else:
            a, b = _addends(rng, (100, 999), (100, 999))
        return self._sum_exercise(topic_id, difficulty, rng, [a, b])

    def _with_regrouping(self, topic_id, difficulty, rng):
        # Regroup in at least 1, 2 or 3 columns as the tier rises.
        needed = {DifficultyTier.EASY: 1, DifficultyTier.MEDIUM: 2}.get(difficulty, 3)
        a, b = _addends(
            rng, (100, 999), (100, 999), lambda a, b: _carry_columns(a, b) >= needed
        )
        return self._sum_exercise(topic_id, difficulty, rng, [a, b])

    def _estimate(self, topic_id, difficulty, rng):
        if difficulty == DifficultyTier.EASY:
            unit, span = 10, (11, 99)
        else:
            unit, span = 100, (101, 999 if difficulty == DifficultyTier.MEDIUM else 9999)
        a = rng.int(*span)
        b = rng.int(*span)
        rounded_a, rounded_b = round_to(a, unit), round_to(b, unit)
        estimate = rounded_a + rounded_b
        distractors = [str(n) for n in numeric_distractors(rng, estimate, 3, unit=unit)]

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=f"Estimate {a} + {b} by rounding each number to the nearest {unit}.",
            payload=self.choice_payload(rng, str(estimate), distractors),
            explanation=f"Round each number to the nearest {unit}, then add.",
            steps=[
                f"{a} rounds to {rounded_a}.",
                f"{b} rounds to {rounded_b}.",
                f"{rounded_a} + {rounded_b} = {estimate}",
            ],
        )

    def _multi_digit(self, topic_id, difficulty, rng):
        digits = {DifficultyTier.EASY: 4, DifficultyTier.MEDIUM: 5}.get(difficulty, 6)
        span = (10 ** (digits - 1), 10**digits - 1)
        a = rng.int(*span)
        b = rng.int(*span)
        return self._sum_exercise(
            topic_id, difficulty, rng, [a, b], acceptable=[f"{a + b:,}"]
        )

    def _round_and_add(self, topic_id, difficulty, rng):
        unit = {DifficultyTier.EASY: 10, DifficultyTier.MEDIUM: 100}.get(difficulty, 1000)
        high = unit * 100 - 1
        a = rng.int(unit + 1, high)
        b = rng.int(unit + 1, high)
        rounded_a, rounded_b = round_to(a, unit), round_to(b, unit)
        total = rounded_a + rounded_b

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=(
                f"Round {a} and {b} to the nearest {unit}, "
                "then add the rounded numbers."
            ),
            payload=FreeTextPayload(
                answer=str(total), acceptable_answers=[f"{total:,}"]
            ),
            explanation=f"Round each number to the nearest {unit}, then add.",
            steps=[
                f"{a} rounds to {rounded_a}.",
                f"{b} rounds to {rounded_b}.",
                f"{rounded_a} + {rounded_b} = {total}",
            ],
        )

    def _decimal(self, topic_id, difficulty, rng):
        if difficulty == DifficultyTier.HARD:
            a = Decimal(rng.int(101, 9999)) / 100
            b = Decimal(rng.int(11, 999)) / 10
        else:
            places = 1 if difficulty == DifficultyTier.EASY else 2
            scale = 10**places
            a = Decimal(rng.int(1, 10 * scale - 1)) / scale
            b = Decimal(rng.int(1, 10 * scale - 1)) / scale
        total = a + b
        forms = _decimal_forms(total)

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=f"What is {a} + {b}?",
            payload=FreeTextPayload(answer=forms[0], acceptable_answers=forms[1:]),
            explanation="Line up the decimal points, then add as with whole numbers.",
            steps=[f"{a} + {b} = {forms[0]}"],
        )

    def _like_fractions(self, topic_id, difficulty, rng):
        denominator = rng.int(3, 12)
        if difficulty == DifficultyTier.EASY:
            # Sum stays a proper fraction.
            a = rng.int(1, denominator - 2)
            b = rng.int(1, denominator - 1 - a)
        else:
            high = denominator - 1 if difficulty == DifficultyTier.MEDIUM else 2 * denominator
            a = rng.int(1, high)
            b = rng.int(1, high)
        total = a + b

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=f"What is {a}/{denominator} + {b}/{denominator}?",
            payload=FreeTextPayload(
                answer=f"{total}/{denominator}",
                acceptable_answers=_fraction_forms(total, denominator),
                placeholder="e.g. 3/4",
            ),
            explanation=(
                "When the denominators are the same, add the numerators "
                "and keep the denominator."
            ),
            steps=[f"{a}/{denominator} + {b}/{denominator} = {total}/{denominator}"],
        )
