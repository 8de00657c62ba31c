"""Number sense and place value exercises (``npv-*`` topics)."""

from models import DifficultyTier
from .generators import Builder, ExerciseGenerator, numeric_distractors
from .generic_models import Blank, BlankFillPayload

ONES = [
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen",
]
TENS = ["", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"]

PLACE_NAMES = ["ones", "tens", "hundreds", "thousands"]


def number_to_words(n: int) -> str:
    """Spell out 0 <= n < 10000 in English words."""
    if n < 20:
        return ONES[n]
    if n < 100:
        tens, ones = divmod(n, 10)
        return TENS[tens] + (f"-{ONES[ones]}" if ones else "")
    if n < 1000:
        hundreds, rest = divmod(n, 100)
        words = f"{ONES[hundreds]} hundred"
        return f"{words} {number_to_words(rest)}" if rest else words
    thousands, rest = divmod(n, 1000)
    words = f"{number_to_words(thousands)} thousand"
    return f"{words} {number_to_words(rest)}" if rest else words


def _magnitude(difficulty: DifficultyTier) -> int:
    """Upper bound for numbers at each tier."""
    return {DifficultyTier.EASY: 20, DifficultyTier.MEDIUM: 100}.get(difficulty, 1000)


class PlaceValueGenerator(ExerciseGenerator):
    prefix = "NPV"

    def builders(self) -> dict[str, Builder]:
        return {
            "npv-number-recognition": self._recognition,
            "npv-counting-forward": self._counting_forward,
            "npv-counting-backward": self._counting_backward,
            "npv-comparing": self._comparing,
            "npv-place-value": self._digit_value,
            "npv-expanded-form": self._expanded_form,
            "npv-even-odd": self._even_odd,
        }

    def _recognition(self, topic_id, difficulty, rng):
        n = rng.int(0, _magnitude(difficulty))
        # Digit swaps and near misses read alike.
        candidates = [int(str(n)[::-1])] + numeric_distractors(rng, n, 5, spread=10)
        distractors = [str(c) for c in candidates]

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=f'Which number is "{number_to_words(n)}"?',
            payload=self.choice_payload(rng, str(n), distractors),
            explanation=f'"{number_to_words(n)}" is written as {n}.',
        )

    def _counting(self, topic_id, difficulty, rng, direction: int):
        step = {DifficultyTier.EASY: 1, DifficultyTier.MEDIUM: 2}.get(difficulty, 5)
        span = 4 * step
        high = _magnitude(difficulty)
        if direction > 0:
            start = rng.int(0, high - span)
        else:
            start = rng.int(span, high)
        sequence = [start + direction * step * i for i in range(5)]

        # Two of the five terms are hidden; the first always stays visible.
        hidden = sorted(rng.sample(1, 4, 2))
        blanks = []
        parts = []
        for i, value in enumerate(sequence):
            if i in hidden:
                blank_id = f"blank{len(blanks) + 1}"
                blanks.append(Blank(id=blank_id, answer=str(value)))
                parts.append(f"[{blank_id}]")
            else:
                parts.append(str(value))

        verb = "forward" if direction > 0 else "backward"
        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=f"Count {verb} by {step}s. Fill in the missing numbers.",
            payload=BlankFillPayload(template=", ".join(parts), blanks=blanks),
            explanation=f"Each number is {step} {'more' if direction > 0 else 'less'} than the one before it.",
            steps=[", ".join(str(v) for v in sequence)],
        )

    def _counting_forward(self, topic_id, difficulty, rng):
        return self._counting(topic_id, difficulty, rng, 1)

    def _counting_backward(self, topic_id, difficulty, rng):
        return self._counting(topic_id, difficulty, rng, -1)

    def _comparing(self, topic_id, difficulty, rng):
        high = _magnitude(difficulty)
        a = rng.int(0, high)
        # Roughly one in five pairs is equal.
        b = a if rng.int(1, 5) == 1 else rng.int(0, high)
        symbol = "<" if a < b else ">" if a > b else "="

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=f"Which symbol makes this true? {a} ___ {b}",
            payload=self.fixed_choice_payload(["<", ">", "="], symbol),
            explanation={
                "<": f"{a} is less than {b}.",
                ">": f"{a} is greater than {b}.",
                "=": f"{a} is equal to {b}.",
            }[symbol],
        )

    def _digit_value(self, topic_id, difficulty, rng):
        places = {DifficultyTier.EASY: 2, DifficultyTier.MEDIUM: 3}.get(difficulty, 4)
        digits = [rng.int(1, 9) for _ in range(places)]
        number = int("".join(str(d) for d in digits))
        position = rng.int(0, places - 1)
        digit = digits[places - 1 - position]
        value = digit * 10**position
        distractors = [str(digit)]
        distractors += [str(digit * 10**p) for p in range(places) if p != position]
        distractors.append(str(digit * 10**places))

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=f"What is the value of the digit in the {PLACE_NAMES[position]} place of {number}?",
            payload=self.choice_payload(rng, str(value), distractors),
            explanation=(
                f"The digit {digit} is in the {PLACE_NAMES[position]} place, "
                f"so its value is {value}."
            ),
        )

    def _expanded_form(self, topic_id, difficulty, rng):
        places = {DifficultyTier.EASY: 2, DifficultyTier.MEDIUM: 3}.get(difficulty, 4)
        number = rng.int(10 ** (places - 1), 10**places - 1)
        digits = str(number)

        blanks = []
        parts = []
        for i, digit in enumerate(digits):
            position = places - 1 - i
            blank_id = PLACE_NAMES[position]
            blanks.append(Blank(id=blank_id, answer=str(int(digit) * 10**position)))
            parts.append(f"[{blank_id}]")

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=f"Write {number} in expanded form.",
            payload=BlankFillPayload(
                template=f"{number} = " + " + ".join(parts),
                blanks=blanks,
                instructions="Write the value of each digit. Use 0 for a zero digit.",
            ),
            explanation="Expanded form writes a number as the sum of the values of its digits.",
            steps=[f"{number} = " + " + ".join(b.answer for b in blanks)],
        )

    def _even_odd(self, topic_id, difficulty, rng):
        n = rng.int(1, _magnitude(difficulty))
        answer = "even" if n % 2 == 0 else "odd"

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=f"Is {n} even or odd?",
            payload=self.fixed_choice_payload(["even", "odd"], answer),
            explanation=f"{n} ends in {n % 10}, so it is {answer}.",
        )
