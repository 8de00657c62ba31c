"""Multiplication exercises, parameterized by grade.

One ``MultiplicationGenerator`` is built per grade. Each exercise kind is
documented for a fixed set of grades; asking a generator for a kind its grade
does not cover raises ``TopicNotSupported``.
"""

from models import DifficultyTier
from .config import GeneratorConfig
from .generators import Builder, ExerciseGenerator, numeric_distractors
from .generic_models import Blank, BlankFillPayload, FreeTextPayload

GRADES_BY_KIND = {
    "repeated-addition": {1, 2, 3, 4},
    "tables": {2, 3, 4},
    "numbers": {3, 4},
    "word": {2, 3},
    "properties": {3},
}

GROUPS = [
    ("bags", "apples"),
    ("boxes", "crayons"),
    ("plates", "cookies"),
    ("vases", "flowers"),
    ("packs", "cards"),
]


def topic_id_for(grade: int, kind: str) -> str:
    return f"g{grade}-mul-{kind}"


class MultiplicationGenerator(ExerciseGenerator):
    prefix = "MUL"

    def __init__(self, grade: int, config: GeneratorConfig | None = None):
        super().__init__(config)
        self.grade = grade

    def builders(self) -> dict[str, Builder]:
        kinds = {
            "repeated-addition": self._repeated_addition,
            "tables": self._times_table,
            "numbers": self._multiply_numbers,
            "word": self._word_problem,
            "properties": self._property,
        }
        return {
            topic_id_for(self.grade, kind): builder
            for kind, builder in kinds.items()
            if self.grade in GRADES_BY_KIND[kind]
        }

    def _factor_cap(self, difficulty: DifficultyTier) -> int:
        base = {DifficultyTier.EASY: 5, DifficultyTier.MEDIUM: 10}.get(difficulty, 12)
        # Grades 1 and 2 stay within the small tables.
        return min(base, 5) if self.grade <= 2 else base

    def _repeated_addition(self, topic_id, difficulty, rng):
        cap = self._factor_cap(difficulty)
        groups = rng.int(2, max(3, cap - 1))
        size = rng.int(2, cap)
        addition = " + ".join([str(size)] * groups)
        correct = f"{groups} × {size}"
        distractors = [
            f"{groups} + {size}",
            f"{groups + 1} × {size}",
            f"{groups} × {size + 1}",
            f"{groups - 1} × {size}",
        ]

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=f"Which multiplication matches {addition}?",
            payload=self.choice_payload(rng, correct, distractors),
            explanation=(
                f"There are {groups} groups of {size}, "
                f"so {addition} = {correct} = {groups * size}."
            ),
        )

    def _times_table(self, topic_id, difficulty, rng):
        cap = self._factor_cap(difficulty)
        table = rng.int(2, cap)
        factor = rng.int(1, 10 if difficulty != DifficultyTier.HARD else 12)
        product = table * factor

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=f"What is {factor} × {table}?",
            payload=FreeTextPayload(answer=str(product)),
            explanation=f"Count by {table}s {factor} times: {factor} × {table} = {product}.",
        )

    def _multiply_numbers(self, topic_id, difficulty, rng):
        if difficulty == DifficultyTier.EASY:
            a, b = rng.int(2, 9), rng.int(2, 9)
        elif difficulty == DifficultyTier.MEDIUM:
            a, b = rng.int(11, 99), rng.int(2, 9)
        else:
            high = 99 if self.grade == 3 else 999
            a, b = rng.int(11, high), rng.int(11, 99)
        product = a * b

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=f"What is {a} × {b}?",
            payload=FreeTextPayload(answer=str(product), acceptable_answers=[f"{product:,}"]),
            explanation=f"{a} × {b} = {product}",
        )

    def _word_problem(self, topic_id, difficulty, rng):
        cap = self._factor_cap(difficulty)
        containers, things = rng.choice(GROUPS)
        groups = rng.int(2, cap)
        size = rng.int(2, cap)
        product = groups * size
        distractors = [
            f"{n} {things}"
            for n in [groups + size] + numeric_distractors(rng, product, 4, spread=size, minimum=1)
        ]

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=(
                f"There are {groups} {containers}. Each has {size} {things}. "
                f"How many {things} are there in total?"
            ),
            payload=self.choice_payload(rng, f"{product} {things}", distractors),
            explanation=f"{groups} groups of {size} is {groups} × {size} = {product}.",
        )

    def _property(self, topic_id, difficulty, rng):
        a = rng.int(2, 9)
        b = rng.int(2, 9)
        if difficulty == DifficultyTier.EASY:
            template = f"{a} × {b} = {b} × [blank1]"
            blanks = [Blank(id="blank1", answer=str(a))]
            explanation = "Commutative property: changing the order of the factors does not change the product."
        elif difficulty == DifficultyTier.MEDIUM:
            template = f"{a} × [blank1] = {a}"
            blanks = [Blank(id="blank1", answer="1")]
            explanation = "Identity property: any number times 1 is that number."
        else:
            c = rng.int(2, 5)
            template = f"({a} × {b}) × {c} = {a} × ([blank1] × [blank2])"
            blanks = [Blank(id="blank1", answer=str(b)), Blank(id="blank2", answer=str(c))]
            explanation = "Associative property: changing the grouping of the factors does not change the product."

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt="Fill in the blank to make the equation true.",
            payload=BlankFillPayload(template=template, blanks=blanks),
            explanation=explanation,
        )
