"""Number line exercises: locate a value, or select every value with a property."""

from models import DifficultyTier
from .generators import Builder, ExerciseGenerator
from .generic_models import Exercise, NumberLinePayload
from .seeded_random import SeededRandom


class NumberLineGenerator(ExerciseGenerator):
    prefix = "NL"

    def builders(self) -> dict[str, Builder]:
        return {
            "nl-find-integer": self._find_integer,
            "nl-select-odd": self._select_odd,
        }

    def _find_integer(
        self, topic_id: str, difficulty: DifficultyTier, rng: SeededRandom
    ) -> Exercise:
        width = 10 if difficulty == DifficultyTier.EASY else 20
        start = rng.int(0, 50)
        end = start + width
        # Never on an endpoint.
        target = rng.int(start + 1, end - 1)

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=f"Locate the number {target} on the number line.",
            payload=NumberLinePayload(
                min=start,
                max=end,
                step=1,
                labels=list(range(start, end + 1)),
                mode="single",
                correct_value=target,
            ),
            explanation=f"{target} is located at the mark labeled {target}.",
        )

    def _select_odd(
        self, topic_id: str, difficulty: DifficultyTier, rng: SeededRandom
    ) -> Exercise:
        start = rng.int(10, 30)
        end = start + 10
        labels = list(range(start, end + 1))

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt="Select all the odd numbers on the number line.",
            payload=NumberLinePayload(
                min=start,
                max=end,
                step=1,
                labels=labels,
                mode="multi",
                correct_values=[n for n in labels if n % 2 != 0],
            ),
            explanation="Odd numbers end in 1, 3, 5, 7, or 9.",
        )
