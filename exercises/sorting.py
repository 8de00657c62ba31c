"""Ordering exercises: arrange numbers, decimals or fractions from least to greatest."""

from decimal import Decimal
from fractions import Fraction

from models import DifficultyTier
from .generators import Builder, ExerciseGenerator
from .generic_models import Exercise, OrderingItem, OrderingPayload
from .seeded_random import SeededRandom

UNLIKE_DENOMINATORS = [2, 3, 4, 5, 6, 8, 10, 12]


def _format_fraction(value: Fraction) -> str:
    return f"{value.numerator}/{value.denominator}"


class SortingGenerator(ExerciseGenerator):
    prefix = "SORT"

    def builders(self) -> dict[str, Builder]:
        return {
            "g1-order-numbers": self._order_numbers,
            "g3-order-decimals": self._order_decimals,
            "g4-order-numbers-large": self._order_large_numbers,
            "g4-order-fractions-like": self._order_like_fractions,
            "g5-order-fractions-unlike": self._order_unlike_fractions,
            "g6-order-integers": self._order_integers,
        }

    def _ordering_exercise(
        self,
        topic_id: str,
        difficulty: DifficultyTier,
        rng: SeededRandom,
        values: list,
        display: dict,
        noun: str = "numbers",
    ) -> Exercise:
        """Present distinct values in draw order; the answer is ascending order.

        Item ids are assigned by presentation position so they never leak the
        answer.
        """
        items = [
            OrderingItem(id=f"item-{i + 1}", content=display[value])
            for i, value in enumerate(values)
        ]
        ids_by_value = {value: item.id for value, item in zip(values, items)}
        ascending = sorted(values)

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=f"Arrange these {noun} from least to greatest.",
            payload=OrderingPayload(
                items=items,
                correct_order=[ids_by_value[value] for value in ascending],
            ),
            explanation="The items should be arranged in the following order:",
            steps=[display[value] for value in ascending],
        )

    def _order_numbers(self, topic_id, difficulty, rng):
        high = {DifficultyTier.EASY: 20, DifficultyTier.MEDIUM: 50}.get(difficulty, 100)
        count = self.config.sorting.items_for(difficulty)
        values = rng.sample(0, high, count)
        return self._ordering_exercise(
            topic_id, difficulty, rng, values, {v: str(v) for v in values}
        )

    def _order_integers(self, topic_id, difficulty, rng):
        bound = {DifficultyTier.EASY: 10, DifficultyTier.MEDIUM: 50}.get(difficulty, 100)
        count = self.config.sorting.items_for(difficulty)
        values = rng.sample(-bound, bound, count)
        return self._ordering_exercise(
            topic_id, difficulty, rng, values, {v: str(v) for v in values}, "integers"
        )

    def _order_large_numbers(self, topic_id, difficulty, rng):
        digits = {DifficultyTier.EASY: 4, DifficultyTier.MEDIUM: 5}.get(difficulty, 6)
        count = self.config.sorting.items_for(difficulty)
        if difficulty == DifficultyTier.HARD:
            # Same leading digit so the comparison happens further right.
            lead = rng.int(1, 9) * 10 ** (digits - 1)
            values = [lead + v for v in rng.sample(0, 10 ** (digits - 1) - 1, count)]
        else:
            values = rng.sample(10 ** (digits - 1), 10**digits - 1, count)
        return self._ordering_exercise(
            topic_id, difficulty, rng, values, {v: f"{v:,}" for v in values}
        )

    def _order_decimals(self, topic_id, difficulty, rng):
        count = self.config.sorting.items_for(difficulty)
        if difficulty == DifficultyTier.EASY:
            units = rng.sample(1, 99, count)
            values = [Decimal(u) / 10 for u in units]
        elif difficulty == DifficultyTier.MEDIUM:
            units = rng.sample(1, 999, count)
            values = [Decimal(u) / 100 for u in units]
        else:
            # Mixed tenths and hundredths, e.g. 0.5 against 0.45.
            values = []
            while len(values) < count:
                places = rng.int(1, 2)
                value = Decimal(rng.int(1, 10**places - 1)) / 10**places
                if value not in values:
                    values.append(value)
        display = {v: str(v) for v in values}
        return self._ordering_exercise(topic_id, difficulty, rng, values, display, "decimals")

    def _order_like_fractions(self, topic_id, difficulty, rng):
        count = self.config.sorting.items_for(difficulty)
        if difficulty == DifficultyTier.HARD:
            denominator = rng.int(max(count, 5), 12)
            numerators = rng.sample(1, 2 * denominator, count)
        else:
            denominator = rng.int(count + 1, 12)
            numerators = rng.sample(1, denominator - 1, count)
        values = [Fraction(n, denominator) for n in numerators]
        display = {
            v: f"{n}/{denominator}" for v, n in zip(values, numerators)
        }
        return self._ordering_exercise(topic_id, difficulty, rng, values, display, "fractions")

    def _order_unlike_fractions(self, topic_id, difficulty, rng):
        count = self.config.sorting.items_for(difficulty)
        denominators = UNLIKE_DENOMINATORS[: 4 if difficulty == DifficultyTier.EASY else None]
        values: list[Fraction] = []
        while len(values) < count:
            denominator = rng.choice(denominators)
            value = Fraction(rng.int(1, denominator - 1), denominator)
            if value not in values:
                values.append(value)
        display = {v: _format_fraction(v) for v in values}
        return self._ordering_exercise(topic_id, difficulty, rng, values, display, "fractions")
