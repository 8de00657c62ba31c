"""Categorize exercises: drag each item into the zone it belongs to."""

from models import DifficultyTier
from .generators import Builder, ExerciseGenerator
from .generic_models import CategorizeItem, CategorizePayload, Exercise, Zone
from .seeded_random import SeededRandom

EVEN_ZONE = Zone(id="zone-even", label="Even Numbers")
ODD_ZONE = Zone(id="zone-odd", label="Odd Numbers")


class DragDropGenerator(ExerciseGenerator):
    prefix = "DND"

    def builders(self) -> dict[str, Builder]:
        return {"g2-even-odd-drag": self._even_odd}

    def _even_odd(
        self, topic_id: str, difficulty: DifficultyTier, rng: SeededRandom
    ) -> Exercise:
        high = 99 if difficulty == DifficultyTier.HARD else 20
        numbers = rng.sample(1, high, self.config.drag_drop.item_count)

        items = [CategorizeItem(id=f"item-{n}", content=str(n)) for n in numbers]
        mapping = {
            f"item-{n}": EVEN_ZONE.id if n % 2 == 0 else ODD_ZONE.id for n in numbers
        }

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt="Sort the numbers into Even and Odd.",
            payload=CategorizePayload(
                items=items,
                zones=[EVEN_ZONE, ODD_ZONE],
                correct_mapping=mapping,
            ),
            explanation=(
                "Even numbers end in 0, 2, 4, 6, or 8. "
                "Odd numbers end in 1, 3, 5, 7, or 9."
            ),
        )
