"""Seeded pseudo-random source used by every exercise generator."""

import random
from typing import Sequence, TypeVar

T = TypeVar("T")


class SeededRandom:
    """Reproducible integer draws from an explicit integer seed.

    Two instances built from the same seed yield the same values for the same
    sequence of calls. All helpers draw from one underlying stream, so the
    order of calls inside a generator is part of its output.

    ``random.Random`` seeds from the absolute value of an int, so ``-n`` and
    ``n`` produce the same stream.
    """

    def __init__(self, seed: int):
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise TypeError(f"seed must be an int, got {type(seed).__name__}")
        self.seed = seed
        self._random = random.Random(seed)

    def choice(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("cannot choose from an empty sequence")
        return items[self.int(0, len(items) - 1)]

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return a shuffled copy of items (Fisher-Yates over int draws)."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.int(0, i)
            result[i], result[j] = result[j], result[i]
        return result

    def sample(self, low: int, high: int, count: int) -> list[int]:
        """Draw count distinct integers from [low, high], in draw order."""
        if count > high - low + 1:
            raise ValueError(f"cannot draw {count} distinct values from [{low}, {high}]")
        seen: list[int] = []
        while len(seen) < count:
            value = self.int(low, high)
            if value not in seen:
                seen.append(value)
        return seen

    # Defined last so the name does not shadow the builtin in the
    # annotations above.
    def int(self, low: int, high: int) -> int:
        """Draw an integer in the inclusive range [low, high]."""
        if low > high:
            raise ValueError(f"empty range [{low}, {high}]")
        return self._random.randint(low, high)
