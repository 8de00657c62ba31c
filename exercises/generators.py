"""Base class and shared building blocks for exercise generators.

A generator family owns a set of topic ids. Generation is a pure function of
``(topic_id, difficulty, seed)``: the family draws everything it needs from a
``SeededRandom`` built from the seed and produces the exercise content and its
ground truth in the same step.
"""

from abc import ABC, abstractmethod
from typing import Callable

from loguru import logger

from models import DifficultyTier, Variant
from .config import GeneratorConfig
from .errors import TopicNotSupported
from .generic_models import (
    ChoiceOption,
    ChoicePayload,
    Exercise,
    Explanation,
    Payload,
    Prompt,
)
from .seeded_random import SeededRandom

Builder = Callable[[str, DifficultyTier, SeededRandom], Exercise]

OPTION_LABELS = "ABCDEF"


def parse_difficulty(topic_id: str, difficulty: DifficultyTier | str) -> DifficultyTier:
    """Resolve a tier name, rejecting anything outside easy/medium/hard."""
    if isinstance(difficulty, DifficultyTier):
        return difficulty
    try:
        return DifficultyTier(str(difficulty).lower())
    except ValueError:
        raise TopicNotSupported(
            topic_id, f"unknown difficulty tier {difficulty!r}"
        ) from None


class ExerciseGenerator(ABC):
    """Abstract base class for a family of topic generators."""

    prefix: str = "EX"

    def __init__(self, config: GeneratorConfig | None = None):
        self.config = config or GeneratorConfig()

    @abstractmethod
    def builders(self) -> dict[str, Builder]:
        """Map each topic id this family implements to its builder."""
        ...

    def topics(self) -> list[str]:
        return list(self.builders())

    def can_generate(self, topic_id: str) -> bool:
        return topic_id in self.builders()

    def generate(
        self,
        topic_id: str,
        difficulty: DifficultyTier | str,
        seed: int,
    ) -> Exercise:
        """Generate an exercise for a topic.

        Raises:
            TopicNotSupported: if this family has no builder for the topic or
                the tier is not one of easy/medium/hard.
        """
        tier = parse_difficulty(topic_id, difficulty)
        builder = self.builders().get(topic_id)
        if builder is None:
            raise TopicNotSupported(
                topic_id, f"{type(self).__name__} has no builder for it"
            )

        exercise = builder(topic_id, tier, SeededRandom(seed))
        logger.debug(
            "Generated {} exercise {} ({}, seed={})",
            exercise.variant.value,
            exercise.id,
            tier.value,
            seed,
        )
        return exercise

    def make_exercise(
        self,
        topic_id: str,
        difficulty: DifficultyTier,
        rng: SeededRandom,
        prompt: str,
        payload: Payload,
        explanation: str = "",
        steps: list[str] | None = None,
    ) -> Exercise:
        """Assemble an exercise whose id is derived from its generation inputs."""
        return Exercise(
            id=f"{self.prefix}_{topic_id}_{difficulty.value}_{rng.seed}",
            topic_id=topic_id,
            variant=Variant(payload.variant),
            difficulty=difficulty,
            prompt=Prompt(text=prompt),
            explanation=Explanation(text=explanation, steps=steps or []),
            payload=payload,
        )

    def choice_payload(
        self,
        rng: SeededRandom,
        correct: str,
        distractors: list[str],
        total_options: int | None = None,
    ) -> ChoicePayload:
        """Build a choice payload from the correct answer and candidate distractors.

        Duplicate candidates and candidates equal to the correct answer are
        dropped before the first ``total_options - 1`` are taken.
        """
        total = total_options or self.config.choice.total_options
        unique: list[str] = []
        for candidate in distractors:
            if candidate != correct and candidate not in unique:
                unique.append(candidate)
        contents = rng.shuffle([correct] + unique[: total - 1])
        return self.fixed_choice_payload(contents, correct)

    def fixed_choice_payload(self, contents: list[str], correct: str) -> ChoicePayload:
        """Options in the given order, e.g. comparison symbols."""
        return ChoicePayload(
            options=[
                ChoiceOption(
                    id=OPTION_LABELS[i], content=content, is_correct=content == correct
                )
                for i, content in enumerate(contents)
            ]
        )


def numeric_distractors(
    rng: SeededRandom,
    answer: int,
    count: int,
    spread: int = 3,
    unit: int = 1,
    minimum: int | None = 0,
) -> list[int]:
    """Pick distinct wrong answers near ``answer`` in multiples of ``unit``."""
    candidates = [
        answer + k * unit
        for k in range(-spread, spread + 1)
        if k != 0 and (minimum is None or answer + k * unit >= minimum)
    ]
    picked = rng.shuffle(candidates)[:count]
    k = spread + 1
    while len(picked) < count:
        picked.append(answer + k * unit)
        k += 1
    return picked


def round_to(value: int, unit: int) -> int:
    """Round half up to the nearest multiple of unit."""
    return (value + unit // 2) // unit * unit
