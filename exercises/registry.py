"""Topic registry: dispatch from topic id to the generator that builds it."""

from functools import lru_cache
from typing import Callable

from loguru import logger

from models import DifficultyTier
from .addition import AdditionGenerator
from .config import GeneratorConfig
from .drag_drop import DragDropGenerator
from .errors import TopicNotFound
from .generators import ExerciseGenerator
from .generic_models import Exercise
from .graphing import GraphingGenerator
from .multiplication import GRADES_BY_KIND, MultiplicationGenerator
from .number_line import NumberLineGenerator
from .place_value import PlaceValueGenerator
from .sorting import SortingGenerator
from .vertical import VerticalGenerator

TopicGenerator = Callable[[DifficultyTier | str, int], Exercise]

ALIASES = {
    "geo-plot-points": "g5-graph-points",
    "fib-equation": "g1-add-making-10",
    "mul-pattern-powers": "g3-mul-repeated-addition",
}


class TopicRegistry:
    """Mapping from topic id to a bound generator closure.

    Aliases resolve to their target topic, so an exercise generated through an
    alias carries the target's topic id.
    """

    def __init__(self):
        self._topics: dict[str, TopicGenerator] = {}
        self._aliases: dict[str, str] = {}

    def register(self, topic_id: str, generator: TopicGenerator) -> None:
        if topic_id in self._topics or topic_id in self._aliases:
            raise ValueError(f"Topic already registered: {topic_id}")
        self._topics[topic_id] = generator

    def register_family(self, family: ExerciseGenerator) -> None:
        """Register every topic a generator family implements."""
        for topic_id in family.topics():
            self.register(
                topic_id,
                lambda difficulty, seed, topic_id=topic_id: family.generate(
                    topic_id, difficulty, seed
                ),
            )

    def alias(self, alias: str, target: str) -> None:
        if target not in self._topics:
            raise TopicNotFound(target)
        if alias in self._topics or alias in self._aliases:
            raise ValueError(f"Topic already registered: {alias}")
        self._aliases[alias] = target

    def resolve(self, topic_id: str) -> str:
        return self._aliases.get(topic_id, topic_id)

    def get(self, topic_id: str) -> TopicGenerator:
        """Look up the generator for a topic.

        Raises:
            TopicNotFound: if neither a topic nor an alias has this id.
        """
        generator = self._topics.get(self.resolve(topic_id))
        if generator is None:
            raise TopicNotFound(topic_id)
        return generator

    def generate(
        self, topic_id: str, difficulty: DifficultyTier | str, seed: int
    ) -> Exercise:
        return self.get(topic_id)(difficulty, seed)

    def topic_ids(self, include_aliases: bool = False) -> list[str]:
        ids = sorted(self._topics)
        if include_aliases:
            ids += sorted(self._aliases)
        return ids

    def __contains__(self, topic_id: str) -> bool:
        return self.resolve(topic_id) in self._topics

    def __len__(self) -> int:
        return len(self._topics)


def build_default_registry(config: GeneratorConfig | None = None) -> TopicRegistry:
    """Registry with every built-in family, grade and alias."""
    registry = TopicRegistry()
    families: list[ExerciseGenerator] = [
        AdditionGenerator(config),
        PlaceValueGenerator(config),
        SortingGenerator(config),
        GraphingGenerator(config),
        DragDropGenerator(config),
        NumberLineGenerator(config),
        VerticalGenerator(config),
    ]
    grades = sorted(set().union(*GRADES_BY_KIND.values()))
    families += [MultiplicationGenerator(grade, config) for grade in grades]

    for family in families:
        registry.register_family(family)
    for alias, target in ALIASES.items():
        registry.alias(alias, target)

    logger.debug("Registered {} topics and {} aliases", len(registry), len(ALIASES))
    return registry


@lru_cache(maxsize=1)
def get_default_registry() -> TopicRegistry:
    return build_default_registry()


def generate(topic_id: str, difficulty: DifficultyTier | str, seed: int) -> Exercise:
    """Generate an exercise for a topic from the default registry.

    Raises:
        TopicNotFound: unknown topic id.
        TopicNotSupported: known topic, but the tier is not one it handles.
    """
    return get_default_registry().generate(topic_id, difficulty, seed)
