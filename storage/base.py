"""Abstract exercise store interface for the storage layer."""

from abc import ABC, abstractmethod

from exercises.generic_models import Exercise
from models import DifficultyTier


class ExerciseStoreError(Exception):
    """A store could not complete a read or write."""


class ExerciseStore(ABC):
    """Abstract interface for stored (hand-authored) exercises."""

    @abstractmethod
    def find_for_topic(
        self, topic_id: str, difficulty: DifficultyTier | None = None
    ) -> Exercise | None:
        """Pick one active exercise for a topic.

        Args:
            topic_id: The topic ID.
            difficulty: Restrict the pick to this tier, if given.

        Returns:
            A stored exercise, or None if the topic has none.

        Raises:
            ExerciseStoreError: if the store cannot be read.
        """
        pass

    @abstractmethod
    def get_by_id(self, exercise_id: str) -> Exercise | None:
        """Load a single exercise by ID.

        Args:
            exercise_id: The exercise ID.

        Returns:
            The exercise, or None if not found.
        """
        pass

    @abstractmethod
    def list_for_topic(self, topic_id: str) -> list[Exercise]:
        """Load every active exercise for a topic."""
        pass

    @abstractmethod
    def save(self, exercise: Exercise) -> None:
        """Store a new exercise.

        Raises:
            ExerciseStoreError: if an exercise with the same ID exists.
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of active exercises."""
        pass
