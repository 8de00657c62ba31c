"""Practice session: fetch or generate an exercise, grade it, adapt difficulty."""

import time
from collections import defaultdict
from typing import Any, Callable

from loguru import logger

from exercises.errors import TopicError
from exercises.generic_models import Exercise, Explanation, FreeTextPayload, Prompt
from exercises.registry import TopicRegistry, get_default_registry
from exercises.validators import validate
from models import (
    AttemptRecord,
    DifficultyTier,
    ExerciseSource,
    SessionState,
    Variant,
)
from scoring import (
    ScoringConfig,
    apply_result,
    is_challenge_zone,
    is_mastered,
    next_difficulty,
)
from storage.base import ExerciseStore

EXERCISE_READY = "exercise_ready"
ATTEMPT_GRADED = "attempt_graded"
MASTERED = "mastered"

SKIP_ANSWER = "skip"

Listener = Callable[..., None]


def wall_clock_seed() -> int:
    """Seed from the current time in milliseconds."""
    return time.time_ns() // 1_000_000


def stub_exercise(topic_id: str, difficulty: DifficultyTier, reason: str) -> Exercise:
    """Placeholder exercise for a topic that cannot be generated."""
    return Exercise(
        id=f"STUB_{topic_id}",
        topic_id=topic_id,
        variant=Variant.FREE_TEXT,
        difficulty=difficulty,
        prompt=Prompt(text=f"Generator not found. Type '{SKIP_ANSWER}' to continue."),
        explanation=Explanation(text=reason),
        payload=FreeTextPayload(answer=SKIP_ANSWER),
    )


class SessionEvents:
    """Subscription object shared by reference between a session and its observers."""

    def __init__(self):
        self._listeners: dict[str, list[Listener]] = defaultdict(list)

    def subscribe(self, event: str, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it again."""
        self._listeners[event].append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners[event]:
                self._listeners[event].remove(listener)

        return unsubscribe

    def publish(self, event: str, **payload: Any) -> None:
        for listener in list(self._listeners[event]):
            listener(**payload)


class PracticeSession:
    """One learner practicing one topic until they stop or master it.

    Each exercise comes from the store when it has one for the topic,
    otherwise from the topic registry with a fresh seed. Topics the
    registry cannot build are replaced by a stub exercise.
    """

    def __init__(
        self,
        topic_id: str,
        registry: TopicRegistry | None = None,
        store: ExerciseStore | None = None,
        seed_source: Callable[[], int] = wall_clock_seed,
        scoring_config: ScoringConfig | None = None,
        events: SessionEvents | None = None,
    ):
        self.topic_id = topic_id
        self.registry = registry or get_default_registry()
        self.store = store
        self.seed_source = seed_source
        self.scoring_config = scoring_config
        self.events = events or SessionEvents()
        self.state = SessionState(topic_id=topic_id)
        self.current: Exercise | None = None
        self.current_source: ExerciseSource | None = None

    @property
    def difficulty(self) -> DifficultyTier:
        return next_difficulty(self.state.score.score, self.scoring_config)

    @property
    def is_mastered(self) -> bool:
        return is_mastered(self.state.score.score, self.scoring_config)

    @property
    def is_challenge_zone(self) -> bool:
        return is_challenge_zone(self.state.score.score, self.scoring_config)

    def next_exercise(self) -> Exercise:
        """Obtain the exercise for the next attempt."""
        difficulty = self.difficulty
        exercise = self._from_store(difficulty)
        source = ExerciseSource.STORE

        if exercise is None:
            seed = self.seed_source()
            try:
                exercise = self.registry.generate(self.topic_id, difficulty, seed)
                source = ExerciseSource.GENERATOR
            except TopicError as e:
                logger.error("Cannot generate {}: {}", self.topic_id, e)
                exercise = stub_exercise(self.topic_id, difficulty, str(e))
                source = ExerciseSource.STUB

        self.current = exercise
        self.current_source = source
        self.events.publish(
            EXERCISE_READY, exercise=exercise, source=source, difficulty=difficulty
        )
        return exercise

    def submit(self, answer: Any) -> AttemptRecord:
        """Grade an answer to the current exercise and update the score."""
        if self.current is None:
            raise RuntimeError("No exercise in progress; call next_exercise() first")

        exercise = self.current
        correct = validate(exercise, answer)
        score = self.state.score
        before = score.score
        apply_result(score, correct, self.scoring_config)

        attempt = AttemptRecord(
            exercise_id=exercise.id,
            topic_id=exercise.topic_id,
            difficulty=exercise.difficulty,
            source=self.current_source,
            correct=correct,
            score_before=before,
            score_after=score.score,
            streak_after=score.streak,
        )
        self.state.history.append(attempt)
        self.current = None

        self.events.publish(ATTEMPT_GRADED, exercise=exercise, attempt=attempt)
        if self.is_mastered:
            self.events.publish(MASTERED, topic_id=self.topic_id, state=self.state)
        return attempt

    def _from_store(self, difficulty: DifficultyTier) -> Exercise | None:
        if self.store is None:
            return None
        try:
            return self.store.find_for_topic(self.topic_id, difficulty)
        except Exception as e:
            logger.warning(
                "Exercise store lookup failed for {}, generating instead: {}",
                self.topic_id,
                e,
            )
            return None
