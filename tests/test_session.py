"""Tests for the practice session orchestrator."""

import itertools

import pytest

from exercises.answers import correct_submission, wrong_submission
from models import DifficultyTier, ExerciseSource, Variant
from session import (
    ATTEMPT_GRADED,
    EXERCISE_READY,
    MASTERED,
    SKIP_ANSWER,
    PracticeSession,
    SessionEvents,
    stub_exercise,
    wall_clock_seed,
)
from storage import ExerciseStore, ExerciseStoreError, seed_sample_exercises


def counter_seeds(start: int = 0):
    seeds = itertools.count(start)
    return lambda: next(seeds)


class FailingStore(ExerciseStore):
    """A store whose every read fails."""

    def find_for_topic(self, topic_id, difficulty=None):
        raise ExerciseStoreError("disk on fire")

    def get_by_id(self, exercise_id):
        raise ExerciseStoreError("disk on fire")

    def list_for_topic(self, topic_id):
        raise ExerciseStoreError("disk on fire")

    def save(self, exercise):
        raise ExerciseStoreError("disk on fire")

    def count(self):
        return 0


class TestExerciseSources:
    """Where each exercise comes from."""

    def test_generates_without_store(self, registry):
        session = PracticeSession("g1-order-numbers", registry=registry, seed_source=lambda: 5)
        exercise = session.next_exercise()
        assert session.current_source == ExerciseSource.GENERATOR
        assert exercise == registry.generate("g1-order-numbers", DifficultyTier.EASY, 5)

    def test_first_exercise_is_easy(self, registry):
        session = PracticeSession("g2-add-two-2digit", registry=registry)
        assert session.next_exercise().difficulty == DifficultyTier.EASY

    def test_prefers_stored_exercise(self, registry, store):
        seed_sample_exercises(store)
        session = PracticeSession("nl-find-integer", registry=registry, store=store)
        session.state.score.score = 50
        exercise = session.next_exercise()
        assert session.current_source == ExerciseSource.STORE
        assert exercise.id == "NL_nl-find-integer_sample"

    def test_stored_exercise_must_match_tier(self, registry, store):
        seed_sample_exercises(store)
        session = PracticeSession("nl-find-integer", registry=registry, store=store)
        session.next_exercise()
        assert session.current_source == ExerciseSource.GENERATOR

    def test_store_failure_falls_back_to_generator(self, registry):
        session = PracticeSession(
            "g1-order-numbers", registry=registry, store=FailingStore(), seed_source=lambda: 1
        )
        session.next_exercise()
        assert session.current_source == ExerciseSource.GENERATOR

    def test_unknown_topic_gives_stub(self, registry):
        session = PracticeSession("g5-mul-numbers", registry=registry)
        exercise = session.next_exercise()
        assert session.current_source == ExerciseSource.STUB
        assert exercise.variant == Variant.FREE_TEXT
        assert exercise.id == "STUB_g5-mul-numbers"
        assert "Generator not found" in exercise.prompt.text

    def test_stub_accepts_skip(self, registry):
        session = PracticeSession("no-such-topic", registry=registry)
        session.next_exercise()
        attempt = session.submit(SKIP_ANSWER)
        assert attempt.correct
        assert attempt.source == ExerciseSource.STUB

    def test_seed_source_is_called_once_per_generation(self, registry):
        calls = []

        def seeds():
            calls.append(1)
            return len(calls)

        session = PracticeSession("npv-comparing", registry=registry, seed_source=seeds)
        session.next_exercise()
        session.next_exercise()
        assert len(calls) == 2


class TestGrading:
    """Submitting answers."""

    def test_correct_answer_raises_score(self, registry):
        session = PracticeSession("g1-add-making-10", registry=registry, seed_source=counter_seeds())
        exercise = session.next_exercise()
        attempt = session.submit(correct_submission(exercise))
        assert attempt.correct
        assert attempt.score_before == 0
        assert attempt.score_after == 10
        assert session.state.score.streak == 1

    def test_wrong_answer_keeps_score_at_floor(self, registry):
        session = PracticeSession("g1-add-making-10", registry=registry)
        exercise = session.next_exercise()
        attempt = session.submit(wrong_submission(exercise))
        assert not attempt.correct
        assert attempt.score_after == 0

    def test_malformed_answer_is_wrong(self, registry):
        session = PracticeSession("g4-mul-steps", registry=registry)
        session.next_exercise()
        assert not session.submit("not json").correct

    def test_submit_without_exercise_raises(self, registry):
        session = PracticeSession("g1-order-numbers", registry=registry)
        with pytest.raises(RuntimeError):
            session.submit("anything")

    def test_exercise_is_consumed_by_submit(self, registry):
        session = PracticeSession("g1-order-numbers", registry=registry)
        exercise = session.next_exercise()
        session.submit(correct_submission(exercise))
        assert session.current is None
        assert session.state.exercises_completed == 1
        assert session.state.correct_count == 1


class TestAdaptation:
    """Difficulty follows the score."""

    def test_tier_rises_with_correct_answers(self, registry):
        session = PracticeSession(
            "g3-add-with-regrouping", registry=registry, seed_source=counter_seeds()
        )
        tiers = []
        while not session.is_mastered:
            exercise = session.next_exercise()
            tiers.append(exercise.difficulty)
            session.submit(correct_submission(exercise))

        assert len(tiers) == 29
        assert tiers[0] == DifficultyTier.EASY
        assert tiers[4] == DifficultyTier.MEDIUM
        assert tiers[-1] == DifficultyTier.HARD
        assert tiers == sorted(tiers, key=list(DifficultyTier).index)

    def test_challenge_zone(self, registry):
        session = PracticeSession("g1-order-numbers", registry=registry)
        session.state.score.score = 90
        assert session.is_challenge_zone
        assert session.difficulty == DifficultyTier.HARD


class TestEvents:
    """Session events are delivered through the shared events object."""

    def test_events_are_published(self, registry):
        events = SessionEvents()
        seen = []
        events.subscribe(EXERCISE_READY, lambda **kw: seen.append((EXERCISE_READY, kw)))
        events.subscribe(ATTEMPT_GRADED, lambda **kw: seen.append((ATTEMPT_GRADED, kw)))

        session = PracticeSession("npv-even-odd", registry=registry, events=events)
        exercise = session.next_exercise()
        session.submit(correct_submission(exercise))

        assert [name for name, _ in seen] == [EXERCISE_READY, ATTEMPT_GRADED]
        assert seen[0][1]["exercise"] is exercise
        assert seen[0][1]["source"] == ExerciseSource.GENERATOR
        assert seen[1][1]["attempt"].correct

    def test_mastered_event(self, registry):
        session = PracticeSession("npv-even-odd", registry=registry)
        mastered = []
        session.events.subscribe(MASTERED, lambda topic_id, state: mastered.append(topic_id))
        session.state.score.score = 99
        exercise = session.next_exercise()
        session.submit(correct_submission(exercise))
        assert mastered == ["npv-even-odd"]

    def test_unsubscribe(self):
        events = SessionEvents()
        seen = []
        unsubscribe = events.subscribe("ping", lambda **kw: seen.append(kw))
        events.publish("ping", n=1)
        unsubscribe()
        unsubscribe()
        events.publish("ping", n=2)
        assert seen == [{"n": 1}]


class TestHelpers:
    def test_wall_clock_seed_is_int(self):
        assert isinstance(wall_clock_seed(), int)

    def test_stub_exercise(self):
        stub = stub_exercise("x", DifficultyTier.HARD, "missing")
        assert stub.payload.answer == SKIP_ANSWER
        assert stub.explanation.text == "missing"
        assert stub.difficulty == DifficultyTier.HARD
