"""Tests for the storage layer."""

import sqlite3

import pytest

from exercises.generic_models import Exercise
from models import DifficultyTier
from storage import (
    SAMPLE_EXERCISES,
    ExerciseStoreError,
    SQLiteExerciseStore,
    get_connection,
    get_exercise_store,
    sample_exercises,
    seed_sample_exercises,
)


class TestSQLiteExerciseStore:
    """Tests for SQLiteExerciseStore."""

    def test_creates_schema(self, test_db_path):
        SQLiteExerciseStore(test_db_path)
        conn = get_connection(test_db_path)
        try:
            tables = {
                row["name"]
                for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")
            }
        finally:
            conn.close()
        assert "exercises" in tables

    def test_empty_store(self, store):
        assert store.count() == 0
        assert store.find_for_topic("g1-order-numbers") is None
        assert store.get_by_id("missing") is None
        assert store.list_for_topic("g1-order-numbers") == []

    def test_save_and_load_round_trip(self, store, registry):
        exercise = registry.generate("g4-mul-steps", "hard", 3)
        store.save(exercise)
        assert store.get_by_id(exercise.id) == exercise
        assert store.find_for_topic("g4-mul-steps") == exercise
        assert store.count() == 1

    def test_save_duplicate_raises(self, store, choice_exercise):
        store.save(choice_exercise)
        with pytest.raises(ExerciseStoreError, match="already exists"):
            store.save(choice_exercise)

    def test_find_filters_by_difficulty(self, store, registry):
        easy = registry.generate("g1-order-numbers", "easy", 1)
        hard = registry.generate("g1-order-numbers", "hard", 1)
        store.save(easy)
        store.save(hard)
        assert store.find_for_topic("g1-order-numbers", DifficultyTier.HARD) == hard
        assert store.find_for_topic("g1-order-numbers", "easy") == easy
        assert store.find_for_topic("g1-order-numbers", DifficultyTier.MEDIUM) is None

    def test_single_match_is_returned_every_time(self, store, registry):
        easy = registry.generate("g1-order-numbers", "easy", 1)
        store.save(easy)
        found = {store.find_for_topic("g1-order-numbers", "easy").id for _ in range(5)}
        assert found == {easy.id}

    def test_inactive_exercises_are_hidden(self, store, test_db_path, choice_exercise):
        store.save(choice_exercise)
        conn = get_connection(test_db_path)
        conn.execute("UPDATE exercises SET is_active = 0")
        conn.commit()
        conn.close()
        assert store.find_for_topic(choice_exercise.topic_id) is None
        assert store.count() == 0

    def test_invalid_record_raises_store_error(self, store, test_db_path):
        conn = get_connection(test_db_path)
        conn.execute(
            "INSERT INTO exercises (id, topic_id, variant, difficulty, record) "
            "VALUES ('bad', 't', 'choice', 'easy', '{\"id\": \"bad\"}')"
        )
        conn.commit()
        conn.close()
        with pytest.raises(ExerciseStoreError):
            store.get_by_id("bad")

    def test_missing_schema_raises_store_error(self, test_db_path):
        sqlite3.connect(test_db_path).close()
        store = SQLiteExerciseStore(test_db_path, create=False)
        with pytest.raises(ExerciseStoreError):
            store.count()

    def test_factory(self, test_db_path):
        store = get_exercise_store(test_db_path)
        assert isinstance(store, SQLiteExerciseStore)
        assert test_db_path.exists()


class TestSampleExercises:
    """The bundled sample records."""

    def test_samples_parse(self):
        exercises = sample_exercises()
        assert len(exercises) == len(SAMPLE_EXERCISES)
        assert all(isinstance(e, Exercise) for e in exercises)

    def test_records_round_trip(self):
        for record in SAMPLE_EXERCISES:
            exercise = Exercise.from_record(record)
            assert Exercise.from_record(exercise.to_record()) == exercise
            assert exercise.to_record()["topicId"] == record["topicId"]

    def test_seed_is_idempotent(self, store):
        assert seed_sample_exercises(store) == len(SAMPLE_EXERCISES)
        assert seed_sample_exercises(store) == 0
        assert store.count() == len(SAMPLE_EXERCISES)
