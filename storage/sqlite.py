"""SQLite implementation of the exercise store."""

import sqlite3
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from exercises.generic_models import Exercise
from models import DifficultyTier
from .base import ExerciseStore, ExerciseStoreError
from .connection import DEFAULT_DB_PATH, get_connection, init_schema


class SQLiteExerciseStore(ExerciseStore):
    """SQLite implementation of ExerciseStore.

    Every sqlite3 failure is re-raised as ExerciseStoreError.
    """

    def __init__(self, db_path: Path = DEFAULT_DB_PATH, create: bool = True):
        self.db_path = db_path
        if create:
            try:
                init_schema(db_path)
            except (sqlite3.Error, OSError) as e:
                raise ExerciseStoreError(f"Cannot open exercise store {db_path}: {e}") from e

    def find_for_topic(
        self, topic_id: str, difficulty: DifficultyTier | None = None
    ) -> Exercise | None:
        """Pick a random active exercise for a topic.

        With a single stored exercise for the topic and tier, every call
        returns that same exercise.
        """
        query = "SELECT record FROM exercises WHERE topic_id = ? AND is_active = 1"
        params: tuple = (topic_id,)
        if difficulty is not None:
            query += " AND difficulty = ?"
            params += (DifficultyTier(difficulty).value,)
        query += " ORDER BY RANDOM() LIMIT 1"

        rows = self._fetch(query, params)
        return self._row_to_model(rows[0]) if rows else None

    def get_by_id(self, exercise_id: str) -> Exercise | None:
        """Load a single exercise by ID."""
        rows = self._fetch("SELECT record FROM exercises WHERE id = ?", (exercise_id,))
        return self._row_to_model(rows[0]) if rows else None

    def list_for_topic(self, topic_id: str) -> list[Exercise]:
        """Load every active exercise for a topic, oldest first."""
        rows = self._fetch(
            "SELECT record FROM exercises WHERE topic_id = ? AND is_active = 1 "
            "ORDER BY created_at, id",
            (topic_id,),
        )
        return [self._row_to_model(row) for row in rows]

    def save(self, exercise: Exercise) -> None:
        """Store a new exercise."""
        try:
            conn = get_connection(self.db_path)
            try:
                conn.execute(
                    """INSERT INTO exercises (id, topic_id, variant, difficulty, record)
                    VALUES (?, ?, ?, ?, ?)""",
                    (
                        exercise.id,
                        exercise.topic_id,
                        exercise.variant.value,
                        exercise.difficulty.value,
                        exercise.to_json(),
                    ),
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.IntegrityError as e:
            raise ExerciseStoreError(f"Exercise {exercise.id} already exists") from e
        except sqlite3.Error as e:
            raise ExerciseStoreError(f"Could not save exercise {exercise.id}: {e}") from e
        logger.debug("Stored exercise {} for {}", exercise.id, exercise.topic_id)

    def count(self) -> int:
        """Number of active exercises."""
        rows = self._fetch("SELECT COUNT(*) AS n FROM exercises WHERE is_active = 1", ())
        return rows[0]["n"]

    def _fetch(self, query: str, params: tuple) -> list[sqlite3.Row]:
        try:
            conn = get_connection(self.db_path)
            try:
                return conn.execute(query, params).fetchall()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise ExerciseStoreError(f"Exercise store query failed: {e}") from e

    def _row_to_model(self, row: sqlite3.Row) -> Exercise:
        """Convert a database row to an Exercise model."""
        try:
            return Exercise.from_json(row["record"])
        except ValidationError as e:
            raise ExerciseStoreError(f"Stored exercise record is invalid: {e}") from e
