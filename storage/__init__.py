"""Storage layer for the practice engine.

Provides the exercise store interface and its SQLite implementation. The
store holds hand-authored exercises that a session prefers over generated
ones.
"""

from pathlib import Path

from .base import ExerciseStore, ExerciseStoreError
from .connection import DEFAULT_DB_PATH, get_connection, init_schema
from .seed import SAMPLE_EXERCISES, sample_exercises, seed_sample_exercises
from .sqlite import SQLiteExerciseStore

__all__ = [
    # Abstract interfaces
    "ExerciseStore",
    "ExerciseStoreError",
    # SQLite implementations
    "SQLiteExerciseStore",
    # Connection utilities
    "get_connection",
    "init_schema",
    "DEFAULT_DB_PATH",
    # Sample data
    "SAMPLE_EXERCISES",
    "sample_exercises",
    "seed_sample_exercises",
    # Factory functions
    "get_exercise_store",
]


def get_exercise_store(db_path: Path = DEFAULT_DB_PATH) -> ExerciseStore:
    """Get an ExerciseStore instance, creating the schema if needed."""
    return SQLiteExerciseStore(db_path)
