from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DifficultyTier(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Variant(str, Enum):
    """Structural shape of an exercise and of the answer it expects."""

    CHOICE = "choice"
    ORDERING = "ordering"
    BLANK_FILL = "blank-fill"
    GRID_FILL = "grid-fill"
    POINT_PLOT = "point-plot"
    CATEGORIZE = "categorize"
    NUMBER_LINE = "number-line"
    FREE_TEXT = "free-text"


class ExerciseSource(str, Enum):
    """Where the session obtained an exercise from."""

    STORE = "store"
    GENERATOR = "generator"
    STUB = "stub"


# ============================================================================
# Scoring Models
# ============================================================================


class ScoreState(BaseModel):
    """Running mastery state for one practice session.

    Created when the session starts and mutated only by the scoring engine
    after each graded attempt. Never persisted.
    """

    model_config = ConfigDict(validate_assignment=True)

    score: int = Field(default=0, ge=0, le=100)
    streak: int = Field(default=0, ge=0)
    attempt_count: int = Field(default=0, ge=0)


class AttemptRecord(BaseModel):
    """One graded attempt, kept in the session history."""

    exercise_id: str
    topic_id: str
    difficulty: DifficultyTier
    source: ExerciseSource
    correct: bool
    score_before: int
    score_after: int
    streak_after: int


class SessionState(BaseModel):
    """Tracks the current session's progress."""

    topic_id: str
    score: ScoreState = Field(default_factory=ScoreState)
    history: list[AttemptRecord] = Field(default_factory=list)

    @property
    def exercises_completed(self) -> int:
        return len(self.history)

    @property
    def correct_count(self) -> int:
        return sum(1 for attempt in self.history if attempt.correct)
