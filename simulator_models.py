"""Data models for the learner simulator."""

from datetime import datetime
from pydantic import BaseModel, Field

from models import AttemptRecord, DifficultyTier


class SimulatedLearnerConfig(BaseModel):
    """Configuration for a simulated learner's answering behavior."""

    # Probability of answering correctly at each difficulty tier
    # (0.95 = strong, 0.8 = average, 0.5 = struggling)
    easy_accuracy: float = Field(default=0.9, ge=0.0, le=1.0)
    medium_accuracy: float = Field(default=0.8, ge=0.0, le=1.0)
    hard_accuracy: float = Field(default=0.65, ge=0.0, le=1.0)

    # Session stops here if the topic was not mastered earlier
    max_attempts: int = Field(default=200, ge=1)

    def accuracy_for(self, difficulty: DifficultyTier) -> float:
        return {
            DifficultyTier.EASY: self.easy_accuracy,
            DifficultyTier.MEDIUM: self.medium_accuracy,
            DifficultyTier.HARD: self.hard_accuracy,
        }[difficulty]


class SimulationResults(BaseModel):
    """Complete results of a simulation run."""

    # Configuration
    config: SimulatedLearnerConfig
    topic_id: str
    random_seed: int | None
    start_time: datetime
    end_time: datetime

    # Summary statistics
    total_attempts: int
    total_correct: int
    overall_accuracy: float
    final_score: int
    mastered: bool
    attempts_to_mastery: int | None = None

    # Score after each attempt, starting with the initial score
    trajectory: list[int]
    attempts_by_difficulty: dict[str, int] = Field(default_factory=dict)
    attempts: list[AttemptRecord] = Field(default_factory=list)
