from loguru import logger
from pydantic import BaseModel, Field, model_validator

from models import DifficultyTier, ScoreState

MAX_SCORE = 100


class ScoreBand(BaseModel):
    """Delta applied when the pre-update score is at least ``floor``."""

    floor: int = Field(ge=0, le=MAX_SCORE)
    delta: int = Field(ge=0)


class ScoringConfig(BaseModel):
    """Score bands and difficulty thresholds.

    Bands are evaluated on the score before the update; the band with the
    highest floor not above the score applies.
    """

    correct_bands: list[ScoreBand] = Field(
        default_factory=lambda: [
            ScoreBand(floor=0, delta=10),
            ScoreBand(floor=50, delta=5),
            ScoreBand(floor=70, delta=2),
            ScoreBand(floor=90, delta=1),
        ]
    )
    # Penalties grow with the score.
    penalty_bands: list[ScoreBand] = Field(
        default_factory=lambda: [
            ScoreBand(floor=0, delta=2),
            ScoreBand(floor=50, delta=4),
            ScoreBand(floor=70, delta=6),
            ScoreBand(floor=90, delta=8),
        ]
    )
    medium_threshold: int = Field(default=40, ge=0, le=MAX_SCORE)
    hard_threshold: int = Field(default=80, ge=0, le=MAX_SCORE)
    challenge_threshold: int = Field(default=90, ge=0, le=MAX_SCORE)
    mastery_score: int = Field(default=MAX_SCORE, ge=0, le=MAX_SCORE)

    @model_validator(mode="after")
    def check_bands(self) -> "ScoringConfig":
        for name in ("correct_bands", "penalty_bands"):
            bands = getattr(self, name)
            if not bands or min(band.floor for band in bands) != 0:
                raise ValueError(f"{name} must include a band starting at 0")
        if self.medium_threshold > self.hard_threshold:
            raise ValueError("medium_threshold must not exceed hard_threshold")
        return self


DEFAULT_CONFIG = ScoringConfig()


def _band_delta(bands: list[ScoreBand], score: int) -> int:
    applicable = [band for band in bands if band.floor <= score]
    return max(applicable, key=lambda band: band.floor).delta


def score_delta(score: int, correct: bool, config: ScoringConfig | None = None) -> int:
    """Signed change to apply to ``score`` for one graded attempt (before clamping)."""
    config = config or DEFAULT_CONFIG
    if correct:
        return _band_delta(config.correct_bands, score)
    return -_band_delta(config.penalty_bands, score)


def apply_result(
    state: ScoreState, correct: bool, config: ScoringConfig | None = None
) -> ScoreState:
    """
    Update the score state in place after one graded attempt.

    - Correct: streak + 1, score raised by the band delta, clamped to 100
    - Incorrect: streak reset to 0, score lowered by the band penalty, clamped to 0

    Returns the same state object.
    """
    before = state.score
    after = before + score_delta(before, correct, config)

    state.score = max(0, min(MAX_SCORE, after))
    state.streak = state.streak + 1 if correct else 0
    state.attempt_count += 1

    logger.info(
        "Score {} -> {} ({}, streak {})",
        before,
        state.score,
        "correct" if correct else "incorrect",
        state.streak,
    )
    return state


def next_difficulty(score: int, config: ScoringConfig | None = None) -> DifficultyTier:
    """Tier for the next exercise, from the current score alone."""
    config = config or DEFAULT_CONFIG
    if score < config.medium_threshold:
        return DifficultyTier.EASY
    if score < config.hard_threshold:
        return DifficultyTier.MEDIUM
    return DifficultyTier.HARD


def is_challenge_zone(score: int, config: ScoringConfig | None = None) -> bool:
    return score >= (config or DEFAULT_CONFIG).challenge_threshold


def is_mastered(score: int, config: ScoringConfig | None = None) -> bool:
    return score >= (config or DEFAULT_CONFIG).mastery_score
