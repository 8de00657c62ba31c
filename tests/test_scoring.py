"""Tests for the adaptive scoring engine."""

import pytest
from pydantic import ValidationError

from models import DifficultyTier, ScoreState
from scoring import (
    ScoreBand,
    ScoringConfig,
    apply_result,
    is_challenge_zone,
    is_mastered,
    next_difficulty,
    score_delta,
)


class TestCorrectBands:
    """Gains shrink as the score rises."""

    @pytest.mark.parametrize(
        "before,after",
        [(0, 10), (45, 55), (49, 59), (50, 55), (65, 70), (70, 72), (89, 91), (95, 96)],
    )
    def test_band_gain(self, before, after):
        state = ScoreState(score=before)
        apply_result(state, True)
        assert state.score == after

    def test_clamped_at_100(self):
        state = ScoreState(score=99)
        apply_result(state, True)
        assert state.score == 100
        apply_result(state, True)
        assert state.score == 100

    def test_band_uses_score_before_update(self):
        # 45 is in the +10 band even though the result lands in the +5 band.
        assert score_delta(45, True) == 10


class TestPenaltyBands:
    """Losses grow as the score rises."""

    @pytest.mark.parametrize(
        "before,after", [(10, 8), (49, 47), (50, 46), (75, 69), (90, 82), (100, 92)]
    )
    def test_band_penalty(self, before, after):
        state = ScoreState(score=before)
        apply_result(state, False)
        assert state.score == after

    def test_clamped_at_zero(self):
        state = ScoreState(score=1)
        apply_result(state, False)
        assert state.score == 0
        apply_result(state, False)
        assert state.score == 0


class TestStreakAndAttempts:
    def test_streak_counts_consecutive_correct(self):
        state = ScoreState()
        for _ in range(3):
            apply_result(state, True)
        assert state.streak == 3
        apply_result(state, False)
        assert state.streak == 0
        assert state.attempt_count == 4

    def test_returns_same_state(self):
        state = ScoreState()
        assert apply_result(state, True) is state

    def test_score_stays_in_bounds_over_long_runs(self):
        state = ScoreState()
        for i in range(300):
            apply_result(state, i % 3 != 0)
            assert 0 <= state.score <= 100


class TestDifficulty:
    @pytest.mark.parametrize(
        "score,tier",
        [
            (0, DifficultyTier.EASY),
            (39, DifficultyTier.EASY),
            (40, DifficultyTier.MEDIUM),
            (79, DifficultyTier.MEDIUM),
            (80, DifficultyTier.HARD),
            (100, DifficultyTier.HARD),
        ],
    )
    def test_next_difficulty(self, score, tier):
        assert next_difficulty(score) == tier

    def test_challenge_zone_and_mastery(self):
        assert not is_challenge_zone(89)
        assert is_challenge_zone(90)
        assert not is_mastered(99)
        assert is_mastered(100)

    def test_all_correct_reaches_mastery(self):
        state = ScoreState()
        attempts = 0
        while not is_mastered(state.score):
            apply_result(state, True)
            attempts += 1
        # 5×10, 4×5, 10×2, 10×1
        assert attempts == 29


class TestScoringConfig:
    def test_custom_thresholds(self):
        config = ScoringConfig(medium_threshold=10, hard_threshold=20)
        assert next_difficulty(15, config) == DifficultyTier.MEDIUM
        assert next_difficulty(20, config) == DifficultyTier.HARD

    def test_custom_bands(self):
        config = ScoringConfig(correct_bands=[ScoreBand(floor=0, delta=50)])
        state = ScoreState(score=60)
        apply_result(state, True, config)
        assert state.score == 100

    def test_bands_must_start_at_zero(self):
        with pytest.raises(ValidationError):
            ScoringConfig(penalty_bands=[ScoreBand(floor=10, delta=1)])

    def test_thresholds_must_be_ordered(self):
        with pytest.raises(ValidationError):
            ScoringConfig(medium_threshold=90, hard_threshold=50)

    def test_score_state_rejects_out_of_range(self):
        with pytest.raises(ValidationError):
            ScoreState(score=101)
