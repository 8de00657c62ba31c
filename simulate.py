"""Core simulation logic for the learner simulator."""

import json
import random
from collections import Counter
from datetime import datetime
from pathlib import Path

from loguru import logger

from exercises.answers import correct_submission, wrong_submission
from exercises.generic_models import Exercise
from exercises.registry import TopicRegistry
from models import AttemptRecord
from scoring import ScoringConfig
from session import PracticeSession
from simulator_models import SimulatedLearnerConfig, SimulationResults


class ResponseGenerator:
    """Generates simulated learner answers."""

    def __init__(self, config: SimulatedLearnerConfig, rng: random.Random):
        self.config = config
        self.rng = rng

    def generate_response(self, exercise: Exercise) -> tuple[str, bool]:
        """
        Decide whether the learner gets the exercise right, and return the
        submission they would type together with that intent.

        The chance of a correct answer depends only on the exercise's
        difficulty tier.
        """
        p_correct = self.config.accuracy_for(exercise.difficulty)
        if self.rng.random() < p_correct:
            return correct_submission(exercise), True
        return wrong_submission(exercise), False


class Simulator:
    """Runs one practice session with a simulated learner."""

    def __init__(
        self,
        topic_id: str,
        config: SimulatedLearnerConfig,
        seed: int | None = None,
        registry: TopicRegistry | None = None,
        scoring_config: ScoringConfig | None = None,
    ):
        self.topic_id = topic_id
        self.config = config
        self.seed = seed
        self.rng = random.Random(seed)
        self.response_generator = ResponseGenerator(config, self.rng)
        self.session = PracticeSession(
            topic_id,
            registry=registry,
            seed_source=self._next_seed,
            scoring_config=scoring_config,
        )

    def _next_seed(self) -> int:
        return self.rng.randrange(2**31)

    def run(self, verbose: bool = False) -> SimulationResults:
        """Run until the topic is mastered or the attempt limit is reached."""
        start_time = datetime.now()
        trajectory = [self.session.state.score.score]
        attempts_to_mastery = None

        for attempt_number in range(1, self.config.max_attempts + 1):
            exercise = self.session.next_exercise()
            submission, _ = self.response_generator.generate_response(exercise)
            attempt = self.session.submit(submission)
            trajectory.append(attempt.score_after)

            if verbose:
                self._print_attempt(attempt_number, attempt)

            if self.session.is_mastered:
                attempts_to_mastery = attempt_number
                break

        end_time = datetime.now()
        return self._compile_results(start_time, end_time, trajectory, attempts_to_mastery)

    def _print_attempt(self, attempt_number: int, attempt: AttemptRecord) -> None:
        """Print verbose attempt result."""
        status = "correct" if attempt.correct else "incorrect"
        print(
            f"  #{attempt_number:3d} {attempt.exercise_id} [{attempt.difficulty.value}] "
            f"- {status} | score {attempt.score_before} -> {attempt.score_after}, "
            f"streak {attempt.streak_after}"
        )

    def _compile_results(
        self,
        start_time: datetime,
        end_time: datetime,
        trajectory: list[int],
        attempts_to_mastery: int | None,
    ) -> SimulationResults:
        """Compile all results into final output."""
        history = self.session.state.history
        total_correct = sum(1 for a in history if a.correct)
        by_difficulty = Counter(a.difficulty.value for a in history)

        results = SimulationResults(
            config=self.config,
            topic_id=self.topic_id,
            random_seed=self.seed,
            start_time=start_time,
            end_time=end_time,
            total_attempts=len(history),
            total_correct=total_correct,
            overall_accuracy=total_correct / len(history) if history else 0.0,
            final_score=self.session.state.score.score,
            mastered=self.session.is_mastered,
            attempts_to_mastery=attempts_to_mastery,
            trajectory=trajectory,
            attempts_by_difficulty=dict(by_difficulty),
            attempts=list(history),
        )
        logger.info(
            "Simulated {} attempts on {}: final score {}",
            results.total_attempts,
            self.topic_id,
            results.final_score,
        )
        return results


def print_console_summary(results: SimulationResults) -> None:
    """Print formatted console summary of simulation results."""
    print()
    print("=" * 80)
    print("                        SIMULATION COMPLETE")
    print("=" * 80)
    print()
    print("Configuration:")
    print(f"  Topic:              {results.topic_id}")
    print(f"  Max attempts:       {results.config.max_attempts}")
    print()
    print("Learner Parameters:")
    print(f"  Easy accuracy:      {results.config.easy_accuracy:.2f}")
    print(f"  Medium accuracy:    {results.config.medium_accuracy:.2f}")
    print(f"  Hard accuracy:      {results.config.hard_accuracy:.2f}")
    print()
    print("=" * 80)
    print("                        OVERALL RESULTS")
    print("=" * 80)
    print()
    print(
        f"Total correct:        {results.total_correct} / {results.total_attempts} "
        f"({results.overall_accuracy * 100:.1f}%)"
    )
    print(f"Final score:          {results.final_score}")
    if results.mastered:
        print(f"Mastered after:       {results.attempts_to_mastery} attempts")
    else:
        print("Mastered:             no")
    print()

    print("By difficulty:")
    for tier in ("easy", "medium", "hard"):
        print(f"  {tier:8s} {results.attempts_by_difficulty.get(tier, 0):5d}")
    print()


def save_json_results(results: SimulationResults, output_path: Path) -> None:
    """Save simulation results to JSON file."""
    data = json.loads(results.model_dump_json())

    with open(output_path, "w") as f:
        json.dump(data, f, indent=2, default=str)


def run_simulation_and_report(
    topic_id: str,
    config: SimulatedLearnerConfig,
    output_path: Path,
    verbose: bool = False,
    seed: int | None = None,
) -> SimulationResults:
    """Run simulation and generate all outputs."""
    simulator = Simulator(topic_id, config, seed=seed)
    results = simulator.run(verbose)

    print_console_summary(results)

    save_json_results(results, output_path)
    print(f"Results saved to: {output_path}")

    return results
