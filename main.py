import argparse
import json
import signal
import sys
from pathlib import Path

from loguru import logger
from rich.console import Console

from curriculum import GRADES, find_topic
from exercises import describe_answer, get_default_registry
from exercises.errors import TopicError
from menu import TopicSelectionMenu
from models import DifficultyTier
from session import ATTEMPT_GRADED, PracticeSession
from storage import (
    DEFAULT_DB_PATH,
    ExerciseStore,
    ExerciseStoreError,
    get_exercise_store,
    seed_sample_exercises,
)
from ui import QUIT, PracticeUI


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; debug level when verbose."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(description="Math Practice")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging on stderr",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Practice subcommand (the default)
    practice_parser = subparsers.add_parser("practice", help="Practice a topic")
    add_practice_arguments(practice_parser)

    # Generate subcommand
    gen_parser = subparsers.add_parser(
        "generate", help="Print a generated exercise as JSON"
    )
    gen_parser.add_argument("topic", help="Topic id (or alias)")
    gen_parser.add_argument(
        "--difficulty",
        "-d",
        choices=[d.value for d in DifficultyTier],
        default=DifficultyTier.EASY.value,
        help="Difficulty tier (default: easy)",
    )
    gen_parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Generation seed (default: 0)",
    )

    # Topics subcommand
    topics_parser = subparsers.add_parser("topics", help="List registered topics")
    topics_parser.add_argument(
        "--aliases",
        action="store_true",
        help="Include topic aliases",
    )

    # Simulate subcommand
    sim_parser = subparsers.add_parser("simulate", help="Run learner simulation")
    sim_parser.add_argument("topic", help="Topic id to practice")
    sim_parser.add_argument(
        "--easy-accuracy",
        type=float,
        default=0.9,
        help="Chance of a correct easy answer 0.0-1.0 (default: 0.9)",
    )
    sim_parser.add_argument(
        "--medium-accuracy",
        type=float,
        default=0.8,
        help="Chance of a correct medium answer 0.0-1.0 (default: 0.8)",
    )
    sim_parser.add_argument(
        "--hard-accuracy",
        type=float,
        default=0.65,
        help="Chance of a correct hard answer 0.0-1.0 (default: 0.65)",
    )
    sim_parser.add_argument(
        "--max-attempts",
        "-n",
        type=int,
        default=200,
        help="Stop after this many attempts (default: 200)",
    )
    sim_parser.add_argument(
        "--output",
        "-o",
        type=str,
        default="simulation_results.json",
        help="Output JSON file path (default: simulation_results.json)",
    )
    sim_parser.add_argument(
        "--trace",
        action="store_true",
        help="Print detailed attempt-by-attempt output",
    )
    sim_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )

    # Seed subcommand
    seed_parser = subparsers.add_parser(
        "seed", help="Load the sample exercises into the store"
    )
    seed_parser.add_argument(
        "--db",
        type=Path,
        default=DEFAULT_DB_PATH,
        help=f"SQLite database path (default: {DEFAULT_DB_PATH})",
    )

    return parser


def add_practice_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--topic", "-t", help="Topic id to practice")
    parser.add_argument(
        "--grade",
        "-g",
        choices=[g.grade_id for g in GRADES],
        help="Grade whose topic menu to show",
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=DEFAULT_DB_PATH,
        help=f"SQLite database path (default: {DEFAULT_DB_PATH})",
    )
    parser.add_argument(
        "--no-store",
        action="store_true",
        help="Always generate exercises instead of using stored ones",
    )


def open_store(db_path: Path) -> ExerciseStore | None:
    """Open the exercise store, or None if it cannot be opened."""
    try:
        return get_exercise_store(db_path)
    except ExerciseStoreError as e:
        logger.warning("Exercise store unavailable, generating only: {}", e)
        return None


def choose_topic(ui: PracticeUI, grade_id: str | None) -> str | None:
    """Ask for a grade (unless given) and a topic from its menu."""
    menu = TopicSelectionMenu()
    while grade_id is None or menu.get_grade(grade_id) is None:
        grade_id = ui.console.input("Grade (1-5, or 'q' to quit): ").strip()
        if grade_id.lower() == "q":
            return None

    menu.display_menu(grade_id)
    while True:
        choice = ui.console.input("Topic number (or 'q' to quit): ").strip()
        if choice.lower() == "q":
            return None
        topic = menu.select(grade_id, choice)
        if topic is not None:
            return topic.topic_id
        ui.show_error(f"No topic {choice!r} in grade {grade_id}")


def format_answer(answer) -> str:
    return answer if isinstance(answer, str) else json.dumps(answer)


def handle_quit(ui: PracticeUI, session: PracticeSession) -> None:
    """Print quit message, show the summary, and exit."""
    ui.show_quit_message()
    tracker = ui.get_progress_tracker()
    if tracker and tracker.current:
        ui.show_session_complete(tracker, mastered=session.is_mastered)
    sys.exit(0)


def create_sigint_handler(ui: PracticeUI, session: PracticeSession):
    """Create a SIGINT handler that shows the summary before exiting."""

    def sigint_handler(signum, frame):
        handle_quit(ui, session)

    return sigint_handler


def run_interactive(args) -> None:
    """Run the interactive practice session."""
    console = Console()
    ui = PracticeUI(console)

    ui.clear_screen()

    topic_id = getattr(args, "topic", None) or choose_topic(ui, getattr(args, "grade", None))
    if topic_id is None:
        ui.show_quit_message()
        return

    store = None
    if not getattr(args, "no_store", False):
        store = open_store(getattr(args, "db", DEFAULT_DB_PATH))

    session = PracticeSession(topic_id, store=store)
    tracker = ui.create_progress_tracker()
    session.events.subscribe(
        ATTEMPT_GRADED, lambda exercise, attempt: tracker.update(attempt.correct)
    )

    signal.signal(signal.SIGINT, create_sigint_handler(ui, session))

    topic = find_topic(topic_id)
    ui.show_welcome(
        topic_name=topic.display_name if topic else topic_id,
        topic_id=topic_id,
        score=session.state.score.score,
    )

    exercise_number = 0
    while not session.is_mastered:
        ui.clear_screen()
        exercise_number += 1

        exercise = session.next_exercise()
        answer = ui.show_exercise(
            exercise,
            exercise_number=exercise_number,
            challenge_zone=session.is_challenge_zone,
        )

        if answer is QUIT:
            ui.show_quit_message()
            break

        attempt = session.submit(answer)

        ui.show_feedback(
            attempt.correct,
            describe_answer(exercise),
            user_answer=format_answer(answer),
            explanation=exercise.explanation.text or None,
            steps=exercise.explanation.steps,
        )
        ui.show_score(
            session.state.score,
            session.difficulty.value,
            challenge_zone=session.is_challenge_zone,
        )

        if not session.is_mastered:
            ui.wait_for_continue()

    if tracker.current:
        ui.show_session_complete(tracker, mastered=session.is_mastered)


def run_generate(args) -> int:
    """Print one generated exercise record."""
    try:
        exercise = get_default_registry().generate(args.topic, args.difficulty, args.seed)
    except TopicError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(json.dumps(exercise.to_record(), indent=2, ensure_ascii=False))
    return 0


def run_topics(args) -> int:
    """Print every registered topic id."""
    for topic_id in get_default_registry().topic_ids(include_aliases=args.aliases):
        print(topic_id)
    return 0


def run_seed(args) -> int:
    """Load the sample exercises into the store."""
    try:
        store = get_exercise_store(args.db)
        added = seed_sample_exercises(store)
    except ExerciseStoreError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(f"Added {added} sample exercises to {args.db} ({store.count()} total)")
    return 0


def run_simulation(args) -> int:
    """Run the simulation subcommand."""
    from simulate import run_simulation_and_report
    from simulator_models import SimulatedLearnerConfig

    config = SimulatedLearnerConfig(
        easy_accuracy=args.easy_accuracy,
        medium_accuracy=args.medium_accuracy,
        hard_accuracy=args.hard_accuracy,
        max_attempts=args.max_attempts,
    )

    console = Console()

    console.print("=" * 40, style="bold blue")
    console.print("    Learner Simulator", style="bold blue")
    console.print("=" * 40, style="bold blue")
    console.print()

    console.print(f"Simulating up to {args.max_attempts} attempts on {args.topic}...")
    if args.seed is not None:
        console.print(f"Random seed: {args.seed}")
    console.print()

    run_simulation_and_report(
        topic_id=args.topic,
        config=config,
        output_path=Path(args.output),
        verbose=args.trace,
        seed=args.seed,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point with CLI routing."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "generate":
        return run_generate(args)
    if args.command == "topics":
        return run_topics(args)
    if args.command == "seed":
        return run_seed(args)
    if args.command == "simulate":
        return run_simulation(args)

    # Default to interactive practice
    run_interactive(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
