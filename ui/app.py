from rich.console import Console
from rich.text import Text
from rich.panel import Panel
from ui.components import (
    ExercisePanel,
    FeedbackPanel,
    ScoreBoard,
    WelcomeScreen,
    ProgressTracker,
)
from ui.parsing import parse_answer
from ui.styles import (
    SUCCESS_GREEN,
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
    DEFAULT_THEME,
)
from typing import Any, Optional, List

from exercises.generic_models import Exercise
from models import ScoreState

QUIT = object()


class PracticeUI:
    """Main UI orchestrator for the math practice application."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(theme=DEFAULT_THEME)
        self._progress_tracker: Optional[ProgressTracker] = None

    def show_welcome(self, topic_name: str, topic_id: str, score: int = 0) -> None:
        """Display the welcome screen and wait for user to press Enter."""
        welcome = WelcomeScreen(topic_name=topic_name, topic_id=topic_id, score=score)
        self.console.print(welcome)
        self.console.print()
        self.console.input(Text("Press Enter to start...", style=f"bold {MUTED_GRAY}"))

    def show_session_complete(self, tracker: ProgressTracker, mastered: bool = False) -> None:
        """Display session completion summary."""
        self.console.print(tracker.render_session_summary(mastered=mastered))

    def show_exercise(
        self,
        exercise: Exercise,
        exercise_number: int,
        challenge_zone: bool = False,
    ) -> Any:
        """Display an exercise and read an answer for it.

        Args:
            exercise: The exercise to display.
            exercise_number: Current exercise number (1-indexed).
            challenge_zone: Whether the learner is in the challenge zone.

        Returns:
            QUIT if the user quits, otherwise the decoded answer, shaped
            for the exercise's variant.
        """
        panel = ExercisePanel(
            exercise=exercise,
            exercise_number=exercise_number,
            challenge_zone=challenge_zone,
        )

        self.console.print(panel)
        self.console.print()

        return self._get_answer(exercise)

    def _get_answer(self, exercise: Exercise) -> Any:
        """Prompt until the input can be read as an answer."""
        while True:
            user_input = self.console.input(
                Text("Your answer: ", style=f"bold {MUTED_GRAY}")
            ).strip()

            if user_input.lower() == "q":
                return QUIT

            answer = parse_answer(exercise, user_input)
            if answer is not None:
                return answer

            self.console.print(
                Text("I couldn't read that answer, please try again\n", style=ERROR_RED)
            )

    def show_feedback(
        self,
        is_correct: bool,
        correct_answer: str,
        user_answer: str = "",
        explanation: Optional[str] = None,
        steps: Optional[List[str]] = None,
    ) -> None:
        """Display feedback for the user's answer."""
        feedback = FeedbackPanel(
            is_correct=is_correct,
            correct_answer=correct_answer,
            user_answer=user_answer,
            explanation=explanation,
            steps=steps,
        )
        self.console.print(feedback)
        self.console.print()

    def show_score(
        self,
        state: ScoreState,
        next_difficulty: str,
        challenge_zone: bool = False,
    ) -> None:
        """Display the running score."""
        self.console.print(ScoreBoard(state, next_difficulty, challenge_zone))
        self.console.print()

    def show_error(self, message: str) -> None:
        """Display an error message."""
        self.console.print(
            Panel(
                Text(f"Error: {message}", style=ERROR_RED),
                title="Error",
                border_style=ERROR_RED,
            )
        )

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        self.console.print(Text(message, style=INFO_BLUE))

    def show_success(self, message: str) -> None:
        """Display a success message."""
        self.console.print(Text(message, style=SUCCESS_GREEN))

    def show_quit_message(self) -> None:
        """Display the quit message."""
        self.console.print()
        self.console.print(Text("👋 Goodbye! Keep practicing.", style=MUTED_GRAY))

    def create_progress_tracker(self) -> ProgressTracker:
        """Create a new progress tracker for a session."""
        self._progress_tracker = ProgressTracker()
        return self._progress_tracker

    def update_progress(self, is_correct: bool) -> None:
        """Update the progress tracker with a new result."""
        if self._progress_tracker:
            self._progress_tracker.update(is_correct)

    def get_progress_tracker(self) -> Optional[ProgressTracker]:
        """Get the current progress tracker."""
        return self._progress_tracker

    def clear_screen(self) -> None:
        """Clear the terminal screen."""
        self.console.clear()

    def wait_for_continue(self) -> None:
        """Wait for user to press Enter to continue."""
        self.console.input(
            Text("Press Enter to continue...", style=f"bold {MUTED_GRAY}")
        )
