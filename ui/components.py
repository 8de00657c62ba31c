from rich.text import Text
from rich.panel import Panel
from rich.table import Table
from rich.style import Style
from rich.align import Align
from rich.columns import Columns
from rich import box
from typing import Optional, List

from exercises.generic_models import BLANK_PATTERN, Exercise
from models import ScoreState, Variant
from ui.parsing import INPUT_HINTS
from ui.styles import (
    PRIMARY_BLUE,
    ACCENT_ORANGE,
    SUCCESS_GREEN,
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
    TEXT_WHITE,
    create_mastered_header,
    get_difficulty_style,
    get_score_style,
)

LABEL_STYLE = Style(color=ACCENT_ORANGE, bold=True)
BODY_STYLE = Style(color=TEXT_WHITE)


class ExercisePanel:
    """A styled panel for displaying an exercise of any variant."""

    def __init__(
        self,
        exercise: Exercise,
        exercise_number: int = 0,
        challenge_zone: bool = False,
    ):
        self.exercise = exercise
        self.exercise_number = exercise_number
        self.challenge_zone = challenge_zone

    def render(self) -> Panel:
        content = Text()

        header = f"Exercise {self.exercise_number}  " if self.exercise_number else ""
        content.append(header, Style(color=MUTED_GRAY))
        difficulty = self.exercise.difficulty.value
        content.append(difficulty.upper(), get_difficulty_style(difficulty))
        if self.challenge_zone:
            content.append("  🔥 Challenge zone", LABEL_STYLE)
        content.append("\n\n")

        content.append(self.exercise.prompt.text, Style(color=PRIMARY_BLUE, bold=True))
        content.append("\n\n")
        self._render_body(content)

        return Panel(
            Align.left(content),
            title="Practice",
            subtitle=INPUT_HINTS[self.exercise.variant],
            border_style=PRIMARY_BLUE,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def _render_body(self, content: Text) -> None:
        payload = self.exercise.payload
        variant = self.exercise.variant

        if variant == Variant.CHOICE:
            for option in payload.options:
                content.append(f"{option.id}. ", LABEL_STYLE)
                content.append(option.content + "\n", BODY_STYLE)
        elif variant == Variant.ORDERING:
            for i, item in enumerate(payload.items, 1):
                content.append(f"{i}. ", LABEL_STYLE)
                content.append(item.content + "\n", BODY_STYLE)
        elif variant == Variant.BLANK_FILL:
            if payload.instructions:
                content.append(payload.instructions + "\n", Style(color=MUTED_GRAY))
            numbers = {blank.id: i for i, blank in enumerate(payload.blanks, 1)}
            content.append(
                BLANK_PATTERN.sub(lambda m: f"[{numbers[m.group(1)]}]___", payload.template),
                BODY_STYLE,
            )
            content.append("\n")
        elif variant == Variant.GRID_FILL:
            width = max(len(row.cells) for row in payload.rows)
            for row in payload.rows:
                cells = " ".join("_" if c.is_input else c.value for c in row.cells)
                content.append(f"{row.operator or ' '} ", LABEL_STYLE)
                content.append(cells.rjust(2 * width - 1) + "\n", BODY_STYLE)
                if row.kind in ("factor-operator", "partial-operator"):
                    content.append("  " + "─" * (2 * width - 1) + "\n", Style(color=MUTED_GRAY))
        elif variant == Variant.POINT_PLOT:
            content.append(
                f"x from {payload.x_range[0]} to {payload.x_range[1]}, "
                f"y from {payload.y_range[0]} to {payload.y_range[1]}\n",
                Style(color=MUTED_GRAY),
            )
        elif variant == Variant.CATEGORIZE:
            for i, zone in enumerate(payload.zones):
                content.append(f"{chr(65 + i)} = {zone.label}   ", LABEL_STYLE)
            content.append("\n")
            content.append("  ".join(item.content for item in payload.items) + "\n", BODY_STYLE)
        elif variant == Variant.NUMBER_LINE:
            labels = payload.labels or [payload.min, payload.max]
            content.append("├─" + "─┼─".join(str(v) for v in labels) + "─┤\n", BODY_STYLE)
            if payload.mode == "multi":
                content.append("Select every matching number.\n", Style(color=MUTED_GRAY))
        elif payload.unit:
            content.append(f"Answer in {payload.unit}.\n", Style(color=MUTED_GRAY))

    def __rich__(self) -> Panel:
        return self.render()


class FeedbackPanel:
    """A styled panel for displaying exercise feedback."""

    def __init__(
        self,
        is_correct: bool,
        correct_answer: str,
        user_answer: str = "",
        explanation: Optional[str] = None,
        steps: Optional[List[str]] = None,
    ):
        self.is_correct = is_correct
        self.correct_answer = correct_answer
        self.user_answer = user_answer
        self.explanation = explanation
        self.steps = steps or []

    def render(self) -> Panel:
        content = Text()

        if self.is_correct:
            content.append("✓ ", Style(color=SUCCESS_GREEN, bold=True))
            content.append("Correct!\n", Style(color=SUCCESS_GREEN, bold=True))
        else:
            content.append("✗ ", Style(color=ERROR_RED, bold=True))
            content.append("Not quite!\n", Style(color=ERROR_RED, bold=True))
            if self.user_answer:
                content.append(
                    f"You answered: {self.user_answer}\n", Style(color=MUTED_GRAY)
                )

            content.append("\n")
            content.append("Correct answer: ", Style(color=MUTED_GRAY))
            content.append(self.correct_answer, Style(color=SUCCESS_GREEN, bold=True))

            if self.explanation or self.steps:
                content.append("\n\n")
                content.append("Explanation:\n", LABEL_STYLE)
            if self.explanation:
                content.append(self.explanation + "\n", BODY_STYLE)
            for i, step in enumerate(self.steps, 1):
                content.append(f"  {i}. {step}\n", BODY_STYLE)

        return Panel(
            Align.left(content),
            title="Result",
            border_style=SUCCESS_GREEN if self.is_correct else ERROR_RED,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class ScoreBoard:
    """A styled table showing the running score after an attempt."""

    def __init__(
        self,
        state: ScoreState,
        next_difficulty: str,
        challenge_zone: bool = False,
    ):
        self.state = state
        self.next_difficulty = next_difficulty
        self.challenge_zone = challenge_zone

    def render(self) -> Panel:
        table = Table(
            show_header=True,
            header_style=Style(color=PRIMARY_BLUE, bold=True),
            border_style=MUTED_GRAY,
            box=box.HEAVY,
        )

        table.add_column("Score", justify="center")
        table.add_column("Streak", justify="center")
        table.add_column("Attempts", justify="center")
        table.add_column("Next", justify="center")

        table.add_row(
            Text(self._score_bar(), style=get_score_style(self.state.score)),
            Text(str(self.state.streak), style=Style(color=INFO_BLUE)),
            Text(str(self.state.attempt_count), style=Style(color=MUTED_GRAY)),
            Text(self.next_difficulty, style=get_difficulty_style(self.next_difficulty)),
        )

        return Panel(
            Align.center(table),
            title="🔥 Challenge Zone" if self.challenge_zone else "Mastery",
            border_style=ACCENT_ORANGE,
            box=box.HEAVY,
            padding=(1, 1),
        )

    def _score_bar(self) -> str:
        width = 20
        filled = int(width * self.state.score / 100)
        return "█" * filled + "░" * (width - filled) + f" {self.state.score}"

    def __rich__(self) -> Panel:
        return self.render()


class WelcomeScreen:
    """Welcome screen with banner and session info."""

    def __init__(self, topic_name: str, topic_id: str, score: int = 0):
        self.topic_name = topic_name
        self.topic_id = topic_id
        self.score = score

    def render(self) -> Panel:
        banner = Text()
        banner.append(
            "╔═══════════════════════════════════════════╗\n", Style(color=PRIMARY_BLUE)
        )
        banner.append("║             ", Style(color=PRIMARY_BLUE))
        banner.append("  1 + 2 = 3 ✓   ", Style(color=ACCENT_ORANGE, bold=True))
        banner.append("              ║\n", Style(color=PRIMARY_BLUE))
        banner.append(
            "║              Math Practice                ║\n", Style(color=PRIMARY_BLUE)
        )
        banner.append(
            "╚═══════════════════════════════════════════╝\n", Style(color=PRIMARY_BLUE)
        )
        banner.append("\n")
        banner.append(
            "Answer correctly to raise your score. Reach 100 to master the topic!\n\n",
            BODY_STYLE,
        )
        banner.append("Type 'q' at any time to quit.\n", Style(color=MUTED_GRAY))

        stats = Table(
            show_header=False,
            border_style=MUTED_GRAY,
            box=box.ROUNDED,
        )
        stats.add_column("Label", justify="center")
        stats.add_column("Value", justify="center")

        stats.add_row(
            Text("Topic", style=Style(color=MUTED_GRAY)),
            Text(self.topic_name, style=Style(color=ACCENT_ORANGE, bold=True)),
        )
        stats.add_row(
            Text("Topic ID", style=Style(color=MUTED_GRAY)),
            Text(self.topic_id, style=Style(color=MUTED_GRAY)),
        )
        stats.add_row(
            Text("Score", style=Style(color=MUTED_GRAY)),
            Text(str(self.score), style=get_score_style(self.score)),
        )

        return Panel(
            Columns(
                [Align.center(banner), Align.center(stats)],
                align="center",
                padding=(3, 3),
            ),
            border_style=PRIMARY_BLUE,
            box=box.HEAVY,
            padding=(2, 3),
        )

    def __rich__(self) -> Panel:
        return self.render()


class ProgressTracker:
    """Track and display session progress."""

    def __init__(self):
        self.current = 0
        self.correct_count = 0
        self.incorrect_count = 0
        self.best_streak = 0
        self._streak = 0

    def update(self, is_correct: bool):
        self.current += 1
        if is_correct:
            self.correct_count += 1
            self._streak += 1
            self.best_streak = max(self.best_streak, self._streak)
        else:
            self.incorrect_count += 1
            self._streak = 0

    @property
    def accuracy(self) -> float:
        return (self.correct_count / self.current * 100) if self.current > 0 else 0.0

    def render_session_summary(self, mastered: bool = False) -> Panel:
        stats = Table(
            show_header=False,
            border_style=MUTED_GRAY,
            box=box.SIMPLE,
        )
        stats.add_column("Label", style=Style(color=MUTED_GRAY))
        stats.add_column("Value", justify="right")

        stats.add_row("Completed", f"{self.current}")
        stats.add_row(
            "Correct",
            Text(f"{self.correct_count}", style=Style(color=SUCCESS_GREEN)),
        )
        stats.add_row(
            "Incorrect",
            Text(f"{self.incorrect_count}", style=Style(color=ERROR_RED)),
        )
        stats.add_row(
            "Accuracy",
            Text(f"{self.accuracy:.0f}%", style=Style(color=ACCENT_ORANGE, bold=True)),
        )
        stats.add_row("Best streak", f"{self.best_streak}")

        content = Text()
        if mastered:
            content.append(create_mastered_header())
            content.append("\n\n")
        else:
            content.append("Session Complete!\n\n", Style(color=PRIMARY_BLUE, bold=True))
        content.append("See you next time! 👋\n", Style(color=MUTED_GRAY))

        return Panel(
            Columns(
                [Align.center(content), Align.center(stats)],
                align="center",
                padding=(0, 1),
            ),
            title="Session Summary",
            border_style=ACCENT_ORANGE,
            box=box.HEAVY,
            padding=(2, 3),
        )

    def __rich__(self) -> Panel:
        return self.render_session_summary()
