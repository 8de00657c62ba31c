"""Math Practice UI Module - Terminal interface for practice sessions."""

from ui.app import QUIT, PracticeUI
from ui.components import (
    ExercisePanel,
    FeedbackPanel,
    ScoreBoard,
    WelcomeScreen,
    ProgressTracker,
)
from ui.parsing import INPUT_HINTS, parse_answer
from ui.styles import (
    PRIMARY_BLUE,
    ACCENT_ORANGE,
    SUCCESS_GREEN,
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
)

__all__ = [
    "PracticeUI",
    "QUIT",
    "ExercisePanel",
    "FeedbackPanel",
    "ScoreBoard",
    "WelcomeScreen",
    "ProgressTracker",
    "INPUT_HINTS",
    "parse_answer",
    "PRIMARY_BLUE",
    "ACCENT_ORANGE",
    "SUCCESS_GREEN",
    "ERROR_RED",
    "INFO_BLUE",
    "MUTED_GRAY",
]
