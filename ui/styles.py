from rich.style import Style
from rich.text import Text
from rich.theme import Theme

PRIMARY_BLUE = "#2E86DE"
ACCENT_ORANGE = "#F39C12"
SUCCESS_GREEN = "#27AE60"
ERROR_RED = "#C0392B"
INFO_BLUE = "#3498DB"
MUTED_GRAY = "#7F8C8D"
TEXT_WHITE = "#FFFFFF"

DEFAULT_THEME = Theme(
    {
        "primary": Style(color=PRIMARY_BLUE, bold=True),
        "secondary": Style(color=ACCENT_ORANGE, bold=True),
        "success": Style(color=SUCCESS_GREEN),
        "error": Style(color=ERROR_RED, bold=True),
        "info": Style(color=INFO_BLUE),
        "muted": Style(color=MUTED_GRAY),
        "option_label": Style(color=ACCENT_ORANGE, bold=True),
        "option_text": Style(color=TEXT_WHITE),
        "title": Style(color=PRIMARY_BLUE, bold=True),
        "subtitle": Style(color=MUTED_GRAY),
    }
)


def get_score_style(score: int) -> Style:
    """Get color style based on the mastery score."""
    if score >= 90:
        return Style(color=SUCCESS_GREEN, bold=True)
    elif score >= 40:
        return Style(color=ACCENT_ORANGE)
    else:
        return Style(color=ERROR_RED)


def get_difficulty_style(difficulty: str) -> Style:
    """Get style for a difficulty tier."""
    styles = {
        "easy": Style(color=SUCCESS_GREEN, bold=True),
        "medium": Style(color=ACCENT_ORANGE, bold=True),
        "hard": Style(color=ERROR_RED, bold=True),
    }
    return styles.get(difficulty.lower(), Style())


def create_mastered_header() -> Text:
    """Create the topic mastered header."""
    header = Text()
    header.append("🏆 ", Style(color=ACCENT_ORANGE))
    header.append("Topic Mastered!", Style(color=PRIMARY_BLUE, bold=True))
    return header
