"""Turn what a learner types into the decoded answer shape for each variant.

Each parser returns None when the text cannot be read at all, so the UI can
ask again. Text that parses but is wrong is left for the validator to judge.
"""

import re
from typing import Any

from exercises.generic_models import (
    BlankFillPayload,
    CategorizePayload,
    ChoicePayload,
    Exercise,
    GridFillPayload,
    OrderingPayload,
)
from models import Variant

SEPARATORS = re.compile(r"[,\s]+")


def _number(token: str) -> int | float:
    value = float(token)
    return int(value) if value.is_integer() and "." not in token else value


def _tokens(raw: str) -> list[str]:
    return [t for t in SEPARATORS.split(raw.strip()) if t]


def input_cell_ids(payload: GridFillPayload) -> list[str]:
    """Input cell ids, top to bottom and left to right."""
    return [cell.id for row in payload.rows for cell in row.cells if cell.is_input]


def parse_choice(payload: ChoicePayload, raw: str) -> str | None:
    label = raw.strip().upper()
    for option in payload.options:
        if option.id.upper() == label:
            return option.content
    # The option text itself is accepted too.
    for option in payload.options:
        if option.content.strip().lower() == raw.strip().lower():
            return option.content
    return None


def parse_ordering(payload: OrderingPayload, raw: str) -> list[str] | None:
    try:
        positions = [int(t) for t in _tokens(raw)]
    except ValueError:
        return None
    if not all(1 <= p <= len(payload.items) for p in positions):
        return None
    return [payload.items[p - 1].id for p in positions]


def parse_blank_fill(payload: BlankFillPayload, raw: str) -> dict[str, str] | None:
    values = [v.strip() for v in raw.split(",")]
    if len(values) != len(payload.blanks):
        return None
    return {blank.id: value for blank, value in zip(payload.blanks, values)}


def parse_grid_fill(payload: GridFillPayload, raw: str) -> dict[str, str] | None:
    cell_ids = input_cell_ids(payload)
    values = _tokens(raw)
    # A run of digits fills consecutive cells.
    if len(values) == 1 and len(cell_ids) > 1:
        values = list(values[0])
    if len(values) != len(cell_ids):
        return None
    return dict(zip(cell_ids, values))


def parse_point_plot(raw: str) -> list[dict[str, Any]] | None:
    points = []
    for chunk in raw.split(";"):
        chunk = chunk.strip().strip("()")
        if not chunk:
            continue
        try:
            x, y = (_number(t) for t in _tokens(chunk))
        except ValueError:
            return None
        points.append({"x": x, "y": y})
    return points or None


def parse_categorize(payload: CategorizePayload, raw: str) -> dict[str, str] | None:
    labels = [t.upper() for t in _tokens(raw)]
    # One run of letters may be typed without spaces.
    if len(labels) == 1 and len(payload.items) > 1:
        labels = list(labels[0])
    if len(labels) != len(payload.items):
        return None
    zone_by_label = {chr(65 + i): zone.id for i, zone in enumerate(payload.zones)}
    if any(label not in zone_by_label for label in labels):
        return None
    return {item.id: zone_by_label[label] for item, label in zip(payload.items, labels)}


def parse_number_line(raw: str) -> list | None:
    try:
        values = [_number(t) for t in _tokens(raw)]
    except ValueError:
        return None
    return values or None


def parse_answer(exercise: Exercise, raw: str) -> Any:
    """Decoded answer for the exercise's variant, or None if unreadable."""
    payload = exercise.payload
    if exercise.variant == Variant.CHOICE:
        return parse_choice(payload, raw)
    if exercise.variant == Variant.ORDERING:
        return parse_ordering(payload, raw)
    if exercise.variant == Variant.BLANK_FILL:
        return parse_blank_fill(payload, raw)
    if exercise.variant == Variant.GRID_FILL:
        return parse_grid_fill(payload, raw)
    if exercise.variant == Variant.POINT_PLOT:
        return parse_point_plot(raw)
    if exercise.variant == Variant.CATEGORIZE:
        return parse_categorize(payload, raw)
    if exercise.variant == Variant.NUMBER_LINE:
        return parse_number_line(raw)
    return raw.strip() or None


INPUT_HINTS = {
    Variant.CHOICE: "Type the option letter (or 'q' to quit)",
    Variant.ORDERING: "Enter item numbers in order (e.g., 2 1 3) or 'q' to quit",
    Variant.BLANK_FILL: "Enter the blanks in order, separated by commas, or 'q' to quit",
    Variant.GRID_FILL: "Enter the empty cells left to right, top to bottom, or 'q' to quit",
    Variant.POINT_PLOT: "Enter points as x,y separated by ';' (e.g., 3,4; -2,1) or 'q' to quit",
    Variant.CATEGORIZE: "Enter a group letter for each item in order (e.g., A B A) or 'q' to quit",
    Variant.NUMBER_LINE: "Enter the number(s) on the line, separated by spaces, or 'q' to quit",
    Variant.FREE_TEXT: "Type your answer (or 'q' to quit)",
}
