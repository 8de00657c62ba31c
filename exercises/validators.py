"""Answer validation, one rule per exercise variant.

Each rule is registered against the variant it grades, so adding a variant
means adding a rule here without touching the others. Submissions arrive
either as their text encoding (JSON for structured variants, a bare string for
choice and free-text) or already decoded.

A malformed submission is a wrong answer, not an error: ``validate`` never
raises.
"""

import json
from collections import Counter
from typing import Any, Callable

from loguru import logger

from models import Variant
from .generic_models import (
    BlankFillPayload,
    CategorizePayload,
    ChoicePayload,
    Exercise,
    FreeTextPayload,
    GridFillPayload,
    NumberLinePayload,
    OrderingPayload,
    PointPlotPayload,
)

POINT_TOLERANCE = 0.001

Validator = Callable[[Any, Any], bool]

# Populated by @register
VALIDATORS: dict[Variant, Validator] = {}

MALFORMED = (ValueError, TypeError, KeyError, AttributeError, IndexError, RecursionError)


def register(variant: Variant):
    """Decorator to register the validation rule for a variant."""

    def decorator(func: Validator) -> Validator:
        VALIDATORS[variant] = func
        return func

    return decorator


def validate(exercise: Exercise, submitted: Any) -> bool:
    """Judge a submission against the exercise's own ground truth."""
    rule = VALIDATORS.get(exercise.variant)
    if rule is None:
        logger.warning("No validator registered for variant {}", exercise.variant.value)
        return False
    try:
        return bool(rule(exercise.payload, submitted))
    except MALFORMED as e:
        logger.debug(
            "Malformed {} submission for {}: {}", exercise.variant.value, exercise.id, e
        )
        return False


# =============================================================================
# Decoding helpers
# =============================================================================


def _decode(submitted: Any) -> Any:
    """Decode a JSON text encoding; pass already-decoded values through."""
    if isinstance(submitted, bytes):
        submitted = submitted.decode("utf-8")
    if isinstance(submitted, str):
        return json.loads(submitted)
    return submitted


def _text(submitted: Any) -> str:
    if isinstance(submitted, bytes):
        return submitted.decode("utf-8")
    if not isinstance(submitted, str):
        raise TypeError(f"expected text, got {type(submitted).__name__}")
    return submitted


def _mapping(submitted: Any) -> dict:
    decoded = _decode(submitted)
    if not isinstance(decoded, dict):
        raise TypeError(f"expected a mapping, got {type(decoded).__name__}")
    return decoded


def _sequence(submitted: Any) -> list:
    decoded = _decode(submitted)
    if not isinstance(decoded, (list, tuple)):
        raise TypeError(f"expected a list, got {type(decoded).__name__}")
    return list(decoded)


def _cell_text(value: Any) -> str:
    """Text of a cell or blank; whole numbers are accepted as their digits."""
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise TypeError(f"expected text, got {type(value).__name__}")


def _number(value: Any) -> int | float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    return value


def _point(value: Any) -> tuple[int | float, int | float]:
    """A point given as ``{"x": .., "y": ..}`` or as an ``[x, y]`` pair."""
    if isinstance(value, dict):
        return _number(value["x"]), _number(value["y"])
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return _number(value[0]), _number(value[1])
    raise TypeError(f"expected a point, got {value!r}")


# =============================================================================
# Rules
# =============================================================================


@register(Variant.CHOICE)
def validate_choice(payload: ChoicePayload, submitted: Any) -> bool:
    return _text(submitted) == payload.correct_option.content


@register(Variant.ORDERING)
def validate_ordering(payload: OrderingPayload, submitted: Any) -> bool:
    return _sequence(submitted) == payload.correct_order


@register(Variant.BLANK_FILL)
def validate_blank_fill(payload: BlankFillPayload, submitted: Any) -> bool:
    answers = _mapping(submitted)
    for blank in payload.blanks:
        if blank.id not in answers:
            return False
        given = _cell_text(answers[blank.id]).strip().lower()
        if given != blank.answer.strip().lower():
            return False
    return True


@register(Variant.GRID_FILL)
def validate_grid_fill(payload: GridFillPayload, submitted: Any) -> bool:
    cells = _mapping(submitted)
    for cell_id, expected in payload.expected.items():
        if cell_id not in cells:
            return False
        if _cell_text(cells[cell_id]).strip() != expected.strip():
            return False
    return True


@register(Variant.POINT_PLOT)
def validate_point_plot(payload: PointPlotPayload, submitted: Any) -> bool:
    given = sorted(_point(p) for p in _sequence(submitted))
    expected = sorted((p.x, p.y) for p in payload.correct_points)
    if len(given) != len(expected):
        return False
    return all(
        abs(gx - ex) < POINT_TOLERANCE and abs(gy - ey) < POINT_TOLERANCE
        for (gx, gy), (ex, ey) in zip(given, expected)
    )


@register(Variant.CATEGORIZE)
def validate_categorize(payload: CategorizePayload, submitted: Any) -> bool:
    placed = _mapping(submitted)
    return all(
        placed.get(item_id) == zone_id
        for item_id, zone_id in payload.correct_mapping.items()
    )


@register(Variant.NUMBER_LINE)
def validate_number_line(payload: NumberLinePayload, submitted: Any) -> bool:
    decoded = _decode(submitted)
    if not isinstance(decoded, (list, tuple)):
        decoded = [decoded]
    values = [_number(v) for v in decoded]

    if payload.mode == "multi":
        return Counter(values) == Counter(payload.correct_values)
    return len(values) == 1 and values[0] == payload.correct_value


@register(Variant.FREE_TEXT)
def validate_free_text(payload: FreeTextPayload, submitted: Any) -> bool:
    given = _text(submitted).strip().lower()
    accepted = [payload.answer, *payload.acceptable_answers]
    return any(given == answer.strip().lower() for answer in accepted)
