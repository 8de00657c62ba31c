"""Canonical answers derived from an exercise's own ground truth.

``correct_submission`` and ``wrong_submission`` produce text encodings in the
shape ``validators.validate`` accepts. The simulated learner uses them to
answer, and the UI uses ``describe_answer`` to show the expected answer after
a miss.
"""

import json
from functools import singledispatch

from .generic_models import (
    BLANK_PATTERN,
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


def correct_submission(exercise: Exercise) -> str:
    """Text encoding of the canonical answer."""
    return _correct(exercise.payload)


def wrong_submission(exercise: Exercise) -> str:
    """Text encoding of a well-formed answer that is guaranteed to be wrong."""
    return _wrong(exercise.payload)


def describe_answer(exercise: Exercise) -> str:
    """Human-readable canonical answer."""
    return _describe(exercise.payload)


def _spoil(text: str) -> str:
    return f"{text}?"


# =============================================================================
# Correct submissions
# =============================================================================


@singledispatch
def _correct(payload) -> str:
    raise TypeError(f"no canonical answer for {type(payload).__name__}")


@_correct.register
def _(payload: ChoicePayload) -> str:
    return payload.correct_option.content


@_correct.register
def _(payload: OrderingPayload) -> str:
    return json.dumps(payload.correct_order)


@_correct.register
def _(payload: BlankFillPayload) -> str:
    return json.dumps({blank.id: blank.answer for blank in payload.blanks})


@_correct.register
def _(payload: GridFillPayload) -> str:
    return json.dumps(payload.expected)


@_correct.register
def _(payload: PointPlotPayload) -> str:
    return json.dumps([{"x": p.x, "y": p.y} for p in payload.correct_points])


@_correct.register
def _(payload: CategorizePayload) -> str:
    return json.dumps(payload.correct_mapping)


@_correct.register
def _(payload: NumberLinePayload) -> str:
    if payload.mode == "multi":
        return json.dumps(payload.correct_values)
    return json.dumps([payload.correct_value])


@_correct.register
def _(payload: FreeTextPayload) -> str:
    return payload.answer


# =============================================================================
# Wrong submissions
# =============================================================================


@singledispatch
def _wrong(payload) -> str:
    raise TypeError(f"no wrong answer for {type(payload).__name__}")


@_wrong.register
def _(payload: ChoicePayload) -> str:
    for option in payload.options:
        if not option.is_correct:
            return option.content
    return _spoil(payload.correct_option.content)


@_wrong.register
def _(payload: OrderingPayload) -> str:
    order = list(reversed(payload.correct_order))
    if order == payload.correct_order:
        order = []
    return json.dumps(order)


@_wrong.register
def _(payload: BlankFillPayload) -> str:
    answers = {blank.id: blank.answer for blank in payload.blanks}
    first = payload.blanks[0].id
    answers[first] = _spoil(answers[first])
    return json.dumps(answers)


@_wrong.register
def _(payload: GridFillPayload) -> str:
    cells = dict(payload.expected)
    if cells:
        first = next(iter(cells))
        cells[first] = _spoil(cells[first])
    return json.dumps(cells) if cells else json.dumps(None)


@_wrong.register
def _(payload: PointPlotPayload) -> str:
    return json.dumps(
        [{"x": p.x + payload.grid_step, "y": p.y} for p in payload.correct_points]
    )


@_wrong.register
def _(payload: CategorizePayload) -> str:
    placed = dict(payload.correct_mapping)
    first = next(iter(placed))
    others = [zone.id for zone in payload.zones if zone.id != placed[first]]
    placed[first] = others[0] if others else _spoil(placed[first])
    return json.dumps(placed)


@_wrong.register
def _(payload: NumberLinePayload) -> str:
    if payload.mode == "multi":
        return json.dumps(payload.correct_values[:-1])
    return json.dumps([payload.correct_value + payload.step])


@_wrong.register
def _(payload: FreeTextPayload) -> str:
    return _spoil(payload.answer)


# =============================================================================
# Descriptions
# =============================================================================


@singledispatch
def _describe(payload) -> str:
    raise TypeError(f"cannot describe {type(payload).__name__}")


@_describe.register
def _(payload: ChoicePayload) -> str:
    option = payload.correct_option
    return f"{option.id}. {option.content}"


@_describe.register
def _(payload: OrderingPayload) -> str:
    contents = {item.id: item.content for item in payload.items}
    return ", ".join(contents[item_id] for item_id in payload.correct_order)


@_describe.register
def _(payload: BlankFillPayload) -> str:
    answers = {blank.id: blank.answer for blank in payload.blanks}
    return BLANK_PATTERN.sub(lambda m: answers[m.group(1)], payload.template)


@_describe.register
def _(payload: GridFillPayload) -> str:
    lines = []
    for row in payload.rows:
        digits = "".join(
            payload.expected[cell.id] if cell.is_input else cell.value
            for cell in row.cells
        )
        lines.append(f"{row.operator or ' '} {digits}")
    return "\n".join(lines)


@_describe.register
def _(payload: PointPlotPayload) -> str:
    return ", ".join(f"({p.x}, {p.y})" for p in payload.correct_points)


@_describe.register
def _(payload: CategorizePayload) -> str:
    contents = {item.id: item.content for item in payload.items}
    labels = {zone.id: zone.label for zone in payload.zones}
    return "; ".join(
        f"{contents[item_id]} → {labels[zone_id]}"
        for item_id, zone_id in payload.correct_mapping.items()
    )


@_describe.register
def _(payload: NumberLinePayload) -> str:
    if payload.mode == "multi":
        return ", ".join(str(v) for v in payload.correct_values)
    return str(payload.correct_value)


@_describe.register
def _(payload: FreeTextPayload) -> str:
    return f"{payload.answer} {payload.unit}" if payload.unit else payload.answer
