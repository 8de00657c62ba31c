"""Exercise models shared by generators, validators and the exercise store.

An Exercise carries exactly one variant payload. Payloads form a tagged union
keyed by their ``variant`` field, so a record whose payload shape does not
match its declared variant fails validation instead of being probed at
runtime.

Records use camelCase keys on the wire (``topicId``, ``correctOrder``) and
round-trip losslessly through ``to_record()`` / ``from_record()``.
"""

import re
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from models import DifficultyTier, Variant

Number = int | float

BLANK_PATTERN = re.compile(r"\[([A-Za-z0-9_-]+)\]")


class RecordModel(BaseModel):
    """Base for immutable, camelCase-serialized record models."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Prompt(RecordModel):
    text: str
    image: str | None = None
    audio: str | None = None


class Explanation(RecordModel):
    text: str = ""
    steps: list[str] = Field(default_factory=list)
    image: str | None = None


# =============================================================================
# Choice
# =============================================================================


class ChoiceOption(RecordModel):
    id: str
    content: str
    is_correct: bool = False
    image: str | None = None


class ChoicePayload(RecordModel):
    """Pick one option from an ordered list."""

    variant: Literal["choice"] = "choice"
    options: list[ChoiceOption]

    @model_validator(mode="after")
    def check_one_correct_option(self) -> "ChoicePayload":
        correct = [o for o in self.options if o.is_correct]
        if len(correct) != 1:
            raise ValueError(
                f"choice payload needs exactly one correct option, got {len(correct)}"
            )
        return self

    @property
    def correct_option(self) -> ChoiceOption:
        return next(o for o in self.options if o.is_correct)


# =============================================================================
# Ordering
# =============================================================================


class OrderingItem(RecordModel):
    id: str
    content: str
    image: str | None = None


class OrderingPayload(RecordModel):
    """Arrange items into the canonical sequence."""

    variant: Literal["ordering"] = "ordering"
    items: list[OrderingItem]
    correct_order: list[str]
    layout: Literal["row", "column"] = "row"

    @model_validator(mode="after")
    def check_order_covers_items(self) -> "OrderingPayload":
        if sorted(self.correct_order) != sorted(item.id for item in self.items):
            raise ValueError("correct_order must be a permutation of the item ids")
        return self


# =============================================================================
# Blank fill
# =============================================================================


class Blank(RecordModel):
    id: str
    answer: str
    hint: str | None = None


class BlankFillPayload(RecordModel):
    """Template text with ``[blank-id]`` placeholders, one answer per blank."""

    variant: Literal["blank-fill"] = "blank-fill"
    template: str
    blanks: list[Blank]
    instructions: str = ""

    @model_validator(mode="after")
    def check_blanks_match_template(self) -> "BlankFillPayload":
        placeholders = set(BLANK_PATTERN.findall(self.template))
        blank_ids = {blank.id for blank in self.blanks}
        if not blank_ids or placeholders != blank_ids:
            raise ValueError(
                f"template placeholders {sorted(placeholders)} "
                f"do not match blanks {sorted(blank_ids)}"
            )
        return self


# =============================================================================
# Grid fill
# =============================================================================


RowKind = Literal["factor", "factor-operator", "partial", "partial-operator", "result"]


class GridCell(RecordModel):
    value: str = ""
    is_input: bool = False
    id: str | None = None


class GridRow(RecordModel):
    kind: RowKind
    cells: list[GridCell]
    operator: str | None = None


class GridFillPayload(RecordModel):
    """Cell layout (e.g. long multiplication) with some cells left as inputs."""

    variant: Literal["grid-fill"] = "grid-fill"
    rows: list[GridRow]
    expected: dict[str, str]
    max_length: int | None = None

    @model_validator(mode="after")
    def check_inputs_match_expected(self) -> "GridFillPayload":
        input_ids = {
            cell.id for row in self.rows for cell in row.cells if cell.is_input
        }
        if None in input_ids or input_ids != set(self.expected):
            raise ValueError("every input cell needs an id with an expected value")
        return self


# =============================================================================
# Point plot
# =============================================================================


class Point(RecordModel):
    x: Number
    y: Number


class PointPlotPayload(RecordModel):
    """Coordinate plane on which the learner plots points."""

    variant: Literal["point-plot"] = "point-plot"
    x_range: tuple[Number, Number]
    y_range: tuple[Number, Number]
    grid_step: Number = 1
    target_type: Literal["point", "line"] = "point"
    correct_points: list[Point]


# =============================================================================
# Categorize
# =============================================================================


class CategorizeItem(RecordModel):
    id: str
    content: str


class Zone(RecordModel):
    id: str
    label: str


class CategorizePayload(RecordModel):
    """Drop each item into one of several zones."""

    variant: Literal["categorize"] = "categorize"
    items: list[CategorizeItem]
    zones: list[Zone]
    correct_mapping: dict[str, str]

    @model_validator(mode="after")
    def check_mapping_targets_known_zones(self) -> "CategorizePayload":
        zone_ids = {zone.id for zone in self.zones}
        item_ids = {item.id for item in self.items}
        if not set(self.correct_mapping) <= item_ids:
            raise ValueError("correct_mapping references unknown items")
        if not set(self.correct_mapping.values()) <= zone_ids:
            raise ValueError("correct_mapping references unknown zones")
        return self


# =============================================================================
# Number line
# =============================================================================


class NumberLinePayload(RecordModel):
    """Number line on which one value (or a set of values) is selected."""

    variant: Literal["number-line"] = "number-line"
    min: Number
    max: Number
    step: Number = 1
    labels: list[Number] = Field(default_factory=list)
    mode: Literal["single", "multi"] = "single"
    correct_value: Number | None = None
    correct_values: list[Number] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_answer_for_mode(self) -> "NumberLinePayload":
        if self.mode == "single" and self.correct_value is None:
            raise ValueError("single-select number line needs correct_value")
        if self.mode == "multi" and not self.correct_values:
            raise ValueError("multi-select number line needs correct_values")
        return self


# =============================================================================
# Free text
# =============================================================================


class FreeTextPayload(RecordModel):
    variant: Literal["free-text"] = "free-text"
    answer: str
    acceptable_answers: list[str] = Field(default_factory=list)
    unit: str | None = None
    placeholder: str | None = None


Payload = Annotated[
    Union[
        ChoicePayload,
        OrderingPayload,
        BlankFillPayload,
        GridFillPayload,
        PointPlotPayload,
        CategorizePayload,
        NumberLinePayload,
        FreeTextPayload,
    ],
    Field(discriminator="variant"),
]


class Exercise(RecordModel):
    """A fully formed exercise, including its own ground truth."""

    id: str
    topic_id: str
    variant: Variant
    difficulty: DifficultyTier
    prompt: Prompt
    explanation: Explanation = Field(default_factory=Explanation)
    payload: Payload

    @model_validator(mode="after")
    def check_payload_matches_variant(self) -> "Exercise":
        if self.payload.variant != self.variant.value:
            raise ValueError(
                f"payload of kind {self.payload.variant!r} "
                f"does not match variant {self.variant.value!r}"
            )
        return self

    def to_record(self) -> dict[str, Any]:
        """Flat JSON-compatible record for the exercise store."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Exercise":
        return cls.model_validate(record)

    @classmethod
    def from_json(cls, text: str) -> "Exercise":
        return cls.model_validate_json(text)
