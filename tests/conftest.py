"""Shared pytest fixtures for the math practice test suite."""

import pytest

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from exercises.generic_models import (
    Blank,
    BlankFillPayload,
    CategorizeItem,
    CategorizePayload,
    ChoiceOption,
    ChoicePayload,
    Exercise,
    FreeTextPayload,
    GridCell,
    GridFillPayload,
    GridRow,
    NumberLinePayload,
    OrderingItem,
    OrderingPayload,
    Point,
    PointPlotPayload,
    Prompt,
    Zone,
)
from exercises.registry import build_default_registry
from models import DifficultyTier, Variant
from storage import SQLiteExerciseStore


def make_exercise(payload, exercise_id: str = "TEST_1", topic_id: str = "test-topic"):
    """Wrap a payload in an exercise with a plain prompt."""
    return Exercise(
        id=exercise_id,
        topic_id=topic_id,
        variant=Variant(payload.variant),
        difficulty=DifficultyTier.MEDIUM,
        prompt=Prompt(text="Test prompt"),
        payload=payload,
    )


@pytest.fixture
def registry():
    """A freshly built registry with every built-in topic."""
    return build_default_registry()


@pytest.fixture
def choice_exercise() -> Exercise:
    return make_exercise(
        ChoicePayload(
            options=[
                ChoiceOption(id="A", content="12"),
                ChoiceOption(id="B", content="14", is_correct=True),
                ChoiceOption(id="C", content="16"),
            ]
        )
    )


@pytest.fixture
def ordering_exercise() -> Exercise:
    return make_exercise(
        OrderingPayload(
            items=[
                OrderingItem(id="item-1", content="7"),
                OrderingItem(id="item-2", content="2"),
                OrderingItem(id="item-3", content="5"),
            ],
            correct_order=["item-2", "item-3", "item-1"],
        )
    )


@pytest.fixture
def blank_fill_exercise() -> Exercise:
    return make_exercise(
        BlankFillPayload(
            template="3 + [blank1] = 10 and [blank2] + 4 = 10",
            blanks=[Blank(id="blank1", answer="7"), Blank(id="blank2", answer="6")],
        )
    )


@pytest.fixture
def grid_fill_exercise() -> Exercise:
    """23 × 4 with the three result digits as inputs."""
    return make_exercise(
        GridFillPayload(
            rows=[
                GridRow(kind="factor", cells=[GridCell(value="2"), GridCell(value="3")]),
                GridRow(kind="factor-operator", operator="×", cells=[GridCell(value="4")]),
                GridRow(
                    kind="result",
                    cells=[
                        GridCell(is_input=True, id="res-0"),
                        GridCell(is_input=True, id="res-1"),
                    ],
                ),
            ],
            expected={"res-0": "9", "res-1": "2"},
        )
    )


@pytest.fixture
def point_plot_exercise() -> Exercise:
    return make_exercise(
        PointPlotPayload(
            x_range=(-10, 10),
            y_range=(-10, 10),
            correct_points=[Point(x=3, y=-2), Point(x=1, y=4)],
        )
    )


@pytest.fixture
def categorize_exercise() -> Exercise:
    return make_exercise(
        CategorizePayload(
            items=[
                CategorizeItem(id="item-4", content="4"),
                CategorizeItem(id="item-7", content="7"),
                CategorizeItem(id="item-10", content="10"),
            ],
            zones=[
                Zone(id="zone-even", label="Even Numbers"),
                Zone(id="zone-odd", label="Odd Numbers"),
            ],
            correct_mapping={
                "item-4": "zone-even",
                "item-7": "zone-odd",
                "item-10": "zone-even",
            },
        )
    )


@pytest.fixture
def number_line_single_exercise() -> Exercise:
    return make_exercise(
        NumberLinePayload(
            min=0, max=10, labels=list(range(11)), mode="single", correct_value=6
        )
    )


@pytest.fixture
def number_line_multi_exercise() -> Exercise:
    return make_exercise(
        NumberLinePayload(
            min=10,
            max=16,
            labels=list(range(10, 17)),
            mode="multi",
            correct_values=[11, 13, 15],
        )
    )


@pytest.fixture
def free_text_exercise() -> Exercise:
    return make_exercise(
        FreeTextPayload(answer="3/4", acceptable_answers=["6/8", "0.75"])
    )


@pytest.fixture
def all_variant_exercises(
    choice_exercise,
    ordering_exercise,
    blank_fill_exercise,
    grid_fill_exercise,
    point_plot_exercise,
    categorize_exercise,
    number_line_single_exercise,
    number_line_multi_exercise,
    free_text_exercise,
) -> list[Exercise]:
    """One hand-built exercise per variant (two for the number line)."""
    return [
        choice_exercise,
        ordering_exercise,
        blank_fill_exercise,
        grid_fill_exercise,
        point_plot_exercise,
        categorize_exercise,
        number_line_single_exercise,
        number_line_multi_exercise,
        free_text_exercise,
    ]


@pytest.fixture
def test_db_path(tmp_path: Path) -> Path:
    """Path to a temporary database file (not yet created)."""
    return tmp_path / "practice.db"


@pytest.fixture
def store(test_db_path: Path) -> SQLiteExerciseStore:
    """An empty exercise store backed by a temporary database."""
    return SQLiteExerciseStore(test_db_path)
