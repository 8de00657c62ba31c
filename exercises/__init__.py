"""Exercise generation and grading for the practice engine.

This package turns a topic id, a difficulty tier and a seed into a fully
formed exercise, and grades a learner's submission against it.

Architecture:
- Exercise models carry exactly one variant payload (tagged union on ``variant``)
- Generator families build exercises and their ground truth in one step
- The topic registry dispatches topic ids (and aliases) to families
- Validators grade submissions, one rule per variant

Exercise models:
- Exercise: Prompt, explanation and one payload
- ChoicePayload, OrderingPayload, BlankFillPayload, GridFillPayload,
  PointPlotPayload, CategorizePayload, NumberLinePayload, FreeTextPayload

Generators:
- AdditionGenerator, MultiplicationGenerator, PlaceValueGenerator,
  SortingGenerator, GraphingGenerator, DragDropGenerator,
  NumberLineGenerator, VerticalGenerator

Configuration:
- GeneratorConfig: Configure exercise generation behavior

Errors:
- TopicNotFound: unknown topic id
- TopicNotSupported: known topic, unhandled tier or grade
"""

from exercises.addition import AdditionGenerator
from exercises.answers import correct_submission, describe_answer, wrong_submission
from exercises.config import (
    ChoiceConfig,
    DragDropConfig,
    GeneratorConfig,
    SortingConfig,
)
from exercises.drag_drop import DragDropGenerator
from exercises.errors import TopicError, TopicNotFound, TopicNotSupported
from exercises.generators import ExerciseGenerator
from exercises.generic_models import (
    BlankFillPayload,
    CategorizePayload,
    ChoicePayload,
    Exercise,
    FreeTextPayload,
    GridFillPayload,
    NumberLinePayload,
    OrderingPayload,
    Payload,
    PointPlotPayload,
)
from exercises.graphing import GraphingGenerator
from exercises.multiplication import MultiplicationGenerator
from exercises.number_line import NumberLineGenerator
from exercises.place_value import PlaceValueGenerator
from exercises.registry import (
    TopicRegistry,
    build_default_registry,
    generate,
    get_default_registry,
)
from exercises.seeded_random import SeededRandom
from exercises.sorting import SortingGenerator
from exercises.validators import validate
from exercises.vertical import VerticalGenerator

__all__ = [
    # Randomness
    "SeededRandom",
    # Exercise models
    "Exercise",
    "Payload",
    "ChoicePayload",
    "OrderingPayload",
    "BlankFillPayload",
    "GridFillPayload",
    "PointPlotPayload",
    "CategorizePayload",
    "NumberLinePayload",
    "FreeTextPayload",
    # Configuration
    "GeneratorConfig",
    "ChoiceConfig",
    "SortingConfig",
    "DragDropConfig",
    # Errors
    "TopicError",
    "TopicNotFound",
    "TopicNotSupported",
    # Abstract classes
    "ExerciseGenerator",
    # Generators
    "AdditionGenerator",
    "MultiplicationGenerator",
    "PlaceValueGenerator",
    "SortingGenerator",
    "GraphingGenerator",
    "DragDropGenerator",
    "NumberLineGenerator",
    "VerticalGenerator",
    # Registry
    "TopicRegistry",
    "build_default_registry",
    "get_default_registry",
    "generate",
    # Grading
    "validate",
    "correct_submission",
    "wrong_submission",
    "describe_answer",
]
