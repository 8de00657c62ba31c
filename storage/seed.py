"""Hand-authored sample exercises for a fresh database."""

from loguru import logger

from exercises.generic_models import Exercise
from .base import ExerciseStore, ExerciseStoreError

SAMPLE_EXERCISES = [
    {
        "id": "NL_nl-find-integer_sample",
        "topicId": "nl-find-integer",
        "variant": "number-line",
        "difficulty": "medium",
        "prompt": {"text": "Locate the number 4 on the number line."},
        "explanation": {"text": "4 is located at the specific mark on the line."},
        "payload": {
            "variant": "number-line",
            "min": 0,
            "max": 10,
            "step": 1,
            "labels": list(range(0, 11)),
            "mode": "single",
            "correctValue": 4,
        },
    },
    {
        "id": "MUL_g2-mul-word_sample",
        "topicId": "g2-mul-word",
        "variant": "choice",
        "difficulty": "medium",
        "prompt": {
            "text": "A bus makes 5 trips and carries 2 passengers each time. "
            "How many passengers in all?"
        },
        "explanation": {
            "text": "We have 5 groups of 2 passengers. So we multiply: 5 × 2 = 10 passengers."
        },
        "payload": {
            "variant": "choice",
            "options": [
                {"id": "A", "content": "5 passengers", "isCorrect": False},
                {"id": "B", "content": "10 passengers", "isCorrect": True},
                {"id": "C", "content": "12 passengers", "isCorrect": False},
                {"id": "D", "content": "7 passengers", "isCorrect": False},
            ],
        },
    },
    {
        "id": "NL_nl-select-odd_sample",
        "topicId": "nl-select-odd",
        "variant": "number-line",
        "difficulty": "medium",
        "prompt": {"text": "Select all the odd numbers on the number line."},
        "explanation": {"text": "Odd numbers end in 1, 3, 5, 7, or 9."},
        "payload": {
            "variant": "number-line",
            "min": 18,
            "max": 28,
            "step": 1,
            "labels": list(range(18, 29)),
            "mode": "multi",
            "correctValues": [19, 21, 23, 25, 27],
        },
    },
    {
        "id": "ADD_g1-add-making-10_sample",
        "topicId": "g1-add-making-10",
        "variant": "blank-fill",
        "difficulty": "medium",
        "prompt": {"text": "Fill in the missing number:"},
        "explanation": {
            "text": "Subtract the known part from the total to find the missing part."
        },
        "payload": {
            "variant": "blank-fill",
            "template": "8 + [blank1] = 23",
            "blanks": [{"id": "blank1", "answer": "15"}],
            "instructions": "Fill in the missing values.",
        },
    },
    {
        "id": "SORT_g1-order-numbers_sample",
        "topicId": "g1-order-numbers",
        "variant": "ordering",
        "difficulty": "medium",
        "prompt": {"text": "Arrange these numbers from least to greatest."},
        "explanation": {
            "text": "The items should be arranged in the following order:",
            "steps": ["25", "38", "44", "82"],
        },
        "payload": {
            "variant": "ordering",
            "items": [
                {"id": "item-25", "content": "25"},
                {"id": "item-44", "content": "44"},
                {"id": "item-38", "content": "38"},
                {"id": "item-82", "content": "82"},
            ],
            "correctOrder": ["item-25", "item-38", "item-44", "item-82"],
        },
    },
    {
        "id": "GRAPH_g5-graph-points_sample",
        "topicId": "g5-graph-points",
        "variant": "point-plot",
        "difficulty": "medium",
        "prompt": {
            "text": "Plot the following points on the coordinate plane: (-8, 1) and (4, -3)."
        },
        "explanation": {
            "text": "For (-8, 1), start at the origin. Move 8 units left and 1 units up. "
            "Repeat for the second point."
        },
        "payload": {
            "variant": "point-plot",
            "xRange": [-10, 10],
            "yRange": [-10, 10],
            "gridStep": 1,
            "targetType": "point",
            "correctPoints": [{"x": -8, "y": 1}, {"x": 4, "y": -3}],
        },
    },
    {
        "id": "MUL_g3-mul-repeated-addition_sample",
        "topicId": "g3-mul-repeated-addition",
        "variant": "blank-fill",
        "difficulty": "medium",
        "prompt": {"text": "Complete the pattern:"},
        "explanation": {
            "text": "Notice how the answer grows by adding a zero each time? "
            "When you multiply by 10, the digit moves one place to the left."
        },
        "payload": {
            "variant": "blank-fill",
            "template": "[blank1] × 4 = 12\n[blank2] × 40 = 120\n"
            "[blank3] × 400 = 1,200\n[blank4] × 4,000 = 12,000",
            "blanks": [
                {"id": "blank1", "answer": "3"},
                {"id": "blank2", "answer": "3"},
                {"id": "blank3", "answer": "3"},
                {"id": "blank4", "answer": "3"},
            ],
            "instructions": "Fill each blank with the correct number.",
        },
    },
    {
        "id": "VM_g4-mul-steps_sample",
        "topicId": "g4-mul-steps",
        "variant": "grid-fill",
        "difficulty": "medium",
        "prompt": {"text": "Fill in the missing numbers to complete the multiplication."},
        "explanation": {
            "text": "Multiply the top number by the ones digit, then by the tens digit "
            "(keep the placeholder zero), then add the partial products.",
            "steps": ["52 × 8 = 416", "52 × 20 = 1040", "416 + 1040 = 1456"],
        },
        "payload": {
            "variant": "grid-fill",
            "rows": [
                {"kind": "factor", "cells": [{"value": "5"}, {"value": "2"}]},
                {
                    "kind": "factor-operator",
                    "operator": "×",
                    "cells": [{"value": "2"}, {"value": "8"}],
                },
                {
                    "kind": "partial",
                    "cells": [{"value": "4"}, {"value": "1"}, {"value": "6"}],
                },
                {
                    "kind": "partial-operator",
                    "operator": "+",
                    "cells": [
                        {"value": "1"},
                        {"value": "0"},
                        {"value": "4"},
                        {"value": "0"},
                    ],
                },
                {
                    "kind": "result",
                    "cells": [
                        {"isInput": True, "id": f"res-{i}"} for i in range(4)
                    ],
                },
            ],
            "expected": {"res-0": "1", "res-1": "4", "res-2": "5", "res-3": "6"},
            "maxLength": 6,
        },
    },
]


def sample_exercises() -> list[Exercise]:
    return [Exercise.from_record(record) for record in SAMPLE_EXERCISES]


def seed_sample_exercises(store: ExerciseStore) -> int:
    """Store every sample exercise not already present.

    Returns:
        Number of exercises added.
    """
    added = 0
    for exercise in sample_exercises():
        if store.get_by_id(exercise.id) is not None:
            continue
        try:
            store.save(exercise)
        except ExerciseStoreError as e:
            logger.warning("Skipping sample exercise {}: {}", exercise.id, e)
            continue
        added += 1
    logger.info("Seeded {} sample exercises", added)
    return added
