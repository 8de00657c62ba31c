"""Tests for per-variant answer validation."""

import json

import pytest

from exercises.validators import VALIDATORS, validate
from models import Variant


class TestRegistry:
    def test_every_variant_has_a_rule(self):
        assert set(VALIDATORS) == set(Variant)


class TestChoice:
    def test_correct_content_passes(self, choice_exercise):
        assert validate(choice_exercise, "14")

    def test_other_option_fails(self, choice_exercise):
        assert not validate(choice_exercise, "12")

    def test_label_is_not_content(self, choice_exercise):
        assert not validate(choice_exercise, "B")

    def test_bytes_are_decoded(self, choice_exercise):
        assert validate(choice_exercise, b"14")


class TestOrdering:
    def test_correct_order_passes(self, ordering_exercise):
        assert validate(ordering_exercise, ["item-2", "item-3", "item-1"])
        assert validate(ordering_exercise, '["item-2", "item-3", "item-1"]')

    def test_reversed_order_fails(self, ordering_exercise):
        assert not validate(ordering_exercise, ["item-1", "item-3", "item-2"])

    def test_partial_order_fails(self, ordering_exercise):
        assert not validate(ordering_exercise, ["item-2", "item-3"])


class TestBlankFill:
    def test_all_blanks_correct_passes(self, blank_fill_exercise):
        assert validate(blank_fill_exercise, {"blank1": "7", "blank2": "6"})

    def test_whitespace_and_case_are_ignored(self, blank_fill_exercise):
        assert validate(blank_fill_exercise, {"blank1": " 7 ", "blank2": "6\n"})

    def test_whole_numbers_are_accepted(self, blank_fill_exercise):
        assert validate(blank_fill_exercise, '{"blank1": 7, "blank2": 6}')

    def test_one_wrong_blank_fails(self, blank_fill_exercise):
        assert not validate(blank_fill_exercise, {"blank1": "7", "blank2": "5"})

    def test_missing_blank_fails(self, blank_fill_exercise):
        assert not validate(blank_fill_exercise, {"blank1": "7"})

    def test_extra_keys_are_ignored(self, blank_fill_exercise):
        assert validate(blank_fill_exercise, {"blank1": "7", "blank2": "6", "x": "1"})


class TestGridFill:
    def test_correct_cells_pass(self, grid_fill_exercise):
        assert validate(grid_fill_exercise, {"res-0": "9", "res-1": "2"})

    def test_wrong_cell_fails(self, grid_fill_exercise):
        assert not validate(grid_fill_exercise, {"res-0": "9", "res-1": "3"})

    def test_missing_cell_fails(self, grid_fill_exercise):
        assert not validate(grid_fill_exercise, {"res-0": "9"})


class TestPointPlot:
    def test_exact_points_pass_in_any_order(self, point_plot_exercise):
        assert validate(point_plot_exercise, [{"x": 1, "y": 4}, {"x": 3, "y": -2}])

    def test_within_tolerance_passes(self, point_plot_exercise):
        submitted = [{"x": 3.0005, "y": -2}, {"x": 1, "y": 4}]
        assert validate(point_plot_exercise, submitted)

    def test_outside_tolerance_fails(self, point_plot_exercise):
        submitted = [{"x": 3.002, "y": -2}, {"x": 1, "y": 4}]
        assert not validate(point_plot_exercise, submitted)

    def test_tolerance_applies_to_both_coordinates(self, point_plot_exercise):
        submitted = [{"x": 3.0005, "y": -1.9995}, {"x": 0.9995, "y": 4.0005}]
        assert validate(point_plot_exercise, submitted)

    def test_y_outside_tolerance_fails(self, point_plot_exercise):
        submitted = [{"x": 3, "y": -1.998}, {"x": 1, "y": 4}]
        assert not validate(point_plot_exercise, submitted)

    def test_pairs_are_accepted(self, point_plot_exercise):
        assert validate(point_plot_exercise, "[[3, -2], [1, 4]]")

    def test_missing_point_fails(self, point_plot_exercise):
        assert not validate(point_plot_exercise, [{"x": 3, "y": -2}])


class TestCategorize:
    def test_correct_mapping_passes(self, categorize_exercise):
        submitted = {"item-4": "zone-even", "item-7": "zone-odd", "item-10": "zone-even"}
        assert validate(categorize_exercise, submitted)

    def test_misplaced_item_fails(self, categorize_exercise):
        submitted = {"item-4": "zone-odd", "item-7": "zone-odd", "item-10": "zone-even"}
        assert not validate(categorize_exercise, submitted)

    def test_unplaced_item_fails(self, categorize_exercise):
        assert not validate(categorize_exercise, {"item-4": "zone-even", "item-7": "zone-odd"})


class TestNumberLine:
    def test_single_value_passes(self, number_line_single_exercise):
        assert validate(number_line_single_exercise, 6)
        assert validate(number_line_single_exercise, "[6]")
        assert validate(number_line_single_exercise, "6")

    def test_single_wrong_value_fails(self, number_line_single_exercise):
        assert not validate(number_line_single_exercise, [7])

    def test_single_with_extra_values_fails(self, number_line_single_exercise):
        assert not validate(number_line_single_exercise, [6, 7])

    def test_multi_in_any_order_passes(self, number_line_multi_exercise):
        assert validate(number_line_multi_exercise, [15, 13, 11])

    def test_multi_omission_fails(self, number_line_multi_exercise):
        assert not validate(number_line_multi_exercise, [11, 13])

    def test_multi_extra_value_fails(self, number_line_multi_exercise):
        assert not validate(number_line_multi_exercise, [11, 12, 13, 15])


class TestFreeText:
    def test_answer_passes_ignoring_case_and_space(self, free_text_exercise):
        assert validate(free_text_exercise, "  3/4 ")

    def test_acceptable_answers_pass(self, free_text_exercise):
        assert validate(free_text_exercise, "0.75")
        assert validate(free_text_exercise, "6/8")

    def test_other_answer_fails(self, free_text_exercise):
        assert not validate(free_text_exercise, "4/3")


class TestMalformedSubmissions:
    """Malformed input is a wrong answer, never an exception."""

    @pytest.mark.parametrize(
        "submitted",
        [
            None, 3.5, True, "{not json", "[1, 2", b"\xff", {"x": object()}, [None],
            "[" * 100000,
        ],
    )
    def test_never_raises(self, all_variant_exercises, submitted):
        for exercise in all_variant_exercises:
            assert validate(exercise, submitted) is False

    def test_wrong_shape_is_false(self, ordering_exercise, blank_fill_exercise):
        assert not validate(ordering_exercise, {"item-1": 1})
        assert not validate(blank_fill_exercise, json.dumps(["7", "6"]))

    def test_boolean_is_not_a_number(self, number_line_single_exercise):
        assert not validate(number_line_single_exercise, [True])
