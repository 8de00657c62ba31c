"""Tests for turning typed input into answers."""

from exercises.validators import validate
from models import Variant
from ui.parsing import INPUT_HINTS, input_cell_ids, parse_answer


class TestParseAnswer:
    """Typed text → decoded answer → validator."""

    def test_choice_by_letter_or_content(self, choice_exercise):
        assert parse_answer(choice_exercise, "b") == "14"
        assert parse_answer(choice_exercise, " 14 ") == "14"
        assert parse_answer(choice_exercise, "Z") is None

    def test_ordering_positions(self, ordering_exercise):
        answer = parse_answer(ordering_exercise, "2 3 1")
        assert answer == ["item-2", "item-3", "item-1"]
        assert validate(ordering_exercise, answer)
        assert parse_answer(ordering_exercise, "2, 3, 1") == answer

    def test_ordering_rejects_out_of_range(self, ordering_exercise):
        assert parse_answer(ordering_exercise, "1 2 9") is None
        assert parse_answer(ordering_exercise, "one two") is None

    def test_blank_fill(self, blank_fill_exercise):
        answer = parse_answer(blank_fill_exercise, "7, 6")
        assert answer == {"blank1": "7", "blank2": "6"}
        assert validate(blank_fill_exercise, answer)
        assert parse_answer(blank_fill_exercise, "7") is None

    def test_grid_fill_digit_run(self, grid_fill_exercise):
        assert input_cell_ids(grid_fill_exercise.payload) == ["res-0", "res-1"]
        answer = parse_answer(grid_fill_exercise, "92")
        assert answer == {"res-0": "9", "res-1": "2"}
        assert validate(grid_fill_exercise, answer)
        assert parse_answer(grid_fill_exercise, "9 2") == answer
        assert parse_answer(grid_fill_exercise, "921") is None

    def test_point_plot(self, point_plot_exercise):
        answer = parse_answer(point_plot_exercise, "(3, -2); 1,4")
        assert answer == [{"x": 3, "y": -2}, {"x": 1, "y": 4}]
        assert validate(point_plot_exercise, answer)
        assert parse_answer(point_plot_exercise, "3") is None
        assert parse_answer(point_plot_exercise, "a,b") is None

    def test_point_plot_decimals(self, point_plot_exercise):
        assert parse_answer(point_plot_exercise, "1.5,2") == [{"x": 1.5, "y": 2}]

    def test_categorize_letters(self, categorize_exercise):
        answer = parse_answer(categorize_exercise, "a b a")
        assert answer == {"item-4": "zone-even", "item-7": "zone-odd", "item-10": "zone-even"}
        assert validate(categorize_exercise, answer)
        assert parse_answer(categorize_exercise, "ABA") == answer
        assert parse_answer(categorize_exercise, "A C A") is None

    def test_number_line(self, number_line_single_exercise, number_line_multi_exercise):
        assert validate(number_line_single_exercise, parse_answer(number_line_single_exercise, "6"))
        multi = parse_answer(number_line_multi_exercise, "15 11 13")
        assert validate(number_line_multi_exercise, multi)
        assert parse_answer(number_line_multi_exercise, "x") is None

    def test_free_text(self, free_text_exercise):
        assert parse_answer(free_text_exercise, " 3/4 ") == "3/4"
        assert parse_answer(free_text_exercise, "   ") is None

    def test_every_variant_has_a_hint(self):
        assert set(INPUT_HINTS) == set(Variant)
