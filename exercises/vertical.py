"""Long multiplication laid out as a grid of digit cells."""

from models import DifficultyTier
from .generators import Builder, ExerciseGenerator
from .generic_models import Exercise, GridCell, GridFillPayload, GridRow, RowKind
from .seeded_random import SeededRandom


def _given_row(kind: RowKind, number: int | str, operator: str | None = None) -> GridRow:
    return GridRow(
        kind=kind,
        operator=operator,
        cells=[GridCell(value=d) for d in str(number)],
    )


def _input_row(
    kind: RowKind,
    number: int,
    prefix: str,
    expected: dict[str, str],
    operator: str | None = None,
    fixed_trailing: int = 0,
) -> GridRow:
    """Row whose digits are inputs, except ``fixed_trailing`` placeholder zeros."""
    digits = str(number)
    input_digits = digits[: len(digits) - fixed_trailing]
    cells = []
    for idx, digit in enumerate(input_digits):
        cell_id = f"{prefix}-{idx}"
        expected[cell_id] = digit
        cells.append(GridCell(is_input=True, id=cell_id))
    cells.extend(GridCell(value="0") for _ in range(fixed_trailing))
    return GridRow(kind=kind, operator=operator, cells=cells)


class VerticalGenerator(ExerciseGenerator):
    prefix = "VM"

    def builders(self) -> dict[str, Builder]:
        return {"g4-mul-steps": self._multiply_steps}

    def _multiply_steps(
        self, topic_id: str, difficulty: DifficultyTier, rng: SeededRandom
    ) -> Exercise:
        top = rng.int(12, 89)
        bottom = rng.int(11, 19) if difficulty == DifficultyTier.HARD else rng.int(2, 9)
        total = top * bottom

        expected: dict[str, str] = {}
        rows = [
            _given_row("factor", top),
            _given_row("factor-operator", bottom, operator="×"),
        ]
        steps = []

        if bottom > 9:
            ones_product = top * (bottom % 10)
            tens_product = top * (bottom // 10) * 10
            rows.append(_input_row("partial", ones_product, "p1", expected))
            rows.append(
                _input_row(
                    "partial-operator",
                    tens_product,
                    "p2",
                    expected,
                    operator="+",
                    fixed_trailing=1,
                )
            )
            steps = [
                f"{top} × {bottom % 10} = {ones_product}",
                f"{top} × {bottom // 10 * 10} = {tens_product}",
                f"{ones_product} + {tens_product} = {total}",
            ]

        rows.append(_input_row("result", total, "res", expected))

        explanation = f"Multiply {top} by {bottom}. {top} × {bottom} = {total}."
        if steps:
            explanation = (
                "Multiply the top number by the ones digit, then by the tens digit "
                "(keep the placeholder zero), then add the partial products."
            )

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt="Fill in the missing numbers to complete the multiplication.",
            payload=GridFillPayload(
                rows=rows,
                expected=expected,
                max_length=max(len(str(top)), len(str(bottom)), len(str(total))),
            ),
            explanation=explanation,
            steps=steps,
        )
