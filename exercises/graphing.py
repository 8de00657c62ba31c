"""Coordinate plane exercises."""

from models import DifficultyTier
from .generators import Builder, ExerciseGenerator
from .generic_models import Exercise, Point, PointPlotPayload
from .seeded_random import SeededRandom


class GraphingGenerator(ExerciseGenerator):
    prefix = "GRAPH"

    def builders(self) -> dict[str, Builder]:
        return {"g5-graph-points": self._graph_point}

    def _graph_point(
        self, topic_id: str, difficulty: DifficultyTier, rng: SeededRandom
    ) -> Exercise:
        # Quadrant I below hard, all four quadrants at hard.
        is_hard = difficulty == DifficultyTier.HARD
        low = -9 if is_hard else 0
        x = rng.int(low, 9)
        y = rng.int(low, 9)
        axis_min = -10 if is_hard else 0

        return self.make_exercise(
            topic_id,
            difficulty,
            rng,
            prompt=f"Plot the point ({x}, {y}) on the coordinate plane.",
            payload=PointPlotPayload(
                x_range=(axis_min, 10),
                y_range=(axis_min, 10),
                grid_step=1,
                target_type="point",
                correct_points=[Point(x=x, y=y)],
            ),
            explanation=f"To plot the point ({x}, {y}):",
            steps=[
                "Start at the origin (0, 0).",
                f"Move {abs(x)} units {'right' if x >= 0 else 'left'} along the x-axis.",
                f"Move {abs(y)} units {'up' if y >= 0 else 'down'} along the y-axis.",
                "Place a point at that location.",
            ],
        )
