"""Configuration for exercise generation.

These configuration models allow callers to tune generation, such as the
number of options in a choice exercise or how many items a sorting
exercise contains at each tier.
"""

from pydantic import BaseModel, Field

from models import DifficultyTier


class ChoiceConfig(BaseModel):
    """Configuration for choice generation."""

    total_options: int = Field(default=4, ge=2, le=6)


class SortingConfig(BaseModel):
    """Item counts per tier for ordering exercises."""

    easy_items: int = Field(default=4, ge=2, le=8)
    medium_items: int = Field(default=5, ge=2, le=8)
    hard_items: int = Field(default=6, ge=2, le=8)

    def items_for(self, difficulty: DifficultyTier) -> int:
        return {
            DifficultyTier.EASY: self.easy_items,
            DifficultyTier.MEDIUM: self.medium_items,
            DifficultyTier.HARD: self.hard_items,
        }[difficulty]


class DragDropConfig(BaseModel):
    """Configuration for categorize generation."""

    item_count: int = Field(default=6, ge=2, le=12)


class GeneratorConfig(BaseModel):
    """Master configuration for all generator families."""

    choice: ChoiceConfig = Field(default_factory=ChoiceConfig)
    sorting: SortingConfig = Field(default_factory=SortingConfig)
    drag_drop: DragDropConfig = Field(default_factory=DragDropConfig)
