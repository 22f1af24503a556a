"""DayTargets value object - calorie and macro targets for a day type."""

from dataclasses import dataclass

from .macro_split import MacroSplit


@dataclass(frozen=True)
class DayTargets:
    """Targets for a workout day or a rest day.

    Attributes:
        calories: Daily calories for this day type
        macros: Macro grams for this day type
    """

    calories: int
    macros: MacroSplit

    @property
    def protein_g(self) -> int:
        return self.macros.protein_g

    @property
    def carbs_g(self) -> int:
        return self.macros.carbs_g

    @property
    def fat_g(self) -> int:
        return self.macros.fat_g
