"""MacroResult value object - output of one engine run."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .activity_level import ActivityLevel
from .day_targets import DayTargets
from .macro_split import MacroSplit


@dataclass(frozen=True)
class MacroResult:
    """Calorie and macro targets computed for one user and schedule.

    All calorie and gram figures are whole numbers. Workout-day and
    rest-day targets are nullable as a group.

    Attributes:
        bmr: Basal metabolic rate (rounded)
        tdee: Total daily energy expenditure
        daily_calories: Goal-adjusted daily calories
        macros: Baseline protein/carbs/fat grams
        workout_day: Targets for training days
        rest_day: Targets for rest days
        activity_level: Band selected from the schedule
        average_weighted_hours: Weighted hours per day that chose the band
        calculated_at: When the calculation ran
    """

    bmr: int
    tdee: int
    daily_calories: int
    macros: MacroSplit
    workout_day: Optional[DayTargets]
    rest_day: Optional[DayTargets]
    activity_level: ActivityLevel
    average_weighted_hours: float
    calculated_at: datetime

    @property
    def protein(self) -> int:
        return self.macros.protein_g

    @property
    def carbs(self) -> int:
        return self.macros.carbs_g

    @property
    def fats(self) -> int:
        return self.macros.fat_g
