"""Value objects for macro calculation domain."""

from .activity_level import ActivityLevel
from .day_of_week import DayOfWeek
from .day_targets import DayTargets
from .gender import Gender
from .goal import Goal
from .macro_result import MacroResult
from .macro_split import MacroSplit
from .result_id import ResultId
from .units import HeightUnit, WeightUnit
from .user_input import UserInput
from .workout_entry import REST_TYPE, WorkoutEntry

__all__ = [
    "ActivityLevel",
    "DayOfWeek",
    "DayTargets",
    "Gender",
    "Goal",
    "HeightUnit",
    "MacroResult",
    "MacroSplit",
    "REST_TYPE",
    "ResultId",
    "UserInput",
    "WeightUnit",
    "WorkoutEntry",
]
