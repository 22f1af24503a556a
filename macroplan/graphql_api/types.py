"""GraphQL types for macro calculation and configuration.

Output types mirror domain value objects; input types carry raw values
that are validated when mapped to domain objects.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

import strawberry


__all__ = [
    # Enums
    "GenderEnum",
    "GoalEnum",
    "WeightUnitEnum",
    "HeightUnitEnum",
    "DayOfWeekEnum",
    "ActivityLevelEnum",
    "ConfigCategoryEnum",
    # Output types
    "DayTargetsType",
    "MacroResultType",
    "UserInputType",
    "WorkoutEntryType",
    "CalculationRecordType",
    "ResultPageType",
    "ConfigItemType",
    "ConfigGroupType",
    "UpdateConfigResultType",
    "WorkoutTypeType",
    # Input types
    "UserInputInput",
    "WorkoutEntryInput",
    "CalculateMacrosInput",
    "ConfigUpdateInput",
    "CreateWorkoutTypeInput",
    "UpdateWorkoutTypeInput",
]


# ============================================
# ENUMS
# ============================================


@strawberry.enum
class GenderEnum(str, Enum):
    MALE = "male"
    FEMALE = "female"


@strawberry.enum
class GoalEnum(str, Enum):
    WEIGHT_LOSS = "weight_loss"
    MAINTENANCE = "maintenance"
    MUSCLE_GAIN = "muscle_gain"


@strawberry.enum
class WeightUnitEnum(str, Enum):
    KG = "kg"
    LBS = "lbs"


@strawberry.enum
class HeightUnitEnum(str, Enum):
    CM = "cm"
    FT = "ft"


@strawberry.enum
class DayOfWeekEnum(str, Enum):
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


@strawberry.enum
class ActivityLevelEnum(str, Enum):
    """Activity band selected from the weekly schedule."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    VERY_ACTIVE = "very_active"
    EXTRA_ACTIVE = "extra_active"
    ATHLETE = "athlete"


@strawberry.enum
class ConfigCategoryEnum(str, Enum):
    ACTIVITY_LEVEL = "activity_level"
    GOAL_ADJUSTMENT = "goal_adjustment"
    MACRO_RATIO = "macro_ratio"
    SPECIAL_DAY = "special_day"


# ============================================
# OUTPUT TYPES
# ============================================


@strawberry.type
class DayTargetsType:
    """Targets for a workout day or rest day."""

    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int


@strawberry.type
class MacroResultType:
    """Calorie and macro targets of one calculation."""

    id: strawberry.ID
    bmr: int
    tdee: int
    daily_calories: int
    protein: int
    carbs: int
    fats: int
    workout_day: Optional[DayTargetsType]
    rest_day: Optional[DayTargetsType]
    activity_level: ActivityLevelEnum
    average_weighted_hours: float
    calculated_at: datetime


@strawberry.type
class UserInputType:
    age: int
    gender: GenderEnum
    weight: float
    weight_unit: WeightUnitEnum
    height: float
    height_unit: HeightUnitEnum
    goal: GoalEnum


@strawberry.type
class WorkoutEntryType:
    day: DayOfWeekEnum
    type: str
    hours: float
    notes: Optional[str] = None


@strawberry.type
class CalculationRecordType:
    """Recorded calculation with the input that produced it."""

    id: strawberry.ID
    user_input: UserInputType
    workouts: List[WorkoutEntryType]
    result: MacroResultType


@strawberry.type
class ResultPageType:
    records: List[CalculationRecordType]
    page: int
    limit: int
    total: int
    total_pages: int


@strawberry.type
class ConfigItemType:
    key: str
    value: float
    category: ConfigCategoryEnum
    label: str
    description: Optional[str]
    updated_at: datetime


@strawberry.type
class ConfigGroupType:
    category: ConfigCategoryEnum
    items: List[ConfigItemType]


@strawberry.type
class UpdateConfigResultType:
    updated: List[str]
    skipped: List[str]
    configurations: List[ConfigGroupType]


@strawberry.type
class WorkoutTypeType:
    """Workout type definition with its intensity multiplier."""

    id: strawberry.ID
    key: str
    name: str
    intensity: float
    icon: Optional[str]
    color: Optional[str]
    description: Optional[str]
    sort_order: int
    is_active: bool
    is_default: bool


# ============================================
# INPUT TYPES
# ============================================


@strawberry.input
class UserInputInput:
    age: int
    gender: GenderEnum
    weight: float
    height: float
    goal: GoalEnum
    weight_unit: WeightUnitEnum = WeightUnitEnum.KG
    height_unit: HeightUnitEnum = HeightUnitEnum.CM


@strawberry.input
class WorkoutEntryInput:
    day: DayOfWeekEnum
    type: str = "rest"
    hours: float = 0.0
    notes: Optional[str] = None


@strawberry.input
class CalculateMacrosInput:
    user_input: UserInputInput
    workouts: List[WorkoutEntryInput]


@strawberry.input
class ConfigUpdateInput:
    key: str
    value: float


@strawberry.input
class CreateWorkoutTypeInput:
    key: str
    name: str
    intensity: float
    icon: Optional[str] = None
    color: Optional[str] = None
    description: Optional[str] = None
    sort_order: int = 0


@strawberry.input
class UpdateWorkoutTypeInput:
    id: strawberry.ID
    name: Optional[str] = None
    intensity: Optional[float] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    description: Optional[str] = None
    sort_order: Optional[int] = None
    is_active: Optional[bool] = None
