"""ConfigCategory value object - grouping of configuration keys."""

from enum import Enum


class ConfigCategory(str, Enum):
    """Category a configuration key belongs to.

    Workout intensities used to live here as a category; they are now
    workout type definitions in the catalog.
    """

    ACTIVITY_LEVEL = "activity_level"
    GOAL_ADJUSTMENT = "goal_adjustment"
    MACRO_RATIO = "macro_ratio"
    SPECIAL_DAY = "special_day"
