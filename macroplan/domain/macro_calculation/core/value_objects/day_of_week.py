"""DayOfWeek value object."""

from enum import Enum


class DayOfWeek(str, Enum):
    """Day slot of the weekly workout schedule."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"
