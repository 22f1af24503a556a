"""WorkoutEntry value object - one slot of the weekly schedule."""

from dataclasses import dataclass
from typing import Optional

from ..exceptions.domain_errors import InvalidWorkoutScheduleError
from .day_of_week import DayOfWeek

REST_TYPE = "rest"


@dataclass(frozen=True)
class WorkoutEntry:
    """A workout (or rest) on a given weekday.

    The type is a free-form key resolved against the workout type
    catalog at calculation time; it is not validated here so that
    operator-added types work without a redeploy.

    Attributes:
        day: Day of the week
        type: Workout type key (e.g. "strength", "rest")
        hours: Duration in hours (0-24)
        notes: Optional free text, kept with the record only
    """

    day: DayOfWeek
    type: str
    hours: float
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.day, DayOfWeek):
            try:
                object.__setattr__(self, "day", DayOfWeek(self.day))
            except ValueError as e:
                raise InvalidWorkoutScheduleError(
                    f"Day must be a valid day of the week, got {self.day!r}"
                ) from e

        key = (self.type or "").strip()
        if not key:
            raise InvalidWorkoutScheduleError("Workout type must not be empty")
        object.__setattr__(self, "type", key)

        if not (0 <= self.hours <= 24):
            raise InvalidWorkoutScheduleError(
                f"Hours must be between 0 and 24, got {self.hours}"
            )

    @property
    def is_rest(self) -> bool:
        return self.type == REST_TYPE
