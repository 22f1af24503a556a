"""ActivityService - activity multiplier from the weekly schedule."""

from dataclasses import dataclass
from typing import Iterable

from ..core.coefficients import Coefficients, IntensityTable
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.workout_entry import WorkoutEntry

DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class ActivityAssessment:
    """Outcome of rating a weekly schedule.

    Attributes:
        average_weighted_hours: Intensity-weighted hours per day
        level: Selected activity band
        multiplier: TDEE multiplier for the band
    """

    average_weighted_hours: float
    level: ActivityLevel
    multiplier: float


class ActivityService:
    """Rate a weekly workout schedule.

    Each non-rest entry contributes ``hours × intensity`` to the weekly
    weighted hours; the weekly sum is averaged over 7 days regardless of
    how many days carry an entry, then mapped to an activity band.
    """

    def weighted_hours(
        self, workouts: Iterable[WorkoutEntry], intensities: IntensityTable
    ) -> float:
        """Sum intensity-weighted hours over the schedule.

        Args:
            workouts: Weekly schedule (several entries per day allowed)
            intensities: Workout type intensity table

        Returns:
            float: Weighted hours for the week
        """
        total = 0.0
        for workout in workouts:
            if workout.is_rest:
                continue
            total += workout.hours * intensities.intensity_of(workout.type)
        return total

    def assess(
        self,
        workouts: Iterable[WorkoutEntry],
        intensities: IntensityTable,
        coefficients: Coefficients,
    ) -> ActivityAssessment:
        """Select activity band and multiplier for a schedule.

        Args:
            workouts: Weekly schedule
            intensities: Workout type intensity table
            coefficients: Configuration view for band multipliers

        Returns:
            ActivityAssessment: Average hours, band and multiplier

        Example:
            >>> week = [WorkoutEntry(DayOfWeek.MONDAY, "strength", 3.0)]
            >>> ActivityService().assess(week, IntensityTable(), Coefficients()).level
            <ActivityLevel.LIGHT: 'light'>
        """
        average = self.weighted_hours(workouts, intensities) / DAYS_PER_WEEK
        level = ActivityLevel.from_average_weighted_hours(average)
        return ActivityAssessment(
            average_weighted_hours=average,
            level=level,
            multiplier=coefficients.activity_multiplier(level),
        )
