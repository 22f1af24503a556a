"""MacroEngine - full calculation pipeline."""

import logging
from datetime import datetime, timezone
from typing import Mapping, Optional, Sequence

from ...shared.rounding import round_half_up
from ..core.coefficients import Coefficients, IntensityTable
from ..core.value_objects.macro_result import MacroResult
from ..core.value_objects.user_input import UserInput
from ..core.value_objects.workout_entry import WorkoutEntry
from .activity_service import ActivityService
from .bmr_service import BMRService
from .energy_service import EnergyService
from .macro_service import MacroService
from .special_day_service import SpecialDayService

logger = logging.getLogger(__name__)


class MacroEngine:
    """
    Compute calorie and macro targets from body data and a weekly schedule.

    Flow:
    1. Normalize weight to kg and height to cm
    2. BMR (Mifflin-St Jeor), kept unrounded
    3. Activity band from intensity-weighted weekly hours
    4. TDEE = round(BMR × activity multiplier)
    5. Daily calories = round(TDEE × goal multiplier)
    6. Baseline macro split with minimum-protein floor
    7. Workout-day and rest-day variants

    The engine is deterministic and side-effect free: the same input and
    snapshots always give the same numbers. Unknown workout types and
    missing configuration keys resolve to fallbacks, never to errors.
    """

    def __init__(
        self,
        bmr_service: Optional[BMRService] = None,
        activity_service: Optional[ActivityService] = None,
        energy_service: Optional[EnergyService] = None,
        macro_service: Optional[MacroService] = None,
        special_day_service: Optional[SpecialDayService] = None,
    ):
        self._bmr_service = bmr_service or BMRService()
        self._activity_service = activity_service or ActivityService()
        self._energy_service = energy_service or EnergyService()
        self._macro_service = macro_service or MacroService()
        self._special_day_service = special_day_service or SpecialDayService()

    def calculate(
        self,
        user_input: UserInput,
        workouts: Sequence[WorkoutEntry],
        config_snapshot: Mapping[str, float],
        intensity_snapshot: Mapping[str, float],
        calculated_at: Optional[datetime] = None,
    ) -> MacroResult:
        """
        Run the full pipeline.

        Args:
            user_input: Validated body metrics and goal
            workouts: Weekly schedule (validated entries)
            config_snapshot: Configuration map (key -> value)
            intensity_snapshot: Active workout intensities (key -> value)
            calculated_at: Timestamp to stamp on the result (defaults to now)

        Returns:
            MacroResult with all targets
        """
        coefficients = Coefficients(config_snapshot)
        intensities = IntensityTable(intensity_snapshot)

        # Step 1: Normalize units
        weight_kg = user_input.weight_kg()
        height_cm = user_input.height_cm()

        # Step 2: BMR
        bmr = self._bmr_service.calculate(
            weight_kg=weight_kg,
            height_cm=height_cm,
            age=user_input.age,
            gender=user_input.gender,
        )

        # Step 3: Activity band
        activity = self._activity_service.assess(workouts, intensities, coefficients)

        # Steps 4-5: TDEE and goal adjustment
        tdee = self._energy_service.tdee(bmr, activity.multiplier)
        daily_calories = self._energy_service.daily_calories(
            tdee, user_input.goal, coefficients
        )

        # Step 6: Baseline split
        macros = self._macro_service.calculate(
            calories=daily_calories,
            weight_kg=weight_kg,
            goal=user_input.goal,
            coefficients=coefficients,
        )

        # Step 7: Day-type variants
        workout_day = self._special_day_service.calculate(
            daily_calories, weight_kg, coefficients.workout_day()
        )
        rest_day = self._special_day_service.calculate(
            daily_calories, weight_kg, coefficients.rest_day()
        )

        logger.debug(
            "macro calculation: bmr=%.2f band=%s tdee=%d calories=%d",
            bmr,
            activity.level.value,
            tdee,
            daily_calories,
        )

        return MacroResult(
            bmr=round_half_up(bmr),
            tdee=tdee,
            daily_calories=daily_calories,
            macros=macros,
            workout_day=workout_day,
            rest_day=rest_day,
            activity_level=activity.level,
            average_weighted_hours=activity.average_weighted_hours,
            calculated_at=calculated_at or datetime.now(timezone.utc),
        )
