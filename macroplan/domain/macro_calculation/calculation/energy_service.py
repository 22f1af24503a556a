"""EnergyService - TDEE and goal-adjusted calories."""

from ...shared.rounding import round_half_up
from ..core.coefficients import Coefficients
from ..core.value_objects.goal import Goal


class EnergyService:
    """Scale BMR to daily energy targets.

    Formula:
        TDEE = round(BMR × activity multiplier)
        daily calories = round(TDEE × goal multiplier)
    """

    def tdee(self, bmr: float, activity_multiplier: float) -> int:
        """Calculate TDEE from unrounded BMR.

        Example:
            >>> EnergyService().tdee(1648.75, 1.2)
            1979
        """
        return round_half_up(bmr * activity_multiplier)

    def daily_calories(self, tdee: int, goal: Goal, coefficients: Coefficients) -> int:
        """Apply the goal multiplier to TDEE.

        Args:
            tdee: Total daily energy expenditure
            goal: Nutritional goal
            coefficients: Configuration view

        Returns:
            int: Goal-adjusted daily calories
        """
        return round_half_up(tdee * coefficients.goal_multiplier(goal))
