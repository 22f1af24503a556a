"""SpecialDayService - workout-day and rest-day variants."""

from ...shared.rounding import round_half_up
from ..core.coefficients import SpecialDayCoefficients
from ..core.value_objects.day_targets import DayTargets
from ..core.value_objects.macro_split import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    MacroSplit,
)


class SpecialDayService:
    """Derive day-type targets from the baseline daily calories.

    Protein is set per kg of body weight, fat as a share of the day's
    calories, and carbs absorb whatever calories remain. Carbs are not
    clamped and go negative when protein and fat alone exceed the day's
    calories.
    """

    def calculate(
        self,
        base_calories: int,
        weight_kg: float,
        coefficients: SpecialDayCoefficients,
    ) -> DayTargets:
        """Calculate targets for one day type.

        Args:
            base_calories: Goal-adjusted daily calories
            weight_kg: Body weight in kg
            coefficients: Multiplier, protein g/kg and fat ratio

        Returns:
            DayTargets: Calories and macro grams for the day type
        """
        calories = round_half_up(base_calories * coefficients.calorie_multiplier)
        protein_g = round_half_up(weight_kg * coefficients.protein_per_kg)
        fat_g = round_half_up(calories * coefficients.fat_ratio / FAT_KCAL_PER_G)

        carb_calories = (
            calories - protein_g * PROTEIN_KCAL_PER_G - fat_g * FAT_KCAL_PER_G
        )
        carbs_g = round_half_up(carb_calories / CARBS_KCAL_PER_G)

        return DayTargets(
            calories=calories,
            macros=MacroSplit(protein_g=protein_g, carbs_g=carbs_g, fat_g=fat_g),
        )
