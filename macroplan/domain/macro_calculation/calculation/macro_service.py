"""MacroService - baseline macronutrient distribution."""

from ...shared.rounding import round_half_up
from ..core.coefficients import Coefficients
from ..core.value_objects.goal import Goal
from ..core.value_objects.macro_split import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    MacroSplit,
)


class MacroService:
    """Split daily calories into protein, carbs and fat grams.

    Goal-specific protein and fat ratios come from configuration; carbs
    take the rest (``1 - protein - fat``). Protein is then raised to a
    body-weight floor (``weight × min g/kg``). Carbs and fat are not
    re-derived after the floor applies, so macro calories may exceed the
    calorie target for heavy users on low targets.

    Calorie conversion:
        - Protein: 4 kcal/g
        - Carbohydrates: 4 kcal/g
        - Fat: 9 kcal/g
    """

    def calculate(
        self,
        calories: int,
        weight_kg: float,
        goal: Goal,
        coefficients: Coefficients,
    ) -> MacroSplit:
        """Calculate the baseline macro split.

        Args:
            calories: Goal-adjusted daily calories
            weight_kg: Body weight in kg
            goal: Nutritional goal
            coefficients: Configuration view

        Returns:
            MacroSplit: Protein/carbs/fat in grams

        Example:
            >>> split = MacroService().calculate(
            ...     calories=1979, weight_kg=70.0,
            ...     goal=Goal.MAINTENANCE, coefficients=Coefficients(),
            ... )
            >>> str(split)
            '124P / 223C / 66F'
        """
        protein_ratio = coefficients.protein_ratio(goal)
        fat_ratio = coefficients.fat_ratio(goal)
        carb_ratio = 1 - protein_ratio - fat_ratio

        protein_g = round_half_up(calories * protein_ratio / PROTEIN_KCAL_PER_G)
        carbs_g = round_half_up(calories * carb_ratio / CARBS_KCAL_PER_G)
        fat_g = round_half_up(calories * fat_ratio / FAT_KCAL_PER_G)

        min_protein_g = round_half_up(weight_kg * coefficients.min_protein_per_kg())

        return MacroSplit(
            protein_g=max(protein_g, min_protein_g),
            carbs_g=carbs_g,
            fat_g=fat_g,
        )
