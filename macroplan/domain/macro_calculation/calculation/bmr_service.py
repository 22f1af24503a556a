"""BMRService - Basal Metabolic Rate calculation."""

from ..core.value_objects.gender import Gender


class BMRService:
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    The value is kept as a real number; only the reported BMR is rounded,
    TDEE is computed from the unrounded value.

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(
        self, weight_kg: float, height_cm: float, age: int, gender: Gender
    ) -> float:
        """Calculate BMR from metric body data.

        Args:
            weight_kg: Body weight in kilograms
            height_cm: Height in centimeters
            age: Age in years
            gender: Biological sex

        Returns:
            float: BMR in kcal/day (unrounded)

        Example:
            >>> BMRService().calculate(70.0, 175.0, 30, Gender.MALE)
            1648.75
        """
        base = 10 * weight_kg + 6.25 * height_cm - 5 * age
        return base + gender.bmr_offset()
