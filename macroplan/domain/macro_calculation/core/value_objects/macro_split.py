"""MacroSplit value object - macronutrient distribution."""

from dataclasses import dataclass

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9


@dataclass(frozen=True)
class MacroSplit:
    """Macronutrient distribution in grams.

    Uses standard calorie conversion: protein 4 kcal/g, carbs 4 kcal/g,
    fat 9 kcal/g. Values are not range-checked: carbs can come out
    negative for extreme special-day inputs and totals can exceed the
    calorie target when the protein floor applies.

    Attributes:
        protein_g: Protein in grams
        carbs_g: Carbohydrates in grams
        fat_g: Fat in grams
    """

    protein_g: int
    carbs_g: int
    fat_g: int

    def total_calories(self) -> int:
        """Calculate total calories from macronutrients.

        Returns:
            int: protein×4 + carbs×4 + fat×9

        Example:
            >>> MacroSplit(protein_g=126, carbs_g=226, fat_g=67).total_calories()
            2011
        """
        return (
            self.protein_g * PROTEIN_KCAL_PER_G
            + self.carbs_g * CARBS_KCAL_PER_G
            + self.fat_g * FAT_KCAL_PER_G
        )

    def __str__(self) -> str:
        return f"{self.protein_g}P / {self.carbs_g}C / {self.fat_g}F"
