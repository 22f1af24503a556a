"""Measurement unit value objects with metric conversion."""

from enum import Enum

KG_PER_LB = 0.453592
CM_PER_FT = 30.48


class WeightUnit(str, Enum):
    """Unit in which body weight was entered."""

    KG = "kg"
    LBS = "lbs"

    def to_kg(self, value: float) -> float:
        """Convert a weight expressed in this unit to kilograms.

        Example:
            >>> WeightUnit.LBS.to_kg(100.0)
            45.3592
        """
        if self is WeightUnit.LBS:
            return value * KG_PER_LB
        return value


class HeightUnit(str, Enum):
    """Unit in which height was entered (decimal feet, not ft+in)."""

    CM = "cm"
    FT = "ft"

    def to_cm(self, value: float) -> float:
        """Convert a height expressed in this unit to centimeters."""
        if self is HeightUnit.FT:
            return value * CM_PER_FT
        return value
