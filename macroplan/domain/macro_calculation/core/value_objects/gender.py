"""Gender value object - selects the Mifflin-St Jeor offset."""

from enum import Enum


class Gender(str, Enum):
    """Biological sex used by the BMR equation."""

    MALE = "male"
    FEMALE = "female"

    def bmr_offset(self) -> float:
        """Get the constant added to the Mifflin-St Jeor base.

        Returns:
            float: +5 for male, -161 for female

        Example:
            >>> Gender.FEMALE.bmr_offset()
            -161.0
        """
        return 5.0 if self is Gender.MALE else -161.0
