"""ActivityLevel value object - band derived from the weekly schedule."""

from enum import Enum
from typing import List, Tuple


class ActivityLevel(str, Enum):
    """Physical activity band selected from average weighted hours per day.

    Bands are half-open: a value equal to a threshold belongs to the next
    band up (exactly 0.3 h/day is LIGHT, not SEDENTARY).

    - SEDENTARY:    < 0.3 h/day
    - LIGHT:        < 0.6 h/day
    - MODERATE:     < 1.0 h/day
    - VERY_ACTIVE:  < 1.5 h/day
    - EXTRA_ACTIVE: < 2.0 h/day
    - ATHLETE:      >= 2.0 h/day
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    VERY_ACTIVE = "very_active"
    EXTRA_ACTIVE = "extra_active"
    ATHLETE = "athlete"

    @classmethod
    def from_average_weighted_hours(cls, avg_weighted_hours: float) -> "ActivityLevel":
        """Select the band for an average of weighted hours per day.

        Args:
            avg_weighted_hours: Intensity-weighted weekly hours divided by 7

        Returns:
            ActivityLevel: Matching band

        Example:
            >>> ActivityLevel.from_average_weighted_hours(0.3)
            <ActivityLevel.LIGHT: 'light'>
        """
        for upper_bound, level in _BANDS:
            if avg_weighted_hours < upper_bound:
                return level
        return cls.ATHLETE

    def config_key(self) -> str:
        """Configuration key holding this band's TDEE multiplier."""
        return f"activity_{self.value}"


# (exclusive upper bound, band), ascending
_BANDS: List[Tuple[float, ActivityLevel]] = [
    (0.3, ActivityLevel.SEDENTARY),
    (0.6, ActivityLevel.LIGHT),
    (1.0, ActivityLevel.MODERATE),
    (1.5, ActivityLevel.VERY_ACTIVE),
    (2.0, ActivityLevel.EXTRA_ACTIVE),
]
