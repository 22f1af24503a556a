"""Typed, defaulting views over configuration and intensity snapshots.

Every coefficient the engine reads has its fallback written next to its
key here, so a missing or corrupt configuration row degrades to the
documented default instead of failing a calculation.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .value_objects.activity_level import ActivityLevel
from .value_objects.goal import Goal

logger = logging.getLogger(__name__)

DEFAULT_WORKOUT_INTENSITY = 1.0


def _finite_or_none(raw: object) -> Optional[float]:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


@dataclass(frozen=True)
class SpecialDayCoefficients:
    """Coefficients for a workout-day or rest-day variant.

    Attributes:
        calorie_multiplier: Applied to the goal-adjusted daily calories
        protein_per_kg: Protein grams per kg of body weight
        fat_ratio: Share of the day's calories coming from fat
    """

    calorie_multiplier: float
    protein_per_kg: float
    fat_ratio: float


@dataclass(frozen=True)
class Coefficients:
    """Defaulting resolver over a configuration snapshot.

    Wraps a read-only ``key -> value`` map. Accessors never raise: a key
    that is absent, non-numeric or non-finite resolves to its fallback.

    Attributes:
        values: Configuration snapshot (key -> numeric value)
    """

    values: Mapping[str, float] = field(default_factory=dict)

    def get(self, key: str, fallback: float) -> float:
        """Read a coefficient with a fallback.

        Args:
            key: Configuration key
            fallback: Value used when the key is missing or unusable

        Returns:
            float: Stored value or fallback
        """
        value = _finite_or_none(self.values.get(key))
        if value is None:
            logger.debug("config miss for %s, using fallback %s", key, fallback)
            return fallback
        return value

    def activity_multiplier(self, level: ActivityLevel) -> float:
        fallbacks = {
            ActivityLevel.SEDENTARY: 1.2,
            ActivityLevel.LIGHT: 1.375,
            ActivityLevel.MODERATE: 1.55,
            ActivityLevel.VERY_ACTIVE: 1.725,
            ActivityLevel.EXTRA_ACTIVE: 1.9,
            ActivityLevel.ATHLETE: 2.0,
        }
        return self.get(level.config_key(), fallbacks[level])

    def goal_multiplier(self, goal: Goal) -> float:
        fallbacks = {
            Goal.WEIGHT_LOSS: 0.8,
            Goal.MAINTENANCE: 1.0,
            Goal.MUSCLE_GAIN: 1.1,
        }
        return self.get(f"goal_{goal.value}", fallbacks[goal])

    def protein_ratio(self, goal: Goal) -> float:
        fallbacks = {
            Goal.WEIGHT_LOSS: 0.35,
            Goal.MAINTENANCE: 0.25,
            Goal.MUSCLE_GAIN: 0.30,
        }
        return self.get(f"macro_protein_{goal.value}", fallbacks[goal])

    def fat_ratio(self, goal: Goal) -> float:
        fallbacks = {
            Goal.WEIGHT_LOSS: 0.30,
            Goal.MAINTENANCE: 0.30,
            Goal.MUSCLE_GAIN: 0.25,
        }
        return self.get(f"macro_fat_{goal.value}", fallbacks[goal])

    def min_protein_per_kg(self) -> float:
        return self.get("macro_min_protein_per_kg", 1.6)

    def workout_day(self) -> SpecialDayCoefficients:
        return SpecialDayCoefficients(
            calorie_multiplier=self.get("workout_day_multiplier", 1.1),
            protein_per_kg=self.get("workout_day_protein_per_kg", 2.0),
            fat_ratio=self.get("workout_day_fat_ratio", 0.25),
        )

    def rest_day(self) -> SpecialDayCoefficients:
        return SpecialDayCoefficients(
            calorie_multiplier=self.get("rest_day_multiplier", 0.9),
            protein_per_kg=self.get("rest_day_protein_per_kg", 1.8),
            fat_ratio=self.get("rest_day_fat_ratio", 0.35),
        )


@dataclass(frozen=True)
class IntensityTable:
    """Workout type key -> intensity multiplier, open to unknown keys.

    Keys missing from the table (custom, renamed or deactivated types)
    weigh as a moderate workout rather than failing the calculation.
    """

    values: Mapping[str, float] = field(default_factory=dict)

    def intensity_of(self, workout_type: str) -> float:
        """Get the intensity multiplier for a workout type key.

        Example:
            >>> IntensityTable({"boxing": 1.5}).intensity_of("kettlebell_freestyle")
            1.0
        """
        value = _finite_or_none(self.values.get(workout_type))
        if value is None:
            return DEFAULT_WORKOUT_INTENSITY
        return value
