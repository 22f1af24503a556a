"""Goal value object - user's nutritional objective."""

from enum import Enum


class Goal(str, Enum):
    """User's nutritional goal.

    The goal selects the calorie multiplier applied to TDEE and the
    protein/fat ratio pair of the baseline macro split. Actual numbers
    come from configuration (see Coefficients).

    - WEIGHT_LOSS: calorie deficit, protein-heavy split
    - MAINTENANCE: eat at TDEE
    - MUSCLE_GAIN: calorie surplus
    """

    WEIGHT_LOSS = "weight_loss"
    MAINTENANCE = "maintenance"
    MUSCLE_GAIN = "muscle_gain"
