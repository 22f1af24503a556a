"""Domain exceptions for macro calculation."""

from .domain_errors import (
    InvalidUserInputError,
    InvalidWorkoutScheduleError,
    MacroCalculationError,
    ResultNotFoundError,
)

__all__ = [
    "MacroCalculationError",
    "InvalidUserInputError",
    "InvalidWorkoutScheduleError",
    "ResultNotFoundError",
]
