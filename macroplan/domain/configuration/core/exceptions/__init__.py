"""Domain exceptions for configuration."""

from .domain_errors import (
    ConfigurationError,
    InvalidWorkoutTypeError,
    WorkoutTypeConflictError,
    WorkoutTypeNotFoundError,
)

__all__ = [
    "ConfigurationError",
    "InvalidWorkoutTypeError",
    "WorkoutTypeConflictError",
    "WorkoutTypeNotFoundError",
]
