"""Domain exceptions for configuration."""


class ConfigurationError(Exception):
    """Base exception for configuration domain errors."""

    pass


class InvalidWorkoutTypeError(ConfigurationError):
    """Raised when a workout type definition fails validation."""

    pass


class WorkoutTypeConflictError(ConfigurationError):
    """Raised when an operation conflicts with existing catalog state.

    Covers duplicate keys on create and deletion of built-in types.
    """

    def __init__(self, message: str, key: str):
        super().__init__(message)
        self.key = key


class WorkoutTypeNotFoundError(ConfigurationError):
    """Raised when a workout type cannot be found."""

    def __init__(self, workout_type_id: str):
        super().__init__(f"Workout type not found: {workout_type_id}")
        self.workout_type_id = workout_type_id
