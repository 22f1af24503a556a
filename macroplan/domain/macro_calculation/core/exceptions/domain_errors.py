"""Domain exceptions for macro calculation."""


class MacroCalculationError(Exception):
    """Base exception for macro calculation domain errors."""

    pass


class InvalidUserInputError(MacroCalculationError):
    """Raised when body metrics or goal fail validation."""

    pass


class InvalidWorkoutScheduleError(MacroCalculationError):
    """Raised when a workout entry or the weekly schedule is invalid."""

    pass


class ResultNotFoundError(MacroCalculationError):
    """Raised when a recorded calculation cannot be found."""

    def __init__(self, result_id: str):
        super().__init__(f"Macro result not found: {result_id}")
        self.result_id = result_id
