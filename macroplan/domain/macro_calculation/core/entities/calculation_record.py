"""CalculationRecord entity - an audited calculation."""

from dataclasses import dataclass
from typing import Tuple

from ..value_objects.macro_result import MacroResult
from ..value_objects.result_id import ResultId
from ..value_objects.user_input import UserInput
from ..value_objects.workout_entry import WorkoutEntry


@dataclass(frozen=True)
class CalculationRecord:
    """A recorded calculation: the input, its schedule and the result.

    Input and schedule are stored together with the result they
    produced, so deleting the record removes all three.

    Attributes:
        record_id: Identifier handed back to the client
        user_input: Body metrics and goal as submitted
        workouts: Weekly schedule as submitted
        result: Engine output
    """

    record_id: ResultId
    user_input: UserInput
    workouts: Tuple[WorkoutEntry, ...]
    result: MacroResult
