"""CalculateMacrosCommand - compute and record macro targets."""

import logging
from dataclasses import dataclass
from typing import Tuple

from macroplan.domain.macro_calculation.calculation.engine import MacroEngine
from macroplan.domain.macro_calculation.core.exceptions.domain_errors import (
    InvalidWorkoutScheduleError,
)
from macroplan.domain.macro_calculation.core.ports.result_recorder import (
    IResultRecorder,
)
from macroplan.domain.macro_calculation.core.ports.snapshots import (
    ICalculationSnapshots,
)
from macroplan.domain.macro_calculation.core.value_objects.macro_result import (
    MacroResult,
)
from macroplan.domain.macro_calculation.core.value_objects.user_input import (
    UserInput,
)
from macroplan.domain.macro_calculation.core.value_objects.workout_entry import (
    WorkoutEntry,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculateMacrosCommand:
    """Command to calculate macro targets.

    Attributes:
        user_input: Validated body metrics and goal
        workouts: Weekly schedule, at least one entry
    """

    user_input: UserInput
    workouts: Tuple[WorkoutEntry, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "workouts", tuple(self.workouts))
        if not self.workouts:
            raise InvalidWorkoutScheduleError(
                "At least one workout day must be provided"
            )


@dataclass(frozen=True)
class CalculateMacrosResult:
    """Result of a calculation.

    Attributes:
        result_id: Identifier returned by the recorder
        result: Engine output
    """

    result_id: str
    result: MacroResult


class CalculateMacrosHandler:
    """Handler for CalculateMacrosCommand.

    1. Read configuration and intensity snapshots (cached)
    2. Run the engine
    3. Record input and output, return the record id
    """

    def __init__(
        self,
        engine: MacroEngine,
        snapshots: ICalculationSnapshots,
        recorder: IResultRecorder,
    ):
        self._engine = engine
        self._snapshots = snapshots
        self._recorder = recorder

    async def handle(self, command: CalculateMacrosCommand) -> CalculateMacrosResult:
        """
        Handle calculation command.

        Args:
            command: CalculateMacrosCommand with input and schedule

        Returns:
            CalculateMacrosResult with record id and targets
        """
        config = await self._snapshots.config_snapshot()
        intensities = await self._snapshots.intensity_snapshot()

        result = self._engine.calculate(
            user_input=command.user_input,
            workouts=command.workouts,
            config_snapshot=config,
            intensity_snapshot=intensities,
        )

        result_id = await self._recorder.record(
            command.user_input, command.workouts, result
        )
        logger.info(
            "macro calculation recorded: id=%s band=%s calories=%d",
            result_id,
            result.activity_level.value,
            result.daily_calories,
        )
        return CalculateMacrosResult(result_id=result_id, result=result)
