"""In-memory implementation of IResultRecorder."""

from typing import Dict, List, Optional, Sequence, Tuple

from macroplan.domain.macro_calculation.core.entities.calculation_record import (
    CalculationRecord,
)
from macroplan.domain.macro_calculation.core.ports.result_recorder import (
    IResultRecorder,
)
from macroplan.domain.macro_calculation.core.value_objects.macro_result import (
    MacroResult,
)
from macroplan.domain.macro_calculation.core.value_objects.result_id import ResultId
from macroplan.domain.macro_calculation.core.value_objects.user_input import (
    UserInput,
)
from macroplan.domain.macro_calculation.core.value_objects.workout_entry import (
    WorkoutEntry,
)


class InMemoryResultRecorder(IResultRecorder):
    """
    In-memory store of calculation records.

    Records are immutable value objects, so no copies are needed.
    Suitable for testing and development.
    """

    def __init__(self) -> None:
        self._records: Dict[str, CalculationRecord] = {}

    async def record(
        self,
        user_input: UserInput,
        workouts: Sequence[WorkoutEntry],
        result: MacroResult,
    ) -> str:
        record = CalculationRecord(
            record_id=ResultId.generate(),
            user_input=user_input,
            workouts=tuple(workouts),
            result=result,
        )
        record_id = str(record.record_id)
        self._records[record_id] = record
        return record_id

    async def find_by_id(self, record_id: str) -> Optional[CalculationRecord]:
        return self._records.get(record_id)

    async def list_recent(
        self, offset: int, limit: int
    ) -> Tuple[List[CalculationRecord], int]:
        ordered = sorted(
            self._records.values(),
            key=lambda r: r.result.calculated_at,
            reverse=True,
        )
        return ordered[offset : offset + limit], len(ordered)

    async def delete(self, record_id: str) -> bool:
        return self._records.pop(record_id, None) is not None

    def clear(self) -> None:
        """Clear all records (for testing)."""
        self._records.clear()

    def count(self) -> int:
        return len(self._records)
