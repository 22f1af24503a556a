"""GetResultQuery - fetch a recorded calculation."""

from dataclasses import dataclass
from typing import Optional

from macroplan.domain.macro_calculation.core.entities.calculation_record import (
    CalculationRecord,
)
from macroplan.domain.macro_calculation.core.ports.result_recorder import (
    IResultRecorder,
)


@dataclass(frozen=True)
class GetResultQuery:
    """Query a calculation record by id.

    Attributes:
        result_id: Identifier returned when the calculation was recorded
    """

    result_id: str


class GetResultHandler:
    """Handler for GetResultQuery."""

    def __init__(self, recorder: IResultRecorder):
        self._recorder = recorder

    async def handle(self, query: GetResultQuery) -> Optional[CalculationRecord]:
        """
        Returns:
            CalculationRecord if found, None otherwise
        """
        return await self._recorder.find_by_id(query.result_id)
