"""IResultRecorder port - persistence of calculations."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from ..entities.calculation_record import CalculationRecord
from ..value_objects.macro_result import MacroResult
from ..value_objects.user_input import UserInput
from ..value_objects.workout_entry import WorkoutEntry


class IResultRecorder(ABC):
    """Port for recording engine input/output as an auditable record.

    The domain only relies on getting an opaque identifier back; how and
    where records are stored is up to the adapter.
    """

    @abstractmethod
    async def record(
        self,
        user_input: UserInput,
        workouts: Sequence[WorkoutEntry],
        result: MacroResult,
    ) -> str:
        """Persist a calculation.

        Args:
            user_input: Body metrics and goal
            workouts: Weekly schedule
            result: Engine output

        Returns:
            str: Opaque identifier of the stored record
        """
        pass

    @abstractmethod
    async def find_by_id(self, record_id: str) -> Optional[CalculationRecord]:
        """Find a record by identifier.

        Returns:
            Optional[CalculationRecord]: Record if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_recent(
        self, offset: int, limit: int
    ) -> Tuple[List[CalculationRecord], int]:
        """List records, most recent calculation first.

        Args:
            offset: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            Tuple of (records in page, total number of records)
        """
        pass

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """Delete a record.

        Returns:
            bool: True if a record was removed
        """
        pass
