"""IWorkoutTypeRepository port - storage of workout type definitions."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from ..entities.workout_type import WorkoutTypeDefinition


class IWorkoutTypeRepository(ABC):
    """Port for workout type catalog persistence."""

    @abstractmethod
    async def count(self) -> int:
        """Number of stored definitions."""
        pass

    @abstractmethod
    async def find_all(self, active_only: bool = False) -> List[WorkoutTypeDefinition]:
        """All definitions ordered by sort order, then name.

        Args:
            active_only: Skip inactive definitions
        """
        pass

    @abstractmethod
    async def find_by_id(self, workout_type_id: UUID) -> Optional[WorkoutTypeDefinition]:
        pass

    @abstractmethod
    async def find_by_key(self, key: str) -> Optional[WorkoutTypeDefinition]:
        pass

    @abstractmethod
    async def save(self, definition: WorkoutTypeDefinition) -> None:
        """Save definition (create or update)."""
        pass

    @abstractmethod
    async def save_all(self, definitions: Sequence[WorkoutTypeDefinition]) -> None:
        pass

    @abstractmethod
    async def delete(self, workout_type_id: UUID) -> bool:
        """Hard-delete a definition.

        Returns:
            bool: True if a definition was removed
        """
        pass
