"""In-memory implementation of IWorkoutTypeRepository."""

from copy import deepcopy
from typing import Dict, List, Optional, Sequence
from uuid import UUID

from macroplan.domain.configuration.core.entities.workout_type import (
    WorkoutTypeDefinition,
)
from macroplan.domain.configuration.core.ports.workout_type_repository import (
    IWorkoutTypeRepository,
)


class InMemoryWorkoutTypeRepository(IWorkoutTypeRepository):
    """
    In-memory implementation of the workout type catalog storage.

    Definitions are keyed by id; key uniqueness is enforced by the
    catalog service, not here.
    """

    def __init__(self) -> None:
        self._definitions: Dict[UUID, WorkoutTypeDefinition] = {}

    async def count(self) -> int:
        return len(self._definitions)

    async def find_all(self, active_only: bool = False) -> List[WorkoutTypeDefinition]:
        definitions = [
            d for d in self._definitions.values() if d.is_active or not active_only
        ]
        definitions.sort(key=lambda d: d.ordering_key())
        return [deepcopy(d) for d in definitions]

    async def find_by_id(self, workout_type_id: UUID) -> Optional[WorkoutTypeDefinition]:
        definition = self._definitions.get(workout_type_id)
        return deepcopy(definition) if definition else None

    async def find_by_key(self, key: str) -> Optional[WorkoutTypeDefinition]:
        for definition in self._definitions.values():
            if definition.key == key:
                return deepcopy(definition)
        return None

    async def save(self, definition: WorkoutTypeDefinition) -> None:
        self._definitions[definition.id] = deepcopy(definition)

    async def save_all(self, definitions: Sequence[WorkoutTypeDefinition]) -> None:
        for definition in definitions:
            await self.save(definition)

    async def delete(self, workout_type_id: UUID) -> bool:
        return self._definitions.pop(workout_type_id, None) is not None

    def clear(self) -> None:
        """Clear all definitions (for testing)."""
        self._definitions.clear()
