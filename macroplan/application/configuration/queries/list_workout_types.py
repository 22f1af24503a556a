"""ListWorkoutTypesQuery - workout type picker and admin listing."""

from dataclasses import dataclass
from typing import List

from macroplan.domain.configuration.core.entities.workout_type import (
    WorkoutTypeDefinition,
)
from macroplan.domain.configuration.services.workout_catalog import (
    WorkoutIntensityCatalog,
)


@dataclass(frozen=True)
class ListWorkoutTypesQuery:
    """Query workout types.

    Attributes:
        include_inactive: Admin view; the client picker only shows active types
    """

    include_inactive: bool = False


class ListWorkoutTypesHandler:
    """Handler for ListWorkoutTypesQuery."""

    def __init__(self, catalog: WorkoutIntensityCatalog):
        self._catalog = catalog

    async def handle(self, query: ListWorkoutTypesQuery) -> List[WorkoutTypeDefinition]:
        if query.include_inactive:
            return await self._catalog.list_all()
        return await self._catalog.list_active()
