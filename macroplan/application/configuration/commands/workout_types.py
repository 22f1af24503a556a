"""Workout type catalog commands: create, update, delete."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from macroplan.domain.configuration.core.entities.workout_type import (
    WorkoutTypeDefinition,
)
from macroplan.domain.configuration.services.workout_catalog import (
    WorkoutIntensityCatalog,
)
from macroplan.domain.macro_calculation.core.ports.snapshots import (
    ICalculationSnapshots,
)


@dataclass(frozen=True)
class CreateWorkoutTypeCommand:
    """Command to add a custom workout type.

    Attributes:
        key: Unique key used by workout entries
        name: Display name
        intensity: Multiplier, clamped to [0.1, 3.0]
        icon: Icon name
        color: Color name
        description: Free text
        sort_order: Picker position
    """

    key: str
    name: str
    intensity: float
    icon: Optional[str] = None
    color: Optional[str] = None
    description: Optional[str] = None
    sort_order: int = 0


@dataclass(frozen=True)
class UpdateWorkoutTypeCommand:
    """Command to partially update a workout type (None = unchanged)."""

    workout_type_id: UUID
    name: Optional[str] = None
    intensity: Optional[float] = None
    icon: Optional[str] = None
    color: Optional[str] = None
    description: Optional[str] = None
    sort_order: Optional[int] = None
    is_active: Optional[bool] = None


@dataclass(frozen=True)
class DeleteWorkoutTypeCommand:
    workout_type_id: UUID


class CreateWorkoutTypeHandler:
    """Handler for CreateWorkoutTypeCommand."""

    def __init__(self, catalog: WorkoutIntensityCatalog, snapshots: ICalculationSnapshots):
        self._catalog = catalog
        self._snapshots = snapshots

    async def handle(self, command: CreateWorkoutTypeCommand) -> WorkoutTypeDefinition:
        """
        Raises:
            WorkoutTypeConflictError: If the key already exists
            InvalidWorkoutTypeError: If key or name is empty
        """
        definition = await self._catalog.create(
            key=command.key,
            name=command.name,
            intensity=command.intensity,
            icon=command.icon,
            color=command.color,
            description=command.description,
            sort_order=command.sort_order,
        )
        self._snapshots.invalidate()
        return definition


class UpdateWorkoutTypeHandler:
    """Handler for UpdateWorkoutTypeCommand."""

    def __init__(self, catalog: WorkoutIntensityCatalog, snapshots: ICalculationSnapshots):
        self._catalog = catalog
        self._snapshots = snapshots

    async def handle(self, command: UpdateWorkoutTypeCommand) -> WorkoutTypeDefinition:
        """
        Raises:
            WorkoutTypeNotFoundError: If the id does not exist
        """
        definition = await self._catalog.update(
            command.workout_type_id,
            name=command.name,
            intensity=command.intensity,
            icon=command.icon,
            color=command.color,
            description=command.description,
            sort_order=command.sort_order,
            is_active=command.is_active,
        )
        self._snapshots.invalidate()
        return definition


class DeleteWorkoutTypeHandler:
    """Handler for DeleteWorkoutTypeCommand."""

    def __init__(self, catalog: WorkoutIntensityCatalog, snapshots: ICalculationSnapshots):
        self._catalog = catalog
        self._snapshots = snapshots

    async def handle(self, command: DeleteWorkoutTypeCommand) -> bool:
        """
        Returns:
            bool: True once deleted

        Raises:
            WorkoutTypeNotFoundError: If the id does not exist
            WorkoutTypeConflictError: If the type is built-in
        """
        await self._catalog.delete(command.workout_type_id)
        self._snapshots.invalidate()
        return True
