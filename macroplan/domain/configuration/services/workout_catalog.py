"""WorkoutIntensityCatalog - workout type definitions and intensities."""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from ..core.entities.workout_type import (
    MAX_INTENSITY,
    MIN_INTENSITY,
    WorkoutTypeDefinition,
    clamp_intensity,
)
from ..core.exceptions.domain_errors import (
    InvalidWorkoutTypeError,
    WorkoutTypeConflictError,
    WorkoutTypeNotFoundError,
)
from ..core.ports.workout_type_repository import IWorkoutTypeRepository
from ..defaults import default_workout_types

logger = logging.getLogger(__name__)

DEFAULT_INTENSITY = 1.0


class WorkoutIntensityCatalog:
    """Catalog of workout types.

    Built-in types are seeded once and protected from deletion;
    operator-added types can be created, edited and deleted freely.
    Intensity lookups for unknown keys return 1.0.
    """

    def __init__(self, repository: IWorkoutTypeRepository):
        self._repository = repository

    async def list_active(self) -> List[WorkoutTypeDefinition]:
        """Active definitions ordered by sort order, then name."""
        return await self._repository.find_all(active_only=True)

    async def list_all(self) -> List[WorkoutTypeDefinition]:
        """All definitions including inactive ones."""
        return await self._repository.find_all()

    async def intensity_map(self) -> Dict[str, float]:
        """Active ``key -> intensity`` map used by calculations."""
        return {d.key: float(d.intensity) for d in await self.list_active()}

    async def intensity_of(self, key: str) -> float:
        """Intensity of a workout type, 1.0 if unknown or inactive."""
        definition = await self._repository.find_by_key(key)
        if definition is None or not definition.is_active:
            return DEFAULT_INTENSITY
        return float(definition.intensity)

    async def create(
        self,
        key: str,
        name: str,
        intensity: float,
        icon: Optional[str] = None,
        color: Optional[str] = None,
        description: Optional[str] = None,
        sort_order: int = 0,
    ) -> WorkoutTypeDefinition:
        """Add an operator-defined workout type.

        Args:
            key: Unique key (whitespace stripped)
            name: Display name
            intensity: Multiplier, clamped to [0.1, 3.0]
            icon: Icon name
            color: Color name
            description: Free text
            sort_order: Picker position

        Returns:
            WorkoutTypeDefinition: Stored definition

        Raises:
            InvalidWorkoutTypeError: If key or name is empty
            WorkoutTypeConflictError: If the key already exists
        """
        key = (key or "").strip()
        name = (name or "").strip()
        if not key:
            raise InvalidWorkoutTypeError("Workout type key must not be empty")
        if not name:
            raise InvalidWorkoutTypeError("Workout type name must not be empty")

        if await self._repository.find_by_key(key) is not None:
            logger.warning("workout type create rejected: duplicate key %s", key)
            raise WorkoutTypeConflictError(
                f"Workout type with key '{key}' already exists", key=key
            )

        definition = WorkoutTypeDefinition(
            key=key,
            name=name,
            intensity=self._clamped(intensity, key),
            icon=icon,
            color=color,
            description=description,
            sort_order=sort_order,
            is_active=True,
            is_default=False,
        )
        await self._repository.save(definition)
        logger.info("workout type created: %s (%.2f)", key, definition.intensity)
        return definition

    async def update(
        self, workout_type_id: UUID, **changes: Any
    ) -> WorkoutTypeDefinition:
        """Apply a partial update to a definition.

        Args:
            workout_type_id: Definition identifier
            **changes: name, intensity, icon, color, description,
                sort_order, is_active (None values are ignored)

        Returns:
            WorkoutTypeDefinition: Updated definition

        Raises:
            WorkoutTypeNotFoundError: If the id does not exist
        """
        definition = await self._repository.find_by_id(workout_type_id)
        if definition is None:
            logger.warning("workout type update rejected: %s not found", workout_type_id)
            raise WorkoutTypeNotFoundError(str(workout_type_id))

        if changes.get("intensity") is not None:
            changes["intensity"] = self._clamped(changes["intensity"], definition.key)
        definition.apply_changes(**changes)
        await self._repository.save(definition)
        logger.info("workout type updated: %s", definition.key)
        return definition

    async def delete(self, workout_type_id: UUID) -> None:
        """Hard-delete an operator-defined type.

        Raises:
            WorkoutTypeNotFoundError: If the id does not exist
            WorkoutTypeConflictError: If the type is built-in
        """
        definition = await self._repository.find_by_id(workout_type_id)
        if definition is None:
            raise WorkoutTypeNotFoundError(str(workout_type_id))
        if definition.is_default:
            logger.warning("workout type delete rejected: %s is built-in", definition.key)
            raise WorkoutTypeConflictError(
                f"Cannot delete default workout type '{definition.key}'. "
                "You can deactivate it instead.",
                key=definition.key,
            )

        await self._repository.delete(workout_type_id)
        logger.info("workout type deleted: %s", definition.key)

    async def seed_defaults(self) -> int:
        """Insert the built-in types when the catalog is empty.

        Returns:
            int: Number of definitions inserted (0 if already populated)
        """
        if await self._repository.count() > 0:
            return 0

        definitions = default_workout_types()
        await self._repository.save_all(definitions)
        logger.info("seeded %d default workout types", len(definitions))
        return len(definitions)

    @staticmethod
    def _clamped(intensity: float, key: str) -> float:
        clamped = clamp_intensity(intensity)
        if clamped != float(intensity):
            logger.info(
                "intensity for %s clamped from %s to %s (allowed %s-%s)",
                key,
                intensity,
                clamped,
                MIN_INTENSITY,
                MAX_INTENSITY,
            )
        return clamped
