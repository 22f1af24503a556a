"""WorkoutTypeDefinition entity - catalog entry for a workout type."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional, Tuple
from uuid import UUID, uuid4

MIN_INTENSITY = 0.1
MAX_INTENSITY = 3.0

# Fields an operator may change after creation; key and is_default are fixed.
UPDATABLE_FIELDS = (
    "name",
    "intensity",
    "icon",
    "color",
    "description",
    "sort_order",
    "is_active",
)


def clamp_intensity(intensity: float) -> float:
    """Clamp an operator-supplied intensity to [0.1, 3.0].

    Example:
        >>> clamp_intensity(5.0)
        3.0
    """
    return max(MIN_INTENSITY, min(MAX_INTENSITY, float(intensity)))


@dataclass
class WorkoutTypeDefinition:
    """A workout type with its intensity multiplier (METs-derived).

    Built-in definitions carry ``is_default=True`` and can only be
    deactivated, never deleted.

    Attributes:
        key: Unique key referenced by workout entries
        name: Display name
        intensity: Multiplier applied to workout hours
        icon: Icon name for the client
        color: Color name for the client
        description: Optional explanation (e.g. MET range)
        sort_order: Position in pickers
        is_active: Inactive types are hidden and weigh as unknown
        is_default: Built-in, protected from deletion
        id: Identifier
        created_at: Creation time (UTC)
        updated_at: Last change (UTC)
    """

    key: str
    name: str
    intensity: float
    icon: Optional[str] = None
    color: Optional[str] = None
    description: Optional[str] = None
    sort_order: int = 0
    is_active: bool = True
    is_default: bool = False
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def apply_changes(self, **changes: Any) -> None:
        """Apply a partial update.

        Args:
            **changes: Subset of UPDATABLE_FIELDS; None values are ignored

        Raises:
            ValueError: If a field outside UPDATABLE_FIELDS is given
        """
        unknown = set(changes) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Cannot update fields: {sorted(unknown)}")

        for name, value in changes.items():
            if value is None:
                continue
            if name == "intensity":
                value = clamp_intensity(value)
            setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)

    def ordering_key(self) -> Tuple[int, str]:
        """Sort key used by pickers: sort order, then name."""
        return (self.sort_order, self.name)
