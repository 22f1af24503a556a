"""ConfigItem entity - a named numeric coefficient."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from ..value_objects.config_category import ConfigCategory


@dataclass
class ConfigItem:
    """A configuration coefficient editable by an operator.

    Keys are schema-defined: the set of keys is fixed by the seed table
    and only values change at runtime.

    Attributes:
        key: Unique configuration key (e.g. "goal_weight_loss")
        value: Current value (any number, no sanity bounds)
        category: Grouping for the admin screen
        label: Short human-readable name
        description: Optional explanation
        updated_at: Last change (UTC)
    """

    key: str
    value: float
    category: ConfigCategory
    label: str
    description: Optional[str] = None
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update_value(self, value: float) -> None:
        """Overwrite the value (last write wins)."""
        self.value = float(value)
        self.updated_at = datetime.now(timezone.utc)
