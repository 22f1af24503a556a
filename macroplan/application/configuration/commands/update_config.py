"""UpdateConfigCommand - batch overwrite of configuration values."""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from macroplan.domain.configuration.core.entities.config_item import ConfigItem
from macroplan.domain.configuration.core.value_objects.config_category import (
    ConfigCategory,
)
from macroplan.domain.configuration.services.config_store import ConfigStore
from macroplan.domain.macro_calculation.core.ports.snapshots import (
    ICalculationSnapshots,
)


@dataclass(frozen=True)
class ConfigUpdate:
    key: str
    value: float


@dataclass(frozen=True)
class UpdateConfigCommand:
    """Command to overwrite configuration values.

    Attributes:
        updates: (key, value) pairs; unknown keys are skipped
    """

    updates: Tuple[ConfigUpdate, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "updates", tuple(self.updates))


@dataclass(frozen=True)
class UpdateConfigResult:
    """Outcome of a batch update.

    Attributes:
        updated: Keys that were overwritten
        skipped: Keys that do not exist
        configurations: Full configuration regrouped by category
    """

    updated: Tuple[str, ...]
    skipped: Tuple[str, ...]
    configurations: Dict[ConfigCategory, List[ConfigItem]]


class UpdateConfigHandler:
    """Handler for UpdateConfigCommand.

    Values are accepted as any number; an inconsistent configuration
    still produces (nonsensical) numbers rather than failures. The
    calculation cache is invalidated after any successful write.
    """

    def __init__(self, config_store: ConfigStore, snapshots: ICalculationSnapshots):
        self._config_store = config_store
        self._snapshots = snapshots

    async def handle(self, command: UpdateConfigCommand) -> UpdateConfigResult:
        updated: List[str] = []
        skipped: List[str] = []

        for update in command.updates:
            if await self._config_store.set(update.key, update.value):
                updated.append(update.key)
            else:
                skipped.append(update.key)

        if updated:
            self._snapshots.invalidate()

        return UpdateConfigResult(
            updated=tuple(updated),
            skipped=tuple(skipped),
            configurations=await self._config_store.grouped(),
        )
