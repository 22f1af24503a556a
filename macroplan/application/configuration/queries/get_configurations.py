"""GetConfigurationsQuery - configuration grouped by category."""

from dataclasses import dataclass
from typing import Dict, List

from macroplan.domain.configuration.core.entities.config_item import ConfigItem
from macroplan.domain.configuration.core.value_objects.config_category import (
    ConfigCategory,
)
from macroplan.domain.configuration.services.config_store import ConfigStore


@dataclass(frozen=True)
class GetConfigurationsQuery:
    pass


class GetConfigurationsHandler:
    """Read configuration straight from the store (not from the cache)."""

    def __init__(self, config_store: ConfigStore):
        self._config_store = config_store

    async def handle(
        self, query: GetConfigurationsQuery
    ) -> Dict[ConfigCategory, List[ConfigItem]]:
        return await self._config_store.grouped()
