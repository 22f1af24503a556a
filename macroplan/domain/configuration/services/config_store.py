"""ConfigStore - named numeric coefficients with fallbacks."""

import logging
from typing import Dict, List

from ..core.entities.config_item import ConfigItem
from ..core.ports.config_repository import IConfigRepository
from ..core.value_objects.config_category import ConfigCategory
from ..defaults import default_config_items

logger = logging.getLogger(__name__)


class ConfigStore:
    """Current value of every configuration key.

    Keys are fixed by the seed table: ``set`` overwrites existing keys
    and skips unknown ones, it never creates a key. No history is kept,
    the last write wins.
    """

    def __init__(self, repository: IConfigRepository):
        self._repository = repository

    async def get(self, key: str, fallback: float) -> float:
        """Read a value, falling back when the key is absent.

        Args:
            key: Configuration key
            fallback: Returned when the key does not exist

        Returns:
            float: Stored value or fallback
        """
        item = await self._repository.find_by_key(key)
        if item is None:
            return fallback
        return float(item.value)

    async def get_all(self) -> Dict[str, float]:
        """Every stored item as a ``key -> value`` map."""
        items = await self._repository.find_all()
        return {item.key: float(item.value) for item in items}

    async def set(self, key: str, value: float) -> bool:
        """Overwrite an existing key.

        Args:
            key: Configuration key (must already exist)
            value: New value, any number

        Returns:
            bool: True if updated, False if the key is unknown and skipped
        """
        item = await self._repository.find_by_key(key)
        if item is None:
            logger.warning("config update skipped: unknown key %s", key)
            return False

        item.update_value(value)
        await self._repository.save(item)
        logger.info("config updated: %s=%s", key, item.value)
        return True

    async def grouped(self) -> Dict[ConfigCategory, List[ConfigItem]]:
        """Items grouped by category, each group ordered by key."""
        groups: Dict[ConfigCategory, List[ConfigItem]] = {}
        for item in await self._repository.find_all():
            groups.setdefault(item.category, []).append(item)
        return groups

    async def seed_defaults(self) -> int:
        """Insert the default table when the store is empty.

        Returns:
            int: Number of items inserted (0 if already populated)
        """
        if await self._repository.count() > 0:
            return 0

        items = default_config_items()
        await self._repository.save_all(items)
        logger.info("seeded %d default configuration items", len(items))
        return len(items)
