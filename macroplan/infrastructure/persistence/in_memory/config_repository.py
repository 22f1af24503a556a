"""In-memory implementation of IConfigRepository."""

from copy import deepcopy
from typing import Dict, List, Optional, Sequence

from macroplan.domain.configuration.core.entities.config_item import ConfigItem
from macroplan.domain.configuration.core.ports.config_repository import (
    IConfigRepository,
)


class InMemoryConfigRepository(IConfigRepository):
    """
    In-memory implementation of configuration repository.

    Uses a dictionary keyed by configuration key. Suitable for testing
    and development. Data is lost when the application stops.
    """

    def __init__(self) -> None:
        self._items: Dict[str, ConfigItem] = {}

    async def count(self) -> int:
        return len(self._items)

    async def find_all(self) -> List[ConfigItem]:
        items = sorted(self._items.values(), key=lambda i: (i.category.value, i.key))
        return [deepcopy(item) for item in items]

    async def find_by_key(self, key: str) -> Optional[ConfigItem]:
        item = self._items.get(key)
        return deepcopy(item) if item else None

    async def save(self, item: ConfigItem) -> None:
        # Deep copy to prevent external mutations
        self._items[item.key] = deepcopy(item)

    async def save_all(self, items: Sequence[ConfigItem]) -> None:
        for item in items:
            await self.save(item)

    def clear(self) -> None:
        """Clear all items (for testing)."""
        self._items.clear()
