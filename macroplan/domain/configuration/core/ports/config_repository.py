"""IConfigRepository port - storage of configuration items."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..entities.config_item import ConfigItem


class IConfigRepository(ABC):
    """Port for configuration item persistence."""

    @abstractmethod
    async def count(self) -> int:
        """Number of stored items."""
        pass

    @abstractmethod
    async def find_all(self) -> List[ConfigItem]:
        """All items, ordered by category then key."""
        pass

    @abstractmethod
    async def find_by_key(self, key: str) -> Optional[ConfigItem]:
        """Find item by key.

        Returns:
            Optional[ConfigItem]: Item if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, item: ConfigItem) -> None:
        """Save item (create or update)."""
        pass

    @abstractmethod
    async def save_all(self, items: Sequence[ConfigItem]) -> None:
        """Save several items."""
        pass
