"""ICalculationSnapshots port - configuration feeds for the engine."""

from abc import ABC, abstractmethod
from typing import Mapping


class ICalculationSnapshots(ABC):
    """Read side the engine needs: config values and workout intensities.

    Implementations may serve data up to one refresh window old.
    """

    @abstractmethod
    async def config_snapshot(self) -> Mapping[str, float]:
        """Current configuration map (key -> value)."""
        pass

    @abstractmethod
    async def intensity_snapshot(self) -> Mapping[str, float]:
        """Current active workout intensities (type key -> intensity)."""
        pass

    @abstractmethod
    def invalidate(self) -> None:
        """Drop cached data so the next read refreshes."""
        pass
