"""
Read-through TTL cache for calculation configuration.

Keeps the latest configuration and intensity maps in process so that a
calculation does not hit the stores on every request. Data may be up to
one TTL old; an admin change through this process invalidates it
immediately.
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from types import MappingProxyType
from typing import Awaitable, Callable, Dict, Mapping, Optional

from macroplan.domain.configuration.services.config_store import ConfigStore
from macroplan.domain.configuration.services.workout_catalog import (
    WorkoutIntensityCatalog,
)
from macroplan.domain.macro_calculation.core.ports.snapshots import (
    ICalculationSnapshots,
)

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60.0


def ttl_from_env() -> float:
    """Read CALCULATION_CACHE_TTL_S, falling back to 60 seconds."""
    raw = os.getenv("CALCULATION_CACHE_TTL_S")
    if raw is None:
        return DEFAULT_TTL_SECONDS
    try:
        ttl = float(raw)
    except ValueError:
        logger.warning(
            "invalid CALCULATION_CACHE_TTL_S=%r, using %ss", raw, DEFAULT_TTL_SECONDS
        )
        return DEFAULT_TTL_SECONDS
    if ttl < 0:
        logger.warning(
            "negative CALCULATION_CACHE_TTL_S=%r, using %ss", raw, DEFAULT_TTL_SECONDS
        )
        return DEFAULT_TTL_SECONDS
    return ttl


@dataclass(frozen=True)
class _Snapshot:
    values: Mapping[str, float]
    fetched_at: datetime


class CalculationCache(ICalculationSnapshots):
    """TTL cache in front of ConfigStore and WorkoutIntensityCatalog.

    Each map lives in an immutable snapshot that is replaced as a whole
    on refresh, so concurrent readers see either the old or the new
    snapshot, never a mix. Two requests refreshing at the same time just
    read the store twice; the last one wins.
    """

    def __init__(
        self,
        config_store: ConfigStore,
        catalog: WorkoutIntensityCatalog,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
    ) -> None:
        self._config_store = config_store
        self._catalog = catalog
        self._ttl = timedelta(seconds=ttl_seconds)
        self._config: Optional[_Snapshot] = None
        self._intensity: Optional[_Snapshot] = None

    @property
    def ttl_seconds(self) -> float:
        return self._ttl.total_seconds()

    async def config_snapshot(self) -> Mapping[str, float]:
        """Configuration map, refreshed when stale or empty."""
        if not self._is_fresh(self._config):
            self._config = await self._refresh("config", self._config_store.get_all)
        assert self._config is not None
        return self._config.values

    async def intensity_snapshot(self) -> Mapping[str, float]:
        """Active intensity map, refreshed when stale or empty."""
        if not self._is_fresh(self._intensity):
            self._intensity = await self._refresh("intensity", self._catalog.intensity_map)
        assert self._intensity is not None
        return self._intensity.values

    def invalidate(self) -> None:
        """Force the next read of both maps to refresh."""
        self._config = None
        self._intensity = None
        logger.debug("calculation cache invalidated")

    def _is_fresh(self, snapshot: Optional[_Snapshot]) -> bool:
        if snapshot is None or not snapshot.values:
            return False
        return datetime.now(timezone.utc) - snapshot.fetched_at < self._ttl

    async def _refresh(
        self, name: str, loader: Callable[[], Awaitable[Dict[str, float]]]
    ) -> _Snapshot:
        values = await loader()
        logger.debug("calculation cache refreshed %s (%d entries)", name, len(values))
        return _Snapshot(
            values=MappingProxyType(dict(values)),
            fetched_at=datetime.now(timezone.utc),
        )
