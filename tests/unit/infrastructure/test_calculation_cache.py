"""Unit tests for CalculationCache (TTL snapshots)."""

from datetime import timedelta

import pytest
from freezegun import freeze_time

from macroplan.infrastructure.cache.calculation_cache import (
    DEFAULT_TTL_SECONDS,
    CalculationCache,
    ttl_from_env,
)


@pytest.fixture
def cache(seeded_config_store, seeded_catalog) -> CalculationCache:
    return CalculationCache(seeded_config_store, seeded_catalog, ttl_seconds=60)


class TestCalculationCache:
    @pytest.mark.asyncio
    async def test_reads_through_on_first_access(self, cache):
        config = await cache.config_snapshot()
        intensities = await cache.intensity_snapshot()

        assert config["activity_sedentary"] == 1.2
        assert intensities["hiit"] == 1.6

    @pytest.mark.asyncio
    async def test_stale_within_ttl_fresh_after(self, cache, seeded_config_store):
        with freeze_time("2025-01-01 12:00:00") as frozen:
            assert (await cache.config_snapshot())["goal_maintenance"] == 1.0

            await seeded_config_store.set("goal_maintenance", 0.9)
            frozen.tick(timedelta(seconds=30))
            assert (await cache.config_snapshot())["goal_maintenance"] == 1.0

            frozen.tick(timedelta(seconds=31))
            assert (await cache.config_snapshot())["goal_maintenance"] == 0.9

    @pytest.mark.asyncio
    async def test_invalidate_forces_refresh(self, cache, seeded_catalog):
        with freeze_time("2025-01-01 12:00:00"):
            assert "padel" not in await cache.intensity_snapshot()

            await seeded_catalog.create(key="padel", name="Padel", intensity=1.3)
            cache.invalidate()

            assert (await cache.intensity_snapshot())["padel"] == 1.3

    @pytest.mark.asyncio
    async def test_empty_snapshot_is_not_cached(self, config_store, catalog):
        cache = CalculationCache(config_store, catalog, ttl_seconds=60)

        with freeze_time("2025-01-01 12:00:00"):
            assert dict(await cache.config_snapshot()) == {}

            await config_store.seed_defaults()

            assert len(await cache.config_snapshot()) == 22

    @pytest.mark.asyncio
    async def test_snapshot_is_read_only(self, cache):
        config = await cache.config_snapshot()

        with pytest.raises(TypeError):
            config["goal_maintenance"] = 5.0  # type: ignore[index]

    def test_ttl_seconds(self, cache):
        assert cache.ttl_seconds == 60


class TestTTLFromEnv:
    def test_default(self, monkeypatch):
        monkeypatch.delenv("CALCULATION_CACHE_TTL_S", raising=False)

        assert ttl_from_env() == DEFAULT_TTL_SECONDS

    def test_custom(self, monkeypatch):
        monkeypatch.setenv("CALCULATION_CACHE_TTL_S", "5")

        assert ttl_from_env() == 5.0

    @pytest.mark.parametrize("raw", ["abc", "-1"])
    def test_invalid_falls_back(self, monkeypatch, raw):
        monkeypatch.setenv("CALCULATION_CACHE_TTL_S", raw)

        assert ttl_from_env() == DEFAULT_TTL_SECONDS
