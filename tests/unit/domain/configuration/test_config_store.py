"""Unit tests for ConfigStore."""

import logging

import pytest

from macroplan.domain.configuration.core.value_objects.config_category import (
    ConfigCategory,
)


class TestConfigStoreSeeding:
    @pytest.mark.asyncio
    async def test_seed_inserts_default_table(self, config_store):
        inserted = await config_store.seed_defaults()

        assert inserted == 22
        values = await config_store.get_all()
        assert values["activity_sedentary"] == 1.2
        assert values["macro_min_protein_per_kg"] == 1.6
        assert values["rest_day_fat_ratio"] == 0.35

    @pytest.mark.asyncio
    async def test_seed_is_idempotent(self, config_store):
        await config_store.seed_defaults()
        await config_store.set("goal_maintenance", 0.95)

        assert await config_store.seed_defaults() == 0
        assert await config_store.get("goal_maintenance", 1.0) == 0.95


class TestConfigStoreAccess:
    @pytest.mark.asyncio
    async def test_get_missing_key_returns_fallback(self, config_store):
        assert await config_store.get("activity_sedentary", 1.2) == 1.2

    @pytest.mark.asyncio
    async def test_set_existing_key(self, seeded_config_store):
        updated = await seeded_config_store.set("goal_weight_loss", 0.75)

        assert updated is True
        assert await seeded_config_store.get("goal_weight_loss", 0.8) == 0.75

    @pytest.mark.asyncio
    async def test_set_accepts_any_number(self, seeded_config_store):
        assert await seeded_config_store.set("goal_weight_loss", -3.0) is True
        assert await seeded_config_store.get("goal_weight_loss", 0.8) == -3.0

    @pytest.mark.asyncio
    async def test_set_unknown_key_is_skipped(self, seeded_config_store, caplog):
        with caplog.at_level(logging.WARNING):
            updated = await seeded_config_store.set("goal_bulk", 1.3)

        assert updated is False
        assert "goal_bulk" not in await seeded_config_store.get_all()
        assert "unknown key goal_bulk" in caplog.text

    @pytest.mark.asyncio
    async def test_grouped_by_category(self, seeded_config_store):
        groups = await seeded_config_store.grouped()

        assert set(groups) == set(ConfigCategory)
        assert len(groups[ConfigCategory.ACTIVITY_LEVEL]) == 6
        assert len(groups[ConfigCategory.GOAL_ADJUSTMENT]) == 3
        assert len(groups[ConfigCategory.MACRO_RATIO]) == 7
        assert len(groups[ConfigCategory.SPECIAL_DAY]) == 6
        keys = [item.key for item in groups[ConfigCategory.GOAL_ADJUSTMENT]]
        assert keys == sorted(keys)
