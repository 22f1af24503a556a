"""Unit tests for configuration and workout type commands."""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from macroplan.application.bootstrap import SeedReport, seed_defaults
from macroplan.application.configuration.commands import (
    ConfigUpdate,
    CreateWorkoutTypeCommand,
    CreateWorkoutTypeHandler,
    DeleteWorkoutTypeCommand,
    DeleteWorkoutTypeHandler,
    UpdateConfigCommand,
    UpdateConfigHandler,
    UpdateWorkoutTypeCommand,
    UpdateWorkoutTypeHandler,
)
from macroplan.application.configuration.queries import (
    GetConfigurationsHandler,
    GetConfigurationsQuery,
    ListWorkoutTypesHandler,
    ListWorkoutTypesQuery,
)
from macroplan.domain.configuration.core.exceptions import (
    WorkoutTypeConflictError,
    WorkoutTypeNotFoundError,
)
from macroplan.domain.configuration.core.value_objects.config_category import (
    ConfigCategory,
)


@pytest.fixture
def mock_snapshots() -> MagicMock:
    return MagicMock()


class TestUpdateConfigHandler:
    @pytest.mark.asyncio
    async def test_updates_and_skips(self, seeded_config_store, mock_snapshots):
        handler = UpdateConfigHandler(seeded_config_store, mock_snapshots)
        command = UpdateConfigCommand(
            updates=(
                ConfigUpdate("goal_maintenance", 0.95),
                ConfigUpdate("goal_bulk", 1.2),
            )
        )

        outcome = await handler.handle(command)

        assert outcome.updated == ("goal_maintenance",)
        assert outcome.skipped == ("goal_bulk",)
        goals = {i.key: i.value for i in outcome.configurations[ConfigCategory.GOAL_ADJUSTMENT]}
        assert goals["goal_maintenance"] == 0.95
        mock_snapshots.invalidate.assert_called_once()

    @pytest.mark.asyncio
    async def test_no_invalidation_when_nothing_updated(
        self, seeded_config_store, mock_snapshots
    ):
        handler = UpdateConfigHandler(seeded_config_store, mock_snapshots)

        outcome = await handler.handle(
            UpdateConfigCommand(updates=(ConfigUpdate("nope", 1.0),))
        )

        assert outcome.updated == ()
        mock_snapshots.invalidate.assert_not_called()


class TestWorkoutTypeHandlers:
    @pytest.mark.asyncio
    async def test_create_invalidates(self, seeded_catalog, mock_snapshots):
        handler = CreateWorkoutTypeHandler(seeded_catalog, mock_snapshots)

        definition = await handler.handle(
            CreateWorkoutTypeCommand(key="padel", name="Padel", intensity=1.3)
        )

        assert definition.key == "padel"
        mock_snapshots.invalidate.assert_called_once()

    @pytest.mark.asyncio
    async def test_update_clamps_and_invalidates(self, seeded_catalog, mock_snapshots):
        hiit = next(d for d in await seeded_catalog.list_all() if d.key == "hiit")
        handler = UpdateWorkoutTypeHandler(seeded_catalog, mock_snapshots)

        definition = await handler.handle(
            UpdateWorkoutTypeCommand(workout_type_id=hiit.id, intensity=10.0)
        )

        assert definition.intensity == 3.0
        mock_snapshots.invalidate.assert_called_once()

    @pytest.mark.asyncio
    async def test_update_missing(self, seeded_catalog, mock_snapshots):
        handler = UpdateWorkoutTypeHandler(seeded_catalog, mock_snapshots)

        with pytest.raises(WorkoutTypeNotFoundError):
            await handler.handle(UpdateWorkoutTypeCommand(workout_type_id=uuid4()))

        mock_snapshots.invalidate.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_builtin_leaves_cache(self, seeded_catalog, mock_snapshots):
        rest = next(d for d in await seeded_catalog.list_all() if d.key == "rest")
        handler = DeleteWorkoutTypeHandler(seeded_catalog, mock_snapshots)

        with pytest.raises(WorkoutTypeConflictError):
            await handler.handle(DeleteWorkoutTypeCommand(workout_type_id=rest.id))

        mock_snapshots.invalidate.assert_not_called()
        assert len(await seeded_catalog.list_all()) == 17

    @pytest.mark.asyncio
    async def test_delete_custom(self, seeded_catalog, mock_snapshots):
        padel = await seeded_catalog.create(key="padel", name="Padel", intensity=1.3)
        handler = DeleteWorkoutTypeHandler(seeded_catalog, mock_snapshots)

        assert await handler.handle(DeleteWorkoutTypeCommand(workout_type_id=padel.id))
        mock_snapshots.invalidate.assert_called_once()


class TestConfigurationQueries:
    @pytest.mark.asyncio
    async def test_get_configurations(self, seeded_config_store):
        groups = await GetConfigurationsHandler(seeded_config_store).handle(
            GetConfigurationsQuery()
        )

        assert sum(len(items) for items in groups.values()) == 22

    @pytest.mark.asyncio
    async def test_list_workout_types(self, seeded_catalog):
        yoga = next(d for d in await seeded_catalog.list_all() if d.key == "yoga")
        await seeded_catalog.update(yoga.id, is_active=False)
        handler = ListWorkoutTypesHandler(seeded_catalog)

        active = await handler.handle(ListWorkoutTypesQuery())
        everything = await handler.handle(ListWorkoutTypesQuery(include_inactive=True))

        assert len(active) == 16
        assert len(everything) == 17


class TestBootstrap:
    @pytest.mark.asyncio
    async def test_seed_defaults(self, config_store, catalog):
        first = await seed_defaults(config_store, catalog)
        second = await seed_defaults(config_store, catalog)

        assert first == SeedReport(config_items=22, workout_types=17)
        assert second == SeedReport(config_items=0, workout_types=0)
