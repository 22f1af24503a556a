"""Unit tests for in-memory repositories and the result recorder."""

from datetime import datetime, timedelta, timezone

import pytest

from macroplan.domain.configuration.core.entities.config_item import ConfigItem
from macroplan.domain.configuration.core.entities.workout_type import (
    WorkoutTypeDefinition,
)
from macroplan.domain.configuration.core.value_objects.config_category import (
    ConfigCategory,
)
from macroplan.domain.macro_calculation.calculation.engine import MacroEngine
from macroplan.infrastructure.persistence.in_memory import (
    InMemoryConfigRepository,
    InMemoryWorkoutTypeRepository,
)

BASE_TIME = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class TestInMemoryConfigRepository:
    @pytest.mark.asyncio
    async def test_returned_items_are_copies(self):
        repo = InMemoryConfigRepository()
        await repo.save(
            ConfigItem(
                key="goal_maintenance",
                value=1.0,
                category=ConfigCategory.GOAL_ADJUSTMENT,
                label="Maintenance",
            )
        )

        item = await repo.find_by_key("goal_maintenance")
        assert item is not None
        item.value = 99.0

        stored = await repo.find_by_key("goal_maintenance")
        assert stored is not None
        assert stored.value == 1.0

    @pytest.mark.asyncio
    async def test_find_missing(self):
        assert await InMemoryConfigRepository().find_by_key("missing") is None


class TestInMemoryWorkoutTypeRepository:
    @pytest.mark.asyncio
    async def test_active_only_filter(self):
        repo = InMemoryWorkoutTypeRepository()
        await repo.save_all(
            [
                WorkoutTypeDefinition(key="a", name="A", intensity=1.0),
                WorkoutTypeDefinition(key="b", name="B", intensity=1.0, is_active=False),
            ]
        )

        assert [d.key for d in await repo.find_all(active_only=True)] == ["a"]
        assert await repo.count() == 2

    @pytest.mark.asyncio
    async def test_delete(self):
        repo = InMemoryWorkoutTypeRepository()
        definition = WorkoutTypeDefinition(key="a", name="A", intensity=1.0)
        await repo.save(definition)

        assert await repo.delete(definition.id) is True
        assert await repo.delete(definition.id) is False
        assert await repo.find_by_key("a") is None


class TestInMemoryResultRecorder:
    async def _record(self, recorder, user, week, minutes: int) -> str:
        result = MacroEngine().calculate(
            user, week, {}, {}, BASE_TIME + timedelta(minutes=minutes)
        )
        return await recorder.record(user, week, result)

    @pytest.mark.asyncio
    async def test_record_and_find(self, recorder, reference_user, rest_week):
        record_id = await self._record(recorder, reference_user, rest_week, 0)

        record = await recorder.find_by_id(record_id)

        assert record is not None
        assert str(record.record_id) == record_id
        assert record.user_input == reference_user
        assert record.workouts == rest_week
        assert record.result.daily_calories == 1979

    @pytest.mark.asyncio
    async def test_list_recent_newest_first(self, recorder, reference_user, rest_week):
        ids = [
            await self._record(recorder, reference_user, rest_week, minutes)
            for minutes in range(3)
        ]

        records, total = await recorder.list_recent(0, 10)

        assert total == 3
        assert [str(r.record_id) for r in records] == list(reversed(ids))

    @pytest.mark.asyncio
    async def test_delete_removes_input_and_result(
        self, recorder, reference_user, rest_week
    ):
        record_id = await self._record(recorder, reference_user, rest_week, 0)

        assert await recorder.delete(record_id) is True
        assert await recorder.find_by_id(record_id) is None
        assert await recorder.delete(record_id) is False
        assert recorder.count() == 0
