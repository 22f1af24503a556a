"""Unit tests for operator resolvers."""

from uuid import uuid4

import pytest
import strawberry

from macroplan.domain.configuration.core.exceptions import (
    WorkoutTypeConflictError,
    WorkoutTypeNotFoundError,
)
from macroplan.graphql_api.resolvers.admin import AdminMutations, AdminQueries
from macroplan.graphql_api.resolvers.calculator import CalculatorMutations
from macroplan.graphql_api.types import (
    CalculateMacrosInput,
    ConfigCategoryEnum,
    ConfigUpdateInput,
    CreateWorkoutTypeInput,
    DayOfWeekEnum,
    GenderEnum,
    GoalEnum,
    UpdateWorkoutTypeInput,
    UserInputInput,
    WorkoutEntryInput,
)


def _calculation(workout_type: str = "rest", hours: float = 0.0) -> CalculateMacrosInput:
    return CalculateMacrosInput(
        user_input=UserInputInput(
            age=30,
            gender=GenderEnum.MALE,
            weight=70.0,
            height=175.0,
            goal=GoalEnum.MAINTENANCE,
        ),
        workouts=[WorkoutEntryInput(day=DayOfWeekEnum.MONDAY, type=workout_type, hours=hours)],
    )


class TestAdminQueries:
    @pytest.mark.asyncio
    async def test_results_paginated(self, mock_info):
        for _ in range(3):
            await CalculatorMutations().calculate_macros(mock_info, _calculation())

        page = await AdminQueries().results(mock_info, page=1, limit=2)

        assert page.total == 3
        assert page.total_pages == 2
        assert len(page.records) == 2

    @pytest.mark.asyncio
    async def test_configurations_grouped(self, mock_info):
        groups = await AdminQueries().configurations(mock_info)

        categories = {g.category for g in groups}
        assert categories == set(ConfigCategoryEnum)
        assert sum(len(g.items) for g in groups) == 22

    @pytest.mark.asyncio
    async def test_workout_types_include_inactive(self, mock_info, seeded_catalog):
        yoga = next(d for d in await seeded_catalog.list_all() if d.key == "yoga")
        await seeded_catalog.update(yoga.id, is_active=False)

        everything = await AdminQueries().workout_types(mock_info)
        active = await AdminQueries().workout_types(mock_info, include_inactive=False)

        assert len(everything) == 17
        assert len(active) == 16


class TestConfigurationMutations:
    @pytest.mark.asyncio
    async def test_update_is_visible_to_next_calculation(self, mock_info):
        before = await CalculatorMutations().calculate_macros(mock_info, _calculation())

        outcome = await AdminMutations().update_configurations(
            mock_info,
            [
                ConfigUpdateInput(key="goal_maintenance", value=0.5),
                ConfigUpdateInput(key="goal_bulk", value=1.2),
            ],
        )
        after = await CalculatorMutations().calculate_macros(mock_info, _calculation())

        assert outcome.updated == ["goal_maintenance"]
        assert outcome.skipped == ["goal_bulk"]
        assert before.daily_calories == 1979
        assert after.daily_calories == 990


class TestWorkoutTypeMutations:
    @pytest.mark.asyncio
    async def test_create_update_delete(self, mock_info):
        mutations = AdminMutations()

        created = await mutations.create_workout_type(
            mock_info,
            CreateWorkoutTypeInput(key="padel", name="Padel", intensity=7.0, color="lime"),
        )
        assert created.intensity == 3.0
        assert created.is_default is False

        updated = await mutations.update_workout_type(
            mock_info, UpdateWorkoutTypeInput(id=created.id, intensity=1.3, sort_order=20)
        )
        assert updated.intensity == 1.3
        assert updated.sort_order == 20
        assert updated.name == "Padel"

        assert await mutations.delete_workout_type(mock_info, id=created.id) is True

    @pytest.mark.asyncio
    async def test_new_type_reaches_calculation(self, mock_info):
        # 7 h at 1.0 (unknown) -> very active; at 2.0 -> 2.0 h/day -> athlete
        unknown = await CalculatorMutations().calculate_macros(
            mock_info, _calculation("padel", 7.0)
        )
        await AdminMutations().create_workout_type(
            mock_info, CreateWorkoutTypeInput(key="padel", name="Padel", intensity=2.0)
        )
        known = await CalculatorMutations().calculate_macros(
            mock_info, _calculation("padel", 7.0)
        )

        assert unknown.activity_level.value == "very_active"
        assert known.activity_level.value == "athlete"

    @pytest.mark.asyncio
    async def test_delete_builtin_conflicts(self, mock_info, seeded_catalog):
        running = next(d for d in await seeded_catalog.list_all() if d.key == "running")

        with pytest.raises(WorkoutTypeConflictError):
            await AdminMutations().delete_workout_type(
                mock_info, id=strawberry.ID(str(running.id))
            )

    @pytest.mark.asyncio
    async def test_update_unknown_id(self, mock_info):
        with pytest.raises(WorkoutTypeNotFoundError):
            await AdminMutations().update_workout_type(
                mock_info, UpdateWorkoutTypeInput(id=strawberry.ID(str(uuid4())), name="X")
            )

    @pytest.mark.asyncio
    async def test_delete_result(self, mock_info, recorder):
        created = await CalculatorMutations().calculate_macros(mock_info, _calculation())

        assert await AdminMutations().delete_result(mock_info, id=created.id) is True
        assert await AdminMutations().delete_result(mock_info, id=created.id) is False
        assert recorder.count() == 0
