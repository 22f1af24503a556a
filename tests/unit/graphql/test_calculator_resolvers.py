"""Unit tests for calculator resolvers."""

from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from macroplan.domain.macro_calculation.core.exceptions import InvalidUserInputError
from macroplan.graphql_api.resolvers.calculator import (
    CalculatorMutations,
    CalculatorQueries,
)
from macroplan.graphql_api.types import (
    ActivityLevelEnum,
    CalculateMacrosInput,
    DayOfWeekEnum,
    GenderEnum,
    GoalEnum,
    UserInputInput,
    WeightUnitEnum,
    WorkoutEntryInput,
)


def _input(**user_overrides: Any) -> CalculateMacrosInput:
    user = dict(
        age=30,
        gender=GenderEnum.MALE,
        weight=70.0,
        height=175.0,
        goal=GoalEnum.MAINTENANCE,
    )
    user.update(user_overrides)
    return CalculateMacrosInput(
        user_input=UserInputInput(**user),
        workouts=[WorkoutEntryInput(day=day) for day in DayOfWeekEnum],
    )


class TestCalculateMacros:
    @pytest.mark.asyncio
    async def test_returns_recorded_result(self, mock_info, recorder):
        result = await CalculatorMutations().calculate_macros(mock_info, _input())

        assert result.bmr == 1649
        assert result.tdee == 1979
        assert (result.protein, result.carbs, result.fats) == (124, 223, 66)
        assert result.activity_level == ActivityLevelEnum.SEDENTARY
        assert result.workout_day is not None
        assert result.workout_day.calories == 2177
        assert result.rest_day is not None
        assert result.rest_day.fat_g == 69
        assert recorder.count() == 1
        assert await recorder.find_by_id(str(result.id)) is not None

    @pytest.mark.asyncio
    async def test_imperial_units(self, mock_info):
        result = await CalculatorMutations().calculate_macros(
            mock_info, _input(weight=220.0, weight_unit=WeightUnitEnum.LBS, age=40)
        )

        assert result.protein >= 160

    @pytest.mark.asyncio
    async def test_invalid_input_raises(self, mock_info, recorder):
        with pytest.raises(InvalidUserInputError):
            await CalculatorMutations().calculate_macros(mock_info, _input(age=5))

        assert recorder.count() == 0

    @pytest.mark.asyncio
    async def test_missing_dependencies(self):
        info = MagicMock()
        info.context.get = MagicMock(return_value=None)

        with pytest.raises(Exception, match="Missing dependencies"):
            await CalculatorMutations().calculate_macros(info, _input())


class TestCalculatorQueries:
    @pytest.mark.asyncio
    async def test_result_round_trip(self, mock_info):
        created = await CalculatorMutations().calculate_macros(mock_info, _input())

        record = await CalculatorQueries().result(mock_info, id=created.id)

        assert record is not None
        assert record.result.daily_calories == created.daily_calories
        assert record.user_input.gender == GenderEnum.MALE
        assert len(record.workouts) == 7
        assert record.workouts[0].type == "rest"

    @pytest.mark.asyncio
    async def test_result_not_found(self, mock_info):
        assert await CalculatorQueries().result(mock_info, id=strawberry.ID("missing")) is None

    @pytest.mark.asyncio
    async def test_workout_types_are_active_only(self, mock_info, seeded_catalog):
        yoga = next(d for d in await seeded_catalog.list_all() if d.key == "yoga")
        await seeded_catalog.update(yoga.id, is_active=False)

        types = await CalculatorQueries().workout_types(mock_info)

        keys = [t.key for t in types]
        assert "yoga" not in keys
        assert keys[0] == "rest"
        assert len(keys) == 16
