"""Mapping between domain objects and GraphQL types."""

from typing import Dict, List, Optional

import strawberry

from macroplan.domain.configuration.core.entities.config_item import ConfigItem
from macroplan.domain.configuration.core.entities.workout_type import (
    WorkoutTypeDefinition,
)
from macroplan.domain.configuration.core.value_objects.config_category import (
    ConfigCategory,
)
from macroplan.domain.macro_calculation.core.entities.calculation_record import (
    CalculationRecord,
)
from macroplan.domain.macro_calculation.core.value_objects import (
    DayOfWeek,
    DayTargets,
    Gender,
    Goal,
    HeightUnit,
    MacroResult,
    UserInput,
    WeightUnit,
    WorkoutEntry,
)
from macroplan.graphql_api.types import (
    ActivityLevelEnum,
    CalculationRecordType,
    ConfigCategoryEnum,
    ConfigGroupType,
    ConfigItemType,
    DayOfWeekEnum,
    DayTargetsType,
    GenderEnum,
    GoalEnum,
    HeightUnitEnum,
    MacroResultType,
    UserInputInput,
    UserInputType,
    WeightUnitEnum,
    WorkoutEntryInput,
    WorkoutEntryType,
    WorkoutTypeType,
)


# ============================================
# INPUT -> DOMAIN
# ============================================


def map_user_input_to_domain(data: UserInputInput) -> UserInput:
    """Build a validated UserInput (raises InvalidUserInputError)."""
    return UserInput(
        age=data.age,
        gender=Gender(data.gender.value),
        weight=data.weight,
        weight_unit=WeightUnit(data.weight_unit.value),
        height=data.height,
        height_unit=HeightUnit(data.height_unit.value),
        goal=Goal(data.goal.value),
    )


def map_workout_to_domain(data: WorkoutEntryInput) -> WorkoutEntry:
    """Build a validated WorkoutEntry (raises InvalidWorkoutScheduleError)."""
    return WorkoutEntry(
        day=DayOfWeek(data.day.value),
        type=data.type,
        hours=data.hours,
        notes=data.notes,
    )


# ============================================
# DOMAIN -> OUTPUT
# ============================================


def _map_day_targets(targets: Optional[DayTargets]) -> Optional[DayTargetsType]:
    if targets is None:
        return None
    return DayTargetsType(
        calories=targets.calories,
        protein_g=targets.protein_g,
        carbs_g=targets.carbs_g,
        fat_g=targets.fat_g,
    )


def map_result_to_graphql(result_id: str, result: MacroResult) -> MacroResultType:
    return MacroResultType(
        id=strawberry.ID(result_id),
        bmr=result.bmr,
        tdee=result.tdee,
        daily_calories=result.daily_calories,
        protein=result.protein,
        carbs=result.carbs,
        fats=result.fats,
        workout_day=_map_day_targets(result.workout_day),
        rest_day=_map_day_targets(result.rest_day),
        activity_level=ActivityLevelEnum(result.activity_level.value),
        average_weighted_hours=result.average_weighted_hours,
        calculated_at=result.calculated_at,
    )


def map_record_to_graphql(record: CalculationRecord) -> CalculationRecordType:
    record_id = str(record.record_id)
    user_input = record.user_input
    return CalculationRecordType(
        id=strawberry.ID(record_id),
        user_input=UserInputType(
            age=user_input.age,
            gender=GenderEnum(user_input.gender.value),
            weight=user_input.weight,
            weight_unit=WeightUnitEnum(user_input.weight_unit.value),
            height=user_input.height,
            height_unit=HeightUnitEnum(user_input.height_unit.value),
            goal=GoalEnum(user_input.goal.value),
        ),
        workouts=[
            WorkoutEntryType(
                day=DayOfWeekEnum(w.day.value),
                type=w.type,
                hours=w.hours,
                notes=w.notes,
            )
            for w in record.workouts
        ],
        result=map_result_to_graphql(record_id, record.result),
    )


def map_config_item_to_graphql(item: ConfigItem) -> ConfigItemType:
    return ConfigItemType(
        key=item.key,
        value=item.value,
        category=ConfigCategoryEnum(item.category.value),
        label=item.label,
        description=item.description,
        updated_at=item.updated_at,
    )


def map_config_groups_to_graphql(
    groups: Dict[ConfigCategory, List[ConfigItem]],
) -> List[ConfigGroupType]:
    return [
        ConfigGroupType(
            category=ConfigCategoryEnum(category.value),
            items=[map_config_item_to_graphql(item) for item in items],
        )
        for category, items in groups.items()
    ]


def map_workout_type_to_graphql(definition: WorkoutTypeDefinition) -> WorkoutTypeType:
    return WorkoutTypeType(
        id=strawberry.ID(str(definition.id)),
        key=definition.key,
        name=definition.name,
        intensity=definition.intensity,
        icon=definition.icon,
        color=definition.color,
        description=definition.description,
        sort_order=definition.sort_order,
        is_active=definition.is_active,
        is_default=definition.is_default,
    )
