"""Operator resolvers: result history, configuration, workout catalog.

Every write that feeds the calculation invalidates the snapshot cache.
"""

from typing import List
from uuid import UUID

import strawberry

from macroplan.application.configuration.commands.update_config import (
    ConfigUpdate,
    UpdateConfigCommand,
    UpdateConfigHandler,
)
from macroplan.application.configuration.commands.workout_types import (
    CreateWorkoutTypeCommand,
    CreateWorkoutTypeHandler,
    DeleteWorkoutTypeCommand,
    DeleteWorkoutTypeHandler,
    UpdateWorkoutTypeCommand,
    UpdateWorkoutTypeHandler,
)
from macroplan.application.configuration.queries.get_configurations import (
    GetConfigurationsHandler,
    GetConfigurationsQuery,
)
from macroplan.application.configuration.queries.list_workout_types import (
    ListWorkoutTypesHandler,
    ListWorkoutTypesQuery,
)
from macroplan.application.macro_calculation.commands.delete_result import (
    DeleteResultCommand,
    DeleteResultHandler,
)
from macroplan.application.macro_calculation.queries.list_results import (
    ListResultsHandler,
    ListResultsQuery,
)
from macroplan.graphql_api.mappers import (
    map_config_groups_to_graphql,
    map_record_to_graphql,
    map_workout_type_to_graphql,
)
from macroplan.graphql_api.types import (
    ConfigGroupType,
    ConfigUpdateInput,
    CreateWorkoutTypeInput,
    ResultPageType,
    UpdateConfigResultType,
    UpdateWorkoutTypeInput,
    WorkoutTypeType,
)


def _require(info: strawberry.types.Info, *names: str) -> List:
    deps = [info.context.get(name) for name in names]
    if not all(dep is not None for dep in deps):
        raise Exception("Missing dependencies in GraphQL context")
    return deps


@strawberry.type
class AdminQueries:
    """Queries for operators."""

    @strawberry.field
    async def results(
        self, info: strawberry.types.Info, page: int = 1, limit: int = 20
    ) -> ResultPageType:
        """Recorded calculations, newest first."""
        (recorder,) = _require(info, "result_recorder")
        result_page = await ListResultsHandler(recorder=recorder).handle(
            ListResultsQuery(page=page, limit=limit)
        )
        return ResultPageType(
            records=[map_record_to_graphql(r) for r in result_page.records],
            page=result_page.page,
            limit=result_page.limit,
            total=result_page.total,
            total_pages=result_page.total_pages,
        )

    @strawberry.field
    async def configurations(self, info: strawberry.types.Info) -> List[ConfigGroupType]:
        """Configuration values grouped by category."""
        (config_store,) = _require(info, "config_store")
        groups = await GetConfigurationsHandler(config_store=config_store).handle(
            GetConfigurationsQuery()
        )
        return map_config_groups_to_graphql(groups)

    @strawberry.field
    async def workout_types(
        self, info: strawberry.types.Info, include_inactive: bool = True
    ) -> List[WorkoutTypeType]:
        (catalog,) = _require(info, "workout_catalog")
        definitions = await ListWorkoutTypesHandler(catalog=catalog).handle(
            ListWorkoutTypesQuery(include_inactive=include_inactive)
        )
        return [map_workout_type_to_graphql(d) for d in definitions]


@strawberry.type
class AdminMutations:
    """Mutations for operators."""

    @strawberry.mutation
    async def update_configurations(
        self, info: strawberry.types.Info, updates: List[ConfigUpdateInput]
    ) -> UpdateConfigResultType:
        """Overwrite configuration values; unknown keys are reported as skipped.

        Example:
            mutation {
              admin {
                updateConfigurations(updates: [
                  {key: "activity_sedentary", value: 1.25}
                ]) { updated skipped }
              }
            }
        """
        config_store, snapshots = _require(info, "config_store", "snapshots")
        command = UpdateConfigCommand(
            updates=tuple(ConfigUpdate(key=u.key, value=u.value) for u in updates)
        )
        outcome = await UpdateConfigHandler(
            config_store=config_store, snapshots=snapshots
        ).handle(command)
        return UpdateConfigResultType(
            updated=list(outcome.updated),
            skipped=list(outcome.skipped),
            configurations=map_config_groups_to_graphql(outcome.configurations),
        )

    @strawberry.mutation
    async def create_workout_type(
        self, info: strawberry.types.Info, input: CreateWorkoutTypeInput
    ) -> WorkoutTypeType:
        catalog, snapshots = _require(info, "workout_catalog", "snapshots")
        command = CreateWorkoutTypeCommand(
            key=input.key,
            name=input.name,
            intensity=input.intensity,
            icon=input.icon,
            color=input.color,
            description=input.description,
            sort_order=input.sort_order,
        )
        definition = await CreateWorkoutTypeHandler(
            catalog=catalog, snapshots=snapshots
        ).handle(command)
        return map_workout_type_to_graphql(definition)

    @strawberry.mutation
    async def update_workout_type(
        self, info: strawberry.types.Info, input: UpdateWorkoutTypeInput
    ) -> WorkoutTypeType:
        catalog, snapshots = _require(info, "workout_catalog", "snapshots")
        command = UpdateWorkoutTypeCommand(
            workout_type_id=UUID(str(input.id)),
            name=input.name,
            intensity=input.intensity,
            icon=input.icon,
            color=input.color,
            description=input.description,
            sort_order=input.sort_order,
            is_active=input.is_active,
        )
        definition = await UpdateWorkoutTypeHandler(
            catalog=catalog, snapshots=snapshots
        ).handle(command)
        return map_workout_type_to_graphql(definition)

    @strawberry.mutation
    async def delete_workout_type(
        self, info: strawberry.types.Info, id: strawberry.ID
    ) -> bool:
        """Delete a custom workout type. Built-in types cannot be deleted."""
        catalog, snapshots = _require(info, "workout_catalog", "snapshots")
        command = DeleteWorkoutTypeCommand(workout_type_id=UUID(str(id)))
        return await DeleteWorkoutTypeHandler(
            catalog=catalog, snapshots=snapshots
        ).handle(command)

    @strawberry.mutation
    async def delete_result(self, info: strawberry.types.Info, id: strawberry.ID) -> bool:
        """Delete a recorded calculation together with its input."""
        (recorder,) = _require(info, "result_recorder")
        return await DeleteResultHandler(recorder=recorder).handle(
            DeleteResultCommand(result_id=str(id))
        )
