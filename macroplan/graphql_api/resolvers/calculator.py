"""Client-facing resolvers for macro calculation.

- calculateMacros: Compute targets from body metrics and weekly schedule
- result: Fetch a recorded calculation by id
- workoutTypes: Active workout types for the schedule picker
"""

from typing import List, Optional

import strawberry

from macroplan.application.configuration.queries.list_workout_types import (
    ListWorkoutTypesHandler,
    ListWorkoutTypesQuery,
)
from macroplan.application.macro_calculation.commands.calculate_macros import (
    CalculateMacrosCommand,
    CalculateMacrosHandler,
)
from macroplan.application.macro_calculation.queries.get_result import (
    GetResultHandler,
    GetResultQuery,
)
from macroplan.graphql_api.mappers import (
    map_record_to_graphql,
    map_result_to_graphql,
    map_user_input_to_domain,
    map_workout_to_domain,
    map_workout_type_to_graphql,
)
from macroplan.graphql_api.types import (
    CalculateMacrosInput,
    CalculationRecordType,
    MacroResultType,
    WorkoutTypeType,
)


@strawberry.type
class CalculatorQueries:
    """Queries for calculation results and the workout picker."""

    @strawberry.field
    async def result(
        self, info: strawberry.types.Info, id: strawberry.ID
    ) -> Optional[CalculationRecordType]:
        """Get a recorded calculation with its input.

        Example:
            query {
              calculator {
                result(id: "...") {
                  result { dailyCalories protein carbs fats }
                  workouts { day type hours }
                }
              }
            }
        """
        recorder = info.context.get("result_recorder")
        if recorder is None:
            raise Exception("Missing dependencies in GraphQL context")

        handler = GetResultHandler(recorder=recorder)
        record = await handler.handle(GetResultQuery(result_id=str(id)))
        if record is None:
            return None
        return map_record_to_graphql(record)

    @strawberry.field
    async def workout_types(self, info: strawberry.types.Info) -> List[WorkoutTypeType]:
        """Active workout types ordered for display."""
        catalog = info.context.get("workout_catalog")
        if catalog is None:
            raise Exception("Missing dependencies in GraphQL context")

        handler = ListWorkoutTypesHandler(catalog=catalog)
        definitions = await handler.handle(ListWorkoutTypesQuery())
        return [map_workout_type_to_graphql(d) for d in definitions]


@strawberry.type
class CalculatorMutations:
    """Mutations for macro calculation."""

    @strawberry.mutation
    async def calculate_macros(
        self, info: strawberry.types.Info, input: CalculateMacrosInput
    ) -> MacroResultType:
        """Calculate calorie and macro targets and record the result.

        Workflow:
        1. Validate user input and weekly schedule
        2. Read cached configuration and workout intensities
        3. BMR (Mifflin-St Jeor), activity band, TDEE, goal adjustment
        4. Macro split with protein floor, workout/rest day targets
        5. Record input and result

        Example:
            mutation {
              calculator {
                calculateMacros(input: {
                  userInput: {
                    age: 30, gender: MALE, weight: 70, height: 175,
                    goal: MAINTENANCE
                  }
                  workouts: [{day: MONDAY, type: "running", hours: 1}]
                }) {
                  id
                  dailyCalories
                  workoutDay { calories proteinG carbsG fatG }
                }
              }
            }
        """
        context = info.context
        engine = context.get("engine")
        snapshots = context.get("snapshots")
        recorder = context.get("result_recorder")

        if not all([engine, snapshots, recorder]):
            raise Exception("Missing dependencies in GraphQL context")

        command = CalculateMacrosCommand(
            user_input=map_user_input_to_domain(input.user_input),
            workouts=tuple(map_workout_to_domain(w) for w in input.workouts),
        )
        handler = CalculateMacrosHandler(
            engine=engine, snapshots=snapshots, recorder=recorder
        )
        outcome = await handler.handle(command)
        return map_result_to_graphql(outcome.result_id, outcome.result)
