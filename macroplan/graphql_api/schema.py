"""GraphQL schema for the macroplan service.

Client operations live under ``calculator``, operator operations under
``admin``:

    query { calculator { workoutTypes { key name } } }
    mutation { admin { deleteResult(id: "...") } }
"""

import strawberry

from macroplan.graphql_api.resolvers import (
    AdminMutations,
    AdminQueries,
    CalculatorMutations,
    CalculatorQueries,
)


@strawberry.type
class Query:
    @strawberry.field
    def health(self) -> str:
        return "ok"

    @strawberry.field(description="Macro calculation queries")  # type: ignore[misc]
    def calculator(self) -> CalculatorQueries:
        return CalculatorQueries()

    @strawberry.field(description="Operator queries")  # type: ignore[misc]
    def admin(self) -> AdminQueries:
        return AdminQueries()


@strawberry.type
class Mutation:
    @strawberry.field(description="Macro calculation mutations")  # type: ignore[misc]
    def calculator(self) -> CalculatorMutations:
        return CalculatorMutations()

    @strawberry.field(description="Operator mutations")  # type: ignore[misc]
    def admin(self) -> AdminMutations:
        return AdminMutations()


def create_schema() -> strawberry.Schema:
    """Create Strawberry schema with calculator and admin resolvers."""
    return strawberry.Schema(query=Query, mutation=Mutation)
