"""GraphQL context factory for dependency injection.

Provides the dependencies resolvers need:
- MacroEngine (pure calculation)
- Calculation snapshots (TTL cache)
- Result recorder
- ConfigStore and WorkoutIntensityCatalog (administration)
"""

from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from macroplan.domain.configuration.services.config_store import ConfigStore
from macroplan.domain.configuration.services.workout_catalog import (
    WorkoutIntensityCatalog,
)
from macroplan.domain.macro_calculation.calculation.engine import MacroEngine
from macroplan.domain.macro_calculation.core.ports.result_recorder import (
    IResultRecorder,
)
from macroplan.domain.macro_calculation.core.ports.snapshots import (
    ICalculationSnapshots,
)


class GraphQLContext(BaseContext):
    """GraphQL context with all dependencies.

    Resolvers access dependencies using ``info.context.get("name")``.

    Attributes:
        engine: Macro calculation engine
        snapshots: Cached configuration and intensity feeds
        result_recorder: Storage of calculation records
        config_store: Configuration coefficients
        workout_catalog: Workout type catalog
        request: FastAPI request object
    """

    def __init__(
        self,
        engine: MacroEngine,
        snapshots: ICalculationSnapshots,
        result_recorder: IResultRecorder,
        config_store: ConfigStore,
        workout_catalog: WorkoutIntensityCatalog,
        request: Optional[Request] = None,
    ) -> None:
        super().__init__()
        self.engine = engine
        self.snapshots = snapshots
        self.result_recorder = result_recorder
        self.config_store = config_store
        self.workout_catalog = workout_catalog
        self.request = request

    def get(self, key: str) -> Any:
        """Get dependency by name, None if unknown."""
        return getattr(self, key, None)


def create_context(
    engine: MacroEngine,
    snapshots: ICalculationSnapshots,
    result_recorder: IResultRecorder,
    config_store: ConfigStore,
    workout_catalog: WorkoutIntensityCatalog,
    request: Optional[Request] = None,
) -> GraphQLContext:
    return GraphQLContext(
        engine=engine,
        snapshots=snapshots,
        result_recorder=result_recorder,
        config_store=config_store,
        workout_catalog=workout_catalog,
        request=request,
    )
