from __future__ import annotations

# Standard library
import os
import logging as _logging
from contextlib import asynccontextmanager
from typing import Final, Any

# Third-party
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from strawberry.fastapi import GraphQLRouter

# Local application imports
from macroplan.application.bootstrap import seed_defaults
from macroplan.domain.configuration.services.config_store import ConfigStore
from macroplan.domain.configuration.services.workout_catalog import (
    WorkoutIntensityCatalog,
)
from macroplan.domain.macro_calculation.calculation.engine import MacroEngine
from macroplan.graphql_api.context import GraphQLContext, create_context
from macroplan.graphql_api.schema import create_schema
from macroplan.infrastructure.cache.calculation_cache import (
    CalculationCache,
    ttl_from_env,
)
from macroplan.infrastructure.persistence.factory import (
    get_config_repository,
    get_result_recorder,
    get_workout_type_repository,
)

load_dotenv()

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_logging.basicConfig(
    level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

# Version from env (Docker build ARG -> ENV APP_VERSION)
APP_VERSION = os.getenv("APP_VERSION", "0.0.0-dev")


# ============================================
# Singletons (persistent across requests)
# ============================================

# REPOSITORY_BACKEND: "inmemory" (default)
_config_store = ConfigStore(get_config_repository())
_workout_catalog = WorkoutIntensityCatalog(get_workout_type_repository())
_result_recorder = get_result_recorder()

# CALCULATION_CACHE_TTL_S: snapshot lifetime in seconds (default 60)
_calculation_cache = CalculationCache(
    config_store=_config_store,
    catalog=_workout_catalog,
    ttl_seconds=ttl_from_env(),
)
_engine = MacroEngine()


def get_graphql_context(request: Request) -> GraphQLContext:
    """Create GraphQL context with the singleton dependencies."""
    return create_context(
        engine=_engine,
        snapshots=_calculation_cache,
        result_recorder=_result_recorder,
        config_store=_config_store,
        workout_catalog=_workout_catalog,
        request=request,
    )


schema = create_schema()


@asynccontextmanager
async def lifespan(_: FastAPI) -> Any:
    """Seed configuration and workout catalog on startup."""
    logger = _logging.getLogger("startup")
    logger.info(
        "startup: version=%s log_level=%s backend=%s cache_ttl_s=%s",
        APP_VERSION,
        _LOG_LEVEL,
        os.getenv("REPOSITORY_BACKEND", "inmemory"),
        _calculation_cache.ttl_seconds,
    )
    await seed_defaults(_config_store, _workout_catalog)
    yield
    logger.info("shutdown")


app = FastAPI(
    title="Macroplan Calculation Service",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/version")
async def version() -> dict[str, str]:
    return {"version": APP_VERSION}


graphql_app: Final[GraphQLRouter[Any, Any]] = GraphQLRouter(
    schema, context_getter=get_graphql_context
)
app.include_router(graphql_app, prefix="/graphql")
