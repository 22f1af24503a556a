"""Startup seeding of configuration and catalog."""

import logging
from dataclasses import dataclass

from macroplan.domain.configuration.services.config_store import ConfigStore
from macroplan.domain.configuration.services.workout_catalog import (
    WorkoutIntensityCatalog,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeedReport:
    config_items: int
    workout_types: int


async def seed_defaults(
    config_store: ConfigStore, catalog: WorkoutIntensityCatalog
) -> SeedReport:
    """Seed empty stores with the default tables.

    Populated stores are left untouched, so this is safe on every start.

    Returns:
        SeedReport: Number of rows inserted per store
    """
    report = SeedReport(
        config_items=await config_store.seed_defaults(),
        workout_types=await catalog.seed_defaults(),
    )
    logger.info(
        "bootstrap seeding done: config_items=%d workout_types=%d",
        report.config_items,
        report.workout_types,
    )
    return report
