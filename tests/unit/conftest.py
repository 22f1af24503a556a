"""Unit test fixtures.

Unit tests do not import the FastAPI app; stores are built per test.
"""

import pytest
import pytest_asyncio

from macroplan.domain.configuration.services.config_store import ConfigStore
from macroplan.domain.configuration.services.workout_catalog import (
    WorkoutIntensityCatalog,
)
from macroplan.domain.macro_calculation.core.value_objects import (
    DayOfWeek,
    Gender,
    Goal,
    HeightUnit,
    UserInput,
    WeightUnit,
    WorkoutEntry,
)
from macroplan.infrastructure.persistence.in_memory import (
    InMemoryConfigRepository,
    InMemoryResultRecorder,
    InMemoryWorkoutTypeRepository,
)



@pytest.fixture
def reference_user() -> UserInput:
    """30-year-old male, 70 kg, 175 cm, maintenance."""
    return UserInput(
        age=30,
        gender=Gender.MALE,
        weight=70.0,
        weight_unit=WeightUnit.KG,
        height=175.0,
        height_unit=HeightUnit.CM,
        goal=Goal.MAINTENANCE,
    )


@pytest.fixture
def rest_week() -> tuple:
    """Seven rest days."""
    return tuple(WorkoutEntry(day=day, type="rest", hours=0.0) for day in DayOfWeek)


@pytest.fixture
def config_store() -> ConfigStore:
    return ConfigStore(InMemoryConfigRepository())


@pytest.fixture
def catalog() -> WorkoutIntensityCatalog:
    return WorkoutIntensityCatalog(InMemoryWorkoutTypeRepository())


@pytest_asyncio.fixture
async def seeded_config_store(config_store: ConfigStore) -> ConfigStore:
    await config_store.seed_defaults()
    return config_store


@pytest_asyncio.fixture
async def seeded_catalog(catalog: WorkoutIntensityCatalog) -> WorkoutIntensityCatalog:
    await catalog.seed_defaults()
    return catalog


@pytest.fixture
def recorder() -> InMemoryResultRecorder:
    return InMemoryResultRecorder()
