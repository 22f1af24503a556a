"""Fixtures for resolver tests: a mock Strawberry Info over real services."""

from typing import Any, Dict
from unittest.mock import MagicMock

import pytest

from macroplan.domain.macro_calculation.calculation.engine import MacroEngine
from macroplan.infrastructure.cache.calculation_cache import CalculationCache


@pytest.fixture
def dependencies(seeded_config_store, seeded_catalog, recorder) -> Dict[str, Any]:
    """Real in-memory services keyed by their context names."""
    return {
        "engine": MacroEngine(),
        "snapshots": CalculationCache(seeded_config_store, seeded_catalog),
        "result_recorder": recorder,
        "config_store": seeded_config_store,
        "workout_catalog": seeded_catalog,
    }


@pytest.fixture
def mock_info(dependencies: Dict[str, Any]) -> Any:
    """Create mock Strawberry Info object."""
    context = MagicMock()
    context.get = MagicMock(side_effect=lambda key: dependencies.get(key))
    info = MagicMock()
    info.context = context
    return info
