"""Factory for creating repository instances."""

import logging
import os
from typing import Optional

from macroplan.domain.configuration.core.ports.config_repository import (
    IConfigRepository,
)
from macroplan.domain.configuration.core.ports.workout_type_repository import (
    IWorkoutTypeRepository,
)
from macroplan.domain.macro_calculation.core.ports.result_recorder import (
    IResultRecorder,
)
from macroplan.infrastructure.persistence.in_memory import (
    InMemoryConfigRepository,
    InMemoryResultRecorder,
    InMemoryWorkoutTypeRepository,
)

logger = logging.getLogger(__name__)

# Backends that are recognised but have no adapter in this service.
_EXTERNAL_BACKENDS = ("postgres", "mongodb")

# Singleton instances
_config_repository: Optional[IConfigRepository] = None
_workout_type_repository: Optional[IWorkoutTypeRepository] = None
_result_recorder: Optional[IResultRecorder] = None


def _backend() -> str:
    """
    Resolve REPOSITORY_BACKEND.

    Returns:
        "inmemory" for the default and for unknown values

    Raises:
        NotImplementedError: For a known external backend
    """
    backend = os.getenv("REPOSITORY_BACKEND", "inmemory").lower()
    if backend in _EXTERNAL_BACKENDS:
        raise NotImplementedError(
            f"REPOSITORY_BACKEND='{backend}' has no adapter in this service. "
            "Use REPOSITORY_BACKEND='inmemory' or provide an adapter."
        )
    if backend != "inmemory":
        # Unknown type - graceful fallback to inmemory
        logger.warning("unknown REPOSITORY_BACKEND=%r, using inmemory", backend)
    return "inmemory"


def create_config_repository() -> IConfigRepository:
    _backend()
    return InMemoryConfigRepository()


def create_workout_type_repository() -> IWorkoutTypeRepository:
    _backend()
    return InMemoryWorkoutTypeRepository()


def create_result_recorder() -> IResultRecorder:
    _backend()
    return InMemoryResultRecorder()


def get_config_repository() -> IConfigRepository:
    """Get singleton configuration repository (lazy)."""
    global _config_repository
    if _config_repository is None:
        _config_repository = create_config_repository()
    return _config_repository


def get_workout_type_repository() -> IWorkoutTypeRepository:
    """Get singleton workout type repository (lazy)."""
    global _workout_type_repository
    if _workout_type_repository is None:
        _workout_type_repository = create_workout_type_repository()
    return _workout_type_repository


def get_result_recorder() -> IResultRecorder:
    """Get singleton result recorder (lazy)."""
    global _result_recorder
    if _result_recorder is None:
        _result_recorder = create_result_recorder()
    return _result_recorder


def reset_repositories() -> None:
    """
    Reset singleton instances.

    Useful for testing to ensure clean state.
    """
    global _config_repository, _workout_type_repository, _result_recorder
    _config_repository = None
    _workout_type_repository = None
    _result_recorder = None
