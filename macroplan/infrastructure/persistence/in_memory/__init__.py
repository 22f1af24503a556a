"""In-memory repository implementations."""

from .config_repository import InMemoryConfigRepository
from .result_recorder import InMemoryResultRecorder
from .workout_type_repository import InMemoryWorkoutTypeRepository

__all__ = [
    "InMemoryConfigRepository",
    "InMemoryResultRecorder",
    "InMemoryWorkoutTypeRepository",
]
