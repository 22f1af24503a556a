"""Ports for configuration domain."""

from .config_repository import IConfigRepository
from .workout_type_repository import IWorkoutTypeRepository

__all__ = ["IConfigRepository", "IWorkoutTypeRepository"]
