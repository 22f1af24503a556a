"""Entities for configuration domain."""

from .config_item import ConfigItem
from .workout_type import WorkoutTypeDefinition, clamp_intensity

__all__ = ["ConfigItem", "WorkoutTypeDefinition", "clamp_intensity"]
