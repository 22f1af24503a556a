"""Domain services for configuration."""

from .config_store import ConfigStore
from .workout_catalog import WorkoutIntensityCatalog

__all__ = ["ConfigStore", "WorkoutIntensityCatalog"]
