"""Commands for configuration administration."""

from .update_config import (
    ConfigUpdate,
    UpdateConfigCommand,
    UpdateConfigHandler,
    UpdateConfigResult,
)
from .workout_types import (
    CreateWorkoutTypeCommand,
    CreateWorkoutTypeHandler,
    DeleteWorkoutTypeCommand,
    DeleteWorkoutTypeHandler,
    UpdateWorkoutTypeCommand,
    UpdateWorkoutTypeHandler,
)

__all__ = [
    "ConfigUpdate",
    "UpdateConfigCommand",
    "UpdateConfigHandler",
    "UpdateConfigResult",
    "CreateWorkoutTypeCommand",
    "CreateWorkoutTypeHandler",
    "UpdateWorkoutTypeCommand",
    "UpdateWorkoutTypeHandler",
    "DeleteWorkoutTypeCommand",
    "DeleteWorkoutTypeHandler",
]
