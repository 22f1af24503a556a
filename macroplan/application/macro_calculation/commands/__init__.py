"""Commands for macro calculation."""

from .calculate_macros import (
    CalculateMacrosCommand,
    CalculateMacrosHandler,
    CalculateMacrosResult,
)
from .delete_result import DeleteResultCommand, DeleteResultHandler

__all__ = [
    "CalculateMacrosCommand",
    "CalculateMacrosHandler",
    "CalculateMacrosResult",
    "DeleteResultCommand",
    "DeleteResultHandler",
]
