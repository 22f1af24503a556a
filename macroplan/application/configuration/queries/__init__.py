"""Queries for configuration administration."""

from .get_configurations import GetConfigurationsHandler, GetConfigurationsQuery
from .list_workout_types import ListWorkoutTypesHandler, ListWorkoutTypesQuery

__all__ = [
    "GetConfigurationsHandler",
    "GetConfigurationsQuery",
    "ListWorkoutTypesHandler",
    "ListWorkoutTypesQuery",
]
