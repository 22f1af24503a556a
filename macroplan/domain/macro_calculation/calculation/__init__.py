"""Calculation services for macro targets."""

from .activity_service import ActivityAssessment, ActivityService
from .bmr_service import BMRService
from .energy_service import EnergyService
from .engine import MacroEngine
from .macro_service import MacroService
from .special_day_service import SpecialDayService

__all__ = [
    "ActivityAssessment",
    "ActivityService",
    "BMRService",
    "EnergyService",
    "MacroEngine",
    "MacroService",
    "SpecialDayService",
]
