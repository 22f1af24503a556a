"""Cache implementations."""

from .calculation_cache import CalculationCache

__all__ = ["CalculationCache"]
