"""Entities for macro calculation domain."""

from .calculation_record import CalculationRecord

__all__ = ["CalculationRecord"]
