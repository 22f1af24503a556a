"""Ports for macro calculation domain."""

from .result_recorder import IResultRecorder
from .snapshots import ICalculationSnapshots

__all__ = ["IResultRecorder", "ICalculationSnapshots"]
