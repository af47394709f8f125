"""Core regulation logic for ECS."""

from __future__ import annotations

from .devices import Heater, TemperatureReadError, TemperatureSensor, Window
from .regulator import (
    InvalidThresholdError,
    RegulationResult,
    Regulator,
    RegulatorError,
    SelfTestReport,
)

__all__ = [
    "Heater",
    "InvalidThresholdError",
    "RegulationResult",
    "Regulator",
    "RegulatorError",
    "SelfTestReport",
    "TemperatureReadError",
    "TemperatureSensor",
    "Window",
]
