"""Capability contracts for the devices the regulator drives.

Drivers live outside this package. Anything exposing the methods below can be
handed to :class:`~ecs.core.regulator.Regulator`, hardware driver or test
double alike.
"""

from __future__ import annotations

from typing import Protocol


class TemperatureReadError(Exception):
    """Raised when a temperature reading cannot be obtained or is unusable."""


class TemperatureSensor(Protocol):
    def get_temp(self) -> int:
        """Return the current temperature reading.

        Implementations should raise :class:`TemperatureReadError` rather than
        return a sentinel when the read fails.
        """
        ...

    def run_self_test(self) -> bool: ...


class Heater(Protocol):
    def turn_on(self) -> None: ...

    def turn_off(self) -> None: ...

    def run_self_test(self) -> bool: ...


class Window(Protocol):
    def open(self) -> None: ...

    def close(self) -> None: ...


__all__ = ["Heater", "TemperatureReadError", "TemperatureSensor", "Window"]
