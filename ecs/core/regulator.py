"""Threshold regulator driving a heater and a window from one temperature sensor."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any

from ecs.config import Settings, get_settings
from ecs.core.devices import Heater, TemperatureReadError, TemperatureSensor, Window
from ecs.models.enums import HeaterAction, WindowAction

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class RegulatorError(Exception):
    """Base exception for all regulator errors."""


class InvalidThresholdError(RegulatorError, ValueError):
    """Raised when a threshold change would break ``lower <= upper``."""


# ---------------------------------------------------------------------------
# Data models
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RegulationResult:
    """Commands chosen for a single temperature reading."""

    temperature: float
    heater: HeaterAction
    window: WindowAction
    lower_threshold: int
    upper_threshold: int


@dataclass(frozen=True, slots=True)
class SelfTestReport:
    heater_ok: bool
    sensor_ok: bool

    @property
    def passed(self) -> bool:
        return self.heater_ok and self.sensor_ok


def _check_threshold(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidThresholdError(f"{name} must be an integer, got {value!r}")
    return value


def _check_order(lower: int, upper: int) -> None:
    if lower > upper:
        raise InvalidThresholdError(
            f"lower threshold ({lower}) must not exceed upper threshold ({upper})"
        )


# ---------------------------------------------------------------------------
# Regulator
# ---------------------------------------------------------------------------


class Regulator:
    """Keep a room between two inclusive temperature thresholds.

    Below the lower threshold the heater runs; above the upper threshold the
    window opens. Anywhere in between (bounds included) the heater is off and
    the window closed. Every call to :meth:`regulate` issues exactly one heater
    command and one window command, whether or not the state changed.

    The sensor, heater and window are borrowed; the regulator never closes or
    releases them.
    """

    def __init__(
        self,
        sensor: TemperatureSensor,
        heater: Heater,
        window: Window,
        lower_threshold: int,
        upper_threshold: int,
    ) -> None:
        lower = _check_threshold("lower threshold", lower_threshold)
        upper = _check_threshold("upper threshold", upper_threshold)
        _check_order(lower, upper)
        self._sensor = sensor
        self._heater = heater
        self._window = window
        self._lower = lower
        self._upper = upper

    @classmethod
    def from_settings(
        cls,
        sensor: TemperatureSensor,
        heater: Heater,
        window: Window,
        settings: Settings | None = None,
    ) -> Regulator:
        settings = settings or get_settings()
        return cls(sensor, heater, window, settings.lower_threshold, settings.upper_threshold)

    # ------------------------------------------------------------------
    # Thresholds
    # ------------------------------------------------------------------
    @property
    def lower_threshold(self) -> int:
        return self._lower

    @lower_threshold.setter
    def lower_threshold(self, value: int) -> None:
        value = _check_threshold("lower threshold", value)
        if value > self._upper:
            logger.warning(
                "Rejected lower threshold %s above upper threshold %s", value, self._upper
            )
            raise InvalidThresholdError(
                f"lower threshold ({value}) must not exceed upper threshold ({self._upper})"
            )
        logger.info("Lower threshold changed from %s to %s", self._lower, value)
        self._lower = value

    @property
    def upper_threshold(self) -> int:
        return self._upper

    @upper_threshold.setter
    def upper_threshold(self, value: int) -> None:
        value = _check_threshold("upper threshold", value)
        if value < self._lower:
            logger.warning(
                "Rejected upper threshold %s below lower threshold %s", value, self._lower
            )
            raise InvalidThresholdError(
                f"upper threshold ({value}) must not be below lower threshold ({self._lower})"
            )
        logger.info("Upper threshold changed from %s to %s", self._upper, value)
        self._upper = value

    def set_thresholds(self, lower: int, upper: int) -> None:
        """Replace both thresholds in one step, or neither if the pair is invalid."""

        lower = _check_threshold("lower threshold", lower)
        upper = _check_threshold("upper threshold", upper)
        try:
            _check_order(lower, upper)
        except InvalidThresholdError:
            logger.warning("Rejected threshold pair (%s, %s)", lower, upper)
            raise
        logger.info(
            "Thresholds changed from (%s, %s) to (%s, %s)", self._lower, self._upper, lower, upper
        )
        self._lower = lower
        self._upper = upper

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------
    def self_test_report(self) -> SelfTestReport:
        # Both devices are queried even when the first one fails.
        heater_ok = bool(self._heater.run_self_test())
        sensor_ok = bool(self._sensor.run_self_test())
        report = SelfTestReport(heater_ok=heater_ok, sensor_ok=sensor_ok)
        if not report.passed:
            failed = [
                name for name, ok in (("heater", heater_ok), ("sensor", sensor_ok)) if not ok
            ]
            logger.warning("Self-test failed", extra={"failed_devices": failed})
        return report

    def run_self_test(self) -> bool:
        """Return True only when both the heater and the sensor pass their self-tests."""

        return self.self_test_report().passed

    # ------------------------------------------------------------------
    # Regulation
    # ------------------------------------------------------------------
    def decide(self, temperature: float) -> RegulationResult:
        """Choose heater and window commands for *temperature* without issuing them."""

        heater = HeaterAction.on if temperature < self._lower else HeaterAction.off
        window = WindowAction.open if temperature > self._upper else WindowAction.closed
        return RegulationResult(
            temperature=temperature,
            heater=heater,
            window=window,
            lower_threshold=self._lower,
            upper_threshold=self._upper,
        )

    def regulate(self) -> RegulationResult:
        """Read the sensor once and drive the heater and window accordingly."""

        temperature = self._read_temperature()
        result = self.decide(temperature)

        if result.heater is HeaterAction.on:
            self._heater.turn_on()
        else:
            self._heater.turn_off()

        if result.window is WindowAction.open:
            self._window.open()
        else:
            self._window.close()

        logger.debug(
            "Regulated at %s (band %s..%s): heater %s, window %s",
            temperature,
            result.lower_threshold,
            result.upper_threshold,
            result.heater,
            result.window,
        )
        return result

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _read_temperature(self) -> float:
        raw = self._sensor.get_temp()
        if (
            isinstance(raw, bool)
            or not isinstance(raw, (int, float))
            or (isinstance(raw, float) and math.isnan(raw))
        ):
            raise TemperatureReadError(f"sensor returned an invalid reading: {raw!r}")
        return raw


__all__ = [
    "InvalidThresholdError",
    "RegulationResult",
    "Regulator",
    "RegulatorError",
    "SelfTestReport",
]
