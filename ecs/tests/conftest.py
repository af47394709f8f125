from __future__ import annotations

from collections.abc import Generator

import pytest

from ecs.config import get_settings
from ecs.core.regulator import Regulator
from ecs.tests.fakes import FakeHeater, FakeSensor, FakeWindow

LOWER = 5
UPPER = 25


@pytest.fixture
def sensor() -> FakeSensor:
    return FakeSensor()


@pytest.fixture
def heater() -> FakeHeater:
    return FakeHeater()


@pytest.fixture
def window() -> FakeWindow:
    return FakeWindow()


@pytest.fixture
def regulator(sensor: FakeSensor, heater: FakeHeater, window: FakeWindow) -> Regulator:
    return Regulator(sensor, heater, window, LOWER, UPPER)


@pytest.fixture
def clear_settings_cache() -> Generator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
