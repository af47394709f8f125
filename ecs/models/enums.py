"""Domain enums for ECS actuator commands."""

from enum import StrEnum


class HeaterAction(StrEnum):
    on = "on"
    off = "off"


class WindowAction(StrEnum):
    open = "open"
    closed = "closed"
