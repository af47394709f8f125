"""Shared value types for ECS."""

from .enums import HeaterAction, WindowAction

__all__ = ["HeaterAction", "WindowAction"]
