"""Platform abstraction for capability-gated signals."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from settings_signals.guard import execute_safe

if TYPE_CHECKING:
    from settings_signals.signals import Signal

# Answers whether a signal's key exists on the current device.
CapabilityCheck = Callable[["Signal"], bool]


@runtime_checkable
class PlatformInfo(Protocol):
    """Protocol for querying the host API level.  Inject a fake in tests."""

    def api_level(self) -> int: ...


class FixedPlatform:
    """Platform reporting a constant API level."""

    def __init__(self, level: int) -> None:
        self._level = level

    def api_level(self) -> int:
        return self._level


def api_level_gate(platform: PlatformInfo | None) -> CapabilityCheck:
    """Build a capability check comparing *platform*'s API level to each signal.

    Ungated signals are always supported.  A gated signal is unsupported when
    no platform is known or when the API level cannot be read.
    """

    def is_supported(signal: Signal) -> bool:
        if signal.min_api_level is None:
            return True
        if platform is None:
            return False
        level = execute_safe(platform.api_level, -1)
        return level >= signal.min_api_level

    return is_supported
