"""Guarded execution — run an operation and fall back on any failure.

This is the only failure boundary in the package.  Providers raise freely;
every accessor on :class:`~settings_signals.data_source.SettingsDataSource`
funnels its lookup through :func:`execute_safe` so that nothing escapes to
the caller.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from settings_signals.result import LookupResult

T = TypeVar("T")


def execute_safe(operation: Callable[[], T], fallback: T) -> T:
    """Invoke *operation* once and return its result, or *fallback* if it raises.

    Every failure kind is treated the same way.  Nothing is logged or
    re-raised.
    """
    try:
        return operation()
    except Exception:
        return fallback


def unwrap_or(result: LookupResult, fallback: str) -> str:
    """Map a not-ok :class:`LookupResult` to *fallback*."""
    if result.ok and isinstance(result.value, str):
        return result.value
    return fallback
