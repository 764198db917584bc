"""SettingsProvider protocol — read-only access to a namespaced settings store."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from settings_signals.result import LookupResult
    from settings_signals.signals import Namespace


class SettingsProvider(ABC):
    """Abstract base for all settings backends.

    The store is partitioned into the ``global``, ``secure`` and ``system``
    namespaces.  Keys are independent per namespace.  Providers report a
    missing key as ``LookupResult.missing()`` and are free to raise when the
    store itself cannot be read; callers are expected to contain failures.
    """

    @abstractmethod
    def lookup(self, namespace: Namespace, key: str) -> LookupResult:
        """Return the value stored under *key* in *namespace*."""
        ...
