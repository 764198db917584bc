"""InMemoryProvider — dict-backed settings for development and testing."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Mapping

from settings_signals.providers.base import SettingsProvider
from settings_signals.result import LookupResult
from settings_signals.signals import Namespace

DEFAULT_API_LEVEL = 34


class InMemoryProvider(SettingsProvider):
    """In-memory settings store.  A ``None`` value behaves like an unset key.

    Parameters:
        values:    Initial contents, ``{namespace: {key: value}}``.  Namespaces
                   may be given as :class:`Namespace` members or plain names.
        api_level: API level reported through ``PlatformInfo``.
    """

    def __init__(
        self,
        values: Mapping[Namespace | str, Mapping[str, str | None]] | None = None,
        api_level: int = DEFAULT_API_LEVEL,
    ) -> None:
        self._data: dict[Namespace, dict[str, str | None]] = defaultdict(dict)
        self._api_level = api_level
        for namespace, entries in (values or {}).items():
            self._data[Namespace(namespace)].update(entries)

    def lookup(self, namespace: Namespace, key: str) -> LookupResult:
        value = self._data[Namespace(namespace)].get(key)
        if value is None:
            return LookupResult.missing()
        return LookupResult.found(value)

    def set(self, namespace: Namespace | str, key: str, value: str | None) -> None:
        self._data[Namespace(namespace)][key] = value

    def delete(self, namespace: Namespace | str, key: str) -> None:
        """Remove a key.  No-op if the key does not exist."""
        self._data[Namespace(namespace)].pop(key, None)

    def api_level(self) -> int:
        return self._api_level
