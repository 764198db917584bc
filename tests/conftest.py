"""Shared test fixtures and provider doubles."""

import pytest

from settings_signals import LookupResult, Namespace, SettingsDataSource
from settings_signals.exceptions import ProviderError
from settings_signals.providers import InMemoryProvider, SettingsProvider


class RecordingProvider(SettingsProvider):
    """Returns ``"<namespace>/<key>"`` for every key and records each query."""

    def __init__(self, api_level: int = 34) -> None:
        self.queries: list[tuple[Namespace, str]] = []
        self.level_queries = 0
        self._api_level = api_level

    def lookup(self, namespace, key):
        self.queries.append((namespace, key))
        return LookupResult.found(f"{namespace.value}/{key}")

    def api_level(self) -> int:
        self.level_queries += 1
        return self._api_level


class RaisingProvider(SettingsProvider):
    """Raises *exc* on every lookup."""

    def __init__(self, exc: BaseException, api_level: int = 34) -> None:
        self._exc = exc
        self._api_level = api_level
        self.calls = 0

    def lookup(self, namespace, key):
        self.calls += 1
        raise self._exc

    def api_level(self) -> int:
        return self._api_level


class NoneProvider(SettingsProvider):
    """Misbehaves by returning ``None`` instead of a LookupResult."""

    def lookup(self, namespace, key):
        return None

    def api_level(self) -> int:
        return 34


FAILURES = [
    ProviderError(Namespace.SECURE, "default_input_method", "permission denied"),
    PermissionError("Permission denial: reading settings requires READ_SETTINGS"),
    KeyError("unsupported"),
    RuntimeError("provider died"),
    TimeoutError("adb timed out"),
    ValueError("bad value"),
]


@pytest.fixture
def provider():
    return InMemoryProvider(
        {
            "global": {"adb_enabled": "1", "http_proxy": "10.0.0.1:8080"},
            "secure": {"default_input_method": "com.android.inputmethod.latin/.LatinIME"},
            "system": {"font_scale": "1.15", "screen_off_timeout": "30000"},
        },
        api_level=34,
    )


@pytest.fixture
def source(provider):
    return SettingsDataSource(provider)


@pytest.fixture
def recording():
    return RecordingProvider()


@pytest.fixture(params=FAILURES, ids=lambda e: type(e).__name__)
def failure(request):
    return request.param


@pytest.fixture
def raising_provider(failure):
    return RaisingProvider(failure)


@pytest.fixture
def none_provider():
    return NoneProvider()
