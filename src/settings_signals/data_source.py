"""SettingsDataSource — one accessor per tracked device-configuration signal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from settings_signals._internal.platform import PlatformInfo, api_level_gate
from settings_signals.guard import execute_safe, unwrap_or
from settings_signals.signals import SIGNALS, SIGNALS_BY_NAME, Namespace, Signal
from settings_signals.snapshot import SettingsSnapshot

if TYPE_CHECKING:
    from settings_signals._internal.platform import CapabilityCheck
    from settings_signals.providers.base import SettingsProvider

# Returned for every signal that is absent, unsupported or unreadable.
UNAVAILABLE = ""


class SettingsDataSource:
    """Reads device settings as plain strings, never raising.

    Every accessor performs one guarded lookup against the provider and
    returns ``""`` when the value is missing or the lookup fails for any
    reason.  Nothing is cached; each call reads fresh.

    Parameters:
        provider:     Settings store to read from.
        is_supported: Predicate deciding whether a version-gated signal
                      exists on this device.  Defaults to an API-level
                      comparison against *platform*.
        platform:     Source of the device API level.  Defaults to the
                      provider itself when it implements ``PlatformInfo``.
    """

    def __init__(
        self,
        provider: SettingsProvider,
        *,
        is_supported: CapabilityCheck | None = None,
        platform: PlatformInfo | None = None,
    ) -> None:
        self._provider = provider
        if is_supported is None:
            if platform is None and isinstance(provider, PlatformInfo):
                platform = provider
            is_supported = api_level_gate(platform)
        self._is_supported = is_supported

    # ── Global settings ──────────────────────────────────────

    def adb_enabled(self) -> str:
        return self._read("adb_enabled")

    def development_settings_enabled(self) -> str:
        return self._read("development_settings_enabled")

    def http_proxy(self) -> str:
        return self._read("http_proxy")

    def transition_animation_scale(self) -> str:
        return self._read("transition_animation_scale")

    def window_animation_scale(self) -> str:
        return self._read("window_animation_scale")

    def data_roaming_enabled(self) -> str:
        return self._read("data_roaming_enabled")

    # ── Secure settings ──────────────────────────────────────

    def accessibility_enabled(self) -> str:
        return self._read("accessibility_enabled")

    def default_input_method(self) -> str:
        return self._read("default_input_method")

    def rtt_calling_mode(self) -> str:
        """Real-time text calling mode.  Only exists from Android 9 (API 28)."""
        signal = SIGNALS_BY_NAME["rtt_calling_mode"]
        if not execute_safe(lambda: bool(self._is_supported(signal)), False):
            return UNAVAILABLE
        return self._read(signal.name)

    def touch_exploration_enabled(self) -> str:
        return self._read("touch_exploration_enabled")

    # ── System settings ──────────────────────────────────────

    def alarm_alert_path(self) -> str:
        return self._read("alarm_alert_path")

    def date_format(self) -> str:
        return self._read("date_format")

    def end_button_behaviour(self) -> str:
        return self._read("end_button_behaviour")

    def font_scale(self) -> str:
        return self._read("font_scale")

    def screen_off_timeout(self) -> str:
        return self._read("screen_off_timeout")

    def text_auto_replace_enable(self) -> str:
        return self._read("text_auto_replace_enable")

    def text_auto_punctuate(self) -> str:
        return self._read("text_auto_punctuate")

    def time_12_or_24(self) -> str:
        return self._read("time_12_or_24")

    # ── aggregate access ─────────────────────────────────────

    @staticmethod
    def signals() -> tuple[Signal, ...]:
        """Return every signal this data source exposes, in accessor order."""
        return SIGNALS

    def read(self, name: str) -> str:
        """Read a single signal by accessor name.

        Raises:
            KeyError: If *name* is not a known signal.
        """
        signal = SIGNALS_BY_NAME[name]
        accessor = getattr(self, signal.name)
        value: str = accessor()
        return value

    def snapshot(self) -> SettingsSnapshot:
        """Read every signal once and collect the values into one record."""
        return SettingsSnapshot(**{signal.name: self.read(signal.name) for signal in SIGNALS})

    # ── namespace lookups ────────────────────────────────────

    def _read(self, name: str) -> str:
        signal = SIGNALS_BY_NAME[name]
        lookups = {
            Namespace.GLOBAL: self._global,
            Namespace.SECURE: self._secure,
            Namespace.SYSTEM: self._system,
        }
        return lookups[signal.namespace](signal.key)

    def _global(self, key: str) -> str:
        return self._extract(Namespace.GLOBAL, key)

    def _secure(self, key: str) -> str:
        return self._extract(Namespace.SECURE, key)

    def _system(self, key: str) -> str:
        return self._extract(Namespace.SYSTEM, key)

    def _extract(self, namespace: Namespace, key: str) -> str:
        return execute_safe(
            lambda: unwrap_or(self._provider.lookup(namespace, key), UNAVAILABLE),
            UNAVAILABLE,
        )
