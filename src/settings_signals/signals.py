"""Signal catalogue — every tracked setting and where it lives."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

# Android 9 (Pie)
API_LEVEL_P = 28


class Namespace(StrEnum):
    """The three partitions of the Android settings store."""

    GLOBAL = "global"
    SECURE = "secure"
    SYSTEM = "system"


@dataclass(frozen=True)
class Signal:
    """A single tracked setting.

    Attributes:
        name:          Accessor name on ``SettingsDataSource`` and field name
                       on ``SettingsSnapshot``.
        namespace:     Settings partition the key belongs to.
        key:           Provider key, as defined by ``android.provider.Settings``.
        min_api_level: Lowest API level on which the key exists, or ``None``
                       when the key is available everywhere.
    """

    name: str
    namespace: Namespace
    key: str
    min_api_level: int | None = None


SIGNALS: tuple[Signal, ...] = (
    # Global
    Signal("adb_enabled", Namespace.GLOBAL, "adb_enabled"),
    Signal("development_settings_enabled", Namespace.GLOBAL, "development_settings_enabled"),
    Signal("http_proxy", Namespace.GLOBAL, "http_proxy"),
    Signal("transition_animation_scale", Namespace.GLOBAL, "transition_animation_scale"),
    Signal("window_animation_scale", Namespace.GLOBAL, "window_animation_scale"),
    Signal("data_roaming_enabled", Namespace.GLOBAL, "data_roaming"),
    # Secure
    Signal("accessibility_enabled", Namespace.SECURE, "accessibility_enabled"),
    Signal("default_input_method", Namespace.SECURE, "default_input_method"),
    Signal("rtt_calling_mode", Namespace.SECURE, "rtt_calling_mode", min_api_level=API_LEVEL_P),
    Signal("touch_exploration_enabled", Namespace.SECURE, "touch_exploration_enabled"),
    # System
    Signal("alarm_alert_path", Namespace.SYSTEM, "alarm_alert"),
    Signal("date_format", Namespace.SYSTEM, "date_format"),
    Signal("end_button_behaviour", Namespace.SYSTEM, "end_button_behavior"),
    Signal("font_scale", Namespace.SYSTEM, "font_scale"),
    Signal("screen_off_timeout", Namespace.SYSTEM, "screen_off_timeout"),
    Signal("text_auto_replace_enable", Namespace.SYSTEM, "auto_replace"),
    Signal("text_auto_punctuate", Namespace.SYSTEM, "auto_punctuate"),
    Signal("time_12_or_24", Namespace.SYSTEM, "time_12_24"),
)

SIGNALS_BY_NAME: dict[str, Signal] = {signal.name: signal for signal in SIGNALS}
