"""SettingsSnapshot — one flat record holding every signal."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SettingsSnapshot(BaseModel):
    """Every tracked signal read once.  ``""`` means absent or unreadable.

    Field names match :data:`settings_signals.signals.SIGNALS` and the
    accessors on ``SettingsDataSource``.
    """

    model_config = ConfigDict(frozen=True)

    # Global
    adb_enabled: str = ""
    development_settings_enabled: str = ""
    http_proxy: str = ""
    transition_animation_scale: str = ""
    window_animation_scale: str = ""
    data_roaming_enabled: str = ""

    # Secure
    accessibility_enabled: str = ""
    default_input_method: str = ""
    rtt_calling_mode: str = ""
    touch_exploration_enabled: str = ""

    # System
    alarm_alert_path: str = ""
    date_format: str = ""
    end_button_behaviour: str = ""
    font_scale: str = ""
    screen_off_timeout: str = ""
    text_auto_replace_enable: str = ""
    text_auto_punctuate: str = ""
    time_12_or_24: str = ""
