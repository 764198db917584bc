"""
settings_signals — Hello World

Every accessor returns a string.  Anything missing, unsupported or
unreadable comes back as "".
"""

from settings_signals import SettingsDataSource
from settings_signals.providers import AdbProvider, InMemoryProvider

# ──────────────────────────────────────
#  1. A fixed store (no device needed)
# ──────────────────────────────────────


def from_memory() -> None:
    provider = InMemoryProvider(
        {
            "global": {"adb_enabled": "1", "window_animation_scale": "0.5"},
            "secure": {"rtt_calling_mode": "0"},
            "system": {"time_12_24": "24"},
        },
        api_level=27,
    )
    source = SettingsDataSource(provider)

    print("adb_enabled        =", repr(source.adb_enabled()))
    print("window_anim_scale  =", repr(source.window_animation_scale()))
    # API 27 predates RTT calling mode, so the key is never read
    print("rtt_calling_mode   =", repr(source.rtt_calling_mode()))
    print("font_scale (unset) =", repr(source.font_scale()))


# ──────────────────────────────────────
#  2. A connected device over adb
# ──────────────────────────────────────


def from_device() -> None:
    source = SettingsDataSource(AdbProvider())
    # With no device attached every signal is simply ""
    for name, value in source.snapshot().model_dump().items():
        print(f"{name:30} {value!r}")


if __name__ == "__main__":
    from_memory()
    print()
    from_device()
