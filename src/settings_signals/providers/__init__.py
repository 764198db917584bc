"""Settings store backends."""

from settings_signals.providers.adb import AdbProvider
from settings_signals.providers.base import SettingsProvider
from settings_signals.providers.memory import InMemoryProvider
from settings_signals.providers.sqlite import SQLiteProvider

__all__ = ["AdbProvider", "InMemoryProvider", "SQLiteProvider", "SettingsProvider"]
