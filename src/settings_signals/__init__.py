"""settings_signals — best-effort reader for device settings signals.

Every signal is one setting in the ``global``, ``secure`` or ``system``
namespace of the device settings store.  Accessors always return a string;
anything missing or unreadable comes back as ``""``.
"""

from settings_signals.data_source import SettingsDataSource
from settings_signals.exceptions import (
    ProviderConfigError,
    ProviderError,
    SignalError,
    UnknownSignalError,
)
from settings_signals.guard import execute_safe, unwrap_or
from settings_signals.result import LookupResult
from settings_signals.signals import SIGNALS, Namespace, Signal
from settings_signals.snapshot import SettingsSnapshot

__all__ = [
    "SIGNALS",
    "LookupResult",
    "Namespace",
    "ProviderConfigError",
    "ProviderError",
    "SettingsDataSource",
    "SettingsSnapshot",
    "Signal",
    "SignalError",
    "UnknownSignalError",
    "execute_safe",
    "unwrap_or",
]
