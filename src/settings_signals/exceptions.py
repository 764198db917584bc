"""Custom exceptions for the settings_signals package."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from settings_signals.signals import Namespace


class SignalError(Exception):
    """Base exception for all settings-signal errors."""


class ProviderError(SignalError):
    """Raised by a provider when a lookup cannot be performed."""

    def __init__(self, namespace: Namespace | str, key: str, detail: str = "") -> None:
        self.namespace = namespace
        self.key = key
        msg = f"Lookup of '{namespace}/{key}' failed"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class ProviderConfigError(SignalError):
    """Raised when a provider is misconfigured."""

    def __init__(self, provider_type: str, message: str) -> None:
        self.provider_type = provider_type
        super().__init__(f"Provider '{provider_type}' misconfigured: {message}")


class UnknownSignalError(SignalError):
    """Raised when a signal name does not match any tracked signal."""

    def __init__(self, names: list[str]) -> None:
        self.names = names
        super().__init__(f"Unknown signal(s): {', '.join(names)}")
