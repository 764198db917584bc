# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Provider factory for creating settings providers from configuration.

Uses the Registry pattern to map type strings to builder functions,
allowing extensibility without modifying factory code.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from settings_signals.exceptions import ProviderConfigError
from settings_signals.providers import (
    AdbProvider,
    InMemoryProvider,
    SettingsProvider,
    SQLiteProvider,
)
from settings_signals.providers.memory import DEFAULT_API_LEVEL

from .schema import ProviderConfigSchema

ProviderBuilder = Callable[[ProviderConfigSchema], SettingsProvider]


def _build_adb(config: ProviderConfigSchema) -> SettingsProvider:
    return AdbProvider(
        serial=config.serial or None,
        adb_path=config.adb_path or None,
        timeout=config.timeout,
    )


def _build_sqlite(config: ProviderConfigSchema) -> SettingsProvider:
    if not config.path:
        raise ProviderConfigError("sqlite", "requires 'path' configuration")
    return SQLiteProvider(config.path, api_level=config.api_level)


def _build_memory(config: ProviderConfigSchema) -> SettingsProvider:
    api_level = DEFAULT_API_LEVEL if config.api_level is None else config.api_level
    try:
        return InMemoryProvider(config.values, api_level=api_level)
    except ValueError as e:
        raise ProviderConfigError("memory", str(e)) from e


class ProviderFactory:
    """Creates settings providers from configuration.

    Provider types are registered at class level and can be extended via
    the `register` class method.

    Example:
        provider = ProviderFactory.create(ProviderConfigSchema(type="adb", serial="emulator-5554"))
    """

    _registry: ClassVar[dict[str, ProviderBuilder]] = {
        "adb": _build_adb,
        "sqlite": _build_sqlite,
        "memory": _build_memory,
    }

    @classmethod
    def register(cls, type_name: str, builder: ProviderBuilder) -> None:
        """Register a custom provider type.

        Example:
            ProviderFactory.register("fixture", lambda config: MyProvider(config.path))
        """
        cls._registry[type_name] = builder

    @classmethod
    def registered_types(cls) -> list[str]:
        """Return list of registered provider type names."""
        return list(cls._registry.keys())

    @classmethod
    def create(cls, config: ProviderConfigSchema) -> SettingsProvider:
        """Create a provider from configuration.

        Raises:
            ProviderConfigError: If the type is unknown or the configuration
                is invalid
        """
        builder = cls._registry.get(config.type)
        if builder is None:
            available = ", ".join(sorted(cls.registered_types()))
            raise ProviderConfigError(
                config.type, f"unknown provider type. Available types: {available}"
            )
        return builder(config)
