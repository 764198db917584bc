# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Collector for reading a settings snapshot described by runner input.

Orchestrates the flow:
1. Create provider from configuration
2. Build SettingsDataSource over it
3. Read the requested signals
4. Return structured result
"""

from __future__ import annotations

import logging

from settings_signals.data_source import SettingsDataSource
from settings_signals.exceptions import ProviderConfigError, UnknownSignalError
from settings_signals.providers import SettingsProvider
from settings_signals.signals import SIGNALS, SIGNALS_BY_NAME

from .factory import ProviderFactory
from .schema import ProviderConfigSchema, RunnerInput, RunnerOutput

logger = logging.getLogger(__name__)


class Collector:
    """Collects a snapshot of settings signals.

    Pass a provider to the constructor to override provider creation.

    Example:
        collector = Collector()
        output = collector.collect(input_data)

        # For testing with a fixed store:
        collector = Collector(provider=InMemoryProvider({"global": {"adb_enabled": "1"}}))
    """

    def __init__(self, provider: SettingsProvider | None = None) -> None:
        self._injected_provider = provider

    def collect(self, input_data: RunnerInput) -> RunnerOutput:
        """Collect the requested signals.

        Note:
            This method catches all exceptions and returns them as
            RunnerOutput errors, ensuring valid JSON is always returned.
        """
        try:
            return self._collect_internal(input_data)
        except ProviderConfigError as e:
            return RunnerOutput(success=False, error=str(e), error_type="ProviderConfigError")
        except UnknownSignalError as e:
            return RunnerOutput(success=False, error=str(e), error_type="UnknownSignalError")
        except Exception as e:
            logger.exception("Snapshot collection failed")
            return RunnerOutput(success=False, error=str(e), error_type=type(e).__name__)

    def _collect_internal(self, input_data: RunnerInput) -> RunnerOutput:
        names = self._resolve_signals(input_data.signals)

        provider = self._injected_provider or self._create_provider(input_data.provider)
        owns_provider = self._injected_provider is None

        try:
            source = SettingsDataSource(provider)
            snapshot = {name: source.read(name) for name in names}
            logger.info(
                "Collected %d signals, %d unavailable",
                len(snapshot),
                sum(1 for value in snapshot.values() if not value),
            )
            return RunnerOutput(success=True, snapshot=snapshot)
        finally:
            close = getattr(provider, "close", None)
            if owns_provider and callable(close):
                close()

    def _create_provider(self, config: ProviderConfigSchema) -> SettingsProvider:
        return ProviderFactory.create(config)

    def _resolve_signals(self, requested: list[str] | None) -> list[str]:
        if requested is None:
            return [signal.name for signal in SIGNALS]
        unknown = [name for name in requested if name not in SIGNALS_BY_NAME]
        if unknown:
            raise UnknownSignalError(unknown)
        return list(requested)
