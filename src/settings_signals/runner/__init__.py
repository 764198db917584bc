# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Runner submodule for collecting settings snapshots as JSON.

Usage:
    python -m settings_signals.runner < input.json > output.json

Exports:
    Collector: Reads the requested signals from a configured provider
    ProviderFactory: Creates providers from configuration
    RunnerInput: Input schema
    RunnerOutput: Output schema
"""

from .collector import Collector
from .factory import ProviderFactory
from .schema import ProviderConfigSchema, RunnerInput, RunnerOutput

__all__ = [
    "Collector",
    "ProviderConfigSchema",
    "ProviderFactory",
    "RunnerInput",
    "RunnerOutput",
]
