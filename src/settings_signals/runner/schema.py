# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for runner input/output.

These Pydantic models define the JSON contract of
``python -m settings_signals.runner``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ProviderConfigSchema(BaseModel):
    """Settings provider configuration.

    Attributes:
        type: Provider type ("adb", "sqlite" or "memory")
        serial: Device serial (adb)
        adb_path: Path to the adb binary (adb)
        timeout: Seconds to wait per adb invocation (adb)
        path: Path to a settings database file (sqlite)
        api_level: Device API level (sqlite, memory)
        values: Initial ``{namespace: {key: value}}`` contents (memory)
    """

    type: str = "adb"
    serial: str = ""
    adb_path: str = ""
    timeout: float = Field(default=10.0, gt=0)
    path: str = ""
    api_level: int | None = None
    values: dict[str, dict[str, str | None]] = Field(default_factory=dict)


class RunnerInput(BaseModel):
    """Complete input read from stdin.

    Attributes:
        provider: Which settings store to read from
        signals: Signal names to read.  ``None`` reads every signal.
    """

    provider: ProviderConfigSchema = Field(default_factory=ProviderConfigSchema)
    signals: list[str] | None = None


class RunnerOutput(BaseModel):
    """Complete output written to stdout.

    The runner always outputs valid JSON matching this schema, even on
    errors.  Unreadable signals are not errors; they appear as ``""``.

    Attributes:
        success: Whether the snapshot was collected
        snapshot: Signal name to value (on success)
        error: Error message (on failure)
        error_type: Error class name (on failure)
    """

    success: bool
    snapshot: dict[str, str] | None = None
    error: str = ""
    error_type: str = ""
