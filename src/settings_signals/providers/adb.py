"""AdbProvider — reads a connected device's settings through ``adb shell``."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess

from settings_signals.exceptions import ProviderError
from settings_signals.providers.base import SettingsProvider
from settings_signals.result import LookupResult
from settings_signals.signals import Namespace

logger = logging.getLogger(__name__)

# Printed by the ``settings`` shell tool for keys that are not set.
_NULL_MARKER = "null"
_SDK_PROPERTY = "ro.build.version.sdk"


class AdbProvider(SettingsProvider):
    """Settings provider backed by the ``settings`` tool on a device.

    Each lookup is one blocking ``adb shell settings get <namespace> <key>``
    round trip.

    Parameters:
        serial:   Device serial.  Falls back to the ANDROID_SERIAL env var;
                  when neither is set adb picks the only connected device.
        adb_path: Path to the adb binary.  Falls back to the ADB_PATH env var,
                  then to ``adb`` on PATH.
        timeout:  Seconds to wait for each adb invocation.
    """

    def __init__(
        self,
        serial: str | None = None,
        adb_path: str | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._serial = serial or os.getenv("ANDROID_SERIAL", "")
        self._adb_path = adb_path or os.getenv("ADB_PATH", "") or shutil.which("adb") or "adb"
        self._timeout = timeout

    @property
    def serial(self) -> str:
        return self._serial

    def lookup(self, namespace: Namespace, key: str) -> LookupResult:
        ns = Namespace(namespace)
        output = self._run(ns.value, key, "settings", "get", ns.value, key)
        if not output or output == _NULL_MARKER:
            return LookupResult.missing()
        return LookupResult.found(output)

    def api_level(self) -> int:
        output = self._run("getprop", _SDK_PROPERTY, "getprop", _SDK_PROPERTY)
        try:
            return int(output)
        except ValueError as exc:
            raise ProviderError("getprop", _SDK_PROPERTY, f"not an API level: {output!r}") from exc

    def _command(self, *args: str) -> list[str]:
        command = [self._adb_path]
        if self._serial:
            command += ["-s", self._serial]
        command += ["shell", *args]
        return command

    def _run(self, scope: str, key: str, *args: str) -> str:
        command = self._command(*args)
        logger.debug("Running %s", " ".join(command))
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self._timeout,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            logger.debug("adb invocation failed for %s/%s: %s", scope, key, exc)
            raise ProviderError(scope, key, str(exc)) from exc

        if completed.returncode != 0:
            detail = completed.stderr.strip() or f"adb exited with status {completed.returncode}"
            logger.debug("adb returned %d for %s/%s: %s", completed.returncode, scope, key, detail)
            raise ProviderError(scope, key, detail)
        # The settings tool only appends a line terminator to the value
        return completed.stdout.removesuffix("\n").removesuffix("\r")
