"""SQLiteProvider — reads settings from a pulled ``settings.db`` file."""

from __future__ import annotations

import logging
import sqlite3
import threading
from pathlib import Path

from settings_signals.exceptions import ProviderError
from settings_signals.providers.base import SettingsProvider
from settings_signals.result import LookupResult
from settings_signals.signals import Namespace

logger = logging.getLogger(__name__)

_TABLE_EXISTS = "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ?"


class SQLiteProvider(SettingsProvider):
    """Read-only provider over the legacy settings database layout.

    Each namespace is a table (``global``, ``secure``, ``system``) with
    ``name`` and ``value`` columns.  A missing table, missing row or NULL
    value all read as missing.

    Parameters:
        db_path:   Path to the SQLite file.  Opened read-only on first use.
        api_level: API level of the device the database was pulled from.
                   ``api_level()`` raises when this is not given.
    """

    def __init__(self, db_path: str | Path, api_level: int | None = None) -> None:
        self._db_path = Path(db_path)
        self._api_level = api_level
        self._db: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    def _connect(self) -> sqlite3.Connection:
        with self._lock:
            if self._db is None:
                uri = f"{self._db_path.resolve().as_uri()}?mode=ro"
                logger.debug("Opening settings database %s", uri)
                self._db = sqlite3.connect(uri, uri=True, check_same_thread=False)
            return self._db

    def close(self) -> None:
        with self._lock:
            if self._db:
                self._db.close()
                self._db = None

    # ── SettingsProvider protocol ────────────────────────────

    def lookup(self, namespace: Namespace, key: str) -> LookupResult:
        ns = Namespace(namespace)
        try:
            db = self._connect()
            if db.execute(_TABLE_EXISTS, (ns.value,)).fetchone() is None:
                return LookupResult.missing()
            # Table name comes from the Namespace enum, never from input.
            row = db.execute(f'SELECT value FROM "{ns.value}" WHERE name = ?', (key,)).fetchone()
        except sqlite3.Error as exc:
            logger.debug("Query for %s/%s failed: %s", ns, key, exc)
            raise ProviderError(ns, key, str(exc)) from exc

        if row is None or row[0] is None:
            return LookupResult.missing()
        return LookupResult.found(str(row[0]))

    def api_level(self) -> int:
        if self._api_level is None:
            raise ProviderError("platform", "api_level", "no API level configured")
        return self._api_level
