# -*- coding: utf-8 -*-
"""
sqlite

SQLite-backed configuration store.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
import sqlite3

from starlette.concurrency import run_in_threadpool

from ..exceptions import StoreReadFailure, StoreWriteFailure
from ..language import LanguageConfiguration
from .base import ConfigStore

logger = logging.getLogger(__name__)


class SQLiteConfigStore(ConfigStore):
    """Persist language configurations in a single SQLite table."""

    name = "sqlite"

    def __init__(
        self,
        path: str | None = None,
        *,
        table_name: str = "content_language_settings",
    ) -> None:
        """Open the database and prepare the schema."""

        super().__init__()
        self._path = path or ":memory:"
        self._table = self._validate_table(table_name)
        self._connection: sqlite3.Connection | None = None
        self._connect()

    @property
    def path(self) -> str:
        """Return the SQLite database path used for persistence."""

        return self._path

    async def _load_all(self) -> dict[str, LanguageConfiguration]:
        rows = await run_in_threadpool(self._read_rows)
        return {
            key: LanguageConfiguration(langcode=langcode, language_show=bool(show))
            for key, langcode, show in rows
        }

    async def _commit(self, changes: dict[str, LanguageConfiguration]) -> None:
        rows = [
            (key, config.langcode, int(config.language_show))
            for key, config in changes.items()
        ]
        await run_in_threadpool(self._write_rows, rows)

    async def close(self) -> None:
        """Close the underlying SQLite connection."""

        await run_in_threadpool(self._close)

    def _read_rows(self) -> list[tuple[str, str, int]]:
        with self._lock:
            assert self._connection is not None
            try:
                cursor = self._connection.execute(
                    f"SELECT key, langcode, language_show FROM {self._table}"
                )
                rows = cursor.fetchall()
                cursor.close()
            except sqlite3.Error as exc:
                logger.exception("Failed to read configuration from %s", self._path)
                raise StoreReadFailure(f"Unable to read configuration store: {exc}") from exc
        return rows

    def _write_rows(self, rows: list[tuple[str, str, int]]) -> None:
        with self._lock:
            assert self._connection is not None
            try:
                with self._connection:
                    self._connection.executemany(
                        f"""
                        INSERT INTO {self._table}(key, langcode, language_show)
                        VALUES(?, ?, ?)
                        ON CONFLICT(key) DO UPDATE SET
                            langcode=excluded.langcode,
                            language_show=excluded.language_show
                        """.strip(),
                        rows,
                    )
            except sqlite3.Error as exc:
                raise StoreWriteFailure(f"Unable to write configuration store: {exc}") from exc

    def _close(self) -> None:
        with self._lock:
            if self._connection is not None:
                self._connection.close()
                self._connection = None

    def _connect(self) -> None:
        with self._lock:
            if self._connection is not None:
                self._connection.close()
            self._connection = sqlite3.connect(self._path, check_same_thread=False)
            self._connection.execute(
                f"""
                CREATE TABLE IF NOT EXISTS {self._table} (
                    key TEXT PRIMARY KEY,
                    langcode TEXT NOT NULL,
                    language_show INTEGER NOT NULL DEFAULT 0
                )
                """.strip()
            )
            self._connection.commit()

    def _validate_table(self, name: str) -> str:
        """Ensure ``name`` is safe for use as an SQLite identifier."""

        if not name or not all(ch.isalnum() or ch == "_" for ch in name):
            raise ValueError("Table name must contain only alphanumeric characters or underscores")
        return name


__all__ = ["SQLiteConfigStore"]


# The End
