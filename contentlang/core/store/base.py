# -*- coding: utf-8 -*-
"""
base

Abstract configuration store with batched writes.

Writers stage changes in a :class:`ConfigBatch` obtained from
:meth:`ConfigStore.batch`. ``save`` hands the batch to the backend in one
call and promotes it to the committed snapshot once the backend reports
success. Batches are private to their writer, so a failed batch never
leaks into another writer's commit and readers only see committed data.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from threading import RLock
from typing import Any, Iterator, Mapping

from ..exceptions import StoreWriteFailure
from ..language import LanguageConfiguration

logger = logging.getLogger(__name__)


class ConfigBatch:
    """Changes staged by a single writer until :meth:`save`."""

    def __init__(self, store: "ConfigStore") -> None:
        self._store = store
        self._changes: dict[str, LanguageConfiguration] = {}

    @property
    def store(self) -> "ConfigStore":
        return self._store

    @property
    def pending(self) -> dict[str, LanguageConfiguration]:
        """Return a copy of the staged changes."""

        return dict(self._changes)

    def set(
        self,
        key: str,
        value: LanguageConfiguration | Mapping[str, Any],
    ) -> None:
        """Stage ``value`` under ``key`` until :meth:`save`."""

        self._changes[key] = LanguageConfiguration.from_value(value)

    def discard(self) -> None:
        """Drop the staged changes."""

        if self._changes:
            logger.debug("Discarding %d staged change(s) for %s store", len(self._changes), self._store.name)
        self._changes.clear()

    async def save(self) -> int:
        """Commit the staged changes and return how many keys were written."""

        changes, self._changes = self._changes, {}
        return await self._store.save_many(changes)

    def __len__(self) -> int:
        return len(self._changes)


class ConfigStore(ABC):
    """Key/value store mapping settings keys to language configurations."""

    name: str = "base"

    def __init__(self) -> None:
        """Initialise the committed snapshot."""

        self._lock = RLock()
        self._data: dict[str, LanguageConfiguration] = {}

    def get(self, key: str, default: Any = None) -> LanguageConfiguration | Any:
        """Return the committed value for ``key``."""

        with self._lock:
            return self._data.get(key, default)

    def batch(self) -> ConfigBatch:
        """Return an empty batch of writes bound to this store."""

        return ConfigBatch(self)

    def committed(self) -> dict[str, LanguageConfiguration]:
        """Return a copy of the durable snapshot."""

        with self._lock:
            return dict(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self.committed())

    async def load(self) -> None:
        """Refresh the committed snapshot from the backend."""

        records = await self._load_all()
        with self._lock:
            self._data = dict(records)

    async def save_many(
        self,
        changes: Mapping[str, LanguageConfiguration | Mapping[str, Any]],
    ) -> int:
        """Commit ``changes`` as one unit and return how many keys were written.

        Backend errors that are not already a :class:`StoreWriteFailure` are
        wrapped in one. Nothing is promoted to the snapshot on failure.
        """

        batch = {key: LanguageConfiguration.from_value(value) for key, value in changes.items()}
        if not batch:
            return 0
        try:
            await self._commit(batch)
        except StoreWriteFailure:
            raise
        except Exception as exc:
            logger.exception("Unexpected error while writing to %s store", self.name)
            raise StoreWriteFailure(f"Unable to write configuration store: {exc}") from exc
        with self._lock:
            self._data.update(batch)
        logger.debug("Committed %d key(s) to %s store", len(batch), self.name)
        return len(batch)

    async def close(self) -> None:
        """Release backend resources."""

        return None

    @abstractmethod
    async def _load_all(self) -> dict[str, LanguageConfiguration]:
        """Return every persisted record keyed by settings key."""
        raise NotImplementedError

    @abstractmethod
    async def _commit(self, changes: dict[str, LanguageConfiguration]) -> None:
        """Persist ``changes`` atomically or raise :class:`StoreWriteFailure`."""
        raise NotImplementedError


__all__ = ["ConfigBatch", "ConfigStore"]


# The End
