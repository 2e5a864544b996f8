# -*- coding: utf-8 -*-
"""
memory

Process-local configuration store.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Mapping

from ..language import LanguageConfiguration
from .base import ConfigStore


class InMemoryConfigStore(ConfigStore):
    """Keep configuration records in a dictionary for the process lifetime."""

    name = "memory"

    def __init__(
        self,
        initial: Mapping[str, LanguageConfiguration | Mapping[str, Any]] | None = None,
    ) -> None:
        """Seed the backend with optional ``initial`` records."""

        super().__init__()
        self._storage: dict[str, LanguageConfiguration] = {
            key: LanguageConfiguration.from_value(value)
            for key, value in (initial or {}).items()
        }
        self._data = dict(self._storage)

    async def _load_all(self) -> dict[str, LanguageConfiguration]:
        return dict(self._storage)

    async def _commit(self, changes: dict[str, LanguageConfiguration]) -> None:
        self._storage.update(changes)


__all__ = ["InMemoryConfigStore"]


# The End
