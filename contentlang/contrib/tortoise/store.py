# -*- coding: utf-8 -*-
"""
store

Configuration store backed by the Tortoise ORM.

Tortoise must be initialised with :data:`MODELS_MODULE` registered before
the store is loaded or saved.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging

from tortoise.exceptions import BaseORMException
from tortoise.transactions import in_transaction

from ...core.exceptions import StoreReadFailure, StoreWriteFailure
from ...core.language import LanguageConfiguration
from ...core.store.base import ConfigStore
from .models import ContentLanguageSetting

logger = logging.getLogger(__name__)

MODELS_MODULE = "contentlang.contrib.tortoise.models"


class TortoiseConfigStore(ConfigStore):
    """Persist language configurations through :class:`ContentLanguageSetting`."""

    name = "tortoise"

    def __init__(self, *, connection_name: str | None = None) -> None:
        """Remember the Tortoise connection used for transactions."""

        super().__init__()
        self._connection_name = connection_name

    async def _load_all(self) -> dict[str, LanguageConfiguration]:
        try:
            rows = await ContentLanguageSetting.all().values("key", "langcode", "language_show")
        except BaseORMException as exc:
            logger.exception("Failed to read content language settings")
            raise StoreReadFailure(f"Unable to read configuration store: {exc}") from exc
        return {
            row["key"]: LanguageConfiguration(
                langcode=row["langcode"],
                language_show=bool(row["language_show"]),
            )
            for row in rows
        }

    async def _commit(self, changes: dict[str, LanguageConfiguration]) -> None:
        try:
            async with in_transaction(self._connection_name) as connection:
                for key, config in changes.items():
                    await ContentLanguageSetting.update_or_create(
                        defaults=config.as_dict(),
                        using_db=connection,
                        key=key,
                    )
        except (BaseORMException, OSError) as exc:
            raise StoreWriteFailure(f"Unable to write configuration store: {exc}") from exc


__all__ = ["MODELS_MODULE", "TortoiseConfigStore"]


# The End
