# -*- coding: utf-8 -*-
"""
submission

Persist submitted content language settings.

The handler walks ``submitted[entity_type][bundle]["settings"]["language"]``,
keeps exactly ``langcode`` and ``language_show`` and stages one store write
per pair in a batch owned by the submission before a single ``save``.
Concurrent submissions never see or commit each other's writes. One
acknowledgment is queued per submission: a status message when every write
is committed, an error message otherwise.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ..core.exceptions import InvalidSettingsKey, MalformedSubmission, StoreWriteFailure
from ..core.language import LanguageConfiguration, LanguageConfigurationKey
from ..core.messages import MessageBag
from ..core.store.base import ConfigStore

logger = logging.getLogger(__name__)

TRUE_VALUES = frozenset({"1", "on", "true", "yes"})


def coerce_flag(value: Any) -> bool:
    """Interpret checkbox style submissions as a boolean."""

    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return bool(value)
    return str(value).strip().lower() in TRUE_VALUES


class ContentLanguageSubmissionHandler:
    """Flatten submitted form values into configuration store writes."""

    success_message = "Settings successfully updated."
    error_message = "The content language settings could not be saved. Please try again."

    def __init__(self, store: ConfigStore, *, strict: bool = False) -> None:
        """Bind the handler to ``store`` and choose malformed-entry policy."""

        self._store = store
        self._strict = strict

    @property
    def store(self) -> ConfigStore:
        return self._store

    @property
    def strict(self) -> bool:
        return self._strict

    def extract(
        self,
        submitted: Mapping[str, Any],
    ) -> dict[LanguageConfigurationKey, LanguageConfiguration]:
        """Return the configuration of every well-formed submitted pair."""

        entries: dict[LanguageConfigurationKey, LanguageConfiguration] = {}
        for entity_type, entity_settings in submitted.items():
            if not isinstance(entity_settings, Mapping):
                self._malformed(f"Settings for entity type '{entity_type}' are not a mapping")
                continue
            for bundle, bundle_settings in entity_settings.items():
                language = self._language_values(bundle_settings)
                if language is None or "langcode" not in language:
                    self._malformed(
                        f"Submission for '{entity_type}.{bundle}' lacks settings.language.langcode"
                    )
                    continue
                try:
                    key = LanguageConfigurationKey(str(entity_type), str(bundle))
                except InvalidSettingsKey as exc:
                    self._malformed(str(exc))
                    continue
                entries[key] = LanguageConfiguration(
                    langcode=str(language["langcode"]),
                    language_show=coerce_flag(language.get("language_show")),
                )
        return entries

    async def apply(
        self,
        submitted: Mapping[str, Any],
        messages: MessageBag | None = None,
    ) -> dict[LanguageConfigurationKey, LanguageConfiguration]:
        """Write every submitted pair and commit them as one save."""

        messages = messages if messages is not None else MessageBag()
        entries = self.extract(submitted)
        batch = self._store.batch()
        try:
            for key, config in entries.items():
                batch.set(str(key), config)
            await batch.save()
        except StoreWriteFailure:
            batch.discard()
            logger.exception("Saving content language settings failed")
            messages.error(self.error_message)
            raise
        logger.info("Saved content language settings for %d bundle(s)", len(entries))
        messages.status(self.success_message)
        return entries

    def _malformed(self, detail: str) -> None:
        if self._strict:
            raise MalformedSubmission(detail)
        logger.warning("Skipping malformed content language submission: %s", detail)

    @staticmethod
    def _language_values(bundle_settings: Any) -> Mapping[str, Any] | None:
        if not isinstance(bundle_settings, Mapping):
            return None
        settings = bundle_settings.get("settings")
        if not isinstance(settings, Mapping):
            return None
        language = settings.get("language")
        if not isinstance(language, Mapping):
            return None
        return language


__all__ = ["ContentLanguageSubmissionHandler", "coerce_flag"]


# The End
