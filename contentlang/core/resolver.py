# -*- coding: utf-8 -*-
"""
resolver

Resolve the effective language configuration of entity type bundles.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from .entities import BundleInfo
from .exceptions import InvalidSettingsKey
from .language import LanguageConfiguration, LanguageConfigurationKey
from .store.base import ConfigStore

logger = logging.getLogger(__name__)


def settings_key(entity_type: str, bundle: str) -> str:
    """Return the store key for ``entity_type`` and ``bundle``."""

    return str(LanguageConfigurationKey(entity_type, bundle))


class DefaultConfigurationResolver:
    """Read stored configurations, substituting the default for missing ones."""

    def __init__(self, store: ConfigStore) -> None:
        """Bind the resolver to ``store``."""

        self._store = store

    @property
    def store(self) -> ConfigStore:
        """Return the store consulted by the resolver."""

        return self._store

    def get_default_configuration(self, entity_type: str, bundle: str) -> LanguageConfiguration:
        """Return the configuration stored for the pair or the default one."""

        value = self._store.get(settings_key(entity_type, bundle))
        return LanguageConfiguration.from_value(value)

    def current_configuration(
        self,
        entity_types: Iterable[str],
        bundles: Mapping[str, Mapping[str, BundleInfo]],
    ) -> dict[LanguageConfigurationKey, LanguageConfiguration]:
        """Return the stored configuration of every bundle of ``entity_types``."""

        current: dict[LanguageConfigurationKey, LanguageConfiguration] = {}
        for entity_type in entity_types:
            for bundle in bundles.get(entity_type, {}):
                try:
                    key = LanguageConfigurationKey(entity_type, bundle)
                except InvalidSettingsKey as exc:
                    logger.warning("Ignoring bundle without a usable settings key: %s", exc)
                    continue
                value = self._store.get(str(key))
                if value is not None:
                    current[key] = LanguageConfiguration.from_value(value)
        return current


__all__ = ["DefaultConfigurationResolver", "settings_key"]


# The End
