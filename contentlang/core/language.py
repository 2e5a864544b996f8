# -*- coding: utf-8 -*-
"""
language

Language configuration records, composite settings keys and the language catalog.

Every (entity type, bundle) pair owns exactly one
:class:`LanguageConfiguration`. Pairs without a stored record behave as if
they held :meth:`LanguageConfiguration.default`. Records are persisted under
a :class:`LanguageConfigurationKey` rendered as ``"{entity_type}.{bundle}"``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict

from .choices import StrChoices
from .exceptions import InvalidSettingsKey


class SpecialLangcode(StrChoices):
    """Language codes resolved at runtime instead of naming a language."""

    SITE_DEFAULT = ("site_default", "Site's default language")
    CURRENT_INTERFACE = ("current_interface", "Interface text language selected for page")
    AUTHORS_DEFAULT = ("authors_default", "Author's preferred language")


SITE_DEFAULT: str = SpecialLangcode.SITE_DEFAULT.value
KEY_SEPARATOR: str = "."


class LanguageConfiguration(BaseModel):
    """Default language and selector visibility for one bundle."""

    model_config = ConfigDict(frozen=True)

    langcode: str = SITE_DEFAULT
    language_show: bool = False

    @classmethod
    def default(cls) -> "LanguageConfiguration":
        """Return the configuration used when nothing has been stored."""
        return cls()

    @classmethod
    def from_value(cls, value: Mapping[str, Any] | "LanguageConfiguration" | None) -> "LanguageConfiguration":
        """Coerce a stored mapping into a configuration record."""
        if value is None:
            return cls.default()
        if isinstance(value, cls):
            return value
        return cls(
            langcode=str(value.get("langcode") or SITE_DEFAULT),
            language_show=bool(value.get("language_show", False)),
        )

    @property
    def has_custom_settings(self) -> bool:
        """Return ``True`` when the record differs from the site default."""
        return self.language_show or self.langcode != SITE_DEFAULT

    def as_dict(self) -> dict[str, Any]:
        """Return the two persisted fields as a plain mapping."""
        return {"langcode": self.langcode, "language_show": self.language_show}



def validate_key_part(part: str, value: object) -> str:
    """Return ``value`` if it can be one half of a settings key."""

    if not isinstance(value, str) or not value:
        raise InvalidSettingsKey(f"Empty {part} id cannot form a settings key")
    if KEY_SEPARATOR in value:
        raise InvalidSettingsKey(
            f"{part.capitalize()} id {value!r} contains the key separator {KEY_SEPARATOR!r}"
        )
    return value


@dataclass(frozen=True, order=True)
class LanguageConfigurationKey:
    """Composite (entity type, bundle) key addressing a configuration record."""

    entity_type: str
    bundle: str

    def __post_init__(self) -> None:
        validate_key_part("entity type", self.entity_type)
        validate_key_part("bundle", self.bundle)

    def __str__(self) -> str:
        return f"{self.entity_type}{KEY_SEPARATOR}{self.bundle}"

    @classmethod
    def parse(cls, raw: str) -> "LanguageConfigurationKey":
        """Rebuild a key from its ``"{entity_type}.{bundle}"`` form."""
        entity_type, separator, bundle = raw.partition(KEY_SEPARATOR)
        if not separator:
            raise InvalidSettingsKey(f"Settings key {raw!r} lacks the {KEY_SEPARATOR!r} separator")
        return cls(entity_type, bundle)


class LanguageCatalog:
    """Languages configured on the site, offered next to the special codes."""

    def __init__(self, languages: Mapping[str, str] | None = None) -> None:
        """Store the ordered ``langcode -> name`` mapping."""

        self._languages: dict[str, str] = dict(languages or {})

    @property
    def languages(self) -> dict[str, str]:
        """Return a copy of the configured languages."""

        return dict(self._languages)

    def add(self, langcode: str, name: str | None = None) -> None:
        """Register ``langcode`` with an optional display ``name``."""

        self._languages[langcode] = name or langcode

    def options(self) -> dict[str, str]:
        """Return selectable options: special codes first, then languages."""

        options = dict(SpecialLangcode.choices())
        for langcode, name in self._languages.items():
            options.setdefault(langcode, name)
        return options


__all__ = [
    "KEY_SEPARATOR",
    "LanguageCatalog",
    "LanguageConfiguration",
    "LanguageConfigurationKey",
    "SITE_DEFAULT",
    "SpecialLangcode",
    "validate_key_part",
]


# The End
