# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the content language settings package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from threading import RLock
from typing import Callable, Mapping


@dataclass
class ContentLanguageSettings:
    """Container for configuration derived from environment variables."""

    admin_path: str = "/admin"
    settings_path: str = "/config/regional/content-language"
    api_prefix: str = "/api"
    site_title: str = "Content language"
    database_url: str | None = None
    store_path: str | None = None
    strict_submissions: bool = False
    languages: dict[str, str] = field(default_factory=lambda: {"en": "English"})

    def __post_init__(self) -> None:
        """Normalise path prefixes and optional storage locations."""
        self.admin_path = self._normalize_prefix(self.admin_path)
        self.settings_path = self._normalize_prefix(self.settings_path)
        self.api_prefix = self._normalize_prefix(self.api_prefix)
        if self.admin_path == "/":
            self.admin_path = ""
        if self.api_prefix == "/":
            self.api_prefix = ""
        if self.store_path is not None and not str(self.store_path).strip():
            self.store_path = None
        if self.database_url is not None and not self.database_url.strip():
            self.database_url = None

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "CONTENTLANG_",
    ) -> "ContentLanguageSettings":
        """Build a settings instance from environment variables."""
        source = env if env is not None else os.environ
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        return cls(
            admin_path=data.get("ADMIN_PATH") or "/admin",
            settings_path=data.get("SETTINGS_PATH") or "/config/regional/content-language",
            api_prefix=data.get("API_PREFIX") or "/api",
            site_title=data.get("SITE_TITLE") or "Content language",
            database_url=data.get("DATABASE_URL") or source.get("DATABASE_URL"),
            store_path=data.get("STORE_PATH"),
            strict_submissions=cls._to_bool(data.get("STRICT_SUBMISSIONS")),
            languages=cls._to_languages(data.get("LANGUAGES"), default={"en": "English"}),
        )

    @staticmethod
    def _to_bool(value: str | None, *, default: bool = False) -> bool:
        """Return a boolean parsed from ``value`` with a ``default`` fallback."""

        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        return default

    @staticmethod
    def _to_languages(value: str | None, *, default: dict[str, str]) -> dict[str, str]:
        """Parse ``"en:English,fr:French"`` into an ordered language mapping."""

        if not value or not value.strip():
            return dict(default)
        languages: dict[str, str] = {}
        for chunk in value.split(","):
            code, _, name = chunk.partition(":")
            code = code.strip()
            if not code:
                continue
            languages[code] = name.strip() or code
        return languages or dict(default)

    @staticmethod
    def _normalize_prefix(value: str) -> str:
        """Ensure paths contain a single leading slash and no trailing one."""
        stripped = value.strip().strip("/")
        if not stripped:
            return "/"
        return "/" + stripped


class SettingsManager:
    """Central storage for the active ``ContentLanguageSettings`` instance."""

    def __init__(self, initial: ContentLanguageSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial
        self._callbacks: list[Callable[[ContentLanguageSettings], None]] = []

    def configure(self, settings: ContentLanguageSettings) -> None:
        """Install a new settings instance and notify observers."""
        with self._lock:
            self._settings = settings
            for callback in list(self._callbacks):
                callback(settings)

    def current(self) -> ContentLanguageSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = ContentLanguageSettings.from_env()
            return self._settings

    def register(self, callback: Callable[[ContentLanguageSettings], None]) -> None:
        """Register a callback invoked whenever settings change."""
        with self._lock:
            self._callbacks.append(callback)

    def unregister(self, callback: Callable[[ContentLanguageSettings], None]) -> None:
        """Remove a previously registered settings change callback if present."""
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

    def reset(self) -> None:
        """Forget the active settings so the next lookup reads the environment."""
        with self._lock:
            self._settings = None


_settings_manager = SettingsManager()


def configure(settings: ContentLanguageSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> ContentLanguageSettings:
    """Return the active settings instance."""
    return _settings_manager.current()


def reset_settings() -> None:
    """Drop the active settings instance."""
    _settings_manager.reset()


def register_settings_observer(callback: Callable[[ContentLanguageSettings], None]) -> None:
    """Subscribe to configuration changes for global singletons."""
    _settings_manager.register(callback)


def unregister_settings_observer(callback: Callable[[ContentLanguageSettings], None]) -> None:
    """Unsubscribe from configuration changes previously registered."""
    _settings_manager.unregister(callback)


__all__ = [
    "ContentLanguageSettings",
    "SettingsManager",
    "configure",
    "current_settings",
    "reset_settings",
    "register_settings_observer",
    "unregister_settings_observer",
]


# The End
