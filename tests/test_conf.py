# -*- coding: utf-8 -*-
"""Tests covering environment-driven configuration."""

from __future__ import annotations

from contentlang.conf import (
    ContentLanguageSettings,
    SettingsManager,
    configure,
    current_settings,
    register_settings_observer,
    unregister_settings_observer,
)


def test_from_env_reads_prefixed_variables() -> None:
    settings = ContentLanguageSettings.from_env(
        {
            "CONTENTLANG_ADMIN_PATH": "panel/",
            "CONTENTLANG_SETTINGS_PATH": "/language/",
            "CONTENTLANG_STRICT_SUBMISSIONS": "yes",
            "CONTENTLANG_LANGUAGES": "en:English, fr:French,de",
            "CONTENTLANG_STORE_PATH": "/tmp/settings.sqlite3",
            "DATABASE_URL": "sqlite://:memory:",
        }
    )

    assert settings.admin_path == "/panel"
    assert settings.settings_path == "/language"
    assert settings.api_prefix == "/api"
    assert settings.strict_submissions is True
    assert settings.languages == {"en": "English", "fr": "French", "de": "de"}
    assert settings.store_path == "/tmp/settings.sqlite3"
    assert settings.database_url == "sqlite://:memory:"


def test_defaults_without_environment() -> None:
    settings = ContentLanguageSettings.from_env({})

    assert settings.admin_path == "/admin"
    assert settings.settings_path == "/config/regional/content-language"
    assert settings.strict_submissions is False
    assert settings.languages == {"en": "English"}
    assert settings.database_url is None
    assert settings.store_path is None


def test_root_prefixes_collapse_to_empty() -> None:
    settings = ContentLanguageSettings(admin_path="/", api_prefix="")

    assert settings.admin_path == ""
    assert settings.api_prefix == ""


def test_configure_notifies_observers() -> None:
    seen: list[ContentLanguageSettings] = []
    register_settings_observer(seen.append)
    try:
        custom = ContentLanguageSettings(site_title="Languages")
        configure(custom)
    finally:
        unregister_settings_observer(seen.append)

    assert current_settings() is custom
    assert seen == [custom]


def test_manager_lazily_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("CONTENTLANG_SITE_TITLE", "From env")
    manager = SettingsManager()

    assert manager.current().site_title == "From env"


# The End
