# -*- coding: utf-8 -*-
"""Tests covering the HTML and JSON settings endpoints."""

from __future__ import annotations

import re

from fastapi.testclient import TestClient

from contentlang.api.views import ContentLanguageConfiguration
from contentlang.application import ApplicationFactory, create_app
from contentlang.conf import ContentLanguageSettings, configure
from contentlang.core.entities import BundleInfo, EntityTypeDescriptor, EntityTypeRegistry
from contentlang.core.exceptions import StoreWriteFailure
from contentlang.core.language import LanguageConfiguration
from contentlang.core.store.memory import InMemoryConfigStore
from contentlang.core.store.sqlite import SQLiteConfigStore

PAGE = "/admin/config/regional/content-language"
API = "/api/config/regional/content-language"
LANGCODE = "settings[article][page][settings][language][langcode]"
SHOW = "settings[article][page][settings][language][language_show]"


class FailingStore(InMemoryConfigStore):
    """Store whose commits always fail."""

    async def _commit(self, changes) -> None:
        raise StoreWriteFailure("disk full")


class BrokenRegistry(EntityTypeRegistry):
    """Metadata service that cannot list entity types."""

    def get_definitions(self):
        raise RuntimeError("entity manager offline")


def _option_values(html: str, select_id: str) -> list[str]:
    select = re.search(rf'<select[^>]*id="{re.escape(select_id)}"[^>]*>(.*?)</select>', html, re.S)
    assert select is not None
    return re.findall(r'<option value="([^"]+)"', select.group(1))


def test_form_page_lists_translatable_types_and_defaults(settings, registry, store) -> None:
    app = create_app(settings, registry, store)
    with TestClient(app) as client:
        response = client.get(PAGE)

    assert response.status_code == 200
    html = response.text
    assert 'name="entity_types[article]"' in html
    assert 'name="entity_types[menu_link]"' not in html
    assert _option_values(html, "edit-settings-article-page-langcode") == [
        "site_default",
        "current_interface",
        "authors_default",
        "en",
        "fr",
    ]
    assert re.search(r'<option value="site_default"\s+selected>', html)
    assert "Settings successfully updated." not in html


def test_form_post_saves_settings_and_acknowledges(settings, registry, store) -> None:
    app = create_app(settings, registry, store)
    with TestClient(app) as client:
        response = client.post(
            PAGE,
            data={"entity_types[article]": "article", LANGCODE: "fr", SHOW: ["0", "1"], "op": "Save"},
        )
        again = client.get(PAGE)

    assert response.status_code == 200
    assert response.text.count("Settings successfully updated.") == 1
    assert store.committed() == {"article.page": LanguageConfiguration(langcode="fr", language_show=True)}
    assert re.search(r'<option value="fr"\s+selected>', again.text)


def test_form_post_reports_store_failure(settings, registry) -> None:
    store = FailingStore()
    app = create_app(settings, registry, store)
    with TestClient(app) as client:
        response = client.post(PAGE, data={LANGCODE: "fr", SHOW: "1"})

    assert response.status_code == 503
    assert "could not be saved" in response.text
    assert "Settings successfully updated." not in response.text
    assert store.committed() == {}


def test_strict_post_rejects_malformed_submission(registry, store) -> None:
    settings = ContentLanguageSettings(strict_submissions=True)
    app = create_app(settings, registry, store)
    with TestClient(app) as client:
        response = client.post(PAGE, data={SHOW: "1"})

    assert response.status_code == 400
    assert store.committed() == {}


def test_metadata_failure_returns_503(settings, store) -> None:
    app = create_app(settings, BrokenRegistry(), store)
    with TestClient(app) as client:
        response = client.get(PAGE)

    assert response.status_code == 503


def test_api_exposes_form_and_schema(settings, registry, store) -> None:
    app = create_app(settings, registry, store)
    with TestClient(app) as client:
        payload = client.get(API).json()

    assert payload["form"]["toggle"]["options"] == {"article": "Article"}
    assert payload["form"]["sections"][0]["rows"][0]["value"] == {
        "langcode": "site_default",
        "language_show": False,
    }
    assert "article" in payload["schema"]["properties"]["settings"]["properties"]
    assert payload["startval"]["entity_types"] == []


def test_api_post_saves_json_submission(settings, registry, store) -> None:
    app = create_app(settings, registry, store)
    body = {
        "settings": {
            "article": {"page": {"settings": {"language": {"langcode": "fr", "language_show": True}}}}
        }
    }
    with TestClient(app) as client:
        response = client.post(API, json=body)

    assert response.status_code == 200
    assert response.json() == {
        "ok": True,
        "saved": {"article.page": {"langcode": "fr", "language_show": True}},
        "messages": [{"level": "status", "text": "Settings successfully updated."}],
    }


def test_api_post_requires_settings_object(settings, registry, store) -> None:
    app = create_app(settings, registry, store)
    with TestClient(app) as client:
        response = client.post(API, json={"entity_types": ["article"]})

    assert response.status_code == 400


def test_api_post_maps_store_failure(settings, registry) -> None:
    app = create_app(settings, registry, FailingStore())
    body = {"settings": {"article": {"page": {"settings": {"language": {"langcode": "fr"}}}}}}
    with TestClient(app) as client:
        response = client.post(API, json=body)

    assert response.status_code == 503


def test_factory_selects_sqlite_store_and_serves_assets(tmp_path, registry) -> None:
    settings = ContentLanguageSettings(store_path=str(tmp_path / "settings.sqlite3"))
    app = ApplicationFactory(settings=settings, metadata=registry).build()
    config = app.state.contentlang

    assert isinstance(config.store, SQLiteConfigStore)
    with TestClient(app) as client:
        assert client.get("/static/contentlang/language_admin.js").status_code == 200
        client.post(PAGE, data={LANGCODE: "en", SHOW: "0"})
    assert config.store.committed() == {"article.page": LanguageConfiguration(langcode="en")}



def test_factory_runs_lifecycle_hooks(settings, registry, store) -> None:
    calls: list[str] = []

    async def on_startup() -> None:
        calls.append("startup")

    factory = ApplicationFactory(settings=settings, metadata=registry, store=store)
    factory.register_startup_hook(on_startup)
    factory.register_shutdown_hook(lambda: calls.append("shutdown"))

    with TestClient(factory.build()):
        assert calls == ["startup"]
    assert calls == ["startup", "shutdown"]


def test_configuration_follows_settings_updates(registry, store) -> None:
    config = ContentLanguageConfiguration(metadata=registry, store=store)
    configure(ContentLanguageSettings(strict_submissions=True, languages={"de": "German"}))
    try:
        assert config.handler.strict is True
        assert "de" in config.languages.options()
    finally:
        config.close()

    configure(ContentLanguageSettings(strict_submissions=False))
    assert config.handler.strict is True


def test_app_stops_following_settings_after_shutdown(registry, store) -> None:
    configure(ContentLanguageSettings())
    app = ApplicationFactory(metadata=registry, store=store).build()
    config = app.state.contentlang

    with TestClient(app):
        configure(ContentLanguageSettings(strict_submissions=True))
        assert config.handler.strict is True

    configure(ContentLanguageSettings(strict_submissions=False))
    assert config.handler.strict is True


class DottedMetadata:
    """Metadata service exposing ids that cannot form a settings key."""

    def get_definitions(self):
        return [
            EntityTypeDescriptor(id="node", label="Content", translatable=True),
            EntityTypeDescriptor(id="legacy.node", label="Legacy", translatable=True),
        ]

    def get_all_bundle_info(self):
        return {
            "node": {
                "v1.page": BundleInfo(id="v1.page", label="Old page"),
                "article": BundleInfo(id="article", label="Article"),
            },
            "legacy.node": {"page": BundleInfo(id="page", label="Page")},
        }


def test_form_page_skips_ids_that_cannot_form_a_key(settings, store) -> None:
    app = create_app(settings, DottedMetadata(), store)
    with TestClient(app) as client:
        page = client.get(PAGE)
        api = client.get(API)

    assert page.status_code == 200
    assert 'name="entity_types[node]"' in page.text
    assert "legacy.node" not in page.text
    assert "edit-settings-node-article-langcode" in page.text
    assert "v1.page" not in page.text
    assert api.status_code == 200
    assert [section["entity_type"] for section in api.json()["form"]["sections"]] == ["node"]


# The End
