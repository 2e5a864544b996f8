# -*- coding: utf-8 -*-
"""Tests covering the configuration store backends."""

from __future__ import annotations

import sqlite3
import threading

import pytest
from tortoise import Tortoise, connections

from contentlang.contrib.tortoise import MODELS_MODULE, ContentLanguageSetting, TortoiseConfigStore
from contentlang.core.exceptions import StoreWriteFailure
from contentlang.core.language import LanguageConfiguration
from contentlang.core.resolver import DefaultConfigurationResolver
from contentlang.core.store.memory import InMemoryConfigStore
from contentlang.core.store.sqlite import SQLiteConfigStore

FRENCH = LanguageConfiguration(langcode="fr", language_show=True)


@pytest.mark.asyncio
async def test_staged_writes_stay_invisible_until_saved() -> None:
    store = InMemoryConfigStore()
    batch = store.batch()
    batch.set("node.article", {"langcode": "fr", "language_show": True})

    assert batch.pending == {"node.article": FRENCH}
    assert store.get("node.article") is None
    assert "node.article" not in store

    written = await batch.save()

    assert written == 1
    assert batch.pending == {}
    assert store.get("node.article") == FRENCH
    assert store.committed() == {"node.article": FRENCH}


@pytest.mark.asyncio
async def test_discard_drops_staged_changes_only() -> None:
    store = InMemoryConfigStore({"node.page": FRENCH})
    batch = store.batch()
    batch.set("node.article", FRENCH)
    batch.discard()

    assert await batch.save() == 0
    assert store.committed() == {"node.page": FRENCH}


@pytest.mark.asyncio
async def test_memory_store_reload_returns_saved_records() -> None:
    store = InMemoryConfigStore()
    await store.save_many({"node.article": FRENCH})
    await store.load()

    assert list(store) == ["node.article"]


def test_resolver_falls_back_to_default() -> None:
    resolver = DefaultConfigurationResolver(InMemoryConfigStore({"node.article": FRENCH}))

    assert resolver.get_default_configuration("node", "article") == FRENCH
    assert resolver.get_default_configuration("node", "page") == LanguageConfiguration.default()


@pytest.mark.asyncio
async def test_sqlite_store_persists_across_instances(tmp_path) -> None:
    path = str(tmp_path / "settings.sqlite3")
    store = SQLiteConfigStore(path)
    await store.save_many({"node.article": FRENCH, "node.page": LanguageConfiguration()})
    await store.save_many({"node.article": LanguageConfiguration(langcode="de")})
    await store.close()

    reopened = SQLiteConfigStore(path)
    await reopened.load()

    assert reopened.committed() == {
        "node.article": LanguageConfiguration(langcode="de"),
        "node.page": LanguageConfiguration(),
    }
    await reopened.close()


@pytest.mark.asyncio
async def test_sqlite_store_wraps_backend_errors() -> None:
    store = SQLiteConfigStore()
    store._connection.execute("DROP TABLE content_language_settings")  # type: ignore[union-attr]
    batch = store.batch()
    batch.set("node.article", FRENCH)

    with pytest.raises(StoreWriteFailure) as info:
        await batch.save()

    assert isinstance(info.value.__cause__, sqlite3.Error)
    assert store.committed() == {}
    assert "node.article" not in store


def test_sqlite_store_rejects_unsafe_table_names() -> None:
    with pytest.raises(ValueError):
        SQLiteConfigStore(table_name="settings; DROP TABLE x")


@pytest.mark.asyncio
async def test_tortoise_store_round_trip() -> None:
    await Tortoise.init(db_url="sqlite://:memory:", modules={"models": [MODELS_MODULE]})
    await Tortoise.generate_schemas()
    try:
        store = TortoiseConfigStore()
        batch = store.batch()
        batch.set("node.article", FRENCH)
        batch.set("node.page", LanguageConfiguration())
        assert await batch.save() == 2

        await store.save_many({"node.article": LanguageConfiguration(langcode="en")})

        fresh = TortoiseConfigStore()
        await fresh.load()
        assert fresh.committed() == {
            "node.article": LanguageConfiguration(langcode="en"),
            "node.page": LanguageConfiguration(),
        }
        assert await ContentLanguageSetting.all().count() == 2
    finally:
        await connections.close_all()


class ResettingStore(InMemoryConfigStore):
    """Memory store whose backend drops the connection on commit."""

    async def _commit(self, changes) -> None:
        raise ConnectionResetError("connection reset by peer")


@pytest.mark.asyncio
async def test_unexpected_backend_errors_become_write_failures() -> None:
    store = ResettingStore({"node.page": FRENCH})

    with pytest.raises(StoreWriteFailure) as info:
        await store.save_many({"node.article": FRENCH})

    assert isinstance(info.value.__cause__, ConnectionResetError)
    assert store.committed() == {"node.page": FRENCH}
    assert store.get("node.article") is None


@pytest.mark.asyncio
async def test_sqlite_commits_run_off_the_event_loop_thread(tmp_path, monkeypatch) -> None:
    store = SQLiteConfigStore(str(tmp_path / "settings.sqlite3"))
    loop_thread = threading.get_ident()
    seen: list[int] = []
    write_rows = store._write_rows

    def recording_write(rows) -> None:
        seen.append(threading.get_ident())
        write_rows(rows)

    monkeypatch.setattr(store, "_write_rows", recording_write)
    await store.save_many({"node.article": FRENCH})
    await store.close()

    assert seen and seen[0] != loop_thread


# The End
