# -*- coding: utf-8 -*-
"""
application

Factories for assembling FastAPI applications serving the settings form.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

from fastapi import APIRouter, FastAPI

from .api.views import ContentLanguageConfiguration, ContentLanguageViewSet
from .conf import ContentLanguageSettings, current_settings
from .core.entities import EntityMetadataService, EntityTypeRegistry
from .core.store.base import ConfigStore
from .core.store.memory import InMemoryConfigStore
from .core.store.sqlite import SQLiteConfigStore
from .templating import TemplateService

LifecycleHook = Callable[[], Awaitable[None] | None]

logger = logging.getLogger(__name__)


class TortoiseLifecycle:
    """Initialise and tear down Tortoise ORM for the Tortoise-backed store."""

    def __init__(self, database_url: str) -> None:
        self._database_url = database_url

    async def startup(self) -> None:
        from tortoise import Tortoise

        from .contrib.tortoise.store import MODELS_MODULE

        await Tortoise.init(db_url=self._database_url, modules={"models": [MODELS_MODULE]})
        await Tortoise.generate_schemas(safe=True)
        logger.info("Tortoise ORM initialised for content language settings")

    async def shutdown(self) -> None:
        from tortoise import connections

        await connections.close_all()


class ApplicationFactory:
    """Create configured FastAPI applications exposing the settings form."""

    def __init__(
        self,
        *,
        settings: ContentLanguageSettings | None = None,
        metadata: EntityMetadataService | None = None,
        store: ConfigStore | None = None,
    ) -> None:
        """Persist configuration and supporting services for application builds."""

        self._settings = settings
        self._metadata = metadata
        self._store = store
        self._orm: TortoiseLifecycle | None = None
        self._startup_hooks: list[LifecycleHook] = []
        self._shutdown_hooks: list[LifecycleHook] = []

    def register_startup_hook(self, hook: LifecycleHook) -> None:
        """Store a coroutine or callable to execute during application startup."""

        self._startup_hooks.append(hook)

    def register_shutdown_hook(self, hook: LifecycleHook) -> None:
        """Store a coroutine or callable to execute during application shutdown."""

        self._shutdown_hooks.append(hook)

    def build(self) -> FastAPI:
        """Return a FastAPI instance with the settings views mounted."""

        settings = self._settings or current_settings()
        store = self._store or self._create_store(settings)
        metadata = self._metadata if self._metadata is not None else EntityTypeRegistry()
        templates = TemplateService(settings=settings)
        config = ContentLanguageConfiguration(
            metadata=metadata,
            store=store,
            settings=self._settings,
            templates=templates,
        )

        app = FastAPI(title=settings.site_title, lifespan=self._lifespan(config))
        app.state.contentlang = config
        router = APIRouter()
        ContentLanguageViewSet(config).register(router)
        app.include_router(router)
        templates.mount_static_resources(app)
        return app

    def _create_store(self, settings: ContentLanguageSettings) -> ConfigStore:
        """Choose a store backend from ``settings``."""

        if settings.database_url:
            from .contrib.tortoise.store import TortoiseConfigStore

            self._orm = TortoiseLifecycle(settings.database_url)
            return TortoiseConfigStore()
        if settings.store_path:
            return SQLiteConfigStore(settings.store_path)
        return InMemoryConfigStore()

    def _lifespan(
        self,
        config: ContentLanguageConfiguration,
    ) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
        store = config.store
        orm = self._orm
        startup_hooks = list(self._startup_hooks)
        shutdown_hooks = list(self._shutdown_hooks)

        @asynccontextmanager
        async def lifespan(app: FastAPI) -> AsyncIterator[None]:
            if orm is not None:
                await orm.startup()
            await store.load()
            for hook in startup_hooks:
                await self._call(hook)
            try:
                yield
            finally:
                for hook in shutdown_hooks:
                    await self._call(hook)
                config.close()
                await store.close()
                if orm is not None:
                    await orm.shutdown()

        return lifespan

    @staticmethod
    async def _call(hook: LifecycleHook) -> None:
        result = hook()
        if inspect.isawaitable(result):
            await result


def create_app(
    settings: ContentLanguageSettings | None = None,
    metadata: EntityMetadataService | None = None,
    store: ConfigStore | None = None,
) -> FastAPI:
    """Build an application with the default factory."""

    return ApplicationFactory(settings=settings, metadata=metadata, store=store).build()


__all__ = ["ApplicationFactory", "TortoiseLifecycle", "create_app"]


# The End
