# -*- coding: utf-8 -*-
"""views

HTML and JSON views serving the content language settings form.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, HTTPException, Request
from fastapi.responses import HTMLResponse

from ..conf import (
    ContentLanguageSettings,
    current_settings,
    register_settings_observer,
    unregister_settings_observer,
)
from ..core.entities import EntityMetadataService, EntityTypeRegistry
from ..core.exceptions import HTTPError, MalformedSubmission, StoreWriteFailure
from ..core.language import LanguageCatalog
from ..core.messages import MessageBag
from ..core.resolver import DefaultConfigurationResolver
from ..core.store.base import ConfigStore
from ..core.store.memory import InMemoryConfigStore
from ..forms.builder import ContentLanguageFormBuilder
from ..forms.descriptors import SETTINGS_NAME, FormDescriptor
from ..forms.state import FormStateParser
from ..forms.submission import ContentLanguageSubmissionHandler
from ..templating import TemplateService
from ..widgets.renderer import FormSchemaRenderer

FORM_TEMPLATE = "contentlang/settings_form.html"


class ContentLanguageConfiguration:
    """Shared services and paths for the settings views."""

    def __init__(
        self,
        *,
        metadata: EntityMetadataService | None = None,
        store: ConfigStore | None = None,
        settings: ContentLanguageSettings | None = None,
        templates: TemplateService | None = None,
    ) -> None:
        """Wire the metadata service, store and derived collaborators."""

        self._logger = logging.getLogger(__name__)
        self._settings = settings or current_settings()
        self._metadata = metadata if metadata is not None else EntityTypeRegistry()
        self._store = store if store is not None else InMemoryConfigStore()
        self._templates = templates or TemplateService(settings=self._settings)
        self._parser = FormStateParser()
        self._configure_services()
        self._observing = settings is None
        if self._observing:
            register_settings_observer(self.apply_settings)

    @property
    def settings(self) -> ContentLanguageSettings:
        return self._settings

    @property
    def metadata(self) -> EntityMetadataService:
        """Return the entity metadata service."""

        return self._metadata

    @property
    def store(self) -> ConfigStore:
        """Return the configuration store."""

        return self._store

    @property
    def languages(self) -> LanguageCatalog:
        return self._languages

    @property
    def resolver(self) -> DefaultConfigurationResolver:
        return self._resolver

    @property
    def builder(self) -> ContentLanguageFormBuilder:
        return self._builder

    @property
    def renderer(self) -> FormSchemaRenderer:
        return self._renderer

    @property
    def handler(self) -> ContentLanguageSubmissionHandler:
        return self._handler

    @property
    def parser(self) -> FormStateParser:
        return self._parser

    @property
    def templates(self) -> TemplateService:
        return self._templates

    @property
    def page_path(self) -> str:
        """Return the absolute path of the HTML settings page."""

        return f"{self._settings.admin_path}{self._settings.settings_path}"

    @property
    def api_path(self) -> str:
        """Return the absolute path of the JSON settings endpoint."""

        return f"{self._settings.api_prefix}{self._settings.settings_path}"

    def apply_settings(self, settings: ContentLanguageSettings) -> None:
        """Apply runtime settings updates to dependent services."""

        self._settings = settings
        self._templates.apply_settings(settings)
        self._configure_services()

    def close(self) -> None:
        """Stop following global settings changes."""

        if self._observing:
            unregister_settings_observer(self.apply_settings)
            self._observing = False

    def build_form(self) -> FormDescriptor:
        """Return a fresh form tree or raise ``HTTPException`` (503)."""

        try:
            return self._builder.build_from_services(self._metadata, self._resolver)
        except HTTPError as exc:
            raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc

    def _configure_services(self) -> None:
        self._languages = LanguageCatalog(self._settings.languages)
        self._resolver = DefaultConfigurationResolver(self._store)
        self._renderer = FormSchemaRenderer(self._languages)
        self._builder = ContentLanguageFormBuilder(
            title=self._settings.site_title,
            languages=self._languages,
            renderer=self._renderer,
        )
        self._handler = ContentLanguageSubmissionHandler(
            self._store,
            strict=self._settings.strict_submissions,
        )


class BaseContentLanguageView:
    """Base helper giving views access to the shared configuration."""

    def __init__(self, config: ContentLanguageConfiguration) -> None:
        """Store ``config`` for use by concrete view implementations."""

        self._config = config
        self.logger = logging.getLogger(__name__)

    @property
    def config(self) -> ContentLanguageConfiguration:
        return self._config


class SettingsFormPageView(BaseContentLanguageView):
    """Render and process the HTML settings form."""

    async def get(self, request: Request) -> HTMLResponse:
        """Render the form pre-populated from the store."""

        form = self.config.build_form()
        return self._render(request, form, MessageBag())

    async def post(self, request: Request) -> HTMLResponse:
        """Persist submitted values and re-render the form with messages."""

        data = await request.form()
        state = self.config.parser.parse(data.multi_items())
        messages = MessageBag()
        status_code = 200
        try:
            await self.config.handler.apply(state.get(SETTINGS_NAME, {}), messages)
        except StoreWriteFailure as exc:
            status_code = exc.status_code
        except MalformedSubmission as exc:
            self.logger.warning("Rejected content language submission: %s", exc)
            messages.error(str(exc))
            status_code = exc.status_code
        form = self.config.build_form()
        return self._render(request, form, messages, status_code=status_code)

    def _render(
        self,
        request: Request,
        form: FormDescriptor,
        messages: MessageBag,
        *,
        status_code: int = 200,
    ) -> HTMLResponse:
        return self.config.templates.render(
            FORM_TEMPLATE,
            request=request,
            context={
                "form": form,
                "languages": self.config.languages.options(),
                "messages": messages.drain(),
                "action": self.config.page_path,
                "title": form.title,
                "assets": form.assets,
            },
            status_code=status_code,
        )


class SettingsFormAPIView(BaseContentLanguageView):
    """Expose the form tree and accept JSON submissions."""

    async def get(self) -> dict[str, Any]:
        """Return the form descriptor together with its JSON Schema."""

        form = self.config.build_form()
        rendered = self.config.renderer.render(form)
        return {
            "form": form.model_dump(mode="json"),
            "schema": rendered["schema"],
            "startval": rendered["startval"],
        }

    async def post(self, payload: dict = Body(...)) -> dict[str, Any]:
        """Save ``payload["settings"]`` and report the committed values."""

        settings = payload.get(SETTINGS_NAME)
        if not isinstance(settings, dict):
            raise HTTPException(status_code=400, detail=f"Missing '{SETTINGS_NAME}' object")
        messages = MessageBag()
        try:
            saved = await self.config.handler.apply(settings, messages)
        except HTTPError as exc:
            raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
        return {
            "ok": True,
            "saved": {str(key): config.as_dict() for key, config in saved.items()},
            "messages": [message.model_dump(mode="json") for message in messages.drain()],
        }


class ContentLanguageViewSet:
    """Bundle the settings views for router registration."""

    def __init__(self, config: ContentLanguageConfiguration | None = None) -> None:
        """Create the view set and instantiate individual views."""

        self._config = config or ContentLanguageConfiguration()
        self.page = SettingsFormPageView(self._config)
        self.api = SettingsFormAPIView(self._config)

    @property
    def config(self) -> ContentLanguageConfiguration:
        return self._config

    def register(self, router: APIRouter) -> None:
        """Attach all view handlers to ``router`` using configured paths."""

        router.get(
            self._config.page_path,
            name="contentlang.settings_form",
            response_class=HTMLResponse,
        )(self.page.get)
        router.post(
            self._config.page_path,
            name="contentlang.settings_form_submit",
            response_class=HTMLResponse,
        )(self.page.post)
        router.get(self._config.api_path, name="contentlang.api.settings")(self.api.get)
        router.post(self._config.api_path, name="contentlang.api.settings_submit")(self.api.post)


__all__ = [
    "BaseContentLanguageView",
    "ContentLanguageConfiguration",
    "ContentLanguageViewSet",
    "SettingsFormAPIView",
    "SettingsFormPageView",
]

# The End
