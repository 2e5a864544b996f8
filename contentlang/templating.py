# -*- coding: utf-8 -*-
"""
templating

Template and static file handling for the settings pages.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping
from weakref import WeakSet

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from starlette.staticfiles import StaticFiles

from .conf import ContentLanguageSettings, current_settings

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
ASSETS_DIR = Path(__file__).resolve().parent / "static" / "contentlang"
STATIC_MOUNT = "/static/contentlang"
STATIC_ROUTE_NAME = "contentlang-static"


class TemplateService:
    """Provide a cached ``Jinja2Templates`` environment and static mounts."""

    def __init__(
        self,
        *,
        templates_dir: str | Path | Iterable[str | Path] | None = None,
        static_dir: str | Path | None = None,
        settings: ContentLanguageSettings | None = None,
    ) -> None:
        """Configure the service with template locations and settings."""

        self._template_dirs = self._coerce_template_dirs(templates_dir or TEMPLATES_DIR)
        self._static_dir = str(static_dir or ASSETS_DIR)
        self._settings = settings or current_settings()
        self._templates: Jinja2Templates | None = None
        self._mounted_apps: WeakSet[FastAPI] = WeakSet()

    def get_templates(self) -> Jinja2Templates:
        """Return the cached ``Jinja2Templates`` environment."""

        if self._templates is None:
            templates = Jinja2Templates(directory=list(self._template_dirs))
            templates.env.globals["settings"] = self._settings
            self._templates = templates
        return self._templates

    def apply_settings(self, settings: ContentLanguageSettings) -> None:
        """Update cached configuration when global settings change."""

        self._settings = settings
        if self._templates is not None:
            self._templates.env.globals["settings"] = settings

    def mount_static_resources(self, app: FastAPI) -> None:
        """Mount the widget assets once per application."""

        if app in self._mounted_apps:
            return
        app.mount(STATIC_MOUNT, StaticFiles(directory=self._static_dir), name=STATIC_ROUTE_NAME)
        self._mounted_apps.add(app)

    def render(
        self,
        template_name: str,
        *,
        request: Request,
        context: Mapping[str, Any] | None = None,
        status_code: int = 200,
    ) -> HTMLResponse:
        """Render ``template_name`` with ``context`` and default values."""

        payload = dict(context or {})
        payload.setdefault("site_title", self._settings.site_title)
        payload.setdefault("assets", {"css": [], "js": []})
        return self.get_templates().TemplateResponse(
            request,
            template_name,
            payload,
            status_code=status_code,
        )

    @staticmethod
    def _coerce_template_dirs(
        templates_dir: str | Path | Iterable[str | Path]
    ) -> list[str]:
        """Normalise ``templates_dir`` into a mutable list of search paths."""

        if isinstance(templates_dir, (str, Path)):
            return [str(templates_dir)]
        return [str(path) for path in templates_dir]


__all__ = ["ASSETS_DIR", "STATIC_MOUNT", "TEMPLATES_DIR", "TemplateService"]


# The End
