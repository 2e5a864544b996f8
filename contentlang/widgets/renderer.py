# -*- coding: utf-8 -*-
"""
renderer

Render a settings ``FormDescriptor`` into a JSON Schema document.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any

from ..core.language import LanguageCatalog
from ..forms.descriptors import SETTINGS_NAME, FormDescriptor, FormNode
from .base import BaseWidget
from .context import WidgetContext
from .registry import WidgetRegistry, registry as default_registry


class FormSchemaRenderer:
    """Walk the form tree and delegate each leaf node to its widget."""

    def __init__(
        self,
        languages: LanguageCatalog | None = None,
        *,
        widget_registry: WidgetRegistry | None = None,
        readonly: bool = False,
    ) -> None:
        """Bind the renderer to a language catalog and widget registry."""

        self._languages = languages or LanguageCatalog()
        self._registry = widget_registry or default_registry
        self._readonly = readonly

    def widget_for(self, node: FormNode, name: str) -> BaseWidget:
        """Instantiate the widget registered for ``node``."""

        key = self._registry.resolve_for_node(node)
        widget_cls = self._registry.get(key)
        if widget_cls is None:
            raise LookupError(f"Widget '{key}' is not registered")
        ctx = WidgetContext(
            node=node,
            name=name,
            languages=self._languages,
            readonly=self._readonly,
        )
        return widget_cls(ctx)

    def collect_assets(self, form: FormDescriptor) -> dict[str, list[str]]:
        """Return the de-duplicated assets of every widget used by ``form``."""

        css: list[str] = []
        js: list[str] = []
        for widget in self._widgets(form):
            assets = widget.get_assets()
            css.extend(item for item in assets["css"] if item not in css)
            js.extend(item for item in assets["js"] if item not in js)
        return {"css": css, "js": js}

    def render(self, form: FormDescriptor) -> dict[str, Any]:
        """Return ``schema`` and ``startval`` documents for ``form``."""

        toggle = self.widget_for(form.toggle, form.toggle.name)
        settings_properties: dict[str, Any] = {}
        settings_start: dict[str, Any] = {}
        for section in form.sections:
            bundle_properties: dict[str, Any] = {}
            bundle_start: dict[str, Any] = {}
            for row in section.rows:
                widget = self.widget_for(row, row.input_prefix)
                bundle_properties[row.bundle] = {
                    "type": "object",
                    "title": row.label,
                    "properties": {
                        "settings": {
                            "type": "object",
                            "properties": {"language": widget.get_schema()},
                        }
                    },
                }
                bundle_start[row.bundle] = {"settings": {"language": widget.get_startval()}}
            settings_properties[section.entity_type] = {
                "type": "object",
                "title": section.title,
                "description": section.bundle_label,
                "options": {
                    "dependencies": {form.toggle.name: section.entity_type},
                },
                "properties": bundle_properties,
            }
            settings_start[section.entity_type] = bundle_start

        schema = {
            "type": "object",
            "title": form.title,
            "properties": {
                form.toggle.name: toggle.get_schema(),
                SETTINGS_NAME: {
                    "type": "object",
                    "properties": settings_properties,
                },
            },
        }
        startval = {
            form.toggle.name: toggle.get_startval(),
            SETTINGS_NAME: settings_start,
        }
        return {"schema": schema, "startval": startval}

    def _widgets(self, form: FormDescriptor) -> list[BaseWidget]:
        widgets: list[BaseWidget] = [self.widget_for(form.toggle, form.toggle.name)]
        for section in form.sections:
            widgets.extend(self.widget_for(row, row.input_prefix) for row in section.rows)
        return widgets


__all__ = ["FormSchemaRenderer"]


# The End
