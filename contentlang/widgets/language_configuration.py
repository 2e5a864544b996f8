# -*- coding: utf-8 -*-
"""Language configuration widget

Compound control editing the default ``langcode`` of a bundle together with
the ``language_show`` flag.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com

The ``langcode`` select lists the special codes (``site_default``,
``current_interface``, ``authors_default``) followed by the languages of the
``LanguageCatalog`` found in the widget context. A stored langcode that is no
longer offered is kept as an extra option so the editor never drops it.
"""

from __future__ import annotations

from typing import Any

from .base import BaseWidget
from .registry import registry


@registry.register("language_configuration")
class LanguageConfigurationWidget(BaseWidget):
    """Select plus switch bound to one ``BundleRowDescriptor``."""

    assets_js = ("/static/contentlang/language_admin.js",)

    class Meta:
        css = ("/static/contentlang/language_admin.css",)

    def langcode_options(self) -> dict[str, str]:
        """Return ``langcode -> title`` options including the current value."""

        options = self.ctx.languages.options()
        current = self.ctx.node.value.langcode
        if current not in options:
            options[current] = current
        return options

    def get_schema(self) -> dict[str, Any]:
        """Build the object schema with ``langcode`` and ``language_show``."""
        value = self.ctx.node.value
        options = self.langcode_options()
        schema = {
            "type": "object",
            "title": self.get_title(),
            "format": "language_configuration",
            "properties": {
                "langcode": {
                    "type": "string",
                    "title": "Default language",
                    "enum": list(options.keys()),
                    "options": {"enum_titles": list(options.values())},
                    "default": value.langcode,
                },
                "language_show": {
                    "type": "boolean",
                    "title": "Show language selector on create and edit pages",
                    "format": "checkbox",
                    "default": value.language_show,
                },
            },
            "required": ["langcode", "language_show"],
        }
        return self.merge_readonly(schema)

    def get_startval(self) -> dict[str, Any]:
        return self.ctx.node.value.as_dict()


# The End
