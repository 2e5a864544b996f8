# -*- coding: utf-8 -*-
"""
checkboxes

Multi-select checkbox list used for the entity type toggle.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Dict

from .base import BaseWidget
from .registry import registry


@registry.register("checkboxes")
class CheckboxesWidget(BaseWidget):
    """Render a ``ToggleDescriptor`` as an array of unique checked keys."""

    assets_css = ("/static/contentlang/language_admin.css",)

    def get_schema(self) -> Dict[str, Any]:
        node = self.ctx.node
        schema = {
            "type": "array",
            "title": self.get_title(),
            "format": "checkbox",
            "uniqueItems": True,
            "items": {
                "type": "string",
                "enum": list(node.options.keys()),
                "options": {"enum_titles": list(node.options.values())},
            },
            "default": self.get_startval(),
        }
        return self.merge_readonly(schema)

    def get_startval(self) -> list[str]:
        return self.ctx.node.checked()

# The End
