# -*- coding: utf-8 -*-
"""
base

Base widget class.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Dict
from abc import ABC, abstractmethod
from .context import WidgetContext


class BaseWidget(ABC):
    """
    Base Widget Class

    Widgets turn form descriptor nodes into JSON Schema fragments and
    start values.
    """
    key: str = "base"
    assets_css: tuple[str, ...] = ()
    assets_js: tuple[str, ...] = ()

    class Meta:
        css: tuple[str, ...] = ()
        js: tuple[str, ...] = ()

    def __init__(self, ctx: WidgetContext) -> None:
        self.ctx = ctx

    def get_assets(self) -> Dict[str, list[str]]:
        """
        Return widget assets:
        {
            "css": [...],
            "js": [...],
        }
        Class attributes come first, then ``Meta``; order is preserved and
        duplicates are removed.
        """

        css: list[str] = []
        js: list[str] = []

        css.extend(getattr(self, "assets_css", ()))
        js.extend(getattr(self, "assets_js", ()))

        meta = getattr(self, "Meta", None)
        if meta:
            css.extend(getattr(meta, "css", ()))
            js.extend(getattr(meta, "js", ()))

        def _uniq(seq):
            seen = set()
            for x in seq:
                if x not in seen:
                    seen.add(x)
                    yield x

        return {"css": list(_uniq(css)), "js": list(_uniq(js))}

    def get_title(self) -> str:
        for attr in ("title", "label"):
            value = getattr(self.ctx.node, attr, None)
            if value:
                return value
        name = self.ctx.name.replace("_", " ")
        return name[:1].upper() + name[1:]

    # === Schema Generation ===
    @abstractmethod
    def get_schema(self) -> Dict[str, Any]:
        """JSON Schema fragment for the node."""
        raise NotImplementedError

    def merge_readonly(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        """Insert the ``readonly`` flag into the schema if needed."""
        if self.ctx.readonly:
            schema["readonly"] = True
        return schema

    @abstractmethod
    def get_startval(self) -> Any:
        """Start value of the node for the editor."""
        raise NotImplementedError

# The End
