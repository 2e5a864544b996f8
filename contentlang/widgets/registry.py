# -*- coding: utf-8 -*-
"""
registry

Widget registry.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Dict, Type

from .base import BaseWidget


class WidgetRegistry:
    def __init__(self) -> None:
        self._by_key: Dict[str, Type[BaseWidget]] = {}

    def register(self, key: str):
        """Decorator to register a widget by key."""
        def _decorator(cls: Type[BaseWidget]) -> Type[BaseWidget]:
            cls.key = key
            self._by_key[key] = cls
            return cls
        return _decorator

    def get(self, key: str) -> Type[BaseWidget] | None:
        return self._by_key.get(key)

    def resolve_for_node(self, node: Any) -> str:
        """Map a form descriptor node to a widget key."""
        kind = getattr(node, "kind", "")
        if kind == "toggle":
            return "checkboxes"
        if kind == "bundle":
            return "language_configuration"
        raise LookupError(f"No widget available for node kind {kind!r}")

registry = WidgetRegistry()

# The End
