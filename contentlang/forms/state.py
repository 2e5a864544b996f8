# -*- coding: utf-8 -*-
"""
state

Turn bracketed HTML form field names into a nested form state.

``settings[article][page][settings][language][langcode]=fr`` becomes
``{"settings": {"article": {"page": {"settings": {"language": {"langcode": "fr"}}}}}}``.
When a name repeats, the last value wins, which lets a hidden ``0`` input
precede a checkbox of the same name.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import re
from typing import Any, Iterable

_SEGMENT = re.compile(r"\[([^\[\]]*)\]")


class FormStateParser:
    """Parse ``(name, value)`` pairs into nested dictionaries."""

    def split_name(self, name: str) -> list[str]:
        """Return the path segments encoded in ``name``."""

        head, bracket, rest = name.partition("[")
        if not bracket:
            return [name]
        segments = [head]
        remainder = "[" + rest
        position = 0
        for match in _SEGMENT.finditer(remainder):
            if match.start() != position:
                break
            segments.append(match.group(1))
            position = match.end()
        if position != len(remainder):
            return [name]
        return segments

    def parse(self, items: Iterable[tuple[str, Any]]) -> dict[str, Any]:
        """Return the nested form state for ``items``."""

        state: dict[str, Any] = {}
        for name, value in items:
            segments = self.split_name(name)
            if any(segment == "" for segment in segments):
                continue
            node = state
            for segment in segments[:-1]:
                child = node.get(segment)
                if not isinstance(child, dict):
                    child = {}
                    node[segment] = child
                node = child
            node[segments[-1]] = value
        return state


__all__ = ["FormStateParser"]


# The End
