# -*- coding: utf-8 -*-
"""
choices

Django-like string choices used for language option lists.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from enum import Enum
from typing import Any, Iterable, List, Tuple, cast


class ChoicesMixin:
    """Common helpers for choices-like enums."""

    label: str  # set on each member

    @classmethod
    def choices(cls) -> List[Tuple[Any, str]]:
        members = cast(Iterable[Any], cls)
        return [(m.value, m.label) for m in members]  # type: ignore[attr-defined]

    @classmethod
    def values(cls) -> List[Any]:
        members = cast(Iterable[Any], cls)
        return [m.value for m in members]


class StrChoices(ChoicesMixin, str, Enum):
    """String-based choices: members defined as ('value', 'Label')."""

    def __new__(cls, value: str, label: str):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.label = label  # type: ignore[attr-defined]
        return obj

    def __str__(self) -> str:
        return str(self.value)


__all__ = ["ChoicesMixin", "StrChoices"]

# The End
