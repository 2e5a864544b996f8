# -*- coding: utf-8 -*-
"""
context

Widget context helper.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

from ..core.language import LanguageCatalog


@dataclass(frozen=True)
class WidgetContext:
    """Everything a widget needs to know about itself and its environment."""
    node: Any                             # form descriptor node
    name: str                             # field name in the form
    languages: LanguageCatalog = field(default_factory=LanguageCatalog)
    readonly: bool = False                # field read-only?

# The End
