# -*- coding: utf-8 -*-
"""
widgets

Widgets rendering the content language settings form.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .base import BaseWidget
from .context import WidgetContext
from .registry import WidgetRegistry, registry

# Importing the modules registers the widgets.
from .checkboxes import CheckboxesWidget
from .language_configuration import LanguageConfigurationWidget
from .renderer import FormSchemaRenderer

register_widget = registry.register

__all__ = [
    "BaseWidget",
    "CheckboxesWidget",
    "FormSchemaRenderer",
    "LanguageConfigurationWidget",
    "WidgetContext",
    "WidgetRegistry",
    "register_widget",
    "registry",
]


# The End
