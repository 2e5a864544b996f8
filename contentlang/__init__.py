# -*- coding: utf-8 -*-
"""
__init__

Content language settings entry point.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from .application import ApplicationFactory, create_app
from .conf import ContentLanguageSettings, configure, current_settings
from .core import (
    EntityTypeDescriptor,
    EntityTypeRegistry,
    LanguageConfiguration,
    LanguageConfigurationKey,
)
from .forms import ContentLanguageFormBuilder, ContentLanguageSubmissionHandler
from .meta import __version__

__all__ = [
    "ApplicationFactory",
    "ContentLanguageFormBuilder",
    "ContentLanguageSettings",
    "ContentLanguageSubmissionHandler",
    "EntityTypeDescriptor",
    "EntityTypeRegistry",
    "LanguageConfiguration",
    "LanguageConfigurationKey",
    "__version__",
    "configure",
    "create_app",
    "current_settings",
]


# The End
