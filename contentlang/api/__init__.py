# -*- coding: utf-8 -*-
"""
api

HTTP surface of the content language settings form.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .views import (
    ContentLanguageConfiguration,
    ContentLanguageViewSet,
    SettingsFormAPIView,
    SettingsFormPageView,
)

__all__ = [
    "ContentLanguageConfiguration",
    "ContentLanguageViewSet",
    "SettingsFormAPIView",
    "SettingsFormPageView",
]


# The End
