# -*- coding: utf-8 -*-
"""
tortoise

Tortoise ORM integration for content language settings.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .models import ContentLanguageSetting
from .store import MODELS_MODULE, TortoiseConfigStore

__all__ = ["ContentLanguageSetting", "MODELS_MODULE", "TortoiseConfigStore"]


# The End
