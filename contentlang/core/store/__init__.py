# -*- coding: utf-8 -*-
"""
store

Configuration store implementations.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .base import ConfigBatch, ConfigStore
from .memory import InMemoryConfigStore
from .sqlite import SQLiteConfigStore

__all__ = ["ConfigBatch", "ConfigStore", "InMemoryConfigStore", "SQLiteConfigStore"]


# The End
