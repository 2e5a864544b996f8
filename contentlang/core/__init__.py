# -*- coding: utf-8 -*-
"""
core

Domain layer of the content language settings package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .entities import BundleInfo, EntityMetadataService, EntityTypeDescriptor, EntityTypeRegistry
from .exceptions import (
    AdminError,
    HTTPError,
    InvalidSettingsKey,
    MalformedSubmission,
    MetadataUnavailable,
    StoreReadFailure,
    StoreWriteFailure,
)
from .language import (
    SITE_DEFAULT,
    LanguageCatalog,
    LanguageConfiguration,
    LanguageConfigurationKey,
    SpecialLangcode,
)
from .messages import Message, MessageBag, MessageLevel
from .resolver import DefaultConfigurationResolver, settings_key

__all__ = [
    "AdminError",
    "BundleInfo",
    "DefaultConfigurationResolver",
    "EntityMetadataService",
    "EntityTypeDescriptor",
    "EntityTypeRegistry",
    "HTTPError",
    "InvalidSettingsKey",
    "LanguageCatalog",
    "LanguageConfiguration",
    "LanguageConfigurationKey",
    "MalformedSubmission",
    "Message",
    "MessageBag",
    "MessageLevel",
    "MetadataUnavailable",
    "SITE_DEFAULT",
    "SpecialLangcode",
    "StoreReadFailure",
    "StoreWriteFailure",
    "settings_key",
]


# The End
