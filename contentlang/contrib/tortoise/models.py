# -*- coding: utf-8 -*-
"""
models

Tortoise ORM models for persisted content language settings.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from tortoise import fields
from tortoise.models import Model


class ContentLanguageSetting(Model):
    """Language configuration of one ``entity_type.bundle`` pair."""

    id = fields.IntField(primary_key=True)
    key = fields.CharField(max_length=255, unique=True)
    langcode = fields.CharField(max_length=32, default="site_default")
    language_show = fields.BooleanField(default=False)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "content_language_settings"

    def __str__(self) -> str:
        return self.key


__all__ = ["ContentLanguageSetting"]


# The End
