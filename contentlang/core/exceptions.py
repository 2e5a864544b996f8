# -*- coding: utf-8 -*-
"""
exceptions

Custom domain exceptions for the content language settings core.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations


class AdminError(Exception):
    """Base class for content language admin exceptions."""


class InvalidSettingsKey(AdminError, ValueError):
    """Raised when an entity type or bundle id cannot form a settings key."""


# --- HTTP-like domain errors -------------------------------------------------

class HTTPError(AdminError):
    """Base class for exceptions carrying an HTTP status code."""

    status_code: int = 500

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or "")
        self.detail = detail


class MetadataUnavailable(HTTPError):
    """Raised when entity type or bundle metadata cannot be obtained."""

    status_code = 503


class StoreWriteFailure(HTTPError):
    """Raised when the configuration store fails to persist changes."""

    status_code = 503


class StoreReadFailure(HTTPError):
    """Raised when the configuration store cannot be read."""

    status_code = 503


class MalformedSubmission(HTTPError):
    """Raised when a strict submission lacks the expected nested keys."""

    status_code = 400


__all__ = [
    "AdminError",
    "HTTPError",
    "InvalidSettingsKey",
    "MalformedSubmission",
    "MetadataUnavailable",
    "StoreReadFailure",
    "StoreWriteFailure",
]


# The End
