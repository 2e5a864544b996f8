# -*- coding: utf-8 -*-
"""
messages

User feedback channel collecting acknowledgments for a single request.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from pydantic import BaseModel

from .choices import StrChoices


class MessageLevel(StrChoices):
    """Severity of a user-visible message."""

    STATUS = ("status", "Status message")
    WARNING = ("warning", "Warning message")
    ERROR = ("error", "Error message")


class Message(BaseModel):
    """Single message queued for the user."""

    level: MessageLevel
    text: str


class MessageBag:
    """Ordered, request-scoped collection of user messages."""

    def __init__(self) -> None:
        self._messages: list[Message] = []

    def add(self, text: str, level: MessageLevel = MessageLevel.STATUS) -> None:
        """Queue ``text`` with ``level``."""
        self._messages.append(Message(level=level, text=text))

    def status(self, text: str) -> None:
        self.add(text, MessageLevel.STATUS)

    def warning(self, text: str) -> None:
        self.add(text, MessageLevel.WARNING)

    def error(self, text: str) -> None:
        self.add(text, MessageLevel.ERROR)

    def by_level(self, level: MessageLevel) -> list[str]:
        """Return queued texts of ``level`` without clearing them."""
        return [message.text for message in self._messages if message.level == level]

    def drain(self) -> list[Message]:
        """Return every queued message and empty the bag."""
        messages, self._messages = self._messages, []
        return messages

    def __len__(self) -> int:
        return len(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)


__all__ = ["Message", "MessageBag", "MessageLevel"]


# The End
