# -*- coding: utf-8 -*-
"""
entities

Entity type and bundle metadata consumed by the settings form.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from threading import RLock
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from .language import validate_key_part


class EntityTypeDescriptor(BaseModel):
    """Read-only description of a content entity type."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str = ""
    translatable: bool = False
    bundle_label: str | None = None

    @property
    def display_label(self) -> str:
        """Return the label, falling back to the identifier when empty."""
        return self.label or self.id


class BundleInfo(BaseModel):
    """Sub-variant of an entity type with its own label."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str


@runtime_checkable
class EntityMetadataService(Protocol):
    """Protocol describing the metadata queries the settings form relies on."""

    def get_definitions(self) -> list[EntityTypeDescriptor]:  # pragma: no cover - structural
        """Return every known entity type."""

    def get_all_bundle_info(self) -> dict[str, dict[str, BundleInfo]]:  # pragma: no cover - structural
        """Return bundle info keyed by entity type id then bundle id."""


class EntityTypeRegistry:
    """In-process metadata service populated by applications at boot time."""

    def __init__(self) -> None:
        """Prepare empty, lock-protected registries."""

        self._lock = RLock()
        self._definitions: dict[str, EntityTypeDescriptor] = {}
        self._bundles: dict[str, dict[str, BundleInfo]] = {}

    def register(self, descriptor: EntityTypeDescriptor) -> EntityTypeDescriptor:
        """Register or replace ``descriptor`` under its identifier.

        Raises :class:`InvalidSettingsKey` when the id cannot form a settings key.
        """

        validate_key_part("entity type", descriptor.id)
        with self._lock:
            self._definitions[descriptor.id] = descriptor
        return descriptor

    def register_entity_type(
        self,
        entity_type_id: str,
        *,
        label: str = "",
        translatable: bool = False,
        bundle_label: str | None = None,
    ) -> EntityTypeDescriptor:
        """Build and register a descriptor from keyword arguments."""

        return self.register(
            EntityTypeDescriptor(
                id=entity_type_id,
                label=label,
                translatable=translatable,
                bundle_label=bundle_label,
            )
        )

    def register_bundle(self, entity_type_id: str, bundle_id: str, label: str | None = None) -> BundleInfo:
        """Attach a bundle to an already registered entity type."""

        validate_key_part("bundle", bundle_id)
        with self._lock:
            if entity_type_id not in self._definitions:
                raise KeyError(f"Entity type '{entity_type_id}' is not registered")
            info = BundleInfo(id=bundle_id, label=label or bundle_id)
            self._bundles.setdefault(entity_type_id, {})[bundle_id] = info
        return info

    def get_definition(self, entity_type_id: str) -> EntityTypeDescriptor:
        """Return the descriptor registered for ``entity_type_id``."""

        with self._lock:
            try:
                return self._definitions[entity_type_id]
            except KeyError:
                raise KeyError(f"Entity type '{entity_type_id}' is not registered") from None

    def get_definitions(self) -> list[EntityTypeDescriptor]:
        """Return registered descriptors in registration order."""

        with self._lock:
            return list(self._definitions.values())

    def get_all_bundle_info(self) -> dict[str, dict[str, BundleInfo]]:
        """Return a copy of the bundle map keyed by entity type id."""

        with self._lock:
            return {key: dict(bundles) for key, bundles in self._bundles.items()}

    def clear(self) -> None:
        """Drop every registered entity type and bundle."""

        with self._lock:
            self._definitions.clear()
            self._bundles.clear()


__all__ = [
    "BundleInfo",
    "EntityMetadataService",
    "EntityTypeDescriptor",
    "EntityTypeRegistry",
]


# The End
