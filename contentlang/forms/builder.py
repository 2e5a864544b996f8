# -*- coding: utf-8 -*-
"""
builder

Assemble the content language settings form from entity metadata.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Mapping

from ..core.entities import BundleInfo, EntityMetadataService, EntityTypeDescriptor
from ..core.exceptions import InvalidSettingsKey, MetadataUnavailable
from ..core.language import (
    LanguageCatalog,
    LanguageConfiguration,
    LanguageConfigurationKey,
    validate_key_part,
)
from ..core.resolver import DefaultConfigurationResolver
from .descriptors import (
    BundleRowDescriptor,
    ContainerDescriptor,
    FormDescriptor,
    ToggleDescriptor,
    VisibilityState,
)

if TYPE_CHECKING:  # pragma: no cover - import for type checking only
    from ..widgets.renderer import FormSchemaRenderer

logger = logging.getLogger(__name__)

BundleSource = Mapping[str, Mapping[str, BundleInfo] | Iterable[BundleInfo]]


class ContentLanguageFormBuilder:
    """Build the per entity type, per bundle language settings form."""

    def __init__(
        self,
        *,
        title: str = "Content language",
        languages: LanguageCatalog | None = None,
        renderer: "FormSchemaRenderer | None" = None,
    ) -> None:
        """Configure the form title and the renderer collecting widget assets."""

        self._title = title
        if renderer is None:
            from ..widgets.renderer import FormSchemaRenderer as _FormSchemaRenderer

            renderer = _FormSchemaRenderer(languages)
        self._renderer = renderer

    @property
    def renderer(self) -> "FormSchemaRenderer":
        """Return the schema renderer used for asset collection."""

        return self._renderer

    def build(
        self,
        entity_types: Iterable[EntityTypeDescriptor],
        bundles_by_type: BundleSource,
        current_config: Mapping[LanguageConfigurationKey, LanguageConfiguration],
    ) -> FormDescriptor:
        """Return the form tree for ``entity_types`` without side effects."""

        translatable = [
            entity_type
            for entity_type in entity_types
            if entity_type.translatable and self._is_keyable(entity_type.id)
        ]
        translatable.sort(key=lambda entity_type: entity_type.display_label)

        toggle = ToggleDescriptor()
        sections: list[ContainerDescriptor] = []
        for entity_type in translatable:
            label = entity_type.display_label
            rows = [
                BundleRowDescriptor(
                    entity_type=entity_type.id,
                    bundle=bundle.id,
                    label=bundle.label,
                    value=current_config.get(key, LanguageConfiguration.default()),
                )
                for bundle, key in self._keyed_bundles(entity_type.id, bundles_by_type)
            ]
            toggle.options[entity_type.id] = label
            toggle.default_value[entity_type.id] = any(
                row.value.has_custom_settings for row in rows
            )
            sections.append(
                ContainerDescriptor(
                    entity_type=entity_type.id,
                    title=label,
                    bundle_label=entity_type.bundle_label or label,
                    visible_when=VisibilityState(input_name=toggle.input_name(entity_type.id)),
                    rows=rows,
                )
            )

        form = FormDescriptor(title=self._title, toggle=toggle, sections=sections)
        form.assets = self._renderer.collect_assets(form)
        return form

    def build_from_services(
        self,
        metadata: EntityMetadataService,
        resolver: DefaultConfigurationResolver,
    ) -> FormDescriptor:
        """Fetch metadata and stored configuration, then build the form."""

        try:
            definitions = list(metadata.get_definitions())
            bundles = metadata.get_all_bundle_info()
        except Exception as exc:
            logger.exception("Entity metadata is unavailable")
            raise MetadataUnavailable(f"Unable to load entity metadata: {exc}") from exc

        translatable_ids = [entity_type.id for entity_type in definitions if entity_type.translatable]
        current = resolver.current_configuration(translatable_ids, bundles)
        return self.build(definitions, bundles, current)

    @staticmethod
    def _is_keyable(entity_type_id: str) -> bool:
        try:
            validate_key_part("entity type", entity_type_id)
        except InvalidSettingsKey as exc:
            logger.warning("Skipping entity type without a usable settings key: %s", exc)
            return False
        return True

    @classmethod
    def _keyed_bundles(
        cls,
        entity_type_id: str,
        bundles_by_type: BundleSource,
    ) -> list[tuple[BundleInfo, LanguageConfigurationKey]]:
        """Pair bundles with their settings key, dropping ids that cannot form one."""

        keyed: list[tuple[BundleInfo, LanguageConfigurationKey]] = []
        for bundle in cls._bundles_of(entity_type_id, bundles_by_type):
            try:
                keyed.append((bundle, LanguageConfigurationKey(entity_type_id, bundle.id)))
            except InvalidSettingsKey as exc:
                logger.warning("Skipping bundle without a usable settings key: %s", exc)
        return keyed

    @staticmethod
    def _bundles_of(entity_type_id: str, bundles_by_type: BundleSource) -> list[BundleInfo]:
        """Return bundles of ``entity_type_id``; unknown types have none."""

        bundles = bundles_by_type.get(entity_type_id)
        if not bundles:
            return []
        if isinstance(bundles, Mapping):
            return list(bundles.values())
        return list(bundles)


__all__ = ["ContentLanguageFormBuilder"]


# The End
