# -*- coding: utf-8 -*-
"""
descriptors

Declarative form tree produced by the settings form builder.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Annotated, Iterator, Literal, Union

from pydantic import BaseModel, Field as PField

from ..core.language import LanguageConfiguration

FORM_ID = "language_content_settings_form"
TOGGLE_NAME = "entity_types"
SETTINGS_NAME = "settings"


class VisibilityState(BaseModel):
    """Client-side condition under which a node is shown."""
    input_name: str
    checked: bool = True


class ToggleDescriptor(BaseModel):
    """Multi-select checkboxes listing the translatable entity types."""
    kind: Literal["toggle"] = "toggle"
    name: str = TOGGLE_NAME
    title: str = "Custom language settings"
    options: dict[str, str] = PField(default_factory=dict)
    default_value: dict[str, bool] = PField(default_factory=dict)

    def checked(self) -> list[str]:
        """Return option keys whose default state is checked."""
        return [key for key in self.options if self.default_value.get(key)]

    def input_name(self, entity_type: str) -> str:
        return f"{self.name}[{entity_type}]"


class BundleRowDescriptor(BaseModel):
    """Editable language configuration of one bundle."""
    kind: Literal["bundle"] = "bundle"
    entity_type: str
    bundle: str
    label: str
    value: LanguageConfiguration = PField(default_factory=LanguageConfiguration.default)

    @property
    def input_prefix(self) -> str:
        """Return the form field name prefix of the row's controls."""
        return f"{SETTINGS_NAME}[{self.entity_type}][{self.bundle}][settings][language]"

    def input_name(self, field: str) -> str:
        return f"{self.input_prefix}[{field}]"


class ContainerDescriptor(BaseModel):
    """Per entity type section holding one row per bundle."""
    kind: Literal["container"] = "container"
    entity_type: str
    title: str
    bundle_label: str
    visible_when: VisibilityState
    rows: list[BundleRowDescriptor] = PField(default_factory=list)

    def row(self, bundle: str) -> BundleRowDescriptor | None:
        for row in self.rows:
            if row.bundle == bundle:
                return row
        return None


FormNode = Annotated[
    Union[ToggleDescriptor, ContainerDescriptor, BundleRowDescriptor],
    PField(discriminator="kind"),
]


class FormDescriptor(BaseModel):
    """Root of the content language settings form."""
    form_id: str = FORM_ID
    title: str = "Content language"
    toggle: ToggleDescriptor = PField(default_factory=ToggleDescriptor)
    sections: list[ContainerDescriptor] = PField(default_factory=list)
    submit_label: str = "Save"
    assets: dict[str, list[str]] = PField(default_factory=lambda: {"css": [], "js": []})

    def section(self, entity_type: str) -> ContainerDescriptor | None:
        for section in self.sections:
            if section.entity_type == entity_type:
                return section
        return None

    def walk(self) -> Iterator[ToggleDescriptor | ContainerDescriptor | BundleRowDescriptor]:
        """Yield every node depth-first, starting with the toggle."""
        yield self.toggle
        for section in self.sections:
            yield section
            yield from section.rows


__all__ = [
    "BundleRowDescriptor",
    "ContainerDescriptor",
    "FORM_ID",
    "FormDescriptor",
    "FormNode",
    "SETTINGS_NAME",
    "TOGGLE_NAME",
    "ToggleDescriptor",
    "VisibilityState",
]

# The End
