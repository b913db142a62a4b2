"""Component-role resolver: custom components -> the native tag they render.

Design systems wrap native elements (``<Nav>`` renders ``<nav>``) and expose
polymorphic props (``<Button as="a">``). Rules keyed on native semantics ask
``resolve_native_tag`` instead of reading the tag name, so wrapped components
are analysed rather than silently skipped.

Resolution order:
  1. A native (lower-case HTML) tag is returned as is.
  2. A mapped component yields its configured native tag.
  3. A polymorphic prop with a static value naming a native tag, or another
     mapped component, overrides (2): it is what actually renders.
  4. Otherwise the tag is unknown (None) and rules skip the node.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from a11y_analyzer.core.attributes import get_static_string_value
from a11y_analyzer.core.vocabulary import HTML_TAGS
from a11y_analyzer.errors import ConfigError
from a11y_analyzer.tree.nodes import ElementNode

log = logging.getLogger(__name__)

DEFAULT_POLYMORPHIC_PROPS: tuple[str, ...] = ("as", "component")


@dataclass(frozen=True)
class ComponentEntry:
    native_tag: str
    polymorphic_props: tuple[str, ...] | None = None  # None: use the mapping default


@dataclass(frozen=True, eq=False)
class ComponentMapping:
    """Immutable component -> native tag table for one analysis run."""
    components: Mapping[str, ComponentEntry] = field(default_factory=dict)
    polymorphic_props: tuple[str, ...] = DEFAULT_POLYMORPHIC_PROPS

    def __post_init__(self) -> None:
        for name, entry in self.components.items():
            if entry.native_tag not in HTML_TAGS:
                raise ConfigError(
                    f"component {name!r} maps to {entry.native_tag!r}, which is not a native HTML element"
                )
        object.__setattr__(self, "components", MappingProxyType(dict(self.components)))
        object.__setattr__(self, "polymorphic_props", tuple(self.polymorphic_props))

    @classmethod
    def build(
        cls,
        components: Mapping[str, str | ComponentEntry] | None = None,
        polymorphic_props: Iterable[str] = DEFAULT_POLYMORPHIC_PROPS,
    ) -> ComponentMapping:
        """Accept ``{"Nav": "nav"}`` shorthand alongside full entries."""
        entries = {
            name: value if isinstance(value, ComponentEntry) else ComponentEntry(value)
            for name, value in (components or {}).items()
        }
        return cls(entries, tuple(polymorphic_props))

    def props_for(self, component: str) -> tuple[str, ...]:
        entry = self.components.get(component)
        if entry is not None and entry.polymorphic_props is not None:
            return entry.polymorphic_props
        return self.polymorphic_props


EMPTY_MAPPING = ComponentMapping()


def is_native_tag(name: str) -> bool:
    return name in HTML_TAGS


def resolve_native_tag(node: ElementNode, mapping: ComponentMapping = EMPTY_MAPPING) -> str | None:
    """The native tag ``node`` stands for, or None when it cannot be determined."""
    tag = node.name
    if is_native_tag(tag):
        return tag

    entry = mapping.components.get(tag)
    resolved = entry.native_tag if entry is not None else None

    for prop in mapping.props_for(tag):
        value = get_static_string_value(node, prop)
        if value is None:
            continue
        if is_native_tag(value):
            resolved = value
            break
        target = mapping.components.get(value)
        if target is not None:
            resolved = target.native_tag
            break

    if resolved is None:
        log.debug("No native tag for <%s>", tag)
    return resolved


def is_element_like(node: ElementNode, mapping: ComponentMapping, tag: str) -> bool:
    return resolve_native_tag(node, mapping) == tag
