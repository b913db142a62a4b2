"""Attribute resolver: one lookup interface over both dialects.

Spread attributes never count as supplying a named attribute. Values come
back exactly as written; callers lower-case role / scope / type themselves.
"""

from __future__ import annotations

from a11y_analyzer.tree.adapters import iter_entries
from a11y_analyzer.tree.nodes import AttributeEntry, ElementNode, StaticValue


def get_attribute(node: ElementNode, name: str) -> AttributeEntry | None:
    """Return the entry for ``name``; the last occurrence wins when repeated."""
    found: AttributeEntry | None = None
    for entry in iter_entries(node):
        if not entry.is_spread and entry.name == name:
            found = entry
    return found


def has_attribute(node: ElementNode, name: str) -> bool:
    return get_attribute(node, name) is not None


def has_spread(node: ElementNode) -> bool:
    return any(entry.is_spread for entry in iter_entries(node))


def get_static_value(node: ElementNode, name: str) -> str | int | float | bool | None:
    """The literal value of ``name``; None when missing or dynamic."""
    entry = get_attribute(node, name)
    if entry is None or not isinstance(entry.value, StaticValue):
        return None
    return entry.value.value


def get_static_string_value(node: ElementNode, name: str) -> str | None:
    """The literal string value of ``name``; None when missing, dynamic or not a string."""
    value = get_static_value(node, name)
    return value if isinstance(value, str) else None


def static_text(node: ElementNode, name: str) -> str | None:
    """Like get_static_value but any literal rendered as its attribute text.

    ``size={3}`` -> ``"3"``; ``multiple`` (JSX bare) -> ``"true"``.
    """
    value = get_static_value(node, name)
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
