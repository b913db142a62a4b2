"""Dialect adapters: raw JSX / template attributes -> dialect-agnostic views.

Everything that knows about spread syntax, directive syntax or literal
expression containers lives here. The resolvers in ``a11y_analyzer.core``
only see ``AttributeEntry`` values and bare event names.
"""

from __future__ import annotations

from typing import Iterator

from a11y_analyzer.errors import TreeShapeError
from a11y_analyzer.tree.nodes import (
    AttributeEntry,
    Dialect,
    DynamicValue,
    ElementNode,
    JsxAttribute,
    JsxExpression,
    JsxLiteral,
    JsxSpreadAttribute,
    SourceFile,
    StaticValue,
    TemplateAttribute,
    TemplateDirective,
    TextChild,
)

_V_ON = "v-on:"


def dialect_of(node: ElementNode) -> Dialect:
    dialect = getattr(node, "dialect", None)
    if not isinstance(dialect, Dialect):
        raise TreeShapeError(f"{type(node).__name__} carries no dialect tag")
    return dialect


def _raw_attributes(node: ElementNode) -> list:
    attrs = getattr(node, "attributes", None)
    if attrs is None:
        raise TreeShapeError(
            f"{getattr(node, 'dialect', '?')} element <{getattr(node, 'name', '?')}> has no attribute list"
        )
    return attrs


def iter_entries(node: ElementNode) -> Iterator[AttributeEntry]:
    """Yield one AttributeEntry per raw attribute, in source order."""
    dialect = dialect_of(node)
    convert = _jsx_entry if dialect is Dialect.JSX else _template_entry
    for attr in _raw_attributes(node):
        yield convert(attr, node)


def iter_event_names(node: ElementNode) -> Iterator[str | None]:
    """Yield a candidate event-handler name per raw attribute.

    JSX yields the prop name as written (``onClick``). The template dialect
    yields the bare event name (``click``) for ``@click``, ``v-on:click`` and
    ``click`` attributes alike. Spreads and non-handler directives yield None.
    """
    dialect = dialect_of(node)
    if dialect is Dialect.JSX:
        for attr in _raw_attributes(node):
            yield attr.name if isinstance(attr, JsxAttribute) else None
        return
    for attr in _raw_attributes(node):
        if isinstance(attr, TemplateDirective):
            yield attr.argument if attr.name == "on" else None
        elif isinstance(attr, TemplateAttribute):
            yield _bare_event_name(attr.name)
        else:
            yield None


def has_text_content(node: ElementNode) -> bool:
    """True when any descendant is non-blank text or a dynamic expression."""
    stack = list(node.children or ())
    while stack:
        child = stack.pop()
        if isinstance(child, TextChild):
            if child.dynamic or child.value.strip():
                return True
        else:
            stack.extend(child.children or ())
    return False


def iter_descendants(node: ElementNode) -> Iterator[ElementNode]:
    """Element descendants of ``node`` in pre-order."""
    stack = [c for c in reversed(node.children or ()) if not isinstance(c, TextChild)]
    while stack:
        child = stack.pop()
        yield child
        stack.extend(c for c in reversed(child.children or ()) if not isinstance(c, TextChild))


def root_of(node: ElementNode) -> SourceFile | None:
    """Walk parent links up to the owning SourceFile (None when detached)."""
    current = node
    while current is not None and not isinstance(current, SourceFile):
        current = current.parent
    return current


# ── JSX ─────────────────────────────────────────────────────────────────────

def _jsx_entry(attr, node: ElementNode) -> AttributeEntry:
    if isinstance(attr, JsxSpreadAttribute):
        return AttributeEntry("", True, DynamicValue(attr.argument), attr.span)
    if not isinstance(attr, JsxAttribute):
        raise TreeShapeError(f"<{node.name}>: {type(attr).__name__} is not a JSX attribute")

    value = attr.value
    if value is None:
        resolved: StaticValue | DynamicValue = StaticValue(True)
    elif isinstance(value, JsxLiteral):
        resolved = StaticValue(value.value)
    elif isinstance(value, JsxExpression):
        resolved = (
            StaticValue(value.literal) if value.literal is not None
            else DynamicValue(value.source)
        )
    else:
        raise TreeShapeError(f"<{node.name} {attr.name}>: unsupported value {value!r}")
    return AttributeEntry(attr.name, False, resolved, attr.span)


# ── Template ────────────────────────────────────────────────────────────────

def _template_entry(attr, node: ElementNode) -> AttributeEntry:
    if isinstance(attr, TemplateAttribute):
        # A bare HTML attribute has the empty string as its value.
        return AttributeEntry(attr.name, False, StaticValue(attr.value or ""), attr.span)
    if not isinstance(attr, TemplateDirective):
        raise TreeShapeError(f"<{node.name}>: {type(attr).__name__} is not a template attribute")

    if attr.name == "bind":
        if attr.argument is None:
            return AttributeEntry("", True, DynamicValue(attr.expression), attr.span)
        literal = _quoted_literal(attr.expression)
        value = StaticValue(literal) if literal is not None else DynamicValue(attr.expression)
        return AttributeEntry(attr.argument, False, value, attr.span)

    if attr.name == "on" and attr.argument is None:
        # v-on="listeners" forwards an unknown set of handlers
        return AttributeEntry("", True, DynamicValue(attr.expression), attr.span)

    name = f"v-{attr.name}:{attr.argument}" if attr.argument else f"v-{attr.name}"
    return AttributeEntry(name, False, DynamicValue(attr.expression), attr.span)


def _quoted_literal(expression: str) -> str | None:
    """``'button'`` -> ``button``; anything else -> None."""
    text = expression.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"`":
        inner = text[1:-1]
        if text[0] not in inner and "${" not in inner:
            return inner
    return None


def _bare_event_name(name: str) -> str:
    if name.startswith("@"):
        name = name[1:]
    elif name.startswith(_V_ON):
        name = name[len(_V_ON):]
    return name.partition(".")[0]
