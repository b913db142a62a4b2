"""Constructors for element trees.

Parser adapters and tests use these instead of spelling out the dataclasses:

    page = source_file("App.jsx", [
        jsx("div", attr("role", "button"), attr("tabIndex", expr("0", 0))),
        template("input", bind(None, "attrs")),
    ])

``source_file`` wires every element's ``parent`` link up to the root.
"""

from __future__ import annotations

from typing import Iterable

from a11y_analyzer.tree.nodes import (
    Child,
    Comment,
    JsxAttribute,
    JsxElement,
    JsxExpression,
    JsxLiteral,
    JsxSpreadAttribute,
    SourceFile,
    SourceSpan,
    TemplateAttribute,
    TemplateDirective,
    TemplateElement,
    TextChild,
)


def span(start: int, end: int, line: int = 1, column: int = 0) -> SourceSpan:
    return SourceSpan(start, end, line, column)


# ── JSX ─────────────────────────────────────────────────────────────────────

def expr(source: str, literal: str | int | float | bool | None = None) -> JsxExpression:
    return JsxExpression(source, literal)


def attr(
    name: str,
    value: str | int | float | bool | JsxExpression | None = None,
    *,
    at: SourceSpan | None = None,
) -> JsxAttribute:
    """A JSX attribute. Plain Python values become literals; None is a bare attribute."""
    if value is not None and not isinstance(value, JsxExpression):
        value = JsxLiteral(value)
    return JsxAttribute(name, value, at or SourceSpan())


def spread(argument: str = "props", *, at: SourceSpan | None = None) -> JsxSpreadAttribute:
    return JsxSpreadAttribute(argument, at or SourceSpan())


def jsx(
    name: str,
    *attributes: JsxAttribute | JsxSpreadAttribute,
    children: Iterable[Child | str] = (),
    at: SourceSpan | None = None,
) -> JsxElement:
    return JsxElement(name, list(attributes), _children(children), at or SourceSpan())


# ── Template ────────────────────────────────────────────────────────────────

def html_attr(name: str, value: str | None = None, *, at: SourceSpan | None = None) -> TemplateAttribute:
    return TemplateAttribute(name, value, at or SourceSpan())


def directive(
    name: str,
    argument: str | None = None,
    expression: str = "",
    modifiers: Iterable[str] = (),
    *,
    at: SourceSpan | None = None,
) -> TemplateDirective:
    return TemplateDirective(name, argument, expression, tuple(modifiers), at or SourceSpan())


def on(event: str | None, handler: str = "handler", *, at: SourceSpan | None = None) -> TemplateDirective:
    """``@event.mod="handler"``. Modifiers are split off the event name."""
    if event is None:
        return directive("on", None, handler, at=at)
    name, *modifiers = event.split(".")
    return directive("on", name, handler, modifiers, at=at)


def bind(name: str | None, expression: str, *, at: SourceSpan | None = None) -> TemplateDirective:
    """``:name="expression"``, or ``v-bind="expression"`` when name is None."""
    return directive("bind", name, expression, at=at)


def template(
    name: str,
    *attributes: TemplateAttribute | TemplateDirective,
    children: Iterable[Child | str] = (),
    at: SourceSpan | None = None,
) -> TemplateElement:
    return TemplateElement(name, list(attributes), _children(children), at or SourceSpan())


# ── Shared ──────────────────────────────────────────────────────────────────

def text(value: str, *, dynamic: bool = False, at: SourceSpan | None = None) -> TextChild:
    return TextChild(value, dynamic, at or SourceSpan())


def source_file(
    path: str,
    children: Iterable[Child | str] = (),
    *,
    text: str = "",
    comments: Iterable[Comment] = (),
) -> SourceFile:
    root = SourceFile(path, text, _children(children), list(comments))
    link_parents(root)
    return root


def link_parents(root: SourceFile) -> None:
    """Point every element's ``parent`` at its enclosing element or the root."""
    stack: list[tuple[object, list[Child]]] = [(root, root.children)]
    while stack:
        parent, children = stack.pop()
        for child in children:
            if isinstance(child, (JsxElement, TemplateElement)):
                child.parent = parent
                stack.append((child, child.children))


def _children(items: Iterable[Child | str]) -> list[Child]:
    return [TextChild(item) if isinstance(item, str) else item for item in items]
