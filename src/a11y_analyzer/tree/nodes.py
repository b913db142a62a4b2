"""Element, attribute and file dataclasses for both tree dialects - pure data, no logic.

The two dialects are separate variants tagged by ``dialect``; nothing here
inherits from a shared element class. Resolvers dispatch on the tag.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class Dialect(str, Enum):
    JSX = "jsx"
    TEMPLATE = "template"


@dataclass(frozen=True)
class SourceSpan:
    start: int = 0     # offset of first character
    end: int = 0       # offset one past the last character
    line: int = 1      # 1-based
    column: int = 0    # 0-based


# ── JSX dialect ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class JsxLiteral:
    """A quoted attribute value: ``role="button"``."""
    value: str | int | float | bool


@dataclass(frozen=True)
class JsxExpression:
    """An expression container: ``onClick={fn}`` or ``tabIndex={0}``."""
    source: str
    literal: str | int | float | bool | None = None  # set when the container holds a plain literal


@dataclass
class JsxAttribute:
    name: str
    value: JsxLiteral | JsxExpression | None = None  # None: bare attribute (means true)
    span: SourceSpan = field(default_factory=SourceSpan)


@dataclass
class JsxSpreadAttribute:
    argument: str  # "props" in {...props}
    span: SourceSpan = field(default_factory=SourceSpan)


# ── Template dialect ────────────────────────────────────────────────────────

@dataclass
class TemplateAttribute:
    name: str
    value: str | None = None  # None: bare attribute
    span: SourceSpan = field(default_factory=SourceSpan)


@dataclass
class TemplateDirective:
    """``v-on:click``, ``@click.stop``, ``:href``, ``v-bind="attrs"``, ``v-if``..."""
    name: str                       # "on", "bind", "model", "if", ...
    argument: str | None = None     # "click" in @click; None for v-bind="obj"
    expression: str = ""
    modifiers: tuple[str, ...] = ()
    span: SourceSpan = field(default_factory=SourceSpan)


# ── Elements ────────────────────────────────────────────────────────────────

@dataclass
class TextChild:
    value: str = ""
    dynamic: bool = False  # expression container / interpolation
    span: SourceSpan = field(default_factory=SourceSpan)


@dataclass(eq=False)
class JsxElement:
    name: str  # "div", "Button", "Form.Input"
    attributes: list[JsxAttribute | JsxSpreadAttribute] = field(default_factory=list)
    children: list[Child] = field(default_factory=list)
    span: SourceSpan = field(default_factory=SourceSpan)
    parent: JsxElement | TemplateElement | SourceFile | None = field(
        default=None, repr=False, compare=False,
    )
    dialect: Dialect = field(default=Dialect.JSX, init=False)


@dataclass(eq=False)
class TemplateElement:
    name: str
    attributes: list[TemplateAttribute | TemplateDirective] = field(default_factory=list)
    children: list[Child] = field(default_factory=list)
    span: SourceSpan = field(default_factory=SourceSpan)
    parent: JsxElement | TemplateElement | SourceFile | None = field(
        default=None, repr=False, compare=False,
    )
    dialect: Dialect = field(default=Dialect.TEMPLATE, init=False)


ElementNode = Union[JsxElement, TemplateElement]
Child = Union[JsxElement, TemplateElement, TextChild]


@dataclass(frozen=True)
class Comment:
    text: str
    start: int
    end: int


@dataclass(eq=False)
class SourceFile:
    """Root of one parsed file. Hashed by identity so it can key weak caches."""
    path: str
    text: str = ""
    children: list[Child] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)  # parser order, unsorted


# ── Dialect-agnostic views ──────────────────────────────────────────────────

@dataclass(frozen=True)
class StaticValue:
    """A literal known at analysis time."""
    value: str | int | float | bool


@dataclass(frozen=True)
class DynamicValue:
    """A value this layer cannot resolve. Unknown, never absent or falsy."""
    expression: str = ""


@dataclass(frozen=True)
class AttributeEntry:
    name: str                                  # "" for spreads
    is_spread: bool
    value: StaticValue | DynamicValue
    span: SourceSpan = field(default_factory=SourceSpan)


@dataclass(frozen=True)
class CommentEntry:
    text: str
    start_pos: int
    end_pos: int
