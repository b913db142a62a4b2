"""Event-handler classifier.

Handler names are partitioned into four categories per dialect. The tables
are built once at import into a single name -> category dict per dialect, so
every query is one pass over the node's attributes with one dict lookup per
attribute, whichever category is asked for.
"""

from __future__ import annotations

from enum import Enum

from a11y_analyzer.tree.adapters import dialect_of, iter_event_names
from a11y_analyzer.tree.nodes import Dialect, ElementNode


class HandlerCategory(str, Enum):
    CLICK = "click"
    KEYBOARD = "keyboard"
    MOUSE = "mouse"  # excluding click
    FOCUS = "focus"


def _with_capture(*names: str) -> frozenset[str]:
    return frozenset(names) | frozenset(f"{n}Capture" for n in names)


JSX_HANDLERS: dict[HandlerCategory, frozenset[str]] = {
    HandlerCategory.CLICK: _with_capture("onClick"),
    HandlerCategory.KEYBOARD: _with_capture("onKeyDown", "onKeyUp", "onKeyPress"),
    # React has no capture phase for enter/leave
    HandlerCategory.MOUSE: _with_capture("onMouseDown", "onMouseUp", "onMouseOver", "onMouseOut")
    | frozenset({"onMouseEnter", "onMouseLeave"}),
    HandlerCategory.FOCUS: _with_capture("onFocus", "onBlur"),
}

# Bare DOM event names; the template adapter strips "@" / "v-on:" and modifiers.
TEMPLATE_EVENTS: dict[HandlerCategory, frozenset[str]] = {
    HandlerCategory.CLICK: frozenset({"click"}),
    HandlerCategory.KEYBOARD: frozenset({"keydown", "keyup", "keypress"}),
    HandlerCategory.MOUSE: frozenset({
        "mousedown", "mouseup", "mouseover", "mouseout", "mouseenter", "mouseleave",
    }),
    HandlerCategory.FOCUS: frozenset({"focus", "blur"}),
}


def _index(table: dict[HandlerCategory, frozenset[str]]) -> dict[str, HandlerCategory]:
    index: dict[str, HandlerCategory] = {}
    for category, names in table.items():
        for name in names:
            if name in index:
                raise ValueError(f"{name!r} is in both {index[name].value} and {category.value}")
            index[name] = category
    return index


_CATEGORY_BY_NAME: dict[Dialect, dict[str, HandlerCategory]] = {
    Dialect.JSX: _index(JSX_HANDLERS),
    Dialect.TEMPLATE: _index(TEMPLATE_EVENTS),
}


def has_handler(node: ElementNode, category: HandlerCategory) -> bool:
    lookup = _CATEGORY_BY_NAME[dialect_of(node)]
    for name in iter_event_names(node):
        if name is not None and lookup.get(name) is category:
            return True
    return False


def has_any_handler(node: ElementNode) -> bool:
    lookup = _CATEGORY_BY_NAME[dialect_of(node)]
    for name in iter_event_names(node):
        if name is not None and name in lookup:
            return True
    return False


def handler_categories(node: ElementNode) -> frozenset[HandlerCategory]:
    """Every category with at least one handler on ``node``, in one pass."""
    lookup = _CATEGORY_BY_NAME[dialect_of(node)]
    found: set[HandlerCategory] = set()
    for name in iter_event_names(node):
        if name is not None:
            category = lookup.get(name)
            if category is not None:
                found.add(category)
    return frozenset(found)
