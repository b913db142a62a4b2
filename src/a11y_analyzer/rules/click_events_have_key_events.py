"""click-events-have-key-events: a click handler on a non-interactive element
needs a keyboard counterpart, or keyboard users cannot trigger it."""

from __future__ import annotations

from a11y_analyzer.core.attributes import get_static_string_value
from a11y_analyzer.core.events import HandlerCategory, handler_categories
from a11y_analyzer.core.vocabulary import NON_INTERACTIVE_ELEMENTS
from a11y_analyzer.rules.base import Rule, RuleContext, RuleMeta, on_all_dialects
from a11y_analyzer.tree.nodes import ElementNode

META = RuleMeta(
    id="click-events-have-key-events",
    type="suggestion",
    description="Enforce click handlers on non-interactive elements are paired with keyboard handlers",
    messages={
        "missingKeyEvent": (
            "<{element}> has a click handler but no keyboard handler. "
            "Add onKeyDown/onKeyUp (or @keydown/@keyup) so keyboard users can activate it."
        ),
    },
)


def create(context: RuleContext):
    def check(node: ElementNode) -> None:
        tag = context.native_tag(node)
        if tag not in NON_INTERACTIVE_ELEMENTS:
            return
        categories = handler_categories(node)
        if HandlerCategory.CLICK not in categories or HandlerCategory.KEYBOARD in categories:
            return
        if (get_static_string_value(node, "aria-hidden") or "").lower() == "true":
            return
        context.report(node, "missingKeyEvent", {"element": tag})

    return on_all_dialects(check)


rule = Rule(META, create)
