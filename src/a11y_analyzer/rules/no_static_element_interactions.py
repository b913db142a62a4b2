"""no-static-element-interactions: handlers on a non-interactive element
with no role leave assistive technology unaware that it does anything."""

from __future__ import annotations

from a11y_analyzer.core.attributes import has_attribute
from a11y_analyzer.core.events import has_any_handler
from a11y_analyzer.core.vocabulary import NON_INTERACTIVE_ELEMENTS
from a11y_analyzer.rules.base import Rule, RuleContext, RuleMeta, on_all_dialects
from a11y_analyzer.tree.nodes import ElementNode

META = RuleMeta(
    id="no-static-element-interactions",
    type="suggestion",
    description="Disallow event handlers on non-interactive elements without a role",
    messages={
        "noStaticInteraction": (
            "<{element}> has event handlers but no role. Use a native interactive element, "
            "or add a role that describes what it does."
        ),
    },
    recommended=False,
)


def create(context: RuleContext):
    def check(node: ElementNode) -> None:
        tag = context.native_tag(node)
        if tag not in NON_INTERACTIVE_ELEMENTS:
            return
        # A dynamic role may well be interactive.
        if has_attribute(node, "role"):
            return
        if has_any_handler(node):
            context.report(node, "noStaticInteraction", {"element": tag})

    return on_all_dialects(check)


rule = Rule(META, create)
