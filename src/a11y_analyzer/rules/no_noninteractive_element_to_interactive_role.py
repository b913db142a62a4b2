"""no-noninteractive-element-to-interactive-role

An interactive role on a non-interactive element (``<div role="button">``)
needs tabindex and a keyboard handler to be operable.
"""

from __future__ import annotations

from a11y_analyzer.core.attributes import has_attribute
from a11y_analyzer.core.events import HandlerCategory, has_handler
from a11y_analyzer.core.vocabulary import INTERACTIVE_ROLES, NON_INTERACTIVE_ELEMENTS
from a11y_analyzer.rules.base import Rule, RuleContext, RuleMeta, on_all_dialects, static_role
from a11y_analyzer.tree.nodes import ElementNode

META = RuleMeta(
    id="no-noninteractive-element-to-interactive-role",
    type="suggestion",
    description="Disallow interactive ARIA roles on non-interactive elements without keyboard support",
    messages={
        "noNoninteractiveToInteractive": (
            'Non-interactive element <{element}> should not have interactive role="{role}" '
            "without keyboard support. Add tabIndex and a keyboard event handler "
            "(onKeyDown/onKeyUp), or use a native interactive element like <button>."
        ),
    },
)


def create(context: RuleContext):
    def check(node: ElementNode) -> None:
        tag = context.native_tag(node)
        if tag not in NON_INTERACTIVE_ELEMENTS:
            return
        role = static_role(node)
        if role not in INTERACTIVE_ROLES:
            return

        focusable = has_attribute(node, "tabIndex") or has_attribute(node, "tabindex")
        if focusable and has_handler(node, HandlerCategory.KEYBOARD):
            return
        context.report(node, "noNoninteractiveToInteractive", {"element": tag, "role": role})

    return on_all_dialects(check)


rule = Rule(META, create)
