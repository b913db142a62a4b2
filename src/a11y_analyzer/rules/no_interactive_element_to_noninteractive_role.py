"""no-interactive-element-to-noninteractive-role

role="none" / role="presentation" on a natively interactive element hides
its semantics from assistive technology while it stays focusable.
"""

from __future__ import annotations

from a11y_analyzer.core.attributes import get_attribute, get_static_string_value
from a11y_analyzer.core.vocabulary import INTERACTIVE_ELEMENTS, PRESENTATION_ROLES
from a11y_analyzer.rules.base import Rule, RuleContext, RuleMeta, on_all_dialects, static_role
from a11y_analyzer.tree.nodes import ElementNode, StaticValue

META = RuleMeta(
    id="no-interactive-element-to-noninteractive-role",
    type="problem",
    description='Disallow assigning role="none" or role="presentation" to interactive elements',
    messages={
        "noInteractiveToNoninteractive": (
            'Interactive element <{element}> cannot have role="{role}". '
            "This removes its interactive semantics from assistive technologies while "
            "keeping it focusable, causing confusion for screen reader users."
        ),
    },
)


def _anchor_is_interactive(node: ElementNode) -> bool:
    href = get_attribute(node, "href")
    if href is None:
        return False
    if isinstance(href.value, StaticValue):
        return isinstance(href.value.value, str) and href.value.value != ""
    return True


def create(context: RuleContext):
    def check(node: ElementNode) -> None:
        tag = context.native_tag(node)
        if tag not in INTERACTIVE_ELEMENTS:
            return
        role = static_role(node)
        if role not in PRESENTATION_ROLES:
            return
        if tag == "a" and not _anchor_is_interactive(node):
            return
        if tag == "input" and (get_static_string_value(node, "type") or "").lower() == "hidden":
            return
        context.report(node, "noInteractiveToNoninteractive", {"element": tag, "role": role})

    return on_all_dialects(check)


rule = Rule(META, create)
