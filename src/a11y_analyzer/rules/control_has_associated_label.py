"""control-has-associated-label: ARIA-role controls need an accessible name.

Native controls are left to button-label and form-label; this rule covers
elements that become controls through an explicit role (``<div
role="button">``, ``<span role="checkbox">``). The role, not the tag, makes
the element a control, so custom components that resolve to no native tag
are checked too.
"""

from __future__ import annotations

from a11y_analyzer.core.attributes import has_attribute
from a11y_analyzer.core.vocabulary import INTERACTIVE_ROLES
from a11y_analyzer.rules.base import Rule, RuleContext, RuleMeta, on_all_dialects, static_role
from a11y_analyzer.tree.adapters import has_text_content
from a11y_analyzer.tree.nodes import ElementNode

META = RuleMeta(
    id="control-has-associated-label",
    type="problem",
    description="Enforce interactive ARIA-role controls have an accessible label",
    messages={
        "missingLabel": (
            'Element with role="{role}" must have an accessible label. '
            "Add aria-label, aria-labelledby, title, or visible text content."
        ),
    },
)

COVERED_NATIVELY = frozenset({"button", "input", "select", "textarea", "a"})
LABEL_ATTRIBUTES = ("aria-label", "aria-labelledby", "title")


def create(context: RuleContext):
    def check(node: ElementNode) -> None:
        if context.native_tag(node) in COVERED_NATIVELY:
            return
        role = static_role(node)
        if role not in INTERACTIVE_ROLES:
            return
        if any(has_attribute(node, name) for name in LABEL_ATTRIBUTES):
            return
        if has_text_content(node):
            return
        context.report(node, "missingLabel", {"role": role})

    return on_all_dialects(check)


rule = Rule(META, create)
