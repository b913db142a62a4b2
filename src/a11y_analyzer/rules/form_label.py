"""form-label: form controls need an associated label.

A spread never counts as supplying a label: ``<input {...props}>`` is
reported unless a labelling attribute is written out.
"""

from __future__ import annotations

from a11y_analyzer.core.attributes import get_attribute, get_static_string_value, has_attribute
from a11y_analyzer.rules.base import Rule, RuleContext, RuleMeta, on_all_dialects
from a11y_analyzer.tree.nodes import ElementNode, StaticValue

META = RuleMeta(
    id="form-label",
    type="problem",
    description="Enforce form controls have associated labels",
    messages={
        "missingLabel": (
            "Form control must have an associated label "
            "(use id/for, aria-label, or aria-labelledby)"
        ),
    },
)

FORM_CONTROLS = frozenset({"input", "select", "textarea"})


def _has_id(node: ElementNode) -> bool:
    # An id lets a <label for> elsewhere point at the control; a dynamic id may too.
    entry = get_attribute(node, "id")
    if entry is None:
        return False
    if isinstance(entry.value, StaticValue):
        return entry.value.value not in ("", False)
    return True


def create(context: RuleContext):
    def check(node: ElementNode) -> None:
        tag = context.native_tag(node)
        if tag not in FORM_CONTROLS:
            return
        if tag == "input" and (get_static_string_value(node, "type") or "").lower() == "hidden":
            return
        if has_attribute(node, "aria-label") or has_attribute(node, "aria-labelledby"):
            return
        if _has_id(node):
            return
        context.report(node, "missingLabel")

    return on_all_dialects(check)


rule = Rule(META, create)
