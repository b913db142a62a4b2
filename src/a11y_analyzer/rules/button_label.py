"""button-label: buttons need an accessible name.

The name may come from anywhere in the content: nested text, an image with
alt text, a labelled child. A custom component inside the button may render
text we cannot see, so its presence counts as a possible name.
"""

from __future__ import annotations

from a11y_analyzer.core.attributes import get_attribute, has_attribute
from a11y_analyzer.rules.base import Rule, RuleContext, RuleMeta, on_all_dialects
from a11y_analyzer.tree.adapters import has_text_content, iter_descendants
from a11y_analyzer.tree.nodes import ElementNode, StaticValue

META = RuleMeta(
    id="button-label",
    type="problem",
    description="Enforce buttons have an accessible label",
    messages={
        "missingLabel": "Button must have text content, aria-label, aria-labelledby or title.",
    },
)

LABEL_ATTRIBUTES = ("aria-label", "aria-labelledby", "title")


def _may_name(child: ElementNode, context: RuleContext) -> bool:
    tag = context.native_tag(child)
    if tag is None:
        return True
    if any(has_attribute(child, name) for name in ("aria-label", "aria-labelledby")):
        return True
    if tag == "img":
        alt = get_attribute(child, "alt")
        # alt="" marks the image decorative
        return alt is not None and not (isinstance(alt.value, StaticValue) and alt.value.value == "")
    return False


def create(context: RuleContext):
    def check(node: ElementNode) -> None:
        if context.native_tag(node) != "button":
            return
        if has_text_content(node):
            return
        if any(has_attribute(node, name) for name in LABEL_ATTRIBUTES):
            return
        if any(_may_name(child, context) for child in iter_descendants(node)):
            return
        context.report(node, "missingLabel")

    return on_all_dialects(check)


rule = Rule(META, create)
