"""image-alt: images need an alt attribute (alt="" marks them decorative)."""

from __future__ import annotations

from a11y_analyzer.core.attributes import has_attribute
from a11y_analyzer.rules.base import Rule, RuleContext, RuleMeta, on_all_dialects
from a11y_analyzer.tree.nodes import ElementNode

META = RuleMeta(
    id="image-alt",
    type="problem",
    description="Enforce images have alternative text",
    messages={
        "missingAlt": 'Image must have an alt attribute. Use alt="" for decorative images.',
    },
)


def create(context: RuleContext):
    def check(node: ElementNode) -> None:
        if context.native_tag(node) != "img":
            return
        if not has_attribute(node, "alt"):
            context.report(node, "missingAlt")

    return on_all_dialects(check)


rule = Rule(META, create)
