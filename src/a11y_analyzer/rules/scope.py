"""scope: the scope attribute belongs on <th>, with col/row/colgroup/rowgroup."""

from __future__ import annotations

from a11y_analyzer.core.attributes import get_attribute
from a11y_analyzer.core.vocabulary import VALID_SCOPE_VALUES
from a11y_analyzer.rules.base import Rule, RuleContext, RuleMeta, on_all_dialects
from a11y_analyzer.tree.nodes import ElementNode, StaticValue

META = RuleMeta(
    id="scope",
    type="problem",
    description="Enforce valid use of the scope attribute on table header elements",
    messages={
        "invalidElement": "The scope attribute is only valid on <th> elements, not <{element}>.",
        "invalidValue": 'Invalid scope value "{value}". Must be one of: col, row, colgroup, rowgroup.',
    },
)


def create(context: RuleContext):
    def check(node: ElementNode) -> None:
        scope_attr = get_attribute(node, "scope")
        if scope_attr is None:
            return
        tag = context.native_tag(node)
        if tag is None:
            return
        if tag != "th":
            context.report(node, "invalidElement", {"element": tag})
            return

        if isinstance(scope_attr.value, StaticValue) and isinstance(scope_attr.value.value, str):
            value = scope_attr.value.value.lower()
            # A bare template `scope` carries no value to check.
            if value and value not in VALID_SCOPE_VALUES:
                context.report(node, "invalidValue", {"value": value}, at=scope_attr.span)

    return on_all_dialects(check)


rule = Rule(META, create)
