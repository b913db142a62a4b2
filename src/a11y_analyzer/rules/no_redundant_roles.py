"""no-redundant-roles: an explicit role equal to the implicit one is noise.

``<button role="button">``, ``<nav role="navigation">``. Reported on the role
attribute with a suggestion to remove it.
"""

from __future__ import annotations

from a11y_analyzer.core.attributes import get_attribute, has_attribute, static_text
from a11y_analyzer.core.vocabulary import implicit_role
from a11y_analyzer.rules.base import (
    Rule,
    RuleContext,
    RuleMeta,
    on_all_dialects,
    remove_suggestion,
    static_role,
)
from a11y_analyzer.tree.nodes import ElementNode

META = RuleMeta(
    id="no-redundant-roles",
    type="suggestion",
    description="Disallow redundant roles that match an element's implicit ARIA role",
    messages={
        "redundantRole": (
            'The role "{role}" is redundant for <{element}>. It is the element\'s implicit '
            "ARIA role and does not need to be specified explicitly."
        ),
    },
    has_suggestions=True,
)


def create(context: RuleContext):
    def check(node: ElementNode) -> None:
        tag = context.native_tag(node)
        if tag is None:
            return
        role = static_role(node)
        if role is None:
            return

        implied = implicit_role(
            tag,
            lambda name: static_text(node, name),
            lambda name: has_attribute(node, name),
        )
        if implied is None or implied != role:
            return

        role_attr = get_attribute(node, "role")
        context.report(
            node,
            "redundantRole",
            {"role": role, "element": tag},
            at=role_attr.span,
            suggestions=[remove_suggestion(f'Remove redundant role="{role}"', role_attr.span)],
        )

    return on_all_dialects(check)


rule = Rule(META, create)
