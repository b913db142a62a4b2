"""prefer-tag-over-role

Recommends the native element over an ARIA role on a generic element. Fires
even when keyboard support is present: native elements behave better.
"""

from __future__ import annotations

from a11y_analyzer.core.vocabulary import GENERIC_ELEMENTS, ROLE_TO_TAG
from a11y_analyzer.rules.base import Rule, RuleContext, RuleMeta, on_all_dialects, static_role
from a11y_analyzer.tree.nodes import ElementNode

META = RuleMeta(
    id="prefer-tag-over-role",
    type="suggestion",
    description="Enforce using semantic native HTML elements over ARIA role attributes",
    messages={
        "preferTag": 'Prefer {tag} over role="{role}" for better native accessibility semantics.',
    },
    recommended=False,
)


def create(context: RuleContext):
    def check(node: ElementNode) -> None:
        if context.native_tag(node) not in GENERIC_ELEMENTS:
            return
        role = static_role(node)
        preferred = ROLE_TO_TAG.get(role) if role else None
        if preferred:
            context.report(node, "preferTag", {"tag": preferred, "role": role})

    return on_all_dialects(check)


rule = Rule(META, create)
