"""anchor-is-valid: anchors must carry a real href.

An anchor without a usable href is not a link; clickable actions belong on a
<button>.
"""

from __future__ import annotations

from a11y_analyzer.core.attributes import get_attribute
from a11y_analyzer.core.events import HandlerCategory, has_handler
from a11y_analyzer.core.vocabulary import is_usable_href
from a11y_analyzer.rules.base import Rule, RuleContext, RuleMeta, on_all_dialects
from a11y_analyzer.tree.nodes import ElementNode, StaticValue

META = RuleMeta(
    id="anchor-is-valid",
    type="problem",
    description="Enforce anchor elements have valid href attributes",
    messages={
        "missingHref": (
            "Anchor element must have an href attribute to be a valid link. "
            "Use a <button> for clickable actions."
        ),
        "invalidHref": (
            'The href value "{href}" is not a valid URL. '
            "Use a real URL, or use a <button> for clickable actions."
        ),
        "preferButton": (
            "Anchor elements with click handlers but no href should be <button> "
            "elements for proper keyboard accessibility."
        ),
    },
)


def create(context: RuleContext):
    def check(node: ElementNode) -> None:
        if context.native_tag(node) != "a":
            return

        # A spread does not supply href.
        href = get_attribute(node, "href")
        if href is None:
            if has_handler(node, HandlerCategory.CLICK):
                context.report(node, "preferButton")
            else:
                context.report(node, "missingHref")
            return

        value = href.value
        if isinstance(value, StaticValue) and isinstance(value.value, str):
            if not is_usable_href(value.value):
                context.report(node, "invalidHref", {"href": value.value})

    return on_all_dialects(check)


rule = Rule(META, create)
