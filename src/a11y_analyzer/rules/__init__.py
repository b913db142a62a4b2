"""Rule registry and presets.

New rules = a new module exporting ``rule`` plus one ``register`` call below.
"""

from __future__ import annotations

from typing import Literal

from a11y_analyzer.models import Severity
from a11y_analyzer.rules import (
    anchor_is_valid,
    button_label,
    click_events_have_key_events,
    control_has_associated_label,
    form_label,
    image_alt,
    no_interactive_element_to_noninteractive_role,
    no_noninteractive_element_to_interactive_role,
    no_redundant_roles,
    no_static_element_interactions,
    prefer_tag_over_role,
    scope,
)
from a11y_analyzer.rules.base import Rule, RuleContext, RuleMeta

Preset = Literal["minimal", "recommended", "strict"]

RULES: dict[str, Rule] = {}


def register(rule: Rule) -> Rule:
    if rule.id in RULES:
        raise ValueError(f"rule {rule.id!r} is already registered")
    RULES[rule.id] = rule
    return rule


for _module in (
    anchor_is_valid,
    button_label,
    click_events_have_key_events,
    control_has_associated_label,
    form_label,
    image_alt,
    no_interactive_element_to_noninteractive_role,
    no_noninteractive_element_to_interactive_role,
    no_redundant_roles,
    no_static_element_interactions,
    prefer_tag_over_role,
    scope,
):
    register(_module.rule)


MINIMAL_RULES = ("button-label", "form-label", "image-alt")


def preset_severities(preset: Preset) -> dict[str, Severity]:
    """Rule id -> severity for a named preset."""
    if preset == "minimal":
        return {rule_id: "error" for rule_id in MINIMAL_RULES}
    if preset == "recommended":
        return {
            rule.id: rule.meta.default_severity
            for rule in RULES.values() if rule.meta.recommended
        }
    if preset == "strict":
        return {rule_id: "error" for rule_id in RULES}
    raise ValueError(f"unknown preset {preset!r}")


__all__ = ["RULES", "Rule", "RuleContext", "RuleMeta", "preset_severities", "register"]
