"""Settings: preset, per-rule severities and the component mapping.

Loaded once per run from YAML. Every problem (bad YAML, unknown keys,
unknown rules, components mapped to non-HTML tags) surfaces here as a
ConfigError, never later while trees are walked.

    preset: recommended
    rules:
      prefer-tag-over-role: warn
      no-redundant-roles: off
    components:
      Nav: nav
      Button: {native_tag: button, polymorphic_props: [as]}
    polymorphic_props: [as, component]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from a11y_analyzer.core.component_roles import (
    DEFAULT_POLYMORPHIC_PROPS,
    ComponentEntry,
    ComponentMapping,
)
from a11y_analyzer.errors import ConfigError
from a11y_analyzer.models import Severity
from a11y_analyzer.rules import RULES, Preset, preset_severities

log = logging.getLogger(__name__)

RuleSetting = Literal["off", "warn", "error"]


class ComponentSetting(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    native_tag: str = Field(alias="nativeTag")
    polymorphic_props: list[str] | None = Field(default=None, alias="polymorphicPropNames")


class A11ySettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    preset: Preset = "recommended"
    rules: dict[str, RuleSetting] = Field(default_factory=dict)
    components: dict[str, Union[str, ComponentSetting]] = Field(default_factory=dict)
    polymorphic_props: list[str] = Field(default_factory=lambda: list(DEFAULT_POLYMORPHIC_PROPS))
    comment_window: int = Field(default=40, ge=0)     # characters before a node searched for directives
    ignore_directive: str = "a11y-ignore"

    @field_validator("rules", mode="before")
    @classmethod
    def _yaml_off_is_false(cls, value):
        # YAML 1.1 reads a bare `off` as False
        if isinstance(value, dict):
            return {k: ("off" if v is False else v) for k, v in value.items()}
        return value

    @field_validator("rules")
    @classmethod
    def _known_rules(cls, value: dict[str, RuleSetting]) -> dict[str, RuleSetting]:
        unknown = sorted(set(value) - set(RULES))
        if unknown:
            raise ValueError(f"unknown rule(s): {', '.join(unknown)}")
        return value

    def enabled_rules(self) -> dict[str, Severity]:
        """Rule id -> severity after applying overrides to the preset."""
        severities: dict[str, Severity] = preset_severities(self.preset)
        for rule_id, setting in self.rules.items():
            if setting == "off":
                severities.pop(rule_id, None)
            else:
                severities[rule_id] = setting
        return severities

    def component_mapping(self) -> ComponentMapping:
        entries: dict[str, ComponentEntry] = {}
        for name, setting in self.components.items():
            if isinstance(setting, str):
                entries[name] = ComponentEntry(setting)
            else:
                props = tuple(setting.polymorphic_props) if setting.polymorphic_props is not None else None
                entries[name] = ComponentEntry(setting.native_tag, props)
        return ComponentMapping(entries, tuple(self.polymorphic_props))


def settings_from_dict(data: dict | None) -> tuple[A11ySettings, ComponentMapping]:
    """Validate raw settings and build the run's component mapping."""
    try:
        settings = A11ySettings.model_validate(data or {})
    except ValidationError as exc:
        raise ConfigError(f"invalid settings: {exc}") from exc
    mapping = settings.component_mapping()
    log.info(
        "Settings: preset=%s, %d rules enabled, %d mapped components",
        settings.preset, len(settings.enabled_rules()), len(mapping.components),
    )
    return settings, mapping


def load_settings(path: Path | None) -> tuple[A11ySettings, ComponentMapping]:
    """Read settings from a YAML file; defaults when ``path`` is None."""
    if path is None:
        return settings_from_dict(None)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML: {exc}") from exc
    if data is not None and not isinstance(data, dict):
        raise ConfigError(f"{path}: settings must be a mapping")
    return settings_from_dict(data)
