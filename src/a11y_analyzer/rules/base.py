"""Rule records and the per-file context handed to them.

A rule is data: ``Rule(meta, create)``. ``create(context)`` returns one
callback per dialect it handles; the driver calls the callback for every
element of that dialect. Rules never subclass anything.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Iterable, Literal, Mapping

from a11y_analyzer.core.attributes import get_static_string_value
from a11y_analyzer.core.component_roles import ComponentMapping, resolve_native_tag
from a11y_analyzer.models import Diagnostic, Edit, Severity, Suggestion
from a11y_analyzer.tree.nodes import Dialect, ElementNode, SourceSpan

if TYPE_CHECKING:
    from a11y_analyzer.config import A11ySettings

RuleType = Literal["problem", "suggestion"]
Visitor = Callable[[ElementNode], None]


@dataclass(frozen=True)
class RuleMeta:
    id: str
    type: RuleType
    description: str
    messages: Mapping[str, str]   # message id -> template with {placeholders}
    recommended: bool = True
    has_suggestions: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))

    @property
    def default_severity(self) -> Severity:
        return "error" if self.type == "problem" else "warn"


@dataclass(frozen=True)
class Rule:
    meta: RuleMeta
    create: Callable[[RuleContext], Mapping[Dialect, Visitor]]

    @property
    def id(self) -> str:
        return self.meta.id


@dataclass
class RuleContext:
    """What one rule sees while one file is walked."""
    meta: RuleMeta
    file: str
    mapping: ComponentMapping
    settings: A11ySettings | None = None
    severity: Severity = "error"
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def native_tag(self, node: ElementNode) -> str | None:
        return resolve_native_tag(node, self.mapping)

    def report(
        self,
        node: ElementNode,
        message_id: str,
        data: Mapping[str, str] | None = None,
        *,
        at: SourceSpan | None = None,
        suggestions: Iterable[Suggestion] = (),
    ) -> Diagnostic:
        try:
            template = self.meta.messages[message_id]
        except KeyError:
            raise ValueError(f"{self.meta.id} has no message {message_id!r}") from None
        values = {k: str(v) for k, v in (data or {}).items()}
        where = at or node.span
        suggestions = tuple(suggestions)
        diagnostic = Diagnostic(
            rule_id=self.meta.id,
            message_id=message_id,
            message=template.format_map(values),
            severity=self.severity,
            file=self.file,
            line=where.line,
            column=where.column,
            start=where.start,
            end=where.end,
            data=values,
            fixable=False,
            suggestions=suggestions,
        )
        self.diagnostics.append(diagnostic)
        return diagnostic


# ── Helpers shared by rules ─────────────────────────────────────────────────

def static_role(node: ElementNode) -> str | None:
    """The explicit role, lower-cased, when it is a static string."""
    role = get_static_string_value(node, "role")
    return role.lower() if role else None


def remove_suggestion(description: str, at: SourceSpan) -> Suggestion:
    return Suggestion(description=description, edit=Edit(start=at.start, end=at.end, text=""))


def on_all_dialects(visitor: Visitor) -> dict[Dialect, Visitor]:
    return {dialect: visitor for dialect in Dialect}
