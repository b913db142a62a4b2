"""Pydantic models for diagnostics."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

Severity = Literal["error", "warn"]


class Edit(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: int    # offset range replaced by ``text``
    end: int
    text: str = ""


class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
    edit: Edit


class Diagnostic(BaseModel):
    """One reported problem. Carries positions, never node objects."""
    model_config = ConfigDict(frozen=True)

    rule_id: str
    message_id: str
    message: str
    severity: Severity = "error"
    file: str
    line: int
    column: int = 0
    start: int = 0
    end: int = 0
    data: dict[str, str] = Field(default_factory=dict)
    fixable: bool = False
    suggestions: tuple[Suggestion, ...] = ()

    @computed_field
    @property
    def location(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


class LintReport(BaseModel):
    file: str
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    @computed_field
    @property
    def error_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == "error")

    @computed_field
    @property
    def warning_count(self) -> int:
        return sum(1 for d in self.diagnostics if d.severity == "warn")
