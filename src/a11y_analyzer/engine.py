"""Depth-first driver: streams each file's elements to every enabled rule.

The host pipeline normally owns traversal; this driver stands in for it so
the rules can be run end to end. One walk per file, every callback runs to
completion before the next node, and a failing callback costs only that
node's analysis for that rule.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Mapping

from a11y_analyzer.config import A11ySettings, settings_from_dict
from a11y_analyzer.core.comments import CommentCache, comment_cache
from a11y_analyzer.core.component_roles import ComponentMapping
from a11y_analyzer.models import Diagnostic, LintReport, Severity
from a11y_analyzer.rules import RULES
from a11y_analyzer.rules.base import Rule, RuleContext, Visitor
from a11y_analyzer.tree.nodes import (
    Dialect,
    ElementNode,
    JsxElement,
    SourceFile,
    TemplateElement,
)

log = logging.getLogger(__name__)

INTERNAL_ERROR = "internal-error"


def iter_elements(root: SourceFile) -> Iterator[ElementNode]:
    """Pre-order, depth-first, source order."""
    stack: list = list(reversed(root.children))
    while stack:
        node = stack.pop()
        if isinstance(node, (JsxElement, TemplateElement)):
            yield node
            stack.extend(reversed(node.children or ()))


class Linter:
    """Runs the enabled rules over source files.

    The rule set and component mapping are resolved once here and shared,
    read-only, by every file.
    """

    def __init__(
        self,
        settings: A11ySettings | None = None,
        mapping: ComponentMapping | None = None,
        *,
        rules: Mapping[str, Rule] | None = None,
        cache: CommentCache | None = None,
    ) -> None:
        if settings is None:
            settings, _ = settings_from_dict(None)
        self.settings = settings
        self.mapping = mapping if mapping is not None else settings.component_mapping()
        self.cache = cache if cache is not None else comment_cache

        configured = settings.enabled_rules()
        if rules is None:
            registry: Mapping[str, Rule] = RULES
            self.enabled: dict[str, Severity] = configured
        else:
            # An explicit rule set runs as given, at the configured or default severity.
            registry = rules
            self.enabled = {
                rule_id: configured.get(rule_id, rule.meta.default_severity)
                for rule_id, rule in rules.items()
            }
        self._rules = [registry[rule_id] for rule_id in sorted(self.enabled)]
        log.debug("Linter ready with rules: %s", ", ".join(self.enabled))

    def lint(self, root: SourceFile) -> list[Diagnostic]:
        contexts: list[RuleContext] = []
        visitors: dict[Dialect, list[tuple[RuleContext, Visitor]]] = {d: [] for d in Dialect}
        for rule in self._rules:
            context = RuleContext(
                meta=rule.meta,
                file=root.path,
                mapping=self.mapping,
                settings=self.settings,
                severity=self.enabled[rule.id],
            )
            contexts.append(context)
            for dialect, visitor in rule.create(context).items():
                visitors[dialect].append((context, visitor))

        failures: list[Diagnostic] = []
        previous_start: int | None = None
        for node in iter_elements(root):
            for context, visitor in visitors[node.dialect]:
                before = len(context.diagnostics)
                try:
                    visitor(node)
                except Exception as exc:
                    log.exception("Rule %s failed on <%s> in %s", context.meta.id, node.name, root.path)
                    del context.diagnostics[before:]
                    failures.append(_failure(context, node, exc))
                    continue
                self._drop_suppressed(context, node, before, previous_start)
            previous_start = node.span.start

        diagnostics = [d for c in contexts for d in c.diagnostics] + failures
        diagnostics.sort(key=lambda d: (d.start, d.line, d.column, d.rule_id))
        log.info("%s: %d diagnostics", root.path, len(diagnostics))
        return diagnostics

    def lint_all(self, roots: Iterable[SourceFile]) -> list[LintReport]:
        return [LintReport(file=root.path, diagnostics=self.lint(root)) for root in roots]

    def _drop_suppressed(
        self, context: RuleContext, node: ElementNode, before: int, previous_start: int | None,
    ) -> None:
        if len(context.diagnostics) == before:
            return
        ignored = self._ignored_rules(node, previous_start)
        if ignored is None:
            return
        if not ignored or context.meta.id in ignored:
            log.debug("Suppressed %s on <%s>", context.meta.id, node.name)
            del context.diagnostics[before:]

    def _ignored_rules(self, node: ElementNode, previous_start: int | None) -> set[str] | None:
        """Rules named by an ignore comment directly before ``node``.

        A comment counts only when no other element starts between its end and
        the node. Elements arrive in pre-order, so ``previous_start`` (the start
        of the element visited last) is the latest start before ``node``.

        None: no directive. Empty set: the directive names no rules, so all
        are ignored.
        """
        directive = self.settings.ignore_directive
        found: set[str] | None = None
        for comment in self.cache.get_comments_near(node, self.settings.comment_window):
            if comment.end_pos > node.span.start:
                continue
            if previous_start is not None and previous_start >= comment.end_pos:
                continue
            body = comment.text.strip()
            if not body.startswith(directive):
                continue
            names = body[len(directive):].replace(",", " ").split()
            if not names:
                return set()
            found = (found or set()) | set(names)
        return found


def _failure(context: RuleContext, node: ElementNode, exc: Exception) -> Diagnostic:
    span = getattr(node, "span", None)
    return Diagnostic(
        rule_id=INTERNAL_ERROR,
        message_id="ruleFailure",
        message=f"Rule {context.meta.id} could not analyse <{node.name}>: {exc}",
        severity="error",
        file=context.file,
        line=span.line if span else 1,
        column=span.column if span else 0,
        start=span.start if span else 0,
        end=span.end if span else 0,
        data={"rule": context.meta.id, "element": str(node.name), "error": str(exc)},
    )


def lint(root: SourceFile, settings: A11ySettings | None = None) -> list[Diagnostic]:
    """One-shot convenience wrapper around Linter."""
    return Linter(settings).lint(root)
