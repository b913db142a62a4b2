"""Load serialized element trees (JSON or YAML) into the node model.

A host parser adapter that cannot hand over Python objects directly can dump
its trees in this shape:

    path: src/App.jsx
    comments:
      - {text: " a11y-ignore scope ", start: 0, end: 24}
    children:
      - jsx: th                       # or `template: th` for the template dialect
        span: {start: 25, end: 44, line: 2, column: 0}
        attributes:
          - {name: scope, value: column}
          - {name: onClick, expression: handle}
          - {name: tabIndex, expression: "0", literal: 0}
          - {spread: props}
          - {directive: on, argument: click, expression: go, modifiers: [stop]}
        children:
          - Name
          - {expression: label}

Shape problems raise TreeShapeError with the offending path.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from a11y_analyzer.errors import TreeShapeError
from a11y_analyzer.tree.builders import link_parents
from a11y_analyzer.tree.nodes import (
    Child,
    Comment,
    JsxAttribute,
    JsxElement,
    JsxExpression,
    JsxLiteral,
    JsxSpreadAttribute,
    SourceFile,
    SourceSpan,
    TemplateAttribute,
    TemplateDirective,
    TemplateElement,
    TextChild,
)

log = logging.getLogger(__name__)


def load_tree(path: Path) -> SourceFile:
    """Read one serialized tree. ``.json`` is parsed as JSON, anything else as YAML."""
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TreeShapeError(f"{path}: cannot read tree: {exc}") from exc
    try:
        data = json.loads(raw) if path.suffix == ".json" else yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise TreeShapeError(f"{path}: cannot parse tree: {exc}") from exc
    if isinstance(data, dict):
        data.setdefault("path", str(path))
    root = tree_from_dict(data)
    log.debug("Loaded %s: %d top-level nodes, %d comments",
              root.path, len(root.children), len(root.comments))
    return root


def tree_from_dict(data: Any) -> SourceFile:
    if not isinstance(data, dict):
        raise TreeShapeError("tree document must be a mapping")
    root = SourceFile(
        path=str(data.get("path", "<memory>")),
        text=str(data.get("text", "")),
        children=[_child(c, f"children[{i}]") for i, c in enumerate(data.get("children") or [])],
        comments=[_comment(c, f"comments[{i}]") for i, c in enumerate(data.get("comments") or [])],
    )
    link_parents(root)
    return root


def _span(data: Any, where: str) -> SourceSpan:
    if data is None:
        return SourceSpan()
    if not isinstance(data, dict):
        raise TreeShapeError(f"{where}.span must be a mapping")
    try:
        return SourceSpan(
            start=int(data.get("start", 0)),
            end=int(data.get("end", 0)),
            line=int(data.get("line", 1)),
            column=int(data.get("column", 0)),
        )
    except (TypeError, ValueError) as exc:
        raise TreeShapeError(f"{where}.span: {exc}") from exc


def _comment(data: Any, where: str) -> Comment:
    if not isinstance(data, dict) or "start" not in data or "end" not in data:
        raise TreeShapeError(f"{where}: comment needs text, start and end")
    return Comment(str(data.get("text", "")), int(data["start"]), int(data["end"]))


def _child(data: Any, where: str) -> Child:
    if isinstance(data, str):
        return TextChild(data)
    if not isinstance(data, dict):
        raise TreeShapeError(f"{where}: expected a string or a mapping")
    if "expression" in data:
        return TextChild(str(data["expression"]), dynamic=True, span=_span(data.get("span"), where))

    children = [_child(c, f"{where}.children[{i}]") for i, c in enumerate(data.get("children") or [])]
    attrs = data.get("attributes") or []
    if not isinstance(attrs, list):
        raise TreeShapeError(f"{where}.attributes must be a list")
    element_span = _span(data.get("span"), where)

    if "jsx" in data:
        return JsxElement(
            name=str(data["jsx"]),
            attributes=[_jsx_attribute(a, f"{where}.attributes[{i}]") for i, a in enumerate(attrs)],
            children=children,
            span=element_span,
        )
    if "template" in data:
        return TemplateElement(
            name=str(data["template"]),
            attributes=[_template_attribute(a, f"{where}.attributes[{i}]") for i, a in enumerate(attrs)],
            children=children,
            span=element_span,
        )
    raise TreeShapeError(f"{where}: element needs a 'jsx' or 'template' tag")


def _jsx_attribute(data: Any, where: str) -> JsxAttribute | JsxSpreadAttribute:
    if not isinstance(data, dict):
        raise TreeShapeError(f"{where}: attribute must be a mapping")
    at = _span(data.get("span"), where)
    if "spread" in data:
        return JsxSpreadAttribute(str(data["spread"]), at)
    if "name" not in data:
        raise TreeShapeError(f"{where}: attribute needs a name")
    if "expression" in data:
        value: JsxLiteral | JsxExpression | None = JsxExpression(str(data["expression"]), data.get("literal"))
    elif "value" in data and data["value"] is not None:
        value = JsxLiteral(data["value"])
    else:
        value = None
    return JsxAttribute(str(data["name"]), value, at)


def _template_attribute(data: Any, where: str) -> TemplateAttribute | TemplateDirective:
    if not isinstance(data, dict):
        raise TreeShapeError(f"{where}: attribute must be a mapping")
    at = _span(data.get("span"), where)
    if "directive" in data:
        argument = data.get("argument")
        return TemplateDirective(
            name=str(data["directive"]),
            argument=None if argument is None else str(argument),
            expression=str(data.get("expression", "")),
            modifiers=tuple(str(m) for m in data.get("modifiers") or ()),
            span=at,
        )
    if "name" not in data:
        raise TreeShapeError(f"{where}: attribute needs a name or a directive")
    value = data.get("value")
    return TemplateAttribute(str(data["name"]), None if value is None else str(value), at)
