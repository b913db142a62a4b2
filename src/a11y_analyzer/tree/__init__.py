"""Element-tree model for the JSX and template dialects.

Provides:
    nodes     - dataclasses for both dialects and the dialect-agnostic views
    adapters  - dialect-specific conversion feeding the core resolvers
    builders  - constructors that wire parent links
    loader    - JSON / YAML trees -> SourceFile
"""

from __future__ import annotations

from a11y_analyzer.tree.nodes import (
    AttributeEntry,
    CommentEntry,
    Dialect,
    DynamicValue,
    ElementNode,
    JsxElement,
    SourceFile,
    SourceSpan,
    StaticValue,
    TemplateElement,
)

__all__ = [
    "AttributeEntry",
    "CommentEntry",
    "Dialect",
    "DynamicValue",
    "ElementNode",
    "JsxElement",
    "SourceFile",
    "SourceSpan",
    "StaticValue",
    "TemplateElement",
]
