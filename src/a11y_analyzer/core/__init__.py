"""Shared analysis substrate used by every rule.

Provides:
    attributes       - has/get attribute, static values, over both dialects
    events           - handler classification by category, one pass per query
    component_roles  - component -> native tag resolution
    comments         - per-file comment-proximity cache
    vocabulary       - fixed tag / role tables
"""

from __future__ import annotations

from a11y_analyzer.core.attributes import (
    get_attribute,
    get_static_string_value,
    get_static_value,
    has_attribute,
    has_spread,
)
from a11y_analyzer.core.comments import CommentCache, comment_cache, get_comments_near
from a11y_analyzer.core.component_roles import (
    ComponentEntry,
    ComponentMapping,
    is_element_like,
    resolve_native_tag,
)
from a11y_analyzer.core.events import (
    HandlerCategory,
    handler_categories,
    has_any_handler,
    has_handler,
)

__all__ = [
    "CommentCache",
    "ComponentEntry",
    "ComponentMapping",
    "HandlerCategory",
    "comment_cache",
    "get_attribute",
    "get_comments_near",
    "get_static_string_value",
    "get_static_value",
    "handler_categories",
    "has_any_handler",
    "has_attribute",
    "has_handler",
    "has_spread",
    "is_element_like",
    "resolve_native_tag",
]
