"""Fixed vocabularies: HTML tag names, ARIA role groups, implicit roles.

Module-level constants, built once at import and never mutated. New entries
are new set members, no rule logic changes.
"""

from __future__ import annotations

import re
from typing import Callable

HTML_TAGS: frozenset[str] = frozenset({
    # document / sections
    "html", "head", "body", "title", "base", "link", "meta", "style", "script", "noscript",
    "template", "slot",
    "main", "nav", "section", "article", "aside", "header", "footer", "address", "search",
    "h1", "h2", "h3", "h4", "h5", "h6", "hgroup",
    # grouping
    "div", "p", "hr", "pre", "blockquote", "ol", "ul", "li", "menu", "dl", "dt", "dd",
    "figure", "figcaption",
    # text-level
    "a", "em", "strong", "small", "s", "cite", "q", "dfn", "abbr", "ruby", "rt", "rp",
    "data", "time", "code", "var", "samp", "kbd", "sub", "sup", "i", "b", "u", "mark",
    "bdi", "bdo", "span", "br", "wbr", "ins", "del",
    # embedded
    "picture", "source", "img", "iframe", "embed", "object", "video", "audio", "track",
    "map", "area", "svg", "math", "canvas",
    # tables
    "table", "caption", "colgroup", "col", "tbody", "thead", "tfoot", "tr", "td", "th",
    # forms
    "form", "label", "input", "button", "select", "datalist", "optgroup", "option",
    "textarea", "output", "progress", "meter", "fieldset", "legend",
    # interactive
    "details", "summary", "dialog",
})

# Interactive ARIA roles: widgets that must be operable and labelled.
INTERACTIVE_ROLES: frozenset[str] = frozenset({
    "button", "link", "checkbox", "radio", "textbox", "combobox", "listbox",
    "option", "menuitem", "menuitemcheckbox", "menuitemradio", "slider",
    "spinbutton", "switch", "tab", "treeitem", "gridcell", "searchbox",
    "scrollbar",
})

PRESENTATION_ROLES: frozenset[str] = frozenset({"none", "presentation"})

# Natively interactive elements whose semantics a role must not strip.
INTERACTIVE_ELEMENTS: frozenset[str] = frozenset({
    "button", "a", "input", "select", "textarea", "summary",
})

# Elements with no native interaction; an interactive role on them needs
# keyboard support supplied by the author.
NON_INTERACTIVE_ELEMENTS: frozenset[str] = frozenset({
    "div", "span", "section", "article", "aside", "footer", "header", "nav", "main",
    "p", "ul", "ol", "li", "dl", "dt", "dd",
    "table", "thead", "tbody", "tfoot", "tr", "th", "td", "caption",
    "figure", "figcaption", "blockquote", "pre", "code", "em", "strong",
    "small", "mark", "sub", "sup", "address", "time", "abbr",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "img", "hr",
})

# Elements with no semantics of their own; a role on them is better served
# by the matching native element.
GENERIC_ELEMENTS: frozenset[str] = frozenset({
    "div", "span", "section", "article", "aside", "footer", "header",
    "nav", "main", "p", "ul", "ol", "li", "dl", "dt", "dd",
    "figure", "figcaption", "blockquote", "pre", "i", "b", "em",
    "strong", "small", "mark", "sub", "sup", "address",
})

# Role -> native element suggestion shown to the user.
ROLE_TO_TAG: dict[str, str] = {
    "button": "<button>",
    "checkbox": '<input type="checkbox">',
    "combobox": "<select>",
    "form": "<form>",
    "heading": "<h1>-<h6> (with aria-level)",
    "img": "<img>",
    "link": '<a href="...">',
    "list": "<ul> or <ol>",
    "listitem": "<li>",
    "listbox": "<select multiple>",
    "main": "<main>",
    "navigation": "<nav>",
    "complementary": "<aside>",
    "banner": "<header>",
    "contentinfo": "<footer>",
    "region": '<section aria-label="...">',
    "radio": '<input type="radio">',
    "searchbox": '<input type="search">',
    "slider": '<input type="range">',
    "spinbutton": '<input type="number">',
    "table": "<table>",
    "textbox": "<input> or <textarea>",
    "meter": "<meter>",
    "progressbar": "<progress>",
    "radiogroup": "<fieldset>",
    "row": "<tr>",
    "rowgroup": "<thead>, <tbody>, or <tfoot>",
    "columnheader": '<th scope="col">',
    "rowheader": '<th scope="row">',
    "article": "<article>",
    "separator": "<hr>",
    "term": "<dt>",
    "definition": "<dd>",
}

VALID_SCOPE_VALUES: frozenset[str] = frozenset({"col", "row", "colgroup", "rowgroup"})

# ── Implicit roles ──────────────────────────────────────────────────────────

_FIXED_IMPLICIT_ROLES: dict[str, str] = {
    "button": "button",
    "nav": "navigation",
    "main": "main",
    "aside": "complementary",
    "ul": "list",
    "ol": "list",
    "li": "listitem",
    "img": "img",
    "h1": "heading", "h2": "heading", "h3": "heading",
    "h4": "heading", "h5": "heading", "h6": "heading",
    "article": "article",
    "table": "table",
    "tr": "row",
    "textarea": "textbox",
}

_INPUT_TYPE_ROLES: dict[str, str] = {
    "checkbox": "checkbox",
    "radio": "radio",
    "range": "slider",
    "number": "spinbutton",
    "text": "textbox",
    "email": "textbox",
    "password": "textbox",
    "search": "textbox",
    "tel": "textbox",
    "url": "textbox",
}

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def is_usable_href(href: str) -> bool:
    """False for "", "#" and javascript: URLs (any case)."""
    return href not in ("", "#") and not href.lower().startswith("javascript:")


def implicit_role(
    tag: str,
    get_value: Callable[[str], str | None],
    has_attr: Callable[[str], bool],
) -> str | None:
    """The ARIA role ``tag`` has without an explicit ``role``.

    ``get_value(name)`` returns the attribute's static value as a string, or
    None when it is missing or cannot be resolved. Returns None when the
    element has no implicit role or it depends on something unresolvable.
    """
    fixed = _FIXED_IMPLICIT_ROLES.get(tag)
    if fixed:
        return fixed

    if tag == "a":
        href = get_value("href")
        return "link" if href is not None and is_usable_href(href) else None

    if tag == "input":
        if has_attr("type"):
            input_type = get_value("type")
            if input_type is None:
                return None
        else:
            input_type = "text"
        return _INPUT_TYPE_ROLES.get(input_type.lower())

    if tag == "select":
        if has_attr("multiple"):
            return "listbox"
        size = get_value("size") if has_attr("size") else "1"
        if size is None:
            return None
        # Leading integer, as HTML parses it: "3px" -> 3, "2.5" -> 2.
        match = _LEADING_INT.match(size)
        return "listbox" if match and int(match.group()) > 1 else "combobox"

    if tag in ("section", "form"):
        if has_attr("aria-label") or has_attr("aria-labelledby"):
            return "region" if tag == "section" else "form"
        return None

    return None
