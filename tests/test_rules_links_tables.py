"""Tests for anchor-is-valid and scope."""

from __future__ import annotations

import pytest

from a11y_analyzer.core.component_roles import EMPTY_MAPPING, ComponentMapping
from a11y_analyzer.rules import anchor_is_valid, scope
from a11y_analyzer.rules.base import RuleContext
from a11y_analyzer.tree.builders import attr, bind, expr, html_attr, jsx, on, span, spread, template


def run(module, *nodes, mapping: ComponentMapping = EMPTY_MAPPING):
    context = RuleContext(meta=module.META, file="App.jsx", mapping=mapping)
    visitors = module.create(context)
    for node in nodes:
        visitors[node.dialect](node)
    return context.diagnostics


class TestAnchorIsValid:
    def test_javascript_href(self):
        node = jsx("a", attr("href", "javascript:void(0)"), children=["Go"])
        (d,) = run(anchor_is_valid, node)
        assert d.message_id == "invalidHref"
        assert d.data == {"href": "javascript:void(0)"}
        assert "javascript:void(0)" in d.message

    @pytest.mark.parametrize("href", ["#", "", "JavaScript:alert(1)"])
    def test_unusable_hrefs(self, href):
        (d,) = run(anchor_is_valid, jsx("a", attr("href", href)))
        assert d.message_id == "invalidHref"

    @pytest.mark.parametrize("href", ["/home", "https://example.com", "#section", "mailto:a@b.c"])
    def test_usable_hrefs(self, href):
        assert run(anchor_is_valid, jsx("a", attr("href", href))) == []

    def test_dynamic_href(self):
        assert run(anchor_is_valid, jsx("a", attr("href", expr("url")))) == []

    def test_missing_href(self):
        (d,) = run(anchor_is_valid, jsx("a", children=["Home"]))
        assert d.message_id == "missingHref"

    def test_click_without_href_prefers_button(self):
        (d,) = run(anchor_is_valid, jsx("a", attr("onClick", expr("go"))))
        assert d.message_id == "preferButton"

    def test_template_click(self):
        (d,) = run(anchor_is_valid, template("a", on("click.prevent")))
        assert d.message_id == "preferButton"

    def test_template_bound_href(self):
        assert run(anchor_is_valid, template("a", bind("href", "url"))) == []

    def test_spread_does_not_supply_href(self):
        (d,) = run(anchor_is_valid, jsx("a", spread("linkProps")))
        assert d.message_id == "missingHref"

    def test_polymorphic_component(self):
        mapping = ComponentMapping.build({"Button": "button"})
        (d,) = run(anchor_is_valid, jsx("Button", attr("as", "a")), mapping=mapping)
        assert d.message_id == "missingHref"
        assert run(anchor_is_valid, jsx("Button"), mapping=mapping) == []


class TestScope:
    def test_invalid_value(self):
        scope_span = span(4, 18)
        (d,) = run(scope, jsx("th", attr("scope", "column", at=scope_span)))
        assert d.message_id == "invalidValue"
        assert d.data == {"value": "column"}
        assert (d.start, d.end) == (4, 18)

    def test_invalid_element(self):
        (d,) = run(scope, jsx("td", attr("scope", "col")))
        assert d.message_id == "invalidElement"
        assert d.data == {"element": "td"}

    @pytest.mark.parametrize("value", ["col", "row", "colgroup", "rowgroup", "ROW"])
    def test_valid_values(self, value):
        assert run(scope, jsx("th", attr("scope", value))) == []

    def test_bare_template_scope(self):
        assert run(scope, template("th", html_attr("scope"))) == []

    def test_bare_jsx_scope(self):
        assert run(scope, jsx("th", attr("scope"))) == []

    def test_dynamic_value(self):
        assert run(scope, template("th", bind("scope", "dir"))) == []

    def test_template_dialect(self):
        (d,) = run(scope, template("div", html_attr("scope", "row")))
        assert d.data == {"element": "div"}

    def test_no_scope(self):
        assert run(scope, jsx("td"), jsx("th")) == []

    def test_unresolved_component_skipped(self):
        assert run(scope, jsx("Cell", attr("scope", "col"))) == []

    def test_mapped_header_cell(self):
        mapping = ComponentMapping.build({"HeaderCell": "th"})
        assert run(scope, jsx("HeaderCell", attr("scope", "col")), mapping=mapping) == []
