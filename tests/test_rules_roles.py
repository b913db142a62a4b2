"""Tests for the role rules."""

from __future__ import annotations

import pytest

from a11y_analyzer.core.component_roles import EMPTY_MAPPING, ComponentMapping
from a11y_analyzer.rules import (
    no_interactive_element_to_noninteractive_role,
    no_noninteractive_element_to_interactive_role,
    no_redundant_roles,
    prefer_tag_over_role,
)
from a11y_analyzer.rules.base import RuleContext
from a11y_analyzer.tree.builders import attr, bind, expr, html_attr, jsx, on, span, template


def run(module, *nodes, mapping: ComponentMapping = EMPTY_MAPPING):
    context = RuleContext(meta=module.META, file="App.jsx", mapping=mapping)
    visitors = module.create(context)
    for node in nodes:
        visitors[node.dialect](node)
    return context.diagnostics


class TestNoNoninteractiveToInteractive:
    rule = no_noninteractive_element_to_interactive_role

    def test_keyboard_operable(self):
        node = jsx("div", attr("role", "button"), attr("tabIndex", expr("0", 0)), attr("onKeyDown", expr("fn")))
        assert run(self.rule, node) == []

    def test_bare_role(self):
        (d,) = run(self.rule, jsx("div", attr("role", "button")))
        assert d.data == {"element": "div", "role": "button"}

    def test_tabindex_without_key_handler(self):
        node = jsx("div", attr("role", "button"), attr("tabIndex", expr("0", 0)), attr("onClick", expr("fn")))
        assert len(run(self.rule, node)) == 1

    def test_key_handler_without_tabindex(self):
        node = jsx("li", attr("role", "option"), attr("onKeyUp", expr("fn")))
        assert len(run(self.rule, node)) == 1

    def test_template_dialect(self):
        node = template("span", html_attr("role", "link"), html_attr("tabindex", "0"), on("keydown.enter"))
        assert run(self.rule, node) == []

    def test_interactive_element_ignored(self):
        assert run(self.rule, jsx("button", attr("role", "switch"))) == []

    def test_non_interactive_role_ignored(self):
        assert run(self.rule, jsx("div", attr("role", "region"))) == []


class TestNoInteractiveToNoninteractive:
    rule = no_interactive_element_to_noninteractive_role

    @pytest.mark.parametrize("role", ["none", "presentation", "Presentation"])
    def test_button(self, role):
        (d,) = run(self.rule, jsx("button", attr("role", role)))
        assert d.data == {"element": "button", "role": role.lower()}

    def test_anchor_with_href(self):
        assert len(run(self.rule, jsx("a", attr("href", "/home"), attr("role", "none")))) == 1

    def test_anchor_with_bound_href(self):
        node = template("a", bind("href", "url"), html_attr("role", "presentation"))
        assert len(run(self.rule, node)) == 1

    @pytest.mark.parametrize("href", ["#", "javascript:void(0)"])
    def test_anchor_with_placeholder_href(self, href):
        assert len(run(self.rule, jsx("a", attr("href", href), attr("role", "none")))) == 1

    def test_anchor_with_empty_href(self):
        assert run(self.rule, jsx("a", attr("href", ""), attr("role", "none"))) == []

    def test_anchor_without_href(self):
        assert run(self.rule, jsx("a", attr("role", "none"))) == []

    def test_hidden_input(self):
        assert run(self.rule, jsx("input", attr("type", "hidden"), attr("role", "none"))) == []

    def test_mapped_component(self):
        mapping = ComponentMapping.build({"Button": "button"})
        assert len(run(self.rule, jsx("Button", attr("role", "none")), mapping=mapping)) == 1

    def test_div_ignored(self):
        assert run(self.rule, jsx("div", attr("role", "none"))) == []


class TestNoRedundantRoles:
    rule = no_redundant_roles

    def test_mapped_nav(self):
        mapping = ComponentMapping.build({"Nav": "nav"})
        role_span = span(5, 22)
        node = jsx("Nav", attr("role", "navigation", at=role_span), at=span(0, 24))
        (d,) = run(self.rule, node, mapping=mapping)
        assert d.data == {"role": "navigation", "element": "nav"}
        assert (d.start, d.end) == (5, 22)
        (suggestion,) = d.suggestions
        assert (suggestion.edit.start, suggestion.edit.end, suggestion.edit.text) == (5, 22, "")

    def test_button(self):
        assert len(run(self.rule, jsx("button", attr("role", "button")))) == 1

    def test_different_role(self):
        assert run(self.rule, jsx("button", attr("role", "tab"))) == []

    @pytest.mark.parametrize("node", [
        jsx("input", attr("role", "textbox")),
        jsx("input", attr("type", "checkbox"), attr("role", "checkbox")),
        jsx("a", attr("href", "/x"), attr("role", "link")),
        jsx("select", attr("role", "combobox")),
        jsx("select", attr("multiple"), attr("role", "listbox")),
        jsx("select", attr("size", expr("4", 4)), attr("role", "listbox")),
        jsx("select", attr("size", "2.5"), attr("role", "listbox")),
        jsx("select", attr("size", "3px"), attr("role", "listbox")),
        jsx("select", attr("size", "1"), attr("role", "combobox")),
        jsx("select", attr("size", "auto"), attr("role", "combobox")),
        jsx("section", attr("aria-label", "News"), attr("role", "region")),
    ])
    def test_conditional_implicit_roles(self, node):
        assert len(run(self.rule, node)) == 1

    @pytest.mark.parametrize("node", [
        jsx("input", attr("type", expr("kind")), attr("role", "textbox")),
        jsx("a", attr("href", "#"), attr("role", "link")),
        jsx("a", attr("role", "link")),
        jsx("select", attr("size", expr("n")), attr("role", "combobox")),
        jsx("section", attr("role", "region")),
    ])
    def test_unresolvable_or_absent_implicit_role(self, node):
        assert run(self.rule, node) == []

    def test_unresolved_component_skipped(self):
        assert run(self.rule, jsx("Nav", attr("role", "navigation"))) == []


class TestPreferTagOverRole:
    rule = prefer_tag_over_role

    def test_generic_element(self):
        (d,) = run(self.rule, jsx("div", attr("role", "button")))
        assert d.data == {"tag": "<button>", "role": "button"}
        assert d.severity == "error"

    def test_fires_even_when_keyboard_operable(self):
        node = jsx("span", attr("role", "checkbox"), attr("tabIndex", expr("0", 0)), attr("onKeyDown", expr("fn")))
        assert len(run(self.rule, node)) == 1

    def test_role_without_native_counterpart(self):
        assert run(self.rule, jsx("div", attr("role", "tooltip"))) == []

    def test_non_generic_element(self):
        assert run(self.rule, jsx("img", attr("role", "button"))) == []

    def test_not_recommended(self):
        assert self.rule.META.recommended is False
