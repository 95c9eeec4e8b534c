# tests/auditor/test_rules_aria.py
import pytest

from aria_auditor.dom.models import Dynamic
from aria_auditor.model import Severity


def _only(diagnostics, rule_id):
    return [d for d in diagnostics if d.rule_id == rule_id]


# --- aria-props ---

def test_misspelled_aria_attribute_is_reported_at_the_attribute(element, lint):
    el = element("div", {"title": "t", "aria-labeledby": "x"}, line=3, column=4)
    found = _only(lint(el), "aria-props")
    assert len(found) == 1
    assert found[0].severity == Severity.ERROR
    assert found[0].message == "Invalid ARIA attribute `aria-labeledby` on <div>."
    assert (found[0].line, found[0].column) == (3, 6)


def test_unknown_non_aria_attribute_is_ignored(element, rule_ids):
    assert "aria-props" not in rule_ids(element("div", {"data-role": "x"}))


# --- aria-proptypes ---

def test_invalid_boolean_value(element, lint):
    found = _only(lint(element("div", {"aria-hidden": "yes"})), "aria-proptypes")
    assert len(found) == 1
    assert found[0].message == (
        'Invalid value "yes" for `aria-hidden` on <div>. Expected "true", "false", or "undefined".'
    )


@pytest.mark.parametrize("attrs", [
    {"aria-hidden": Dynamic()},
    {"aria-level": "2"},
    {"aria-valuenow": "4.5"},
    {"aria-describedby": "a b"},
    {"aria-label": ""},
])
def test_valid_or_unknowable_values_pass(element, rule_ids, attrs):
    assert "aria-proptypes" not in rule_ids(element("div", attrs))


def test_only_first_invalid_property_is_reported(element, lint):
    el = element("div", {"aria-live": "loud", "aria-busy": "maybe"})
    found = _only(lint(el), "aria-proptypes")
    assert len(found) == 1
    assert "aria-live" in found[0].message


# --- aria-unsupported-elements ---

def test_aria_on_meta_elements(element, lint):
    found = _only(lint(element("meta", {"charset": "utf-8", "role": "img"})), "aria-unsupported-elements")
    assert len(found) == 1
    assert found[0].message == "ARIA attribute `role` is not supported on <meta>."
    assert found[0].help == "The <meta> element does not support ARIA roles or properties."


def test_aria_on_regular_elements_is_fine(element, rule_ids):
    assert "aria-unsupported-elements" not in rule_ids(element("div", {"aria-label": "x"}))


# --- aria-activedescendant-has-tabindex ---

def test_activedescendant_needs_tabindex(element, rule_ids):
    assert "aria-activedescendant-has-tabindex" in rule_ids(element("div", {"aria-activedescendant": "opt1"}))
    assert "aria-activedescendant-has-tabindex" not in rule_ids(
        element("div", {"aria-activedescendant": "opt1", "tabindex": "0"})
    )
    assert "aria-activedescendant-has-tabindex" not in rule_ids(
        element("input", {"aria-activedescendant": "opt1"})
    )


# --- role-supports-aria-props ---

def test_property_not_supported_by_resolved_role(element, lint):
    el = element("a", {"href": "/x", "aria-checked": "true"}, children=True)
    found = _only(lint(el), "role-supports-aria-props")
    assert len(found) == 1
    assert found[0].message == 'The `aria-checked` property is not supported by the "link" role on <a>.'


def test_property_supported_by_explicit_role(element, rule_ids):
    el = element("div", {"role": "checkbox", "aria-checked": "false", "tabindex": "0"})
    assert "role-supports-aria-props" not in rule_ids(el)


def test_no_role_means_no_check(element, rule_ids):
    assert "role-supports-aria-props" not in rule_ids(element("div", {"aria-pressed": "true"}))


# --- aria-role ---

def test_abstract_role_is_rejected(element, lint):
    found = _only(lint(element("div", {"role": "widget"})), "aria-role")
    assert len(found) == 1
    assert found[0].severity == Severity.ERROR
    assert found[0].message.startswith('Abstract ARIA role "widget" must not be used on <div>.')


def test_unknown_role_is_rejected(element, lint):
    found = _only(lint(element("div", {"role": "buton"})), "aria-role")
    assert found[0].message == 'Invalid ARIA role "buton" on <div>.'


def test_first_bad_token_of_fallback_list(element, lint):
    found = _only(lint(element("div", {"role": "switch nope widget"})), "aria-role")
    assert len(found) == 1
    assert '"nope"' in found[0].message


def test_dynamic_role_is_not_checked(element, rule_ids):
    assert "aria-role" not in rule_ids(element("div", {"role": Dynamic()}))


# --- no-redundant-roles / prefer-tag-over-role ---

def test_redundant_role(element, lint):
    found = _only(lint(element("nav", {"role": "navigation"}, children=True)), "no-redundant-roles")
    assert len(found) == 1
    assert found[0].severity == Severity.WARNING


def test_fallback_list_is_never_redundant(element, rule_ids):
    assert "no-redundant-roles" not in rule_ids(element("button", {"role": "button link"}, children=True))


def test_prefer_native_tag(element, lint):
    found = _only(lint(element("div", {"role": "navigation"}, children=True)), "prefer-tag-over-role")
    assert len(found) == 1
    assert found[0].severity == Severity.INFO
    assert found[0].message == 'Prefer using the <nav> element instead of `role="navigation"`.'


def test_native_tag_is_not_told_to_prefer_itself(element, rule_ids):
    assert "prefer-tag-over-role" not in rule_ids(element("ul", {"role": "list"}, children=True))


# --- role-has-required-aria-props ---

def test_checkbox_requires_checked(element, rule_ids):
    assert "role-has-required-aria-props" in rule_ids(element("div", {"role": "checkbox", "tabindex": "0"}))
    assert "role-has-required-aria-props" not in rule_ids(
        element("div", {"role": "checkbox", "tabindex": "0", "aria-checked": "false"})
    )


def test_missing_properties_are_listed_in_order(element, lint):
    found = _only(lint(element("div", {"role": "combobox"})), "role-has-required-aria-props")
    assert found[0].message == (
        '<div> with role="combobox" is missing required ARIA properties: `aria-controls`, `aria-expanded`.'
    )


def test_native_headings_carry_their_level(element, rule_ids):
    assert "role-has-required-aria-props" not in rule_ids(element("h2", {"role": "heading"}, children=True))
    assert "role-has-required-aria-props" in rule_ids(element("div", {"role": "heading"}, children=True))


# --- interactive / non-interactive role swaps ---

def test_interactive_element_given_presentational_role(element, lint):
    found = _only(lint(element("button", {"role": "img"}, children=True)),
                  "no-interactive-element-to-noninteractive-role")
    assert len(found) == 1


def test_noninteractive_element_given_interactive_role(element, rule_ids):
    assert "no-noninteractive-element-to-interactive-role" in rule_ids(
        element("li", {"role": "button"}, children=True)
    )
    assert "no-noninteractive-element-to-interactive-role" not in rule_ids(
        element("li", {"role": "listitem"}, children=True)
    )
