# tests/auditor/test_element_model.py
import pytest
from pydantic import ValidationError

from aria_auditor.dom.models import Dynamic, HtmlAttribute, Static, parse_int
from aria_auditor.knowledge.aria import Aria
from aria_auditor.knowledge.attributes import HtmlAttr, UnknownAttribute
from aria_auditor.knowledge.roles import Role
from aria_auditor.knowledge.tags import Tag


def test_attribute_names_are_classified_on_construction():
    attr = HtmlAttribute(name="aria-hidden", value=Static(text="true"), line=1, column=0)
    assert attr.name is Aria.HIDDEN
    assert attr.static_text == "true"
    assert not attr.is_dynamic

    unknown = HtmlAttribute(name="aria-hiden", value=None, line=1, column=0)
    assert isinstance(unknown.name, UnknownAttribute)
    assert unknown.static_text is None


def test_positions_are_validated():
    with pytest.raises(ValidationError):
        HtmlAttribute(name="alt", line=0, column=0)
    with pytest.raises(ValidationError):
        HtmlAttribute(name="alt", line=1, column=-1)


def test_elements_are_immutable(element):
    el = element("div", {"role": "button"})
    with pytest.raises(ValidationError):
        el.has_children = True


def test_attribute_lookups(element):
    el = element("input", {"type": "text", "aria-label": "Name", "autofocus": None})
    assert el.get_attribute(HtmlAttr.TYPE).static_text == "text"
    assert el.get_attribute("aria-label").name is Aria.LABEL
    assert el.has_attribute(Aria.LABELLEDBY, Aria.LABEL)
    assert not el.has_attribute(Aria.LABELLEDBY)
    assert el.has_attribute(HtmlAttr.AUTOFOCUS)
    assert el.static_value(HtmlAttr.AUTOFOCUS) is None
    assert el.get_attribute(HtmlAttr.ALT) is None


def test_first_occurrence_wins(element):
    el = element("div", {"title": "first"})
    duplicate = HtmlAttribute(name="title", value=Static(text="second"), line=1, column=9)
    el = el.model_copy(update={"attributes": el.attributes + [duplicate]})
    assert el.static_value(HtmlAttr.TITLE) == "first"


# --- Role resolution ---

def test_role_prefers_explicit_over_implicit(element):
    assert element("div", {"role": "button"}).role() is Role.BUTTON
    assert element("nav").role() is Role.NAVIGATION
    assert element("div").role() is None


def test_role_uses_first_recognised_concrete_token(element):
    """Fallback lists skip unknown and abstract tokens."""
    el = element("div", {"role": "fancy widget switch checkbox"})
    assert el.explicit_role() is Role.SWITCH
    assert el.role() is Role.SWITCH


def test_role_falls_back_to_implicit_for_unusable_values(element):
    assert element("li", {"role": "widget"}).role() is Role.LISTITEM
    assert element("li", {"role": "nonsense"}).role() is Role.LISTITEM
    assert element("li", {"role": Dynamic()}).role() is Role.LISTITEM
    assert element("span", {"role": ""}).role() is None


# --- Focusability ---

@pytest.mark.parametrize("tag, attrs, focusable", [
    ("button", {}, True),
    ("a", {}, True),
    ("div", {}, False),
    ("div", {"tabindex": "0"}, True),
    ("div", {"tabindex": "-1"}, False),
    ("div", {"tabindex": "abc"}, False),
    ("div", {"tabindex": Dynamic()}, True),
])
def test_is_focusable(element, tag, attrs, focusable):
    assert element(tag, attrs).is_focusable() is focusable


def test_event_handler_detection(element):
    assert element("div", {"onclick": "go()"}).has_event_handler()
    assert element("div", {"on:click": Dynamic()}).has_event_handler()
    assert not element("div", {"onfocus": "go()"}).has_event_handler()


def test_aria_attributes_include_unknown_names(element):
    el = element("div", {"aria-label": "x", "aria-lable": "y", "title": "z"})
    assert [str(a.name) for a in el.aria_attributes()] == ["aria-label", "aria-lable"]


def test_dynamic_value_model():
    attr = HtmlAttribute(name="title", value={"kind": "dynamic"}, line=2, column=4)
    assert isinstance(attr.value, Dynamic)
    assert attr.is_dynamic
    assert attr.static_text is None


@pytest.mark.parametrize("text, expected", [
    ("0", 0), ("5", 5), ("-1", -1), ("+2", 2),
    ("1.0", None), (" 1", None), ("", None), (None, None),
])
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_tag_parse_skips_unknown_elements():
    assert Tag.parse("div") is Tag.DIV
    assert Tag.parse("my-widget") is None
