# tests/parser/test_element_extract_service.py
import pytest

from aria_auditor.dom.models import Dynamic, Static
from aria_auditor.knowledge.tags import Tag
from aria_auditor.model import ExtractionErrorKind
from markup_parser.model import ExtractionFailure, ExtractorSettings
from markup_parser.services.element_extract_service import ElementExtractService


def extract(markup, settings=None, unit="page.html"):
    return ElementExtractService(markup, unit, settings).extract()


def test_elements_come_back_in_document_order():
    elements = extract("<main><h1>Title</h1><p>Body <a href='/x'>link</a></p></main>")
    assert [e.tag for e in elements] == [Tag.MAIN, Tag.H1, Tag.P, Tag.A]
    assert all(e.source_unit_id == "page.html" for e in elements)


def test_element_and_attribute_positions():
    """Lines are 1-based, columns 0-based, attributes point at their name."""
    elements = extract('<div>\n  <img src="a.png" alt="">\n</div>')
    img = elements[1]
    assert (img.line, img.column) == (2, 2)

    src = img.get_attribute("src")
    alt = img.get_attribute("alt")
    assert (src.line, src.column) == (2, 7)
    assert (alt.line, alt.column) == (2, 19)


def test_attribute_on_a_continuation_line():
    elements = extract('<button\n    type="button"\n    aria-pressed="true">Go</button>')
    pressed = elements[0].get_attribute("aria-pressed")
    assert (pressed.line, pressed.column) == (3, 4)


def test_unknown_tags_are_skipped_but_their_children_are_kept():
    elements = extract("<my-widget><button>Go</button></my-widget><svg-icon></svg-icon>")
    assert [e.tag for e in elements] == [Tag.BUTTON]


@pytest.mark.parametrize("markup, has_children", [
    ("<h1>Hi</h1>", True),
    ("<h1><span></span></h1>", True),
    ("<h1></h1>", False),
    ("<h1>   \n  </h1>", False),
    ("<h1><!-- todo --></h1>", False),
])
def test_has_children(markup, has_children):
    assert extract(markup)[0].has_children is has_children


@pytest.mark.parametrize("markup, self_closing", [
    ('<img src="a.png">', True),
    ("<br>", True),
    ("<div/>", True),
    ('<input type="text" />', True),
    ("<div></div>", False),
])
def test_self_closing(markup, self_closing):
    assert extract(markup)[0].is_self_closing is self_closing


@pytest.mark.parametrize("value", ["{{ caption }}", "Photo: {{ name }}", "${caption}", "{% trans %}Hi{% endtrans %}"])
def test_interpolated_values_are_dynamic(value):
    img = extract(f'<img alt="{value}">')[0]
    assert isinstance(img.get_attribute("alt").value, Dynamic)


def test_whole_value_bindings_are_dynamic():
    img = extract("<img alt={caption}>")[0]
    assert img.get_attribute("alt").is_dynamic


def test_plain_values_are_static():
    div = extract('<div class="card wide" title="Hello {world}">x</div>')[0]
    assert div.get_attribute("class").value == Static(text="card wide")
    assert div.static_value("title") == "Hello {world}"


def test_valueless_attribute_is_present_and_empty():
    video = extract("<video muted></video>")[0]
    assert video.has_attribute("muted")
    assert video.static_value("muted") == ""


def test_framework_attribute_names():
    button = extract('<button on:click={save} htmlFor="x">Save</button>')[0]
    assert button.has_event_handler()
    assert button.has_attribute("for")


def test_head_can_be_excluded():
    markup = "<html><head><title>T</title><meta charset='utf-8'></head><body><h1>T</h1></body></html>"
    assert [e.tag for e in extract(markup)] == [Tag.HTML, Tag.HEAD, Tag.TITLE, Tag.META, Tag.BODY, Tag.H1]
    assert [e.tag for e in extract(markup, ExtractorSettings(include_head=False))] == [Tag.HTML, Tag.BODY, Tag.H1]


def test_custom_dynamic_markers():
    settings = ExtractorSettings(dynamic_markers=[r"\[\[.*?\]\]"])
    img = extract('<img alt="[[ caption ]]" title="Hi {{ t }}">', settings)[0]
    assert img.get_attribute("alt").is_dynamic
    assert not img.get_attribute("title").is_dynamic


def test_unclosed_template_delimiter_is_a_markup_error():
    with pytest.raises(ExtractionFailure) as exc_info:
        extract("<p>\n  {{ user.name\n</p>", unit="page.jinja")
    error = exc_info.value.error
    assert error.kind == ExtractionErrorKind.MARKUP
    assert error.line == 2
    assert error.source_unit_id == "page.jinja"


def test_script_bodies_are_not_checked_for_delimiters():
    elements = extract("<script>const t = '{{';</script><p>ok</p>", unit="page.vue")
    assert [e.tag for e in elements] == [Tag.SCRIPT, Tag.P]


def test_empty_source_has_no_elements():
    assert extract("") == []


def test_literal_braces_in_plain_html_are_text():
    """Only template files must balance their delimiters."""
    elements = extract("<p>Write <code>{{</code> to open a block.</p>")
    assert [e.tag for e in elements] == [Tag.P, Tag.CODE]


def test_template_suffixes_are_configurable():
    settings = ExtractorSettings(template_extensions=[".HTML"])
    with pytest.raises(ExtractionFailure):
        extract("<p>{% if x</p>", settings)
