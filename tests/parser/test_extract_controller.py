# tests/parser/test_extract_controller.py
import json
import logging

import pytest

from aria_auditor.knowledge.tags import Tag
from aria_auditor.model import ExtractionErrorKind
from markup_parser.controllers.extract_controller import ExtractController
from markup_parser.model import ExtractionFailure
from markup_parser.services.element_extract_service import ElementExtractService
from markup_parser.services.element_record_service import ElementRecordService


@pytest.fixture
def controller():
    return ExtractController()


def test_extract_file(controller, tmp_path):
    path = tmp_path / "index.html"
    path.write_text("<nav><a href='/'>Home</a></nav>", encoding="utf-8")

    result = controller.extract_file(path)
    assert result.ok
    assert result.source_unit_id == str(path)
    assert [e.tag for e in result.elements] == [Tag.NAV, Tag.A]


def test_missing_file_is_an_io_error(controller, tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        result = controller.extract_file(tmp_path / "gone.html")
    assert not result.ok
    assert result.elements == []
    assert result.error.kind == ExtractionErrorKind.IO
    assert result.error.message.startswith("Could not read file")
    assert "Extraction failed (io)" in caplog.text


def test_invalid_utf8_is_a_syntax_error(controller, tmp_path):
    path = tmp_path / "latin1.html"
    path.write_bytes(b"<p>caf\xe9</p>")
    result = controller.extract_file(path)
    assert result.error.kind == ExtractionErrorKind.SYNTAX
    assert "not valid UTF-8" in result.error.message


def test_markup_error_is_returned_not_raised(controller):
    result = controller.extract_source("<p>{% if user</p>", "tpl.jinja")
    assert result.error.kind == ExtractionErrorKind.MARKUP
    assert result.error.line == 1


# --- Element records ---

def test_records_round_trip_through_the_record_format(controller, tmp_path):
    elements = ElementExtractService('<div role="button" tabindex="{{ i }}">Go</div>', "App.vue").extract()
    path = tmp_path / "App.json"
    path.write_text(json.dumps([e.model_dump(mode="json") for e in elements]), encoding="utf-8")

    result = controller.extract_records(path)
    assert result.ok
    assert result.elements == elements
    assert result.elements[0].source_unit_id == "App.vue"


@pytest.mark.parametrize("payload, fragment", [
    ("", "Empty element record file"),
    ("{not json", "Invalid element record"),
    ('[{"tag": "div", "line": 0, "column": 0, "source_unit_id": "x"}]', "Invalid element record at '0.line'"),
    ('[{"tag": 5, "line": 1, "column": 0, "source_unit_id": "x"}]', "Invalid element record at '0.tag'"),
    ('[{"tag": "x-card", "line": 1}, {"tag": "img", "column": 0, "source_unit_id": "x"}]',
     "Invalid element record at '1.line'"),
])
def test_invalid_records_are_syntax_errors(payload, fragment):
    with pytest.raises(ExtractionFailure) as exc_info:
        ElementRecordService("records.json").load(payload)
    assert exc_info.value.error.kind == ExtractionErrorKind.SYNTAX
    assert fragment in str(exc_info.value)


def test_invalid_record_file_through_the_controller(controller, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[1, 2]", encoding="utf-8")
    result = controller.extract_records(path)
    assert not result.ok
    assert result.error.kind == ExtractionErrorKind.SYNTAX


def test_records_with_unknown_tags_are_skipped(controller, tmp_path):
    """A custom element in the record list does not cost the unit its other elements."""
    records = [
        {"tag": "img", "line": 2, "column": 4, "source_unit_id": "Gallery.svelte"},
        {"tag": "my-widget", "attributes": [{"name": "role", "value": None, "line": 3, "column": 15}],
         "line": 3, "column": 4, "source_unit_id": "Gallery.svelte"},
        {"tag": "h2", "has_children": True, "line": 4, "column": 4, "source_unit_id": "Gallery.svelte"},
    ]
    path = tmp_path / "gallery.json"
    path.write_text(json.dumps(records), encoding="utf-8")

    result = controller.extract_records(path)
    assert result.ok
    assert [(e.tag, e.line) for e in result.elements] == [(Tag.IMG, 2), (Tag.H2, 4)]
