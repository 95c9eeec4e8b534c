# src/markup_parser/services/element_extract_service.py
from __future__ import annotations

import bisect
import re
from pathlib import PurePath
from typing import Dict, List, Optional, Tuple

from bs4 import BeautifulSoup, Comment, NavigableString, ParserRejectedMarkup, Tag as SoupTag
from bs4.element import Declaration, Doctype, ProcessingInstruction

from aria_auditor.dom.models import AttrValue, Dynamic, HtmlAttribute, HtmlElement, Static
from aria_auditor.knowledge.tags import Tag
from aria_auditor.model import ExtractionErrorKind
from markup_parser.model import ExtractionFailure, ExtractorSettings

# Attribute inside a raw start tag: name, optionally followed by =value
_ATTR_RE = re.compile(r"""\s*([^\s"'>/=]+)(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s"'=<>`]+))?""")
_TAG_NAME_RE = re.compile(r"<[^\s/>]+")
# A whole-value JSX style binding: {expr}
_BINDING_RE = re.compile(r"^\s*\{.*\}\s*$", re.DOTALL)

_NON_CONTENT = (Comment, Declaration, Doctype, ProcessingInstruction)

# Template block delimiters that must be closed somewhere after they open
_DELIMITERS = ((re.compile(r"\{\{"), "}}"), (re.compile(r"\{%"), "%}"))
# Script and style bodies are not template markup
_RAW_TEXT_RE = re.compile(r"<(script|style)\b.*?</\1\s*>", re.DOTALL | re.IGNORECASE)


class ElementExtractService:
    """
    Turns HTML (or HTML-like template) source into positioned HtmlElement
    records in document order.
    Note: Reading the file and reporting failures is left to the ExtractController.
    """

    def __init__(self, source: str, source_unit_id: str, settings: Optional[ExtractorSettings] = None):
        self.source = source
        self.source_unit_id = source_unit_id
        self.settings = settings or ExtractorSettings()
        self._dynamic_re = re.compile("|".join(self.settings.dynamic_markers), re.DOTALL)
        self._line_starts = self._index_lines(source)

    # -------- Public API --------

    def extract(self) -> List[HtmlElement]:
        """
        Every recognised element of the document, in document order.

        Raises:
            ExtractionFailure: The source is not well-formed enough to be checked.
        """
        if self._is_template():
            self._check_template_delimiters()
        soup = self._parse()

        elements: List[HtmlElement] = []
        for node in soup.find_all(True):
            tag = Tag.parse(node.name)
            if tag is None:
                continue
            if not self.settings.include_head and self._inside_head(node):
                continue
            elements.append(self._build_element(node, tag))
        return elements

    def _parse(self) -> BeautifulSoup:
        try:
            # Keep class/rel/... as the literal string instead of a token list
            return BeautifulSoup(self.source, "html.parser", multi_valued_attributes=None)
        except ParserRejectedMarkup as e:
            raise ExtractionFailure(self.source_unit_id, ExtractionErrorKind.SYNTAX, f"Markup rejected by parser: {e}")

    def _is_template(self) -> bool:
        suffix = PurePath(self.source_unit_id).suffix.lower()
        return suffix in {ext.lower() for ext in self.settings.template_extensions}

    def _check_template_delimiters(self) -> None:
        """An opened {{ or {% without a matching close later in the file is a markup error."""
        text = _RAW_TEXT_RE.sub(lambda m: "\n" * m.group(0).count("\n"), self.source)
        line_starts = self._index_lines(text)
        for opener, closer in _DELIMITERS:
            for match in opener.finditer(text):
                if text.find(closer, match.end()) == -1:
                    line = bisect.bisect_right(line_starts, match.start())
                    raise ExtractionFailure(
                        self.source_unit_id,
                        ExtractionErrorKind.MARKUP,
                        f"Unclosed template delimiter '{match.group(0)}' (expected '{closer}')",
                        line=line,
                    )

    # -------- Element construction --------

    def _build_element(self, node: SoupTag, tag: Tag) -> HtmlElement:
        line = node.sourceline or 1
        column = node.sourcepos or 0
        positions, self_closing = self._scan_start_tag(line, column)

        attributes = []
        for name, raw_value in node.attrs.items():
            attr_line, attr_column = positions.get(name.lower(), (line, column))
            attributes.append(HtmlAttribute(
                name=name,
                value=self._classify_value(raw_value),
                line=attr_line,
                column=attr_column,
            ))

        return HtmlElement(
            tag=tag,
            attributes=attributes,
            is_self_closing=self_closing or tag.is_void(),
            has_children=self._has_content(node),
            line=line,
            column=column,
            source_unit_id=self.source_unit_id,
        )

    def _classify_value(self, raw_value) -> Optional[AttrValue]:
        if raw_value is None:
            return None
        if isinstance(raw_value, list):
            raw_value = " ".join(raw_value)
        if _BINDING_RE.match(raw_value) or self._dynamic_re.search(raw_value):
            return Dynamic()
        return Static(text=raw_value)

    @staticmethod
    def _has_content(node: SoupTag) -> bool:
        """Any child element or non-whitespace text; comments do not count."""
        for child in node.children:
            if isinstance(child, SoupTag):
                return True
            if isinstance(child, NavigableString) and not isinstance(child, _NON_CONTENT):
                if child.strip():
                    return True
        return False

    @staticmethod
    def _inside_head(node: SoupTag) -> bool:
        if node.name == "head":
            return True
        return any(parent.name == "head" for parent in node.parents)

    # -------- Source positions --------

    @staticmethod
    def _index_lines(source: str) -> List[int]:
        starts = [0]
        for match in re.finditer(r"\n", source):
            starts.append(match.end())
        return starts

    def _to_offset(self, line: int, column: int) -> int:
        return self._line_starts[line - 1] + column

    def _to_position(self, offset: int) -> Tuple[int, int]:
        idx = bisect.bisect_right(self._line_starts, offset) - 1
        return idx + 1, offset - self._line_starts[idx]

    def _scan_start_tag(self, line: int, column: int) -> Tuple[Dict[str, Tuple[int, int]], bool]:
        """
        Re-reads the raw start tag to locate each attribute name.
        Returns (lowercased name -> (line, column)) and whether the tag ends in '/>'.
        """
        positions: Dict[str, Tuple[int, int]] = {}
        if line > len(self._line_starts):
            return positions, False

        offset = self._to_offset(line, column)
        name_match = _TAG_NAME_RE.match(self.source, offset)
        if not name_match:
            return positions, False

        pos = name_match.end()
        while pos < len(self.source):
            nxt = self._skip_ws(pos)
            if self.source.startswith((">", "/>"), nxt):
                break
            attr_match = _ATTR_RE.match(self.source, pos)
            if not attr_match or attr_match.end() == pos:
                break
            name = attr_match.group(1).lower()
            positions.setdefault(name, self._to_position(attr_match.start(1)))
            pos = attr_match.end()

        self_closing = self.source.startswith("/>", self._skip_ws(pos))
        return positions, self_closing

    def _skip_ws(self, pos: int) -> int:
        while pos < len(self.source) and self.source[pos].isspace():
            pos += 1
        return pos
