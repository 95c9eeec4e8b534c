# src/markup_parser/services/element_record_service.py
from __future__ import annotations

import logging
from typing import Any, Dict, List

from pydantic import TypeAdapter, ValidationError

from aria_auditor.dom.models import HtmlElement
from aria_auditor.knowledge.tags import Tag
from aria_auditor.model import ExtractionErrorKind
from markup_parser.model import ExtractionFailure

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(List[Dict[str, Any]])
_ELEMENTS = TypeAdapter(List[HtmlElement])


class ElementRecordService:
    """
    Loads element records produced by an external extractor (a JSON array of
    HtmlElement objects), so other front-ends can feed the rule engine.
    Records for tags outside the known vocabulary are skipped, like unknown
    tags in parsed markup.
    """

    def __init__(self, source_unit_id: str):
        self.source_unit_id = source_unit_id

    def load(self, json_text: str) -> List[HtmlElement]:
        if not json_text or not json_text.strip():
            raise ExtractionFailure(self.source_unit_id, ExtractionErrorKind.SYNTAX, "Empty element record file")

        try:
            records = _RECORDS.validate_json(json_text)
        except ValidationError as e:
            raise self._invalid(e) from e

        # Positions in the original array, so error locations point at the input
        kept = [(i, r) for i, r in enumerate(records) if not self._is_unknown_tag(r)]
        skipped = len(records) - len(kept)
        if skipped:
            logger.debug(f"Skipped {skipped} record(s) with unknown tags in {self.source_unit_id}")

        try:
            elements = _ELEMENTS.validate_python([r for _, r in kept])
        except ValidationError as e:
            raise self._invalid(e, [i for i, _ in kept]) from e

        logger.debug(f"Loaded {len(elements)} element records for {self.source_unit_id}")
        return elements

    @staticmethod
    def _is_unknown_tag(record: Dict[str, Any]) -> bool:
        tag = record.get("tag")
        return isinstance(tag, str) and Tag.parse(tag) is None

    def _invalid(self, error: ValidationError, positions: List[int] = None) -> ExtractionFailure:
        first = error.errors()[0]
        loc = list(first.get("loc", ()))
        if positions is not None and loc and isinstance(loc[0], int):
            loc[0] = positions[loc[0]]
        location = ".".join(str(p) for p in loc)
        return ExtractionFailure(
            self.source_unit_id,
            ExtractionErrorKind.SYNTAX,
            f"Invalid element record at '{location}': {first.get('msg')} ({error.error_count()} error(s))",
        )
