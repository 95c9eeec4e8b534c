# src/markup_parser/controllers/extract_controller.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from aria_auditor.model import ExtractionError, ExtractionErrorKind, ExtractionResult
from markup_parser.model import ExtractionFailure, ExtractorSettings
from markup_parser.services.element_extract_service import ElementExtractService
from markup_parser.services.element_record_service import ElementRecordService

logger = logging.getLogger(__name__)


class ExtractController:
    """
    Turns source units into element lists for the rule engine.
    Never raises for a bad unit: failures come back as an ExtractionResult
    carrying a typed ExtractionError, so one broken file does not stop a run.
    """

    def __init__(self, settings: Optional[ExtractorSettings] = None) -> None:
        self.settings = settings or ExtractorSettings()

    def extract_file(self, path: Union[str, Path]) -> ExtractionResult:
        """Reads and extracts one markup file; the unit id is the path as given."""
        unit_id = str(path)
        try:
            source = Path(path).read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            return self._failed(unit_id, ExtractionErrorKind.SYNTAX, f"File is not valid UTF-8: {e.reason}")
        except OSError as e:
            return self._failed(unit_id, ExtractionErrorKind.IO, f"Could not read file: {e.strerror or e}")
        return self.extract_source(source, unit_id)

    def extract_source(self, source: str, source_unit_id: str) -> ExtractionResult:
        try:
            elements = ElementExtractService(source, source_unit_id, self.settings).extract()
        except ExtractionFailure as e:
            return self._failed_with(e.error)
        return ExtractionResult(source_unit_id=source_unit_id, elements=elements)

    def extract_records(self, path: Union[str, Path]) -> ExtractionResult:
        """Loads a JSON element record file instead of parsing markup."""
        unit_id = str(path)
        try:
            json_text = Path(path).read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            return self._failed(unit_id, ExtractionErrorKind.SYNTAX, f"File is not valid UTF-8: {e.reason}")
        except OSError as e:
            return self._failed(unit_id, ExtractionErrorKind.IO, f"Could not read file: {e.strerror or e}")

        try:
            elements = ElementRecordService(unit_id).load(json_text)
        except ExtractionFailure as e:
            return self._failed_with(e.error)
        return ExtractionResult(source_unit_id=unit_id, elements=elements)

    # -------- Helpers --------

    def _failed(self, unit_id: str, kind: ExtractionErrorKind, message: str) -> ExtractionResult:
        return self._failed_with(ExtractionError(source_unit_id=unit_id, kind=kind, message=message))

    @staticmethod
    def _failed_with(error: ExtractionError) -> ExtractionResult:
        location = f":{error.line}" if error.line else ""
        logger.warning(f"Extraction failed ({error.kind.value}) for {error.source_unit_id}{location}: {error.message}")
        return ExtractionResult(source_unit_id=error.source_unit_id, error=error)
