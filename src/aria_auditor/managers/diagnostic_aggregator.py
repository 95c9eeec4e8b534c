# src/aria_auditor/managers/diagnostic_aggregator.py
import logging
from typing import List

from aria_auditor.model import ExtractionError, LintDiagnostic, LintSummary

logger = logging.getLogger(__name__)


class DiagnosticAggregator:
    """
    Collects per-unit results and produces the final, totally ordered summary.

    Units must be added in discovery order. The final order is a stable sort
    on (source unit, line, column), so diagnostics sharing a position keep
    their element order and then registry order.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        self._diagnostics: List[LintDiagnostic] = []
        self._errors: List[ExtractionError] = []
        self._units_checked = 0

    def add_unit(self, source_unit_id: str, element_count: int, diagnostics: List[LintDiagnostic]) -> None:
        """Adds the result of one successfully extracted unit."""
        # Units without any element (e.g. empty templates) are not counted as checked.
        if element_count > 0:
            self._units_checked += 1
        self._diagnostics.extend(diagnostics)
        logger.debug(f"{source_unit_id}: {element_count} elements, {len(diagnostics)} diagnostics")

    def add_error(self, error: ExtractionError) -> None:
        self._errors.append(error)

    def finalize(self, elapsed_seconds: float = 0.0) -> LintSummary:
        ordered = sorted(self._diagnostics, key=LintDiagnostic.sort_key)
        return LintSummary(
            diagnostics=ordered,
            extraction_errors=list(self._errors),
            units_checked=self._units_checked,
            elapsed_seconds=elapsed_seconds,
        )
