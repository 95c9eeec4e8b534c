# src/aria_auditor/controllers/audit_controller.py
import logging
import time
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import Any, Callable, Dict, Iterable, List, Optional

from aria_auditor.dom.qngine import QNGINE
from aria_auditor.managers.diagnostic_aggregator import DiagnosticAggregator
from aria_auditor.managers.rule_selection_manager import RuleSelectionManager
from aria_auditor.model import ExtractionResult, LintSummary

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]
# Turns a unit id (usually a file path) into its elements or a typed error.
# Must be picklable when more than one worker is used, e.g. a bound method.
Extractor = Callable[[str], ExtractionResult]


def _worker_audit_unit(unit: str, extract: Extractor, rule_ids: Optional[List[str]]) -> Dict[str, Any]:
    """
    Worker function to extract and audit a single source unit in a separate process.
    Extraction problems are returned as data; rule crashes propagate to the caller.
    """
    return _audit_result(extract(unit), QNGINE(rule_ids))


def _audit_result(result: ExtractionResult, engine: QNGINE) -> Dict[str, Any]:
    if not result.ok:
        return {"unit": result.source_unit_id, "error": result.error}
    return {
        "unit": result.source_unit_id,
        "element_count": len(result.elements),
        "diagnostics": engine.run_audit(result.elements),
    }


class AuditController:
    """
    Orchestrates a lint run: extraction, rule evaluation (optionally across
    worker processes) and aggregation into a LintSummary.
    """

    def __init__(
            self,
            selection: Optional[RuleSelectionManager] = None,
            workers: int = 1
    ):
        self.selection = selection or RuleSelectionManager()
        self.workers = workers
        self.aggregator = DiagnosticAggregator()

    def run_audit(
            self,
            units: List[str],
            extract: Extractor,
            progress_callback: Optional[ProgressCallback] = None
    ) -> LintSummary:
        """
        Extracts and audits every unit, in the given (discovery) order.

        Args:
            units: Unit ids (usually file paths) handed to `extract`.
            extract: Produces the ExtractionResult for one unit.
            progress_callback: Called with (done, total) after each unit.
        """
        rule_ids = self.selection.active_rule_ids()
        func = partial(_worker_audit_unit, extract=extract, rule_ids=rule_ids)

        start = time.perf_counter()
        self.aggregator.reset()
        total = len(units)
        logger.info(f"Auditing {total} unit(s) with {len(rule_ids)} rule(s), workers={self.workers}")

        try:
            if self.workers <= 1 or total <= 1:
                results_iter = map(func, units)
                self._collect(results_iter, total, progress_callback)
            else:
                with ProcessPoolExecutor(max_workers=self.workers) as executor:
                    # map() yields in submission order, so discovery order is kept
                    results_iter = executor.map(func, units)
                    self._collect(results_iter, total, progress_callback)
        except Exception as e:
            logger.error(f"Rule evaluation crashed: {e}", exc_info=True)
            raise

        return self._finish(start)

    def audit_results(self, results: Iterable[ExtractionResult]) -> LintSummary:
        """Audits already extracted units in-process."""
        engine = QNGINE(self.selection.active_rule_ids())
        start = time.perf_counter()
        self.aggregator.reset()
        for result in results:
            self._add(_audit_result(result, engine))
        return self._finish(start)

    # -------- Helpers --------

    def _collect(self, results_iter, total: int, progress_callback: Optional[ProgressCallback]) -> None:
        for i, result in enumerate(results_iter):
            self._add(result)
            if progress_callback:
                progress_callback(i + 1, total)

    def _add(self, result: Dict[str, Any]) -> None:
        if "error" in result:
            self.aggregator.add_error(result["error"])
            return
        self.aggregator.add_unit(
            result["unit"],
            result["element_count"],
            self.selection.apply(result["diagnostics"])
        )

    def _finish(self, start: float) -> LintSummary:
        summary = self.aggregator.finalize(elapsed_seconds=time.perf_counter() - start)
        logger.info(
            f"Audit finished: {summary.units_checked} unit(s) checked, "
            f"{len(summary.diagnostics)} diagnostic(s), {len(summary.extraction_errors)} extraction error(s)"
        )
        return summary
