# src/aria_auditor/controllers/report_controller.py
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import pandas as pd

from aria_auditor.dom.registry import RuleRegistry
from aria_auditor.model import LintDiagnostic, LintSummary, Severity

logger = logging.getLogger(__name__)

DIAGNOSTIC_COLUMNS = ["file", "line", "column", "severity", "rule", "element", "message", "help"]


class ReportController:
    """
    Builds report data from a LintSummary: the JSON payload, the per-rule
    breakdown and CSV exports. Formatting for the terminal lives in the shell.
    """

    # --- HELPERS ---

    @staticmethod
    def to_dataframe(diagnostics: List[LintDiagnostic]) -> pd.DataFrame:
        """One row per diagnostic, in the order given."""
        rows = [
            {
                "file": d.source_unit_id,
                "line": d.line,
                "column": d.column,
                "severity": d.severity.value,
                "rule": d.rule_id,
                "element": d.element_tag.value,
                "message": d.message,
                "help": d.help or "",
            }
            for d in diagnostics
        ]
        return pd.DataFrame(rows, columns=DIAGNOSTIC_COLUMNS)

    def breakdown(self, diagnostics: List[LintDiagnostic]) -> List[Dict[str, Any]]:
        """Diagnostic counts per rule, most frequent first (ties by rule id)."""
        df = self.to_dataframe(diagnostics)
        if df.empty:
            return []

        counts = df.value_counts(["rule", "severity"]).reset_index(name="occurrences")
        counts = counts.sort_values(["occurrences", "rule"], ascending=[False, True])

        breakdown = []
        for row in counts.itertuples(index=False):
            rule = RuleRegistry.get_rule(row.rule)
            breakdown.append({
                "rule": row.rule,
                "severity": row.severity,
                "count": int(row.occurrences),
                "description": rule.description if rule else "",
            })
        return breakdown

    # --- REPORT ---

    def build_report(self, summary: LintSummary) -> Dict[str, Any]:
        """JSON-ready report payload for a finished run."""
        counts = summary.severity_counts
        return {
            "summary": {
                "units_checked": summary.units_checked,
                "errors": counts[Severity.ERROR],
                "warnings": counts[Severity.WARNING],
                "infos": counts[Severity.INFO],
                "extraction_errors": len(summary.extraction_errors),
                "elapsed_seconds": round(summary.elapsed_seconds, 3),
                "failed": summary.failed,
            },
            "breakdown": self.breakdown(summary.diagnostics),
            "diagnostics": [d.model_dump(mode="json") for d in summary.diagnostics],
            "extraction_errors": [e.model_dump(mode="json") for e in summary.extraction_errors],
        }

    def export(self, summary: LintSummary, path: Union[str, Path]) -> Path:
        """Writes all diagnostics to a CSV file and returns its path."""
        path = Path(path)
        if path.parent and not path.parent.exists():
            path.parent.mkdir(parents=True, exist_ok=True)

        df = self.to_dataframe(summary.diagnostics)
        df.to_csv(path, index=False)
        logger.info(f"Exported {len(df)} diagnostics to {path}")
        return path
