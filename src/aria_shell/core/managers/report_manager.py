# src/aria_shell/core/managers/report_manager.py
import json
import logging
from typing import List, TextIO

from aria_auditor.controllers.report_controller import ReportController
from aria_auditor.model import LintDiagnostic, LintSummary

logger = logging.getLogger(__name__)

FORMATS = ("pretty", "json")


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


class ReportManager:
    """
    Renders a finished run for the terminal (pretty) or for tools (json).
    """

    def __init__(self, report_controller: ReportController = None):
        self.report_controller = report_controller or ReportController()

    # --- PRETTY ---

    @staticmethod
    def format_diagnostic(diag: LintDiagnostic) -> List[str]:
        lines = [
            f"{diag.severity.value}: {diag.message} [{diag.rule_id}]",
            f"  --> {diag.source_unit_id}:{diag.line}:{diag.column}",
        ]
        if diag.help:
            lines.append(f"  help: {diag.help}")
        return lines

    @staticmethod
    def format_summary(summary: LintSummary) -> List[str]:
        counts_line = (
            f"Checked {_plural(summary.units_checked, 'file')} in {summary.elapsed_seconds:.2f}s. "
            f"Found {_plural(summary.error_count, 'error')}, "
            f"{_plural(summary.warning_count, 'warning')}, "
            f"{_plural(summary.info_count, 'info')}."
        )
        if summary.error_count:
            verdict = "  Some issues must be fixed for accessibility compliance."
        elif summary.warning_count:
            verdict = "  Consider addressing warnings to improve accessibility."
        else:
            verdict = "  No accessibility issues found!"
        return [counts_line, verdict]

    def render_pretty(self, summary: LintSummary) -> str:
        lines: List[str] = []
        for diag in summary.diagnostics:
            lines.extend(self.format_diagnostic(diag))
            lines.append("")
        lines.append("")
        lines.extend(self.format_summary(summary))
        return "\n".join(lines) + "\n"

    # --- JSON ---

    def render_json(self, summary: LintSummary) -> str:
        return json.dumps(self.report_controller.build_report(summary), indent=2) + "\n"

    # --- OUTPUT ---

    def write(self, summary: LintSummary, fmt: str, stream: TextIO) -> None:
        match fmt:
            case "json":
                stream.write(self.render_json(summary))
            case "pretty":
                stream.write(self.render_pretty(summary))
            case _:
                raise ValueError(f"Unknown output format: {fmt}")
        logger.debug(f"Wrote {len(summary.diagnostics)} diagnostics as {fmt}")

    @staticmethod
    def format_extraction_errors(summary: LintSummary) -> List[str]:
        lines = []
        for err in summary.extraction_errors:
            location = f":{err.line}" if err.line else ""
            lines.append(f"Parse error ({err.kind.value}): {err.source_unit_id}{location}: {err.message}")
        return lines
