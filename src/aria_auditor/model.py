# src/aria_auditor/model.py
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from aria_auditor.dom.models import HtmlElement
from aria_auditor.knowledge.tags import Tag


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"

    def __str__(self) -> str:
        return self.value


class ExtractionErrorKind(str, Enum):
    IO = "io"
    SYNTAX = "syntax"
    MARKUP = "markup"


class ExtractionError(BaseModel):
    """
    A source unit that could not be turned into elements. Reported next to
    the diagnostics, never fatal to the run.
    """
    model_config = ConfigDict(frozen=True)

    source_unit_id: str
    kind: ExtractionErrorKind
    message: str
    line: Optional[int] = None


class ExtractionResult(BaseModel):
    """Outcome of extracting one source unit: elements or an error, never both."""
    source_unit_id: str
    elements: List[HtmlElement] = Field(default_factory=list)
    error: Optional[ExtractionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class LintDiagnostic(BaseModel):
    """
    A single rule violation, located at the offending attribute when the rule
    is attribute-specific and at the element's start tag otherwise.
    """
    model_config = ConfigDict(frozen=True)

    rule_id: str  # e.g. 'alt-text', 'aria-role'
    message: str
    severity: Severity
    source_unit_id: str  # file path or other unit key
    line: int  # 1-based
    column: int  # 0-based
    element_tag: Tag
    help: Optional[str] = None

    def sort_key(self):
        return self.source_unit_id, self.line, self.column


class LintSummary(BaseModel):
    """
    Outcome of one run over a set of source units.
    Diagnostics are already in their final (unit, line, column) order.
    """
    diagnostics: List[LintDiagnostic] = Field(default_factory=list)
    extraction_errors: List[ExtractionError] = Field(default_factory=list)
    units_checked: int = 0
    elapsed_seconds: float = 0.0

    @property
    def severity_counts(self) -> Dict[Severity, int]:
        counts = {severity: 0 for severity in Severity}
        for diag in self.diagnostics:
            counts[diag.severity] += 1
        return counts

    @property
    def error_count(self) -> int:
        return self.severity_counts[Severity.ERROR]

    @property
    def warning_count(self) -> int:
        return self.severity_counts[Severity.WARNING]

    @property
    def info_count(self) -> int:
        return self.severity_counts[Severity.INFO]

    @property
    def failed(self) -> bool:
        """A run fails when any error-severity diagnostic was produced."""
        return self.error_count > 0
