# src/aria_auditor/managers/rule_selection_manager.py
import logging
from typing import Iterable, List, Optional, Set

from aria_auditor.dom.registry import RuleRegistry
from aria_auditor.model import LintDiagnostic, Severity

logger = logging.getLogger(__name__)


class UnknownRuleError(ValueError):
    """Raised when a rule selection names ids that are not registered."""

    def __init__(self, unknown: List[str]):
        self.unknown = unknown
        super().__init__(f"Unknown rule id(s): {', '.join(unknown)}")


def parse_rule_ids(items: Optional[str]) -> Set[str]:
    """
    Parses a comma separated rule id list (e.g. 'alt-text,aria-role') and
    validates every id against the registry.
    """
    if not items:
        return set()
    ids = {i.strip() for i in items.split(',') if i.strip()}
    known = set(RuleRegistry.get_all_rule_ids())
    unknown = sorted(ids - known)
    if unknown:
        raise UnknownRuleError(unknown)
    return ids


class RuleSelectionManager:
    """
    Decides which rules run and which diagnostics are reported.

    `only` restricts the run to the listed rules, `skip` removes rules from it,
    `errors_only` hides warnings and infos from the result.
    """

    def __init__(
            self,
            only: Optional[Iterable[str]] = None,
            skip: Optional[Iterable[str]] = None,
            errors_only: bool = False
    ):
        self.only: Set[str] = set(only or [])
        self.skip: Set[str] = set(skip or [])
        self.errors_only = errors_only

        overlap = self.only & self.skip
        if overlap:
            logger.warning(f"Rules both selected and skipped, skipping wins: {', '.join(sorted(overlap))}")

    @classmethod
    def from_strings(cls, only: Optional[str], skip: Optional[str], errors_only: bool = False) -> "RuleSelectionManager":
        return cls(parse_rule_ids(only), parse_rule_ids(skip), errors_only)

    def active_rule_ids(self) -> List[str]:
        """Rule ids to evaluate, in registry order."""
        ids = RuleRegistry.get_all_rule_ids()
        if self.only:
            ids = [i for i in ids if i in self.only]
        return [i for i in ids if i not in self.skip]

    def apply(self, diagnostics: List[LintDiagnostic]) -> List[LintDiagnostic]:
        """Filters diagnostics without changing their relative order."""
        result = [d for d in diagnostics if d.rule_id not in self.skip]
        if self.only:
            result = [d for d in result if d.rule_id in self.only]
        if self.errors_only:
            result = [d for d in result if d.severity == Severity.ERROR]
        return result
