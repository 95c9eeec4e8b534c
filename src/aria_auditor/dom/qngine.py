# src/aria_auditor/dom/qngine.py
from typing import Iterable, List, Optional

from aria_auditor.model import LintDiagnostic
from .models import HtmlElement
from .registry import RuleRegistry


class QNGINE:
    """
    Quality Engine (QNGINE) for accessibility audits.

    Applies every registered rule to every element of a source unit. Rules are
    independent: each sees one element and yields at most one diagnostic.
    """

    def __init__(self, rule_ids: Optional[Iterable[str]] = None):
        """
        Loads the rules to evaluate.

        Args:
            rule_ids: Optional subset of rule ids; all rules when omitted.
        """
        self.rules = RuleRegistry.select(rule_ids)

    def run_audit(self, elements: Iterable[HtmlElement]) -> List[LintDiagnostic]:
        """
        Runs the rule battery over the elements of one source unit.

        Args:
            elements: Elements in document order.

        Returns:
            List[LintDiagnostic]: Findings in element order, then registry order.
        """
        findings = []
        for element in elements:
            for rule in self.rules:
                diagnostic = rule.check(element)
                if diagnostic is not None:
                    findings.append(diagnostic)
        return findings
