# src/aria_auditor/dom/core.py
from typing import Callable, List, NamedTuple, Optional, Sequence, Set

from aria_auditor.dom.models import HtmlAttribute, HtmlElement
from aria_auditor.model import LintDiagnostic, Severity


class Finding(NamedTuple):
    """What a check function reports; location and metadata are added by AuditRule."""
    message: str
    help: Optional[str] = None
    attribute: Optional[HtmlAttribute] = None


CheckFunc = Callable[[HtmlElement], Optional[Finding]]


def audit_spec(
        rule_id: str,
        severity: Severity,
        description: str,
        guidelines: Sequence[str] = (),
        resources: Sequence[str] = ()
):
    """
    Decorator to declare the identity and metadata of an audit rule function.
    Facilitates auto-discovery by the RuleRegistry.
    """
    def decorator(func):
        func.rule_id = rule_id
        func.severity = severity
        func.description = description
        func.guidelines = list(guidelines)
        func.resources = list(resources)
        return func
    return decorator


class AuditRule:
    """
    A registered rule: metadata plus a pure check over one element.
    """

    def __init__(self, func: CheckFunc):
        if not hasattr(func, "rule_id"):
            raise ValueError(f"{func.__name__} is not decorated with @audit_spec")
        self.id: str = func.rule_id
        self.severity: Severity = func.severity
        self.description: str = func.description
        self.guidelines: List[str] = func.guidelines
        self.resources: List[str] = func.resources
        self._func = func

    def check(self, element: HtmlElement) -> Optional[LintDiagnostic]:
        finding = self._func(element)
        if finding is None:
            return None

        anchor = finding.attribute if finding.attribute is not None else element
        return LintDiagnostic(
            rule_id=self.id,
            message=finding.message,
            severity=self.severity,
            source_unit_id=element.source_unit_id,
            line=anchor.line,
            column=anchor.column,
            element_tag=element.tag,
            help=finding.help,
        )

    def __repr__(self) -> str:
        return f"AuditRule({self.id!r}, {self.severity.value})"


class RuleGroup:
    """
    Configuration object bundling the rule functions of one rules module.
    Each module under aria_auditor.dom.rules exposes one as DEFINITION.
    """

    def __init__(self, name: str, audit_rules: List[CheckFunc]):
        self.name = name
        self.audit_rules = audit_rules

        # --- Auto-Discovery of Rule Ids ---
        ids: Set[str] = {rule.rule_id for rule in audit_rules if hasattr(rule, "rule_id")}
        self.rule_ids = sorted(ids)
