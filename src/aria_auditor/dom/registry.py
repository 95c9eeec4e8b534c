# src/aria_auditor/dom/registry.py
import importlib
import pkgutil
import logging
from typing import Dict, Iterable, List, Optional

from .core import AuditRule, RuleGroup

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Central registry for audit rules.

    Discovers the RuleGroup definitions in the 'aria_auditor.dom.rules'
    package and exposes the rules in ascending id order, which is also the
    order the engine evaluates them in.
    """

    _rules: Dict[str, AuditRule] = {}
    _loaded: bool = False

    @classmethod
    def discover(cls) -> None:
        """
        Registers every rule found in the 'aria_auditor.dom.rules' package.

        Each module there exposes a `DEFINITION` (instance of `RuleGroup`).
        A module that fails to import aborts discovery.
        """
        if cls._loaded:
            return

        import aria_auditor.dom.rules as rules_pkg

        cls._rules = {}

        for _, name, _ in sorted(pkgutil.iter_modules(rules_pkg.__path__), key=lambda m: m.name):
            full_name = f"aria_auditor.dom.rules.{name}"
            try:
                module = importlib.import_module(full_name)
            except Exception as e:
                logger.error(f"Error loading rule module {name}: {e}")
                raise

            defn = getattr(module, "DEFINITION", None)
            if not isinstance(defn, RuleGroup):
                continue

            for func in defn.audit_rules:
                cls._register_rule(AuditRule(func))
            logger.debug(f"Rule group loaded: {defn.name} ({len(defn.rule_ids)} rules)")

        cls._rules = dict(sorted(cls._rules.items()))
        cls._loaded = True

    @classmethod
    def _register_rule(cls, rule: AuditRule) -> None:
        if rule.id in cls._rules:
            raise ValueError(f"Duplicate audit rule id: {rule.id}")
        cls._rules[rule.id] = rule

    @classmethod
    def get_all_rules(cls) -> List[AuditRule]:
        """Returns all registered rules in ascending id order."""
        cls.discover()
        return list(cls._rules.values())

    @classmethod
    def get_rule(cls, rule_id: str) -> Optional[AuditRule]:
        cls.discover()
        return cls._rules.get(rule_id)

    @classmethod
    def get_all_rule_ids(cls) -> List[str]:
        """
        Returns the ids of all registered rules.
        Used by the RuleSelectionManager to validate --only / --skip.
        """
        cls.discover()
        return list(cls._rules)

    @classmethod
    def select(cls, rule_ids: Optional[Iterable[str]] = None) -> List[AuditRule]:
        """Registered rules restricted to `rule_ids`, still in registry order."""
        rules = cls.get_all_rules()
        if rule_ids is None:
            return rules
        wanted = set(rule_ids)
        return [rule for rule in rules if rule.id in wanted]
