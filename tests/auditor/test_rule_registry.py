# tests/auditor/test_rule_registry.py
import pytest

from aria_auditor.dom.core import AuditRule, RuleGroup, audit_spec
from aria_auditor.dom.qngine import QNGINE
from aria_auditor.dom.references import NAME_ROLE_VALUE, USAGE_RESOURCES
from aria_auditor.dom.registry import RuleRegistry
from aria_auditor.managers.rule_selection_manager import RuleSelectionManager, UnknownRuleError, parse_rule_ids
from aria_auditor.model import Severity


def test_registry_contains_the_full_battery():
    ids = RuleRegistry.get_all_rule_ids()
    assert len(ids) == 36
    assert len(set(ids)) == 36
    assert ids == sorted(ids)
    assert ids[0] == "alt-text"
    assert ids[-1] == "tabindex-no-positive"


def test_shared_guidelines_are_referenced_by_several_groups():
    rules_citing = [r.id for r in RuleRegistry.get_all_rules() if NAME_ROLE_VALUE in r.guidelines]
    assert {"aria-props", "aria-role", "iframe-has-title", "no-static-element-interactions"} <= set(rules_citing)
    assert RuleRegistry.get_rule("no-static-element-interactions").resources == USAGE_RESOURCES


def test_every_rule_carries_metadata():
    for rule in RuleRegistry.get_all_rules():
        assert rule.description
        assert isinstance(rule.severity, Severity)
        assert all(link.startswith("https://") for link in rule.guidelines + rule.resources)


def test_select_keeps_registry_order():
    selected = RuleRegistry.select(["scope", "alt-text", "lang"])
    assert [r.id for r in selected] == ["alt-text", "lang", "scope"]


def test_audit_rule_requires_decorator():
    def bare(node):
        return None

    with pytest.raises(ValueError):
        AuditRule(bare)


def test_rule_group_collects_ids():
    @audit_spec(rule_id="b-rule", severity=Severity.INFO, description="B")
    def b(node):
        return None

    @audit_spec(rule_id="a-rule", severity=Severity.INFO, description="A")
    def a(node):
        return None

    assert RuleGroup("demo", [b, a]).rule_ids == ["a-rule", "b-rule"]


def test_engine_runs_only_selected_rules(element):
    engine = QNGINE(["alt-text"])
    found = engine.run_audit([element("img", {"src": "x", "tabindex": "5"})])
    assert [d.rule_id for d in found] == ["alt-text"]


# --- Rule selection ---

def test_parse_rule_ids():
    assert parse_rule_ids(None) == set()
    assert parse_rule_ids(" alt-text , lang,") == {"alt-text", "lang"}


def test_parse_rule_ids_rejects_unknown_ids():
    with pytest.raises(UnknownRuleError) as exc:
        parse_rule_ids("alt-text,alt-txt,nope")
    assert exc.value.unknown == ["alt-txt", "nope"]


def test_only_and_skip():
    manager = RuleSelectionManager(only={"alt-text", "lang", "scope"}, skip={"lang"})
    assert manager.active_rule_ids() == ["alt-text", "scope"]

    assert RuleSelectionManager(skip={"scope"}).active_rule_ids() == [
        i for i in RuleRegistry.get_all_rule_ids() if i != "scope"
    ]


def test_errors_only_filter_keeps_order(element, lint):
    diagnostics = lint(
        element("img", {"src": "x", "tabindex": "5"}, line=1),
        element("div", {"role": "widget"}, line=2),
    )
    kept = RuleSelectionManager(errors_only=True).apply(diagnostics)
    assert [d.rule_id for d in kept] == ["alt-text", "aria-role"]
    assert all(d.severity == Severity.ERROR for d in kept)


def test_from_strings():
    manager = RuleSelectionManager.from_strings("alt-text", "", errors_only=True)
    assert manager.only == {"alt-text"}
    assert manager.skip == set()
    assert manager.errors_only
