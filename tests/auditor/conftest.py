# tests/auditor/conftest.py
from typing import Dict, Optional, Union

import pytest

from aria_auditor.dom.models import Dynamic, HtmlAttribute, HtmlElement, Static
from aria_auditor.dom.qngine import QNGINE
from aria_auditor.knowledge.tags import Tag

def build_element(
        tag: Union[str, Tag],
        attrs: Optional[Dict[str, object]] = None,
        children: bool = False,
        line: int = 1,
        column: int = 0,
        unit: str = "page.html",
) -> HtmlElement:
    """
    Builds an element the way an extractor would. Attribute values:
    a str is static, a Dynamic() instance is a runtime value and None is a
    bare attribute.
    Attributes are placed on the element's line, one column apart.
    """
    attributes = []
    for i, (name, value) in enumerate((attrs or {}).items()):
        if isinstance(value, Dynamic):
            attr_value = value
        elif value is None:
            attr_value = None
        else:
            attr_value = Static(text=value)
        attributes.append(HtmlAttribute(name=name, value=attr_value, line=line, column=column + 1 + i))
    return HtmlElement(
        tag=Tag(tag),
        attributes=attributes,
        has_children=children,
        line=line,
        column=column,
        source_unit_id=unit,
    )


@pytest.fixture
def element():
    """Factory fixture for HtmlElement records."""
    return build_element


@pytest.fixture
def lint():
    """Runs every registered rule over the given elements."""
    engine = QNGINE()

    def _lint(*elements):
        return engine.run_audit(list(elements))

    return _lint


@pytest.fixture
def rule_ids(lint):
    """Rule ids reported for the given elements, in output order."""
    def _rule_ids(*elements):
        return [d.rule_id for d in lint(*elements)]

    return _rule_ids
