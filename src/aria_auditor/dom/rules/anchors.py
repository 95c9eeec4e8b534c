# src/aria_auditor/dom/rules/anchors.py
from typing import Optional

from aria_auditor.dom.core import Finding, RuleGroup, audit_spec
from aria_auditor.dom.models import HtmlElement
from aria_auditor.dom.references import KEYBOARD, NAME_ROLE_VALUE
from aria_auditor.knowledge.aria import Aria
from aria_auditor.knowledge.attributes import HtmlAttr
from aria_auditor.knowledge.tags import Tag
from aria_auditor.model import Severity

AMBIGUOUS_TEXTS = ("click here", "here", "link", "a link", "learn more")

# href values that do not navigate anywhere
INVALID_HREFS = ("#", "", "javascript:void(0)")


# --- RULES ---

@audit_spec(
    rule_id="anchor-ambiguous-text",
    severity=Severity.WARNING,
    description='Enforce <a> text to not exactly match "click here", "here", "link", or "a link".',
    resources=[
        "https://webaim.org/techniques/hypertext/",
        "https://dequeuniversity.com/checklists/web/links",
    ],
)
def check_anchor_ambiguous_text(node: HtmlElement) -> Optional[Finding]:
    if node.tag != Tag.A:
        return None

    for attr in node.attributes:
        if attr.name not in (Aria.LABEL, HtmlAttr.TITLE) or attr.static_text is None:
            continue
        if attr.static_text.lower().strip() in AMBIGUOUS_TEXTS:
            return Finding(
                f'<a> element has ambiguous link text "{attr.static_text}". '
                f"Link text should be descriptive of the link's purpose.",
                help="Use text that describes the purpose of the link, "
                     "such as where the link goes or what it does.",
                attribute=attr,
            )
    return None


@audit_spec(
    rule_id="anchor-has-content",
    severity=Severity.WARNING,
    description="Enforce all anchors to contain accessible content.",
    guidelines=[
        "https://www.w3.org/WAI/WCAG21/Understanding/link-purpose-in-context",
        NAME_ROLE_VALUE,
    ],
    resources=["https://dequeuniversity.com/rules/axe/3.2/link-name"],
)
def check_anchor_has_content(node: HtmlElement) -> Optional[Finding]:
    if node.tag != Tag.A:
        return None

    if not node.has_children and not node.has_attribute(Aria.LABEL, Aria.LABELLEDBY, HtmlAttr.TITLE):
        return Finding(
            "<a> element is missing content. Links must have discernible text.",
            help="Add text content or an `aria-label` attribute.",
        )
    return None


@audit_spec(
    rule_id="anchor-is-valid",
    severity=Severity.WARNING,
    description="Enforce all anchors are valid, navigable elements.",
    guidelines=[KEYBOARD],
    resources=[
        "https://webaim.org/techniques/hypertext/",
        "https://marcysutton.com/links-vs-buttons-in-modern-web-applications/",
        "https://www.w3.org/TR/using-aria/#NOTES",
    ],
)
def check_anchor_is_valid(node: HtmlElement) -> Optional[Finding]:
    if node.tag != Tag.A:
        return None

    for attr in node.attributes:
        if attr.name == HtmlAttr.HREF and attr.static_text in INVALID_HREFS:
            return Finding(
                f'<a> element has an invalid `href` value "{attr.static_text}". '
                f"Use a real URL or use a <button> for actions.",
                help="Use a meaningful `href`, or use a <button> element instead.",
                attribute=attr,
            )
    return None


# --- DEFINITION ---
DEFINITION = RuleGroup(
    name="anchors",
    audit_rules=[check_anchor_ambiguous_text, check_anchor_has_content, check_anchor_is_valid]
)
