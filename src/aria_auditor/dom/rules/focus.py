# src/aria_auditor/dom/rules/focus.py
from typing import Optional

from aria_auditor.dom.core import Finding, RuleGroup, audit_spec
from aria_auditor.dom.models import HtmlElement, parse_int
from aria_auditor.dom.references import KEYBOARD
from aria_auditor.knowledge.aria import Aria
from aria_auditor.knowledge.attributes import HtmlAttr
from aria_auditor.model import Severity


# --- RULES ---

@audit_spec(
    rule_id="no-access-key",
    severity=Severity.WARNING,
    description="Enforce that the accessKey prop is not used on any element to avoid complications "
                "with keyboard commands used by a screen reader.",
    resources=["https://webaim.org/techniques/keyboard/accesskey#spec"],
)
def check_no_access_key(node: HtmlElement) -> Optional[Finding]:
    attr = node.get_attribute(HtmlAttr.ACCESSKEY)
    if attr is None:
        return None
    return Finding(
        f"Avoid using the `accesskey` attribute on <{node.tag}>. Access keys create keyboard shortcuts "
        f"that conflict with screen reader and keyboard commands.",
        attribute=attr,
    )


@audit_spec(
    rule_id="no-autofocus",
    severity=Severity.WARNING,
    description="Enforce autoFocus prop is not used.",
    resources=[
        "https://html.spec.whatwg.org/multipage/interaction.html#attr-fe-autofocus",
        "https://www.brucelawson.co.uk/2009/the-accessibility-of-html-5-autofocus/",
    ],
)
def check_no_autofocus(node: HtmlElement) -> Optional[Finding]:
    attr = node.get_attribute(HtmlAttr.AUTOFOCUS)
    if attr is None:
        return None
    return Finding(
        f"Avoid using the `autofocus` attribute on <{node.tag}>. Autofocus can reduce usability and "
        f"accessibility for sighted and non-sighted users.",
        attribute=attr,
    )


@audit_spec(
    rule_id="no-aria-hidden-on-focusable",
    severity=Severity.ERROR,
    description='Disallow aria-hidden="true" from being set on focusable elements.',
    resources=[
        "https://dequeuniversity.com/rules/axe/html/4.4/aria-hidden-focus",
        "https://www.w3.org/WAI/standards-guidelines/act/rules/6cfa84/proposed/",
        "https://developer.mozilla.org/en-US/docs/Web/Accessibility/ARIA/Attributes/aria-hidden",
    ],
)
def check_no_aria_hidden_on_focusable(node: HtmlElement) -> Optional[Finding]:
    if node.static_value(Aria.HIDDEN) != "true" or not node.is_focusable():
        return None
    return Finding(
        f'<{node.tag}> element is focusable but has `aria-hidden="true"`, '
        f"which hides it from assistive technologies.",
        help='Remove `aria-hidden="true"` from focusable elements, or make the element non-focusable.',
    )


@audit_spec(
    rule_id="no-noninteractive-tabindex",
    severity=Severity.WARNING,
    description="Enforce tabIndex should only be declared on interactive elements.",
    guidelines=[KEYBOARD],
    resources=["https://www.w3.org/TR/wai-aria-practices-1.1/#kbd_generalnav"],
)
def check_no_noninteractive_tabindex(node: HtmlElement) -> Optional[Finding]:
    role = node.role()
    if role is not None and role.is_interactive():
        return None

    attr = node.get_attribute(HtmlAttr.TABINDEX)
    if attr is None:
        return None
    index = parse_int(attr.static_text)
    if index is None or index < 0:
        return None

    return Finding(
        f'Non-interactive element <{node.tag}> should not have `tabindex="{index}"`. '
        f"Non-interactive elements should not be focusable.",
        help="Remove the `tabindex` attribute, or add an interactive role.",
        attribute=attr,
    )


@audit_spec(
    rule_id="tabindex-no-positive",
    severity=Severity.WARNING,
    description="Enforce tabIndex value is not greater than zero.",
    guidelines=["https://www.w3.org/WAI/WCAG21/Understanding/focus-order"],
    resources=["https://github.com/GoogleChrome/accessibility-developer-tools/wiki/Audit-Rules#ax_focus_03"],
)
def check_tabindex_no_positive(node: HtmlElement) -> Optional[Finding]:
    attr = node.get_attribute(HtmlAttr.TABINDEX)
    if attr is None:
        return None
    index = parse_int(attr.static_text)
    if index is None or index <= 0:
        return None

    return Finding(
        f"Avoid using positive `tabindex` value ({index}) on <{node.tag}>. "
        f"This creates an unexpected tab order.",
        help='Use `tabindex="0"` for focusable elements or `tabindex="-1"` '
             'for programmatically focusable elements.',
        attribute=attr,
    )


# --- DEFINITION ---
DEFINITION = RuleGroup(
    name="focus management",
    audit_rules=[
        check_no_access_key,
        check_no_autofocus,
        check_no_aria_hidden_on_focusable,
        check_no_noninteractive_tabindex,
        check_tabindex_no_positive,
    ]
)
