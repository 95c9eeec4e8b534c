# src/aria_auditor/dom/rules/aria_props.py
from typing import Optional

from aria_auditor.dom.core import Finding, RuleGroup, audit_spec
from aria_auditor.dom.models import HtmlElement
from aria_auditor.dom.references import NAME_ROLE_VALUE
from aria_auditor.knowledge.aria import Aria
from aria_auditor.knowledge.attributes import HtmlAttr, UnknownAttribute
from aria_auditor.model import Severity


# --- RULES ---

@audit_spec(
    rule_id="aria-props",
    severity=Severity.ERROR,
    description="Enforce all aria-* props are valid.",
    guidelines=[NAME_ROLE_VALUE],
)
def check_aria_props(node: HtmlElement) -> Optional[Finding]:
    for attr in node.aria_attributes():
        if isinstance(attr.name, UnknownAttribute):
            return Finding(
                f"Invalid ARIA attribute `{attr.name}` on <{node.tag}>.",
                help="Did you mean one of: aria-label, aria-labelledby, aria-hidden, aria-describedby? "
                     "See https://www.w3.org/TR/wai-aria-1.2/#state_prop_def for all valid attributes.",
                attribute=attr,
            )
    return None


@audit_spec(
    rule_id="aria-proptypes",
    severity=Severity.ERROR,
    description="Enforce ARIA state and property values are valid.",
    guidelines=[NAME_ROLE_VALUE],
    resources=[
        "https://www.w3.org/TR/wai-aria/#states_and_properties",
        "https://github.com/GoogleChrome/accessibility-developer-tools/wiki/Audit-Rules#ax_aria_04",
    ],
)
def check_aria_proptypes(node: HtmlElement) -> Optional[Finding]:
    for attr in node.attributes:
        if not isinstance(attr.name, Aria) or attr.static_text is None:
            continue
        value_type = attr.name.value_type()
        if not value_type.is_valid(attr.static_text):
            return Finding(
                f'Invalid value "{attr.static_text}" for `{attr.name}` on <{node.tag}>. '
                f"Expected {value_type.expected_description()}.",
                attribute=attr,
            )
    return None


@audit_spec(
    rule_id="aria-unsupported-elements",
    severity=Severity.ERROR,
    description="Enforce that elements that do not support ARIA roles, states, and properties "
                "do not have those attributes.",
    guidelines=[NAME_ROLE_VALUE],
    resources=[
        "https://github.com/GoogleChrome/accessibility-developer-tools/wiki/Audit-Rules#ax_aria_12",
        "https://www.w3.org/TR/dpub-aria-1.0/",
    ],
)
def check_aria_unsupported_elements(node: HtmlElement) -> Optional[Finding]:
    if node.tag.supports_aria():
        return None

    for attr in node.attributes:
        if isinstance(attr.name, Aria) or attr.name == HtmlAttr.ROLE:
            return Finding(
                f"ARIA attribute `{attr.name}` is not supported on <{node.tag}>.",
                help=f"The <{node.tag}> element does not support ARIA roles or properties.",
                attribute=attr,
            )
    return None


@audit_spec(
    rule_id="aria-activedescendant-has-tabindex",
    severity=Severity.WARNING,
    description="Enforce elements with aria-activedescendant are tabbable.",
    resources=[
        "https://developer.mozilla.org/en-US/docs/Web/Accessibility/ARIA/ARIA_Techniques/"
        "Using_the_aria-activedescendant_attribute",
    ],
)
def check_activedescendant_has_tabindex(node: HtmlElement) -> Optional[Finding]:
    if node.tag.is_interactive():
        return None

    if node.has_attribute(Aria.ACTIVEDESCENDANT) and not node.has_attribute(HtmlAttr.TABINDEX):
        return Finding(
            f"<{node.tag}> with `aria-activedescendant` must also have a `tabindex` attribute "
            f"to be focusable.",
            help='Add `tabindex="0"` to make the element focusable.',
        )
    return None


@audit_spec(
    rule_id="role-supports-aria-props",
    severity=Severity.WARNING,
    description="Enforce that elements with explicit or implicit roles defined contain only "
                "aria-* properties supported by that role.",
    guidelines=[NAME_ROLE_VALUE],
    resources=[
        "https://www.w3.org/TR/wai-aria/#states_and_properties",
        "https://github.com/GoogleChrome/accessibility-developer-tools/wiki/Audit-Rules#ax_aria_10",
    ],
)
def check_role_supports_aria_props(node: HtmlElement) -> Optional[Finding]:
    role = node.role()
    if role is None:
        return None

    for attr in node.attributes:
        if isinstance(attr.name, Aria) and not attr.name.is_supported_by_role(role):
            return Finding(
                f'The `{attr.name}` property is not supported by the "{role}" role on <{node.tag}>.',
                help=f"Remove the `{attr.name}` property, or change the role to one that supports it.",
                attribute=attr,
            )
    return None


# --- DEFINITION ---
DEFINITION = RuleGroup(
    name="aria properties",
    audit_rules=[
        check_aria_props,
        check_aria_proptypes,
        check_aria_unsupported_elements,
        check_activedescendant_has_tabindex,
        check_role_supports_aria_props,
    ]
)
