# src/aria_auditor/dom/rules/role_usage.py
from typing import Optional

from aria_auditor.dom.core import Finding, RuleGroup, audit_spec
from aria_auditor.dom.models import HtmlElement
from aria_auditor.dom.references import NAME_ROLE_VALUE, USAGE_RESOURCES
from aria_auditor.knowledge.attributes import HtmlAttr
from aria_auditor.knowledge.roles import Role
from aria_auditor.model import Severity


# --- RULES ---

@audit_spec(
    rule_id="aria-role",
    severity=Severity.ERROR,
    description="Enforce that elements with ARIA roles must use a valid, non-abstract ARIA role.",
    guidelines=[NAME_ROLE_VALUE],
    resources=[
        "https://github.com/GoogleChrome/accessibility-developer-tools/wiki/Audit-Rules#ax_aria_01",
        "https://www.w3.org/TR/dpub-aria-1.0/",
        "https://developer.mozilla.org/en-US/docs/Web/Accessibility/ARIA/ARIA_Techniques",
    ],
)
def check_aria_role(node: HtmlElement) -> Optional[Finding]:
    attr = node.get_attribute(HtmlAttr.ROLE)
    if attr is None or attr.static_text is None:
        return None

    # A role value may be a space-separated fallback list; the first bad token is reported.
    for token in attr.static_text.split():
        role = Role.parse(token)
        if role is None:
            return Finding(
                f'Invalid ARIA role "{token}" on <{node.tag}>.',
                help="See https://www.w3.org/TR/wai-aria-1.2/#role_definitions for valid roles.",
                attribute=attr,
            )
        if role.is_abstract():
            return Finding(
                f'Abstract ARIA role "{token}" must not be used on <{node.tag}>. '
                f"Abstract roles are for ontology purposes only.",
                help="Use a non-abstract role instead. See https://www.w3.org/TR/wai-aria-1.2/#abstract_roles",
                attribute=attr,
            )
    return None


@audit_spec(
    rule_id="no-redundant-roles",
    severity=Severity.WARNING,
    description="Enforce explicit role property is not the same as implicit/default role property on element.",
    resources=[
        "https://www.w3.org/TR/using-aria/#aria-does-nothing",
        "https://developer.mozilla.org/en-US/docs/Web/HTML/Element/img#identifying_svg_as_an_image",
    ],
)
def check_no_redundant_roles(node: HtmlElement) -> Optional[Finding]:
    implicit = node.tag.implicit_role()
    attr = node.get_attribute(HtmlAttr.ROLE)
    if implicit is None or attr is None or attr.static_text is None:
        return None

    # The whole value is compared: a fallback list is never redundant.
    if Role.parse(attr.static_text.strip()) == implicit:
        return Finding(
            f'Redundant role "{attr.static_text}" on <{node.tag}>. This is the element\'s implicit role.',
            help="Remove the `role` attribute.",
            attribute=attr,
        )
    return None


@audit_spec(
    rule_id="prefer-tag-over-role",
    severity=Severity.INFO,
    description="Enforces using semantic DOM elements over the ARIA role property.",
    guidelines=["https://www.w3.org/TR/wai-aria-1.0/roles"],
    resources=["https://developer.mozilla.org/en-US/docs/Web/Accessibility/ARIA/Roles"],
)
def check_prefer_tag_over_role(node: HtmlElement) -> Optional[Finding]:
    attr = node.get_attribute(HtmlAttr.ROLE)
    if attr is None or attr.static_text is None:
        return None

    role = Role.parse(attr.static_text.strip())
    if role is None or role.preferred_tag() is None:
        return None
    # Already the native element for this role
    if node.tag.implicit_role() == role:
        return None

    preferred = role.preferred_tag()
    return Finding(
        f'Prefer using the {preferred} element instead of `role="{attr.static_text}"`.',
        help=f"Use {preferred} which has built-in semantics and keyboard behavior instead of relying on ARIA.",
        attribute=attr,
    )


@audit_spec(
    rule_id="role-has-required-aria-props",
    severity=Severity.ERROR,
    description="Enforce that elements with ARIA roles must have all required attributes for that role.",
    guidelines=[NAME_ROLE_VALUE],
    resources=[
        "https://www.w3.org/TR/wai-aria/#roles",
        "https://github.com/GoogleChrome/accessibility-developer-tools/wiki/Audit-Rules#ax_aria_03",
    ],
)
def check_role_has_required_aria_props(node: HtmlElement) -> Optional[Finding]:
    role = node.explicit_role()
    if role is None:
        return None

    required = role.required_properties()
    if not required:
        return None
    # h1-h6 carry their level natively
    if role == Role.HEADING and node.tag.is_heading():
        return None

    missing = [prop for prop in required if not node.has_attribute(prop)]
    if not missing:
        return None

    attr = node.get_attribute(HtmlAttr.ROLE)
    missing_names = ", ".join(f"`{prop}`" for prop in missing)
    return Finding(
        f'<{node.tag}> with role="{attr.static_text}" is missing required ARIA properties: {missing_names}.',
        help=f'Add the required ARIA properties for the "{role}" role.',
        attribute=attr,
    )


@audit_spec(
    rule_id="no-interactive-element-to-noninteractive-role",
    severity=Severity.WARNING,
    description="Interactive elements should not be assigned non-interactive roles.",
    guidelines=[NAME_ROLE_VALUE],
    resources=[
        "https://www.w3.org/TR/wai-aria/#states_and_properties",
        "https://github.com/GoogleChrome/accessibility-developer-tools/wiki/Audit-Rules#ax_aria_04",
    ] + USAGE_RESOURCES,
)
def check_interactive_to_noninteractive_role(node: HtmlElement) -> Optional[Finding]:
    if not node.tag.is_interactive():
        return None

    role = node.explicit_role()
    if role is None or role.is_interactive():
        return None

    attr = node.get_attribute(HtmlAttr.ROLE)
    return Finding(
        f'Interactive element <{node.tag}> should not be assigned the non-interactive role "{attr.static_text}".',
        help="Remove the `role` attribute or use an appropriate interactive role.",
        attribute=attr,
    )


@audit_spec(
    rule_id="no-noninteractive-element-to-interactive-role",
    severity=Severity.WARNING,
    description="Non-interactive elements should not be assigned interactive roles.",
    guidelines=[NAME_ROLE_VALUE],
    resources=USAGE_RESOURCES,
)
def check_noninteractive_to_interactive_role(node: HtmlElement) -> Optional[Finding]:
    if node.tag.is_interactive():
        return None

    role = node.explicit_role()
    if role is None or not role.is_interactive():
        return None

    attr = node.get_attribute(HtmlAttr.ROLE)
    return Finding(
        f'Non-interactive element <{node.tag}> should not be assigned the interactive role "{attr.static_text}".',
        help="Use the appropriate interactive element instead, e.g., <button>, <a>, <input>.",
        attribute=attr,
    )


# --- DEFINITION ---
DEFINITION = RuleGroup(
    name="role usage",
    audit_rules=[
        check_aria_role,
        check_no_redundant_roles,
        check_prefer_tag_over_role,
        check_role_has_required_aria_props,
        check_interactive_to_noninteractive_role,
        check_noninteractive_to_interactive_role,
    ]
)
