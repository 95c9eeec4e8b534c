# src/aria_auditor/dom/rules/forms.py
from typing import Optional

from aria_auditor.dom.core import Finding, RuleGroup, audit_spec
from aria_auditor.dom.models import HtmlElement
from aria_auditor.dom.references import INFO_AND_RELATIONSHIPS, NAME_ROLE_VALUE
from aria_auditor.knowledge.aria import Aria
from aria_auditor.knowledge.attributes import HtmlAttr
from aria_auditor.knowledge.tags import Tag
from aria_auditor.model import Severity

# Autofill field names from the HTML standard
AUTOCOMPLETE_FIELDS = frozenset({
    "on", "off",
    "name", "honorific-prefix", "given-name", "additional-name", "family-name",
    "honorific-suffix", "nickname",
    "email", "username", "new-password", "current-password", "one-time-code",
    "organization-title", "organization",
    "street-address", "address-line1", "address-line2", "address-line3",
    "address-level4", "address-level3", "address-level2", "address-level1",
    "country", "country-name", "postal-code",
    "cc-name", "cc-given-name", "cc-additional-name", "cc-family-name", "cc-number",
    "cc-exp", "cc-exp-month", "cc-exp-year", "cc-csc", "cc-type",
    "transaction-currency", "transaction-amount",
    "language", "bday", "bday-day", "bday-month", "bday-year", "sex",
    "tel", "tel-country-code", "tel-national", "tel-area-code", "tel-local", "tel-extension",
    "impp", "url", "photo", "webauthn",
})
ADDRESS_TYPES = ("shipping", "billing")

AUTOCOMPLETE_TAGS = (Tag.INPUT, Tag.SELECT, Tag.TEXTAREA)
LABELLED_CONTROLS = (Tag.BUTTON, Tag.INPUT, Tag.SELECT, Tag.TEXTAREA, Tag.METER, Tag.OUTPUT, Tag.PROGRESS)

LABEL_GUIDELINES = [
    INFO_AND_RELATIONSHIPS,
    "https://www.w3.org/WAI/WCAG21/Understanding/labels-or-instructions",
    NAME_ROLE_VALUE,
]


def is_valid_autocomplete(value: str) -> bool:
    """
    Validates an autocomplete token list: an optional `section-*` token,
    an optional address type and exactly one field name, in that order.
    """
    tokens = value.split()
    if not tokens:
        return False

    idx = 0
    if tokens[idx].startswith("section-"):
        idx += 1
    if idx < len(tokens) and tokens[idx] in ADDRESS_TYPES:
        idx += 1

    # Exactly one field token must remain
    if len(tokens) - idx != 1:
        return False
    return tokens[idx] in AUTOCOMPLETE_FIELDS


# --- RULES ---

@audit_spec(
    rule_id="autocomplete-valid",
    severity=Severity.ERROR,
    description="Enforce that autocomplete attributes are used correctly.",
    guidelines=["https://www.w3.org/WAI/WCAG21/Understanding/identify-input-purpose"],
    resources=[
        "https://dequeuniversity.com/rules/axe/3.2/autocomplete-valid",
        "https://www.w3.org/TR/html52/sec-forms.html#autofilling-form-controls-the-autocomplete-attribute",
    ],
)
def check_autocomplete_valid(node: HtmlElement) -> Optional[Finding]:
    if node.tag not in AUTOCOMPLETE_TAGS:
        return None

    attr = node.get_attribute(HtmlAttr.AUTOCOMPLETE)
    if attr is None or attr.static_text is None or is_valid_autocomplete(attr.static_text):
        return None

    return Finding(
        f'Invalid `autocomplete` value "{attr.static_text}" on <{node.tag}>.',
        help='Use a valid autocomplete value such as "name", "email", "username", '
             '"current-password", "street-address", "off", etc.',
        attribute=attr,
    )


@audit_spec(
    rule_id="control-has-associated-label",
    severity=Severity.WARNING,
    description="Enforce that a control (an interactive element) has a text label.",
    guidelines=LABEL_GUIDELINES,
)
def check_control_has_associated_label(node: HtmlElement) -> Optional[Finding]:
    if node.tag not in LABELLED_CONTROLS:
        return None

    # Child content can carry the label text
    if node.has_children or node.has_attribute(Aria.LABEL, Aria.LABELLEDBY, HtmlAttr.TITLE):
        return None

    return Finding(
        f"<{node.tag}> element has no associated label. Interactive controls must have a text label.",
        help="Add an `aria-label`, `aria-labelledby`, or `title` attribute, or use a <label>.",
    )


@audit_spec(
    rule_id="label-has-associated-control",
    severity=Severity.WARNING,
    description="Enforce that a label tag has a text label and an associated control.",
    guidelines=LABEL_GUIDELINES,
)
def check_label_has_associated_control(node: HtmlElement) -> Optional[Finding]:
    if node.tag != Tag.LABEL:
        return None

    # A label with children may wrap its control, which cannot be verified per element.
    if node.has_attribute(HtmlAttr.FOR) or node.has_children:
        return None

    return Finding(
        "<label> element has no associated form control.",
        help="Add a `for` attribute linking to a form control's `id`, or nest a form control inside the label.",
    )


# --- DEFINITION ---
DEFINITION = RuleGroup(
    name="forms",
    audit_rules=[check_autocomplete_valid, check_control_has_associated_label, check_label_has_associated_control]
)
