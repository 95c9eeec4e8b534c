# src/aria_auditor/dom/rules/alt_text.py
from typing import Optional

from aria_auditor.dom.core import Finding, RuleGroup, audit_spec
from aria_auditor.dom.models import HtmlElement
from aria_auditor.knowledge.aria import Aria
from aria_auditor.knowledge.attributes import HtmlAttr
from aria_auditor.knowledge.tags import Tag
from aria_auditor.model import Severity

REDUNDANT_ALT_WORDS = ("image", "picture", "photo", "icon", "graphic")


# --- RULES ---

@audit_spec(
    rule_id="alt-text",
    severity=Severity.ERROR,
    description="Enforce all elements that require alternative text have meaningful "
                "information to relay back to end user.",
    guidelines=["https://www.w3.org/WAI/WCAG21/Understanding/non-text-content.html"],
    resources=[
        "https://dequeuniversity.com/rules/axe/3.2/object-alt",
        "https://dequeuniversity.com/rules/axe/3.2/image-alt",
        "https://dequeuniversity.com/rules/axe/3.2/input-image-alt",
        "https://dequeuniversity.com/rules/axe/3.2/area-alt",
    ],
)
def check_alt_text(node: HtmlElement) -> Optional[Finding]:
    has_alt = node.has_attribute(HtmlAttr.ALT)
    has_aria_label = node.has_attribute(Aria.LABEL, Aria.LABELLEDBY)

    if node.tag == Tag.IMG:
        # alt="" is fine (decorative), so is an explicit presentational role
        if not has_alt and node.explicit_role_value() not in ("presentation", "none"):
            return Finding(
                "<img> element is missing an `alt` attribute.",
                help='Add an `alt` attribute with descriptive text, or `alt=""` for decorative images, '
                     'or `role="presentation"` / `role="none"`.',
            )

    elif node.tag == Tag.AREA:
        if not has_alt and not has_aria_label:
            return Finding(
                "<area> element is missing an `alt` attribute.",
                help="Add an `alt` attribute or `aria-label` / `aria-labelledby`.",
            )

    elif node.tag == Tag.INPUT:
        if node.static_value(HtmlAttr.TYPE) == "image" and not has_alt and not has_aria_label:
            return Finding(
                '<input type="image"> is missing an `alt` attribute.',
                help="Add an `alt` attribute or `aria-label` / `aria-labelledby`.",
            )

    elif node.tag == Tag.OBJECT:
        if not node.has_attribute(HtmlAttr.TITLE) and not has_aria_label and not node.has_children:
            return Finding(
                "<object> element is missing alternative text.",
                help="Add a `title` attribute, `aria-label` / `aria-labelledby`, or text content.",
            )

    return None


@audit_spec(
    rule_id="img-redundant-alt",
    severity=Severity.WARNING,
    description='Enforce <img> alt prop does not contain the word "image", "picture", or "photo".',
    resources=["https://webaim.org/techniques/alttext/"],
)
def check_img_redundant_alt(node: HtmlElement) -> Optional[Finding]:
    if node.tag != Tag.IMG:
        return None

    alt = node.get_attribute(HtmlAttr.ALT)
    if alt is None or alt.static_text is None:
        return None

    lowered = alt.static_text.lower()
    for word in REDUNDANT_ALT_WORDS:
        if word in lowered:
            return Finding(
                f'<img> alt text contains the redundant word "{word}". '
                f"Screen readers already announce images as images.",
                help="Describe what the image shows instead of stating it's an image.",
                attribute=alt,
            )
    return None


# --- DEFINITION ---
DEFINITION = RuleGroup(
    name="alternative text",
    audit_rules=[check_alt_text, check_img_redundant_alt]
)
