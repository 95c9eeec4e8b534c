# src/aria_auditor/dom/rules/document.py
from typing import Optional

from aria_auditor.dom.core import Finding, RuleGroup, audit_spec
from aria_auditor.dom.models import HtmlElement
from aria_auditor.dom.references import INFO_AND_RELATIONSHIPS, NAME_ROLE_VALUE
from aria_auditor.knowledge.aria import Aria
from aria_auditor.knowledge.attributes import HtmlAttr
from aria_auditor.knowledge.tags import Tag
from aria_auditor.model import Severity

LANGUAGE_OF_PAGE = "https://www.w3.org/WAI/WCAG21/Understanding/language-of-page"

DISTRACTING_TAGS = (Tag.MARQUEE, Tag.BLINK)
MEDIA_TAGS = (Tag.VIDEO, Tag.AUDIO)


def is_valid_lang(value: str) -> bool:
    """Simplified BCP 47 check: a 2-3 letter primary subtag, then 1-8 alphanumeric subtags."""
    parts = value.strip().split("-")
    primary = parts[0]
    if not 2 <= len(primary) <= 3 or not (primary.isascii() and primary.isalpha()):
        return False

    for part in parts[1:]:
        if not 1 <= len(part) <= 8 or not (part.isascii() and part.isalnum()):
            return False
    return True


# --- RULES ---

@audit_spec(
    rule_id="html-has-lang",
    severity=Severity.WARNING,
    description="Enforce <html> element has lang prop.",
    guidelines=[LANGUAGE_OF_PAGE],
    resources=[
        "https://dequeuniversity.com/rules/axe/3.2/html-has-lang",
        "https://dequeuniversity.com/rules/axe/3.2/html-lang-valid",
    ],
)
def check_html_has_lang(node: HtmlElement) -> Optional[Finding]:
    if node.tag != Tag.HTML or node.has_attribute(HtmlAttr.LANG):
        return None
    return Finding(
        "<html> element is missing a `lang` attribute.",
        help='Add a `lang` attribute (e.g., `lang="en"`) to help screen readers determine '
             'the correct pronunciation.',
    )


@audit_spec(
    rule_id="lang",
    severity=Severity.ERROR,
    description="Enforce lang attribute has a valid value.",
    guidelines=[LANGUAGE_OF_PAGE],
    resources=[
        "https://dequeuniversity.com/rules/axe/3.2/valid-lang",
        "https://www.w3.org/International/articles/language-tags/",
        "https://www.iana.org/assignments/language-subtag-registry/language-subtag-registry",
    ],
)
def check_lang(node: HtmlElement) -> Optional[Finding]:
    attr = node.get_attribute(HtmlAttr.LANG)
    if attr is None or attr.static_text is None or is_valid_lang(attr.static_text):
        return None
    return Finding(
        f'The `lang` attribute value "{attr.static_text}" is not a valid BCP 47 language tag.',
        help='Use a valid BCP 47 language tag, e.g., "en", "en-US", "fr", "de", "zh-Hans".',
        attribute=attr,
    )


@audit_spec(
    rule_id="iframe-has-title",
    severity=Severity.WARNING,
    description="Enforce iframe elements have a title attribute.",
    guidelines=[
        "https://www.w3.org/WAI/WCAG21/Understanding/bypass-blocks",
        NAME_ROLE_VALUE,
    ],
    resources=["https://dequeuniversity.com/rules/axe/3.2/frame-title"],
)
def check_iframe_has_title(node: HtmlElement) -> Optional[Finding]:
    if node.tag != Tag.IFRAME:
        return None
    if node.has_attribute(HtmlAttr.TITLE, Aria.LABEL, Aria.LABELLEDBY):
        return None
    if node.static_value(Aria.HIDDEN) == "true":
        return None
    return Finding(
        "<iframe> element is missing a `title` attribute.",
        help="Add a `title` attribute that describes the iframe content.",
    )


@audit_spec(
    rule_id="heading-has-content",
    severity=Severity.WARNING,
    description="Enforce heading (h1, h2, etc) elements contain accessible content.",
    guidelines=["https://www.w3.org/TR/UNDERSTANDING-WCAG20/navigation-mechanisms-descriptive.html"],
    resources=["https://dequeuniversity.com/rules/axe/3.2/empty-heading"],
)
def check_heading_has_content(node: HtmlElement) -> Optional[Finding]:
    if not node.tag.is_heading():
        return None
    if node.has_children or node.has_attribute(Aria.LABEL, Aria.LABELLEDBY):
        return None
    return Finding(
        f"<{node.tag}> element appears to be empty. Headings must have text content for accessibility.",
        help="Add text content or an `aria-label` attribute.",
    )


@audit_spec(
    rule_id="media-has-caption",
    severity=Severity.WARNING,
    description="Enforces that <audio> and <video> elements must have a <track> for captions.",
    guidelines=[
        "https://www.w3.org/WAI/WCAG21/Understanding/captions-prerecorded.html",
        "https://www.w3.org/WAI/WCAG21/Understanding/audio-description-or-media-alternative-prerecorded.html",
    ],
    resources=[
        "https://dequeuniversity.com/rules/axe/2.1/audio-caption",
        "https://dequeuniversity.com/rules/axe/2.1/video-caption",
    ],
)
def check_media_has_caption(node: HtmlElement) -> Optional[Finding]:
    if node.tag not in MEDIA_TAGS:
        return None
    # <track> children are not modelled, so a label, muted or hidden media passes.
    if node.has_attribute(Aria.LABEL, Aria.LABELLEDBY, HtmlAttr.MUTED, Aria.HIDDEN):
        return None
    return Finding(
        f"<{node.tag}> elements must have captions for accessibility.",
        help='Add a <track kind="captions"> child element, or use `aria-label` / `aria-labelledby` '
             'for descriptive text.',
    )


@audit_spec(
    rule_id="no-distracting-elements",
    severity=Severity.ERROR,
    description="Enforce distracting elements are not used.",
    guidelines=["https://www.w3.org/WAI/WCAG21/Understanding/pause-stop-hide"],
    resources=[
        "https://dequeuniversity.com/rules/axe/3.2/marquee",
        "https://dequeuniversity.com/rules/axe/3.2/blink",
    ],
)
def check_no_distracting_elements(node: HtmlElement) -> Optional[Finding]:
    if node.tag not in DISTRACTING_TAGS:
        return None
    return Finding(
        f"<{node.tag}> elements are distracting and should not be used. They can cause accessibility "
        f"issues for users with visual or cognitive disabilities.",
        help="Use CSS animations or transitions instead.",
    )


@audit_spec(
    rule_id="scope",
    severity=Severity.WARNING,
    description="Enforce scope prop is only used on <th> elements.",
    guidelines=[
        INFO_AND_RELATIONSHIPS,
        "https://www.w3.org/WAI/WCAG21/Understanding/parsing",
    ],
    resources=["https://dequeuniversity.com/rules/axe/3.5/scope-attr-valid"],
)
def check_scope(node: HtmlElement) -> Optional[Finding]:
    if node.tag == Tag.TH:
        return None
    attr = node.get_attribute(HtmlAttr.SCOPE)
    if attr is None:
        return None
    return Finding(
        f"The `scope` attribute should only be used on <th> elements, not <{node.tag}>.",
        attribute=attr,
    )


# --- DEFINITION ---
DEFINITION = RuleGroup(
    name="document structure",
    audit_rules=[
        check_html_has_lang,
        check_lang,
        check_iframe_has_title,
        check_heading_has_content,
        check_media_has_caption,
        check_no_distracting_elements,
        check_scope,
    ]
)
