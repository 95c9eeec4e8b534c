# src/aria_auditor/dom/rules/interactions.py
from typing import Optional

from aria_auditor.dom.core import Finding, RuleGroup, audit_spec
from aria_auditor.dom.models import HtmlElement
from aria_auditor.dom.references import KEYBOARD, NAME_ROLE_VALUE, USAGE_RESOURCES
from aria_auditor.knowledge.attributes import EventHandler, HtmlAttr
from aria_auditor.model import Severity


KEY_HANDLERS = (EventHandler.ONKEYDOWN, EventHandler.ONKEYUP, EventHandler.ONKEYPRESS)
CLICK_OR_KEY_HANDLERS = (EventHandler.ONCLICK,) + KEY_HANDLERS


# --- RULES ---

@audit_spec(
    rule_id="click-events-have-key-events",
    severity=Severity.WARNING,
    description="Enforce a clickable non-interactive element has at least one keyboard event listener.",
    guidelines=[KEYBOARD],
)
def check_click_events_have_key_events(node: HtmlElement) -> Optional[Finding]:
    # Native controls bring their own keyboard handling
    if node.tag.is_interactive():
        return None

    # An interactive role changes semantics, not behaviour: a key handler is still needed.
    if node.has_attribute(EventHandler.ONCLICK) and not node.has_attribute(*KEY_HANDLERS):
        return Finding(
            f"<{node.tag}> with click handler must also have a keyboard event handler "
            f"(onkeydown, onkeyup, or onkeypress) for accessibility.",
            help="Add an `onkeydown` or `onkeyup` handler, or use an interactive element like <button> instead.",
        )
    return None


@audit_spec(
    rule_id="mouse-events-have-key-events",
    severity=Severity.WARNING,
    description="Enforce that onMouseOver/onMouseOut are accompanied by onFocus/onBlur "
                "for keyboard-only users.",
    guidelines=[KEYBOARD],
)
def check_mouse_events_have_key_events(node: HtmlElement) -> Optional[Finding]:
    if node.has_attribute(EventHandler.ONMOUSEOVER) and not node.has_attribute(EventHandler.ONFOCUS):
        return Finding(
            f"<{node.tag}> has a mouseover event handler but no onfocus handler. "
            f"This can cause accessibility issues for keyboard users.",
            help="Add an `onfocus` handler that mirrors the behavior of the `onmouseover` handler.",
        )
    if node.has_attribute(EventHandler.ONMOUSEOUT) and not node.has_attribute(EventHandler.ONBLUR):
        return Finding(
            f"<{node.tag}> has a mouseout event handler but no onblur handler. "
            f"This can cause accessibility issues for keyboard users.",
            help="Add an `onblur` handler that mirrors the behavior of the `onmouseout` handler.",
        )
    return None


@audit_spec(
    rule_id="interactive-supports-focus",
    severity=Severity.WARNING,
    description="Enforce that elements with interactive handlers like onClick must be focusable.",
    guidelines=[KEYBOARD],
    resources=[
        "https://github.com/GoogleChrome/accessibility-developer-tools/wiki/Audit-Rules#ax_focus_02",
        "https://developer.mozilla.org/en-US/docs/Web/Accessibility/ARIA/ARIA_Techniques/"
        "Using_the_button_role#Keyboard_and_focus",
        "https://www.w3.org/TR/wai-aria-practices-1.1/#kbd_generalnav",
        "https://www.w3.org/TR/wai-aria-practices-1.1/#aria_ex",
    ],
)
def check_interactive_supports_focus(node: HtmlElement) -> Optional[Finding]:
    if node.tag.is_interactive():
        return None

    role = node.explicit_role()
    if role is None or not role.is_interactive():
        return None

    if node.has_event_handler() and not node.is_focusable():
        return Finding(
            f"<{node.tag}> with an interactive role must be focusable. Add a `tabindex` attribute.",
            help='Add `tabindex="0"` to make the element focusable, '
                 'or use a natively interactive element like <button>.',
        )
    return None


@audit_spec(
    rule_id="no-noninteractive-element-interactions",
    severity=Severity.WARNING,
    description="Non-interactive elements should not be assigned mouse or keyboard event listeners.",
    guidelines=[NAME_ROLE_VALUE],
    resources=USAGE_RESOURCES,
)
def check_noninteractive_element_interactions(node: HtmlElement) -> Optional[Finding]:
    # Static elements (no implicit role) are covered by no-static-element-interactions
    if not node.tag.is_non_interactive_semantic():
        return None

    role = node.explicit_role()
    if role is not None and role.is_interactive():
        return None

    if node.has_attribute(*CLICK_OR_KEY_HANDLERS):
        return Finding(
            f"Non-interactive element <{node.tag}> should not have event handlers.",
            help="Use an interactive element like <button> or <a>, or add an appropriate `role` attribute.",
        )
    return None


@audit_spec(
    rule_id="no-static-element-interactions",
    severity=Severity.WARNING,
    description="Enforce that non-interactive, visible elements (such as <div>) that have click "
                "handlers use the role attribute.",
    guidelines=[NAME_ROLE_VALUE],
    resources=USAGE_RESOURCES,
)
def check_static_element_interactions(node: HtmlElement) -> Optional[Finding]:
    if not node.tag.is_static():
        return None

    # Any role attribute, even a dynamic one, means the element is no longer static
    if node.has_attribute(HtmlAttr.ROLE):
        return None

    if node.has_event_handler():
        return Finding(
            f"<{node.tag}> with event handler(s) must have a `role` attribute.",
            help="Add a `role` attribute that describes the element's purpose, "
                 "or use a semantic element like <button> or <a>.",
        )
    return None


# --- DEFINITION ---
DEFINITION = RuleGroup(
    name="event handlers",
    audit_rules=[
        check_click_events_have_key_events,
        check_mouse_events_have_key_events,
        check_interactive_supports_focus,
        check_noninteractive_element_interactions,
        check_static_element_interactions,
    ]
)
