# src/aria_auditor/dom/references.py
"""Guideline and resource links shared by several rule groups."""

WCAG_UNDERSTANDING = "https://www.w3.org/WAI/WCAG21/Understanding"

NAME_ROLE_VALUE = f"{WCAG_UNDERSTANDING}/name-role-value"
KEYBOARD = f"{WCAG_UNDERSTANDING}/keyboard"
INFO_AND_RELATIONSHIPS = f"{WCAG_UNDERSTANDING}/info-and-relationships"

# Authoring practices for custom widgets: roles, keyboard and focus handling
USAGE_RESOURCES = [
    "https://www.w3.org/TR/wai-aria-1.1/#usage_intro",
    "https://www.w3.org/TR/wai-aria-practices-1.1/#aria_ex",
    "https://www.w3.org/TR/wai-aria-practices-1.1/#kbd_generalnav",
    "https://developer.mozilla.org/en-US/docs/Web/Accessibility/ARIA/ARIA_Techniques/"
    "Using_the_button_role#Keyboard_and_focus",
]
