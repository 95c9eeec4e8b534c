# src/aria_auditor/knowledge/attributes.py
from enum import Enum
from functools import lru_cache
from typing import Any, Union

from pydantic_core import core_schema

from .aria import Aria


class EventHandler(str, Enum):
    """Event handler attributes the interaction rules look at."""
    ONMOUSEOVER = "onmouseover"
    ONMOUSEOUT = "onmouseout"
    ONCLICK = "onclick"
    ONKEYDOWN = "onkeydown"
    ONKEYPRESS = "onkeypress"
    ONKEYUP = "onkeyup"
    ONFOCUS = "onfocus"
    ONBLUR = "onblur"
    ONCHANGE = "onchange"
    ONINPUT = "oninput"
    ONSUBMIT = "onsubmit"

    def __str__(self) -> str:
        return self.value


class HtmlAttr(str, Enum):
    """Plain HTML attributes with accessibility relevance."""
    ACCESSKEY = "accesskey"
    ALT = "alt"
    AUTOCOMPLETE = "autocomplete"
    AUTOFOCUS = "autofocus"
    CLASS = "class"
    FOR = "for"
    HREF = "href"
    LANG = "lang"
    MUTED = "muted"
    ROLE = "role"
    SCOPE = "scope"
    SRC = "src"
    TABINDEX = "tabindex"
    TITLE = "title"
    TYPE = "type"

    def __str__(self) -> str:
        return self.value


class UnknownAttribute(str):
    """An attribute name outside the known vocabulary, kept verbatim."""

    def __repr__(self) -> str:
        return f"UnknownAttribute({str.__repr__(self)})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(cls, core_schema.str_schema())


AttributeName = Union[HtmlAttr, EventHandler, Aria, UnknownAttribute]

# Framework spellings (matched case-insensitively) that mean the same attribute as their HTML counterpart.
ALIASES = {f"on:{handler.value[2:]}": handler for handler in EventHandler}
ALIASES.update({
    "html_for": HtmlAttr.FOR,
    "htmlfor": HtmlAttr.FOR,
})


@lru_cache(maxsize=1024)
def parse_attribute_name(name: str) -> AttributeName:
    """
    Classifies a raw attribute name.

    Never fails: names outside the known vocabulary come back as
    UnknownAttribute so that rules such as aria-props can still inspect them.
    """
    for enum_cls in (HtmlAttr, EventHandler, Aria):
        try:
            return enum_cls(name)
        except ValueError:
            continue
    alias = ALIASES.get(name.lower())
    if alias is not None:
        return alias
    return UnknownAttribute(name)
