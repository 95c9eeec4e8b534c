# src/aria_auditor/dom/models.py
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from aria_auditor.knowledge.aria import INTEGER_RE
from aria_auditor.knowledge.attributes import AttributeName, EventHandler, HtmlAttr, parse_attribute_name
from aria_auditor.knowledge.roles import Role
from aria_auditor.knowledge.tags import Tag


class Static(BaseModel):
    """Attribute value known at extraction time."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["static"] = "static"
    text: str


class Dynamic(BaseModel):
    """Attribute value only known at runtime (template expression, binding)."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["dynamic"] = "dynamic"


AttrValue = Annotated[Union[Static, Dynamic], Field(discriminator="kind")]

EVENT_HANDLERS = (
    EventHandler.ONCLICK,
    EventHandler.ONKEYDOWN,
    EventHandler.ONKEYUP,
    EventHandler.ONKEYPRESS,
    EventHandler.ONMOUSEOVER,
    EventHandler.ONMOUSEOUT,
)


class HtmlAttribute(BaseModel):
    """
    One attribute occurrence. `value` is None for a bare attribute
    (e.g. `<video muted>` when the host syntax distinguishes it).
    """
    model_config = ConfigDict(frozen=True)

    name: AttributeName
    value: Optional[AttrValue] = None
    line: int = Field(ge=1)
    column: int = Field(ge=0)

    @field_validator("name", mode="before")
    @classmethod
    def classify_name(cls, v):
        # Accept raw strings from extractors and JSON element records.
        if isinstance(v, str):
            return parse_attribute_name(v)
        return v

    @property
    def static_text(self) -> Optional[str]:
        if isinstance(self.value, Static):
            return self.value.text
        return None

    @property
    def is_dynamic(self) -> bool:
        return isinstance(self.value, Dynamic)


class HtmlElement(BaseModel):
    """
    An element extracted from a source unit, positioned at its start tag.
    Children are not modelled, only whether any exist.
    """
    model_config = ConfigDict(frozen=True)

    tag: Tag
    attributes: List[HtmlAttribute] = Field(default_factory=list)
    is_self_closing: bool = False
    has_children: bool = False
    line: int = Field(ge=1)
    column: int = Field(ge=0)
    source_unit_id: str

    # --- Attribute lookups ---

    def get_attribute(self, name: str) -> Optional[HtmlAttribute]:
        """First attribute with the given name, or None."""
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None

    def has_attribute(self, *names: str) -> bool:
        """True if any of `names` is present, whatever its value."""
        return any(self.get_attribute(name) is not None for name in names)

    def static_value(self, name: str) -> Optional[str]:
        attr = self.get_attribute(name)
        return attr.static_text if attr else None

    def explicit_role_value(self) -> Optional[str]:
        """The literal `role` attribute text, if present and static."""
        return self.static_value(HtmlAttr.ROLE)

    # --- Semantics ---

    def explicit_role(self) -> Optional[Role]:
        """First recognised concrete token of a static `role`, ignoring the tag."""
        explicit = self.explicit_role_value()
        if not explicit:
            return None
        for token in explicit.split():
            role = Role.parse(token)
            if role is not None and not role.is_abstract():
                return role
        return None

    def role(self) -> Optional[Role]:
        """The effective role: the explicit role if one resolves, else the tag's implicit role."""
        explicit = self.explicit_role()
        if explicit is not None:
            return explicit
        return self.tag.implicit_role()

    def is_focusable(self) -> bool:
        if self.tag.is_interactive():
            return True
        tabindex = self.get_attribute(HtmlAttr.TABINDEX)
        if tabindex is None:
            return False
        if tabindex.is_dynamic:
            return True
        value = parse_int(tabindex.static_text)
        return value is not None and value >= 0

    def has_event_handler(self) -> bool:
        return self.has_attribute(*EVENT_HANDLERS)

    def aria_attributes(self) -> List[HtmlAttribute]:
        """Attributes whose raw name starts with `aria-`, known or not."""
        return [attr for attr in self.attributes if attr.name.startswith("aria-")]


def parse_int(text: Optional[str]) -> Optional[int]:
    """Parses a whole-number attribute value (tabindex and friends)."""
    if text is None or not INTEGER_RE.match(text):
        return None
    return int(text)
