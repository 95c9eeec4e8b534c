# src/aria_auditor/knowledge/aria.py
import re
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .roles import Role

INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")


class ValueKind(str, Enum):
    """The family of values an aria-* attribute accepts."""
    BOOLEAN = "boolean"
    TRISTATE = "tristate"
    BOOLEAN_OR_UNDEFINED = "boolean_or_undefined"
    ENUMERATED = "enumerated"
    INTEGER = "integer"
    NUMBER = "number"
    IDREF = "idref"
    IDREF_LIST = "idref_list"
    FREE_TEXT = "free_text"


class AriaValueType(BaseModel):
    """
    Describes the legal values of one aria-* attribute.

    Only ENUMERATED carries `allowed`; for every other kind the set of legal
    values is implied by the kind itself.
    """
    model_config = ConfigDict(frozen=True)

    kind: ValueKind
    allowed: Tuple[str, ...] = ()

    def is_valid(self, value: str) -> bool:
        """Checks a static attribute value against this type."""
        match self.kind:
            case ValueKind.BOOLEAN:
                return value in ("true", "false")
            case ValueKind.TRISTATE:
                return value in ("true", "false", "mixed")
            case ValueKind.BOOLEAN_OR_UNDEFINED:
                return value in ("true", "false", "undefined")
            case ValueKind.ENUMERATED:
                return value in self.allowed
            case ValueKind.INTEGER:
                return bool(INTEGER_RE.match(value))
            case ValueKind.NUMBER:
                return _is_number(value)
        # idrefs and free text cannot be validated without the document
        return True

    def expected_description(self) -> str:
        """Human-readable summary of the legal values, used in diagnostics."""
        match self.kind:
            case ValueKind.BOOLEAN:
                return '"true" or "false"'
            case ValueKind.TRISTATE:
                return '"true", "false", or "mixed"'
            case ValueKind.BOOLEAN_OR_UNDEFINED:
                return '"true", "false", or "undefined"'
            case ValueKind.ENUMERATED:
                return "one of: " + ", ".join(f'"{v}"' for v in self.allowed)
            case ValueKind.INTEGER:
                return "an integer"
            case ValueKind.NUMBER:
                return "a number"
            case ValueKind.IDREF:
                return "an element ID reference"
            case ValueKind.IDREF_LIST:
                return "a space-separated list of element ID references"
        return "any text"


def _is_number(value: str) -> bool:
    # float() tolerates padding and digit separators, attribute values may not
    if not value or value != value.strip() or "_" in value:
        return False
    try:
        float(value)
    except ValueError:
        return False
    return True


BOOLEAN = AriaValueType(kind=ValueKind.BOOLEAN)
TRISTATE = AriaValueType(kind=ValueKind.TRISTATE)
BOOLEAN_OR_UNDEFINED = AriaValueType(kind=ValueKind.BOOLEAN_OR_UNDEFINED)
INTEGER = AriaValueType(kind=ValueKind.INTEGER)
NUMBER = AriaValueType(kind=ValueKind.NUMBER)
IDREF = AriaValueType(kind=ValueKind.IDREF)
IDREF_LIST = AriaValueType(kind=ValueKind.IDREF_LIST)
FREE_TEXT = AriaValueType(kind=ValueKind.FREE_TEXT)


def enumerated(*allowed: str) -> AriaValueType:
    return AriaValueType(kind=ValueKind.ENUMERATED, allowed=allowed)


class Aria(str, Enum):
    """WAI-ARIA 1.2 states and properties, valued by their attribute name."""
    ACTIVEDESCENDANT = "aria-activedescendant"
    ATOMIC = "aria-atomic"
    AUTOCOMPLETE = "aria-autocomplete"
    BRAILLELABEL = "aria-braillelabel"
    BRAILLEROLEDESCRIPTION = "aria-brailleroledescription"
    BUSY = "aria-busy"
    CHECKED = "aria-checked"
    COLCOUNT = "aria-colcount"
    COLINDEX = "aria-colindex"
    COLINDEXTEXT = "aria-colindextext"
    COLSPAN = "aria-colspan"
    CONTROLS = "aria-controls"
    CURRENT = "aria-current"
    DESCRIBEDBY = "aria-describedby"
    DESCRIPTION = "aria-description"
    DETAILS = "aria-details"
    DISABLED = "aria-disabled"
    DROPEFFECT = "aria-dropeffect"
    ERRORMESSAGE = "aria-errormessage"
    EXPANDED = "aria-expanded"
    FLOWTO = "aria-flowto"
    GRABBED = "aria-grabbed"
    HASPOPUP = "aria-haspopup"
    HIDDEN = "aria-hidden"
    INVALID = "aria-invalid"
    KEYSHORTCUTS = "aria-keyshortcuts"
    LABEL = "aria-label"
    LABELLEDBY = "aria-labelledby"
    LEVEL = "aria-level"
    LIVE = "aria-live"
    MODAL = "aria-modal"
    MULTILINE = "aria-multiline"
    MULTISELECTABLE = "aria-multiselectable"
    ORIENTATION = "aria-orientation"
    OWNS = "aria-owns"
    PLACEHOLDER = "aria-placeholder"
    POSINSET = "aria-posinset"
    PRESSED = "aria-pressed"
    READONLY = "aria-readonly"
    RELEVANT = "aria-relevant"
    REQUIRED = "aria-required"
    ROLEDESCRIPTION = "aria-roledescription"
    ROWCOUNT = "aria-rowcount"
    ROWINDEX = "aria-rowindex"
    ROWINDEXTEXT = "aria-rowindextext"
    ROWSPAN = "aria-rowspan"
    SELECTED = "aria-selected"
    SETSIZE = "aria-setsize"
    SORT = "aria-sort"
    VALUEMAX = "aria-valuemax"
    VALUEMIN = "aria-valuemin"
    VALUENOW = "aria-valuenow"
    VALUETEXT = "aria-valuetext"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> Optional["Aria"]:
        try:
            return cls(name)
        except ValueError:
            return None

    def value_type(self) -> AriaValueType:
        return VALUE_TYPES[self]

    def is_global(self) -> bool:
        return self in GLOBAL_PROPERTIES

    def is_supported_by_role(self, role: Role) -> bool:
        """
        True when `role` may carry this property.

        Global properties are supported everywhere. A property without an
        allow-list is treated as supported, so only listed restrictions flag.
        """
        if self.is_global():
            return True
        allowed = SUPPORTED_ROLES.get(self)
        if allowed is None:
            return True
        return role in allowed


VALUE_TYPES: Dict[Aria, AriaValueType] = {
    Aria.ACTIVEDESCENDANT: IDREF,
    Aria.ATOMIC: BOOLEAN,
    Aria.AUTOCOMPLETE: enumerated("inline", "list", "both", "none"),
    Aria.BRAILLELABEL: FREE_TEXT,
    Aria.BRAILLEROLEDESCRIPTION: FREE_TEXT,
    Aria.BUSY: BOOLEAN,
    Aria.CHECKED: TRISTATE,
    Aria.COLCOUNT: INTEGER,
    Aria.COLINDEX: INTEGER,
    Aria.COLINDEXTEXT: FREE_TEXT,
    Aria.COLSPAN: INTEGER,
    Aria.CONTROLS: IDREF_LIST,
    Aria.CURRENT: enumerated("page", "step", "location", "date", "time", "true", "false"),
    Aria.DESCRIBEDBY: IDREF_LIST,
    Aria.DESCRIPTION: FREE_TEXT,
    Aria.DETAILS: IDREF,
    Aria.DISABLED: BOOLEAN,
    Aria.DROPEFFECT: enumerated("copy", "execute", "link", "move", "none", "popup"),
    Aria.ERRORMESSAGE: IDREF,
    Aria.EXPANDED: BOOLEAN_OR_UNDEFINED,
    Aria.FLOWTO: IDREF_LIST,
    Aria.GRABBED: BOOLEAN_OR_UNDEFINED,
    Aria.HASPOPUP: enumerated("true", "false", "menu", "listbox", "tree", "grid", "dialog"),
    Aria.HIDDEN: BOOLEAN_OR_UNDEFINED,
    Aria.INVALID: enumerated("true", "false", "grammar", "spelling"),
    Aria.KEYSHORTCUTS: FREE_TEXT,
    Aria.LABEL: FREE_TEXT,
    Aria.LABELLEDBY: IDREF_LIST,
    Aria.LEVEL: INTEGER,
    Aria.LIVE: enumerated("assertive", "off", "polite"),
    Aria.MODAL: BOOLEAN,
    Aria.MULTILINE: BOOLEAN,
    Aria.MULTISELECTABLE: BOOLEAN,
    Aria.ORIENTATION: enumerated("horizontal", "vertical", "undefined"),
    Aria.OWNS: IDREF_LIST,
    Aria.PLACEHOLDER: FREE_TEXT,
    Aria.POSINSET: INTEGER,
    Aria.PRESSED: TRISTATE,
    Aria.READONLY: BOOLEAN,
    Aria.RELEVANT: enumerated("additions", "additions text", "all", "removals", "text"),
    Aria.REQUIRED: BOOLEAN,
    Aria.ROLEDESCRIPTION: FREE_TEXT,
    Aria.ROWCOUNT: INTEGER,
    Aria.ROWINDEX: INTEGER,
    Aria.ROWINDEXTEXT: FREE_TEXT,
    Aria.ROWSPAN: INTEGER,
    Aria.SELECTED: BOOLEAN_OR_UNDEFINED,
    Aria.SETSIZE: INTEGER,
    Aria.SORT: enumerated("ascending", "descending", "none", "other"),
    Aria.VALUEMAX: NUMBER,
    Aria.VALUEMIN: NUMBER,
    Aria.VALUENOW: NUMBER,
    Aria.VALUETEXT: FREE_TEXT,
}

GLOBAL_PROPERTIES: FrozenSet[Aria] = frozenset({
    Aria.ATOMIC,
    Aria.BRAILLELABEL,
    Aria.BRAILLEROLEDESCRIPTION,
    Aria.BUSY,
    Aria.CONTROLS,
    Aria.CURRENT,
    Aria.DESCRIBEDBY,
    Aria.DESCRIPTION,
    Aria.DETAILS,
    Aria.DISABLED,
    Aria.DROPEFFECT,
    Aria.ERRORMESSAGE,
    Aria.FLOWTO,
    Aria.GRABBED,
    Aria.HASPOPUP,
    Aria.HIDDEN,
    Aria.INVALID,
    Aria.KEYSHORTCUTS,
    Aria.LABEL,
    Aria.LABELLEDBY,
    Aria.LIVE,
    Aria.OWNS,
    Aria.RELEVANT,
    Aria.ROLEDESCRIPTION,
})


def _roles(*names: str) -> FrozenSet[Role]:
    return frozenset(Role(name) for name in names)


_GRID_CELLS = _roles("cell", "columnheader", "gridcell", "row", "rowheader")
_SPANNING_CELLS = _roles("cell", "columnheader", "gridcell", "rowheader")
_TABULAR = _roles("grid", "table", "treegrid")
_SET_MEMBERS = _roles(
    "article", "listitem", "menuitem", "menuitemcheckbox", "menuitemradio",
    "option", "radio", "row", "tab", "treeitem",
)
_RANGES = _roles("meter", "progressbar", "scrollbar", "separator", "slider", "spinbutton")

# Non-global properties restricted to specific roles.
SUPPORTED_ROLES: Dict[Aria, FrozenSet[Role]] = {
    Aria.ACTIVEDESCENDANT: _roles(
        "application", "combobox", "grid", "group", "listbox", "menu", "menubar",
        "radiogroup", "row", "searchbox", "tablist", "textbox", "tree", "treegrid",
    ),
    Aria.AUTOCOMPLETE: _roles("combobox", "searchbox", "textbox"),
    Aria.CHECKED: _roles("checkbox", "menuitemcheckbox", "menuitemradio", "option", "radio", "switch"),
    Aria.COLCOUNT: _TABULAR,
    Aria.COLINDEX: _GRID_CELLS,
    Aria.COLINDEXTEXT: _GRID_CELLS,
    Aria.COLSPAN: _SPANNING_CELLS,
    Aria.EXPANDED: _roles(
        "application", "button", "checkbox", "combobox", "gridcell", "link", "listbox",
        "menuitem", "menuitemcheckbox", "menuitemradio", "row", "rowheader", "tab", "treeitem",
    ),
    Aria.LEVEL: _roles("heading", "listitem", "row", "tablist"),
    Aria.MODAL: _roles("alertdialog", "dialog"),
    Aria.MULTILINE: _roles("textbox"),
    Aria.MULTISELECTABLE: _roles("grid", "listbox", "tablist", "tree", "treegrid"),
    Aria.ORIENTATION: _roles(
        "combobox", "listbox", "menu", "menubar", "radiogroup", "scrollbar", "separator",
        "slider", "tablist", "toolbar", "tree", "treegrid",
    ),
    Aria.PLACEHOLDER: _roles("searchbox", "textbox"),
    Aria.POSINSET: _SET_MEMBERS,
    Aria.PRESSED: _roles("button"),
    Aria.READONLY: _roles(
        "checkbox", "combobox", "grid", "gridcell", "listbox", "radiogroup", "slider",
        "spinbutton", "textbox",
    ),
    Aria.REQUIRED: _roles(
        "checkbox", "combobox", "gridcell", "listbox", "radiogroup", "spinbutton", "textbox", "tree",
    ),
    Aria.ROWCOUNT: _TABULAR,
    Aria.ROWINDEX: _GRID_CELLS,
    Aria.ROWINDEXTEXT: _GRID_CELLS,
    Aria.ROWSPAN: _SPANNING_CELLS,
    Aria.SELECTED: _roles("cell", "columnheader", "gridcell", "option", "row", "rowheader", "tab", "treeitem"),
    Aria.SETSIZE: _SET_MEMBERS,
    Aria.SORT: _roles("columnheader", "rowheader"),
    Aria.VALUEMAX: _RANGES,
    Aria.VALUEMIN: _RANGES,
    Aria.VALUENOW: _RANGES,
    Aria.VALUETEXT: _RANGES,
}
