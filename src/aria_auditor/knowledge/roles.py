# src/aria_auditor/knowledge/roles.py
from enum import Enum
from typing import TYPE_CHECKING, Dict, FrozenSet, Optional, Tuple

if TYPE_CHECKING:
    from .aria import Aria


class Role(str, Enum):
    """WAI-ARIA 1.2 roles. Abstract roles are listed last."""
    ALERT = "alert"
    ALERTDIALOG = "alertdialog"
    APPLICATION = "application"
    ARTICLE = "article"
    BANNER = "banner"
    BUTTON = "button"
    CELL = "cell"
    CHECKBOX = "checkbox"
    COLUMNHEADER = "columnheader"
    COMBOBOX = "combobox"
    COMPLEMENTARY = "complementary"
    CONTENTINFO = "contentinfo"
    DEFINITION = "definition"
    DIALOG = "dialog"
    DIRECTORY = "directory"
    DOCUMENT = "document"
    FEED = "feed"
    FIGURE = "figure"
    FORM = "form"
    GRID = "grid"
    GRIDCELL = "gridcell"
    GROUP = "group"
    HEADING = "heading"
    IMG = "img"
    LINK = "link"
    LIST = "list"
    LISTBOX = "listbox"
    LISTITEM = "listitem"
    LOG = "log"
    MAIN = "main"
    MARQUEE = "marquee"
    MATH = "math"
    MENU = "menu"
    MENUBAR = "menubar"
    MENUITEM = "menuitem"
    MENUITEMCHECKBOX = "menuitemcheckbox"
    MENUITEMRADIO = "menuitemradio"
    METER = "meter"
    NAVIGATION = "navigation"
    NONE = "none"
    NOTE = "note"
    OPTION = "option"
    PRESENTATION = "presentation"
    PROGRESSBAR = "progressbar"
    RADIO = "radio"
    RADIOGROUP = "radiogroup"
    REGION = "region"
    ROW = "row"
    ROWGROUP = "rowgroup"
    ROWHEADER = "rowheader"
    SCROLLBAR = "scrollbar"
    SEARCH = "search"
    SEARCHBOX = "searchbox"
    SEPARATOR = "separator"
    SLIDER = "slider"
    SPINBUTTON = "spinbutton"
    STATUS = "status"
    SWITCH = "switch"
    TAB = "tab"
    TABLE = "table"
    TABLIST = "tablist"
    TABPANEL = "tabpanel"
    TERM = "term"
    TEXTBOX = "textbox"
    TIMER = "timer"
    TOOLBAR = "toolbar"
    TOOLTIP = "tooltip"
    TREE = "tree"
    TREEGRID = "treegrid"
    TREEITEM = "treeitem"

    # Abstract roles (for authoring tools and the taxonomy only)
    COMMAND = "command"
    COMPOSITE = "composite"
    INPUT = "input"
    LANDMARK = "landmark"
    RANGE = "range"
    ROLETYPE = "roletype"
    SECTION = "section"
    SECTIONHEAD = "sectionhead"
    SELECT = "select"
    STRUCTURE = "structure"
    WIDGET = "widget"
    WINDOW = "window"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> Optional["Role"]:
        """Resolves a single role token. Abstract roles resolve too."""
        try:
            return cls(name)
        except ValueError:
            return None

    def is_abstract(self) -> bool:
        return self in ABSTRACT_ROLES

    def is_interactive(self) -> bool:
        return self in INTERACTIVE_ROLES

    def required_properties(self) -> Tuple["Aria", ...]:
        """Aria properties an element with this explicit role must declare, in order."""
        from .aria import Aria

        return tuple(Aria(name) for name in REQUIRED_PROPERTIES.get(self, ()))

    def preferred_tag(self) -> Optional[str]:
        """Native element(s) that already convey this role, if any."""
        return PREFERRED_TAGS.get(self)


ABSTRACT_ROLES: FrozenSet[Role] = frozenset({
    Role.COMMAND,
    Role.COMPOSITE,
    Role.INPUT,
    Role.LANDMARK,
    Role.RANGE,
    Role.ROLETYPE,
    Role.SECTION,
    Role.SECTIONHEAD,
    Role.SELECT,
    Role.STRUCTURE,
    Role.WIDGET,
    Role.WINDOW,
})

INTERACTIVE_ROLES: FrozenSet[Role] = frozenset({
    Role.BUTTON,
    Role.CHECKBOX,
    Role.COMBOBOX,
    Role.GRIDCELL,
    Role.LINK,
    Role.LISTBOX,
    Role.MENU,
    Role.MENUBAR,
    Role.MENUITEM,
    Role.MENUITEMCHECKBOX,
    Role.MENUITEMRADIO,
    Role.OPTION,
    Role.RADIO,
    Role.SCROLLBAR,
    Role.SEARCHBOX,
    Role.SLIDER,
    Role.SPINBUTTON,
    Role.SWITCH,
    Role.TAB,
    Role.TEXTBOX,
    Role.TREEITEM,
})

# Stored as attribute names so this module stays independent of the Aria table.
REQUIRED_PROPERTIES: Dict[Role, Tuple[str, ...]] = {
    Role.CHECKBOX: ("aria-checked",),
    Role.COMBOBOX: ("aria-controls", "aria-expanded"),
    Role.HEADING: ("aria-level",),
    Role.METER: ("aria-valuenow", "aria-valuemax", "aria-valuemin"),
    Role.MENUITEMCHECKBOX: ("aria-checked",),
    Role.MENUITEMRADIO: ("aria-checked",),
    Role.RADIO: ("aria-checked",),
    Role.SCROLLBAR: ("aria-controls", "aria-valuenow"),
    Role.SLIDER: ("aria-valuenow",),
    Role.SWITCH: ("aria-checked",),
}

PREFERRED_TAGS: Dict[Role, str] = {
    Role.BANNER: "<header>",
    Role.BUTTON: "<button>",
    Role.COMPLEMENTARY: "<aside>",
    Role.CONTENTINFO: "<footer>",
    Role.FORM: "<form>",
    Role.HEADING: "<h1>-<h6>",
    Role.IMG: "<img>",
    Role.LINK: "<a>",
    Role.LIST: "<ul> or <ol>",
    Role.LISTITEM: "<li>",
    Role.MAIN: "<main>",
    Role.NAVIGATION: "<nav>",
    Role.PROGRESSBAR: "<progress>",
    Role.REGION: "<section>",
    Role.ROW: "<tr>",
    Role.ROWGROUP: "<tbody>, <thead>, or <tfoot>",
    Role.ROWHEADER: "<th>",
    Role.TABLE: "<table>",
    Role.TEXTBOX: "<input> or <textarea>",
}
