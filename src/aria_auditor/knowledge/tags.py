# src/aria_auditor/knowledge/tags.py
from enum import Enum
from typing import Dict, FrozenSet, Optional

from .roles import Role


class Tag(str, Enum):
    """HTML elements the auditor understands. Anything else is skipped."""
    A = "a"
    ABBR = "abbr"
    ADDRESS = "address"
    AREA = "area"
    ARTICLE = "article"
    ASIDE = "aside"
    AUDIO = "audio"
    B = "b"
    BASE = "base"
    BDI = "bdi"
    BDO = "bdo"
    BLINK = "blink"
    BLOCKQUOTE = "blockquote"
    BODY = "body"
    BR = "br"
    BUTTON = "button"
    CANVAS = "canvas"
    CAPTION = "caption"
    CITE = "cite"
    CODE = "code"
    COL = "col"
    COLGROUP = "colgroup"
    DATA = "data"
    DATALIST = "datalist"
    DD = "dd"
    DEL = "del"
    DETAILS = "details"
    DFN = "dfn"
    DIALOG = "dialog"
    DIV = "div"
    DL = "dl"
    DT = "dt"
    EM = "em"
    EMBED = "embed"
    FIELDSET = "fieldset"
    FIGCAPTION = "figcaption"
    FIGURE = "figure"
    FOOTER = "footer"
    FORM = "form"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    H4 = "h4"
    H5 = "h5"
    H6 = "h6"
    HEAD = "head"
    HEADER = "header"
    HGROUP = "hgroup"
    HR = "hr"
    HTML = "html"
    I = "i"
    IFRAME = "iframe"
    IMG = "img"
    INPUT = "input"
    INS = "ins"
    KBD = "kbd"
    LABEL = "label"
    LEGEND = "legend"
    LI = "li"
    LINK = "link"
    MAIN = "main"
    MAP = "map"
    MARK = "mark"
    MARQUEE = "marquee"
    MATH = "math"
    MENU = "menu"
    META = "meta"
    METER = "meter"
    NAV = "nav"
    NOSCRIPT = "noscript"
    OBJECT = "object"
    OL = "ol"
    OPTGROUP = "optgroup"
    OPTION = "option"
    OUTPUT = "output"
    P = "p"
    PARAM = "param"
    PICTURE = "picture"
    PRE = "pre"
    PROGRESS = "progress"
    Q = "q"
    RP = "rp"
    RT = "rt"
    RUBY = "ruby"
    S = "s"
    SAMP = "samp"
    SCRIPT = "script"
    SECTION = "section"
    SELECT = "select"
    SMALL = "small"
    SOURCE = "source"
    SPAN = "span"
    STRONG = "strong"
    STYLE = "style"
    SUB = "sub"
    SUMMARY = "summary"
    SUP = "sup"
    SVG = "svg"
    TABLE = "table"
    TBODY = "tbody"
    TD = "td"
    TEMPLATE = "template"
    TEXTAREA = "textarea"
    TFOOT = "tfoot"
    TH = "th"
    THEAD = "thead"
    TIME = "time"
    TITLE = "title"
    TR = "tr"
    TRACK = "track"
    U = "u"
    UL = "ul"
    VAR = "var"
    VIDEO = "video"
    WBR = "wbr"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> Optional["Tag"]:
        """Resolves a tag name. Custom elements and components return None."""
        try:
            return cls(name)
        except ValueError:
            return None

    def implicit_role(self) -> Optional[Role]:
        return IMPLICIT_ROLES.get(self)

    def is_interactive(self) -> bool:
        return self in INTERACTIVE_TAGS

    def supports_aria(self) -> bool:
        return self not in NO_ARIA_TAGS

    def is_void(self) -> bool:
        return self in VOID_TAGS

    def is_heading(self) -> bool:
        return self in HEADING_TAGS

    def is_static(self) -> bool:
        """Neither natively interactive nor carrying an implicit role (div, span, ...)."""
        return not self.is_interactive() and self.implicit_role() is None

    def is_non_interactive_semantic(self) -> bool:
        """Carries an implicit role but is not natively interactive (li, nav, ...)."""
        return not self.is_interactive() and self.implicit_role() is not None


INTERACTIVE_TAGS: FrozenSet[Tag] = frozenset({
    Tag.A,
    Tag.BUTTON,
    Tag.DETAILS,
    Tag.INPUT,
    Tag.SELECT,
    Tag.SUMMARY,
    Tag.TEXTAREA,
})

# Metadata elements are never rendered, so roles and aria-* are meaningless on them.
NO_ARIA_TAGS: FrozenSet[Tag] = frozenset({
    Tag.BASE,
    Tag.HEAD,
    Tag.HTML,
    Tag.META,
    Tag.SCRIPT,
    Tag.STYLE,
    Tag.TITLE,
})

HEADING_TAGS: FrozenSet[Tag] = frozenset({Tag.H1, Tag.H2, Tag.H3, Tag.H4, Tag.H5, Tag.H6})

VOID_TAGS: FrozenSet[Tag] = frozenset({
    Tag.AREA,
    Tag.BASE,
    Tag.BR,
    Tag.COL,
    Tag.EMBED,
    Tag.HR,
    Tag.IMG,
    Tag.INPUT,
    Tag.LINK,
    Tag.META,
    Tag.PARAM,
    Tag.SOURCE,
    Tag.TRACK,
    Tag.WBR,
})

IMPLICIT_ROLES: Dict[Tag, Role] = {
    Tag.A: Role.LINK,
    Tag.AREA: Role.LINK,
    Tag.ARTICLE: Role.ARTICLE,
    Tag.ASIDE: Role.COMPLEMENTARY,
    Tag.BODY: Role.DOCUMENT,
    Tag.BUTTON: Role.BUTTON,
    Tag.DATALIST: Role.LISTBOX,
    Tag.DETAILS: Role.GROUP,
    Tag.DIALOG: Role.DIALOG,
    Tag.FIELDSET: Role.GROUP,
    Tag.FIGURE: Role.FIGURE,
    Tag.FOOTER: Role.CONTENTINFO,
    Tag.FORM: Role.FORM,
    Tag.H1: Role.HEADING,
    Tag.H2: Role.HEADING,
    Tag.H3: Role.HEADING,
    Tag.H4: Role.HEADING,
    Tag.H5: Role.HEADING,
    Tag.H6: Role.HEADING,
    Tag.HEADER: Role.BANNER,
    Tag.HR: Role.SEPARATOR,
    Tag.IMG: Role.IMG,
    Tag.INPUT: Role.TEXTBOX,
    Tag.LI: Role.LISTITEM,
    Tag.MAIN: Role.MAIN,
    Tag.MATH: Role.MATH,
    Tag.MENU: Role.LIST,
    Tag.METER: Role.METER,
    Tag.NAV: Role.NAVIGATION,
    Tag.OL: Role.LIST,
    Tag.OPTGROUP: Role.GROUP,
    Tag.OPTION: Role.OPTION,
    Tag.OUTPUT: Role.STATUS,
    Tag.PROGRESS: Role.PROGRESSBAR,
    Tag.SECTION: Role.REGION,
    Tag.SELECT: Role.COMBOBOX,
    Tag.SUMMARY: Role.BUTTON,
    Tag.TABLE: Role.TABLE,
    Tag.TBODY: Role.ROWGROUP,
    Tag.TD: Role.CELL,
    Tag.TEXTAREA: Role.TEXTBOX,
    Tag.TFOOT: Role.ROWGROUP,
    Tag.TH: Role.COLUMNHEADER,
    Tag.THEAD: Role.ROWGROUP,
    Tag.TR: Role.ROW,
    Tag.UL: Role.LIST,
}
