"""Rich text runs, their fonts and colours, and their XML form."""

from __future__ import annotations

import dataclasses
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable

_XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"
_BOOL_TAGS = ("b", "i", "strike", "outline", "shadow", "condense", "extend")


class RichTextFontFamily(IntEnum):
    """Font family values of a rich text run."""

    UNSPECIFIED = -1
    NOT_APPLICABLE = 0
    ROMAN = 1
    SWISS = 2
    MODERN = 3
    SCRIPT = 4
    DECORATIVE = 5


class RichTextCharset(IntEnum):
    """Character set values of a rich text run."""

    UNSPECIFIED = -1
    ANSI = 0
    DEFAULT = 1
    SYMBOL = 2
    MAC = 77
    SHIFT_JIS = 128
    HANGUL = 129
    JOHAB = 130
    GB2312 = 134
    BIG5 = 136
    GREEK = 161
    TURKISH = 162
    VIETNAMESE = 163
    HEBREW = 177
    ARABIC = 178
    BALTIC = 186
    RUSSIAN = 204
    THAI = 222
    EAST_EUROPE = 238
    OEM = 255


class RichTextVertAlign(str, Enum):
    """Vertical position of the text of a run."""

    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"


class RichTextUnderline(str, Enum):
    """Underline styles that apply to a run."""

    SINGLE = "single"
    DOUBLE = "double"


def _coerce(enum_cls, value):
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _format_float(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass
class XlsxColor:
    """A colour as stored in spreadsheet XML."""

    rgb: str = ""
    theme: int | None = None
    tint: float = 0.0
    indexed: int | None = None

    @classmethod
    def from_element(cls, element: ET.Element) -> "XlsxColor":
        theme = element.get("theme")
        indexed = element.get("indexed")
        tint = element.get("tint")
        return cls(
            rgb=element.get("rgb", ""),
            theme=int(theme) if theme is not None else None,
            tint=float(tint) if tint is not None else 0.0,
            indexed=int(indexed) if indexed is not None else None,
        )

    def to_element(self, tag: str = "color") -> ET.Element:
        element = ET.Element(tag)
        if self.rgb:
            element.set("rgb", self.rgb)
        if self.theme is not None:
            element.set("theme", str(self.theme))
        if self.tint:
            element.set("tint", _format_float(self.tint))
        if self.indexed is not None:
            element.set("indexed", str(self.indexed))
        return element


@dataclass
class RichTextColor:
    """The colour of a rich text run."""

    core_color: XlsxColor


def new_rich_text_color_from_argb(alpha: int, red: int, green: int, blue: int) -> RichTextColor:
    """Build a colour from ARGB components, each in the range 0 to 255."""
    return RichTextColor(XlsxColor(rgb=f"{alpha:02X}{red:02X}{green:02X}{blue:02X}"))


def new_rich_text_color_from_theme_color(theme_color: int) -> RichTextColor:
    """Build a colour from a zero-based theme colour index."""
    return RichTextColor(XlsxColor(theme=theme_color))


@dataclass
class RichTextFont:
    """Font of a rich text run; size, family and charset are ignored without a name."""

    name: str = ""
    size: float = 0.0
    family: int = RichTextFontFamily.NOT_APPLICABLE
    charset: int = RichTextCharset.ANSI
    color: RichTextColor | None = None
    bold: bool = False
    italic: bool = False
    strike: bool = False
    vert_align: RichTextVertAlign | str | None = None
    underline: RichTextUnderline | str | None = None


@dataclass
class RichTextRun:
    """A run of decorated text."""

    text: str = ""
    font: RichTextFont | None = None


@dataclass
class RunProperties:
    """The run properties element of a run, as in the XML."""

    rfont: str | None = None
    charset: int | None = None
    family: int | None = None
    b: bool = False
    i: bool = False
    strike: bool = False
    outline: bool = False
    shadow: bool = False
    condense: bool = False
    extend: bool = False
    color: XlsxColor | None = None
    sz: float | None = None
    u: str | None = None
    vert_align: str | None = None
    scheme: str | None = None


@dataclass
class XmlRun:
    """A run as stored in the XML: its text and optional properties."""

    text: str = ""
    properties: RunProperties | None = None


def rich_text_to_xml(runs: Iterable[RichTextRun]) -> list[XmlRun]:
    """Convert rich text runs to their XML representation."""
    result = []
    for run in runs:
        props = None
        font = run.font
        if font is not None:
            props = RunProperties()
            if font.name:
                props.rfont = font.name
            if font.size > 0.0:
                props.sz = font.size
            if font.family != RichTextFontFamily.UNSPECIFIED:
                props.family = int(font.family)
            if font.charset != RichTextCharset.UNSPECIFIED:
                props.charset = int(font.charset)
            if font.color is not None:
                props.color = dataclasses.replace(font.color.core_color)
            props.b = font.bold
            props.i = font.italic
            props.strike = font.strike
            if font.vert_align:
                props.vert_align = _enum_text(font.vert_align)
            if font.underline:
                props.u = _enum_text(font.underline)
        result.append(XmlRun(text=run.text, properties=props))
    return result


def _enum_text(value) -> str:
    return value.value if isinstance(value, Enum) else str(value)


def xml_to_rich_text(runs: Iterable[XmlRun]) -> list[RichTextRun]:
    """Convert XML runs to rich text runs."""
    result = []
    for xml_run in runs:
        run = RichTextRun(text=xml_run.text)
        props = xml_run.properties
        if props is not None:
            font = RichTextFont(
                name=props.rfont or "",
                size=props.sz if props.sz is not None else 0.0,
                family=(
                    _coerce(RichTextFontFamily, props.family)
                    if props.family is not None
                    else RichTextFontFamily.UNSPECIFIED
                ),
                charset=(
                    _coerce(RichTextCharset, props.charset)
                    if props.charset is not None
                    else RichTextCharset.UNSPECIFIED
                ),
                bold=props.b,
                italic=props.i,
                strike=props.strike,
            )
            if props.color is not None:
                font.color = RichTextColor(dataclasses.replace(props.color))
            if props.vert_align is not None:
                font.vert_align = _coerce(RichTextVertAlign, props.vert_align)
            if props.u is not None:
                font.underline = _coerce(RichTextUnderline, props.u)
            run.font = font
        result.append(run)
    return result


def rich_text_to_plain_text(runs: Iterable[RichTextRun]) -> str:
    """Join the text of all runs."""
    return "".join(run.text for run in runs)


def _bool_prop(value: str | None) -> bool:
    if value is None:
        return True
    return value.strip().lower() in ("1", "true")


def _properties_from_element(element: ET.Element) -> RunProperties:
    props = RunProperties()
    for child in element:
        tag = _local(child.tag)
        val = child.get("val")
        if tag == "rFont":
            props.rfont = val or ""
        elif tag == "charset":
            props.charset = int(val) if val else 0
        elif tag == "family":
            props.family = int(val) if val else 0
        elif tag in _BOOL_TAGS:
            setattr(props, tag, _bool_prop(val))
        elif tag == "color":
            props.color = XlsxColor.from_element(child)
        elif tag == "sz":
            props.sz = float(val) if val else 0.0
        elif tag == "u":
            props.u = val or ""
        elif tag == "vertAlign":
            props.vert_align = val or ""
        elif tag == "scheme":
            props.scheme = val or ""
    return props


def _properties_to_element(props: RunProperties) -> ET.Element:
    element = ET.Element("rPr")
    if props.rfont is not None:
        ET.SubElement(element, "rFont", val=props.rfont)
    if props.charset is not None:
        ET.SubElement(element, "charset", val=str(props.charset))
    if props.family is not None:
        ET.SubElement(element, "family", val=str(props.family))
    for tag in _BOOL_TAGS:
        if getattr(props, tag):
            ET.SubElement(element, tag)
    if props.color is not None:
        element.append(props.color.to_element())
    if props.sz is not None:
        ET.SubElement(element, "sz", val=_format_float(props.sz))
    if props.u is not None:
        ET.SubElement(element, "u", val=props.u)
    if props.vert_align is not None:
        ET.SubElement(element, "vertAlign", val=props.vert_align)
    if props.scheme is not None:
        ET.SubElement(element, "scheme", val=props.scheme)
    return element


def run_from_element(element: ET.Element) -> XmlRun:
    """Read an ``r`` element into an XmlRun."""
    run = XmlRun()
    for child in element:
        tag = _local(child.tag)
        if tag == "t":
            run.text = child.text or ""
        elif tag == "rPr":
            run.properties = _properties_from_element(child)
    return run


def run_to_element(run: XmlRun) -> ET.Element:
    """Build an ``r`` element from an XmlRun."""
    element = ET.Element("r")
    if run.properties is not None:
        element.append(_properties_to_element(run.properties))
    text = ET.SubElement(element, "t")
    text.text = run.text
    if run.text != run.text.strip():
        text.set(_XML_SPACE, "preserve")
    return element