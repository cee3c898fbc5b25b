"""Workbook relationships and truncation of worksheet XML."""

from __future__ import annotations

import posixpath
import xml.etree.ElementTree as ET
import xml.parsers.expat
from dataclasses import dataclass

_RELS_NS = "http://schemas.openxmlformats.org/package/2006/relationships"
_REL_TYPE_BASE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/"
WORKSHEET_TYPE = _REL_TYPE_BASE + "worksheet"
SHARED_STRINGS_TYPE = _REL_TYPE_BASE + "sharedStrings"
THEME_TYPE = _REL_TYPE_BASE + "theme"
STYLES_TYPE = _REL_TYPE_BASE + "styles"

_XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'
SHEET_ENDING = b"</sheetData></worksheet>"


@dataclass
class Relationship:
    """One relationship of the workbook part."""

    id: str = ""
    target: str = ""
    type: str = ""


def make_workbook_rels(rels: dict[str, str]) -> list[Relationship]:
    """Build workbook relationships from ``{"rIdN": target}`` worksheet entries.

    The shared strings, theme and styles relationships follow the worksheets.
    """
    count = len(rels)
    relationships = [Relationship() for _ in range(count + 3)]
    for rel_id, target in rels.items():
        try:
            index = int(rel_id[3:])
        except ValueError as exc:
            raise ValueError(f"invalid relationship id {rel_id!r}") from exc
        if not 1 <= index <= len(relationships):
            raise ValueError(f"relationship id {rel_id!r} is out of range")
        relationships[index - 1] = Relationship(rel_id, target, WORKSHEET_TYPE)

    for target, rel_type in (
        ("sharedStrings.xml", SHARED_STRINGS_TYPE),
        ("theme/theme1.xml", THEME_TYPE),
        ("styles.xml", STYLES_TYPE),
    ):
        count += 1
        relationships[count - 1] = Relationship(f"rId{count}", target, rel_type)
    return relationships


def workbook_rels_to_xml(relationships: list[Relationship]) -> str:
    """Serialise relationships as a relationships part, with the XML header."""
    root = ET.Element("Relationships")
    root.set("xmlns", _RELS_NS)
    for rel in relationships:
        element = ET.SubElement(root, "Relationship")
        element.set("Id", rel.id)
        element.set("Target", rel.target)
        element.set("Type", rel.type)
    return _XML_HEADER + ET.tostring(root, encoding="unicode", short_empty_elements=False)


def parse_workbook_rels(data: str | bytes) -> dict[str, str]:
    """Map relationship ids to worksheet file names without the ``.xml`` suffix."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    try:
        root = ET.fromstring(data.lstrip())
    except ET.ParseError as exc:
        raise ValueError(f"readWorkbookRelationsFromZipFile: {exc}") from exc
    sheets = {}
    for element in root:
        if element.tag.rsplit("}", 1)[-1] != "Relationship":
            continue
        target = element.get("Target", "")
        if target.endswith(".xml") and element.get("Type") == WORKSHEET_TYPE:
            filename = posixpath.split(target)[1]
            sheets[element.get("Id", "")] = filename.replace(".xml", "", 1)
    return sheets


class _LimitReached(Exception):
    def __init__(self, offset: int) -> None:
        super().__init__(offset)
        self.offset = offset


def truncate_sheet_xml(data: str | bytes, row_limit: int) -> str | bytes:
    """Keep only the first ``row_limit`` rows of worksheet XML.

    Everything after the last kept row is replaced by the closing tags of
    the sheet data and worksheet.  A document with fewer rows is returned
    unchanged.  Malformed XML raises ``ValueError``.
    """
    as_text = isinstance(data, str)
    raw = data.encode("utf-8") if as_text else data
    parser = xml.parsers.expat.ParserCreate()
    rows_seen = 0

    def on_end(name: str) -> None:
        nonlocal rows_seen
        if name.rsplit(":", 1)[-1] != "row":
            return
        rows_seen += 1
        if rows_seen >= row_limit:
            index = parser.CurrentByteIndex
            close = raw.find(b">", index)
            raise _LimitReached(len(raw) if close < 0 else close + 1)

    parser.EndElementHandler = on_end
    try:
        parser.Parse(raw, True)
    except _LimitReached as limit:
        result = raw[: limit.offset] + SHEET_ENDING
    except xml.parsers.expat.ExpatError as exc:
        raise ValueError(f"truncateSheetXML: {exc}") from exc
    else:
        result = raw
    return result.decode("utf-8") if as_text else result