"""The shared string table of a workbook."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from .richtext import (
    RichTextRun,
    XmlRun,
    rich_text_to_plain_text,
    rich_text_to_xml,
    run_from_element,
    run_to_element,
    xml_to_rich_text,
)

_MAIN_NS = "http://schemas.openxmlformats.org/spreadsheetml/2006/main"
_XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"
_XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


@dataclass
class SharedStringItem:
    """One ``si`` entry: plain text, or a list of runs."""

    text: str | None = None
    runs: list[XmlRun] = field(default_factory=list)


@dataclass
class SharedStringTable:
    """The contents of a shared strings part."""

    count: int = 0
    unique_count: int = 0
    items: list[SharedStringItem] = field(default_factory=list)


def parse_sst(data: str | bytes) -> SharedStringTable:
    """Parse shared strings XML."""
    root = ET.fromstring(data.lstrip())
    table = SharedStringTable(
        count=int(root.get("count", "0")),
        unique_count=int(root.get("uniqueCount", "0")),
    )
    for si in root:
        if _local(si.tag) != "si":
            continue
        item = SharedStringItem()
        for child in si:
            tag = _local(child.tag)
            if tag == "t":
                item.text = child.text or ""
            elif tag == "r":
                item.runs.append(run_from_element(child))
        table.items.append(item)
    return table


def sst_to_xml(sst: SharedStringTable) -> str:
    """Serialise a shared string table, with the XML header."""
    root = ET.Element("sst")
    root.set("xmlns", _MAIN_NS)
    root.set("count", str(sst.count))
    root.set("uniqueCount", str(sst.unique_count))
    for item in sst.items:
        si = ET.SubElement(root, "si")
        if item.text is not None:
            t = ET.SubElement(si, "t")
            t.text = item.text
            if item.text != item.text.strip():
                t.set(_XML_SPACE, "preserve")
        for run in item.runs:
            si.append(run_to_element(run))
    return _XML_HEADER + ET.tostring(root, encoding="unicode", short_empty_elements=False)


@dataclass
class _Entry:
    plain_text: str = ""
    rich_text: list[RichTextRun] | None = None


class RefTable:
    """Strings addressed by index; deduplicates only when writing."""

    def __init__(self, is_write: bool = False) -> None:
        self.is_write = is_write
        self._entries: list[_Entry] = []
        self._known_strings: dict[str, int] = {}
        self._known_rich_texts: dict[str, list[int]] = {}

    def add_string(self, text: str) -> int:
        """Add a plain string and return its index."""
        if self.is_write and text in self._known_strings:
            return self._known_strings[text]
        self._entries.append(_Entry(plain_text=text))
        index = len(self._entries) - 1
        self._known_strings[text] = index
        return index

    def add_rich_text(self, runs: list[RichTextRun]) -> int:
        """Add a list of rich text runs and return its index."""
        plain = rich_text_to_plain_text(runs)
        if self.is_write:
            for index in self._known_rich_texts.get(plain, []):
                if self._entries[index].rich_text == list(runs):
                    return index
        self._entries.append(_Entry(rich_text=list(runs)))
        index = len(self._entries) - 1
        self._known_rich_texts.setdefault(plain, []).append(index)
        return index

    def resolve(self, index: int) -> tuple[str, list[RichTextRun] | None]:
        """Return ``(plain_text, None)`` or ``("", runs)`` for an index."""
        entry = self._entries[index]
        if entry.rich_text is not None:
            return "", entry.rich_text
        return entry.plain_text, None

    def to_sst(self) -> SharedStringTable:
        """Build the equivalent shared string table."""
        count = len(self._entries)
        items = [
            SharedStringItem(runs=rich_text_to_xml(entry.rich_text))
            if entry.rich_text is not None
            else SharedStringItem(text=entry.plain_text)
            for entry in self._entries
        ]
        return SharedStringTable(count=count, unique_count=count, items=items)

    def __len__(self) -> int:
        return len(self._entries)


def make_shared_string_ref_table(sst: SharedStringTable) -> RefTable:
    """Build a read-mode reference table from a shared string table."""
    table = RefTable(is_write=False)
    for item in sst.items:
        if item.runs:
            table.add_rich_text(xml_to_rich_text(item.runs))
        else:
            table.add_string(item.text or "")
    return table