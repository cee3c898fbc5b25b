"""Building blocks for XLSX workbooks: references, formulas, shared strings, rich text, relationships and rows."""

__version__ = "0.1.0"

__all__ = ["formulas", "memory", "refs", "reftable", "rels", "richtext", "row"]