"""Placeholder helpers — ``{{name}}`` discovery and per-row substitution.

Canvas items are handled as plain dicts (the shape stored in the ``items``
JSON column), fields as ``{"name", "label", "target_item_id"}`` dicts.
"""

from __future__ import annotations

import copy
import re
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

PLACEHOLDER_RE = re.compile(r"\{\{([A-Za-z0-9_]+)\}\}")

TEXT_ITEM = "TEXT"

# One merge row: field name -> value. Lookups of missing names yield "".
MergeRow = Mapping[str, str]


def scan_placeholders(text: str) -> Iterator[str]:
    """Yield placeholder names found in *text*, left to right.

    ``{{}}``, unterminated markers and names with spaces or punctuation
    never match.
    """
    if not text:
        return
    for match in PLACEHOLDER_RE.finditer(text):
        yield match.group(1)


def row_value(row: MergeRow, name: str) -> str:
    value = row.get(name)
    return value if isinstance(value, str) else ""


def extract_fields(items: Sequence[Mapping[str, Any]]) -> list[dict[str, str]]:
    """Build the deduplicated field list for a template's items.

    Only non-empty TEXT items are scanned. The first item a name appears in
    becomes its ``target_item_id``; later repeats are ignored.
    """
    fields: dict[str, dict[str, str]] = {}
    for item in items:
        if item.get("type") != TEXT_ITEM or not item.get("content"):
            continue
        for name in scan_placeholders(item["content"]):
            if name not in fields:
                fields[name] = {"name": name, "label": name, "target_item_id": item["id"]}
    return list(fields.values())


def fill_placeholders(value: str, row: MergeRow) -> str:
    if not value:
        return value
    return PLACEHOLDER_RE.sub(lambda m: row_value(row, m.group(1)), value)


def fill_items(items: Sequence[Mapping[str, Any]], row: MergeRow) -> list[dict[str, Any]]:
    """Return a deep copy of *items* with TEXT content filled from *row*."""
    filled = []
    for item in items:
        clone = copy.deepcopy(dict(item))
        if clone.get("type") == TEXT_ITEM:
            clone["content"] = fill_placeholders(clone.get("content", ""), row)
        filled.append(clone)
    return filled
