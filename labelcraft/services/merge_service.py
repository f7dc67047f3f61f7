"""Merge service — mail-merge a draft template into one filled template per row.

Rows are processed strictly in order and each output is committed before the
next row starts. A failure on row k leaves rows 1..k-1 persisted: there is no
rollback across rows, and the caller is told which ids were already created.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from labelcraft.models.template import Template
from labelcraft.utils.placeholders import MergeRow, extract_fields, fill_items

logger = logging.getLogger(__name__)


class MergeError(Exception):
    """A merge stopped partway; ``created_ids`` were persisted before the failure."""

    def __init__(self, message: str, *, row_index: int, created_ids: list[str]) -> None:
        super().__init__(message)
        self.row_index = row_index
        self.created_ids = created_ids


def effective_fields(template: Template) -> list[dict[str, Any]]:
    """Stored fields, or a fresh extraction when none are stored."""
    if template.fields:
        return list(template.fields)
    return extract_fields(template.items or [])


def output_name(template_name: str, row: MergeRow, fields: Sequence[dict[str, Any]], index: int) -> str:
    """Name for the output of row *index* (0-based).

    Tries ``__name``, then ``name``, then the row's value for the first field;
    the first non-blank candidate wins, else ``"<template name> #<n>"``.
    """
    candidates = [row.get("__name"), row.get("name")]
    if fields:
        candidates.append(row.get(fields[0]["name"]))

    for candidate in candidates:
        if isinstance(candidate, str) and candidate.strip():
            return candidate.strip()
    return f"{template_name} #{index + 1}"


async def merge_template(
    db: AsyncSession,
    template_id: str,
    rows: Sequence[MergeRow],
    folder_id: str | None = None,
) -> list[Template] | None:
    """Create one ``filled`` template per row. Returns None if the source is missing."""
    source = await db.get(Template, template_id)
    if not source:
        return None

    fields = effective_fields(source)
    target_folder_id = folder_id if folder_id is not None else source.folder_id
    items = source.items or []

    created: list[Template] = []
    for index, row in enumerate(rows):
        try:
            tpl = Template(
                name=output_name(source.name, row, fields, index),
                folder_id=target_folder_id,
                width=source.width,
                height=source.height,
                items=fill_items(items, row),
                fields=[dict(f) for f in fields],
                role="filled",
            )
            db.add(tpl)
            await db.commit()
            await db.refresh(tpl)
        except Exception as exc:
            created_ids = [t.id for t in created]
            await db.rollback()
            logger.error(
                "Merge of template %s failed at row %d after %d created: %s",
                template_id, index + 1, len(created_ids), exc,
            )
            raise MergeError(
                f"Merge failed at row {index + 1}: {exc}",
                row_index=index,
                created_ids=created_ids,
            ) from exc
        created.append(tpl)

    logger.info(
        "Merged template %s into %d filled templates (folder %s)",
        template_id, len(created), target_folder_id,
    )
    return created
