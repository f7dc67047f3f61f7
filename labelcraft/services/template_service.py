"""Template service — canvas template CRUD and field extraction."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from labelcraft.models.template import Template
from labelcraft.schemas.template import TemplateCreate, TemplateUpdate
from labelcraft.utils.placeholders import extract_fields

logger = logging.getLogger(__name__)


async def list_templates(
    db: AsyncSession, folder_id: str | None = None, role: str | None = None
) -> list[Template]:
    stmt = select(Template).order_by(Template.created_at.desc())
    if folder_id is not None:
        stmt = stmt.where(Template.folder_id == folder_id)
    if role:
        stmt = stmt.where(Template.role == role)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_template(db: AsyncSession, template_id: str) -> Template | None:
    return await db.get(Template, template_id)


async def find_by_name(db: AsyncSession, name: str, folder_id: str | None) -> Template | None:
    stmt = select(Template).where(Template.name == name)
    if folder_id is None:
        stmt = stmt.where(Template.folder_id.is_(None))
    else:
        stmt = stmt.where(Template.folder_id == folder_id)
    result = await db.execute(stmt.limit(1))
    return result.scalars().first()


async def save_template(db: AsyncSession, data: TemplateCreate) -> tuple[Template, bool]:
    """Create a draft, or update the one with the same name in the same folder.

    Returns (template, created).
    """
    items = data.items_payload()
    fields = extract_fields(items)

    existing = await find_by_name(db, data.name, data.folder_id)
    if existing:
        existing.width = data.width
        existing.height = data.height
        existing.items = items
        if fields:
            existing.fields = fields
        await db.commit()
        await db.refresh(existing)
        logger.info("Updated template %s (%s) in place", existing.id, existing.name)
        return existing, False

    tpl = Template(
        name=data.name,
        folder_id=data.folder_id,
        width=data.width,
        height=data.height,
        items=items,
        fields=fields,
        role="draft",
    )
    db.add(tpl)
    await db.commit()
    await db.refresh(tpl)
    return tpl, True


async def update_template(
    db: AsyncSession, template_id: str, data: TemplateUpdate
) -> Template | None:
    tpl = await db.get(Template, template_id)
    if not tpl:
        return None

    items = data.items_payload()
    fields = extract_fields(items)

    tpl.name = data.name
    tpl.folder_id = data.folder_id
    tpl.width = data.width
    tpl.height = data.height
    tpl.items = items
    # An edit that drops every placeholder keeps the previous field metadata
    if fields:
        tpl.fields = fields

    await db.commit()
    await db.refresh(tpl)
    return tpl


async def delete_template(db: AsyncSession, template_id: str) -> bool:
    tpl = await db.get(Template, template_id)
    if not tpl:
        return False

    await db.delete(tpl)
    await db.commit()
    return True


async def refresh_fields(db: AsyncSession, template_id: str) -> Template | None:
    """Re-extract fields from the template's current items."""
    tpl = await db.get(Template, template_id)
    if not tpl:
        return None

    tpl.fields = extract_fields(tpl.items or [])
    await db.commit()
    await db.refresh(tpl)
    logger.info("Refreshed fields for template %s: %d fields", tpl.id, len(tpl.fields))
    return tpl
