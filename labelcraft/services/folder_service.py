"""Folder service — folder tree CRUD and cascading delete."""

from __future__ import annotations

import logging
from collections import deque

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from labelcraft.models.folder import Folder
from labelcraft.models.template import Template
from labelcraft.schemas.folder import FolderCreate, FolderUpdate

logger = logging.getLogger(__name__)


class FolderCycleError(Exception):
    """Raised when a move would place a folder under itself or a descendant."""


async def list_folders(db: AsyncSession) -> list[Folder]:
    result = await db.execute(select(Folder).order_by(Folder.created_at))
    return list(result.scalars().all())


async def get_folder(db: AsyncSession, folder_id: str) -> Folder | None:
    return await db.get(Folder, folder_id)


async def create_folder(db: AsyncSession, data: FolderCreate) -> Folder:
    folder = Folder(name=data.name, parent_id=data.parent_id)
    db.add(folder)
    await db.commit()
    await db.refresh(folder)
    return folder


async def find_descendant_folder_ids(db: AsyncSession, root_id: str) -> list[str]:
    """Breadth-first closure of *root_id* over the parent relation, root first.

    Ids already visited are skipped, so a cyclic parent chain in storage
    terminates instead of looping forever.
    """
    ids = [root_id]
    seen = {root_id}
    queue = deque([root_id])

    while queue:
        current = queue.popleft()
        result = await db.execute(select(Folder.id).where(Folder.parent_id == current))
        for child_id in result.scalars().all():
            if child_id in seen:
                logger.warning("Folder cycle detected: %s already visited (via %s)", child_id, current)
                continue
            seen.add(child_id)
            ids.append(child_id)
            queue.append(child_id)

    return ids


async def update_folder(db: AsyncSession, folder_id: str, data: FolderUpdate) -> Folder | None:
    folder = await db.get(Folder, folder_id)
    if not folder:
        return None

    if data.name is not None:
        folder.name = data.name

    if data.move_to_root:
        folder.parent_id = None
    elif data.parent_id is not None and data.parent_id != folder.parent_id:
        subtree = await find_descendant_folder_ids(db, folder_id)
        if data.parent_id in subtree:
            raise FolderCycleError(
                f"Cannot move folder {folder_id} under its own subtree ({data.parent_id})"
            )
        folder.parent_id = data.parent_id

    await db.commit()
    await db.refresh(folder)
    return folder


async def delete_folder(db: AsyncSession, folder_id: str) -> dict[str, list[str]] | None:
    """Delete a folder, its whole subtree, and every template stored in it.

    Returns dict with 'deleted_folder_ids' and 'deleted_template_ids'.
    """
    folder = await db.get(Folder, folder_id)
    if not folder:
        return None

    folder_ids = await find_descendant_folder_ids(db, folder_id)

    result = await db.execute(select(Template.id).where(Template.folder_id.in_(folder_ids)))
    template_ids = list(result.scalars().all())

    await db.execute(delete(Folder).where(Folder.id.in_(folder_ids)))
    if template_ids:
        await db.execute(delete(Template).where(Template.id.in_(template_ids)))
    await db.commit()

    logger.info(
        "Deleted folder %s: %d folders, %d templates",
        folder_id, len(folder_ids), len(template_ids),
    )
    return {"deleted_folder_ids": folder_ids, "deleted_template_ids": template_ids}
