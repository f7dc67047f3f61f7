"""Folder tree endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from labelcraft.database import get_db
from labelcraft.schemas.folder import (
    FolderCreate,
    FolderDeleteResponse,
    FolderResponse,
    FolderUpdate,
)
from labelcraft.services import folder_service

router = APIRouter()


@router.get("/", response_model=list[FolderResponse])
async def list_folders(db: AsyncSession = Depends(get_db)):
    return await folder_service.list_folders(db)


@router.post("/", response_model=FolderResponse, status_code=201)
async def create_folder(data: FolderCreate, db: AsyncSession = Depends(get_db)):
    if data.parent_id is not None and not await folder_service.get_folder(db, data.parent_id):
        raise HTTPException(status_code=404, detail="Parent folder not found")
    return await folder_service.create_folder(db, data)


@router.patch("/{folder_id}", response_model=FolderResponse)
async def update_folder(
    folder_id: str, data: FolderUpdate, db: AsyncSession = Depends(get_db)
):
    if data.parent_id is not None and not await folder_service.get_folder(db, data.parent_id):
        raise HTTPException(status_code=404, detail="Parent folder not found")
    try:
        folder = await folder_service.update_folder(db, folder_id, data)
    except folder_service.FolderCycleError as e:
        raise HTTPException(status_code=409, detail=str(e))
    if not folder:
        raise HTTPException(status_code=404, detail="Folder not found")
    return folder


@router.delete("/{folder_id}", response_model=FolderDeleteResponse)
async def delete_folder(folder_id: str, db: AsyncSession = Depends(get_db)):
    """Delete the folder, all of its descendants, and every template inside them."""
    result = await folder_service.delete_folder(db, folder_id)
    if result is None:
        raise HTTPException(status_code=404, detail="Folder not found")
    return result
