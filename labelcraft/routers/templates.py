"""Template CRUD + field refresh endpoints."""

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession

from labelcraft.database import get_db
from labelcraft.schemas.template import TemplateCreate, TemplateResponse, TemplateUpdate
from labelcraft.services import template_service

router = APIRouter()


@router.get("/", response_model=list[TemplateResponse])
async def list_templates(
    folder_id: str | None = None,
    role: Literal["draft", "filled"] | None = None,
    db: AsyncSession = Depends(get_db),
):
    return await template_service.list_templates(db, folder_id=folder_id, role=role)


@router.post("/", response_model=TemplateResponse, status_code=201)
async def save_template(
    data: TemplateCreate, response: Response, db: AsyncSession = Depends(get_db)
):
    """Create a draft, or update the same-named template in the same folder."""
    tpl, created = await template_service.save_template(db, data)
    if not created:
        response.status_code = 200
    return tpl


@router.get("/{template_id}", response_model=TemplateResponse)
async def get_template(template_id: str, db: AsyncSession = Depends(get_db)):
    tpl = await template_service.get_template(db, template_id)
    if not tpl:
        raise HTTPException(status_code=404, detail="Template not found")
    return tpl


@router.put("/{template_id}", response_model=TemplateResponse)
async def update_template(
    template_id: str, data: TemplateUpdate, db: AsyncSession = Depends(get_db)
):
    tpl = await template_service.update_template(db, template_id, data)
    if not tpl:
        raise HTTPException(status_code=404, detail="Template not found")
    return tpl


@router.delete("/{template_id}", status_code=204)
async def delete_template(template_id: str, db: AsyncSession = Depends(get_db)):
    deleted = await template_service.delete_template(db, template_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Template not found")


@router.post("/{template_id}/fields/refresh", response_model=TemplateResponse)
async def refresh_fields(template_id: str, db: AsyncSession = Depends(get_db)):
    tpl = await template_service.refresh_fields(db, template_id)
    if not tpl:
        raise HTTPException(status_code=404, detail="Template not found")
    return tpl
