"""Label copy generation endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from labelcraft.adapters.base import GenerationError
from labelcraft.database import get_db
from labelcraft.schemas.label import LabelCreate, LabelResponse
from labelcraft.services import label_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=list[LabelResponse])
async def list_labels(
    limit: int | None = Query(None, ge=1, le=500, description="Defaults to the configured page size"),
    db: AsyncSession = Depends(get_db),
):
    return await label_service.list_labels(db, limit=limit)


@router.post("/", response_model=LabelResponse, status_code=201)
async def generate_label(data: LabelCreate, db: AsyncSession = Depends(get_db)):
    try:
        return await label_service.generate_label(db, data)
    except GenerationError as e:
        logger.warning("Label generation failed: %s", e)
        raise HTTPException(status_code=502, detail=f"Generation error: {e}")
