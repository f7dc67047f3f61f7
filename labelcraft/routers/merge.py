"""Mail-merge endpoint."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from labelcraft.database import get_db
from labelcraft.schemas.merge import MergeRequest
from labelcraft.schemas.template import TemplateResponse
from labelcraft.services import merge_service

router = APIRouter()


@router.post("", response_model=list[TemplateResponse], status_code=201)
async def merge_template(body: MergeRequest, db: AsyncSession = Depends(get_db)):
    """Fill the template once per row; returns the created templates in row order.

    Not atomic: on failure, templates created for earlier rows stay persisted
    and their ids are reported in the error detail.
    """
    try:
        created = await merge_service.merge_template(
            db, body.template_id, body.rows, folder_id=body.folder_id
        )
    except merge_service.MergeError as e:
        raise HTTPException(
            status_code=500,
            detail={
                "message": str(e),
                "failed_row": e.row_index + 1,
                "created_ids": e.created_ids,
            },
        )
    if created is None:
        raise HTTPException(status_code=404, detail="Template not found")
    return created
