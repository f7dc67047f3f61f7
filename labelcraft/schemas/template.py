"""Template request/response schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class CanvasItem(BaseModel):
    """One positioned element on the label canvas."""
    id: str = Field(..., min_length=1)
    type: Literal["TEXT", "QR", "IMAGE"]
    content: str = ""  # text with {{placeholders}}, QR payload or image reference
    x: float
    y: float
    width: float
    height: float
    font_size: float | None = None
    font_family: str | None = None
    font_weight: str | None = None
    font_style: str | None = None
    text_decoration: str | None = None
    color: str | None = None
    text_align: str | None = None


class TemplateField(BaseModel):
    name: str
    label: str
    target_item_id: str


class TemplateCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    folder_id: str | None = None
    width: float
    height: float
    items: list[CanvasItem]

    def items_payload(self) -> list[dict]:
        return [item.model_dump(exclude_none=True) for item in self.items]


class TemplateUpdate(TemplateCreate):
    """Full replacement of a template's authoring data."""


class TemplateResponse(BaseModel):
    id: str
    name: str
    folder_id: str | None
    width: float
    height: float
    items: list[CanvasItem]
    fields: list[TemplateField]
    role: Literal["draft", "filled"]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
