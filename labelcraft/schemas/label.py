"""Label copy generation schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class LabelCreate(BaseModel):
    context: str = Field(..., min_length=1)
    product_type: str = Field(..., min_length=1, max_length=255)


class LabelResponse(BaseModel):
    id: int
    context: str
    product_type: str
    text: str
    created_at: datetime

    model_config = {"from_attributes": True}
