"""Folder request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator


class FolderCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    parent_id: str | None = None  # None = root


class FolderUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    parent_id: str | None = None
    move_to_root: bool = False  # parent_id=None alone means "leave parent unchanged"

    @model_validator(mode="after")
    def check_single_destination(self) -> "FolderUpdate":
        if self.move_to_root and self.parent_id is not None:
            raise ValueError("move_to_root and parent_id are mutually exclusive")
        return self


class FolderResponse(BaseModel):
    id: str
    name: str
    parent_id: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class FolderDeleteResponse(BaseModel):
    deleted_folder_ids: list[str]
    deleted_template_ids: list[str]
