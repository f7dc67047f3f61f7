"""Mail-merge request schema."""

from pydantic import BaseModel, Field


class MergeRequest(BaseModel):
    """Produce one filled template per row from a draft template.

    ``__name`` and ``name`` keys on a row pick the output template's name.
    """
    template_id: str = Field(..., min_length=1)
    folder_id: str | None = None  # defaults to the source template's folder
    rows: list[dict[str, str]] = Field(..., min_length=1)
