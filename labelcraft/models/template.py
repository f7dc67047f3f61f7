"""Template ORM model — canvas label templates, both drafts and merge output."""

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Float, String, func
from sqlalchemy.orm import Mapped, mapped_column

from labelcraft.database import Base, utcnow


class Template(Base):
    __tablename__ = "templates"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=lambda: uuid.uuid4().hex)
    name: Mapped[str] = mapped_column(String(255))
    folder_id: Mapped[str | None] = mapped_column(String(32), nullable=True, index=True)
    width: Mapped[float] = mapped_column(Float)
    height: Mapped[float] = mapped_column(Float)
    items: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)  # canvas items
    fields: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)  # discovered placeholders
    role: Mapped[str] = mapped_column(String(16), default="draft")  # draft | filled
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, server_default=func.now(), onupdate=utcnow
    )
