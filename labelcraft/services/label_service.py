"""Label service — drafts short label copy with the text model and keeps a history."""

from __future__ import annotations

import logging

import jinja2
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from labelcraft.adapters.gemini import gemini
from labelcraft.config import settings
from labelcraft.models.label import Label
from labelcraft.schemas.label import LabelCreate

logger = logging.getLogger(__name__)

_PROMPT_TEMPLATE = """\
You are a copywriter specialising in product packaging.
Write one short, catchy slogan or line of copy to print on the label of this product: "{{ product_type }}".
Extra context / notes: "{{ context }}".

Requirements:
- Short (under 15 words).
- Eye-catching and appealing.
- Return only the copy itself, with no quotation marks or explanation.
"""

_env = jinja2.Environment(undefined=jinja2.StrictUndefined, keep_trailing_newline=True)


def build_prompt(context: str, product_type: str) -> str:
    return _env.from_string(_PROMPT_TEMPLATE).render(context=context, product_type=product_type)


async def list_labels(db: AsyncSession, limit: int | None = None) -> list[Label]:
    stmt = (
        select(Label)
        .order_by(Label.created_at.desc(), Label.id.desc())
        .limit(limit or settings.labels_page_size)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def generate_label(db: AsyncSession, data: LabelCreate) -> Label:
    """Generate copy for a product and store it. Raises GenerationError on model failure."""
    text = await gemini.generate(build_prompt(data.context, data.product_type))

    label = Label(context=data.context, product_type=data.product_type, text=text)
    db.add(label)
    await db.commit()
    await db.refresh(label)
    logger.info("Generated label %d for product type %r", label.id, data.product_type)
    return label
