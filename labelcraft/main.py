"""FastAPI application entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from labelcraft.config import settings
from labelcraft.database import close_db, init_db
from labelcraft.routers import folders, labels, merge, templates

# ── Logging setup ────────────────────────────────────────────────────
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await init_db()
    logger.info("Database ready (%s)", settings.database_url)

    yield

    # Shutdown
    await close_db()


app = FastAPI(
    title="LabelCraft",
    description="Label template authoring and mail-merge backend",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount routers
app.include_router(folders.router, prefix="/api/folders", tags=["folders"])
app.include_router(templates.router, prefix="/api/templates", tags=["templates"])
app.include_router(merge.router, prefix="/api/merge", tags=["merge"])
app.include_router(labels.router, prefix="/api/labels", tags=["labels"])


@app.get("/health")
async def health():
    return {"status": "ok", "service": "labelcraft"}
