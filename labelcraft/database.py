"""Template store — async engine, per-request sessions, startup/shutdown hooks."""

from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from labelcraft.config import settings


def _connect_args(url: str) -> dict:
    # aiosqlite hands the connection to a worker thread
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_async_engine(
    settings.database_url,
    echo=(settings.env == "development"),
    connect_args=_connect_args(settings.database_url),
)
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


def utcnow() -> datetime:
    """Naive UTC timestamp with microseconds.

    SQLite's CURRENT_TIMESTAMP only has one-second resolution, which would tie
    rows inserted back to back (every output of one merge, for instance).
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


async def get_db() -> AsyncSession:  # type: ignore[misc]
    async with async_session() as session:
        yield session


async def init_db() -> None:
    """Create all tables on startup."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    """Release pooled connections on shutdown."""
    await engine.dispose()
