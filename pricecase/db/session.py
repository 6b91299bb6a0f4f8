# pricecase/db/session.py
# -----------------------------------------------------------------------------
# Snapshot store wiring
# - async engine + session factory, injected with Depends(get_session)
# - init_models() creates the snapshot table on startup
# - pre-ping so a dropped connection surfaces as a store error, not a hang
# -----------------------------------------------------------------------------
from collections.abc import AsyncGenerator

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from pricecase.core.config import settings

engine = create_async_engine(settings.DATABASE_URL, pool_pre_ping=True)
SnapshotSession = async_sessionmaker(engine, expire_on_commit=False)
Base = declarative_base()


async def init_models() -> None:
    import pricecase.db.models  # noqa: F401  (register SharedSnapshot)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.debug("snapshot store ready at {}", engine.url.render_as_string(hide_password=True))


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with SnapshotSession() as session:
        yield session
