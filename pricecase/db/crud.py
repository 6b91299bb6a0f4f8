# pricecase/db/crud.py
# -----------------------------------------------------------------------------
# Snapshot store helpers
# - create once, read by id; no update/delete
# -----------------------------------------------------------------------------
import uuid
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pricecase.db.models import SharedSnapshot
from pricecase.schemas.share import SnapshotCreate


async def create_snapshot(db: AsyncSession, payload: SnapshotCreate) -> str:
    snapshot_id = uuid.uuid4().hex
    db.add(
        SharedSnapshot(
            id=snapshot_id,
            label=payload.label,
            locale=payload.locale,
            client_metrics=payload.client_metrics.model_dump(),
            pricing=payload.pricing.model_dump(),
            show_discount=payload.show_discount,
            absorb_per_return_fee=payload.absorb_per_return_fee,
            expires_at=payload.expires_at,
            features=list(payload.features),
            addons=dict(payload.addons),
        )
    )
    await db.commit()
    return snapshot_id


async def get_snapshot(db: AsyncSession, snapshot_id: str) -> SharedSnapshot | None:
    stmt = select(SharedSnapshot).where(SharedSnapshot.id == snapshot_id)
    res = await db.execute(stmt)
    return res.scalar_one_or_none()


def is_expired(row: SharedSnapshot, now: datetime | None = None) -> bool:
    if row.expires_at is None:
        return False
    expires = row.expires_at
    if expires.tzinfo is None:  # SQLite drops the offset
        expires = expires.replace(tzinfo=timezone.utc)
    return expires <= (now or datetime.now(timezone.utc))
