# pricecase/routers/share.py
# -----------------------------------------------------------------------------
# /share        : store a business case snapshot behind an opaque id
# /share/{id}   : read-only view (snapshot + projection computed from it)
# - missing or expired id -> 404, store failure -> 503, both with the
#   localized "link invalid" message
# -----------------------------------------------------------------------------
from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pricecase.core.config import settings
from pricecase.db import crud
from pricecase.db.session import get_session
from pricecase.errors import SnapshotNotFound
from pricecase.schemas.projection import ProjectionOptions
from pricecase.schemas.share import (
    SharedBusinessCase,
    SnapshotCreate,
    SnapshotCreated,
    SnapshotRead,
)
from pricecase.services.business_case import payback_message
from pricecase.services.i18n import lookup
from pricecase.services.projection import project

router = APIRouter(prefix="/share", tags=["share"])


async def _load(db: AsyncSession, snapshot_id: str) -> SnapshotRead:
    row = await crud.get_snapshot(db, snapshot_id)
    if row is None or crud.is_expired(row):
        raise SnapshotNotFound(snapshot_id)
    return SnapshotRead.model_validate(row)


def _link_error(status_code: int, locale: str | None) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={
            "title": lookup(locale, "linkNotFound"),
            "message": lookup(locale, "linkExpiredMessage"),
        },
    )


@router.post("", response_model=SnapshotCreated, status_code=201)
async def create_share(req: SnapshotCreate, db: AsyncSession = Depends(get_session)):
    if req.expires_at is None:
        req = req.model_copy(
            update={
                "expires_at": datetime.now(timezone.utc)
                + timedelta(days=settings.SHARE_LINK_TTL_DAYS)
            }
        )
    try:
        snapshot_id = await crud.create_snapshot(db, req)
    except SQLAlchemyError:
        logger.exception("snapshot store write failed")
        raise HTTPException(
            status_code=503,
            detail={
                "title": lookup(req.locale, "shareFailed"),
                "message": lookup(req.locale, "shareFailedMessage"),
            },
        )

    logger.info("shared snapshot {} created (label={!r})", snapshot_id, req.label)
    return SnapshotCreated(
        id=snapshot_id, path=f"/share/{snapshot_id}", expires_at=req.expires_at
    )


@router.get("/{snapshot_id}", response_model=SharedBusinessCase)
async def read_share(
    snapshot_id: str,
    locale: str | None = Query(None, max_length=8),
    db: AsyncSession = Depends(get_session),
):
    try:
        snap = await _load(db, snapshot_id)
    except SnapshotNotFound:
        raise _link_error(404, locale)
    except SQLAlchemyError:
        # store unreachable: same message, distinct status
        logger.exception("snapshot store read failed for {}", snapshot_id)
        raise _link_error(503, locale)

    options = ProjectionOptions(absorb_per_return_fee=snap.absorb_per_return_fee)
    result = project(snap.client_metrics, snap.pricing, options)
    return SharedBusinessCase(
        snapshot=snap,
        projection=result,
        payback_message=payback_message(result, locale or snap.locale),
    )
