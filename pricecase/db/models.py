# pricecase/db/models.py
# -----------------------------------------------------------------------------
# ORM models
# - SharedSnapshot: immutable copy of a business case behind an opaque id,
#   written once when a link is shared and only read afterwards
# -----------------------------------------------------------------------------
from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, Column, DateTime, String

from pricecase.db.session import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SharedSnapshot(Base):
    __tablename__ = "shared_snapshots"

    id = Column(String(32), primary_key=True)  # uuid4 hex
    label = Column(String, default="")  # client / ecommerce name
    locale = Column(String(8), default="it")

    client_metrics = Column(JSON, nullable=False)
    pricing = Column(JSON, nullable=False)

    # display-only flags
    show_discount = Column(Boolean, default=False)
    absorb_per_return_fee = Column(Boolean, default=False)
    expires_at = Column(DateTime(timezone=True), nullable=True)
    features = Column(JSON, default=list)
    addons = Column(JSON, default=dict)

    created_at = Column(DateTime(timezone=True), default=_utcnow)
