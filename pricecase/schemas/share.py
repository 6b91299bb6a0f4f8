# pricecase/schemas/share.py
# -----------------------------------------------------------------------------
# Shared snapshot (read-only client link) models
# -----------------------------------------------------------------------------
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from pricecase.core.config import settings
from pricecase.schemas.metrics import ClientMetrics
from pricecase.schemas.pricing import PricingConfig
from pricecase.schemas.projection import ProjectionResult


class SnapshotCreate(BaseModel):
    label: str = ""
    locale: str = Field(default_factory=lambda: settings.DEFAULT_LOCALE, max_length=8)
    client_metrics: ClientMetrics
    pricing: PricingConfig
    show_discount: bool = False
    absorb_per_return_fee: bool = False
    expires_at: Optional[datetime] = None  # defaults to now + SHARE_LINK_TTL_DAYS
    features: List[str] = Field(default_factory=list)
    addons: Dict[str, bool] = Field(default_factory=dict)


class SnapshotCreated(BaseModel):
    id: str
    path: str
    expires_at: Optional[datetime] = None


class SnapshotRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    label: str = ""
    locale: str
    client_metrics: ClientMetrics
    pricing: PricingConfig
    show_discount: bool = False
    absorb_per_return_fee: bool = False
    expires_at: Optional[datetime] = None
    features: List[str] = Field(default_factory=list)
    addons: Dict[str, bool] = Field(default_factory=dict)


class SharedBusinessCase(BaseModel):
    snapshot: SnapshotRead
    projection: ProjectionResult
    payback_message: Optional[str] = None
