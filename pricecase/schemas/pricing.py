# pricecase/schemas/pricing.py
# -----------------------------------------------------------------------------
# Pricing configuration and preset models
# -----------------------------------------------------------------------------
from typing import List, Optional

from pydantic import BaseModel, Field

from pricecase.schemas.metrics import ClientMetrics


class PricingConfig(BaseModel):
    flat_fee: float = Field(0.0, ge=0)  # per month
    per_return_fee: float = Field(0.0, ge=0)  # per return
    retained_sales_fee_percent: float = Field(0.0, ge=0)
    upselling_fee_percent: float = Field(0.0, ge=0)
    name: str = ""


class PricingPreset(BaseModel):
    name: str
    pricing: PricingConfig
    target_take_rate: Optional[float] = None  # percent of GTV, None = fixed flat fee
    auto_tune: bool = False


class PresetApplyRequest(BaseModel):
    metrics: ClientMetrics = Field(default_factory=ClientMetrics)
    pricing: Optional[PricingConfig] = None  # edited copy of the preset


class DuplicateRequest(BaseModel):
    existing: List[PricingConfig] = Field(default_factory=list)
    source: PricingConfig
    label: Optional[str] = None
    locale: Optional[str] = None


class DuplicateResponse(BaseModel):
    scenarios: List[PricingConfig]
    remaining: int
