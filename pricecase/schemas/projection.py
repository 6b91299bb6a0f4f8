# pricecase/schemas/projection.py
# -----------------------------------------------------------------------------
# Projection engine options/result and the business-case endpoint models
# -----------------------------------------------------------------------------
from typing import Dict, Optional

from pydantic import BaseModel, Field, model_validator

from pricecase.core.config import settings
from pricecase.schemas.metrics import ClientMetrics, EditedField
from pricecase.schemas.pricing import PricingConfig


class ProjectionOptions(BaseModel):
    retained_sales_rate: float = Field(
        default_factory=lambda: settings.RETAINED_SALES_RATE, ge=0
    )
    upselling_rate: float = Field(default_factory=lambda: settings.UPSELLING_RATE, ge=0)
    upsell_cart_uplift: float = Field(
        default_factory=lambda: settings.UPSELL_CART_UPLIFT, ge=0
    )
    absorb_per_return_fee: bool = False
    integration_cost: float = Field(0.0, ge=0)  # one-time, added to total cost
    payback_display_months: float = Field(
        default_factory=lambda: settings.PAYBACK_DISPLAY_MONTHS, gt=0
    )


class ProjectionResult(BaseModel):
    # volumes
    effective_returns: float
    monthly_returns: int

    # revenue waterfall (annual)
    gross_revenue: float
    returns_value: float
    net_revenue_before: float
    retained_units: float
    retained_value: float
    upsell_units: float
    upsell_cart_value: float
    upsell_value: float
    net_revenue_after: float
    revenue_generated_by_product: float

    # platform cost (annual)
    flat_fee_annual: float
    per_return_fee_annual: float
    retained_fee_annual: float
    upsell_fee_annual: float
    integration_cost: float
    total_cost: float

    # outcome
    net_revenue_after_cost: float
    net_revenue_uplift: float
    roi_percent: float
    payback_months: Optional[float] = None
    payback_meaningful: bool = False

    # pricing density
    gtv: float
    monthly_cost: float
    acv: float
    take_rate_percent: Optional[float] = None
    fee_shares: Dict[str, float] = Field(default_factory=dict)


class ProjectRequest(BaseModel):
    metrics: ClientMetrics = Field(default_factory=ClientMetrics)
    pricing: PricingConfig = Field(default_factory=PricingConfig)
    options: ProjectionOptions = Field(default_factory=ProjectionOptions)


class BusinessCaseRequest(BaseModel):
    metrics: ClientMetrics = Field(default_factory=ClientMetrics)
    pricing: PricingConfig = Field(default_factory=PricingConfig)
    options: ProjectionOptions = Field(default_factory=ProjectionOptions)
    edited_field: Optional[EditedField] = None
    new_value: Optional[float] = Field(None, ge=0)
    locale: Optional[str] = None

    @model_validator(mode="after")
    def _edit_is_complete(self):
        if (self.edited_field is None) != (self.new_value is None):
            raise ValueError("edited_field and new_value must be given together")
        return self


class BusinessCaseResponse(BaseModel):
    metrics: ClientMetrics
    projection: ProjectionResult
    revenue_suggestion: Optional[str] = None
    payback_message: Optional[str] = None
