# pricecase/services/projection.py
# -----------------------------------------------------------------------------
# Business-case projection engine
# - revenue waterfall, platform cost lines, ROI and payback (all annual)
# - pure function of (metrics, pricing, options); no I/O, no state
# -----------------------------------------------------------------------------
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pricecase.schemas.metrics import ClientMetrics
from pricecase.schemas.pricing import PricingConfig
from pricecase.schemas.projection import ProjectionOptions, ProjectionResult


# ── fee lines ────────────────────────────────────────────────────────────────
@dataclass(slots=True)
class FeeLines:
    flat_fee_annual: float
    per_return_fee_annual: float
    retained_fee_annual: float
    upsell_fee_annual: float

    @property
    def recurring_total(self) -> float:
        return (
            self.flat_fee_annual
            + self.per_return_fee_annual
            + self.retained_fee_annual
            + self.upsell_fee_annual
        )

    def shares(self) -> dict[str, float]:
        total = self.recurring_total
        if total <= 0:
            return {}
        return {
            "flat_fee": self.flat_fee_annual / total * 100,
            "per_return_fee": self.per_return_fee_annual / total * 100,
            "retained_sales_fee": self.retained_fee_annual / total * 100,
            "upselling_fee": self.upsell_fee_annual / total * 100,
        }


def effective_returns(metrics: ClientMetrics) -> float:
    if metrics.annual_returns > 0:
        return float(metrics.annual_returns)
    return float(metrics.monthly_returns * 12)


def gtv(metrics: ClientMetrics) -> float:
    """Gross transaction value of the returns flow."""
    return effective_returns(metrics) * metrics.average_cart_value


def fee_lines(
    pricing: PricingConfig,
    returns: float,
    retained_value: float,
    upsell_value: float,
    absorb_per_return_fee: bool = False,
) -> FeeLines:
    return FeeLines(
        flat_fee_annual=pricing.flat_fee * 12,
        per_return_fee_annual=0.0 if absorb_per_return_fee else pricing.per_return_fee * returns,
        retained_fee_annual=retained_value * pricing.retained_sales_fee_percent / 100,
        upsell_fee_annual=upsell_value * pricing.upselling_fee_percent / 100,
    )


def _payback(
    uplift: float, total_cost: float, orders: float, cart: float, returns: float
) -> Optional[float]:
    """Undefined unless every volume input is present and the case pays off."""
    if orders > 0 and cart > 0 and returns > 0 and uplift > 0 and total_cost > 0:
        return total_cost / (uplift / 12)
    return None


# ── engine ───────────────────────────────────────────────────────────────────
def project(
    metrics: ClientMetrics,
    pricing: PricingConfig,
    options: ProjectionOptions | None = None,
) -> ProjectionResult:
    opts = options or ProjectionOptions()
    cart = metrics.average_cart_value
    returns = effective_returns(metrics)

    gross_revenue = metrics.total_orders_annual * cart
    returns_value = returns * cart
    net_before = gross_revenue - returns_value

    retained_units = returns * (opts.retained_sales_rate / 100)
    retained_value = retained_units * cart
    upsell_units = returns * (opts.upselling_rate / 100)
    upsell_cart_value = cart * (1 + opts.upsell_cart_uplift / 100)
    upsell_value = upsell_units * upsell_cart_value

    net_after = net_before + retained_value + upsell_value
    generated = retained_value + upsell_value

    fees = fee_lines(
        pricing, returns, retained_value, upsell_value, opts.absorb_per_return_fee
    )
    total_cost = fees.recurring_total + opts.integration_cost

    net_after_cost = net_after - total_cost
    uplift = net_after_cost - net_before
    roi = (generated / total_cost) * 100 if total_cost > 0 else 0.0
    payback = _payback(uplift, total_cost, metrics.total_orders_annual, cart, returns)

    monthly_cost = fees.recurring_total / 12
    acv = monthly_cost * 12
    base = returns_value
    take_rate = acv / base * 100 if base > 0 else None

    return ProjectionResult(
        effective_returns=returns,
        monthly_returns=metrics.monthly_returns,
        gross_revenue=gross_revenue,
        returns_value=returns_value,
        net_revenue_before=net_before,
        retained_units=retained_units,
        retained_value=retained_value,
        upsell_units=upsell_units,
        upsell_cart_value=upsell_cart_value,
        upsell_value=upsell_value,
        net_revenue_after=net_after,
        revenue_generated_by_product=generated,
        flat_fee_annual=fees.flat_fee_annual,
        per_return_fee_annual=fees.per_return_fee_annual,
        retained_fee_annual=fees.retained_fee_annual,
        upsell_fee_annual=fees.upsell_fee_annual,
        integration_cost=opts.integration_cost,
        total_cost=total_cost,
        net_revenue_after_cost=net_after_cost,
        net_revenue_uplift=uplift,
        roi_percent=roi,
        payback_months=payback,
        payback_meaningful=payback is not None and payback < opts.payback_display_months,
        gtv=base,
        monthly_cost=monthly_cost,
        acv=acv,
        take_rate_percent=take_rate,
        fee_shares=fees.shares(),
    )
