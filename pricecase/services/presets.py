# pricecase/services/presets.py
# -----------------------------------------------------------------------------
# Named pricing presets and scenario copies
# - auto-tuning presets recompute only their flat fee from the client's GTV
#   so that the annual contract value lands on the preset's take rate
# - at most MAX_SCENARIO_COPIES scenario copies coexist
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Sequence

from loguru import logger

from pricecase.core.config import settings
from pricecase.errors import ScenarioLimitReached, UnknownPreset
from pricecase.schemas.metrics import ClientMetrics
from pricecase.schemas.pricing import PricingConfig, PricingPreset
from pricecase.schemas.projection import ProjectionOptions
from pricecase.services.projection import gtv, project

PRESETS: dict[str, PricingPreset] = {
    "low_return": PricingPreset(
        name="low_return",
        pricing=PricingConfig(
            flat_fee=settings.PRESET_MIN_FLAT_FEE,
            per_return_fee=1.0,
            retained_sales_fee_percent=1.0,
            upselling_fee_percent=3.0,
            name="Low Return",
        ),
        target_take_rate=2.5,
        auto_tune=True,
    ),
    "medium_return": PricingPreset(
        name="medium_return",
        pricing=PricingConfig(
            flat_fee=settings.PRESET_MIN_FLAT_FEE,
            per_return_fee=1.5,
            retained_sales_fee_percent=2.0,
            upselling_fee_percent=5.0,
            name="Medium Return",
        ),
        target_take_rate=3.5,
        auto_tune=True,
    ),
    "high_return": PricingPreset(
        name="high_return",
        pricing=PricingConfig(
            flat_fee=1000.0,
            per_return_fee=5.0,
            retained_sales_fee_percent=3.0,
            upselling_fee_percent=7.0,
            name="High Return",
        ),
    ),
}


def list_presets() -> list[PricingPreset]:
    return list(PRESETS.values())


def get_preset(name: str) -> PricingPreset:
    try:
        return PRESETS[name]
    except KeyError:
        raise UnknownPreset(name) from None


def tune_flat_fee(
    pricing: PricingConfig,
    metrics: ClientMetrics,
    target_take_rate: float,
    minimum_flat_fee: float | None = None,
    options: ProjectionOptions | None = None,
) -> PricingConfig:
    """
    Overwrite ``flat_fee`` so that the monthly cost targets
    ``gtv * target_take_rate / 12``. The other fees are computed by the
    projection engine with the preset's current percentages and the flat fee
    never drops below ``minimum_flat_fee``.
    """
    floor = settings.PRESET_MIN_FLAT_FEE if minimum_flat_fee is None else minimum_flat_fee
    target_monthly = gtv(metrics) * target_take_rate / 100 / 12

    without_flat = project(metrics, pricing.model_copy(update={"flat_fee": 0.0}), options)
    other_monthly = without_flat.monthly_cost

    flat_fee = max(floor, target_monthly - other_monthly)
    logger.debug(
        "tune_flat_fee: target_monthly={:.2f} other_monthly={:.2f} flat_fee={:.2f}",
        target_monthly,
        other_monthly,
        flat_fee,
    )
    return pricing.model_copy(update={"flat_fee": flat_fee})


def apply_preset(
    name: str,
    metrics: ClientMetrics,
    pricing: PricingConfig | None = None,
    options: ProjectionOptions | None = None,
) -> PricingConfig:
    """
    Resolve a preset against the client's metrics. ``pricing`` is the user's
    edited copy of the preset; its percentage fees are kept as they are.
    """
    preset = get_preset(name)
    base = pricing or preset.pricing
    if preset.auto_tune and preset.target_take_rate is not None:
        return tune_flat_fee(base, metrics, preset.target_take_rate, options=options)
    return base.model_copy()


def duplicate_scenario(
    existing: Sequence[PricingConfig],
    source: PricingConfig,
    label: str | None = None,
    limit: int | None = None,
) -> list[PricingConfig]:
    cap = settings.MAX_SCENARIO_COPIES if limit is None else limit
    if len(existing) >= cap:
        raise ScenarioLimitReached(cap)
    copy = source.model_copy(update={"name": label or source.name})
    return [*existing, copy]
