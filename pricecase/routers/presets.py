# pricecase/routers/presets.py
# -----------------------------------------------------------------------------
# /presets            : built-in pricing presets
# /presets/{name}/apply : preset resolved (auto-tuned) for a client's metrics
# /presets/duplicate  : add an editable scenario copy (capped)
# -----------------------------------------------------------------------------
from fastapi import APIRouter, HTTPException

from pricecase.core.config import settings
from pricecase.errors import ScenarioLimitReached, UnknownPreset
from pricecase.schemas.pricing import (
    DuplicateRequest,
    DuplicateResponse,
    PresetApplyRequest,
    PricingConfig,
    PricingPreset,
)
from pricecase.services.i18n import lookup
from pricecase.services.presets import apply_preset, duplicate_scenario, list_presets

router = APIRouter(prefix="/presets", tags=["presets"])


@router.get("", response_model=list[PricingPreset])
async def get_presets():
    return list_presets()


@router.post("/duplicate", response_model=DuplicateResponse)
async def duplicate(req: DuplicateRequest):
    label = req.label or lookup(req.locale, "duplicatedCombo")
    try:
        scenarios = duplicate_scenario(req.existing, req.source, label)
    except ScenarioLimitReached as e:
        raise HTTPException(
            status_code=409,
            detail=lookup(req.locale, "scenarioLimit").format(limit=e.limit),
        )
    return DuplicateResponse(
        scenarios=scenarios, remaining=settings.MAX_SCENARIO_COPIES - len(scenarios)
    )


@router.post("/{name}/apply", response_model=PricingConfig)
async def apply(name: str, req: PresetApplyRequest):
    try:
        return apply_preset(name, req.metrics, req.pricing)
    except UnknownPreset as e:
        raise HTTPException(status_code=404, detail=str(e))
