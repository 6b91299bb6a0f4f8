# pricecase/services/business_case.py
# -----------------------------------------------------------------------------
# Business case assembly shared by the editor endpoints and the read-only
# share view: reconcile -> project -> localized sentences
# -----------------------------------------------------------------------------
from __future__ import annotations

from pricecase.schemas.projection import (
    BusinessCaseRequest,
    BusinessCaseResponse,
    ProjectionResult,
)
from pricecase.services.i18n import format_currency, lookup
from pricecase.services.projection import project
from pricecase.services.reconciler import reconcile


def payback_message(result: ProjectionResult, locale: str | None) -> str | None:
    """Only for a meaningful payback (below the display threshold)."""
    if not result.payback_meaningful:
        return None
    return (
        f"{lookup(locale, 'paybackEstimated')}: {result.payback_months:.1f} "
        f"{lookup(locale, 'monthsToRecoverInvestment')}"
    )


def revenue_suggestion(result: ProjectionResult, locale: str | None) -> str | None:
    extra = result.revenue_generated_by_product
    if extra <= 0:
        return None
    return (
        f"{lookup(locale, 'revenueSuggestion')} {format_currency(extra)} "
        f"{lookup(locale, 'revenueSuggestionEnd')}"
    )


def build_business_case(req: BusinessCaseRequest) -> BusinessCaseResponse:
    metrics = req.metrics
    if req.edited_field is not None:  # validated to come with new_value
        metrics = reconcile(metrics, req.edited_field, req.new_value)

    result = project(metrics, req.pricing, req.options)
    return BusinessCaseResponse(
        metrics=metrics,
        projection=result,
        revenue_suggestion=revenue_suggestion(result, req.locale),
        payback_message=payback_message(result, req.locale),
    )
