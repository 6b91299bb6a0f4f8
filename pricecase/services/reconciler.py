# pricecase/services/reconciler.py
# -----------------------------------------------------------------------------
# Field reconciler for the {orders, returns, rate} triple
# - overwrite the edited field, then derive the single unknown (zero) field
#   when exactly two of the three are non-zero
# - stateless: the result depends only on the post-edit record
# -----------------------------------------------------------------------------
from __future__ import annotations

import math

from loguru import logger

from pricecase.schemas.metrics import ClientMetrics, EditedField

_ATTR = {
    EditedField.ORDERS: "total_orders_annual",
    EditedField.RETURNS: "annual_returns",
    EditedField.RATE: "return_rate_percentage",
}


def round_half_up(x: float) -> int:
    """Nearest integer, halves away from zero (non-negative inputs)."""
    return int(math.floor(x + 0.5))


def coerce_number(raw) -> float:
    """
    Text-to-number coercion for input parsers: anything that is not a finite,
    non-negative number becomes 0.
    """
    try:
        value = float(str(raw).strip().replace(",", "."))
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def monthly_from_annual(annual_returns: float) -> int:
    return round_half_up(annual_returns / 12)


def reconcile(
    current: ClientMetrics, edited_field: EditedField, new_value: float
) -> ClientMetrics:
    edited_field = EditedField(edited_field)
    if edited_field is EditedField.RATE:
        value = float(new_value)
    else:
        value = round_half_up(new_value)

    work = current.model_dump()
    work[_ATTR[edited_field]] = value

    orders = work["total_orders_annual"]
    returns = work["annual_returns"]
    rate = work["return_rate_percentage"]
    known = [f for f, attr in _ATTR.items() if work[attr] != 0]

    if len(known) == 2:
        missing = next(f for f in EditedField if f not in known)
        if missing is EditedField.RETURNS:
            work["annual_returns"] = round_half_up(orders * (rate / 100))
        elif missing is EditedField.RATE and orders != 0:
            work["return_rate_percentage"] = returns / orders * 100
        elif missing is EditedField.ORDERS and rate != 0:
            work["total_orders_annual"] = round_half_up(returns / (rate / 100))
        logger.debug(
            "reconcile: edited={} derived={} -> {}",
            edited_field.value,
            missing.value,
            work[_ATTR[missing]],
        )

    work["monthly_returns"] = monthly_from_annual(work["annual_returns"])
    return ClientMetrics(**work)
