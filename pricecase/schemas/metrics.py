# pricecase/schemas/metrics.py
# -----------------------------------------------------------------------------
# Client metrics record and reconcile request
# -----------------------------------------------------------------------------
from enum import Enum

from pydantic import BaseModel, Field


class EditedField(str, Enum):
    ORDERS = "orders"
    RETURNS = "returns"
    RATE = "rate"


class ClientMetrics(BaseModel):
    """All-zero by default; the empty constructor is the reset state."""

    total_orders_annual: int = Field(0, ge=0)
    annual_returns: int = Field(0, ge=0)
    average_cart_value: float = Field(0.0, ge=0)
    return_rate_percentage: float = Field(0.0, ge=0)  # returns / orders * 100
    monthly_returns: int = Field(0, ge=0)


class ReconcileRequest(BaseModel):
    current: ClientMetrics = Field(default_factory=ClientMetrics)
    edited_field: EditedField
    new_value: float = Field(ge=0)
