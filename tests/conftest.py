# tests/conftest.py
import os
import tempfile
from pathlib import Path

# settings are read at import time: point the store and logs at a scratch dir
_TMP = Path(tempfile.mkdtemp(prefix="pricecase-tests-"))
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TMP / 'test.db'}"
os.environ["LOG_DIR"] = str(_TMP / "logs")

import pytest
from fastapi.testclient import TestClient

from pricecase.schemas.metrics import ClientMetrics
from pricecase.schemas.pricing import PricingConfig


@pytest.fixture(scope="session")
def client():
    from pricecase.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def scenario_metrics():
    return ClientMetrics(
        total_orders_annual=100_000,
        annual_returns=23_900,
        average_cart_value=35.50,
        return_rate_percentage=23.9,
        monthly_returns=1992,
    )


@pytest.fixture
def scenario_pricing():
    return PricingConfig(
        flat_fee=199,
        per_return_fee=1.50,
        retained_sales_fee_percent=0,
        upselling_fee_percent=5,
        name="Scenario A",
    )
