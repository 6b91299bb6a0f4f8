# tests/test_projection.py
import pytest

from pricecase.schemas.metrics import ClientMetrics
from pricecase.schemas.pricing import PricingConfig
from pricecase.schemas.projection import ProjectionOptions
from pricecase.services.projection import effective_returns, project


def test_revenue_before_product(scenario_metrics, scenario_pricing):
    r = project(scenario_metrics, scenario_pricing)
    assert r.gross_revenue == pytest.approx(3_550_000)
    assert r.returns_value == pytest.approx(848_450.00)
    assert r.net_revenue_before == pytest.approx(2_701_550.00)


def test_retained_and_upselling(scenario_metrics, scenario_pricing):
    opts = ProjectionOptions(
        retained_sales_rate=35, upselling_rate=3.78, upsell_cart_uplift=20
    )
    r = project(scenario_metrics, scenario_pricing, opts)
    assert r.retained_units == pytest.approx(8365)
    assert r.retained_value == pytest.approx(296_957.50)
    assert r.upsell_units == pytest.approx(903.42)
    assert r.upsell_cart_value == pytest.approx(42.60)
    assert r.upsell_value == pytest.approx(38_485.69, abs=0.01)
    assert r.revenue_generated_by_product == pytest.approx(335_443.19, abs=0.01)
    assert r.net_revenue_after == pytest.approx(2_701_550 + 335_443.192)


def test_defaults_match_explicit_options(scenario_metrics, scenario_pricing):
    explicit = ProjectionOptions(
        retained_sales_rate=35, upselling_rate=3.78, upsell_cart_uplift=20
    )
    assert project(scenario_metrics, scenario_pricing) == project(
        scenario_metrics, scenario_pricing, explicit
    )


def test_cost_lines_roi_and_payback(scenario_metrics, scenario_pricing):
    r = project(scenario_metrics, scenario_pricing)
    assert r.flat_fee_annual == pytest.approx(2388)
    assert r.per_return_fee_annual == pytest.approx(35_850)
    assert r.retained_fee_annual == 0
    assert r.upsell_fee_annual == pytest.approx(1924.28, abs=0.01)
    assert r.total_cost == pytest.approx(40_162.28, abs=0.01)
    assert r.net_revenue_uplift == pytest.approx(
        r.revenue_generated_by_product - r.total_cost
    )
    assert r.roi_percent == pytest.approx(335_443.192 / 40_162.2846 * 100)
    assert r.payback_months == pytest.approx(1.632, abs=1e-3)
    assert r.payback_meaningful is True


def test_zero_cost_has_no_roi_or_payback(scenario_metrics):
    r = project(scenario_metrics, PricingConfig())
    assert r.total_cost == 0
    assert r.roi_percent == 0
    assert r.payback_months is None
    assert r.payback_meaningful is False
    assert r.fee_shares == {}


def test_identical_inputs_identical_outputs(scenario_metrics, scenario_pricing):
    first = project(scenario_metrics, scenario_pricing).model_dump()
    second = project(scenario_metrics, scenario_pricing).model_dump()
    assert first == second


def test_higher_cart_never_lowers_revenue(scenario_pricing):
    previous = None
    for cart in (0, 10, 35.5, 80, 250):
        m = ClientMetrics(
            total_orders_annual=50_000,
            annual_returns=9_000,
            return_rate_percentage=18,
            average_cart_value=cart,
        )
        r = project(m, scenario_pricing)
        if previous is not None:
            assert r.gross_revenue >= previous.gross_revenue
            assert r.returns_value >= previous.returns_value
            assert r.net_revenue_after >= previous.net_revenue_after
        previous = r


@pytest.mark.parametrize("flat_fee", [0, 199, 25_000, 1_000_000])
@pytest.mark.parametrize("per_return_fee", [0, 1.5, 40])
@pytest.mark.parametrize("cart", [0, 35.5])
def test_payback_defined_only_with_positive_uplift_and_cost(flat_fee, per_return_fee, cart):
    m = ClientMetrics(
        total_orders_annual=100_000, annual_returns=23_900, average_cart_value=cart
    )
    r = project(m, PricingConfig(flat_fee=flat_fee, per_return_fee=per_return_fee))
    expected = cart > 0 and r.net_revenue_uplift > 0 and r.total_cost > 0
    assert (r.payback_months is not None) == expected
    if r.payback_months is None:
        assert r.payback_meaningful is False


def test_slow_payback_is_reported_but_not_meaningful(scenario_metrics):
    r = project(scenario_metrics, PricingConfig(flat_fee=15_000))
    assert r.payback_months is not None
    assert r.payback_months >= 6
    assert r.payback_meaningful is False

    lenient = project(
        scenario_metrics,
        PricingConfig(flat_fee=15_000),
        ProjectionOptions(payback_display_months=24),
    )
    assert lenient.payback_months == r.payback_months
    assert lenient.payback_meaningful is True


def test_zero_cart_zeroes_money_lines(scenario_pricing):
    m = ClientMetrics(total_orders_annual=1_000, annual_returns=100)
    r = project(m, scenario_pricing)
    assert r.gross_revenue == 0
    assert r.returns_value == 0
    assert r.retained_value == 0
    assert r.upsell_value == 0
    assert r.take_rate_percent is None
    assert r.payback_months is None


def test_monthly_returns_used_when_annual_missing():
    m = ClientMetrics(monthly_returns=100, average_cart_value=10)
    assert effective_returns(m) == 1200
    r = project(m, PricingConfig())
    assert r.returns_value == pytest.approx(12_000)


def test_absorbed_per_return_fee(scenario_metrics, scenario_pricing):
    r = project(
        scenario_metrics,
        scenario_pricing,
        ProjectionOptions(absorb_per_return_fee=True),
    )
    assert r.per_return_fee_annual == 0
    assert r.total_cost == pytest.approx(2388 + 1924.2846)


def test_integration_cost_counts_once(scenario_metrics, scenario_pricing):
    base = project(scenario_metrics, scenario_pricing)
    with_setup = project(
        scenario_metrics, scenario_pricing, ProjectionOptions(integration_cost=5_000)
    )
    assert with_setup.total_cost == pytest.approx(base.total_cost + 5_000)
    assert with_setup.acv == pytest.approx(base.acv)
    assert with_setup.payback_months > base.payback_months


def test_take_rate_and_fee_shares(scenario_metrics, scenario_pricing):
    r = project(scenario_metrics, scenario_pricing)
    assert r.gtv == pytest.approx(848_450)
    assert r.monthly_cost == pytest.approx(r.total_cost / 12)
    assert r.take_rate_percent == pytest.approx(r.acv / 848_450 * 100)
    assert sum(r.fee_shares.values()) == pytest.approx(100)
    assert r.fee_shares["retained_sales_fee"] == 0


@pytest.mark.parametrize(
    "zeroed",
    [
        {"total_orders_annual": 0},
        {"average_cart_value": 0.0},
        {"annual_returns": 0, "monthly_returns": 0},
    ],
)
def test_zero_volume_input_leaves_payback_undefined(
    zeroed, scenario_metrics, scenario_pricing
):
    m = scenario_metrics.model_copy(update=zeroed)
    r = project(m, scenario_pricing)
    assert r.payback_months is None
    assert r.payback_meaningful is False


def test_zero_orders(scenario_metrics, scenario_pricing):
    m = scenario_metrics.model_copy(update={"total_orders_annual": 0})
    r = project(m, scenario_pricing)
    assert r.gross_revenue == 0
    assert r.net_revenue_before == pytest.approx(-848_450)
    # the returns flow still produces value and cost
    assert r.retained_value == pytest.approx(296_957.50)
    assert r.net_revenue_uplift > 0
    assert r.payback_months is None


def test_zero_effective_returns(scenario_metrics, scenario_pricing):
    m = scenario_metrics.model_copy(update={"annual_returns": 0, "monthly_returns": 0})
    r = project(m, scenario_pricing)
    assert r.effective_returns == 0
    assert r.returns_value == 0
    assert r.retained_value == 0
    assert r.upsell_value == 0
    assert r.per_return_fee_annual == 0
    assert r.upsell_fee_annual == 0
    assert r.revenue_generated_by_product == 0
    assert r.gross_revenue == pytest.approx(3_550_000)
    assert r.net_revenue_before == pytest.approx(3_550_000)
    assert r.take_rate_percent is None
    assert r.roi_percent == 0
    assert r.payback_months is None
