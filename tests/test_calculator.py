from __future__ import annotations

import pytest

from business_case_app.errors import ScenarioNotFoundError
from business_case_app.models.common import GeneralParameters, ProductType
from business_case_app.models.costs import CostParameters, HardwareVariableCosts, SoftwareVariableCosts
from business_case_app.models.market import MarketParameters
from business_case_app.models.revenue import RevenueParameters
from business_case_app.models.scenario import Scenario
from business_case_app.sample_data import build_sample_case
from business_case_app.services.calculator import ScenarioCalculator, project


BASE = Scenario(id="base", name="Base")


def _worked_example():
    general = GeneralParameters(years=2)
    cost = CostParameters(dev_capex=1000, variable=SoftwareVariableCosts(infra_cost_per_user=1))
    market = MarketParameters(tam_units_per_year=[1000, 1000], sam_pct=100, som_pct=100, adoption_pct_per_year=[50, 50])
    revenue = RevenueParameters(base_price_per_unit=10)
    return general, cost, market, revenue


def test_worked_example_two_years():
    result = project(*_worked_example(), BASE)

    first, second = result.yearly
    assert first.price_per_unit == 10
    assert first.units == 500
    assert first.revenue == 5000
    assert first.variable_cost == 500
    assert first.gross_profit == 4500
    assert first.fixed_cost == 0
    assert first.net_profit == 4500
    assert first.cumulative_cash_flow == 3500
    assert second.cumulative_cash_flow == 8000
    assert result.payback_year == 1
    assert result.total_revenue == 10000
    assert result.total_net_profit == 9000
    assert result.break_even_units == pytest.approx(1000 / 9)


def test_sample_case_has_one_row_per_year():
    case = build_sample_case()
    results = ScenarioCalculator().run(case)

    assert [r.scenario.id for r in results] == ["conservative", "base", "aggressive"]
    for result in results:
        assert len(result.yearly) == case.general.years
        assert [y.year for y in result.yearly] == list(range(1, case.general.years + 1))
        assert result.total_revenue == sum(y.revenue for y in result.yearly)
        assert result.total_net_profit == sum(y.net_profit for y in result.yearly)
        expected_last = -case.costs.upfront_capex() + result.total_net_profit
        assert result.yearly[-1].cumulative_cash_flow == pytest.approx(expected_last)


def test_sample_base_year_one_figures():
    case = build_sample_case()
    result = ScenarioCalculator().run_scenario(case, "base")
    year = result.yearly[0]

    # 100000 TAM * 40% * 30% * 1% adoption
    assert year.units == pytest.approx(120)
    assert year.revenue == pytest.approx(120 * 99)
    assert year.variable_cost == pytest.approx(120 * 4)
    assert year.fixed_cost == 150000
    assert result.yearly[1].price_per_unit == pytest.approx(99 * 1.03)
    assert result.break_even_units == pytest.approx(250000 / 95)


def test_hardware_variable_cost_selection():
    case = build_sample_case(ProductType.HARDWARE)
    assert case.costs.unit_variable_cost() == 50
    result = ScenarioCalculator().run_scenario(case, "base")
    assert result.yearly[0].variable_cost == pytest.approx(result.yearly[0].units * 50)
    assert result.break_even_units == pytest.approx(250000 / 49)


def test_payback_is_first_crossing():
    general, cost, market, revenue = _worked_example()
    general = GeneralParameters(years=4)
    cost = cost.model_copy(update={"dev_capex": 12000})
    market = MarketParameters(tam_units_per_year=[1000] * 4, sam_pct=100, som_pct=100, adoption_pct_per_year=[50] * 4)
    result = project(general, cost, market, revenue, BASE)

    assert result.payback_year == 3
    cumulative = [y.cumulative_cash_flow for y in result.yearly]
    assert cumulative[2] >= 0
    assert all(value < 0 for value in cumulative[:2])
    assert cumulative == sorted(cumulative)


def test_payback_not_reached_and_set_once():
    general = GeneralParameters(years=3)
    cost = CostParameters(dev_capex=100, annual_fixed_opex=200)
    market = MarketParameters(tam_units_per_year=[100, 0, 0], sam_pct=100, som_pct=100, adoption_pct_per_year=[100, 0, 0])
    revenue = RevenueParameters(base_price_per_unit=5)
    result = project(general, cost, market, revenue, BASE)

    # year 1: -100 + 500 - 200 = 200, then falls back below zero
    assert result.yearly[0].cumulative_cash_flow == 200
    assert result.yearly[-1].cumulative_cash_flow < 0
    assert result.payback_year == 1

    never = project(general, cost.model_copy(update={"dev_capex": 1000}), market, revenue, BASE)
    assert never.payback_year is None


def test_zero_revenue_gives_zero_margins():
    general = GeneralParameters(years=2)
    cost = CostParameters(annual_fixed_opex=500)
    result = project(general, cost, MarketParameters(), RevenueParameters(base_price_per_unit=10), BASE)

    for year in result.yearly:
        assert year.revenue == 0
        assert year.net_profit == -500
        assert year.gross_margin_pct == 0
        assert year.net_margin_pct == 0


def test_missing_year_inputs_default_to_zero():
    general = GeneralParameters(years=3)
    market = MarketParameters(tam_units_per_year=[1000], sam_pct=100, som_pct=100, adoption_pct_per_year=[10, 10, 10])
    result = project(general, CostParameters(), market, RevenueParameters(base_price_per_unit=1), BASE)

    assert len(result.yearly) == 3
    assert result.yearly[0].units == 100
    assert result.yearly[1].units == 0
    assert result.yearly[2].units == 0


def test_zero_horizon():
    general, cost, market, revenue = _worked_example()
    result = project(GeneralParameters(years=0), cost, market, revenue, BASE)

    assert result.yearly == []
    assert result.payback_year is None
    assert result.total_revenue == 0
    assert result.total_net_profit == 0
    assert result.break_even_units == pytest.approx(1000 / 9)


def test_break_even_absent_without_positive_contribution():
    general, cost, market, _ = _worked_example()
    at_cost = project(general, cost, market, RevenueParameters(base_price_per_unit=1), BASE)
    below_cost = project(general, cost, market, RevenueParameters(base_price_per_unit=0.5), BASE)

    assert at_cost.break_even_units is None
    assert below_cost.break_even_units is None


def test_break_even_ignores_scenario_and_growth():
    general, cost, market, _ = _worked_example()
    revenue = RevenueParameters(base_price_per_unit=10, annual_price_growth_pct=20)
    scaled = Scenario(id="x", name="X", adoption_multiplier=2, price_multiplier=3)

    assert project(general, cost, market, revenue, scaled).break_even_units == pytest.approx(1000 / 9)


def test_multipliers_scale_units_and_price():
    general, cost, market, revenue = _worked_example()
    baseline = project(general, cost, market, revenue, BASE)
    scaled = project(general, cost, market, revenue, Scenario(id="a", name="A", adoption_multiplier=1.4, price_multiplier=1.05))

    assert scaled.yearly[0].units == pytest.approx(baseline.yearly[0].units * 1.4)
    assert scaled.yearly[0].price_per_unit == pytest.approx(baseline.yearly[0].price_per_unit * 1.05)

    unit_multipliers = project(general, cost, market, revenue, Scenario(id="u", name="U", adoption_multiplier=1.0, price_multiplier=1.0))
    assert unit_multipliers.yearly == baseline.yearly


def test_price_compounds_yearly():
    general = GeneralParameters(years=3)
    revenue = RevenueParameters(base_price_per_unit=100, annual_price_growth_pct=10)
    result = project(general, CostParameters(), MarketParameters(), revenue, BASE)

    assert [y.price_per_unit for y in result.yearly] == pytest.approx([100, 110, 121])


def test_negative_inputs_propagate():
    general = GeneralParameters(years=1)
    market = MarketParameters(tam_units_per_year=[100], sam_pct=100, som_pct=100, adoption_pct_per_year=[100])
    result = project(general, CostParameters(), market, RevenueParameters(base_price_per_unit=-2), BASE)

    assert result.yearly[0].revenue == -200
    assert result.yearly[0].gross_margin_pct == 0


def test_project_does_not_mutate_inputs():
    general, cost, market, revenue = _worked_example()
    before = (general.model_dump(), cost.model_dump(), market.model_dump(), revenue.model_dump())
    project(general, cost, market, revenue, BASE)
    assert before == (general.model_dump(), cost.model_dump(), market.model_dump(), revenue.model_dump())


def test_hardware_costs_variant_is_used():
    general = GeneralParameters(product_type=ProductType.HARDWARE, years=1)
    cost = CostParameters(
        variable=HardwareVariableCosts(manufacturing_cost_per_unit=3, shipping_cost_per_unit=2, packaging_cost_per_unit=1),
        support_cost_per_unit=1,
    )
    market = MarketParameters(tam_units_per_year=[10], sam_pct=100, som_pct=100, adoption_pct_per_year=[100])
    result = project(general, cost, market, RevenueParameters(base_price_per_unit=10), BASE)

    assert result.yearly[0].variable_cost == 70


def test_unknown_scenario_raises():
    with pytest.raises(ScenarioNotFoundError):
        ScenarioCalculator().run_scenario(build_sample_case(), "missing")


def test_compare_lines_up_scenarios():
    case = build_sample_case()
    comparison = ScenarioCalculator().compare(case)

    assert comparison.years == [1, 2, 3, 4, 5]
    assert comparison.names == {"conservative": "Conservative", "base": "Base", "aggressive": "Aggressive"}
    assert all(len(series) == 5 for series in comparison.revenue_by_scenario.values())
    assert comparison.total_revenue["aggressive"] > comparison.total_revenue["base"] > comparison.total_revenue["conservative"]


def test_compare_keeps_scenarios_sharing_a_name():
    case = build_sample_case().model_copy(
        update={
            "scenarios": [
                Scenario(id="a", name="Same", adoption_multiplier=1.0),
                Scenario(id="b", name="Same", adoption_multiplier=2.0),
            ]
        }
    )
    comparison = ScenarioCalculator().compare(case)

    assert set(comparison.total_revenue) == {"a", "b"}
    assert comparison.names == {"a": "Same", "b": "Same"}
    assert comparison.total_revenue["b"] == pytest.approx(comparison.total_revenue["a"] * 2)
