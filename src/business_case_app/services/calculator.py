from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..errors import ScenarioNotFoundError
from ..models.common import GeneralParameters
from ..models.costs import CostParameters
from ..models.market import MarketParameters
from ..models.results import ScenarioComparison, ScenarioResult, YearlyResult
from ..models.revenue import RevenueParameters
from ..models.scenario import BusinessCaseInput, Scenario

logger = logging.getLogger(__name__)


def _margin_pct(profit: float, revenue: float) -> float:
    return (profit / revenue) * 100 if revenue > 0 else 0.0


def project(
    general: GeneralParameters,
    cost: CostParameters,
    market: MarketParameters,
    revenue: RevenueParameters,
    scenario: Scenario,
) -> ScenarioResult:
    """Project one scenario year by year.

    Cash flow starts at minus the upfront capex and accumulates each year's
    net profit. Variable cost per unit is fixed over the horizon; only the
    price compounds.
    """
    upfront_capex = cost.upfront_capex()
    unit_variable_cost = cost.unit_variable_cost()
    cumulative_cash_flow = -upfront_capex
    yearly: List[YearlyResult] = []

    for year_index in range(max(0, general.years)):
        price_per_unit = revenue.base_price_for(year_index) * scenario.price_multiplier
        adoption = market.adoption_pct_for(year_index) / 100
        units = market.som_units_for(year_index) * adoption * scenario.adoption_multiplier

        revenue_year = price_per_unit * units
        variable_cost = unit_variable_cost * units
        gross_profit = revenue_year - variable_cost
        fixed_cost = cost.annual_fixed_opex
        net_profit = gross_profit - fixed_cost
        cumulative_cash_flow += net_profit

        yearly.append(
            YearlyResult(
                year=year_index + 1,
                price_per_unit=price_per_unit,
                units=units,
                revenue=revenue_year,
                variable_cost=variable_cost,
                gross_profit=gross_profit,
                gross_margin_pct=_margin_pct(gross_profit, revenue_year),
                fixed_cost=fixed_cost,
                net_profit=net_profit,
                net_margin_pct=_margin_pct(net_profit, revenue_year),
                cumulative_cash_flow=cumulative_cash_flow,
            )
        )

    payback_year = next((year.year for year in yearly if year.cumulative_cash_flow >= 0), None)

    # Unscaled year-1 price on purpose: one break-even figure shared by all scenarios.
    contribution_margin = revenue.base_price_per_unit - unit_variable_cost
    break_even_units: Optional[float] = upfront_capex / contribution_margin if contribution_margin > 0 else None

    return ScenarioResult(
        scenario=scenario,
        yearly=yearly,
        total_revenue=sum(year.revenue for year in yearly),
        total_net_profit=sum(year.net_profit for year in yearly),
        payback_year=payback_year,
        break_even_units=break_even_units,
    )


class ScenarioCalculator:
    def run(self, case: BusinessCaseInput) -> List[ScenarioResult]:
        logger.info(f"Projecting {len(case.scenarios)} scenarios for {case.general.product_name}")
        return [self._project(case, scenario) for scenario in case.scenarios]

    def run_scenario(self, case: BusinessCaseInput, scenario_id: str) -> ScenarioResult:
        return self._project(case, self.find_scenario(case, scenario_id))

    def find_scenario(self, case: BusinessCaseInput, scenario_id: str) -> Scenario:
        scenario = case.scenario(scenario_id)
        if scenario is None:
            raise ScenarioNotFoundError(scenario_id)
        return scenario

    def compare(self, case: BusinessCaseInput) -> ScenarioComparison:
        results = self.run(case)
        horizon = max((len(result.yearly) for result in results), default=0)
        years = list(range(1, horizon + 1))
        revenue_by_scenario: Dict[str, List[float]] = {}
        for result in results:
            series = [year.revenue for year in result.yearly]
            revenue_by_scenario[result.scenario.id] = series + [0.0] * (horizon - len(series))
        return ScenarioComparison(
            years=years,
            names={result.scenario.id: result.scenario.name for result in results},
            revenue_by_scenario=revenue_by_scenario,
            total_revenue={result.scenario.id: result.total_revenue for result in results},
            total_net_profit={result.scenario.id: result.total_net_profit for result in results},
        )

    def _project(self, case: BusinessCaseInput, scenario: Scenario) -> ScenarioResult:
        result = project(case.general, case.costs, case.market, case.revenue, scenario)
        logger.debug(
            f"{scenario.name}: revenue {result.total_revenue:,.0f}, net profit {result.total_net_profit:,.0f}, "
            f"payback {result.payback_year}"
        )
        return result
