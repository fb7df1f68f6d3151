from __future__ import annotations

from typing import Dict, List, Optional

from .common import FrozenModel
from .scenario import Scenario


class YearlyResult(FrozenModel):
    year: int
    price_per_unit: float
    units: float
    revenue: float
    variable_cost: float
    gross_profit: float
    gross_margin_pct: float
    fixed_cost: float
    net_profit: float
    net_margin_pct: float
    cumulative_cash_flow: float


class ScenarioResult(FrozenModel):
    scenario: Scenario
    yearly: List[YearlyResult]
    total_revenue: float
    total_net_profit: float
    payback_year: Optional[int] = None
    break_even_units: Optional[float] = None


class SensitivityPoint(FrozenModel):
    label: str
    price_factor: float
    total_net_profit: float


class ScenarioComparison(FrozenModel):
    """Per-scenario series keyed by scenario id; ``names`` maps ids to display names."""

    years: List[int]
    names: Dict[str, str]
    revenue_by_scenario: Dict[str, List[float]]
    total_revenue: Dict[str, float]
    total_net_profit: Dict[str, float]
