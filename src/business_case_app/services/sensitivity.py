from __future__ import annotations

import logging
from typing import List, Optional

from ..config import SENSITIVITY_DELTA
from ..models.market import CompetitorParameters
from ..models.results import SensitivityPoint
from ..models.revenue import RevenueParameters
from ..models.scenario import BusinessCaseInput, Scenario
from .calculator import project

logger = logging.getLogger(__name__)


def price_sensitivity(
    case: BusinessCaseInput,
    scenario: Scenario,
    delta: float = SENSITIVITY_DELTA,
) -> List[SensitivityPoint]:
    """Total net profit with the scenario's price multiplier moved down and up by ``delta``."""
    if not 0 < delta < 1:
        raise ValueError(f"delta must be between 0 and 1, got {delta}")
    pct = f"{delta * 100:g}%"
    points: List[SensitivityPoint] = []
    for label, factor in ((f"-{pct} price", 1 - delta), ("Base price", 1.0), (f"+{pct} price", 1 + delta)):
        variant = scenario.with_price_factor(factor)
        result = project(case.general, case.costs, case.market, case.revenue, variant)
        points.append(SensitivityPoint(label=label, price_factor=factor, total_net_profit=result.total_net_profit))
    logger.debug(f"Price sensitivity for {scenario.name}: {[p.total_net_profit for p in points]}")
    return points


def competitor_price_delta(revenue: RevenueParameters, competitor: CompetitorParameters) -> Optional[float]:
    if competitor.competitor_price <= 0:
        return None
    return (revenue.base_price_per_unit - competitor.competitor_price) / competitor.competitor_price * 100
