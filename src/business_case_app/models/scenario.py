from __future__ import annotations

from typing import List

from pydantic import Field, model_validator

from .common import FrozenModel, GeneralParameters
from .costs import CostParameters
from .market import CompetitorParameters, MarketParameters
from .revenue import RevenueParameters


class Scenario(FrozenModel):
    id: str
    name: str
    adoption_multiplier: float = 1.0
    price_multiplier: float = 1.0

    def with_price_factor(self, factor: float) -> "Scenario":
        return self.model_copy(update={"price_multiplier": self.price_multiplier * factor})


def default_scenarios() -> List[Scenario]:
    return [
        Scenario(id="conservative", name="Conservative", adoption_multiplier=0.6, price_multiplier=0.95),
        Scenario(id="base", name="Base", adoption_multiplier=1.0, price_multiplier=1.0),
        Scenario(id="aggressive", name="Aggressive", adoption_multiplier=1.4, price_multiplier=1.05),
    ]


class BusinessCaseInput(FrozenModel):
    general: GeneralParameters = Field(default_factory=GeneralParameters)
    costs: CostParameters = Field(default_factory=CostParameters)
    market: MarketParameters = Field(default_factory=MarketParameters)
    revenue: RevenueParameters = Field(default_factory=RevenueParameters)
    scenarios: List[Scenario] = Field(default_factory=default_scenarios)
    competitor: CompetitorParameters = Field(default_factory=CompetitorParameters)

    @model_validator(mode="after")
    def _check_consistency(self) -> "BusinessCaseInput":
        if self.costs.product_type != self.general.product_type:
            raise ValueError(
                f"variable costs are for {self.costs.product_type.value} but product type is "
                f"{self.general.product_type.value}"
            )
        ids = [scenario.id for scenario in self.scenarios]
        if len(ids) != len(set(ids)):
            raise ValueError("scenario ids must be unique")
        return self

    def scenario(self, scenario_id: str) -> Scenario | None:
        return next((s for s in self.scenarios if s.id == scenario_id), None)
