from __future__ import annotations

from pydantic import Field

from .common import FrozenModel


class RevenueParameters(FrozenModel):
    base_price_per_unit: float = Field(0.0, description="Unit price in year 1 before scenario scaling")
    annual_price_growth_pct: float = Field(0.0, description="Yearly price growth, compounded")

    def base_price_for(self, year_index: int) -> float:
        return self.base_price_per_unit * (1 + self.annual_price_growth_pct / 100) ** year_index
