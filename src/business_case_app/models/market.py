from __future__ import annotations

from typing import List

from pydantic import Field

from .common import FrozenModel


class MarketParameters(FrozenModel):
    tam_units_per_year: List[float] = Field(default_factory=list, description="TAM in units, index 0 is year 1")
    sam_pct: float = Field(0.0, description="Percent of TAM that is serviceable")
    som_pct: float = Field(0.0, description="Percent of SAM that is obtainable")
    adoption_pct_per_year: List[float] = Field(default_factory=list, description="Percent of SOM captured each year")

    def tam_units_for(self, year_index: int) -> float:
        if 0 <= year_index < len(self.tam_units_per_year):
            return self.tam_units_per_year[year_index]
        return 0.0

    def adoption_pct_for(self, year_index: int) -> float:
        if 0 <= year_index < len(self.adoption_pct_per_year):
            return self.adoption_pct_per_year[year_index]
        return 0.0

    def som_units_for(self, year_index: int) -> float:
        sam_units = self.tam_units_for(year_index) * (self.sam_pct / 100)
        return sam_units * (self.som_pct / 100)


class CompetitorParameters(FrozenModel):
    competitor_name: str = "Main Competitor"
    competitor_price: float = 109.0
