from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .models.results import ScenarioComparison, ScenarioResult, SensitivityPoint
from .models.scenario import BusinessCaseInput


class ProjectionRequest(BaseModel):
    case: BusinessCaseInput


class ProjectionResponse(BaseModel):
    results: List[ScenarioResult]


class CompareResponse(BaseModel):
    comparison: ScenarioComparison


class ScenarioRequest(BaseModel):
    case: BusinessCaseInput
    scenario_id: str = "base"


class SensitivityRequest(ScenarioRequest):
    delta: Optional[float] = Field(default=None, gt=0, lt=1, description="Price perturbation, defaults to 0.10")


class SensitivityResponse(BaseModel):
    scenario_id: str
    points: List[SensitivityPoint]


class CompetitorResponse(BaseModel):
    competitor_name: str
    price_delta_pct: Optional[float] = Field(default=None, description="Our price vs competitor, null when not comparable")
