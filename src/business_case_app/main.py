from __future__ import annotations

import logging
from typing import Dict

from fastapi import FastAPI, HTTPException, Response

from .config import SENSITIVITY_DELTA, Settings, configure_logging
from .errors import ScenarioNotFoundError, UnsupportedExportFormatError
from .models.scenario import BusinessCaseInput
from .sample_data import build_sample_case
from .schemas import (
    CompareResponse,
    CompetitorResponse,
    ProjectionRequest,
    ProjectionResponse,
    ScenarioRequest,
    SensitivityRequest,
    SensitivityResponse,
)
from .services.calculator import ScenarioCalculator
from .services.exporters import MEDIA_TYPES, content_disposition, export, export_filename
from .services.sensitivity import competitor_price_delta, price_sensitivity

settings = Settings.from_env()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Product Business Case Engine", version="0.1.0")

calculator = ScenarioCalculator()


@app.get("/defaults", response_model=BusinessCaseInput)
def get_defaults() -> BusinessCaseInput:
    return build_sample_case()


@app.post("/project", response_model=ProjectionResponse)
def run_projection(payload: ProjectionRequest) -> ProjectionResponse:
    return ProjectionResponse(results=calculator.run(payload.case))


@app.post("/compare", response_model=CompareResponse)
def compare_scenarios(payload: ProjectionRequest) -> CompareResponse:
    return CompareResponse(comparison=calculator.compare(payload.case))


@app.post("/sensitivity", response_model=SensitivityResponse)
def run_sensitivity(payload: SensitivityRequest) -> SensitivityResponse:
    try:
        scenario = calculator.find_scenario(payload.case, payload.scenario_id)
    except ScenarioNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    delta = payload.delta if payload.delta is not None else SENSITIVITY_DELTA
    points = price_sensitivity(payload.case, scenario, delta)
    return SensitivityResponse(scenario_id=scenario.id, points=points)


@app.post("/competitor", response_model=CompetitorResponse)
def compare_competitor(payload: ProjectionRequest) -> CompetitorResponse:
    case = payload.case
    return CompetitorResponse(
        competitor_name=case.competitor.competitor_name,
        price_delta_pct=competitor_price_delta(case.revenue, case.competitor),
    )


@app.post("/export/{fmt}")
def export_scenario(fmt: str, payload: ScenarioRequest) -> Response:
    fmt = fmt.lower()
    try:
        result = calculator.run_scenario(payload.case, payload.scenario_id)
        content = export(result, fmt, payload.case.general.currency)
    except ScenarioNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except UnsupportedExportFormatError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    filename = export_filename(result, fmt)
    return Response(
        content=content,
        media_type=MEDIA_TYPES[fmt],
        headers={"Content-Disposition": content_disposition(filename)},
    )


@app.get("/health")
def healthcheck() -> Dict[str, str]:
    return {"status": "ok"}
