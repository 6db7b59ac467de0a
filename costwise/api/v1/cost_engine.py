from fastapi import APIRouter, Query
from pydantic import BaseModel

from costwise.core.cost_engine import tables
from costwise.core.cost_engine.calculator import calculate_enhanced_estimate, resolve_regional_multiplier
from costwise.core.cost_engine.scenarios import generate_what_if_scenarios, insight_for_multiplier
from costwise.core.cost_engine.schemas import CostBreakdown, CostParameters

router = APIRouter(prefix="/cost-engine", tags=["Cost Engine"])


# ---------- Schemas ----------


class WhatIfResponse(BaseModel):
    scenarios: dict[str, CostBreakdown]


class RegionalInsightResponse(BaseModel):
    zip_code: str | None
    multiplier: float
    insight: str


class EstimatorOptionsResponse(BaseModel):
    project_types: list[str]
    quality_tiers: list[str]
    timeline_bands: list[str]


# ---------- Endpoints ----------


@router.post("/calculate", response_model=CostBreakdown)
async def calculate_estimate(body: CostParameters):
    return calculate_enhanced_estimate(body)


@router.post("/what-if", response_model=WhatIfResponse)
async def what_if_scenarios(body: CostParameters):
    return WhatIfResponse(scenarios=generate_what_if_scenarios(body))


@router.get("/regional-insights", response_model=RegionalInsightResponse)
async def regional_insights(zip_code: str | None = Query(None, description="5-digit ZIP code")):
    multiplier = resolve_regional_multiplier(zip_code)
    return RegionalInsightResponse(
        zip_code=zip_code,
        multiplier=multiplier,
        insight=insight_for_multiplier(multiplier),
    )


@router.get("/options", response_model=EstimatorOptionsResponse)
async def estimator_options():
    return EstimatorOptionsResponse(
        project_types=list(tables.PROJECT_TYPES),
        quality_tiers=list(tables.QUALITY_TIERS),
        timeline_bands=list(tables.TIMELINE_BANDS),
    )
