"""Request / response models for saved estimates."""

from __future__ import annotations

import math
import uuid

from pydantic import BaseModel, Field

from costwise.core.cost_engine.schemas import CostBreakdown

DEFAULT_PROJECT_TYPE = "kitchen-remodel"
DEFAULT_MATERIAL_QUALITY = "standard"
DEFAULT_TIMELINE = "4-8 weeks"


class EstimateRequest(BaseModel):
    """Estimate form input.

    Blank or null choices fall back to the form defaults when priced, and an
    unparseable area counts as zero.
    """

    project_type: str | None = Field(DEFAULT_PROJECT_TYPE, alias="projectType")
    area: float | str | None = None
    square_footage: float | str | None = Field(None, alias="squareFootage")
    material_quality: str | None = Field(DEFAULT_MATERIAL_QUALITY, alias="materialQuality")
    timeline: str | None = DEFAULT_TIMELINE
    zip_code: str | None = Field(None, alias="zipCode")
    description: str | None = None

    labor_workers: int | None = Field(None, alias="laborWorkers")
    labor_hours: float | None = Field(None, alias="laborHours")
    labor_rate: float | None = Field(None, alias="laborRate")
    trade_type: str | None = Field(None, alias="tradeType")

    demolition_required: bool = Field(False, alias="demolitionRequired")
    permit_needed: bool = Field(False, alias="permitNeeded")
    site_access: str | None = Field(None, alias="siteAccess")
    timeline_sensitivity: str | None = Field(None, alias="timelineSensitivity")

    model_config = {"populate_by_name": True}

    @property
    def resolved_area(self) -> float:
        try:
            value = float(self.area or self.square_footage or 0)
        except (TypeError, ValueError):
            return 0.0
        return value if math.isfinite(value) else 0.0


class EnhancedInputs(BaseModel):
    scope_details: str | None = Field(None, alias="scopeDetails")
    estimated_timeline: str | None = Field(None, alias="estimatedTimeline")
    labor_availability: str | None = Field(None, alias="laborAvailability")
    structural_change: bool | None = Field(None, alias="structuralChange")
    electrical_work: bool | None = Field(None, alias="electricalWork")
    plumbing_work: bool | None = Field(None, alias="plumbingWork")
    budget_range: str | None = Field(None, alias="budgetRange")
    priority: str | None = None
    existing_conditions: str | None = Field(None, alias="existingConditions")
    financing_type: str | None = Field(None, alias="financingType")
    client_type: str | None = Field(None, alias="clientType")
    preferred_vendors: list[str] | str | None = Field(None, alias="preferredVendors")

    model_config = {"populate_by_name": True}


class AdvancedEstimateRequest(EstimateRequest, EnhancedInputs):
    def enhanced_inputs(self) -> EnhancedInputs:
        return EnhancedInputs.model_validate(self.model_dump(include=set(EnhancedInputs.model_fields)))


class EstimateResponse(BaseModel):
    id: uuid.UUID
    project_type: str
    area: float
    material_quality: str
    timeline: str | None
    zip_code: str | None
    description: str | None
    labor_workers: int | None
    labor_hours: float | None
    labor_rate: float | None
    material_cost: int
    labor_cost: int
    permit_cost: int
    soft_costs: int
    estimated_cost: int
    cost_breakdown: CostBreakdown
    enhanced_inputs: dict | None
    created_at: str


class EstimateListResponse(BaseModel):
    estimates: list[EstimateResponse]
    total: int
    page: int
    page_size: int
