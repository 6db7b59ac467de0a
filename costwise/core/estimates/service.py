"""Turn an estimate request into a persisted ``Estimate`` row.

The cost engine prices the breakdown and its total is always the stored
``estimated_cost``.  Calculator errors propagate to the caller and nothing is
saved.

Basic estimates also carry project factors from the estimate form.  A
required permit replaces the engine's permit share with a flat fee, and soft
costs pick up demolition at a per-sqft rate plus a 15% overhead on the hard
costs.  Those factors only shape the itemised columns, never the total.
Advanced estimates store the engine's breakdown as is.
"""

from __future__ import annotations

from costwise.common.logging import get_logger
from costwise.config import settings
from costwise.core.cost_engine.calculator import calculate_enhanced_estimate, round_half_up
from costwise.core.cost_engine.errors import InvalidParametersError
from costwise.core.cost_engine.schemas import (
    DEFAULT_LABOR_HOURS,
    DEFAULT_LABOR_RATE,
    DEFAULT_LABOR_WORKERS,
    CostBreakdown,
    CostParameters,
)
from costwise.core.estimates.schemas import (
    DEFAULT_MATERIAL_QUALITY,
    DEFAULT_PROJECT_TYPE,
    DEFAULT_TIMELINE,
    EnhancedInputs,
    EstimateRequest,
)
from costwise.db.models.estimate import Estimate

logger = get_logger("estimates.service")

PERMIT_MINIMUM = 500
PERMIT_COST_PER_SQFT = 0.5
DEMOLITION_COST_PER_SQFT = 5
SOFT_COST_OVERHEAD_SHARE = 0.15


def to_cost_parameters(request: EstimateRequest) -> CostParameters:
    """Apply the form defaults, including a default crew, and validate the area."""
    area = request.resolved_area
    if area <= 0:
        raise InvalidParametersError("Square footage must be greater than 0")

    return CostParameters(
        project_type=request.project_type or DEFAULT_PROJECT_TYPE,
        area=area,
        material_quality=request.material_quality or DEFAULT_MATERIAL_QUALITY,
        timeline=request.timeline or DEFAULT_TIMELINE,
        zip_code=request.zip_code or settings.DEFAULT_ZIP_CODE,
        labor_workers=request.labor_workers or DEFAULT_LABOR_WORKERS,
        labor_hours=request.labor_hours or DEFAULT_LABOR_HOURS,
        labor_rate=request.labor_rate or DEFAULT_LABOR_RATE,
    )


def project_factor_costs(request: EstimateRequest, breakdown: CostBreakdown) -> tuple[int, int]:
    """Return ``(permit_cost, soft_costs)`` with the form's project factors applied."""
    area = request.resolved_area

    permit_cost = breakdown.permits.amount
    if request.permit_needed:
        permit_cost = round_half_up(max(PERMIT_MINIMUM, area * PERMIT_COST_PER_SQFT))

    hard_costs = breakdown.materials.amount + breakdown.labor.amount + permit_cost
    soft_costs = breakdown.equipment.amount + breakdown.overhead.amount
    if request.demolition_required:
        soft_costs += area * DEMOLITION_COST_PER_SQFT
    soft_costs += hard_costs * SOFT_COST_OVERHEAD_SHARE

    return permit_cost, round_half_up(soft_costs)


def build_estimate(request: EstimateRequest, enhanced: EnhancedInputs | None = None) -> Estimate:
    """Price *request* and build an unsaved ``Estimate``.

    Passing *enhanced* makes it an advanced estimate: the extended inputs are
    stored, the description gets a default and project factors are skipped.
    """
    params = to_cost_parameters(request)
    breakdown: CostBreakdown = calculate_enhanced_estimate(params)

    if enhanced is None:
        permit_cost, soft_costs = project_factor_costs(request, breakdown)
    else:
        permit_cost = breakdown.permits.amount
        soft_costs = breakdown.equipment.amount + breakdown.overhead.amount

    logger.info(
        "Priced %s (%.0f sqft, %s, zip %s): total $%d",
        params.project_type,
        float(params.area),
        params.material_quality,
        params.zip_code,
        breakdown.total,
    )

    description = request.description
    if not description and enhanced is not None:
        description = f"{params.project_type} - {request.resolved_area:g} sq ft"

    return Estimate(
        project_type=params.project_type,
        area=float(params.area),
        material_quality=params.material_quality,
        timeline=params.timeline,
        zip_code=params.zip_code,
        description=description,
        labor_workers=int(params.labor_workers),
        labor_hours=params.labor_hours,
        labor_rate=params.labor_rate,
        trade_type=request.trade_type,
        demolition_required=request.demolition_required,
        permit_needed=request.permit_needed,
        site_access=request.site_access,
        timeline_sensitivity=request.timeline_sensitivity,
        material_cost=breakdown.materials.amount,
        labor_cost=breakdown.labor.amount,
        permit_cost=permit_cost,
        soft_costs=soft_costs,
        estimated_cost=breakdown.total,
        cost_breakdown=breakdown.model_dump(mode="json"),
        enhanced_inputs=enhanced.model_dump(mode="json", by_alias=True) if enhanced is not None else None,
    )
