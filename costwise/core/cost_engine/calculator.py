"""Deterministic cost-breakdown calculator.

Turns a project type, area, material tier and timeline into a five-way
breakdown (materials, labor, permits, equipment, overhead) using the static
tables in :mod:`costwise.core.cost_engine.tables`.  The function is pure: it
reads only immutable tables and never performs I/O apart from a debug log
line when labor is priced from explicit hours.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

from costwise.common.logging import get_logger
from costwise.core.cost_engine import tables
from costwise.core.cost_engine.errors import (
    InvalidBaseCostError,
    InvalidMultiplierError,
    InvalidParametersError,
    InvalidProjectCostError,
    UnsupportedProjectTypeError,
)
from costwise.core.cost_engine.schemas import (
    DEFAULT_LABOR_RATE,
    DEFAULT_LABOR_WORKERS,
    CostBreakdown,
    CostCategory,
    CostParameters,
)

logger = get_logger("cost_engine.calculator")

_NUMBER_RE = re.compile(r"(\d+(?:\.\d+)?)")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 always going up (not to even)."""
    return int(math.floor(value + 0.5))


def parse_timeline_hours(timeline: str | None) -> float | None:
    """Return the explicit hour count in *timeline*, e.g. ``"8 hours"`` -> 8.0.

    Only the first number counts, and only when the text mentions hours.
    A zero count is treated as "not specified".
    """
    if not timeline:
        return None
    lowered = timeline.lower()
    match = _NUMBER_RE.search(lowered)
    if not match:
        return None
    hours = float(match.group(1))
    if hours and "hour" in lowered:
        return hours
    return None


def _coerce_area(area: Any) -> float:
    if area is None or area == "":
        raise InvalidParametersError("Invalid project parameters: projectType and area are required")
    try:
        value = float(area)
    except (TypeError, ValueError):
        raise InvalidParametersError("Area must be a valid number")
    if not math.isfinite(value):
        raise InvalidParametersError("Area must be a valid number")
    return value


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def resolve_regional_multiplier(zip_code: str | None) -> float:
    key = (zip_code or "").strip() or tables.DEFAULT_REGION_KEY
    return tables.REGIONAL_MULTIPLIERS.get(key, tables.REGIONAL_MULTIPLIERS[tables.DEFAULT_REGION_KEY])


def resolve_timeline_multiplier(timeline: str | None) -> float:
    return tables.TIMELINE_MULTIPLIERS.get((timeline or "").strip(), 1.0)


def resolve_quality_multiplier(material_quality: str | None) -> float:
    return tables.QUALITY_ADJUSTMENTS.get(material_quality or "", 1.0)


def _labor_cost(params: CostParameters, base_project_cost: int, timeline_hours: float | None) -> int:
    if timeline_hours is not None:
        workers = DEFAULT_LABOR_WORKERS if params.labor_workers is None else params.labor_workers
        rate = DEFAULT_LABOR_RATE if params.labor_rate is None else params.labor_rate
        cost = round_half_up(timeline_hours * workers * rate)
        logger.debug(
            "Timeline constraint: %s hours x %s workers x $%s/hr = $%d",
            timeline_hours, workers, rate, cost,
        )
        return cost

    if params.labor_hours and params.labor_workers and params.labor_rate:
        cost = round_half_up(params.labor_hours * params.labor_workers * params.labor_rate)
        logger.debug(
            "Labor calculation: %s hours x %s workers x $%s/hr = $%d",
            params.labor_hours, params.labor_workers, params.labor_rate, cost,
        )
        return cost

    return round_half_up(base_project_cost * tables.LABOR_SHARE)


def _category(amount: int, total: int) -> CostCategory:
    return CostCategory(amount=amount, percentage=round_half_up(amount / total * 100))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def calculate_enhanced_estimate(params: CostParameters | Mapping[str, Any]) -> CostBreakdown:
    """Compute a cost breakdown for *params*.

    Parameters
    ----------
    params:
        A ``CostParameters`` instance, or a mapping that validates into one
        (camelCase or snake_case keys).

    Returns
    -------
    CostBreakdown
        Five categories plus ``total``.  ``total`` is always the sum of the
        category amounts, which can drift from the base project cost when
        labor is priced from hours or equipment/overhead are overridden.

    Raises
    ------
    InvalidParametersError
        ``project_type`` or ``area`` is missing, non-positive or non-numeric,
        or the area is too small for any component to round above zero.
    UnsupportedProjectTypeError
        ``project_type`` has no entry in the base-cost table.
    InvalidBaseCostError, InvalidMultiplierError, InvalidProjectCostError
        A table lookup or the arithmetic produced an unusable value.
    """
    if not isinstance(params, CostParameters):
        params = CostParameters.model_validate(params)

    timeline_hours = parse_timeline_hours(params.timeline)

    # ── Validation ──────────────────────────────────────────────────
    if not params.project_type:
        raise InvalidParametersError("Invalid project parameters: projectType and area are required")
    area = _coerce_area(params.area)
    if area <= 0:
        raise InvalidParametersError("Invalid project parameters: projectType and area are required")

    base_costs = tables.BASE_COSTS_PER_SQFT.get(params.project_type)
    if base_costs is None:
        raise UnsupportedProjectTypeError(params.project_type)

    base_cost_per_sqft = base_costs.get(params.material_quality) or base_costs.get("standard")
    if not _is_number(base_cost_per_sqft) or not base_cost_per_sqft:
        raise InvalidBaseCostError(
            f"Invalid base cost for {params.project_type} with {params.material_quality} quality"
        )

    # ── Multipliers ─────────────────────────────────────────────────
    regional = resolve_regional_multiplier(params.zip_code)
    timeline = resolve_timeline_multiplier(params.timeline)
    quality = resolve_quality_multiplier(params.material_quality)
    if not all(_is_number(m) for m in (regional, timeline, quality)):
        raise InvalidMultiplierError("Invalid calculation multipliers")

    adjusted_cost_per_sqft = base_cost_per_sqft * regional * timeline * quality
    raw_cost = area * adjusted_cost_per_sqft
    if not math.isfinite(raw_cost):
        raise InvalidProjectCostError("Invalid base project cost calculation")
    base_project_cost = round_half_up(raw_cost)
    if base_project_cost <= 0:
        raise InvalidProjectCostError("Invalid base project cost calculation")

    # ── Components ──────────────────────────────────────────────────
    materials = round_half_up(base_project_cost * tables.MATERIALS_SHARE)
    permits = round_half_up(base_project_cost * tables.PERMITS_SHARE)
    labor = _labor_cost(params, base_project_cost, timeline_hours)

    overrides = params.overrides
    if overrides.equipment_cost and overrides.equipment_cost > 0:
        equipment = round_half_up(overrides.equipment_cost)
    else:
        equipment = round_half_up(base_project_cost * tables.EQUIPMENT_SHARE)
    if overrides.overhead_cost and overrides.overhead_cost > 0:
        overhead = round_half_up(overrides.overhead_cost)
    else:
        overhead = round_half_up(base_project_cost * tables.OVERHEAD_SHARE)

    total = materials + labor + permits + equipment + overhead
    # Every component rounded to zero; percentages would divide by zero
    if total <= 0:
        raise InvalidParametersError("Area is too small to produce a cost breakdown")

    return CostBreakdown(
        materials=_category(materials, total),
        labor=_category(labor, total),
        permits=_category(permits, total),
        equipment=_category(equipment, total),
        overhead=_category(overhead, total),
        total=total,
    )
