"""Pydantic models for the cost engine.

``CostParameters`` is the calculator input and ``CostBreakdown`` its output.
Input fields accept the camelCase names used by the estimator front-end as
well as their snake_case equivalents.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, Field

DEFAULT_LABOR_WORKERS = 2
DEFAULT_LABOR_HOURS = 24
DEFAULT_LABOR_RATE = 55.0

CATEGORY_NAMES: tuple[str, ...] = ("materials", "labor", "permits", "equipment", "overhead")


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class CostOverrides(BaseModel):
    """Direct equipment / overhead amounts.  Only values > 0 take effect."""

    equipment_cost: float | None = Field(None, alias="equipmentCost")
    overhead_cost: float | None = Field(None, alias="overheadCost")

    model_config = {"populate_by_name": True}


class CostParameters(BaseModel):
    project_type: str | None = Field(None, alias="projectType", description="Project category key")
    # Coerced by the calculator so bad values raise its own error
    area: float | str | None = Field(None, description="Project area in square feet")
    material_quality: str | None = Field("standard", alias="materialQuality")
    timeline: str | None = Field("", description="Duration band or explicit hours, e.g. '8 hours'")
    zip_code: str | None = Field(None, alias="zipCode")
    labor_workers: float | None = Field(None, alias="laborWorkers")
    labor_hours: float | None = Field(None, alias="laborHours")
    labor_rate: float | None = Field(None, alias="laborRate")
    overrides: CostOverrides = Field(default_factory=CostOverrides)

    model_config = {"populate_by_name": True}


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class CostCategory(BaseModel):
    amount: int
    percentage: int


class CostBreakdown(BaseModel):
    materials: CostCategory
    labor: CostCategory
    permits: CostCategory
    equipment: CostCategory
    overhead: CostCategory
    total: int

    def categories(self) -> Iterator[tuple[str, CostCategory]]:
        for name in CATEGORY_NAMES:
            yield name, getattr(self, name)

    def percentage_sum(self) -> int:
        return sum(category.percentage for _, category in self.categories())
