from sqlalchemy import Boolean, Float, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from costwise.db.base import BaseModel


class Estimate(BaseModel):
    __tablename__ = "estimates"

    project_type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    area: Mapped[float] = mapped_column(Float, nullable=False)
    material_quality: Mapped[str] = mapped_column(String(20), nullable=False)
    timeline: Mapped[str | None] = mapped_column(String(50), nullable=True)
    zip_code: Mapped[str | None] = mapped_column(String(10), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Labor inputs
    labor_workers: Mapped[int | None] = mapped_column(Integer, nullable=True)
    labor_hours: Mapped[float | None] = mapped_column(Float, nullable=True)
    labor_rate: Mapped[float | None] = mapped_column(Float, nullable=True)
    trade_type: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # Project factors
    demolition_required: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    permit_needed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    site_access: Mapped[str | None] = mapped_column(String(20), nullable=True)  # easy, normal, difficult
    timeline_sensitivity: Mapped[str | None] = mapped_column(String(20), nullable=True)  # urgent, normal, flexible

    # Cost breakdown (whole currency units)
    material_cost: Mapped[int] = mapped_column(Integer, nullable=False)
    labor_cost: Mapped[int] = mapped_column(Integer, nullable=False)
    permit_cost: Mapped[int] = mapped_column(Integer, nullable=False)
    soft_costs: Mapped[int] = mapped_column(Integer, nullable=False)  # equipment + overhead
    estimated_cost: Mapped[int] = mapped_column(Integer, nullable=False)
    cost_breakdown: Mapped[dict] = mapped_column(JSONB, nullable=False, default=dict)
    enhanced_inputs: Mapped[dict | None] = mapped_column(JSONB, nullable=True)
