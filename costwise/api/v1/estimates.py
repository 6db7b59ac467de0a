import uuid

from fastapi import APIRouter, Depends, Response
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from costwise.api.deps import get_db
from costwise.common.exceptions import NotFoundError
from costwise.common.pagination import PaginationParams, paginate
from costwise.core.estimates.schemas import (
    AdvancedEstimateRequest,
    EstimateListResponse,
    EstimateRequest,
    EstimateResponse,
)
from costwise.core.estimates.service import build_estimate
from costwise.db.models.estimate import Estimate

router = APIRouter(prefix="/estimates", tags=["Estimates"])


# ---------- Endpoints ----------


@router.post("/basic", response_model=EstimateResponse, status_code=201)
async def create_basic_estimate(
    body: EstimateRequest,
    db: AsyncSession = Depends(get_db),
):
    estimate = build_estimate(body)
    db.add(estimate)
    await db.flush()
    await db.refresh(estimate)

    return _estimate_to_response(estimate)


@router.post("", response_model=EstimateResponse, status_code=201)
async def create_advanced_estimate(
    body: AdvancedEstimateRequest,
    db: AsyncSession = Depends(get_db),
):
    estimate = build_estimate(body, enhanced=body.enhanced_inputs())
    db.add(estimate)
    await db.flush()
    await db.refresh(estimate)

    return _estimate_to_response(estimate)


@router.get("", response_model=EstimateListResponse)
async def list_estimates(
    pagination: PaginationParams = Depends(),
    db: AsyncSession = Depends(get_db),
):
    query = select(Estimate).where(Estimate.is_deleted.is_(False))
    if pagination.search:
        query = query.where(Estimate.description.ilike(f"%{pagination.search}%"))
    estimates, total = await paginate(
        db, query, pagination, model=Estimate, default_order=Estimate.created_at.desc()
    )

    return EstimateListResponse(
        estimates=[_estimate_to_response(e) for e in estimates],
        total=total,
        page=pagination.page,
        page_size=pagination.page_size,
    )


@router.get("/{estimate_id}", response_model=EstimateResponse)
async def get_estimate(
    estimate_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    estimate = await _get_estimate(estimate_id, db)
    return _estimate_to_response(estimate)


@router.delete("/{estimate_id}", status_code=204)
async def delete_estimate(
    estimate_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    estimate = await _get_estimate(estimate_id, db)
    estimate.soft_delete()
    await db.flush()
    return Response(status_code=204)


# ---------- Helpers ----------


async def _get_estimate(estimate_id: uuid.UUID, db: AsyncSession) -> Estimate:
    result = await db.execute(
        select(Estimate).where(Estimate.id == estimate_id, Estimate.is_deleted.is_(False))
    )
    estimate = result.scalar_one_or_none()
    if not estimate:
        raise NotFoundError("Estimate", str(estimate_id))
    return estimate


def _estimate_to_response(estimate: Estimate) -> EstimateResponse:
    return EstimateResponse(
        id=estimate.id,
        project_type=estimate.project_type,
        area=estimate.area,
        material_quality=estimate.material_quality,
        timeline=estimate.timeline,
        zip_code=estimate.zip_code,
        description=estimate.description,
        labor_workers=estimate.labor_workers,
        labor_hours=estimate.labor_hours,
        labor_rate=estimate.labor_rate,
        material_cost=estimate.material_cost,
        labor_cost=estimate.labor_cost,
        permit_cost=estimate.permit_cost,
        soft_costs=estimate.soft_costs,
        estimated_cost=estimate.estimated_cost,
        cost_breakdown=estimate.cost_breakdown,
        enhanced_inputs=estimate.enhanced_inputs,
        created_at=estimate.created_at.isoformat(),
    )
