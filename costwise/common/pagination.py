"""Reusable pagination and sorting for list endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import Query
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from costwise.config import settings


class PaginationParams:
    """Inject as a FastAPI dependency for any list endpoint."""

    def __init__(
        self,
        page: int = Query(1, ge=1, description="Page number"),
        page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=100, description="Items per page"),
        sort_by: str | None = Query(None, description="Column to sort by"),
        sort_order: str = Query("desc", pattern="^(asc|desc)$", description="asc or desc"),
        search: str | None = Query(None, description="Free-text search"),
    ):
        self.page = page
        self.page_size = page_size
        self.sort_by = sort_by
        self.sort_order = sort_order
        self.search = search

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


async def paginate(
    db: AsyncSession,
    query: Select,
    params: PaginationParams,
    model: Any = None,
    default_order: Any = None,
) -> tuple[list[Any], int]:
    """Apply sorting and pagination to a query and return (items, total_count).

    ``sort_by`` must name a mapped column on *model*; unknown names fall back
    to *default_order*.
    """
    count_q = select(func.count()).select_from(query.subquery())
    total = (await db.execute(count_q)).scalar() or 0

    col = getattr(model, params.sort_by, None) if params.sort_by and model else None
    if col is not None:
        query = query.order_by(col.asc() if params.sort_order == "asc" else col.desc())
    elif default_order is not None:
        query = query.order_by(default_order)

    query = query.offset(params.offset).limit(params.page_size)

    result = await db.execute(query)
    items = list(result.scalars().all())
    return items, total
