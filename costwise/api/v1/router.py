from fastapi import APIRouter

from costwise.api.v1.cost_engine import router as cost_engine_router
from costwise.api.v1.estimates import router as estimates_router
from costwise.api.v1.expenses import router as expenses_router

v1_router = APIRouter()

v1_router.include_router(cost_engine_router)
v1_router.include_router(estimates_router)
v1_router.include_router(expenses_router)
