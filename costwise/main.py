from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from costwise.api.errors import cost_engine_error_handler
from costwise.api.middleware import AuditMiddleware
from costwise.api.v1.router import v1_router
from costwise.common.logging import get_logger, setup_logging
from costwise.config import settings
from costwise.core.cost_engine.errors import CostEngineError

logger = get_logger("main")

APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("CostWise API starting (env=%s)", settings.APP_ENV)
    yield


app = FastAPI(
    title="CostWise API",
    description="Construction cost estimation and expense tracking",
    version=APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS
origins = settings.ALLOWED_ORIGINS.split(",") if settings.ALLOWED_ORIGINS != "*" else ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(AuditMiddleware)

app.add_exception_handler(CostEngineError, cost_engine_error_handler)

# API routes
app.include_router(v1_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": "costwise",
        "version": APP_VERSION,
        "env": settings.APP_ENV,
    }
