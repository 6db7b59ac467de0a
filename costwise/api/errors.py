from fastapi import Request, status
from fastapi.responses import JSONResponse

from costwise.common.logging import get_logger
from costwise.core.cost_engine.errors import (
    CostEngineError,
    InvalidParametersError,
    UnsupportedProjectTypeError,
)

logger = get_logger("api.errors")

# Caller mistakes; everything else from the engine is a computation failure
_CLIENT_ERRORS = (InvalidParametersError, UnsupportedProjectTypeError)


def status_for_cost_engine_error(exc: CostEngineError) -> int:
    if isinstance(exc, _CLIENT_ERRORS):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def cost_engine_error_handler(request: Request, exc: CostEngineError) -> JSONResponse:
    status_code = status_for_cost_engine_error(exc)
    if status_code >= 500:
        logger.error("Cost calculation failed on %s: %s", request.url.path, exc.message)
    else:
        logger.info("Rejected cost parameters on %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content={"detail": exc.message, "code": exc.code})
