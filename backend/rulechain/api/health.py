"""Health check endpoint."""

import time
from fastapi import APIRouter

from rulechain import __version__
from rulechain.models.responses import HealthResponse
from rulechain.validators import validation_engine

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Service health with rule vocabulary status."""
    rule_count = len(validation_engine.registry)

    return HealthResponse(
        status="healthy" if rule_count > 0 else "unhealthy",
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
        rule_count=rule_count,
        result_mode=validation_engine.mode.value,
        message=None if rule_count > 0 else "No rules registered",
    )
