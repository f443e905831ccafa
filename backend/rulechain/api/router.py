"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from rulechain.api.health import router as health_router
from rulechain.api.validate import router as validate_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Record validation and rule-chain tools
api_router.include_router(validate_router, tags=["Validation"])
