"""Validation API — validate records, parse rule chains, list the rule vocabulary."""

from fastapi import APIRouter, HTTPException

import structlog

from rulechain.config import get_settings
from rulechain.models.requests import ValidateRequest, ParseRequest
from rulechain.models.responses import (
    ValidateResponse,
    ParseResponse,
    DirectiveResponse,
    RulesResponse,
)
from rulechain.validators import validation_engine, parse_rule_chain, serialize_rule_chain
from rulechain.validators.presence_rules import NULLABLE

logger = structlog.get_logger()

router = APIRouter()


@router.post("/validate", response_model=ValidateResponse)
async def validate_record(request: ValidateRequest):
    """Validate one record. Returns 200 whether or not the record is valid."""
    settings = get_settings()
    if len(request.rules) > settings.MAX_FIELDS_PER_REQUEST:
        logger.warning("validate_request_rejected", fields=len(request.rules), limit=settings.MAX_FIELDS_PER_REQUEST)
        raise HTTPException(
            status_code=422,
            detail=f"Too many fields: {len(request.rules)} (max {settings.MAX_FIELDS_PER_REQUEST})",
        )

    result = validation_engine.validate(request.data, request.schema_table(), request.mode)

    return ValidateResponse(
        passed=result.passed,
        mode=request.mode or validation_engine.mode.value,
        errors=dict(result.errors),
    )


@router.post("/rules/parse", response_model=ParseResponse)
async def parse_chain(request: ParseRequest):
    """Parse a rule chain and report which rule names are recognized."""
    directives = parse_rule_chain(request.chain)
    registry = validation_engine.registry

    return ParseResponse(
        directives=[
            DirectiveResponse(
                name=d.name,
                params=list(d.params),
                known=d.name in registry or d.name == NULLABLE,
            )
            for d in directives
        ],
        encoding=serialize_rule_chain(directives),
    )


@router.get("/rules", response_model=RulesResponse)
async def list_rules():
    """List every rule name the engine recognizes."""
    return RulesResponse(rules=sorted([*validation_engine.registry.names(), NULLABLE]))
