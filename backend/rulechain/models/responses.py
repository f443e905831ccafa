"""API response models."""

from pydantic import BaseModel
from typing import Optional, Literal, Union


class ValidateResponse(BaseModel):
    """Validation outcome for one record."""

    passed: bool
    mode: Literal["accumulate", "fail_fast"]
    errors: dict[str, Union[str, list[str]]] = {}


class DirectiveResponse(BaseModel):
    """One parsed rule directive."""

    name: str
    params: list[str] = []
    known: bool


class ParseResponse(BaseModel):
    """Parsed rule chain and its re-serialized encoding."""

    directives: list[DirectiveResponse]
    encoding: str


class RulesResponse(BaseModel):
    """Registered rule vocabulary."""

    rules: list[str]


class HealthResponse(BaseModel):
    """Service health."""

    status: Literal["healthy", "unhealthy"]
    version: str
    uptime_seconds: float
    rule_count: int
    result_mode: str
    message: Optional[str] = None
