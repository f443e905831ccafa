"""API request models."""

from pydantic import BaseModel, Field
from typing import Any, Optional, Literal, Union


class FieldRules(BaseModel):
    """Rule chain plus an optional external key for one field."""

    rules: str = ""
    key: Optional[str] = None


class ValidateRequest(BaseModel):
    """Request to validate one record against per-field rule chains."""

    data: dict[str, Any] = Field(
        default_factory=dict,
        description="Field values of the record, keyed by internal field name",
        examples=[{"email": "jane@example.com", "password": "secret", "password_confirmation": "secret"}],
    )
    rules: dict[str, Union[str, FieldRules]] = Field(
        ...,
        description="Rule chain per field, e.g. {'age': 'required|numeric|min:18'}",
        examples=[{"email": "required|email", "password": "required|string|min:6|same:password_confirmation"}],
    )
    mode: Optional[Literal["accumulate", "fail_fast"]] = None

    def schema_table(self) -> dict[str, Union[str, dict]]:
        """Side table in the shape describe_record() expects."""
        return {
            name: entry if isinstance(entry, str) else entry.model_dump(exclude_none=True)
            for name, entry in self.rules.items()
        }


class ParseRequest(BaseModel):
    """Request to parse a single rule chain."""

    chain: str = Field(..., max_length=4000, examples=["required|numeric|between:1,10"])
