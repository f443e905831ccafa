"""Validation models — rule directives, value classes, result modes and the result structure.

Validation is deterministic: same record → same result, no I/O, no shared state.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class ValueClass(str, Enum):
    """How size/comparison rules measure a value within one field's chain."""

    UNSET = "unset"      # Size rules are no-ops
    STRING = "string"    # Compare character length
    NUMERIC = "numeric"  # Compare numeric magnitude


class ResultMode(str, Enum):
    """Per-field error reporting mode."""

    FAIL_FAST = "fail_fast"    # Stop at the first violated rule
    ACCUMULATE = "accumulate"  # Collect every violated rule

    @classmethod
    def parse(cls, value: Union["ResultMode", str, None], default: "ResultMode") -> "ResultMode":
        """Coerce a setting or argument into a ResultMode; None means default.

        Raises:
            ValueError: if value names no known mode
        """
        if value is None:
            return default
        if isinstance(value, ResultMode):
            return value
        normalized = str(value).strip().lower().replace("-", "_")
        aliases = {"first": cls.FAIL_FAST, "all": cls.ACCUMULATE}
        if normalized in aliases:
            return aliases[normalized]
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(
                f"Unknown result mode {value!r}: expected one of {', '.join(m.value for m in cls)}"
            ) from None


class ErrorCode(str, Enum):
    """Message family for every rule that can emit a violation.

    Naming convention: RULE_NAME
    """

    REQUIRED = "REQUIRED"
    ALPHA = "ALPHA"
    ALPHA_NUM = "ALPHA_NUM"
    ALPHA_DASH = "ALPHA_DASH"
    ALPHA_SPACE = "ALPHA_SPACE"
    NUMERIC = "NUMERIC"
    DATE = "DATE"
    EMAIL = "EMAIL"
    IP = "IP"
    IPV4 = "IPV4"
    IPV6 = "IPV6"
    URL = "URL"
    CREDIT_CARD = "CREDIT_CARD"

    MIN = "MIN"
    MAX = "MAX"
    BETWEEN = "BETWEEN"
    LT = "LT"
    GT = "GT"
    LTE = "LTE"
    GTE = "GTE"
    DIGITS = "DIGITS"
    DIGITS_BETWEEN = "DIGITS_BETWEEN"

    SAME = "SAME"
    REQUIRED_IF = "REQUIRED_IF"
    REQUIRED_WITH = "REQUIRED_WITH"
    UNKNOWN_FIELD = "UNKNOWN_FIELD"

    RULE_CRASHED = "RULE_CRASHED"


class RuleDirective(BaseModel):
    """One parsed unit of a rule-chain encoding, e.g. ``between:3,5``."""

    model_config = ConfigDict(frozen=True)

    name: str
    params: tuple[str, ...] = ()
    has_params: bool = Field(default=False, description="True if the encoding carried a ':' blob")

    def encode(self) -> str:
        """Serialize back into chain syntax (name[:p1,p2,...])."""
        if not self.has_params:
            return self.name
        return f"{self.name}:{','.join(self.params)}"

    def param(self, index: int) -> Optional[str]:
        """Positional parameter, or None when absent."""
        if index < len(self.params):
            return self.params[index]
        return None


class RuleViolation(BaseModel):
    """A single rule failure for a field."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    code: ErrorCode
    rule: str
    message: str


class FieldOutcome(BaseModel):
    """Result of evaluating one field's chain."""

    violations: list[RuleViolation] = Field(default_factory=list)

    @property
    def failed(self) -> bool:
        return bool(self.violations)

    @property
    def messages(self) -> list[str]:
        return [v.message for v in self.violations]

    def first(self) -> Optional[str]:
        return self.violations[0].message if self.violations else None

    def render(self, mode: ResultMode) -> Union[str, list[str], None]:
        """Shape the outcome for a ValidationResult: one message or a list."""
        if not self.violations:
            return None
        if mode == ResultMode.FAIL_FAST:
            return self.first()
        return self.messages


class ValidationResult(BaseModel):
    """Mapping from external field key to error message(s) for one record."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    passed: bool = Field(description="True if no field failed any rule")
    mode: ResultMode = ResultMode.ACCUMULATE
    errors: Mapping[str, Union[str, list[str]]] = Field(default_factory=dict, validate_default=True)

    @field_validator("errors", mode="after")
    @classmethod
    def _freeze_errors(cls, value: Mapping) -> Mapping:
        return MappingProxyType(dict(value))

    @field_serializer("errors")
    def _serialize_errors(self, value: Mapping) -> dict:
        return dict(value)

    @property
    def error_count(self) -> int:
        count = 0
        for value in self.errors.values():
            count += 1 if isinstance(value, str) else len(value)
        return count

    @property
    def failed_fields(self) -> list[str]:
        return list(self.errors.keys())

    @classmethod
    def build(cls, outcomes: dict[str, FieldOutcome], mode: ResultMode) -> "ValidationResult":
        """Build a result from per-field outcomes; returns VALID when nothing failed."""
        errors = {
            key: outcome.render(mode)
            for key, outcome in outcomes.items()
            if outcome.failed
        }
        if not errors:
            return VALID
        return cls(passed=False, mode=mode, errors=errors)


# "Validated, no problems" sentinel, distinct from an untouched empty mapping.
VALID = ValidationResult(passed=True)
