"""Record validator — declarative, per-field rule chains.

Usage:
    from rulechain.validators import validate, RuleField

    class Signup(BaseModel):
        name: str = RuleField("required|alpha|between:2,40", "")

    result = validate(Signup(name="x"))
    if not result.passed:
        # result.errors == {"name": ["The name must be between 2 and 40 characters."]}
"""

from rulechain.validators.engine import ValidationEngine, validation_engine, validate
from rulechain.validators.evaluator import FieldEvaluator
from rulechain.validators.models import (
    VALID,
    ErrorCode,
    FieldOutcome,
    ResultMode,
    RuleDirective,
    RuleViolation,
    ValidationResult,
    ValueClass,
)
from rulechain.validators.parser import parse_rule_chain, serialize_rule_chain
from rulechain.validators.records import MISSING, FieldSpec, RecordAccessor, RuleField, describe_record
from rulechain.validators.registry import RuleRegistry, default_registry

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "validate",
    "FieldEvaluator",
    "VALID",
    "ErrorCode",
    "FieldOutcome",
    "ResultMode",
    "RuleDirective",
    "RuleViolation",
    "ValidationResult",
    "ValueClass",
    "parse_rule_chain",
    "serialize_rule_chain",
    "MISSING",
    "FieldSpec",
    "RecordAccessor",
    "RuleField",
    "describe_record",
    "RuleRegistry",
    "default_registry",
]
