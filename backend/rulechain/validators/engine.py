"""Validation Engine — validates one record's fields against their rule chains.

This is the main entry point for record validation. For every field it parses
the rule chain, runs the field evaluator, and collects the failures under the
field's external key.

Usage:
    engine = ValidationEngine()
    result = engine.validate(signup_form)
    if not result.passed:
        # Return result.errors to the client
"""

import time
from collections.abc import Mapping
from typing import Any, Optional, Union

import structlog

from rulechain.config import get_settings
from rulechain.validators.evaluator import FieldEvaluator
from rulechain.validators.models import FieldOutcome, ResultMode, ValidationResult
from rulechain.validators.parser import parse_rule_chain
from rulechain.validators.records import RecordAccessor, describe_record
from rulechain.validators.registry import RuleRegistry, default_registry

logger = structlog.get_logger()


class ValidationEngine:
    """Runs every field of a record through its rule chain.

    Design principles:
        - Deterministic: same record → same result
        - Stateless: nothing is kept between validate() calls
        - Extensible: add rules to the registry without modifying the engine
        - Observable: logs every validation run with timing
    """

    def __init__(
        self,
        registry: Optional[RuleRegistry] = None,
        mode: Union[ResultMode, str, None] = None,
    ):
        """Initialize with the default rule vocabulary or a custom registry.

        Args:
            registry: Optional RuleRegistry. If None, uses all built-in rules.
            mode: Default result mode. If None, read from settings (RESULT_MODE).
        """
        self.registry = registry or default_registry()
        self.mode = ResultMode.parse(
            mode if mode is not None else get_settings().RESULT_MODE,
            ResultMode.ACCUMULATE,
        )
        self.evaluator = FieldEvaluator(self.registry, self.mode)

    def validate(
        self,
        record: Any,
        schema: Optional[Mapping] = None,
        mode: Union[ResultMode, str, None] = None,
    ) -> ValidationResult:
        """Validate every field of the record.

        Args:
            record: pydantic model, dataclass instance, or mapping
            schema: Optional side table {field: chain | {"rules", "key"}}
            mode: Overrides the engine's result mode for this call

        Returns:
            VALID if no field failed, else a ValidationResult keyed by external field key

        Raises:
            RecordDescriptionError: if the record shape is not supported
            ValueError: if mode names no known result mode
        """
        start_time = time.perf_counter()
        mode = ResultMode.parse(mode, self.mode)

        fields = describe_record(record, schema)
        accessor = RecordAccessor(fields)

        outcomes: dict[str, FieldOutcome] = {}
        for field in fields:
            outcome = self.evaluator.evaluate(
                field.value,
                parse_rule_chain(field.rules),
                accessor,
                field.key,
                mode,
            )
            if outcome.failed:
                outcomes[field.key] = outcome

        result = ValidationResult.build(outcomes, mode)

        logger.info(
            "validation_complete",
            passed=result.passed,
            mode=mode.value,
            fields=len(fields),
            failed_fields=result.failed_fields,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        return result

    def validate_field(
        self,
        value: Any,
        rules: str,
        key: str,
        record: Optional[Mapping[str, Any]] = None,
        mode: Union[ResultMode, str, None] = None,
    ) -> FieldOutcome:
        """Validate a single value against a chain, with optional sibling values."""
        accessor = RecordAccessor.from_mapping(record or {})
        return self.evaluator.evaluate(
            value,
            parse_rule_chain(rules),
            accessor,
            key,
            ResultMode.parse(mode, self.mode),
        )


# Module-level singleton
validation_engine = ValidationEngine()


def validate(record: Any, schema: Optional[Mapping] = None, mode: Union[ResultMode, str, None] = None) -> ValidationResult:
    """Validate a record with the module-level engine."""
    return validation_engine.validate(record, schema, mode)
