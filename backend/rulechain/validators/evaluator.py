"""Field evaluator — runs one field's directives in chain order.

The value class (unset → string/numeric) is threaded through the loop as an
explicit local, starting at UNSET for every field.
"""

from typing import Any, Iterable, Optional

import structlog

from rulechain.validators.base import RuleContext
from rulechain.validators.models import (
    ErrorCode,
    FieldOutcome,
    ResultMode,
    RuleDirective,
    RuleViolation,
    ValueClass,
)
from rulechain.validators.predicates import humanize, is_empty
from rulechain.validators.presence_rules import NULLABLE
from rulechain.validators.records import RecordAccessor
from rulechain.validators.registry import RuleRegistry, default_registry

logger = structlog.get_logger()


class FieldEvaluator:
    """Evaluates a single field value against its parsed rule chain."""

    def __init__(self, registry: Optional[RuleRegistry] = None, mode: ResultMode = ResultMode.ACCUMULATE):
        self.registry = registry or default_registry()
        self.mode = mode

    def evaluate(
        self,
        value: Any,
        directives: Iterable[RuleDirective],
        record: RecordAccessor,
        key: str,
        mode: Optional[ResultMode] = None,
    ) -> FieldOutcome:
        """Run every directive in order and collect violations.

        Args:
            value: The field's current value
            directives: Parsed rule chain, in order
            record: Accessor for cross-field lookups on the same record
            key: External field key (used for the label in messages)
            mode: Overrides the evaluator's result mode for this call

        Returns:
            FieldOutcome with zero violations (passed), one (fail-fast) or all of them
        """
        mode = mode or self.mode
        value_class = ValueClass.UNSET
        violations: list[RuleViolation] = []

        for directive in directives:
            if directive.name == NULLABLE:
                if is_empty(value):
                    return FieldOutcome()
                continue

            rule = self.registry.get(directive.name)
            if rule is None:
                logger.debug("unknown_rule", rule=directive.name, field=key)
                continue

            ctx = RuleContext(value, directive, key, record, value_class)
            try:
                violation = rule.check(ctx)
            except Exception as e:
                logger.error(
                    "rule_failed",
                    rule=directive.encode(),
                    field=key,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                violation = RuleViolation(
                    code=ErrorCode.RULE_CRASHED,
                    rule=directive.name,
                    message=f"The {humanize(key)} could not be validated against the {directive.name} rule.",
                )

            if rule.classifies is not None:
                value_class = rule.classifies

            if violation is not None:
                violations.append(violation)
                if mode == ResultMode.FAIL_FAST:
                    break

        return FieldOutcome(violations=violations)
