"""Base rule — abstract class implementing the Strategy Pattern.

Each rule is a standalone, independently testable unit registered by name.
New rules are added to a RuleRegistry without touching the evaluator loop.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

import structlog

from rulechain.validators.models import ErrorCode, RuleDirective, RuleViolation, ValueClass
from rulechain.validators.predicates import as_text, humanize, to_float
from rulechain.validators.records import RecordAccessor

logger = structlog.get_logger()


class RuleContext:
    """Everything one rule invocation may read.

    value_class is the state inferred from earlier rules in the same chain;
    the evaluator owns it and passes the current value in.
    """

    def __init__(
        self,
        value: Any,
        directive: RuleDirective,
        key: str,
        record: RecordAccessor,
        value_class: ValueClass = ValueClass.UNSET,
    ):
        self.value = value
        self.text = as_text(value)
        self.directive = directive
        self.key = key
        self.label = humanize(key)
        self.record = record
        self.value_class = value_class

    @property
    def params(self) -> tuple[str, ...]:
        return self.directive.params

    def lookup(self, name: str) -> Any:
        return self.record.lookup(name)


class BaseRule(ABC):
    """Abstract base for all rules.

    Contract:
        - check() is deterministic: same context → same result
        - check() returns a RuleViolation or None, it never raises for bad data
        - classifies, when set, is the value class the evaluator records after
          this rule runs, whether or not it passed
    """

    classifies: Optional[ValueClass] = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Rule name as written in a chain."""
        ...

    @property
    def aliases(self) -> tuple[str, ...]:
        """Other chain names dispatched to this rule."""
        return ()

    @abstractmethod
    def check(self, ctx: RuleContext) -> Optional[RuleViolation]:
        """Evaluate the rule for one field value."""
        ...

    # ── Helper Methods ──

    def _violation(self, code: ErrorCode, ctx: RuleContext, message: str) -> RuleViolation:
        return RuleViolation(code=code, rule=ctx.directive.name, message=message)

    def _malformed(self, ctx: RuleContext, reason: str) -> None:
        """Log a malformed parameter; the rule then passes vacuously."""
        logger.warning(
            "malformed_rule_parameter",
            rule=ctx.directive.encode(),
            field=ctx.key,
            reason=reason,
        )
        return None

    def _unknown_field(self, ctx: RuleContext, other: str) -> RuleViolation:
        """Fail closed on a reference to a field the record does not have."""
        logger.warning("unknown_field_reference", rule=ctx.directive.encode(), field=ctx.key, other=other)
        return self._violation(
            ErrorCode.UNKNOWN_FIELD,
            ctx,
            f"The {ctx.label} field refers to an unknown field {humanize(other)}.",
        )

    def _int_param(self, ctx: RuleContext, index: int) -> Optional[int]:
        """Parse an integer parameter, or None if missing/non-integer."""
        raw = ctx.directive.param(index)
        if raw is None:
            return None
        try:
            return int(raw.strip())
        except ValueError:
            return None

    def _float_param(self, ctx: RuleContext, index: int) -> Optional[float]:
        """Parse a numeric parameter, or None if missing/non-numeric."""
        raw = ctx.directive.param(index)
        if raw is None:
            return None
        number, ok = to_float(raw)
        return number if ok else None

    def _name_param(self, ctx: RuleContext, index: int) -> Optional[str]:
        """A field-name parameter, or None if missing/blank."""
        raw = ctx.directive.param(index)
        if raw is None or not raw.strip():
            return None
        return raw.strip()

