"""Presence rules — required.

``nullable`` is not a rule object: it stops the chain, so the evaluator handles it.
"""

from typing import Optional

from rulechain.validators.base import BaseRule, RuleContext
from rulechain.validators.models import ErrorCode, RuleViolation
from rulechain.validators.predicates import is_empty

NULLABLE = "nullable"


class RequiredRule(BaseRule):
    """Fails when the value is empty or absent."""

    @property
    def name(self) -> str:
        return "required"

    def check(self, ctx: RuleContext) -> Optional[RuleViolation]:
        if is_empty(ctx.value):
            return self._violation(ErrorCode.REQUIRED, ctx, f"The {ctx.label} field is required.")
        return None
