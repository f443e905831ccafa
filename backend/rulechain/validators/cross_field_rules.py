"""Cross-field rules — outcomes that depend on another field of the same record.

The referenced name is resolved through the record accessor. A reference to a
field the record does not have fails closed.
"""

from typing import Optional

from rulechain.validators.base import BaseRule, RuleContext
from rulechain.validators.models import ErrorCode, RuleViolation
from rulechain.validators.predicates import as_text, humanize, is_empty, names_equal
from rulechain.validators.records import MISSING


class SameRule(BaseRule):
    """Value must equal the other field's value (string equality)."""

    @property
    def name(self) -> str:
        return "same"

    def check(self, ctx: RuleContext) -> Optional[RuleViolation]:
        other = self._name_param(ctx, 0)
        if other is None:
            return self._malformed(ctx, "missing field name")

        other_value = ctx.lookup(other)
        if other_value is MISSING:
            return self._unknown_field(ctx, other)

        if not names_equal(ctx.value, other_value):
            return self._violation(
                ErrorCode.SAME, ctx, f"The {ctx.label} and {humanize(other)} must match."
            )
        return None


class RequiredIfRule(BaseRule):
    """Empty value fails when the other field equals the expected value."""

    @property
    def name(self) -> str:
        return "required_if"

    def check(self, ctx: RuleContext) -> Optional[RuleViolation]:
        other = self._name_param(ctx, 0)
        if other is None or len(ctx.params) < 2:
            return self._malformed(ctx, "expected field name and value")

        if not is_empty(ctx.value):
            return None

        expected = ctx.params[1]
        other_value = ctx.lookup(other)
        if other_value is MISSING:
            return self._unknown_field(ctx, other)

        if as_text(other_value) == expected:
            return self._violation(
                ErrorCode.REQUIRED_IF,
                ctx,
                f"The {ctx.label} field is required when {humanize(other)} is {expected}.",
            )
        return None


class RequiredWithRule(BaseRule):
    """Empty value fails when the other field is present (non-empty)."""

    @property
    def name(self) -> str:
        return "required_with"

    def check(self, ctx: RuleContext) -> Optional[RuleViolation]:
        other = self._name_param(ctx, 0)
        if other is None:
            return self._malformed(ctx, "missing field name")

        if not is_empty(ctx.value):
            return None

        other_value = ctx.lookup(other)
        if other_value is MISSING:
            return self._unknown_field(ctx, other)

        if not is_empty(other_value):
            return self._violation(
                ErrorCode.REQUIRED_WITH,
                ctx,
                f"The {ctx.label} field is required when {humanize(other)} is present.",
            )
        return None
