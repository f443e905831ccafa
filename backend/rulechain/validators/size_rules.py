"""Size rules — length or magnitude bounds, depending on the inferred value class.

    string  → compare character length against integer bounds
    numeric → compare the value as a float against numeric bounds
    unset   → no-op

digits and digits_between always measure character length.
"""

from abc import abstractmethod
from typing import Optional, Union

from rulechain.validators.base import BaseRule, RuleContext
from rulechain.validators.models import ErrorCode, RuleViolation, ValueClass
from rulechain.validators.predicates import to_float

Number = Union[int, float]


class SizeRule(BaseRule):
    """Bound check whose measure follows the value class."""

    rule_name: str = ""
    code: ErrorCode
    arity: int = 1
    numeric_template: str = ""
    string_template: str = ""

    @property
    def name(self) -> str:
        return self.rule_name

    @abstractmethod
    def passes(self, measure: Number, bounds: list[Number]) -> bool:
        """Compare the measured value against the parsed bounds."""

    def check(self, ctx: RuleContext) -> Optional[RuleViolation]:
        if ctx.value_class == ValueClass.STRING:
            bounds = self._bounds(ctx, self._int_param)
            if bounds is None:
                return None
            measure = len(ctx.text)
            template = self.string_template
        elif ctx.value_class == ValueClass.NUMERIC:
            bounds = self._bounds(ctx, self._float_param)
            if bounds is None:
                return None
            measure, ok = to_float(ctx.value)
            if not ok:
                # The numeric rule already reported this value
                return None
            template = self.numeric_template
        else:
            return None

        if self.passes(measure, bounds):
            return None
        return self._violation(self.code, ctx, template.format(ctx.label, *ctx.params))

    def _bounds(self, ctx: RuleContext, parse) -> Optional[list[Number]]:
        if len(ctx.params) != self.arity:
            return self._malformed(ctx, f"expected {self.arity} parameter(s), got {len(ctx.params)}")
        bounds = [parse(ctx, i) for i in range(self.arity)]
        if any(b is None for b in bounds):
            return self._malformed(ctx, "non-numeric bound")
        return bounds


class MinRule(SizeRule):
    rule_name = "min"
    code = ErrorCode.MIN
    numeric_template = "The {0} must be at least {1}."
    string_template = "The {0} must be at least {1} characters."

    def passes(self, measure, bounds):
        return measure >= bounds[0]


class MaxRule(SizeRule):
    rule_name = "max"
    code = ErrorCode.MAX
    numeric_template = "The {0} may not be greater than {1}."
    string_template = "The {0} may not be greater than {1} characters."

    def passes(self, measure, bounds):
        return measure <= bounds[0]


class BetweenRule(SizeRule):
    rule_name = "between"
    code = ErrorCode.BETWEEN
    arity = 2
    numeric_template = "The {0} must be between {1} and {2}."
    string_template = "The {0} must be between {1} and {2} characters."

    def passes(self, measure, bounds):
        return bounds[0] <= measure <= bounds[1]


class LessThanRule(SizeRule):
    rule_name = "lt"
    code = ErrorCode.LT
    numeric_template = "The {0} must be less than {1}."
    string_template = "The {0} must be less than {1} characters."

    def passes(self, measure, bounds):
        return measure < bounds[0]


class GreaterThanRule(SizeRule):
    rule_name = "gt"
    code = ErrorCode.GT
    numeric_template = "The {0} must be greater than {1}."
    string_template = "The {0} must be greater than {1} characters."

    def passes(self, measure, bounds):
        return measure > bounds[0]


class LessThanOrEqualRule(SizeRule):
    rule_name = "lte"
    code = ErrorCode.LTE
    numeric_template = "The {0} must be less than or equal to {1}."
    string_template = "The {0} must be less than or equal to {1} characters."

    def passes(self, measure, bounds):
        return measure <= bounds[0]


class GreaterThanOrEqualRule(SizeRule):
    rule_name = "gte"
    code = ErrorCode.GTE
    numeric_template = "The {0} must be greater than or equal to {1}."
    string_template = "The {0} must be greater than or equal to {1} characters."

    def passes(self, measure, bounds):
        return measure >= bounds[0]


class DigitsRule(SizeRule):
    """Character length must equal the parameter exactly."""

    rule_name = "digits"
    code = ErrorCode.DIGITS
    string_template = "The {0} must be {1} digits."

    def passes(self, measure, bounds):
        return measure == bounds[0]

    def check(self, ctx: RuleContext) -> Optional[RuleViolation]:
        bounds = self._bounds(ctx, self._int_param)
        if bounds is None or self.passes(len(ctx.text), bounds):
            return None
        return self._violation(self.code, ctx, self.string_template.format(ctx.label, *ctx.params))


class DigitsBetweenRule(DigitsRule):
    rule_name = "digits_between"
    code = ErrorCode.DIGITS_BETWEEN
    arity = 2
    string_template = "The {0} must be between {1} and {2} digits."

    def passes(self, measure, bounds):
        return bounds[0] <= measure <= bounds[1]
