"""Content rules — character classes and format checks.

Character-class rules also classify the value (string or numeric) for the size
rules that follow them in the same chain. Empty values pass every content rule;
presence is the job of ``required``.
"""

from typing import Callable, Optional

from rulechain.validators.base import BaseRule, RuleContext
from rulechain.validators.models import ErrorCode, RuleViolation, ValueClass
from rulechain.validators.predicates import (
    is_alpha,
    is_alpha_numeric,
    is_alpha_dash,
    is_alpha_space,
    is_float_parseable,
    is_date,
    is_email,
    is_ip,
    is_ipv4,
    is_ipv6,
    is_url,
    is_credit_card,
)


class PredicateRule(BaseRule):
    """A rule that checks the value's text against a single predicate.

    An empty value always passes; pair with required when absence must fail.
    """

    rule_name: str = ""
    code: ErrorCode
    template: str = ""
    predicate: Callable[[str], bool]

    @property
    def name(self) -> str:
        return self.rule_name

    def check(self, ctx: RuleContext) -> Optional[RuleViolation]:
        if ctx.text == "":
            return None
        if not type(self).predicate(ctx.text):
            return self._violation(self.code, ctx, self.template.format(label=ctx.label))
        return None


class AlphaRule(PredicateRule):
    rule_name = "alpha"
    code = ErrorCode.ALPHA
    template = "The {label} must only contain letters."
    predicate = is_alpha
    classifies = ValueClass.STRING

    @property
    def aliases(self) -> tuple[str, ...]:
        return ("string",)


class AlphaNumRule(PredicateRule):
    rule_name = "alpha_num"
    code = ErrorCode.ALPHA_NUM
    template = "The {label} must only contain letters and numbers."
    predicate = is_alpha_numeric
    classifies = ValueClass.STRING


class AlphaDashRule(PredicateRule):
    rule_name = "alpha_dash"
    code = ErrorCode.ALPHA_DASH
    template = "The {label} must only contain letters, numbers, dashes and underscores."
    predicate = is_alpha_dash
    classifies = ValueClass.STRING


class AlphaSpaceRule(PredicateRule):
    rule_name = "alpha_space"
    code = ErrorCode.ALPHA_SPACE
    template = "The {label} must only contain letters, numbers, dashes, underscores and spaces."
    predicate = is_alpha_space
    classifies = ValueClass.STRING


class NumericRule(PredicateRule):
    """Value must parse as a finite number; later size rules compare magnitude."""

    rule_name = "numeric"
    code = ErrorCode.NUMERIC
    template = "The {label} must be a number."
    predicate = is_float_parseable
    classifies = ValueClass.NUMERIC


class DateRule(PredicateRule):
    rule_name = "date"
    code = ErrorCode.DATE
    template = "The {label} is not a valid date."
    predicate = is_date


class EmailRule(PredicateRule):
    rule_name = "email"
    code = ErrorCode.EMAIL
    template = "The {label} must be a valid email address."
    predicate = is_email


class IPRule(PredicateRule):
    rule_name = "ip"
    code = ErrorCode.IP
    template = "The {label} must be a valid IP address."
    predicate = is_ip


class IPv4Rule(PredicateRule):
    rule_name = "ipv4"
    code = ErrorCode.IPV4
    template = "The {label} must be a valid IPv4 address."
    predicate = is_ipv4


class IPv6Rule(PredicateRule):
    rule_name = "ipv6"
    code = ErrorCode.IPV6
    template = "The {label} must be a valid IPv6 address."
    predicate = is_ipv6


class URLRule(PredicateRule):
    rule_name = "url"
    code = ErrorCode.URL
    template = "The {label} format is invalid."
    predicate = is_url


class CreditCardRule(PredicateRule):
    rule_name = "credit_card"
    code = ErrorCode.CREDIT_CARD
    template = "The {label} must have a valid credit card number."
    predicate = is_credit_card
