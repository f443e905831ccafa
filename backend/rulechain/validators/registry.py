"""Rule registry — maps chain rule names to rule handlers."""

from typing import Iterable, Optional

from rulechain.validators.base import BaseRule
from rulechain.validators.presence_rules import RequiredRule
from rulechain.validators.content_rules import (
    AlphaRule,
    AlphaNumRule,
    AlphaDashRule,
    AlphaSpaceRule,
    NumericRule,
    DateRule,
    EmailRule,
    IPRule,
    IPv4Rule,
    IPv6Rule,
    URLRule,
    CreditCardRule,
)
from rulechain.validators.size_rules import (
    MinRule,
    MaxRule,
    BetweenRule,
    LessThanRule,
    GreaterThanRule,
    LessThanOrEqualRule,
    GreaterThanOrEqualRule,
    DigitsRule,
    DigitsBetweenRule,
)
from rulechain.validators.cross_field_rules import SameRule, RequiredIfRule, RequiredWithRule


class RuleRegistry:
    """Name → rule lookup. Unregistered names resolve to None (no-op)."""

    def __init__(self, rules: Optional[Iterable[BaseRule]] = None):
        self._rules: dict[str, BaseRule] = {}
        for rule in rules or []:
            self.register(rule)

    def register(self, rule: BaseRule) -> None:
        """Register a rule under its name and aliases, replacing any existing entry."""
        for name in (rule.name, *rule.aliases):
            self._rules[name] = rule

    def unregister(self, name: str) -> None:
        """Remove a name from the vocabulary. Unknown names are ignored."""
        self._rules.pop(name, None)

    def get(self, name: str) -> Optional[BaseRule]:
        return self._rules.get(name)

    def names(self) -> list[str]:
        return sorted(self._rules)

    def __contains__(self, name: str) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)


def default_rules() -> list[BaseRule]:
    """The full built-in rule vocabulary."""
    return [
        RequiredRule(),
        AlphaRule(),
        AlphaNumRule(),
        AlphaDashRule(),
        AlphaSpaceRule(),
        NumericRule(),
        DateRule(),
        EmailRule(),
        IPRule(),
        IPv4Rule(),
        IPv6Rule(),
        URLRule(),
        CreditCardRule(),
        MinRule(),
        MaxRule(),
        BetweenRule(),
        LessThanRule(),
        GreaterThanRule(),
        LessThanOrEqualRule(),
        GreaterThanOrEqualRule(),
        DigitsRule(),
        DigitsBetweenRule(),
        SameRule(),
        RequiredIfRule(),
        RequiredWithRule(),
    ]


def default_registry() -> RuleRegistry:
    return RuleRegistry(default_rules())
