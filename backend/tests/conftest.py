"""Shared fixtures for rulechain tests."""

import pytest

from rulechain.validators import (
    FieldEvaluator,
    RecordAccessor,
    ResultMode,
    ValidationEngine,
    parse_rule_chain,
)


@pytest.fixture
def evaluator():
    return FieldEvaluator()


@pytest.fixture
def engine():
    return ValidationEngine(mode=ResultMode.ACCUMULATE)


@pytest.fixture
def check(evaluator):
    """Run one chain against one value and return the messages."""

    def _check(chain, value, record=None, key="field", mode=ResultMode.ACCUMULATE):
        accessor = RecordAccessor.from_mapping(record or {})
        outcome = evaluator.evaluate(value, parse_rule_chain(chain), accessor, key, mode)
        return outcome.messages

    return _check
