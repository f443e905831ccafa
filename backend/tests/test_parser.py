"""Rule-chain parser tests."""

import pytest

from rulechain.validators.models import RuleDirective
from rulechain.validators.parser import parse_directive, parse_rule_chain, serialize_rule_chain


class TestParseRuleChain:

    def test_splits_rules_and_params(self):
        directives = parse_rule_chain("required|numeric|min:10")

        assert [d.name for d in directives] == ["required", "numeric", "min"]
        assert directives[0].params == ()
        assert directives[0].has_params is False
        assert directives[2].params == ("10",)
        assert directives[2].has_params is True

    def test_comma_separated_params(self):
        (directive,) = parse_rule_chain("between:3,5")
        assert directive.name == "between"
        assert directive.params == ("3", "5")

    @pytest.mark.parametrize("encoding", ["", None])
    def test_empty_encoding_yields_no_directives(self, encoding):
        assert parse_rule_chain(encoding) == []

    def test_only_first_colon_splits_name(self):
        directive = parse_directive("regex:a:b")
        assert directive.name == "regex"
        assert directive.params == ("a:b",)

    def test_unknown_rule_names_are_kept(self):
        assert [d.name for d in parse_rule_chain("frobnicate:1|required")] == ["frobnicate", "required"]

    def test_empty_param_blob(self):
        directive = parse_directive("min:")
        assert directive.has_params is True
        assert directive.params == ("",)

    def test_param_accessor(self):
        directive = parse_directive("required_if:type,admin")
        assert directive.param(0) == "type"
        assert directive.param(1) == "admin"
        assert directive.param(2) is None


class TestSerializeRuleChain:

    @pytest.mark.parametrize("encoding", [
        "required",
        "required|numeric|min:10",
        "string|between:3,5",
        "same:password_confirmation",
        "required_if:type,admin|alpha_dash",
        "nullable|email|max:255",
        "min:",
        "required||alpha",
        "a:1,,2",
    ])
    def test_round_trip(self, encoding):
        assert serialize_rule_chain(parse_rule_chain(encoding)) == encoding

    def test_encode_directive(self):
        assert RuleDirective(name="digits_between", params=("2", "4"), has_params=True).encode() == "digits_between:2,4"
        assert RuleDirective(name="required").encode() == "required"
