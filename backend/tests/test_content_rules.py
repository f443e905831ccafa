"""Presence and content rule tests."""

from decimal import Decimal

import pytest

from rulechain.validators.models import ResultMode


class TestRequired:

    @pytest.mark.parametrize("value", ["", None, 0, False, []])
    def test_empty_value_fails(self, check, value):
        assert check("required", value, key="first_name") == ["The first name field is required."]

    @pytest.mark.parametrize("value", ["x", 1, True, ["a"]])
    def test_present_value_passes(self, check, value):
        assert check("required", value) == []

    def test_fail_fast_stops_after_required(self, check):
        chain = "required|string|min:3"
        assert check(chain, "", key="name", mode=ResultMode.FAIL_FAST) == ["The name field is required."]

    def test_accumulate_keeps_going_after_required(self, check):
        assert check("required|string|min:3", "", key="name") == [
            "The name field is required.",
            "The name must be at least 3 characters.",
        ]


class TestNullable:

    def test_empty_value_short_circuits(self, check):
        assert check("nullable|email", "", key="email") == []
        assert check("nullable|numeric|min:5", None) == []

    def test_non_empty_value_continues(self, check):
        assert check("nullable|email", "bad", key="email") == ["The email must be a valid email address."]

    def test_takes_effect_where_encountered(self, check):
        assert check("numeric|nullable|min:5", 0) == []

    def test_discards_earlier_messages_in_accumulate_mode(self, check):
        assert check("required|nullable", "") == []

    def test_not_reached_in_fail_fast_mode(self, check):
        assert check("required|nullable", "", key="nickname", mode=ResultMode.FAIL_FAST) == [
            "The nickname field is required."
        ]


class TestCharacterClassRules:

    @pytest.mark.parametrize("rule", ["alpha", "string"])
    def test_alpha_and_string(self, check, rule):
        assert check(rule, "abc", key="name") == []
        assert check(rule, "abc1", key="name") == ["The name must only contain letters."]

    def test_alpha_num(self, check):
        assert check("alpha_num", "abc123", key="code") == []
        assert check("alpha_num", "abc-123", key="code") == ["The code must only contain letters and numbers."]

    def test_alpha_dash(self, check):
        assert check("alpha_dash", "my-slug_1", key="slug") == []
        assert check("alpha_dash", "my slug", key="slug") == [
            "The slug must only contain letters, numbers, dashes and underscores."
        ]

    def test_alpha_space(self, check):
        assert check("alpha_space", "Jane Doe", key="full_name") == []
        assert check("alpha_space", "Jane!", key="full_name") == [
            "The full name must only contain letters, numbers, dashes, underscores and spaces."
        ]

    def test_empty_value_passes_content_rules(self, check):
        assert check("alpha|alpha_num|alpha_dash|alpha_space|numeric|email|date|url", "") == []

    def test_missing_value_needs_required_to_fail(self, check):
        assert check("email", None) == []
        assert check("required|email", None, key="email") == ["The email field is required."]


class TestNumeric:

    @pytest.mark.parametrize("value", ["12", "-3.5", 42, 0.25, Decimal("12.5")])
    def test_numbers_pass(self, check, value):
        assert check("numeric", value) == []

    @pytest.mark.parametrize("value", ["twelve", "12a", True, "1_000", "\u0661\u0662"])
    def test_non_numbers_fail(self, check, value):
        assert check("numeric", value, key="age") == ["The age must be a number."]


class TestFormatRules:

    @pytest.mark.parametrize("chain,good,bad,message", [
        ("date", "2024-01-15", "banana", "The field is not a valid date."),
        ("email", "jane@example.com", "jane@", "The field must be a valid email address."),
        ("ip", "10.0.0.1", "10.0.0", "The field must be a valid IP address."),
        ("ipv4", "10.0.0.1", "::1", "The field must be a valid IPv4 address."),
        ("ipv6", "::1", "10.0.0.1", "The field must be a valid IPv6 address."),
        ("url", "https://example.com", "example", "The field format is invalid."),
        ("credit_card", "4111111111111111", "1234", "The field must have a valid credit card number."),
    ])
    def test_format(self, check, chain, good, bad, message):
        assert check(chain, good) == []
        assert check(chain, bad) == [message]

    def test_format_rules_do_not_classify(self, check):
        # email leaves the value class unset, so max is a no-op
        assert check("email|max:3", "jane@example.com") == []
