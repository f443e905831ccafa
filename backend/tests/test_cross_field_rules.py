"""Cross-field rule tests."""

import pytest


PASSWORDS = {"password": "secret", "password_confirmation": "secret"}


class TestSame:

    def test_matching_values_pass(self, check):
        assert check("same:password_confirmation", "secret", record=PASSWORDS, key="password") == []

    def test_mismatch_names_both_fields(self, check):
        record = {**PASSWORDS, "password_confirmation": "other"}
        assert check("same:password_confirmation", "secret", record=record, key="password") == [
            "The password and password confirmation must match."
        ]

    def test_camel_case_reference_resolves_to_internal_key(self, check):
        assert check("same:passwordConfirmation", "secret", record=PASSWORDS, key="password") == []

    def test_compares_as_text(self, check):
        assert check("same:pin", "1234", record={"pin": 1234}) == []

    def test_unknown_field_fails_closed(self, check):
        assert check("same:missing_field", "secret", record=PASSWORDS, key="password") == [
            "The password field refers to an unknown field missing field."
        ]

    def test_missing_parameter_passes_vacuously(self, check):
        assert check("same", "secret", record=PASSWORDS) == []


class TestRequiredIf:

    def test_empty_value_fails_when_other_matches(self, check):
        assert check("required_if:type,admin", "", record={"type": "admin"}, key="role") == [
            "The role field is required when type is admin."
        ]

    def test_empty_value_passes_when_other_differs(self, check):
        assert check("required_if:type,admin", "", record={"type": "user"}, key="role") == []

    def test_non_empty_value_passes_unconditionally(self, check):
        assert check("required_if:type,admin", "editor", record={"type": "admin"}) == []
        assert check("required_if:nope,admin", "editor", record={}) == []

    def test_boolean_other_value(self, check):
        assert check("required_if:active,true", None, record={"active": True}, key="reason") == [
            "The reason field is required when active is true."
        ]

    def test_unknown_field_fails_closed(self, check):
        assert check("required_if:kind,admin", "", record={"type": "admin"}, key="role") == [
            "The role field refers to an unknown field kind."
        ]

    @pytest.mark.parametrize("chain", ["required_if", "required_if:type", "required_if:,admin"])
    def test_malformed_parameters_pass_vacuously(self, check, chain):
        assert check(chain, "", record={"type": "admin"}) == []


class TestRequiredWith:

    def test_empty_value_fails_when_other_present(self, check):
        assert check("required_with:email", "", record={"email": "jane@example.com"}, key="phone") == [
            "The phone field is required when email is present."
        ]

    def test_empty_value_passes_when_other_empty(self, check):
        assert check("required_with:email", "", record={"email": ""}, key="phone") == []
        assert check("required_with:email", None, record={"email": None}, key="phone") == []

    def test_non_empty_value_passes(self, check):
        assert check("required_with:email", "555-0100", record={"email": "jane@example.com"}) == []

    def test_unknown_field_fails_closed(self, check):
        assert check("required_with:email", "", record={}, key="phone") == [
            "The phone field refers to an unknown field email."
        ]
