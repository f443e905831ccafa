"""Record-level validation tests."""

import dataclasses
from typing import Optional

import pytest
from pydantic import BaseModel, ConfigDict

from rulechain.validators import (
    VALID,
    ResultMode,
    RuleField,
    ValidationEngine,
    ValidationResult,
    validate,
)


class Registration(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_name: str = RuleField("required|alpha_dash|between:3,16", "", alias="userName")
    email: str = RuleField("required|email", "")
    age: Optional[str] = RuleField("nullable|numeric|min:18", None)
    password: str = RuleField("required|string|min:6|same:password_confirmation", "")
    password_confirmation: str = ""
    type: str = "user"
    role: str = RuleField("required_if:type,admin", "")


@dataclasses.dataclass
class Plain:
    a: str = ""
    b: int = 0


class TestValidRecords:

    def test_empty_chains_return_valid_sentinel(self, engine):
        assert engine.validate(Plain()) is VALID
        assert engine.validate({"a": "", "b": None}) is VALID

    def test_fully_valid_record(self, engine):
        record = Registration(
            userName="jane_doe",
            email="jane@example.com",
            age="30",
            password="secretpw",
            password_confirmation="secretpw",
        )
        result = engine.validate(record)

        assert result is VALID
        assert result.passed is True
        assert result.errors == {}
        assert result.error_count == 0

    def test_valid_sentinel_errors_cannot_be_modified(self, engine):
        result = engine.validate({"a": "x"}, {"a": ""})

        with pytest.raises(TypeError):
            result.errors["a"] = "poison"

        later = engine.validate({"b": "y"}, {"b": ""})
        assert later.errors == {}
        assert later.failed_fields == []


class TestInvalidRecords:

    @pytest.fixture
    def record(self):
        return Registration(
            userName="jd",
            email="",
            age="12",
            password="secret",
            password_confirmation="other",
            type="admin",
        )

    def test_accumulate_mode(self, engine, record):
        result = engine.validate(record)

        assert result.passed is False
        assert result.mode == ResultMode.ACCUMULATE
        assert result.errors == {
            "userName": ["The userName must be between 3 and 16 characters."],
            "email": ["The email field is required."],
            "age": ["The age must be at least 18."],
            "password": ["The password and password confirmation must match."],
            "role": ["The role field is required when type is admin."],
        }
        assert result.failed_fields == ["userName", "email", "age", "password", "role"]
        assert result.error_count == 5

    def test_fail_fast_mode(self, engine, record):
        result = engine.validate(record, mode=ResultMode.FAIL_FAST)

        assert result.mode == "fail_fast"
        assert result.errors["email"] == "The email field is required."
        assert result.errors["password"] == "The password and password confirmation must match."

    def test_mode_accepts_strings(self, engine, record):
        assert engine.validate(record, mode="first").mode == ResultMode.FAIL_FAST
        assert engine.validate(record, mode="all").mode == ResultMode.ACCUMULATE

    def test_engine_default_mode(self, record):
        result = ValidationEngine(mode="fail_fast").validate(record)
        assert isinstance(result.errors["email"], str)

    def test_idempotent(self, engine, record):
        assert engine.validate(record) == engine.validate(record)

    def test_does_not_mutate_record(self, engine, record):
        before = record.model_dump()
        engine.validate(record)
        assert record.model_dump() == before


class TestSideTable:

    def test_mapping_record(self, engine):
        data = {"password": "secret", "password_confirmation": "secret", "type": "admin", "role": ""}
        schema = {
            "password": "required|same:password_confirmation",
            "role": {"rules": "required_if:type,admin", "key": "userRole"},
        }
        result = engine.validate(data, schema)

        assert result.errors == {"userRole": ["The userRole field is required when type is admin."]}

    def test_value_class_does_not_leak_between_fields(self, engine):
        data = {"age": "5", "name": "x"}
        schema = {"age": "numeric|min:10", "name": "min:3"}

        result = engine.validate(data, schema)

        assert result.errors == {"age": ["The age must be at least 10."]}

    def test_unknown_reference_is_reported(self, engine):
        result = engine.validate({"password": "x"}, {"password": "same:confirm"})
        assert result.errors == {"password": ["The password field refers to an unknown field confirm."]}


class TestHelpers:

    def test_validate_field(self, engine):
        outcome = engine.validate_field("5", "numeric|min:10", "age")
        assert outcome.messages == ["The age must be at least 10."]

    def test_validate_field_with_siblings(self, engine):
        outcome = engine.validate_field("secret", "same:confirm", "password", record={"confirm": "secret"})
        assert not outcome.failed

    def test_module_level_validate(self):
        result = validate({"email": "nope"}, {"email": "email"}, mode="accumulate")
        assert result.errors == {"email": ["The email must be a valid email address."]}

    def test_build_without_failures_returns_sentinel(self):
        assert ValidationResult.build({}, ResultMode.FAIL_FAST) is VALID

    def test_failed_result_errors_are_read_only(self, engine):
        result = engine.validate({"age": "abc"}, {"age": "numeric"})

        with pytest.raises(TypeError):
            result.errors["other"] = ["injected"]
        assert result.model_dump()["errors"] == {"age": ["The age must be a number."]}
