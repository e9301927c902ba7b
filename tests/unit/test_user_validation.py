"""
Unit tests for users_api.domain.validation
"""
import pytest
from users_api.domain.exceptions import ValidationError
from users_api.domain.validation import (
    ValidationResult,
    validate_new_user,
    validate_password,
    validate_user_update,
)
from users_api.domain.validation.user_validation import (
    PASSWORD_LENGTH_MESSAGE,
    PASSWORD_PATTERN_MESSAGE,
    PASSWORD_REQUIRED_MESSAGE,
)


def _valid_fields(**overrides):
    fields = {
        "email": "example@example.com",
        "password": "123mAnb123",
        "first_name": "another",
        "last_name": "user",
        "city": "Kiev",
    }
    fields.update(overrides)
    return fields


class TestValidateNewUser:
    """Tests for validate_new_user"""

    def test_valid_fields_pass(self):
        result = validate_new_user(_valid_fields())
        assert result.ok
        assert result.values["email"] == "example@example.com"
        assert result.values["password"] == "123mAnb123"

    def test_reference_invalid_request_reports_every_field(self):
        result = validate_new_user(
            _valid_fields(email="exampleample.com", password="123m", first_name="", last_name="")
        )
        assert not result.ok
        assert set(result.errors) == {"email", "password", "first_name", "last_name"}
        assert result.errors["email"] == "exampleample.com is not valid email"
        assert result.errors["password"] == PASSWORD_LENGTH_MESSAGE
        assert result.errors["first_name"] == "First Name is required"
        assert result.errors["last_name"] == "Last Name is required"

    def test_missing_fields_are_required(self):
        result = validate_new_user({})
        assert result.errors == {
            "email": "Email is required",
            "password": PASSWORD_REQUIRED_MESSAGE,
            "first_name": "First Name is required",
            "last_name": "Last Name is required",
        }

    def test_strings_are_trimmed(self):
        result = validate_new_user(
            _valid_fields(email="  a@example.com ", first_name=" Jon ", city="  Kyiv  ")
        )
        assert result.ok
        assert result.values["email"] == "a@example.com"
        assert result.values["first_name"] == "Jon"
        assert result.values["city"] == "Kyiv"

    def test_missing_city_is_accepted_and_omitted(self):
        fields = _valid_fields()
        del fields["city"]
        result = validate_new_user(fields)
        assert result.ok
        assert "city" not in result.values

    def test_blank_city_rejected(self):
        result = validate_new_user(_valid_fields(city="   "))
        assert result.errors == {"city": "City must contain between 1 and 25 characters"}

    def test_name_length_limit(self):
        assert validate_new_user(_valid_fields(first_name="a" * 25)).ok
        result = validate_new_user(_valid_fields(first_name="a" * 26, last_name="b" * 26))
        assert result.errors["first_name"] == "First Name must not exceed 25 characters"
        assert result.errors["last_name"] == "Last Name must not exceed 25 characters"

    def test_non_string_value_rejected(self):
        result = validate_new_user(_valid_fields(first_name=42))
        assert result.errors == {"first_name": "First Name must be a string"}


class TestValidatePassword:
    """Tests for validate_password"""

    @pytest.mark.parametrize("password", ["123mAnb123", "ABCDEFGH", "userOnePass"])
    def test_conforming_passwords(self, password):
        assert validate_password(password).ok

    @pytest.mark.parametrize(
        "password,message",
        [
            (None, PASSWORD_REQUIRED_MESSAGE),
            ("", PASSWORD_REQUIRED_MESSAGE),
            ("123m", PASSWORD_LENGTH_MESSAGE),
            ("alllowercase1", PASSWORD_PATTERN_MESSAGE),
            ("Has space 123", PASSWORD_PATTERN_MESSAGE),
            ("Symbols!123", PASSWORD_PATTERN_MESSAGE),
            ("Trailing123\n", PASSWORD_PATTERN_MESSAGE),
        ],
    )
    def test_rejected_passwords(self, password, message):
        result = validate_password(password)
        assert result.errors == {"password": message}


class TestValidateUserUpdate:
    """Tests for validate_user_update"""

    def test_only_supplied_fields_are_checked(self):
        result = validate_user_update({"first_name": "new Name", "city": "city"})
        assert result.ok
        assert result.values == {"first_name": "new Name", "city": "city"}

    def test_password_and_unknown_keys_are_ignored(self):
        result = validate_user_update({"password": "x", "role": "admin", "last_name": "Doe"})
        assert result.ok
        assert result.values == {"last_name": "Doe"}

    def test_required_fields_cannot_be_blanked(self):
        result = validate_user_update(
            {"email": "exampleample.com", "first_name": "", "last_name": "", "city": "Kiev"}
        )
        assert set(result.errors) == {"email", "first_name", "last_name"}

    def test_null_city_means_removal(self):
        result = validate_user_update({"city": None})
        assert result.ok
        assert result.values == {"city": None}


class TestValidationResult:
    """Tests for ValidationResult"""

    def test_merge_keeps_both_sides(self):
        left = ValidationResult(values={"a": 1}, errors={"x": "bad"})
        right = ValidationResult(values={"b": 2}, errors={"y": "worse"})
        merged = left.merge(right)
        assert merged.values == {"a": 1, "b": 2}
        assert merged.errors == {"x": "bad", "y": "worse"}

    def test_add_error_keeps_first_message(self):
        result = ValidationResult()
        result.add_error("email", "first")
        result.add_error("email", "second")
        assert result.errors == {"email": "first"}

    def test_raise_for_errors(self):
        ValidationResult().raise_for_errors()
        with pytest.raises(ValidationError) as exc_info:
            ValidationResult(errors={"email": "bad"}).raise_for_errors()
        assert exc_info.value.errors == {"email": "bad"}
