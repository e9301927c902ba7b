"""
User field validation.

Each rule is a plain function over one field returning the cleaned value
and an error message (or None). The public validators compose those rules
for the create, update and password paths and return a ValidationResult
instead of raising.
"""

# Standard library imports
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

# External package imports
from email_validator import EmailNotValidError, validate_email as check_email_syntax

# Local application imports
from ..constants import UserFields
from ..exceptions import ValidationError

NAME_MAX_LENGTH = 25
CITY_MIN_LENGTH = 1
CITY_MAX_LENGTH = 25
PASSWORD_MIN_LENGTH = 8

_PASSWORD_PATTERN = re.compile(r"(?=.*[A-Z])[0-9a-zA-Z]{8,}")

PASSWORD_REQUIRED_MESSAGE = "Password is required"
PASSWORD_LENGTH_MESSAGE = "Password must contain at least 8 characters"
PASSWORD_PATTERN_MESSAGE = (
    "Password must contain only alphanumeric characters(at least 8) "
    "with at least one capital letter"
)

FIELD_LABELS: Dict[str, str] = {
    UserFields.EMAIL: "Email",
    UserFields.PASSWORD: "Password",
    UserFields.FIRST_NAME: "First Name",
    UserFields.LAST_NAME: "Last Name",
    UserFields.CITY: "City",
}

FieldRule = Callable[[Any], Tuple[Any, Optional[str]]]


@dataclass
class ValidationResult:
    """Outcome of a validation pass: cleaned values plus per-field errors."""
    values: Dict[str, Any] = field(default_factory=dict)
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Combine two results; errors from either side are kept."""
        return ValidationResult(
            values={**self.values, **other.values},
            errors={**self.errors, **other.errors},
        )

    def add_error(self, field_name: str, message: str) -> None:
        self.errors.setdefault(field_name, message)

    def raise_for_errors(self) -> None:
        """
        Raise ValidationError if any field failed.
        
        Raises:
            ValidationError: With the field -> message map
        """
        if self.errors:
            raise ValidationError(self.errors)


def _not_a_string(field_name: str) -> str:
    return f"{FIELD_LABELS[field_name]} must be a string"


def _required_text(field_name: str, value: Any) -> Tuple[Optional[str], Optional[str]]:
    if value is None:
        return None, f"{FIELD_LABELS[field_name]} is required"
    if not isinstance(value, str):
        return None, _not_a_string(field_name)
    cleaned = value.strip()
    if not cleaned:
        return None, f"{FIELD_LABELS[field_name]} is required"
    return cleaned, None


def check_email(value: Any) -> Tuple[Optional[str], Optional[str]]:
    cleaned, error = _required_text(UserFields.EMAIL, value)
    if error:
        return None, error
    try:
        check_email_syntax(cleaned, check_deliverability=False)
    except EmailNotValidError:
        return None, f"{cleaned} is not valid email"
    return cleaned, None


def check_password(value: Any) -> Tuple[Optional[str], Optional[str]]:
    if value is None or value == "":
        return None, PASSWORD_REQUIRED_MESSAGE
    if not isinstance(value, str):
        return None, _not_a_string(UserFields.PASSWORD)
    if len(value) < PASSWORD_MIN_LENGTH:
        return None, PASSWORD_LENGTH_MESSAGE
    if not _PASSWORD_PATTERN.fullmatch(value):
        return None, PASSWORD_PATTERN_MESSAGE
    return value, None


def _name_rule(field_name: str) -> FieldRule:
    def check_name(value: Any) -> Tuple[Optional[str], Optional[str]]:
        cleaned, error = _required_text(field_name, value)
        if error:
            return None, error
        if len(cleaned) > NAME_MAX_LENGTH:
            return None, f"{FIELD_LABELS[field_name]} must not exceed {NAME_MAX_LENGTH} characters"
        return cleaned, None

    return check_name


def check_city(value: Any) -> Tuple[Optional[str], Optional[str]]:
    """City is optional; None means "no city"."""
    if value is None:
        return None, None
    if not isinstance(value, str):
        return None, _not_a_string(UserFields.CITY)
    cleaned = value.strip()
    if not CITY_MIN_LENGTH <= len(cleaned) <= CITY_MAX_LENGTH:
        return None, (
            f"City must contain between {CITY_MIN_LENGTH} and {CITY_MAX_LENGTH} characters"
        )
    return cleaned, None


check_first_name = _name_rule(UserFields.FIRST_NAME)
check_last_name = _name_rule(UserFields.LAST_NAME)

PROFILE_RULES: Dict[str, FieldRule] = {
    UserFields.EMAIL: check_email,
    UserFields.FIRST_NAME: check_first_name,
    UserFields.LAST_NAME: check_last_name,
    UserFields.CITY: check_city,
}


def _apply_rules(fields: Mapping[str, Any], rules: Mapping[str, FieldRule]) -> ValidationResult:
    result = ValidationResult()
    for field_name, rule in rules.items():
        cleaned, error = rule(fields.get(field_name))
        if error:
            result.add_error(field_name, error)
        else:
            result.values[field_name] = cleaned
    return result


def validate_password(password: Any) -> ValidationResult:
    """
    Validate a plaintext password.
    
    Args:
        password: Candidate password
        
    Returns:
        ValidationResult keyed by "password"
    """
    return _apply_rules({UserFields.PASSWORD: password}, {UserFields.PASSWORD: check_password})


def validate_new_user(fields: Mapping[str, Any]) -> ValidationResult:
    """
    Validate every field of a user about to be created.
    
    Missing required fields are reported; a missing city is accepted and
    left out of the cleaned values.
    
    Args:
        fields: Raw field values (email, password, first_name, last_name, city)
        
    Returns:
        ValidationResult with trimmed values or per-field errors
    """
    result = _apply_rules(fields, PROFILE_RULES).merge(
        validate_password(fields.get(UserFields.PASSWORD))
    )
    if result.values.get(UserFields.CITY) is None:
        result.values.pop(UserFields.CITY, None)
    return result


def validate_user_update(fields: Mapping[str, Any]) -> ValidationResult:
    """
    Validate only the profile fields present in a partial update.
    
    Keys outside the updatable set are ignored. A None city is kept in the
    cleaned values and means the city is removed.
    
    Args:
        fields: Supplied field values
        
    Returns:
        ValidationResult for the supplied fields
    """
    supplied = {name: rule for name, rule in PROFILE_RULES.items() if name in fields}
    return _apply_rules(fields, supplied)
