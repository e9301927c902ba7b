from .user_validation import (
    ValidationResult,
    validate_new_user,
    validate_password,
    validate_user_update,
)

__all__ = [
    "ValidationResult",
    "validate_new_user",
    "validate_password",
    "validate_user_update",
]
