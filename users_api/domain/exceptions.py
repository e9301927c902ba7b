"""
Error taxonomy for the Users API.

Every error raised by use cases and repositories inherits from UsersApiError.
The API layer translates each type into an HTTP response; none of them is
fatal to the process.
"""

# Standard library imports
from typing import Any, Dict, Optional


class UsersApiError(Exception):
    """Base exception for all Users API errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(UsersApiError):
    """Raised when one or more user fields fail validation."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__("User validation failed", details={"errors": errors})
        self.errors = dict(errors)


class NotFoundError(UsersApiError):
    """Raised when no user exists with the requested identifier."""

    def __init__(self, user_id: str):
        super().__init__(f"User {user_id} not found")
        self.user_id = user_id


class MalformedIdentifierError(UsersApiError):
    """Raised when an identifier is not a valid ObjectId."""

    def __init__(self, value: Any):
        super().__init__(f"Supplied id is invalid: {value!r}")
        self.value = value


class PersistenceError(UsersApiError):
    """Raised when the database call itself fails."""
    pass


class PasswordHashingError(PersistenceError):
    """Raised when the password hash could not be produced."""
    pass
