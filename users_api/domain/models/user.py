from dataclasses import dataclass
from typing import Optional, TypedDict


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    email: str
    hashed_password: str
    first_name: str
    last_name: str
    city: Optional[str] = None


class UpdatableFields(TypedDict, total=False):
    """Fields a general update may change; the password is not one of them."""
    email: str
    first_name: str
    last_name: str
    city: Optional[str]
