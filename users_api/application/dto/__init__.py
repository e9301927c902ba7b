from .user_dto import (
    PasswordUpdateRequest,
    UserCreateRequest,
    UserEnvelope,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "PasswordUpdateRequest",
    "UserCreateRequest",
    "UserEnvelope",
    "UserListResponse",
    "UserResponse",
    "UserUpdateRequest",
]
