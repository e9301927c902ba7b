from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from ...domain.models.user import User, UpdatableFields


class UserCreateRequest(BaseModel):
    """DTO for user creation request (rules are applied by the use case)"""
    model_config = ConfigDict(extra="ignore")

    email: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    city: Optional[str] = None


class UserUpdateRequest(BaseModel):
    """DTO for partial user update. Unknown keys, password included, are dropped."""
    model_config = ConfigDict(extra="ignore")

    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    city: Optional[str] = None

    def to_updatable_fields(self) -> UpdatableFields:
        """Only the fields the client actually sent."""
        return UpdatableFields(**self.model_dump(exclude_unset=True))


class PasswordUpdateRequest(BaseModel):
    """DTO for password update request"""
    model_config = ConfigDict(extra="ignore")

    password: Optional[str] = None


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    email: str
    first_name: str
    last_name: str
    city: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            city=user.city,
        )


class UserEnvelope(BaseModel):
    user: UserResponse


class UserListResponse(BaseModel):
    users: List[UserResponse]
