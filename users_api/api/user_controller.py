# Standard library imports
from typing import Optional

# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ..application.dto.user_dto import (
    PasswordUpdateRequest,
    UserCreateRequest,
    UserEnvelope,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)
from ..application.use_cases.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserPasswordUseCase,
    UpdateUserUseCase,
)
from ..di.base_container import BaseContainer
from .dependencies import get_container, validate_object_id


router = APIRouter(tags=["users"])


@router.get("/{user_id}", response_model=UserEnvelope, response_model_exclude_none=True)
async def get_user(
    user_id: str = Depends(validate_object_id),
    container: BaseContainer = Depends(get_container),
) -> UserEnvelope:
    """
    Get a user by ID
    
    Args:
        user_id: ID of the user (validated ObjectId)
        container: Application DI container
        
    Returns:
        UserEnvelope wrapping the user
    """
    get_user_use_case = container.get(GetUserUseCase)
    user = await get_user_use_case.execute(user_id)
    return UserEnvelope(user=user)


@router.get("", response_model=UserListResponse, response_model_exclude_none=True)
async def list_users(
    search: Optional[str] = None,
    container: BaseContainer = Depends(get_container),
) -> UserListResponse:
    """
    List users, optionally filtered by a search string
    
    Args:
        search: Case-insensitive substring matched against email, names and city
        container: Application DI container
        
    Returns:
        UserListResponse with matching users (possibly empty)
    """
    list_users_use_case = container.get(ListUsersUseCase)
    users = await list_users_use_case.execute(search)
    return UserListResponse(users=users)


@router.post("", response_model=UserResponse, response_model_exclude_none=True)
async def create_user(
    request: Optional[UserCreateRequest] = None,
    container: BaseContainer = Depends(get_container),
) -> UserResponse:
    """
    Create a new user
    
    Returns:
        UserResponse with the created user (not wrapped)
    """
    create_user_use_case = container.get(CreateUserUseCase)
    return await create_user_use_case.execute(request or UserCreateRequest())


@router.patch("/{user_id}", response_model=UserEnvelope, response_model_exclude_none=True)
async def update_user(
    request: Optional[UserUpdateRequest] = None,
    user_id: str = Depends(validate_object_id),
    container: BaseContainer = Depends(get_container),
) -> UserEnvelope:
    """
    Partially update a user's profile; a password in the body is ignored
    
    Returns:
        UserEnvelope wrapping the updated user
    """
    update_user_use_case = container.get(UpdateUserUseCase)
    user = await update_user_use_case.execute(user_id, request or UserUpdateRequest())
    return UserEnvelope(user=user)


@router.patch("/{user_id}/password", response_model=UserEnvelope, response_model_exclude_none=True)
async def update_user_password(
    request: Optional[PasswordUpdateRequest] = None,
    user_id: str = Depends(validate_object_id),
    container: BaseContainer = Depends(get_container),
) -> UserEnvelope:
    """
    Replace a user's password; other fields in the body are ignored
    
    Returns:
        UserEnvelope wrapping the user
    """
    update_password_use_case = container.get(UpdateUserPasswordUseCase)
    user = await update_password_use_case.execute(user_id, request or PasswordUpdateRequest())
    return UserEnvelope(user=user)


@router.delete("/{user_id}", response_model=UserEnvelope, response_model_exclude_none=True)
async def delete_user(
    user_id: str = Depends(validate_object_id),
    container: BaseContainer = Depends(get_container),
) -> UserEnvelope:
    """
    Permanently delete a user
    
    Returns:
        UserEnvelope wrapping the deleted user
    """
    delete_user_use_case = container.get(DeleteUserUseCase)
    user = await delete_user_use_case.execute(user_id)
    return UserEnvelope(user=user)
