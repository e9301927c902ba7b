from .create_user import CreateUserUseCase
from .get_user import GetUserUseCase
from .list_users import ListUsersUseCase
from .update_user import UpdateUserUseCase
from .update_user_password import UpdateUserPasswordUseCase
from .delete_user import DeleteUserUseCase

__all__ = [
    "CreateUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
    "UpdateUserPasswordUseCase",
    "DeleteUserUseCase",
]
