# Standard library imports
from typing import List, Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.user_dto import UserResponse


class ListUsersUseCase:
    """Use case for listing users, optionally filtered by a search string"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, search: Optional[str] = None) -> List[UserResponse]:
        users = await self.user_repository.find_all(search or None)
        return [UserResponse.from_user(user) for user in users]
