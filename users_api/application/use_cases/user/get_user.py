# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError
from ...dto.user_dto import UserResponse


class GetUserUseCase:
    """Use case for getting a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> UserResponse:
        """
        Get a user by ID
        
        Raises:
            NotFoundError: If no user has that ID
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(user_id)
        return UserResponse.from_user(user)
