# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for permanently deleting a user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> UserResponse:
        """
        Delete a user and return the removed record
        
        Raises:
            NotFoundError: If no user has that ID
        """
        user = await self.user_repository.delete(user_id)
        if user is None:
            raise NotFoundError(user_id)
        
        logger.info(f"Deleted user {user_id}")
        return UserResponse.from_user(user)
