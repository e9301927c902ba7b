# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.constants import UserFields
from ....domain.exceptions import NotFoundError
from ....domain.validation import validate_password
from ....core.security import hash_password
from ...dto.user_dto import PasswordUpdateRequest, UserResponse

logger = logging.getLogger(__name__)


class UpdateUserPasswordUseCase:
    """Use case for replacing a user's password"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, request: PasswordUpdateRequest) -> UserResponse:
        """
        Validate, hash and store a new password; no other field changes
        
        Raises:
            ValidationError: If the password does not meet the rules
            NotFoundError: If no user has that ID
        """
        result = validate_password(request.password)
        result.raise_for_errors()
        
        hashed_password = hash_password(result.values[UserFields.PASSWORD])
        user = await self.user_repository.update_password(user_id, hashed_password)
        if user is None:
            raise NotFoundError(user_id)
        
        logger.info(f"Updated password for user {user_id}")
        return UserResponse.from_user(user)
