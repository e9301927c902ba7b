# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import UpdatableFields
from ....domain.constants import UserFields
from ....domain.exceptions import NotFoundError
from ....domain.validation import validate_user_update
from ...dto.user_dto import UserUpdateRequest, UserResponse

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for partially updating a user's profile fields"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, request: UserUpdateRequest) -> UserResponse:
        """
        Update the supplied profile fields of a user
        
        Only fields present in the request are validated and written. The
        password cannot be changed here.
        
        Args:
            user_id: ID of the user to update
            request: Partial update request
            
        Returns:
            UserResponse with the updated user
            
        Raises:
            ValidationError: If a supplied field is invalid or the email is taken
            NotFoundError: If no user has that ID
        """
        result = validate_user_update(request.to_updatable_fields())
        
        email = result.values.get(UserFields.EMAIL)
        if email:
            owner = await self.user_repository.find_by_email(email)
            if owner is not None and owner.id != user_id:
                result.add_error(UserFields.EMAIL, f"Email {email} is already in use")
        
        result.raise_for_errors()
        
        user = await self.user_repository.update_fields(user_id, UpdatableFields(**result.values))
        if user is None:
            raise NotFoundError(user_id)
        
        logger.info(f"Updated user {user_id}: {sorted(result.values)}")
        return UserResponse.from_user(user)
