# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.constants import UserFields
from ....domain.validation import validate_new_user
from ....core.security import hash_password
from ...dto.user_dto import UserCreateRequest, UserResponse

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, request: UserCreateRequest) -> UserResponse:
        """
        Create a new user
        
        Args:
            request: Creation request with user details
            
        Returns:
            UserResponse with created user information
            
        Raises:
            ValidationError: If any field is invalid or the email is taken
        """
        result = validate_new_user(request.model_dump())
        
        # Check if user already exists
        email = result.values.get(UserFields.EMAIL)
        if email and await self.user_repository.find_by_email(email) is not None:
            result.add_error(UserFields.EMAIL, f"Email {email} is already in use")
        
        result.raise_for_errors()
        
        new_user = User(
            id=None,  # Will be set by repository
            email=result.values[UserFields.EMAIL],
            hashed_password=hash_password(result.values[UserFields.PASSWORD]),
            first_name=result.values[UserFields.FIRST_NAME],
            last_name=result.values[UserFields.LAST_NAME],
            city=result.values.get(UserFields.CITY),
        )
        
        saved_user = await self.user_repository.insert(new_user)
        logger.info(f"Created user {saved_user.id}")
        
        return UserResponse.from_user(saved_user)
