# External package imports
from bson import ObjectId
from fastapi import Request

# Local application imports
from ..di.base_container import BaseContainer
from ..domain.exceptions import MalformedIdentifierError


def get_container(request: Request) -> BaseContainer:
    """
    FastAPI dependency returning the container built at startup
    
    Args:
        request: Incoming request (its app carries the container on state)
        
    Returns:
        The application's DI container
    """
    return request.app.state.container


async def validate_object_id(user_id: str) -> str:
    """
    FastAPI dependency guarding the user_id path parameter
    
    Args:
        user_id: Raw path parameter
        
    Returns:
        The same id, once it is known to be a valid ObjectId
        
    Raises:
        MalformedIdentifierError: If user_id is not an ObjectId
    """
    if not ObjectId.is_valid(user_id):
        raise MalformedIdentifierError(user_id)
    return user_id
