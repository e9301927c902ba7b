from abc import ABC, abstractmethod
from typing import List, Optional
from ..models.user import User, UpdatableFields


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email address"""
        pass
    
    @abstractmethod
    async def find_all(self, search: Optional[str] = None) -> List[User]:
        """List users, optionally filtered by a case-insensitive substring over searchable fields"""
        pass
    
    @abstractmethod
    async def insert(self, user: User) -> User:
        """Insert a new user and return it with its ID set"""
        pass
    
    @abstractmethod
    async def update_fields(self, user_id: str, fields: UpdatableFields) -> Optional[User]:
        """Apply a partial update; returns the updated user or None if not found"""
        pass
    
    @abstractmethod
    async def update_password(self, user_id: str, hashed_password: str) -> Optional[User]:
        """Replace the stored password hash; returns the updated user or None if not found"""
        pass
    
    @abstractmethod
    async def delete(self, user_id: str) -> Optional[User]:
        """Delete a user; returns the removed user or None if not found"""
        pass
