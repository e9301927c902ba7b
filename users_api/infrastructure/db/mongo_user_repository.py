# Standard library imports
import logging
import re
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User, UpdatableFields
from ...domain.constants import UserFields
from ...domain.exceptions import PersistenceError, ValidationError

logger = logging.getLogger(__name__)


def build_search_filter(search: Optional[str]) -> Dict[str, Any]:
    """
    Build the find() filter for a user search
    
    Args:
        search: Substring to look for; empty or None matches every user
        
    Returns:
        MongoDB filter document
    """
    if not search:
        return {}
    pattern = re.escape(search)
    return {
        "$or": [
            {field: {"$regex": pattern, "$options": "i"}}
            for field in UserFields.SEARCHABLE
        ]
    }


def _to_object_id(user_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""
    
    def __init__(self, user_collection: AsyncIOMotorCollection) -> None:
        self.user_collection = user_collection
    
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID
        
        Args:
            user_id: User ID to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise PersistenceError(f"Error finding user by ID: {str(e)}") from e
        return self._document_to_user(document) if document else None
    
    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address
        
        Args:
            email: Email address to search for
            
        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None
        
        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except PyMongoError as e:
            raise PersistenceError(f"Error finding user by email: {str(e)}") from e
        return self._document_to_user(document) if document else None
    
    async def find_all(self, search: Optional[str] = None) -> List[User]:
        """
        List users matching an optional search string
        
        Args:
            search: Case-insensitive substring matched against email,
                first_name, last_name and city
            
        Returns:
            List of matching User domain models
        """
        query = build_search_filter(search)
        try:
            documents = await self.user_collection.find(query).to_list(length=None)
        except PyMongoError as e:
            raise PersistenceError(f"Error listing users: {str(e)}") from e
        return [self._document_to_user(document) for document in documents]
    
    async def insert(self, user: User) -> User:
        """
        Insert a new user
        
        Args:
            user: User domain model without an ID
            
        Returns:
            Saved User domain model with ID set
        """
        user_dict = self._user_to_dict(user)
        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError as e:
            raise self._duplicate_email(user.email) from e
        except PyMongoError as e:
            raise PersistenceError(f"Error saving user: {str(e)}") from e
        
        user_dict[UserFields.MONGO_ID] = result.inserted_id
        return self._document_to_user(user_dict)
    
    async def update_fields(self, user_id: str, fields: UpdatableFields) -> Optional[User]:
        """
        Apply a partial update to profile fields
        
        A None city is removed from the document; every other supplied
        field is set.
        
        Args:
            user_id: ID of the user to update
            fields: Validated updatable fields
            
        Returns:
            Updated User domain model, or None if no user has that ID
        """
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None
        
        to_set = {k: v for k, v in fields.items() if k in UserFields.UPDATABLE and v is not None}
        to_unset = {k: "" for k, v in fields.items() if k == UserFields.CITY and v is None}
        update: Dict[str, Any] = {}
        if to_set:
            update["$set"] = to_set
        if to_unset:
            update["$unset"] = to_unset
        if not update:
            return await self.find_by_id(user_id)
        
        try:
            document = await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                update,
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise self._duplicate_email(fields.get(UserFields.EMAIL, "")) from e
        except PyMongoError as e:
            raise PersistenceError(f"Error updating user: {str(e)}") from e
        return self._document_to_user(document) if document else None
    
    async def update_password(self, user_id: str, hashed_password: str) -> Optional[User]:
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None
        
        try:
            document = await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                {"$set": {UserFields.PASSWORD: hashed_password}},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise PersistenceError(f"Error updating user password: {str(e)}") from e
        return self._document_to_user(document) if document else None
    
    async def delete(self, user_id: str) -> Optional[User]:
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None
        
        try:
            document = await self.user_collection.find_one_and_delete({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise PersistenceError(f"Error deleting user: {str(e)}") from e
        return self._document_to_user(document) if document else None
    
    def _duplicate_email(self, email: str) -> ValidationError:
        logger.warning(f"Duplicate email rejected by unique index: {email}")
        return ValidationError({UserFields.EMAIL: f"Email {email} is already in use"})
    
    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model
        
        Args:
            document: MongoDB document dictionary
            
        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        
        return User(
            id=str(document[UserFields.MONGO_ID]),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.PASSWORD, ""),
            first_name=document.get(UserFields.FIRST_NAME, ""),
            last_name=document.get(UserFields.LAST_NAME, ""),
            city=document.get(UserFields.CITY),
        )
    
    def _user_to_dict(self, user: User) -> dict:
        """
        Convert User domain model to MongoDB document
        
        Args:
            user: User domain model
            
        Returns:
            Dictionary ready for MongoDB storage
        """
        user_dict = {
            UserFields.EMAIL: user.email,
            UserFields.PASSWORD: user.hashed_password,
            UserFields.FIRST_NAME: user.first_name,
            UserFields.LAST_NAME: user.last_name,
        }
        if user.city is not None:
            user_dict[UserFields.CITY] = user.city
        return user_dict
