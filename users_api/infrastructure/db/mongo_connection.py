# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING

# Local application imports
from ...core.config import Settings
from ...domain.constants import UserFields

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"


class MongoConnection:
    """
    Explicit MongoDB persistence handle.
    
    Created once at startup, passed to whatever needs collections, and closed
    at shutdown. Nothing in the process reaches the database without it.
    """
    
    def __init__(
        self,
        uri: str,
        database_name: str,
        client: Optional[AsyncIOMotorClient] = None,
    ) -> None:
        self.uri = uri
        self.database_name = database_name
        self._client: Optional[AsyncIOMotorClient] = client
        self._database: Optional[AsyncIOMotorDatabase] = None
    
    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoConnection":
        return cls(settings.mongo_uri, settings.mongo_database_name)
    
    def connect(self) -> AsyncIOMotorDatabase:
        """
        Open the client (if not already open) and select the database
        
        Returns:
            MongoDB database instance
        """
        if self._database is not None:
            return self._database
        
        if self._client is None:
            self._client = AsyncIOMotorClient(self.uri)
        self._database = self._client[self.database_name]
        logger.info(f"MongoDB client ready for database '{self.database_name}'")
        return self._database
    
    @property
    def database(self) -> AsyncIOMotorDatabase:
        if self._database is None:
            raise RuntimeError("MongoConnection is not connected; call connect() first")
        return self._database
    
    def get_user_collection(self) -> AsyncIOMotorCollection:
        """
        Get users collection from MongoDB
        
        Returns:
            MongoDB collection for users
        """
        return self.database[USERS_COLLECTION]
    
    async def ensure_indexes(self) -> None:
        """Create the unique email index backing email uniqueness."""
        await self.get_user_collection().create_index(
            [(UserFields.EMAIL, ASCENDING)],
            unique=True,
            name="email_unique",
        )
        logger.info("Ensured unique index on users.email")
    
    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            logger.info("MongoDB client closed")
        self._client = None
        self._database = None
