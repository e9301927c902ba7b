from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import MongoConnection

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Database connection provider - the only place collections are registered"""
    
    @staticmethod
    def register(container: "BaseContainer", connection: MongoConnection) -> None:
        """
        Register the connection handle and its collections.
        The connection must already be connected.
        """
        container.register_singleton(MongoConnection, connection)
        container.register_singleton("user_collection", connection.get_user_collection())
