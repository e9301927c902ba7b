"""
Shared pytest fixtures for users_api tests.
"""
import os
import re
from dataclasses import replace
from typing import Dict, List, Optional
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId

from users_api.core.config import reset_settings
from users_api.core.security import hash_password
from users_api.domain.constants import UserFields
from users_api.domain.exceptions import ValidationError
from users_api.domain.models.user import User, UpdatableFields
from users_api.domain.repositories.user_repository import UserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "PORT": "3100",
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_users_db",
        "BCRYPT_ROUNDS": "4",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        reset_settings()
        yield env_vars
    reset_settings()


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.host = "127.0.0.1"
    mock.port = 3100
    mock.log_level = "INFO"
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.bcrypt_rounds = 4

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("users_api.core.config.get_settings", return_value=mock), patch(
        "users_api.core.security.get_settings", return_value=mock
    ):
        yield mock


class InMemoryUserRepository(UserRepository):
    """UserRepository backed by a dict, with the same semantics as the Mongo one."""

    def __init__(self) -> None:
        self.documents: Dict[str, User] = {}
        self.calls: List[str] = []

    def _check_unique_email(self, email: str, user_id: Optional[str] = None) -> None:
        for existing in self.documents.values():
            if existing.email == email and existing.id != user_id:
                raise ValidationError({UserFields.EMAIL: f"Email {email} is already in use"})

    async def find_by_id(self, user_id: str) -> Optional[User]:
        self.calls.append("find_by_id")
        return self.documents.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        self.calls.append("find_by_email")
        return next((u for u in self.documents.values() if u.email == email), None)

    async def find_all(self, search: Optional[str] = None) -> List[User]:
        self.calls.append("find_all")
        if not search:
            return list(self.documents.values())
        pattern = re.compile(re.escape(search), re.IGNORECASE)
        return [
            user for user in self.documents.values()
            if any(pattern.search(getattr(user, field) or "") for field in UserFields.SEARCHABLE)
        ]

    async def insert(self, user: User) -> User:
        self.calls.append("insert")
        self._check_unique_email(user.email)
        saved = replace(user, id=str(ObjectId()))
        self.documents[saved.id] = saved
        return saved

    async def update_fields(self, user_id: str, fields: UpdatableFields) -> Optional[User]:
        self.calls.append("update_fields")
        user = self.documents.get(user_id)
        if user is None:
            return None
        if UserFields.EMAIL in fields:
            self._check_unique_email(fields[UserFields.EMAIL], user_id)
        updated = replace(user, **fields)
        self.documents[user_id] = updated
        return updated

    async def update_password(self, user_id: str, hashed_password: str) -> Optional[User]:
        self.calls.append("update_password")
        user = self.documents.get(user_id)
        if user is None:
            return None
        updated = replace(user, hashed_password=hashed_password)
        self.documents[user_id] = updated
        return updated

    async def delete(self, user_id: str) -> Optional[User]:
        self.calls.append("delete")
        return self.documents.pop(user_id, None)


SEED_USERS = [
    {
        "email": "jon@example.com",
        "password": "userOnePass",
        "first_name": "Jon",
        "last_name": "Doe",
        "city": None,
    },
    {
        "email": "jane@example.com",
        "password": "userTwoPass",
        "first_name": "Jane",
        "last_name": "Eod",
        "city": "Jmerenka",
    },
]


@pytest.fixture
def seed_users() -> List[User]:
    return [
        User(
            id=str(ObjectId()),
            email=seed["email"],
            hashed_password=hash_password(seed["password"], rounds=4),
            first_name=seed["first_name"],
            last_name=seed["last_name"],
            city=seed["city"],
        )
        for seed in SEED_USERS
    ]


@pytest.fixture
def user_repository(seed_users) -> InMemoryUserRepository:
    """In-memory repository populated with the two seed users."""
    repository = InMemoryUserRepository()
    for user in seed_users:
        repository.documents[user.id] = user
    return repository
