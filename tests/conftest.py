"""
Shared pytest fixtures for auth backend tests.
"""
import os
from itertools import count
from datetime import datetime, timezone
from typing import Dict, List, Optional, Set
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError
from pymongo.results import InsertOneResult

from auth_api.core.security import BcryptPasswordHasher
from auth_api.domain.constants import UserFields
from auth_api.domain.exceptions import UniqueConstraintViolation
from auth_api.domain.models.user import StoredUser
from auth_api.domain.repositories.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """UserRepository fake with the same email uniqueness rule as the Mongo index."""

    def __init__(self) -> None:
        self.users: Dict[str, StoredUser] = {}
        self.create_calls = 0
        self._ids = count(1)

    async def create_user(self, email: str, password_hash: str) -> StoredUser:
        self.create_calls += 1
        if email in self.users:
            raise UniqueConstraintViolation(
                f"Duplicate key on insert: {email}",
                field=UserFields.EMAIL,
                operation="create_user",
            )
        now = datetime.now(timezone.utc)
        user = StoredUser(
            id=f"usr-{next(self._ids)}",
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        self.users[email] = user
        return user

    async def find_by_email(self, email: str) -> Optional[StoredUser]:
        return self.users.get(email)


class FakeUserCollection:
    """
    Async users collection that, like MongoDB, only rejects duplicates once
    a unique index exists. The first index_failures create_index calls fail.
    """

    def __init__(self, index_failures: int = 0) -> None:
        self.documents: List[dict] = []
        self.unique_fields: Set[str] = set()
        self.index_failures = index_failures
        self.create_index_calls = 0

    async def create_index(self, key, unique=False, name=None):
        self.create_index_calls += 1
        if self.index_failures > 0:
            self.index_failures -= 1
            raise ServerSelectionTimeoutError("mongo not up yet")
        if unique:
            self.unique_fields.add(key)
        return name

    async def insert_one(self, document):
        for field in self.unique_fields:
            if any(existing.get(field) == document.get(field) for existing in self.documents):
                raise DuplicateKeyError(
                    "E11000 duplicate key error",
                    code=11000,
                    details={"keyPattern": {field: 1}, "keyValue": {field: document.get(field)}},
                )
        stored = dict(document)
        stored["_id"] = ObjectId()
        self.documents.append(stored)
        return InsertOneResult(stored["_id"], True)

    async def find_one(self, query):
        return next(
            (d for d in self.documents if all(d.get(k) == v for k, v in query.items())),
            None,
        )

    async def count_documents(self, query):
        return sum(1 for d in self.documents if all(d.get(k) == v for k, v in query.items()))


@pytest.fixture
def fake_user_collection():
    """Users collection that enforces uniqueness once indexed."""
    return FakeUserCollection()


@pytest.fixture
def unreachable_at_boot_collection():
    """Users collection whose first create_index call fails."""
    return FakeUserCollection(index_failures=1)


@pytest.fixture
def user_repo():
    """Empty in-memory user store."""
    return InMemoryUserRepository()


@pytest.fixture
def password_hasher():
    """Real bcrypt hasher at the minimum cost factor to keep tests fast."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_auth_db",
        "BCRYPT_ROUNDS": "4",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_users_collection = "users"
    mock.bcrypt_rounds = 4
    mock.log_level = "INFO"
    mock.cors_allow_origins = ["http://localhost:3000"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("auth_api.core.config.get_settings", return_value=mock), patch(
        "auth_api.di.providers.security_provider.get_settings", return_value=mock
    ), patch("auth_api.infrastructure.db.mongo_connection.get_settings", return_value=mock):
        yield mock
