# Standard library imports
import asyncio
import re
from datetime import datetime, timezone
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import StoredUser
from ...domain.constants import UserFields
from ...domain.exceptions import StoreError, UniqueConstraintViolation
from .mongo_connection import get_user_collection, ensure_user_indexes


# e.g. "E11000 duplicate key error collection: db.users index: email_1 dup key: ..."
_INDEX_NAME_PATTERN = re.compile(r"index:\s+(\S+)\s+dup key")


def duplicate_key_field(error: DuplicateKeyError) -> Optional[str]:
    """
    Work out which field a duplicate key error was raised for

    Args:
        error: The DuplicateKeyError raised by the driver

    Returns:
        Field name, or None if the server response does not say
    """
    details = error.details or {}

    for key in ("keyPattern", "keyValue"):
        fields = details.get(key)
        if fields:
            return next(iter(fields))

    message = details.get("errmsg") or str(error)
    match = _INDEX_NAME_PATTERN.search(message)
    if match:
        # Default index names are "<field>_<direction>"
        return match.group(1).rsplit("_", 1)[0]
    return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
        self._indexes_ready = False
        self._index_lock = asyncio.Lock()

    async def ensure_indexes(self) -> None:
        """
        Make sure the unique email index exists

        Runs at most once successfully per repository; a failed attempt is
        retried on the next call.

        Raises:
            StoreError: If the index cannot be created
        """
        if self._indexes_ready:
            return

        async with self._index_lock:
            if self._indexes_ready:
                return
            try:
                await ensure_user_indexes(self.user_collection)
            except PyMongoError as e:
                raise StoreError(f"Error ensuring user indexes: {str(e)}", operation="ensure_indexes") from e
            self._indexes_ready = True

    async def create_user(self, email: str, password_hash: str) -> StoredUser:
        """
        Insert a new user document

        A single insert_one: either the document is written and returned,
        or nothing is written and an error is raised.

        Args:
            email: Email address, unique across users
            password_hash: Digest produced by the password hasher

        Returns:
            StoredUser with ID and timestamps set

        Raises:
            UniqueConstraintViolation: If a unique index rejects the insert
            StoreError: For any other driver failure
        """
        # Without the unique index duplicate emails would insert cleanly
        await self.ensure_indexes()

        now = datetime.now(timezone.utc)
        document = {
            UserFields.EMAIL: email,
            UserFields.HASHED_PASSWORD: password_hash,
            UserFields.CREATED_AT: now,
            UserFields.UPDATED_AT: now,
        }

        try:
            result = await self.user_collection.insert_one(document)
        except DuplicateKeyError as e:
            raise UniqueConstraintViolation(
                f"Duplicate key on insert: {str(e)}",
                field=duplicate_key_field(e),
                operation="create_user",
            ) from e
        except PyMongoError as e:
            raise StoreError(f"Error creating user: {str(e)}", operation="create_user") from e

        document[UserFields.MONGO_ID] = result.inserted_id
        return self._document_to_user(document)

    async def find_by_email(self, email: str) -> Optional[StoredUser]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            StoredUser if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except PyMongoError as e:
            raise StoreError(f"Error finding user by email: {str(e)}", operation="find_by_email") from e

        if document is None:
            return None
        return self._document_to_user(document)

    def _document_to_user(self, document: dict) -> StoredUser:
        """
        Convert MongoDB document to StoredUser domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            StoredUser domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return StoredUser(
            id=str(document[UserFields.MONGO_ID]),
            email=document.get(UserFields.EMAIL, ""),
            password_hash=document.get(UserFields.HASHED_PASSWORD, ""),
            created_at=document.get(UserFields.CREATED_AT),
            updated_at=document.get(UserFields.UPDATED_AT),
        )
