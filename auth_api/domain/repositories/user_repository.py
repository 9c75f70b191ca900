from abc import ABC, abstractmethod
from typing import Optional
from ..models.user import StoredUser


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    async def ensure_indexes(self) -> None:
        """
        Prepare whatever enforces email uniqueness (no-op by default).

        Raises:
            StoreError: If the store cannot be prepared
        """
        pass

    @abstractmethod
    async def create_user(self, email: str, password_hash: str) -> StoredUser:
        """
        Insert a new user record atomically.

        Raises:
            UniqueConstraintViolation: If a unique field (email) already exists
            StoreError: For any other persistence failure
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[StoredUser]:
        """Find user by email address"""
        pass
