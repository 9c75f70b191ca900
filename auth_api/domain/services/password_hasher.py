from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Credential hasher interface - one-way, salted password digests"""

    @abstractmethod
    async def hash(self, plaintext: str) -> str:
        """Return a new salted digest; two calls on the same input differ"""
        pass

    @abstractmethod
    async def verify(self, plaintext: str, digest: str) -> bool:
        """Check plaintext against a stored digest"""
        pass
