# Standard library imports
import asyncio
import base64
import hashlib

# External package imports
import bcrypt

# Local application imports
from ..domain.services.password_hasher import PasswordHasher


# bcrypt ignores (or, in newer releases, rejects) input past this many bytes
BCRYPT_MAX_BYTES = 72


def _prepare_password(plain_password: str) -> bytes:
    password_bytes = plain_password.encode("utf-8")
    if len(password_bytes) > BCRYPT_MAX_BYTES:
        # 44 base64 characters, well under the limit
        password_bytes = base64.b64encode(hashlib.sha256(password_bytes).digest())
    return password_bytes


def hash_password(plain_password: str, rounds: int = 12) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash
        rounds: bcrypt cost factor (log2 of the iteration count)

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(_prepare_password(plain_password), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise
    """
    try:
        return bcrypt.checkpw(
            _prepare_password(plain_password),
            hashed_password.encode("utf-8")
        )
    except ValueError:
        # Malformed or foreign digest
        return False


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt implementation of PasswordHasher"""

    def __init__(self, rounds: int = 12) -> None:
        self.rounds = rounds

    async def hash(self, plaintext: str) -> str:
        # bcrypt is deliberately slow; keep it off the event loop
        return await asyncio.to_thread(hash_password, plaintext, self.rounds)

    async def verify(self, plaintext: str, digest: str) -> bool:
        return await asyncio.to_thread(verify_password, plaintext, digest)
