"""
Unit tests for auth_api.core.security
"""
import pytest
from auth_api.core.security import (
    BCRYPT_MAX_BYTES,
    BcryptPasswordHasher,
    hash_password,
    verify_password,
)


class TestHashPassword:
    """Tests for hash_password"""

    def test_returns_non_empty_string(self):
        result = hash_password("mypassword", rounds=4)
        assert isinstance(result, str)
        assert len(result) > 0

    def test_different_salts_per_call(self):
        """Each hash should use a new salt, so hashes differ."""
        h1 = hash_password("same", rounds=4)
        h2 = hash_password("same", rounds=4)
        assert h1 != h2

    def test_hash_not_equal_to_plain(self):
        result = hash_password("secret123", rounds=4)
        assert result != "secret123"

    def test_cost_factor_is_encoded_in_digest(self):
        assert hash_password("secret", rounds=5).startswith("$2b$05$")

    def test_long_password_is_not_truncated(self):
        base = "x" * BCRYPT_MAX_BYTES
        hashed = hash_password(base + "a", rounds=4)
        assert verify_password(base + "a", hashed) is True
        assert verify_password(base + "b", hashed) is False


class TestVerifyPassword:
    """Tests for verify_password"""

    def test_matching_password_returns_true(self):
        hashed = hash_password("correct", rounds=4)
        assert verify_password("correct", hashed) is True

    def test_wrong_password_returns_false(self):
        hashed = hash_password("correct", rounds=4)
        assert verify_password("wrong", hashed) is False

    def test_empty_password(self):
        hashed = hash_password("", rounds=4)
        assert verify_password("", hashed) is True
        assert verify_password("x", hashed) is False

    def test_malformed_digest_returns_false(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False


class TestBcryptPasswordHasher:
    """Tests for the async PasswordHasher implementation"""

    @pytest.mark.asyncio
    async def test_hash_is_salted_and_one_way(self):
        hasher = BcryptPasswordHasher(rounds=4)
        h1 = await hasher.hash("secret")
        h2 = await hasher.hash("secret")
        assert h1 != h2
        assert "secret" not in (h1, h2)

    @pytest.mark.asyncio
    async def test_verify_roundtrip(self):
        hasher = BcryptPasswordHasher(rounds=4)
        digest = await hasher.hash("secret")
        assert await hasher.verify("secret", digest) is True
        assert await hasher.verify("Secret", digest) is False
