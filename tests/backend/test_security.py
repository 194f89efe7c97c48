"""
Tests for password hashing in portal.core.security.
"""

import pytest

from portal.core.security import PasswordHasher


class TestPasswordHasher:
    """Tests for PasswordHasher."""

    def test_hash_returns_bcrypt_hash(self, hasher):
        """hash should return a bcrypt hash, never the plaintext."""
        password = "secret1"
        hashed = hasher.hash(password)

        # bcrypt hashes start with $2b$
        assert hashed.startswith("$2b$")
        assert hashed != password
        assert password not in hashed

    def test_hash_uses_configured_rounds(self):
        """The cost factor is encoded in the hash."""
        hashed = PasswordHasher(rounds=5).hash("secret1")

        assert hashed.startswith("$2b$05$")

    def test_default_rounds_is_twelve(self):
        assert PasswordHasher().rounds == 12

    def test_verify_correct_password_returns_true(self, hasher):
        password = "secret1"
        hashed = hasher.hash(password)

        assert hasher.verify(password, hashed) is True

    @pytest.mark.parametrize("attempt", ["secret2", "Secret1", "secret1 ", ""])
    def test_verify_wrong_password_returns_false(self, hasher, attempt):
        hashed = hasher.hash("secret1")

        assert hasher.verify(attempt, hashed) is False

    def test_hash_different_each_time(self, hasher):
        """Same password should produce different hashes due to salt."""
        assert hasher.hash("secret1") != hasher.hash("secret1")

    def test_verify_malformed_hash_raises_value_error(self, hasher):
        with pytest.raises(ValueError):
            hasher.verify("secret1", "not-a-bcrypt-hash")

    def test_only_first_72_bytes_are_significant(self, hasher):
        prefix = "a" * 72
        hashed = hasher.hash(prefix + "first")

        assert hasher.verify(prefix + "second", hashed) is True
        assert hasher.verify("a" * 71 + "b", hashed) is False
