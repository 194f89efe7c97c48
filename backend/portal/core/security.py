"""
Security utilities for password hashing.
"""
from passlib.context import CryptContext

DEFAULT_BCRYPT_ROUNDS = 12


class PasswordHasher:
    """
    One-way salted password hashing backed by passlib's bcrypt scheme.

    The work factor is fixed per instance so every stored credential
    created by the portal uses the same cost.

    bcrypt only reads the first 72 bytes of a password (UTF-8 encoded).
    Passwords sharing those bytes hash and verify as equal.
    """

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, plain_password: str) -> str:
        """
        Hash a plain password using bcrypt.

        Args:
            plain_password: The plain text password to hash

        Returns:
            Hashed password string

        Raises:
            ValueError: If the password cannot be hashed
        """
        return self._context.hash(plain_password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain password against a hashed password.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The hashed password to compare against

        Returns:
            True if password matches, False otherwise

        Raises:
            ValueError: If the stored hash is malformed
        """
        return self._context.verify(plain_password, hashed_password)

