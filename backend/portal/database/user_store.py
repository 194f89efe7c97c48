"""
Credential store backed by the MongoDB users collection.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from portal.core.errors import DuplicateEmailError
from portal.database.databases import portal_db
from portal.database.registry import create_indexes
from portal.models.user import User

logger = logging.getLogger(__name__)


class UserStore:
    """User records keyed by unique email."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the portal database."""
        self.db = db
        self.collection: AsyncIOMotorCollection = db[portal_db.Collections.USERS]

    async def ping(self) -> None:
        """Round-trip to the server; raises if MongoDB is unreachable."""
        await self.db.command("ping")

    async def ensure_indexes(self) -> None:
        await create_indexes(self.db)

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email.

        Args:
            email: Normalized email address

        Returns:
            User model or None if not found

        Raises:
            PyMongoError: If the database cannot be queried
        """
        doc = await self.collection.find_one({portal_db.UserFields.EMAIL: email})
        if not doc:
            return None
        return User.from_document(doc)

    async def insert(self, user: User) -> User:
        """
        Insert a new user.

        Args:
            user: User to insert, without an id

        Returns:
            The same user with its store-assigned id

        Raises:
            DuplicateEmailError: If the email is already taken
            PyMongoError: On any other database failure
        """
        try:
            result = await self.collection.insert_one(user.to_document())
        except DuplicateKeyError as e:
            raise DuplicateEmailError(user.email) from e

        logger.info("User inserted: %s", result.inserted_id)
        return user.model_copy(update={"id": str(result.inserted_id)})
