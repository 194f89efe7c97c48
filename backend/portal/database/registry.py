"""
Database index management.
Ensures the indexes the portal relies on exist.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from portal.database.databases import portal_db

logger = logging.getLogger(__name__)


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create necessary indexes for the portal database."""
    users = db[portal_db.Collections.USERS]
    # Authoritative guard against duplicate registrations
    await users.create_index(portal_db.UserFields.EMAIL, unique=True)
    logger.info("Ensured unique index on %s.%s", portal_db.Collections.USERS, portal_db.UserFields.EMAIL)
