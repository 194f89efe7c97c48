"""
Database module - MongoDB and Redis connections and the credential store.
"""
from portal.database.connections import (
    get_mongo_client,
    get_redis_client,
    close_connections,
    get_database,
)
from portal.database.databases import portal_db
from portal.database.user_store import UserStore

__all__ = [
    "get_mongo_client",
    "get_redis_client",
    "close_connections",
    "get_database",
    "portal_db",
    "UserStore",
]
