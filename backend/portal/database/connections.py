"""
Database connection management for MongoDB and Redis.
"""
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from redis.asyncio import Redis

from portal.config import Settings, get_settings

# Global connection instances
_mongo_client: Optional[AsyncIOMotorClient] = None
_redis_client: Optional[Redis] = None


async def get_mongo_client(settings: Optional[Settings] = None) -> AsyncIOMotorClient:
    """Get or create MongoDB client."""
    global _mongo_client
    if _mongo_client is None:
        settings = settings or get_settings()
        _mongo_client = AsyncIOMotorClient(
            settings.mongodb_uri,
            serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
        )
    return _mongo_client


async def get_redis_client(settings: Optional[Settings] = None) -> Redis:
    """Get or create Redis client."""
    global _redis_client
    if _redis_client is None:
        settings = settings or get_settings()
        _redis_client = Redis(
            host=settings.redis_host,
            port=settings.redis_port,
            db=settings.redis_db,
            decode_responses=True,
        )
    return _redis_client


async def close_connections():
    """Close all database connections."""
    global _mongo_client, _redis_client

    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None

    if _redis_client is not None:
        await _redis_client.aclose()
        _redis_client = None


async def get_database(settings: Optional[Settings] = None) -> AsyncIOMotorDatabase:
    """Get the configured MongoDB database."""
    settings = settings or get_settings()
    client = await get_mongo_client(settings)
    return client[settings.mongodb_database]
