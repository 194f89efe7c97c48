"""
Server-side session store backed by Redis.

Each session is one key holding Fernet-encrypted JSON. Keys carry the
session TTL, which is refreshed on every load and save (sliding expiry).
"""
import base64
import hashlib
import json
import logging
import secrets
from typing import Any, Optional

from cryptography.fernet import Fernet, InvalidToken
from redis.asyncio import Redis

logger = logging.getLogger(__name__)

KEY_PREFIX = "session:"
DEFAULT_TTL_SECONDS = 3600


def derive_fernet_key(secret: str) -> bytes:
    """Turn an arbitrary secret string into a valid Fernet key."""
    digest = hashlib.sha256(secret.encode("utf-8")).digest()
    return base64.urlsafe_b64encode(digest)


def new_session_id() -> str:
    return secrets.token_urlsafe(32)


class SessionStore:
    """TTL-backed key-value store of session payloads keyed by session id."""

    def __init__(
        self,
        redis: Redis,
        encryption_secret: str,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
    ):
        self.redis = redis
        self.ttl_seconds = ttl_seconds
        self._fernet = Fernet(derive_fernet_key(encryption_secret))

    @staticmethod
    def _key(session_id: str) -> str:
        return f"{KEY_PREFIX}{session_id}"

    def _encode(self, data: dict[str, Any]) -> str:
        payload = json.dumps(data).encode("utf-8")
        return self._fernet.encrypt(payload).decode("utf-8")

    def _decode(self, session_id: str, raw: str | bytes) -> Optional[dict[str, Any]]:
        if isinstance(raw, str):
            raw = raw.encode("utf-8")
        try:
            return json.loads(self._fernet.decrypt(raw))
        except (InvalidToken, ValueError):
            logger.warning("Discarding undecodable session %s...", session_id[:8])
            return None

    async def ping(self) -> None:
        await self.redis.ping()

    async def create(self, data: dict[str, Any]) -> str:
        """
        Persist a new session and return its id.

        Raises:
            RedisError: If the store cannot be written
        """
        encoded = self._encode(data)
        while True:
            session_id = new_session_id()
            created = await self.redis.set(
                self._key(session_id), encoded, ex=self.ttl_seconds, nx=True
            )
            if created:
                return session_id

    async def load(self, session_id: str) -> Optional[dict[str, Any]]:
        """
        Fetch a live session and push its expiry forward.

        Returns:
            Session data, or None if missing, expired, or unreadable
        """
        key = self._key(session_id)
        raw = await self.redis.get(key)
        if raw is None:
            return None
        await self.redis.expire(key, self.ttl_seconds)
        return self._decode(session_id, raw)

    async def save(self, session_id: str, data: dict[str, Any]) -> None:
        await self.redis.set(self._key(session_id), self._encode(data), ex=self.ttl_seconds)

    async def destroy(self, session_id: str) -> None:
        await self.redis.delete(self._key(session_id))
