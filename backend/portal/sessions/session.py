"""
Per-request view of a server-side session.
"""
from typing import Any, Optional

from portal.sessions.store import SessionStore

USERNAME_KEY = "username"


class Session:
    """
    Session state for one request.

    Writes go straight to the store, so a failed write leaves both the
    store and this object unchanged. The middleware turns the final state
    into a Set-Cookie header.
    """

    def __init__(
        self,
        store: SessionStore,
        session_id: Optional[str] = None,
        data: Optional[dict[str, Any]] = None,
    ):
        self.store = store
        self.session_id = session_id
        self.data: dict[str, Any] = dict(data or {})
        self.destroyed = False

    @property
    def username(self) -> Optional[str]:
        return self.data.get(USERNAME_KEY)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.username)

    async def set_username(self, username: str) -> None:
        """
        Mark the session as authenticated, creating it on first write.

        Raises:
            RedisError: If the store cannot be written
        """
        data = {**self.data, USERNAME_KEY: username}
        if self.session_id is None:
            self.session_id = await self.store.create(data)
        else:
            await self.store.save(self.session_id, data)
        self.data = data
        self.destroyed = False

    async def destroy(self) -> None:
        """
        Remove the session from the store.

        Raises:
            RedisError: If the store cannot be written
        """
        if self.session_id is not None:
            await self.store.destroy(self.session_id)
        self.session_id = None
        self.data = {}
        self.destroyed = True
