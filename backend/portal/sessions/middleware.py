"""
ASGI middleware that attaches a server-side session to each HTTP request.
"""
import logging
from typing import Optional

from redis.exceptions import RedisError
from starlette.datastructures import MutableHeaders
from starlette.requests import HTTPConnection
from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from portal.sessions.cookie import SessionCookie
from portal.sessions.session import Session
from portal.sessions.store import SessionStore

logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = "Internal server error. Check server logs."


class ServerSessionMiddleware:
    """
    Resolve the session cookie into ``scope["session"]``.

    The store is looked up on ``app.state.session_store`` per request so
    that it can be created in the lifespan or injected by tests.
    """

    def __init__(self, app: ASGIApp, cookie: SessionCookie):
        self.app = app
        self.cookie = cookie

    async def _load(self, store: SessionStore, cookie_value: Optional[str]) -> Session:
        if not cookie_value:
            return Session(store)
        session_id = self.cookie.unsign(cookie_value)
        if session_id is None:
            return Session(store)
        data = await store.load(session_id)
        if data is None:
            return Session(store)
        return Session(store, session_id=session_id, data=data)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        connection = HTTPConnection(scope)
        store: SessionStore = scope["app"].state.session_store
        cookie_value = connection.cookies.get(self.cookie.name)

        try:
            session = await self._load(store, cookie_value)
        except RedisError:
            logger.exception("Session store unavailable while loading session")
            response = PlainTextResponse(INTERNAL_ERROR_BODY, status_code=500)
            await response(scope, receive, send)
            return

        scope["session"] = session

        async def send_wrapper(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                if session.session_id is not None:
                    # Refresh the browser-side expiry along with the store TTL
                    headers.append("Set-Cookie", self.cookie.set_header(session.session_id))
                elif session.destroyed or cookie_value:
                    headers.append("Set-Cookie", self.cookie.clear_header())
            await send(message)

        await self.app(scope, receive, send_wrapper)
