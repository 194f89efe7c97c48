"""
Server-side sessions: Redis store, signed cookie, and ASGI middleware.
"""
from portal.sessions.cookie import SessionCookie
from portal.sessions.middleware import ServerSessionMiddleware
from portal.sessions.session import Session
from portal.sessions.store import SessionStore

__all__ = [
    "Session",
    "SessionCookie",
    "SessionStore",
    "ServerSessionMiddleware",
]
