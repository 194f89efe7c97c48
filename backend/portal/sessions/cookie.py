"""
Session cookie signing.

The cookie carries only the opaque session id, signed so that a
tampered or forged value is rejected before touching the store.
"""
from typing import Optional

from itsdangerous import BadSignature, Signer

SIGNER_SALT = "portal.session"


class SessionCookie:
    """Name, attributes, and signature handling for the session cookie."""

    def __init__(
        self,
        secret: str,
        name: str = "portal_session",
        max_age: int = 3600,
        secure: bool = False,
        path: str = "/",
    ):
        self.name = name
        self.max_age = max_age
        self.secure = secure
        self.path = path
        self._signer = Signer(secret, salt=SIGNER_SALT)

    def sign(self, session_id: str) -> str:
        return self._signer.sign(session_id).decode("utf-8")

    def unsign(self, value: str) -> Optional[str]:
        """Return the session id, or None when the signature is bad."""
        try:
            return self._signer.unsign(value).decode("utf-8")
        except BadSignature:
            return None

    def _flags(self) -> str:
        flags = "httponly; samesite=lax"
        if self.secure:
            flags += "; secure"
        return flags

    def set_header(self, session_id: str) -> str:
        """Set-Cookie value for a live session."""
        return (
            f"{self.name}={self.sign(session_id)}; path={self.path}; "
            f"Max-Age={self.max_age}; {self._flags()}"
        )

    def clear_header(self) -> str:
        """Set-Cookie value that removes the cookie from the browser."""
        return (
            f"{self.name}=null; path={self.path}; "
            f"expires=Thu, 01 Jan 1970 00:00:00 GMT; Max-Age=0; {self._flags()}"
        )
