"""
Request dependencies for the session and the auth service.
"""
from typing import Annotated

from fastapi import Depends, Request

from portal.services.auth_service import AuthService
from portal.sessions.session import Session


def get_session(request: Request) -> Session:
    """
    Dependency to get the session attached by ServerSessionMiddleware.

    Raises:
        RuntimeError: If the middleware is not installed
    """
    session = request.scope.get("session")
    if not isinstance(session, Session):
        raise RuntimeError("ServerSessionMiddleware must be installed to use sessions")
    return session


def get_auth_service(request: Request) -> AuthService:
    """Dependency to get the AuthService wired in the app factory."""
    return request.app.state.auth_service


# Type aliases for cleaner route signatures
CurrentSession = Annotated[Session, Depends(get_session)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
