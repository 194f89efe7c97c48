"""
Dependencies for dependency injection in routes.
"""
from portal.dependencies.auth import (
    AuthServiceDep,
    CurrentSession,
    get_auth_service,
    get_session,
)

__all__ = [
    "AuthServiceDep",
    "CurrentSession",
    "get_auth_service",
    "get_session",
]
