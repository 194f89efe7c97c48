"""
Error taxonomy for the portal.

Business-rule failures (bad input, unknown email, duplicate email, wrong
password) are returned as typed results by the auth service. Failures of
external collaborators are raised as ``InternalError``.
"""
from enum import Enum
from typing import Optional


class AuthErrorKind(str, Enum):
    """Recoverable, user-facing failure kinds."""
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    AUTHENTICATION_ERROR = "authentication_error"


class PortalError(Exception):
    """Base class for portal exceptions."""


class InternalError(PortalError):
    """
    A collaborator (database, session store, hasher, filesystem) failed.

    The message is for server logs only and never rendered to users.
    """

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.cause = cause
        detail = f"{operation} failed"
        if cause is not None:
            detail = f"{detail}: {cause!r}"
        super().__init__(detail)


class DuplicateEmailError(PortalError):
    """Insert rejected by the unique email index."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Email already registered: {email}")


class GalleryError(PortalError):
    """The members image set is empty or cannot be read."""
