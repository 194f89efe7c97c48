"""
Core module - Security, errors, and logging utilities.
"""
from portal.core.errors import (
    AuthErrorKind,
    DuplicateEmailError,
    GalleryError,
    InternalError,
    PortalError,
)
from portal.core.logging_config import configure_logging
from portal.core.security import PasswordHasher

__all__ = [
    "AuthErrorKind",
    "DuplicateEmailError",
    "GalleryError",
    "InternalError",
    "PortalError",
    "PasswordHasher",
    "configure_logging",
]
