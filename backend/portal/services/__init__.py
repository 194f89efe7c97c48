"""
Service layer for business logic.
"""
from portal.services.auth_service import AuthService
from portal.services.gallery import ImageGallery

__all__ = [
    "AuthService",
    "ImageGallery",
]
