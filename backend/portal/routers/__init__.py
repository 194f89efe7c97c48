"""
HTTP routers.
"""
from portal.routers import auth, health, pages

__all__ = ["auth", "health", "pages"]
