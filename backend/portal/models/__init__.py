"""
Pydantic models for database documents.
"""
from portal.models.user import User

__all__ = ["User"]
