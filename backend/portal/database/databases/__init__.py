"""
Database definitions and collection constants.
"""
from portal.database.databases import portal_db

__all__ = ["portal_db"]
