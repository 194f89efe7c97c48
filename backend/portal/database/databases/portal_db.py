"""
Portal database configuration.
Stores user identity and credentials. The database name itself comes
from settings (MONGODB_DATABASE).
"""


class Collections:
    """Collection names in the portal database."""
    USERS = "users"


class UserFields:
    """Field names of documents in the users collection."""
    NAME = "name"
    EMAIL = "email"
    PASSWORD = "password"
    CREATED_AT = "created_at"
