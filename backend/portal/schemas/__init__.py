"""
Request schemas and result types for the auth flows.
"""
from portal.schemas.auth import (
    AuthResult,
    HomeView,
    LoginForm,
    MembersView,
    SignupForm,
    first_error_message,
)

__all__ = [
    "AuthResult",
    "HomeView",
    "LoginForm",
    "MembersView",
    "SignupForm",
    "first_error_message",
]
