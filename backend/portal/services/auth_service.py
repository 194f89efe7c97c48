"""
Authentication service for registration, login, and the members gate.
"""
import logging
from typing import Optional

from pydantic import ValidationError
from pymongo.errors import PyMongoError
from redis.exceptions import RedisError
from starlette.concurrency import run_in_threadpool

from portal.core.errors import (
    AuthErrorKind,
    DuplicateEmailError,
    GalleryError,
    InternalError,
)
from portal.core.security import PasswordHasher
from portal.database.user_store import UserStore
from portal.models.user import User
from portal.schemas.auth import (
    AuthResult,
    HomeView,
    LoginForm,
    MembersView,
    SignupForm,
    first_error_message,
)
from portal.services.gallery import ImageGallery
from portal.sessions.session import Session

logger = logging.getLogger(__name__)

MEMBERS_PATH = "/members"
HOME_PATH = "/"

ALREADY_REGISTERED = "Email already registered. Try logging in."
USER_NOT_FOUND = "User not found."
INCORRECT_PASSWORD = "Incorrect password."

# Collaborator failures that surface as InternalError. ValueError covers
# passlib rejecting a password or a malformed stored hash.
COLLABORATOR_ERRORS = (PyMongoError, RedisError, ValueError)


class AuthService:
    """Service for authentication operations."""

    def __init__(
        self,
        users: UserStore,
        hasher: PasswordHasher,
        gallery: ImageGallery,
    ):
        """Initialize with the credential store, hasher, and image gallery."""
        self.users = users
        self.hasher = hasher
        self.gallery = gallery

    def home(self, session: Session) -> HomeView:
        """Home page data for the current session. No side effects."""
        return HomeView(username=session.username if session.is_authenticated else None)

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        session: Session,
    ) -> AuthResult:
        """
        Register a new user and sign them in.

        Args:
            name: Display name (non-empty)
            email: Email address (must be unique)
            password: Plain password (min 6 characters)
            session: Current request session

        Returns:
            AuthResult redirecting to the members page, or describing
            a validation error or an already registered email

        Raises:
            InternalError: If the store, hasher, or session store fails
        """
        try:
            form = SignupForm(name=name, email=email, password=password)
        except ValidationError as e:
            return AuthResult.failure(
                AuthErrorKind.VALIDATION_ERROR,
                f"Validation error: {first_error_message(e)}",
            )

        try:
            # Fast path only; the unique index is the real guard
            if await self.users.find_by_email(form.email) is not None:
                return AuthResult.failure(AuthErrorKind.CONFLICT, ALREADY_REGISTERED)

            hashed = await run_in_threadpool(self.hasher.hash, form.password)
            user = await self.users.insert(
                User(name=form.name, email=form.email, hashed_password=hashed)
            )
            await session.set_username(user.name)
        except DuplicateEmailError:
            return AuthResult.failure(AuthErrorKind.CONFLICT, ALREADY_REGISTERED)
        except COLLABORATOR_ERRORS as e:
            raise InternalError("register", e) from e

        return AuthResult.success(MEMBERS_PATH)

    async def login(self, email: str, password: str, session: Session) -> AuthResult:
        """
        Authenticate a user and sign them in.

        Args:
            email: Email address
            password: Plain password
            session: Current request session

        Returns:
            AuthResult redirecting to the members page, or describing
            a validation error, an unknown email, or a wrong password.
            The session is left untouched on any failure.

        Raises:
            InternalError: If the store, hasher, or session store fails
        """
        try:
            form = LoginForm(email=email, password=password)
        except ValidationError as e:
            return AuthResult.failure(
                AuthErrorKind.VALIDATION_ERROR,
                f"Invalid input: {first_error_message(e)}",
            )

        try:
            user = await self.users.find_by_email(form.email)
            if user is None:
                return AuthResult.failure(AuthErrorKind.NOT_FOUND, USER_NOT_FOUND)

            matches = await run_in_threadpool(
                self.hasher.verify, form.password, user.hashed_password
            )
            if not matches:
                return AuthResult.failure(
                    AuthErrorKind.AUTHENTICATION_ERROR, INCORRECT_PASSWORD
                )

            await session.set_username(user.name)
        except COLLABORATOR_ERRORS as e:
            raise InternalError("login", e) from e

        logger.info("Login succeeded for user %s", user.id)
        return AuthResult.success(MEMBERS_PATH)

    async def members(self, session: Session) -> Optional[MembersView]:
        """
        Members page data, or None when the visitor must be sent home.

        Raises:
            InternalError: If the image gallery is empty or unreadable
        """
        if not session.is_authenticated:
            return None

        try:
            # Listing the directory touches the filesystem
            image = await run_in_threadpool(self.gallery.choose)
        except GalleryError as e:
            raise InternalError("members", e) from e

        return MembersView(username=session.username, image=image)

    async def logout(self, session: Session) -> str:
        """
        Destroy the session unconditionally.

        Returns:
            Path to redirect to

        Raises:
            InternalError: If the session store fails
        """
        try:
            await session.destroy()
        except RedisError as e:
            raise InternalError("logout", e) from e

        logger.info("Session destroyed")
        return HOME_PATH
