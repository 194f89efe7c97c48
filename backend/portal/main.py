"""
Members Portal - FastAPI Application

Session-based registration and login in front of a members-only page.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from portal.config import Settings, get_settings
from portal.core.errors import InternalError
from portal.core.logging_config import configure_logging
from portal.core.security import PasswordHasher
from portal.database.connections import close_connections, get_database, get_redis_client
from portal.database.user_store import UserStore
from portal.routers import auth, health, pages
from portal.services.auth_service import AuthService
from portal.services.gallery import ImageGallery
from portal.sessions.cookie import SessionCookie
from portal.sessions.middleware import INTERNAL_ERROR_BODY, ServerSessionMiddleware
from portal.sessions.store import SessionStore
from portal.views.pages import NOT_FOUND_PAGE

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Connect the credential store and session store unless injected
    - Ping MongoDB and ensure the unique email index

    Shutdown:
    - Close all database connections
    """
    settings: Settings = app.state.settings
    logger.info("Starting up Members Portal...")

    if app.state.session_store is None:
        redis = await get_redis_client(settings)
        app.state.session_store = SessionStore(
            redis,
            encryption_secret=settings.session_encryption_secret,
            ttl_seconds=settings.session_ttl_seconds,
        )

    if app.state.user_store is None:
        app.state.user_store = UserStore(await get_database(settings))
        _wire_auth_service(app)

    try:
        await app.state.user_store.ping()
        await app.state.user_store.ensure_indexes()
        logger.info("Connected to MongoDB database %s", settings.mongodb_database)
    except PyMongoError as e:
        logger.warning("MongoDB connection failed: %s", e)

    yield

    logger.info("Shutting down Members Portal...")
    await close_connections()
    logger.info("Database connections closed")


def _wire_auth_service(app: FastAPI) -> None:
    app.state.auth_service = AuthService(
        users=app.state.user_store,
        hasher=app.state.hasher,
        gallery=app.state.gallery,
    )


async def internal_error_handler(request: Request, exc: InternalError):
    logger.error(
        "Internal error on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return PlainTextResponse(
        INTERNAL_ERROR_BODY,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return HTMLResponse(NOT_FOUND_PAGE, status_code=status.HTTP_404_NOT_FOUND)
    return await http_exception_handler(request, exc)


def create_app(
    settings: Optional[Settings] = None,
    *,
    user_store: Optional[UserStore] = None,
    session_store: Optional[SessionStore] = None,
    hasher: Optional[PasswordHasher] = None,
    gallery: Optional[ImageGallery] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Collaborators passed in are used as-is; missing stores are connected
    from settings during the lifespan.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Members Portal",
        description="Session-based sign up and login for a members-only page.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.user_store = user_store
    app.state.session_store = session_store
    app.state.hasher = hasher or PasswordHasher(rounds=settings.bcrypt_rounds)
    app.state.gallery = gallery or ImageGallery(settings.images_dir)
    app.state.auth_service = None
    if user_store is not None:
        _wire_auth_service(app)

    app.add_middleware(
        ServerSessionMiddleware,
        cookie=SessionCookie(
            settings.session_secret,
            name=settings.session_cookie_name,
            max_age=settings.session_ttl_seconds,
            secure=settings.session_cookie_secure,
        ),
    )

    app.add_exception_handler(InternalError, internal_error_handler)
    app.add_exception_handler(StarletteHTTPException, not_found_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(pages.router)
    app.include_router(auth.router)

    app.mount(
        "/images",
        StaticFiles(directory=app.state.gallery.directory, check_dir=False),
        name="images",
    )

    return app


app = create_app()
