"""
Global test fixtures for Members Portal.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor) behind a real UserStore
- Mock Redis (fakeredis) behind a real SessionStore
- Fast bcrypt hasher and a temporary image gallery
- FastAPI test client wired with the fakes
"""

import asyncio
import sys
from pathlib import Path
from typing import Callable, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from portal.config import Settings  # noqa: E402
from portal.core.security import PasswordHasher  # noqa: E402
from portal.database.databases import portal_db  # noqa: E402
from portal.database.user_store import UserStore  # noqa: E402
from portal.services.gallery import ImageGallery  # noqa: E402
from portal.sessions.store import SessionStore  # noqa: E402

TEST_DATABASE = "members_portal"
TEST_SESSION_SECRET = "test-session-secret"
TEST_ENCRYPTION_SECRET = "test-encryption-secret"
# bcrypt's minimum cost keeps the suite fast
TEST_BCRYPT_ROUNDS = 4


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest.fixture
def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.

    It behaves like motor, including unique indexes raising DuplicateKeyError.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
    except ImportError:
        pytest.skip("mongomock-motor not installed")
    return AsyncMongoMockClient()


@pytest.fixture
def mock_portal_db(mock_async_mongo_client):
    """Provide mock portal database."""
    return mock_async_mongo_client[TEST_DATABASE]


@pytest.fixture
def user_store(mock_portal_db) -> UserStore:
    return UserStore(mock_portal_db)


@pytest_asyncio.fixture
async def indexed_user_store(user_store) -> UserStore:
    """UserStore with the unique email index in place, as after startup."""
    await user_store.ensure_indexes()
    return user_store


@pytest.fixture
def count_users(user_store) -> Callable[[str], int]:
    """Count stored users with an email, for synchronous tests."""
    def count(email: str) -> int:
        return asyncio.run(
            user_store.collection.count_documents({portal_db.UserFields.EMAIL: email})
        )
    return count


# =============================================================================
# Redis Fixtures (fakeredis)
# =============================================================================

@pytest.fixture
def fake_redis():
    """
    Create an async mock Redis client using fakeredis.
    """
    try:
        import fakeredis
        import fakeredis.aioredis
    except ImportError:
        pytest.skip("fakeredis not installed")
    return fakeredis.aioredis.FakeRedis(
        server=fakeredis.FakeServer(),
        decode_responses=True,
    )


@pytest.fixture
def session_store(fake_redis) -> SessionStore:
    return SessionStore(
        fake_redis,
        encryption_secret=TEST_ENCRYPTION_SECRET,
        ttl_seconds=3600,
    )


@pytest_asyncio.fixture
async def async_session_store(fake_redis):
    """SessionStore for async tests; flushed after each test."""
    store = SessionStore(
        fake_redis,
        encryption_secret=TEST_ENCRYPTION_SECRET,
        ttl_seconds=3600,
    )
    yield store
    await fake_redis.flushall()


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=TEST_BCRYPT_ROUNDS)


# =============================================================================
# Gallery Fixtures
# =============================================================================

GALLERY_IMAGES = ["cat.png", "dog.jpg", "owl.svg"]


@pytest.fixture
def gallery_images() -> list[str]:
    return list(GALLERY_IMAGES)


@pytest.fixture
def images_dir(tmp_path) -> Path:
    """Directory holding a small fixed image set plus noise files."""
    directory = tmp_path / "images"
    directory.mkdir()
    for name in GALLERY_IMAGES:
        (directory / name).write_bytes(b"image-bytes")
    (directory / ".DS_Store").write_bytes(b"")
    (directory / "notes.txt").write_text("not an image")
    return directory


@pytest.fixture
def gallery(images_dir) -> ImageGallery:
    return ImageGallery(images_dir)


@pytest.fixture
def empty_images_dir(tmp_path) -> Path:
    directory = tmp_path / "empty"
    directory.mkdir()
    return directory


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic test user data for registration."""
    return {
        "name": "Alice",
        "email": "alice@example.com",
        "password": "secret1",
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def settings(images_dir) -> Settings:
    return Settings(
        session_secret=TEST_SESSION_SECRET,
        session_encryption_secret=TEST_ENCRYPTION_SECRET,
        bcrypt_rounds=TEST_BCRYPT_ROUNDS,
        images_dir=images_dir,
        _env_file=None,
    )


@pytest.fixture
def app(settings, user_store, session_store, hasher, gallery):
    """
    Create the FastAPI app wired with the mock stores.

    The lifespan creates the unique email index when the client starts.
    """
    from portal.main import create_app

    return create_app(
        settings,
        user_store=user_store,
        session_store=session_store,
        hasher=hasher,
        gallery=gallery,
    )


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Redirects are not followed so tests can assert on them.
    """
    with TestClient(app, follow_redirects=False) as c:
        yield c
