# tests/conftest.py
import io
import os
import sys
from typing import AsyncGenerator

# Add project root to path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from PIL import Image

from portfolio.handlers.dependencies import get_auth, get_current_user, get_db
from portfolio.main import app as fastapi_app
from portfolio.models import AuthUser
from portfolio.services.auth import AuthService
from portfolio.services.firestore_db import FirestoreDB
from tests.fakes import FakeFirestore


@pytest.fixture
def fake_firestore() -> FakeFirestore:
    """An empty in-memory Firestore for each test."""
    return FakeFirestore()


@pytest.fixture
def db(fake_firestore: FakeFirestore) -> FirestoreDB:
    return FirestoreDB(client=fake_firestore)


@pytest.fixture
def admin_user() -> AuthUser:
    return AuthUser(uid="admin-uid", email="admin@example.com", claims={"admin": True})


@pytest.fixture
def visitor_user() -> AuthUser:
    """Signed in, but without the admin claim."""
    return AuthUser(uid="visitor-uid", email="visitor@example.com", claims={})


@pytest_asyncio.fixture
async def app(db: FirestoreDB, admin_user: AuthUser) -> AsyncGenerator[FastAPI, None]:
    """FastAPI app wired to the in-memory Firestore and signed in as the admin.

    Tests can swap the signed-in user through
    ``app.dependency_overrides[get_current_user]``.
    """
    auth = AuthService(api_key=None)

    fastapi_app.dependency_overrides[get_db] = lambda: db
    fastapi_app.dependency_overrides[get_auth] = lambda: auth
    fastapi_app.dependency_overrides[get_current_user] = lambda: admin_user

    yield fastapi_app

    # Clean up
    fastapi_app.dependency_overrides.clear()
    await auth.close()


@pytest_asyncio.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for testing"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def make_image():
    """Build encoded image bytes of a given size and format."""

    def _make_image(width: int = 100, height: int = 100, fmt: str = "PNG", mode: str = "RGB") -> bytes:
        color = (200, 30, 30, 128) if mode == "RGBA" else (200, 30, 30)
        buffer = io.BytesIO()
        Image.new(mode, (width, height), color).save(buffer, format=fmt)
        return buffer.getvalue()

    return _make_image
