"""Shared fixtures: isolated in-memory database per test, configured settings."""

import os

from cryptography.fernet import Fernet

# Must be set before backend.config is imported anywhere
os.environ.setdefault("BLOG_DATABASE_URL", "sqlite://")
os.environ.setdefault("BLOG_ENCRYPTION_KEY", Fernet.generate_key().decode())
os.environ.setdefault("BLOG_JWT_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

import backend.models  # noqa: F401
from backend.config import settings
from backend.database import get_session
from backend.services.auth_flow import AuthService
from backend.services.users import UserStore


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def store(session) -> UserStore:
    return UserStore(session)


@pytest.fixture
def auth(store) -> AuthService:
    return AuthService(store)


@pytest.fixture
def client(engine, tmp_path, monkeypatch):
    from backend.main import app

    def _get_session():
        with Session(engine) as session:
            yield session

    monkeypatch.setattr(settings, "upload_dir", str(tmp_path / "uploads"))
    app.dependency_overrides[get_session] = _get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def register_user(client):
    """Register through the API and return the auth response body."""

    def _register(email: str, username: str, password: str = "secret-pw") -> dict:
        resp = client.post(
            "/api/auth/register",
            json={"email": email, "username": username, "password": password},
        )
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _register


@pytest.fixture
def auth_headers(register_user):
    """Bearer headers for a freshly registered (first, hence superuser) account."""
    body = register_user("admin@example.com", "admin")
    return {"Authorization": f"Bearer {body['access_token']}"}
