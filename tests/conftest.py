"""
Pytest configuration and fixtures.

The environment is pointed at a throwaway SQLite database before anything
imports ``settings``; the schema is dropped and recreated for every test.
"""

import os
import tempfile
from pathlib import Path

_TEST_DIR = tempfile.mkdtemp(prefix="getusfit-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{Path(_TEST_DIR) / 'test.db'}"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["JWT_SECRET_FILE"] = str(Path(_TEST_DIR) / ".jwt_secret")
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENV"] = "test"
os.environ.pop("SENTRY_DSN", None)

import pytest
from fastapi.testclient import TestClient

import app.models  # noqa: F401
from app.database import Base, get_engine, get_session_factory
from app.stores.accounts import AccountStore
from main import app as fastapi_app


@pytest.fixture(autouse=True)
def _fresh_schema():
    """Recreate every table so each test starts from an empty database."""
    engine = get_engine()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def db():
    """A database session for direct store access."""
    session = get_session_factory()()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    """Test client running the app lifespan."""
    with TestClient(fastapi_app) as test_client:
        yield test_client


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def set_role(username: str, role: str) -> None:
    """Change a role behind the API's back, as the CLI would."""
    session = get_session_factory()()
    try:
        store = AccountStore(session)
        store.set_role(store.find_by_username(username), role)
    finally:
        session.close()


@pytest.fixture
def register(client):
    """
    Factory registering an account (optionally with a role).

    Returns a dict with id, username, token and ready-made headers.
    """
    def _register(username: str, password: str = "password123", role: str = None) -> dict:
        response = client.post(
            "/api/auth/register",
            json={"username": username, "password": password}
        )
        assert response.status_code == 201, response.text
        body = response.json()
        if role:
            set_role(username, role)
        return {
            "id": body["user_id"],
            "username": body["username"],
            "token": body["token"],
            "headers": auth_headers(body["token"]),
        }

    return _register


@pytest.fixture
def alice(register):
    return register("alice")


@pytest.fixture
def admin(register):
    return register("root_admin", role="admin")


@pytest.fixture
def trainer(register):
    return register("coach", role="trainer")
