"""Pytest configuration and fixtures."""

import os

# Settings are read at import time, so these must be set before importing the app
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from lifetracker import models  # noqa: E402, F401
from lifetracker.config import get_settings  # noqa: E402
from lifetracker.database import Base, get_db  # noqa: E402
from lifetracker.main import app  # noqa: E402
from lifetracker.services.user_service import UserService  # noqa: E402

TEST_PASSWORD = "testpass123"


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# SQLite locally, PostgreSQL when TEST_DATABASE_URL points at one
SQLALCHEMY_DATABASE_URL = get_settings().sqlalchemy_database_url

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_user(db, email: str, username: str, password: str = TEST_PASSWORD):
    """Register a user straight through the user service."""
    return UserService(db).register(
        email=email,
        username=username,
        first_name="Test",
        last_name="User",
        password=password,
    )


@pytest.fixture
def user_factory(db):
    """Create users with the given email and username."""

    def factory(email: str, username: str, password: str = TEST_PASSWORD):
        return make_user(db, email, username, password)

    return factory


@pytest.fixture
def user(db):
    """A registered user."""
    return make_user(db, "known@example.com", "known")


@pytest.fixture
def other_user(db):
    """A second registered user."""
    return make_user(db, "other@example.com", "other")


def _register(client, email: str, username: str) -> AuthHeaders:
    response = client.post(
        "/auth/register",
        json={
            "email": email,
            "username": username,
            "firstName": "Test",
            "lastName": "User",
            "password": TEST_PASSWORD,
        },
    )
    assert response.status_code == 201
    data = response.json()

    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
    )


@pytest.fixture
def auth_headers(client):
    """Register a user over HTTP and return auth headers with user info."""
    return _register(client, "test@example.com", "tester")


@pytest.fixture
def other_auth_headers(client):
    """Auth headers for a second, unrelated user."""
    return _register(client, "someone@example.com", "someone")
