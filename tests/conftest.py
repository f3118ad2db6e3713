"""Pytest configuration and fixtures."""

import os

# Settings are read at import time; a signing secret is mandatory.
os.environ.setdefault("JWT_SECRET", "test-signing-secret-not-for-production")
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("UPLOAD_DIR", "./test-uploads")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from propconnect.api.dependencies import get_token_service  # noqa: E402
from propconnect.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from propconnect.main import app  # noqa: E402

SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"]

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
if "sqlite" in SQLALCHEMY_DATABASE_URL:
    enable_sqlite_foreign_keys(engine)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class AuthHeaders(dict):
    """Dict subclass that also stores the registered user's details."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    from propconnect import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    yield


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


@pytest.fixture
def token_service():
    """The token service the application signs with."""
    return get_token_service()


def register(client, name: str, email: str, password: str = "secret1") -> AuthHeaders:
    """Register a user through the API and return auth headers for them."""
    response = client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    data = response.json()
    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register(client, "Alice", "alice@example.com")


@pytest.fixture
def other_auth_headers(client):
    """A second, unrelated user."""
    return register(client, "Bob", "bob@example.com")


@pytest.fixture
def register_user(client):
    """Factory registering additional users."""

    def _register(name: str, email: str, password: str = "secret1") -> AuthHeaders:
        return register(client, name, email, password)

    return _register


def property_payload(**overrides) -> dict:
    """A valid general property body."""
    payload = {
        "title": "Sunny two-bedroom",
        "description": "Close to the park",
        "price": 350000,
        "location": "Austin, TX",
        "bedrooms": 2,
        "bathrooms": 1,
        "area": 950,
        "propertyType": "Apartment",
        "images": ["http://localhost:5001/uploads/a.jpg"],
        "amenities": ["Parking"],
        "status": "forSale",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_property_payload():
    return property_payload
