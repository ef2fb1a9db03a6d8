"""
Shared pytest fixtures: an in-memory SQLite store behind the real app.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-testing-only")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from expense_tracker.db.base import Base
from expense_tracker.db.session import get_db
from expense_tracker.main import app
import expense_tracker.models  # noqa: F401

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_database():
    """Fresh tables for every test."""
    Base.metadata.create_all(bind=engine)
    app.dependency_overrides[get_db] = override_get_db
    yield
    app.dependency_overrides.clear()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


def signup_user(client, name="Alice", email="alice@example.com", password="secret1"):
    """Sign up a user and return the response data ({user, token})."""
    response = client.post(
        "/api/auth/signup",
        json={"name": name, "email": email, "password": password}
    )
    assert response.status_code == 201, response.json()
    return response.json()["data"]


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(client):
    """Authorization headers for a freshly signed-up user."""
    return bearer(signup_user(client)["token"])


@pytest.fixture
def other_headers(client):
    """Authorization headers for a second, unrelated user."""
    return bearer(signup_user(client, name="Bob", email="bob@example.com")["token"])
