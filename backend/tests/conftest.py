"""
Pytest fixtures for ActionTrack API tests.
Uses in-memory SQLite, mocks Redis, provides a test account and auth token.
"""
import os
import pytest
from unittest.mock import AsyncMock, patch
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Use in-memory SQLite for tests - set before config/session load
# Must override any .env DATABASE_URL
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"

from backend.app.db.base import Base
from backend.main import app
from backend.app.core.config import settings
from backend.app.core.dependencies import get_db
from backend.app.core.security import get_password_hash
from backend.app.models.account import Account
from backend.app.services.token_service import TokenIssuer

TEST_PASSWORD = "Secret123"

# In-memory SQLite for tests - StaticPool ensures all sessions share same DB
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Patch the session module so app uses our test engine
import backend.app.db.session as session_module
session_module.engine = engine
session_module.SessionLocal = TestingSessionLocal


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function")
def db_session():
    """Create tables and a fresh DB session per test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def test_account(db_session):
    """Create a test account in the DB."""
    account = Account(
        name="Test User",
        email="test@example.com",
        password=get_password_hash(TEST_PASSWORD, rounds=4),
        companyname="Acme",
    )
    db_session.add(account)
    db_session.commit()
    db_session.refresh(account)
    return account


@pytest.fixture
def auth_headers(test_account):
    """Bearer token for the test account (signin form, {id} claim)."""
    token = TokenIssuer(settings).signin_token(test_account)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def client(db_session):
    """TestClient backed by the per-test database."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def mock_redis(request):
    """Mock Redis cache: get returns None (cache miss), set/incr no-op. Skip connect.
    Tests marked real_cache run the cache module against their own fake client instead."""
    if request.node.get_closest_marker("real_cache"):
        yield
        return
    with patch("backend.app.utils.cache.get", new_callable=AsyncMock, return_value=None), \
         patch("backend.app.utils.cache.set", new_callable=AsyncMock), \
         patch("backend.app.utils.cache.incr", new_callable=AsyncMock), \
         patch("backend.app.utils.cache.connect", new_callable=AsyncMock):
        yield
