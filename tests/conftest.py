"""
Shared fixtures: an in-memory app per test and helpers for bearer headers.
"""

import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from core.passwords import PasswordHasher
from core.tokens import TokenIssuer, TokenValidator
from database import create_db_engine, create_session_factory, init_db
from main import create_app

TEST_SECRET = "test-secret-key-" + "x" * 48


@pytest.fixture
def settings() -> Settings:
    return Settings(
        jwt_secret_key=TEST_SECRET,
        bcrypt_rounds=4,
        database_url="sqlite://",
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def db_session():
    engine = create_db_engine("sqlite://")
    init_db(engine)
    session = create_session_factory(engine)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def issuer() -> TokenIssuer:
    return TokenIssuer(TEST_SECRET)


@pytest.fixture
def validator() -> TokenValidator:
    return TokenValidator(TEST_SECRET)


@pytest.fixture
def auth_headers(client) -> dict:
    resp = client.post(
        "/api/auth/register",
        json={"username": "alice", "email": "a@x.com", "password": "pw123"},
    )
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['token']}"}
