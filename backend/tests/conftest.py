"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Services run against the in-memory credential store with a low bcrypt cost so
the suite stays hermetic and fast.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Callable, Optional

import jwt  # PyJWT
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import (
    ServiceContainer,
    get_account_service,
    get_auth_service,
    get_credential_store,
    reset_container,
)
from modules.accounts.passwords import PasswordVerifier
from modules.accounts.repository import InMemoryCredentialStore
from modules.accounts.service import AccountService
from modules.auth.service import AuthService
from modules.auth.tokens import TokenService
from shared.config import Settings


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

# Lowest cost bcrypt accepts; production default is 10
TEST_BCRYPT_ROUNDS = 4


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def settings() -> Settings:
    """Settings for an in-memory deployment, ignoring any local .env."""
    return Settings(
        _env_file=None,
        jwt_secret=TEST_JWT_SECRET,
        storage_backend="memory",
        bcrypt_rounds=TEST_BCRYPT_ROUNDS,
    )


@pytest.fixture
def store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
def passwords() -> PasswordVerifier:
    return PasswordVerifier(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(secret=TEST_JWT_SECRET)


@pytest.fixture
def account_service(store, passwords, tokens) -> AccountService:
    return AccountService(store=store, passwords=passwords, tokens=tokens)


@pytest.fixture
def auth_service(store, tokens) -> AuthService:
    return AuthService(tokens=tokens, store=store)


@pytest.fixture
def container(settings, store, passwords, tokens) -> ServiceContainer:
    """A container whose store/hasher/token service are the test fixtures."""
    container = ServiceContainer(settings)
    container._store = store
    container._passwords = passwords
    container._tokens = tokens
    return container


@pytest.fixture
def app(container) -> FastAPI:
    """Create a fresh app wired to the test container."""
    app = create_app()
    app.dependency_overrides[get_account_service] = lambda: container.accounts
    app.dependency_overrides[get_auth_service] = lambda: container.auth
    app.dependency_overrides[get_credential_store] = lambda: container.store
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def make_token() -> Callable[..., str]:
    """
    Build a signed token by hand.

    Args (of the returned function):
        email: Subject to put in the token
        secret: Signing secret (defaults to the test secret)
        expired: If True, the token expired an hour ago
        claims: Extra or replacement claims
    """

    def _make_token(
        email: str = "test@example.com",
        secret: str = TEST_JWT_SECRET,
        expired: bool = False,
        claims: Optional[dict] = None,
    ) -> str:
        now = datetime.now(timezone.utc)
        exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)
        payload = {
            "sub": email,
            "email": email,
            "iat": int(now.timestamp()) - (7200 if expired else 0),
            "exp": int(exp.timestamp()),
        }
        payload.update(claims or {})
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make_token


@pytest.fixture
def seed_account(store, passwords) -> Callable[..., str]:
    """Insert an account directly; ``legacy=True`` stores the password raw."""

    def _seed(email: str, password: str, legacy: bool = False) -> str:
        credential = password if legacy else passwords.hash(password)
        store.create(email, credential)
        return email

    return _seed
