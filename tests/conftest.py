# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

os.environ.setdefault("JWT_SECRET", "test-secret-key-for-chirpy")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from chirpy.api.v1.dependencies import get_store, get_token_service
from chirpy.core.security import hash_password
from chirpy.db.store import DocumentStore
from chirpy.main import app as fastapi_app
from chirpy.models import User
from chirpy.repositories import ChirpRepository, UserRepository
from chirpy.services.metrics import get_hit_counter
from chirpy.services.tokens import TokenService

TEST_SECRET = os.environ["JWT_SECRET"]
TEST_PASSWORD = "hunter2-correct-horse"


@pytest.fixture()
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "database.json"


@pytest.fixture()
def store(db_path: Path) -> DocumentStore:
    """Return an initialised store backed by a per-test file."""
    store = DocumentStore(db_path)
    store.ensure_exists()
    return store


@pytest.fixture()
def chirp_repo(store: DocumentStore) -> ChirpRepository:
    return ChirpRepository(store)


@pytest.fixture()
def user_repo(store: DocumentStore) -> UserRepository:
    return UserRepository(store)


@pytest.fixture()
def token_service() -> TokenService:
    return TokenService(TEST_SECRET)


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_dependencies(
    app: FastAPI,
    store: DocumentStore,
    token_service: TokenService,
) -> Iterator[None]:
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_token_service] = lambda: token_service
    get_hit_counter().reset()
    try:
        yield
    finally:
        app.dependency_overrides.pop(get_store, None)
        app.dependency_overrides.pop(get_token_service, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def test_user(user_repo: UserRepository) -> User:
    """Create and return a persisted test user."""
    return user_repo.create("walt@example.com", hash_password(TEST_PASSWORD))


@pytest.fixture()
def other_user(user_repo: UserRepository) -> User:
    """Create and return a second persisted user."""
    return user_repo.create("jesse@example.com", hash_password(TEST_PASSWORD))


@pytest.fixture()
def auth_token(test_user: User, token_service: TokenService) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    token = token_service.issue(test_user.id, 3600)
    return {"Authorization": f"Bearer {token}"}
