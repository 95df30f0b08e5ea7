"""Tests for account endpoints."""

from fastapi import status

from chirpy.core.security import verify_password
from chirpy.repositories import UserRepository
from tests.conftest import TEST_PASSWORD


def test_create_user(client, user_repo: UserRepository) -> None:
    response = client.post("/api/users", json={"email": "a@x.com", "password": "pw"})

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json() == {"id": 1, "email": "a@x.com"}
    assert verify_password("pw", user_repo.get_by_id(1).password_hash)


def test_create_user_never_returns_password_hash(client) -> None:
    response = client.post("/api/users", json={"email": "a@x.com", "password": "pw"})

    assert "hashedPassword" not in response.json()
    assert "password_hash" not in response.json()


def test_create_duplicate_user(client, test_user) -> None:
    response = client.post("/api/users", json={"email": test_user.email, "password": "pw"})

    assert response.status_code == status.HTTP_409_CONFLICT


def test_create_user_requires_email_and_password(client) -> None:
    response = client.post("/api/users", json={"email": "a@x.com"})

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_update_own_account(client, test_user, auth_token, user_repo: UserRepository) -> None:
    response = client.put(
        "/api/users",
        json={"email": "heisenberg@example.com", "password": "new-password"},
        headers=auth_token,
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"id": test_user.id, "email": "heisenberg@example.com"}
    stored = user_repo.get_by_id(test_user.id)
    assert verify_password("new-password", stored.password_hash)
    assert not verify_password(TEST_PASSWORD, stored.password_hash)


def test_update_only_touches_token_subject(
    client, test_user, other_user, auth_token, user_repo: UserRepository
) -> None:
    client.put(
        "/api/users",
        json={"email": "changed@example.com", "password": "new-password"},
        headers=auth_token,
    )

    assert user_repo.get_by_id(other_user.id) == other_user


def test_update_to_taken_email_conflicts(client, test_user, other_user, auth_token) -> None:
    response = client.put(
        "/api/users",
        json={"email": other_user.email, "password": "new-password"},
        headers=auth_token,
    )

    assert response.status_code == status.HTTP_409_CONFLICT


def test_update_without_token(client, test_user) -> None:
    response = client.put("/api/users", json={"email": "x@x.com", "password": "pw"})

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.headers["www-authenticate"] == "Bearer"


def test_update_with_bad_token(client, test_user) -> None:
    response = client.put(
        "/api/users",
        json={"email": "x@x.com", "password": "pw"},
        headers={"Authorization": "Bearer not.a.valid.jwt"},
    )

    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_update_for_vanished_user(client, token_service) -> None:
    token = token_service.issue(99, 60)

    response = client.put(
        "/api/users",
        json={"email": "x@x.com", "password": "pw"},
        headers={"Authorization": f"Bearer {token}"},
    )

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_create_user_with_overlong_password(client, user_repo: UserRepository) -> None:
    response = client.post("/api/users", json={"email": "long@x.com", "password": "p" * 100})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert user_repo.count() == 0


def test_update_with_overlong_password(
    client, test_user, auth_token, user_repo: UserRepository
) -> None:
    response = client.put(
        "/api/users",
        json={"email": "long@x.com", "password": "p" * 100},
        headers=auth_token,
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert user_repo.get_by_id(test_user.id) == test_user
