"""Shared API dependencies for storage access and authentication."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from chirpy.core.settings import settings
from chirpy.db.store import DocumentStore
from chirpy.repositories import ChirpRepository, UserRepository
from chirpy.services.auth_service import AuthService
from chirpy.services.metrics import HitCounter, get_hit_counter
from chirpy.services.tokens import TokenError, TokenService


@lru_cache
def get_store() -> DocumentStore:
    """Return the process-wide document store for the configured path."""
    return DocumentStore(settings.database_path)


@lru_cache
def get_token_service() -> TokenService:
    """Return the token service configured from settings."""
    return TokenService()


StoreDep = Annotated[DocumentStore, Depends(get_store)]
TokenServiceDep = Annotated[TokenService, Depends(get_token_service)]
HitCounterDep = Annotated[HitCounter, Depends(get_hit_counter)]


def get_chirp_repo(store: StoreDep) -> ChirpRepository:
    return ChirpRepository(store)


def get_user_repo(store: StoreDep) -> UserRepository:
    return UserRepository(store)


ChirpRepoDep = Annotated[ChirpRepository, Depends(get_chirp_repo)]
UserRepoDep = Annotated[UserRepository, Depends(get_user_repo)]


def get_auth_service(users: UserRepoDep, tokens: TokenServiceDep) -> AuthService:
    return AuthService(users, tokens)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


def unauthorized(detail: str) -> HTTPException:
    """Build the 401 response used for every token failure."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user_id(
    tokens: TokenServiceDep,
    authorization: Annotated[str | None, Header()] = None,
) -> int:
    """Resolve the user id asserted by the ``Authorization`` bearer token.

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid.
    """
    if not authorization:
        raise unauthorized("Missing bearer token")
    try:
        return tokens.validate(authorization)
    except TokenError as err:
        raise unauthorized(str(err)) from err


CurrentUserIdDep = Annotated[int, Depends(get_current_user_id)]
