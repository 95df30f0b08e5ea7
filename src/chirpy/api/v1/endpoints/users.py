# src/chirpy/api/v1/endpoints/users.py
"""Account endpoints for the Chirpy API."""

from typing import Annotated

from fastapi import APIRouter, Header, HTTPException, status

from chirpy.api.v1.dependencies import AuthServiceDep, unauthorized
from chirpy.core.security import PasswordTooLongError
from chirpy.models import User
from chirpy.repositories.errors import DuplicateEmailError, NotFoundError
from chirpy.schemas.user import UserCredentials, UserResponse
from chirpy.services.tokens import TokenError

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCredentials, auth: AuthServiceDep) -> User:
    """Register a new account."""
    try:
        return auth.register(payload.email, payload.password)
    except PasswordTooLongError as err:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(err),
        ) from err
    except DuplicateEmailError as err:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(err),
        ) from err


@router.put("", response_model=UserResponse)
def update_user(
    payload: UserCredentials,
    auth: AuthServiceDep,
    authorization: Annotated[str | None, Header()] = None,
) -> User:
    """Replace the caller's email and password.

    The account to update is always the token's subject.
    """
    try:
        return auth.update_self(authorization, payload.email, payload.password)
    except TokenError as err:
        raise unauthorized(str(err)) from err
    except PasswordTooLongError as err:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(err),
        ) from err
    except NotFoundError as err:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        ) from err
    except DuplicateEmailError as err:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(err),
        ) from err
