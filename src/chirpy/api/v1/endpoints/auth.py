# src/chirpy/api/v1/endpoints/auth.py
"""Authentication endpoints for the Chirpy API."""

from fastapi import APIRouter, HTTPException, status

from chirpy.api.v1.dependencies import AuthServiceDep
from chirpy.repositories.errors import NotFoundError
from chirpy.schemas.user import LoginRequest, LoginResponse
from chirpy.services.auth_service import InvalidCredentialsError

router = APIRouter(tags=["authentication"])


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, auth: AuthServiceDep) -> LoginResponse:
    """Exchange an email and password for a bearer token."""
    try:
        result = auth.login(payload.email, payload.password, payload.expires_in_seconds)
    except NotFoundError as err:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No user with this email",
        ) from err
    except InvalidCredentialsError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect password",
        ) from err

    return LoginResponse(id=result.user.id, email=result.user.email, token=result.token)
