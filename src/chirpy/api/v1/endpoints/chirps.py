# src/chirpy/api/v1/endpoints/chirps.py
"""Chirp endpoints for the Chirpy API."""

from fastapi import APIRouter, HTTPException, status

from chirpy.api.v1.dependencies import ChirpRepoDep, CurrentUserIdDep
from chirpy.models import Chirp
from chirpy.repositories.errors import NotFoundError
from chirpy.schemas.chirp import ChirpCreate, ChirpResponse
from chirpy.services.chirp_service import ChirpTooLongError, create_chirp

router = APIRouter(prefix="/chirps", tags=["chirps"])


@router.get("", response_model=list[ChirpResponse])
def list_chirps(repo: ChirpRepoDep) -> list[Chirp]:
    """List every chirp ordered by ascending id."""
    return repo.list_all()


@router.post("", response_model=ChirpResponse, status_code=status.HTTP_201_CREATED)
def post_chirp(payload: ChirpCreate, repo: ChirpRepoDep, user_id: CurrentUserIdDep) -> Chirp:
    """Create a chirp on behalf of the authenticated user.

    Raises:
        HTTPException: 400 if the body is too long.
    """
    try:
        return create_chirp(repo=repo, body=payload.body)
    except ChirpTooLongError as err:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(err),
        ) from err


@router.get("/{chirp_id}", response_model=ChirpResponse)
def get_chirp(chirp_id: int, repo: ChirpRepoDep) -> Chirp:
    """Return one chirp by id."""
    try:
        return repo.get_by_id(chirp_id)
    except NotFoundError as err:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Chirp not found",
        ) from err
