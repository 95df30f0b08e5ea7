# src/chirpy/services/__init__.py
"""Business logic services for the Chirpy application."""

from .auth_service import AuthService, InvalidCredentialsError
from .chirp_service import ChirpTooLongError
from .metrics import HitCounter
from .tokens import TokenService

__all__ = [
    "AuthService",
    "InvalidCredentialsError",
    "ChirpTooLongError",
    "HitCounter",
    "TokenService",
]
