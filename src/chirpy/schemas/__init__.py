# src/chirpy/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .chirp import ChirpCreate, ChirpResponse
from .user import LoginRequest, LoginResponse, UserCredentials, UserResponse

__all__ = [
    "ChirpCreate", "ChirpResponse",
    "LoginRequest", "LoginResponse", "UserCredentials", "UserResponse",
]
