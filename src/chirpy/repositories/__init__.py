# src/chirpy/repositories/__init__.py
"""Entity repositories built on the document store."""

from .chirp_repo import ChirpRepository
from .errors import DuplicateEmailError, NotFoundError, RepositoryError
from .user_repo import UserRepository

__all__ = [
    "ChirpRepository",
    "UserRepository",
    "RepositoryError",
    "NotFoundError",
    "DuplicateEmailError",
]
