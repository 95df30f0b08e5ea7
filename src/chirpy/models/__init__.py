# src/chirpy/models/__init__.py
"""Pydantic models for the persisted Chirpy document."""

from .document import Document
from .chirp import Chirp
from .user import User

__all__ = [
    "Chirp",
    "Document",
    "User",
]
