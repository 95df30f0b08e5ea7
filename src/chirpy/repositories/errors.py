"""Exceptions raised by the entity repositories."""
from __future__ import annotations


class RepositoryError(RuntimeError):
    """Base class for repository-level failures."""


class NotFoundError(RepositoryError):
    """Raised when a lookup misses."""

    def __init__(self, entity: str, key: object) -> None:
        super().__init__(f"{entity} not found: {key!r}")
        self.entity = entity
        self.key = key


class DuplicateEmailError(RepositoryError):
    """Raised when an email is already owned by another user."""

    def __init__(self, email: str) -> None:
        super().__init__("an account with this email already exists")
        self.email = email
