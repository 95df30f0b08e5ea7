"""Data access helpers for working with users."""
from __future__ import annotations

import logging
from collections.abc import Callable

from chirpy.core.security import hash_password
from chirpy.db.store import DocumentStore, PersistenceError
from chirpy.models import Document, User
from chirpy.models.document import IdCollisionError
from chirpy.repositories.errors import DuplicateEmailError, NotFoundError

__all__ = ["UserRepository"]

logger = logging.getLogger(__name__)


def _find_by_email(doc: Document, email: str) -> User | None:
    # Case-sensitive on purpose: "A@x.com" and "a@x.com" are distinct accounts.
    for user in doc.users.values():
        if user.email == email:
            return user
    return None


class UserRepository:
    """Thin wrapper around the document store for user entities.

    Enforces that no two users share an email, on create and on update.
    """

    def __init__(
        self,
        store: DocumentStore,
        hasher: Callable[[str], bytes] = hash_password,
    ) -> None:
        """Initialize the repository.

        Args:
            store: Shared document store.
            hasher: Password hashing function used by :meth:`update`.
        """
        self.store = store
        self._hash = hasher

    def create(self, email: str, password_hash: bytes) -> User:
        """Insert a new user, rejecting emails that are already taken."""
        with self.store.transaction() as doc:
            if _find_by_email(doc, email) is not None:
                raise DuplicateEmailError(email)
            try:
                user_id = Document.next_id(doc.users)
            except IdCollisionError as err:
                raise PersistenceError("User ids are not contiguous", self.store.path) from err
            user = User(id=user_id, email=email, password_hash=password_hash)
            doc.users[user.id] = user
        logger.info("Created user %d", user.id)
        return user

    def get_by_email(self, email: str) -> User:
        """Return the user owning `email`."""
        with self.store.snapshot() as doc:
            user = _find_by_email(doc, email)
        if user is None:
            raise NotFoundError("user", email)
        return user

    def get_by_id(self, user_id: int) -> User:
        """Return a user by identifier."""
        with self.store.snapshot() as doc:
            user = doc.users.get(user_id)
        if user is None:
            raise NotFoundError("user", user_id)
        return user

    def update(self, user_id: int, new_email: str, new_password: str) -> User:
        """Replace a user's email and password.

        Args:
            user_id: Identifier of the user being updated.
            new_email: Replacement email; must not belong to another user.
            new_password: Cleartext replacement password, hashed here.

        Raises:
            NotFoundError: If no user has `user_id`.
            DuplicateEmailError: If another user already owns `new_email`.
        """
        # Hash outside the critical section; bcrypt is deliberately slow.
        password_hash = self._hash(new_password)
        with self.store.transaction() as doc:
            current = doc.users.get(user_id)
            if current is None:
                raise NotFoundError("user", user_id)
            owner = _find_by_email(doc, new_email)
            if owner is not None and owner.id != user_id:
                raise DuplicateEmailError(new_email)
            user = current.model_copy(update={"email": new_email, "password_hash": password_hash})
            doc.users[user_id] = user
        logger.info("Updated user %d", user_id)
        return user

    def count(self) -> int:
        """Return the number of stored users."""
        with self.store.snapshot() as doc:
            return len(doc.users)
