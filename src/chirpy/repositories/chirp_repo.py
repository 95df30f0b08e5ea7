"""Data access helpers for working with chirps."""
from __future__ import annotations

import logging

from chirpy.db.store import DocumentStore, PersistenceError
from chirpy.models import Chirp, Document
from chirpy.models.document import IdCollisionError
from chirpy.repositories.errors import NotFoundError

__all__ = ["ChirpRepository"]

logger = logging.getLogger(__name__)


class ChirpRepository:
    """Thin wrapper around the document store for chirp entities."""

    def __init__(self, store: DocumentStore) -> None:
        """Initialize the repository with the shared document store."""
        self.store = store

    def create(self, body: str) -> Chirp:
        """Insert a new chirp and return it with its assigned id."""
        with self.store.transaction() as doc:
            try:
                chirp_id = Document.next_id(doc.chirps)
            except IdCollisionError as err:
                raise PersistenceError("Chirp ids are not contiguous", self.store.path) from err
            chirp = Chirp(id=chirp_id, body=body)
            doc.chirps[chirp.id] = chirp
        logger.info("Created chirp %d", chirp.id)
        return chirp

    def list_all(self) -> list[Chirp]:
        """Return every chirp sorted by ascending id."""
        with self.store.snapshot() as doc:
            return sorted(doc.chirps.values(), key=lambda chirp: chirp.id)

    def get_by_id(self, chirp_id: int) -> Chirp:
        """Return a chirp by identifier."""
        with self.store.snapshot() as doc:
            chirp = doc.chirps.get(chirp_id)
        if chirp is None:
            raise NotFoundError("chirp", chirp_id)
        return chirp

    def count(self) -> int:
        """Return the number of stored chirps."""
        with self.store.snapshot() as doc:
            return len(doc.chirps)
