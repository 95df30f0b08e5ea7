"""JSON document store shared by all request handlers.

The whole database lives in one JSON file. Reads take the shared side of a
readers/writer lock; every mutation runs as a single exclusive
load-modify-replace section via :meth:`DocumentStore.transaction`.
"""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from pydantic import ValidationError

from chirpy.db.rwlock import ReadWriteLock
from chirpy.models import Document

__all__ = ["DocumentStore", "PersistenceError"]

logger = logging.getLogger(__name__)

_FILE_MODE = 0o600


class PersistenceError(RuntimeError):
    """Raised when the backing file cannot be read, decoded, encoded or written."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class DocumentStore:
    """Owns the on-disk JSON document and the lock guarding it."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        self._lock = ReadWriteLock()

    def ensure_exists(self) -> None:
        """Write an empty document if the backing file is absent."""
        with self._lock.write_locked():
            if self.path.exists():
                return
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as err:
                raise PersistenceError("Could not create document directory", self.path) from err
            self._write_unlocked(Document())
            logger.info("Created empty document at %s", self.path)

    def load(self) -> Document:
        """Return a fresh copy of the persisted document."""
        with self._lock.read_locked():
            return self._read_unlocked()

    def replace(self, doc: Document) -> None:
        """Overwrite the persisted document with `doc`.

        This is a blind write. Callers deriving `doc` from a previous
        :meth:`load` must use :meth:`transaction` instead.
        """
        with self._lock.write_locked():
            self._write_unlocked(doc)

    def reset(self) -> None:
        """Replace the document with an empty one."""
        self.replace(Document())

    @contextmanager
    def snapshot(self) -> Iterator[Document]:
        """Hold the shared lock while the caller inspects the document."""
        with self._lock.read_locked():
            yield self._read_unlocked()

    @contextmanager
    def transaction(self) -> Iterator[Document]:
        """Yield the document for mutation and persist it on clean exit.

        Load, mutation and write all happen under one exclusive lock
        acquisition. If the block raises, nothing is written.
        """
        with self._lock.write_locked():
            doc = self._read_unlocked()
            yield doc
            self._write_unlocked(doc)

    def _read_unlocked(self) -> Document:
        try:
            raw = self.path.read_bytes()
        except OSError as err:
            raise PersistenceError("Could not read document", self.path) from err
        try:
            doc = Document.model_validate_json(raw)
        except ValidationError as err:
            raise PersistenceError("Could not decode document", self.path) from err
        logger.debug("Loaded document from %s (%d bytes)", self.path, len(raw))
        return doc

    def _write_unlocked(self, doc: Document) -> None:
        try:
            payload = doc.model_dump_json(by_alias=True).encode("utf-8")
        except (ValueError, TypeError) as err:
            raise PersistenceError("Could not encode document", self.path) from err

        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
            )
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.chmod(tmp_name, _FILE_MODE)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as err:
            raise PersistenceError("Could not write document", self.path) from err
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
        logger.debug("Wrote document to %s (%d bytes)", self.path, len(payload))
