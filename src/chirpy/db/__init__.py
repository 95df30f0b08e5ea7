# src/chirpy/db/__init__.py
"""Embedded JSON persistence."""

from .rwlock import ReadWriteLock
from .store import DocumentStore, PersistenceError

__all__ = ["DocumentStore", "PersistenceError", "ReadWriteLock"]
