# src/chirpy/models/chirp.py
"""Chirp entity as stored in the JSON document."""

from pydantic import BaseModel, ConfigDict


class Chirp(BaseModel):
    """Short text post. Immutable once created."""

    id: int
    body: str

    model_config = ConfigDict(frozen=True)
