# src/chirpy/schemas/chirp.py
"""Chirp-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ChirpCreate(BaseModel):
    """Schema for creating a new chirp."""

    body: str = Field(..., description="Chirp text; long bodies are rejected by the service")


class ChirpResponse(BaseModel):
    """Schema for chirp information returned by the API."""

    id: int
    body: str

    model_config = ConfigDict(from_attributes=True)
