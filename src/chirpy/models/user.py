# src/chirpy/models/user.py
"""User entity as stored in the JSON document."""

import base64

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class User(BaseModel):
    """Account identity with a unique email and a bcrypt password hash."""

    id: int
    email: str
    password_hash: bytes = Field(alias="hashedPassword", repr=False)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("password_hash", mode="before")
    @classmethod
    def _decode_password_hash(cls, value: object) -> object:
        # Strings only come from the on-disk document, where bytes are base64 encoded.
        if isinstance(value, str):
            try:
                return base64.b64decode(value, validate=True)
            except ValueError as err:
                raise ValueError("hashedPassword must be base64 encoded") from err
        return value

    @field_serializer("password_hash", when_used="json")
    def _encode_password_hash(self, value: bytes) -> str:
        return base64.b64encode(value).decode("ascii")
