# src/chirpy/models/document.py
"""The single aggregate persisted by the document store."""

from collections.abc import Mapping

from pydantic import BaseModel, Field, model_validator

from .chirp import Chirp
from .user import User


class IdCollisionError(ValueError):
    """Raised when the next id is already taken by an existing row."""

    def __init__(self, new_id: int) -> None:
        super().__init__(f"id {new_id} is already in use")
        self.new_id = new_id


class Document(BaseModel):
    """Both tables of the miniature database.

    Mapping keys are the entity ids. On disk they appear as decimal strings,
    with each value repeating its numeric id.
    """

    chirps: dict[int, Chirp] = Field(default_factory=dict)
    users: dict[int, User] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _keys_match_ids(self) -> "Document":
        for name, table in (("chirps", self.chirps), ("users", self.users)):
            for key, row in table.items():
                if key != row.id:
                    raise ValueError(f"{name} key {key} does not match row id {row.id}")
        return self

    @staticmethod
    def next_id(table: Mapping[int, object]) -> int:
        """Return the id for the next row of `table`.

        Rows are never deleted, so the row count doubles as the highest id.

        Raises:
            IdCollisionError: If the table has gaps and the id is taken.
        """
        new_id = len(table) + 1
        if new_id in table:
            raise IdCollisionError(new_id)
        return new_id
