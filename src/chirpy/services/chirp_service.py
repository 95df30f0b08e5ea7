"""Service-level helpers for validating and cleaning chirp bodies."""
from __future__ import annotations

from collections.abc import Iterable

from chirpy.core.settings import settings
from chirpy.models import Chirp
from chirpy.repositories.chirp_repo import ChirpRepository

MASK = "****"


class ChirpTooLongError(ValueError):
    """Raised when a chirp body exceeds the configured maximum length."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"Chirp is too long ({length} > {limit} characters)")
        self.length = length
        self.limit = limit


def clean_body(body: str, profane_words: Iterable[str] | None = None) -> str:
    """Mask profane words in `body`.

    Words are split on single spaces and compared case-insensitively. Words
    with attached punctuation are left untouched.
    """
    banned = (
        frozenset(word.lower() for word in profane_words)
        if profane_words is not None
        else settings.profane_word_set
    )
    return " ".join(MASK if word.lower() in banned else word for word in body.split(" "))


def create_chirp(
    *,
    repo: ChirpRepository,
    body: str,
    max_length: int | None = None,
) -> Chirp:
    """Validate, clean and persist a chirp.

    Args:
        repo: Repository used to persist the chirp.
        body: Raw body submitted by the client.
        max_length: Length limit; defaults to ``settings.chirp_max_length``.

    Raises:
        ChirpTooLongError: If the body is longer than the limit.
    """
    limit = max_length if max_length is not None else settings.chirp_max_length
    if len(body) > limit:
        raise ChirpTooLongError(len(body), limit)
    return repo.create(clean_body(body))
