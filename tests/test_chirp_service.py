"""Tests for chirp body validation and cleaning."""

import pytest

from chirpy.repositories import ChirpRepository
from chirpy.services.chirp_service import ChirpTooLongError, clean_body, create_chirp
from chirpy.services.metrics import HitCounter


def test_clean_body_masks_profane_words_case_insensitively() -> None:
    assert clean_body("I had a Kerfuffle with sharbert") == "I had a **** with ****"


def test_clean_body_leaves_punctuated_words() -> None:
    assert clean_body("what a fornax!") == "what a fornax!"


def test_clean_body_with_custom_words() -> None:
    assert clean_body("darn it", profane_words=["DARN"]) == "**** it"


def test_create_chirp_persists_cleaned_body(chirp_repo: ChirpRepository) -> None:
    chirp = create_chirp(repo=chirp_repo, body="fornax is here")

    assert chirp.body == "**** is here"
    assert chirp_repo.get_by_id(chirp.id).body == "**** is here"


def test_create_chirp_accepts_body_at_limit(chirp_repo: ChirpRepository) -> None:
    chirp = create_chirp(repo=chirp_repo, body="x" * 140)

    assert len(chirp.body) == 140


def test_create_chirp_rejects_long_body(chirp_repo: ChirpRepository) -> None:
    with pytest.raises(ChirpTooLongError):
        create_chirp(repo=chirp_repo, body="x" * 141)
    assert chirp_repo.count() == 0


def test_hit_counter_increment_and_reset() -> None:
    counter = HitCounter()

    counter.increment()
    counter.increment()
    assert counter.value == 2

    counter.reset()
    assert counter.value == 0
