# src/chirpy/scripts/tokens.py
"""Mint a bearer token for an existing user, for local testing and tooling."""
from __future__ import annotations

import argparse
import sys

from chirpy.core.settings import settings
from chirpy.db.store import DocumentStore, PersistenceError
from chirpy.repositories import NotFoundError, UserRepository
from chirpy.services.tokens import TokenService


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Issue a session token for a user id")
    parser.add_argument("--user-id", type=int, required=True, help="Subject of the token")
    parser.add_argument(
        "--lifetime",
        type=int,
        default=None,
        help=f"Lifetime in seconds (default {settings.default_token_lifetime_seconds})",
    )
    parser.add_argument(
        "--path",
        default=None,
        help="Override the document path (defaults to DATABASE_PATH)",
    )
    args = parser.parse_args(argv)

    users = UserRepository(DocumentStore(args.path or settings.database_path))
    try:
        user = users.get_by_id(args.user_id)
    except (NotFoundError, PersistenceError) as exc:
        print(f"[tokens] ERROR: {exc}", file=sys.stderr)
        return 1

    print(TokenService().issue(user.id, args.lifetime))
    return 0


if __name__ == "__main__":
    sys.exit(main())
