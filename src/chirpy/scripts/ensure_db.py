"""Utility script to create or reset the configured JSON document."""
from __future__ import annotations

import argparse
import sys

from chirpy.core.settings import settings
from chirpy.db.store import DocumentStore, PersistenceError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Ensure or reset the Chirpy document")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Replace the document with an empty one after ensuring it exists.",
    )
    parser.add_argument(
        "--path",
        default=None,
        help="Override the document path (defaults to DATABASE_PATH)",
    )
    args = parser.parse_args(argv)

    store = DocumentStore(args.path or settings.database_path)
    try:
        store.ensure_exists()
        if args.reset:
            store.reset()
            print(f"[ensure_db] reset document {store.path}")
        else:
            print(f"[ensure_db] document ready at {store.path}")
    except PersistenceError as exc:
        print(f"[ensure_db] ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
